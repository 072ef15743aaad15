from __future__ import annotations

import math
from typing import Any

import numpy as np

from vecplot.errors import PlotDataError
from vecplot.series import Point


try:
    import pandas as pd
except Exception:  # pragma: no cover - optional dependency
    pd = None  # type: ignore[assignment]

try:
    import torch
except Exception:  # pragma: no cover - optional dependency
    torch = None  # type: ignore[assignment]


def normalize_points(y: Any = None, *, x: Any = None, data: Any = None) -> tuple[Point, ...]:
    """Pair up x/y input as data points, keeping only finite pairs.

    ``x`` defaults to index positions. With ``data`` (a DataFrame), ``x`` and
    ``y`` name columns; ``y`` may be omitted when one numeric column exists.
    """
    ys = _column(y, label="y", data=data)
    if ys is None:
        raise PlotDataError("y input is required")
    if not ys:
        raise PlotDataError("empty series")
    xs = _column(x, label="x", data=data) if x is not None else [float(i) for i in range(len(ys))]
    if xs is None or len(xs) != len(ys):
        raise PlotDataError(f"x and y length mismatch: {0 if xs is None else len(xs)} != {len(ys)}")

    points = tuple(Point(px, py) for px, py in zip(xs, ys, strict=True) if math.isfinite(px) and math.isfinite(py))
    if not points:
        raise PlotDataError("series contains no finite points")
    return points


def _column(value: Any, *, label: str, data: Any) -> list[float] | None:
    if data is not None:
        value = _frame_column(value, label=label, data=data)
        if value is None:
            return None
    elif value is None:
        return None

    if pd is not None and isinstance(value, pd.DataFrame):
        value = _frame_column(None, label=label, data=value)
    if pd is not None and isinstance(value, pd.Series):
        value = value.to_numpy()
    elif torch is not None and isinstance(value, torch.Tensor):
        value = value.detach().cpu().to(torch.float64).numpy()
    elif isinstance(value, (str, bytes, bytearray)) or not hasattr(value, "__len__"):
        raise PlotDataError(f"unsupported {label} input type: {type(value)!r}")

    arr = np.asarray(value)
    if arr.ndim != 1:
        raise PlotDataError(f"{label} must be 1-D")
    if arr.dtype.kind in {"i", "u", "f", "b"}:
        return arr.astype(np.float64).tolist()
    return [_to_float(raw, label=label, index=i) for i, raw in enumerate(arr.tolist())]


def _frame_column(key: Any, *, label: str, data: Any) -> Any:
    if pd is None:
        raise PlotDataError("pandas is required when using `data=`")
    if not isinstance(data, pd.DataFrame):
        raise PlotDataError("`data` must be a pandas DataFrame")
    if isinstance(key, str):
        if key not in data.columns:
            raise PlotDataError(f"column not found: {key}")
        return data[key]
    if key is not None:
        return key
    if label != "y":
        return None
    numeric = [c for c in data.columns if pd.api.types.is_numeric_dtype(data[c])]
    if len(numeric) != 1:
        raise PlotDataError("when y is omitted, data must have exactly one numeric column")
    return data[numeric[0]]


def _to_float(raw: Any, *, label: str, index: int) -> float:
    if raw is None:
        return math.nan
    try:
        return float(raw)
    except (TypeError, ValueError) as exc:
        raise PlotDataError(f"{label} contains non-numeric value at index {index}: {raw!r}") from exc
