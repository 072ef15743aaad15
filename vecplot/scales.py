from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
import logging
import math
from typing import Any, Iterable, Sequence

import numpy as np

from vecplot.errors import PlotConfigError, PlotDataError
from vecplot.series import Area, Line


LOGGER = logging.getLogger(__name__)

NICE_MULTIPLIERS: tuple[float, ...] = (1.0, 2.0, 5.0)
# Quotients are snapped to this many decimals before ceil/floor so that
# 0.3 / 0.1 counts as 3 steps rather than 2.999...
_QUOTIENT_DECIMALS = 9


@dataclass(frozen=True)
class AxisScale:
    range: float
    lowest: float
    highest: float
    length: float


def extract_range(elements: Iterable[Any], axis: str, extra_values: Iterable[float] = ()) -> tuple[float, float]:
    """Return the (min, max) of one coordinate across every line and area point.

    Axis and grid elements carry no points; values an axis declares relevant
    are passed separately as ``extra_values``.
    """
    if axis not in ("x", "y"):
        raise PlotConfigError(f"unknown axis: {axis!r}")
    coord = 0 if axis == "x" else 1
    chunks: list[np.ndarray] = []
    for element in elements:
        if not isinstance(element, (Line, Area)) or not element.points:
            continue
        chunks.append(np.fromiter((p[coord] for p in element.points), dtype=np.float64, count=len(element.points)))
    extra = np.fromiter(extra_values, dtype=np.float64)
    if extra.size:
        chunks.append(extra)
    if not chunks:
        raise PlotDataError(f"no data points to derive the {axis} range from")
    values = np.concatenate(chunks)
    return float(np.min(values)), float(np.max(values))


def pixels_to_value(pixel_length: float, value_range: float, pixels: float) -> float:
    return pixels * value_range / pixel_length


def build_scale(pixel_length: int, padding_px: tuple[int, int], values: Sequence[float]) -> AxisScale:
    """Fold pixel padding into the data extent of ``values``.

    When every value is equal the padding is converted against a unit range,
    so any nonzero padding still yields a positive range.
    """
    if len(values) == 0:
        raise PlotDataError("cannot build a scale from no values")
    arr = np.asarray(values, dtype=np.float64)
    lowest = float(np.min(arr))
    highest = float(np.max(arr))
    value_range = highest - lowest

    pad_low_px, pad_high_px = padding_px
    unit_range = value_range if value_range != 0 else 1.0
    pad_low = pixels_to_value(pixel_length, unit_range, pad_low_px)
    pad_high = pixels_to_value(pixel_length, unit_range, pad_high_px)

    scale = AxisScale(
        range=value_range + pad_low + pad_high,
        lowest=lowest - pad_low,
        highest=highest + pad_high,
        length=pixel_length,
    )
    if scale.range == 0:
        LOGGER.warning("degenerate scale: every value equals %s and padding is zero", lowest)
    return scale


def scale_value(scale: AxisScale, value: float) -> float:
    """Convert a data-space distance into pixels along ``scale``.

    A zero range yields inf/nan rather than raising.
    """
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.divide(np.float64(value) * scale.length, scale.range))


def ceil_to_nearest_multiple(step: float, value: float) -> float:
    return math.ceil(round(value / step, _QUOTIENT_DECIMALS)) * step


def steps_within(span: float, step: float) -> int:
    return math.floor(round(span / step, _QUOTIENT_DECIMALS))


def tick_precision(step: float) -> int:
    """Decimal places kept for ticks spaced ``step`` apart.

    At least as many places as the magnitude of a sub-unit step needs, widened
    to the places written in the step itself: 5 keeps none, 2.5 keeps one and
    0.25 keeps two.
    """
    base = abs(min(0, math.floor(math.log10(step))))
    return max(base, _decimals_from_step(step))


def nice_delta(value_range: float, approx_count: int) -> float:
    """Pick a 1, 2 or 5 x 10^k step giving close to ``approx_count`` ticks.

    Ties prefer the larger step.
    """
    if value_range <= 0 or not math.isfinite(value_range) or approx_count <= 0:
        LOGGER.warning("cannot derive a tick step for range=%s count=%s; using 1", value_range, approx_count)
        return 1.0
    exp = math.floor(math.log10(value_range / approx_count))
    candidates = [m * 10.0**e for e in (exp - 1, exp, exp + 1) for m in NICE_MULTIPLIERS]
    return min(candidates, key=lambda step: (abs(value_range / step - approx_count), -step))


def format_tick(value: float, *, step: float | None = None) -> str:
    if not math.isfinite(value):
        return str(value)
    if step is not None and math.isfinite(step) and step > 0 and abs(value) <= step * 1e-9:
        value = 0.0
    abs_v = abs(value)
    decimals = _decimals_from_step(step) if step is not None else 6
    if abs_v != 0 and (abs_v >= 1e6 or abs_v < 1e-6):
        return f"{value:.4e}"

    d = Decimal(str(value))
    quant = Decimal("1").scaleb(-decimals)
    try:
        q = d.quantize(quant)
    except InvalidOperation:
        q = d
    out = format(q, "f")
    # Integer labels keep their zeros (30, 40); fractional ones are trimmed.
    if "." in out:
        out = out.rstrip("0").rstrip(".")
    if out == "-0":
        out = "0"
    return out


def format_ticks_for_axis(ticks: Sequence[float]) -> list[str]:
    if len(ticks) == 0:
        return []
    diffs = np.diff(np.unique(np.asarray(ticks, dtype=np.float64)))
    positive = diffs[diffs > 0]
    if positive.size == 0:
        return [format_tick(float(v)) for v in ticks]
    # Explicit tick lists may be uneven; the finest gap decides the decimals.
    step = float(np.min(positive))
    return [format_tick(float(v), step=step) for v in ticks]


def _decimals_from_step(step: float | None) -> int:
    if step is None or step <= 0 or not math.isfinite(step):
        return 6
    d = Decimal(str(step)).normalize()
    exp = d.as_tuple().exponent
    decimals = max(0, -int(exp))
    return min(12, decimals)
