from __future__ import annotations

from dataclasses import dataclass, replace
import logging
from pathlib import Path
import tomllib
from typing import Any, Mapping

from vecplot.elements import Axis, AxisConfig, Grid, GridConfig, Renderable
from vecplot.errors import PlotConfigError
from vecplot.series import Area, Line


LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlotConfig:
    """Size, Y padding and the ordered renderables of one plot.

    ``padding`` is ``(low, high)`` in pixels and only widens the Y scale.
    """

    width: int
    height: int
    padding: tuple[int, int] = (0, 0)
    elements: tuple[Renderable, ...] = ()

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise PlotConfigError("width and height must be > 0")
        if len(self.padding) != 2:
            raise PlotConfigError("padding must be a (low, high) pair")
        if self.padding[0] < 0 or self.padding[1] < 0:
            raise PlotConfigError("padding must be >= 0")
        object.__setattr__(self, "padding", (int(self.padding[0]), int(self.padding[1])))
        object.__setattr__(self, "elements", tuple(self.elements))

    def add(self, *elements: Renderable) -> "PlotConfig":
        return replace(self, elements=self.elements + tuple(elements))

    def with_padding(self, low: int, high: int) -> "PlotConfig":
        return replace(self, padding=(low, high))

    def with_size(self, width: int, height: int) -> "PlotConfig":
        return replace(self, width=width, height=height)


def load_plot_config(path: str | Path) -> PlotConfig:
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"plot config not found: {config_path}")
    with config_path.open("rb") as f:
        raw = tomllib.load(f)
    return plot_config_from_mapping(raw)


def plot_config_from_mapping(raw: Mapping[str, Any]) -> PlotConfig:
    """Build a config from a ``[plot]`` table and an ordered ``elements`` array.

    Each element names its ``type`` (line, area, axis or grid); keys inside an
    axis table are folded in order, so a later tick key wins.
    """
    plot = raw.get("plot")
    if not isinstance(plot, Mapping):
        raise PlotConfigError("config missing required table: plot")
    try:
        width = int(plot["width"])
        height = int(plot["height"])
    except KeyError as exc:
        raise PlotConfigError(f"plot missing required field: {exc.args[0]}") from exc
    padding = _coerce_pair(plot.get("padding", (0, 0)), "plot.padding")

    entries = raw.get("elements", [])
    if not isinstance(entries, list):
        raise PlotConfigError("elements must be an array of tables")
    elements = tuple(_element_from_mapping(entry, i) for i, entry in enumerate(entries))
    LOGGER.debug("loaded plot config %sx%s with %d elements", width, height, len(elements))
    return PlotConfig(width=width, height=height, padding=padding, elements=elements)


def _element_from_mapping(entry: Any, position: int) -> Renderable:
    if not isinstance(entry, Mapping):
        raise PlotConfigError(f"elements[{position}] must be a table")
    kind = entry.get("type")
    if kind in ("line", "area"):
        cls = Line if kind == "line" else Area
        label = _coerce_optional_str(entry.get("label"), f"elements[{position}].label")
        if "points" in entry:
            return cls(points=tuple(_coerce_pair(p, f"elements[{position}].points") for p in entry["points"]), label=label)
        if "y" not in entry:
            raise PlotConfigError(f"elements[{position}] needs `points` or `y`")
        return cls.from_xy(entry["y"], x=entry.get("x"), label=label)
    if kind == "axis":
        return Axis(orientation=_orientation(entry, position), config=_axis_config(entry, position))
    if kind == "grid":
        config = GridConfig(hide_zero=bool(entry.get("hide_zero", False)))
        return Grid(orientation=_orientation(entry, position), config=config)
    raise PlotConfigError(f"elements[{position}] has unknown type: {kind!r}")


def _axis_config(entry: Mapping[str, Any], position: int) -> AxisConfig:
    config = AxisConfig()
    for key, value in entry.items():
        if key == "tick_values":
            config = config.with_tick_values(_coerce_float_list(value, f"elements[{position}].tick_values"))
        elif key == "tick_delta":
            config = config.with_tick_delta(float(value))
        elif key == "tick_count":
            config = config.with_tick_count(int(value))
        elif key == "hide_zero":
            config = config.with_hide_zero(bool(value))
        elif key == "include":
            config = config.with_include(_coerce_float_list(value, f"elements[{position}].include"))
        elif key not in ("type", "orientation"):
            raise PlotConfigError(f"elements[{position}] has unknown axis key: {key}")
    return config


def _orientation(entry: Mapping[str, Any], position: int) -> str:
    try:
        return str(entry["orientation"])
    except KeyError as exc:
        raise PlotConfigError(f"elements[{position}] missing required field: orientation") from exc


def _coerce_pair(value: Any, field_name: str) -> tuple[Any, Any]:
    if not isinstance(value, (list, tuple)) or len(value) != 2:
        raise PlotConfigError(f"{field_name} must be a 2-item array")
    return (value[0], value[1])


def _coerce_float_list(value: Any, field_name: str) -> list[float]:
    if not isinstance(value, list):
        raise PlotConfigError(f"{field_name} must be an array of numbers")
    try:
        return [float(v) for v in value]
    except (TypeError, ValueError) as exc:
        raise PlotConfigError(f"{field_name} must be an array of numbers") from exc


def _coerce_optional_str(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise PlotConfigError(f"{field_name} must be a string")
    return value
