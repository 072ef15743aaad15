from __future__ import annotations

from functools import reduce
import logging
from typing import Iterable

from vecplot.config import PlotConfig
from vecplot.coordinates import PlotProps, build_plot_props
from vecplot.elements import Axis, AxisConfig, Renderable
from vecplot.scales import build_scale, extract_range
from vecplot.ticks import generate_ticks


LOGGER = logging.getLogger(__name__)


def resolve_axis_configs(elements: Iterable[Renderable]) -> dict[str, AxisConfig]:
    """Effective config per orientation: the last axis seen wins."""

    def keep_last(resolved: dict[str, AxisConfig], element: Renderable) -> dict[str, AxisConfig]:
        if isinstance(element, Axis):
            return {**resolved, element.orientation: element.config}
        return resolved

    return reduce(keep_last, elements, {"x": AxisConfig(), "y": AxisConfig()})


def declared_values(elements: Iterable[Renderable], orientation: str) -> tuple[float, ...]:
    out: list[float] = []
    for element in elements:
        if isinstance(element, Axis) and element.orientation == orientation:
            out.extend(element.config.include)
    return tuple(out)


def assemble_plot_props(config: PlotConfig) -> PlotProps:
    """Build the X-oriented props for one render pass.

    Both tick lists are computed eagerly since grids read the opposite
    axis' ticks; call ``flip_to_y()`` for Y-oriented renderables.
    """
    elements = config.elements
    axis_configs = resolve_axis_configs(elements)

    x_min, x_max = extract_range(elements, "x", declared_values(elements, "x"))
    y_min, y_max = extract_range(elements, "y", declared_values(elements, "y"))
    x_scale = build_scale(config.width, (0, 0), [x_min, x_max])
    y_scale = build_scale(config.height, config.padding, [y_min, y_max])
    LOGGER.debug("x scale %s, y scale %s", x_scale, y_scale)

    x_ticks = generate_ticks(axis_configs["x"].ticks, x_scale)
    y_ticks = generate_ticks(axis_configs["y"].ticks, y_scale)
    LOGGER.debug(
        "ticks: x=%s (%d) y=%s (%d)",
        axis_configs["x"].ticks,
        len(x_ticks),
        axis_configs["y"].ticks,
        len(y_ticks),
    )
    return build_plot_props(x_scale, y_scale, x_ticks, y_ticks)
