from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Literal, Union

from vecplot.config import PlotConfig
from vecplot.coordinates import PlotProps
from vecplot.elements import Axis, Grid, Renderable
from vecplot.errors import PlotConfigError
from vecplot.props import assemble_plot_props
from vecplot.scales import AxisScale, format_ticks_for_axis
from vecplot.series import Area, Line, Point
from vecplot.ticks import index_ticks


@dataclass(frozen=True)
class PathCommand:
    op: Literal["M", "L", "Z"]
    point: Point | None = None


@dataclass(frozen=True)
class PathGeometry:
    kind: Literal["line", "area"]
    commands: tuple[PathCommand, ...]
    label: str | None = None


@dataclass(frozen=True)
class TickPlacement:
    index: int
    value: float
    position: Point
    label: str | None


@dataclass(frozen=True)
class AxisGeometry:
    orientation: str
    start: Point
    end: Point
    ticks: tuple[TickPlacement, ...]


@dataclass(frozen=True)
class GridLine:
    index: int
    value: float
    start: Point
    end: Point


@dataclass(frozen=True)
class GridGeometry:
    orientation: str
    lines: tuple[GridLine, ...]


Geometry = Union[PathGeometry, AxisGeometry, GridGeometry]


@dataclass(frozen=True)
class PlotGeometry:
    width: int
    height: int
    props: PlotProps
    items: tuple[Geometry, ...]


def render_plot(config: PlotConfig) -> PlotGeometry:
    props = assemble_plot_props(config)
    items = tuple(render_element(element, props) for element in config.elements)
    return PlotGeometry(width=config.width, height=config.height, props=props, items=items)


def render_element(element: Renderable, props: PlotProps) -> Geometry:
    """Dispatch one renderable; ``props`` must be the X-oriented bundle."""
    if isinstance(element, Line):
        return render_line(element, props)
    if isinstance(element, Area):
        return render_area(element, props)
    if isinstance(element, Axis):
        return render_axis(element, props)
    if isinstance(element, Grid):
        return render_grid(element, props)
    raise PlotConfigError(f"unsupported renderable: {type(element).__name__}")


def render_line(line: Line, props: PlotProps) -> PathGeometry:
    transform = props.to_svg_coords
    commands = tuple(
        PathCommand(op="M" if i == 0 else "L", point=transform(p)) for i, p in enumerate(line.points)
    )
    return PathGeometry(kind="line", commands=commands, label=line.label)


def render_area(area: Area, props: PlotProps) -> PathGeometry:
    if not area.points:
        return PathGeometry(kind="area", commands=(), label=area.label)
    transform = props.to_svg_coords
    baseline = _clamp(0.0, props.opposite_scale)
    first, last = area.points[0], area.points[-1]
    commands = [PathCommand(op="M", point=transform((first.x, baseline)))]
    commands.extend(PathCommand(op="L", point=transform(p)) for p in area.points)
    commands.append(PathCommand(op="L", point=transform((last.x, baseline))))
    commands.append(PathCommand(op="Z"))
    return PathGeometry(kind="area", commands=tuple(commands), label=area.label)


def render_axis(axis: Axis, props: PlotProps) -> AxisGeometry:
    view = _oriented(props, axis.orientation)
    config = axis.config
    transform = view.to_svg_coords
    cross = _clamp(0.0, view.opposite_scale)

    indexed = index_ticks(view.ticks, hide_zero=config.hide_zero)
    default_labels = format_ticks_for_axis([t.value for t in indexed])
    placements: list[TickPlacement] = []
    for tick, default_label in zip(indexed, default_labels, strict=True):
        label: str | None
        if config.label_filter is not None and not config.label_filter(tick.index, tick.value):
            label = None
        elif config.label_formatter is not None:
            label = config.label_formatter(tick.index, tick.value)
        else:
            label = default_label
        placements.append(
            TickPlacement(index=tick.index, value=tick.value, position=transform((tick.value, cross)), label=label)
        )
    return AxisGeometry(
        orientation=axis.orientation,
        start=transform((view.scale.lowest, cross)),
        end=transform((view.scale.highest, cross)),
        ticks=tuple(placements),
    )


def render_grid(grid: Grid, props: PlotProps) -> GridGeometry:
    view = _oriented(props, grid.orientation)
    transform = view.to_svg_coords
    low, high = view.opposite_scale.lowest, view.opposite_scale.highest
    lines = tuple(
        GridLine(index=tick.index, value=tick.value, start=transform((tick.value, low)), end=transform((tick.value, high)))
        for tick in index_ticks(view.ticks, hide_zero=grid.config.hide_zero)
    )
    return GridGeometry(orientation=grid.orientation, lines=lines)


def path_data(path: PathGeometry) -> str:
    """SVG ``d`` attribute text for a path, e.g. ``M0 10 L5 2 Z``."""
    parts: list[str] = []
    for command in path.commands:
        if command.point is None:
            parts.append(command.op)
        else:
            parts.append(f"{command.op}{command.point.x:g} {command.point.y:g}")
    return " ".join(parts)


def geometry_to_dict(geometry: PlotGeometry) -> dict[str, Any]:
    props = geometry.props
    return {
        "width": geometry.width,
        "height": geometry.height,
        "x_scale": asdict(props.scale),
        "y_scale": asdict(props.opposite_scale),
        "x_ticks": list(props.ticks),
        "y_ticks": list(props.opposite_ticks),
        "items": [_item_to_dict(item) for item in geometry.items],
    }


def _item_to_dict(item: Geometry) -> dict[str, Any]:
    if isinstance(item, PathGeometry):
        return {"kind": item.kind, "label": item.label, "d": path_data(item)}
    if isinstance(item, AxisGeometry):
        return {"kind": "axis", **asdict(item)}
    if isinstance(item, GridGeometry):
        return {"kind": "grid", **asdict(item)}
    raise PlotConfigError(f"unsupported geometry: {type(item).__name__}")


def _oriented(props: PlotProps, orientation: str) -> PlotProps:
    if orientation == "x":
        return props
    if orientation == "y":
        return props.flip_to_y()
    raise PlotConfigError(f"unknown orientation: {orientation!r}")


def _clamp(value: float, scale: AxisScale) -> float:
    return min(max(value, scale.lowest), scale.highest)
