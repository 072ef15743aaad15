from __future__ import annotations

from dataclasses import dataclass

from vecplot.scales import AxisScale, scale_value
from vecplot.series import Point


@dataclass(frozen=True)
class CoordinateTransform:
    """Maps a data point to an SVG pixel point (y grows downward).

    A transposed transform reads its input as ``(y, x)``; the two axes still
    share one formula, the point is just swapped before it is applied.
    """

    x_scale: AxisScale
    y_scale: AxisScale
    transposed: bool = False

    def __call__(self, point: tuple[float, float]) -> Point:
        x, y = point
        if self.transposed:
            x, y = y, x
        return Point(
            scale_value(self.x_scale, x + abs(self.x_scale.lowest)),
            scale_value(self.y_scale, self.y_scale.highest - y),
        )

    def transpose(self) -> "CoordinateTransform":
        return CoordinateTransform(x_scale=self.x_scale, y_scale=self.y_scale, transposed=not self.transposed)


def to_svg_coords(x_scale: AxisScale, y_scale: AxisScale) -> CoordinateTransform:
    return CoordinateTransform(x_scale=x_scale, y_scale=y_scale)


@dataclass(frozen=True)
class PlotProps:
    """Per-render bundle seen by every renderable.

    ``scale``/``ticks``/``to_svg_coords`` belong to the axis being rendered,
    the ``opposite_*`` fields to the perpendicular one.
    """

    scale: AxisScale
    opposite_scale: AxisScale
    to_svg_coords: CoordinateTransform
    opposite_to_svg_coords: CoordinateTransform
    ticks: tuple[float, ...]
    opposite_ticks: tuple[float, ...]

    def flip_to_y(self) -> "PlotProps":
        return flip_to_y(self)


def flip_to_y(props: PlotProps) -> PlotProps:
    return PlotProps(
        scale=props.opposite_scale,
        opposite_scale=props.scale,
        to_svg_coords=props.opposite_to_svg_coords,
        opposite_to_svg_coords=props.to_svg_coords,
        ticks=props.opposite_ticks,
        opposite_ticks=props.ticks,
    )


def build_plot_props(
    x_scale: AxisScale,
    y_scale: AxisScale,
    x_ticks: tuple[float, ...],
    y_ticks: tuple[float, ...],
) -> PlotProps:
    transform = to_svg_coords(x_scale, y_scale)
    return PlotProps(
        scale=x_scale,
        opposite_scale=y_scale,
        to_svg_coords=transform,
        opposite_to_svg_coords=transform.transpose(),
        ticks=x_ticks,
        opposite_ticks=y_ticks,
    )
