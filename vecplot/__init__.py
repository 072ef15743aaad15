from vecplot.api import plot, plot_config
from vecplot.config import PlotConfig, load_plot_config
from vecplot.coordinates import CoordinateTransform, PlotProps, flip_to_y, to_svg_coords
from vecplot.elements import Axis, AxisConfig, Grid, GridConfig
from vecplot.errors import PlotConfigError, PlotDataError
from vecplot.geometry import PlotGeometry, render_plot
from vecplot.props import assemble_plot_props
from vecplot.scales import AxisScale, build_scale, extract_range, pixels_to_value, scale_value
from vecplot.series import Area, Line, Point
from vecplot.ticks import FromCount, FromDelta, FromValues, IndexedTick, generate_ticks, index_ticks

__all__ = [
    "Area",
    "Axis",
    "AxisConfig",
    "AxisScale",
    "CoordinateTransform",
    "FromCount",
    "FromDelta",
    "FromValues",
    "Grid",
    "GridConfig",
    "IndexedTick",
    "Line",
    "PlotConfig",
    "PlotConfigError",
    "PlotDataError",
    "PlotGeometry",
    "PlotProps",
    "Point",
    "assemble_plot_props",
    "build_scale",
    "extract_range",
    "flip_to_y",
    "generate_ticks",
    "index_ticks",
    "load_plot_config",
    "pixels_to_value",
    "plot",
    "plot_config",
    "render_plot",
    "scale_value",
    "to_svg_coords",
]
