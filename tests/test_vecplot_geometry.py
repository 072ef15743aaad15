from __future__ import annotations

import json
import unittest

from vecplot import PlotConfigError, plot, plot_config
from vecplot.config import PlotConfig
from vecplot.elements import Axis, AxisConfig, Grid, GridConfig
from vecplot.geometry import (
    AxisGeometry,
    GridGeometry,
    PathCommand,
    PathGeometry,
    geometry_to_dict,
    path_data,
    render_element,
    render_plot,
)
from vecplot.props import assemble_plot_props, resolve_axis_configs
from vecplot.scales import AxisScale
from vecplot.series import Area, Line, Point
from vecplot.ticks import FromCount, FromDelta, FromValues


SIGNAL = Line(points=[(-2, -5), (10, 5)], label="signal")


class PlotPropsAssemblerTests(unittest.TestCase):
    def test_scales_cover_series_and_y_padding(self) -> None:
        config = PlotConfig(width=120, height=100, padding=(10, 10), elements=(SIGNAL,))
        props = assemble_plot_props(config)
        self.assertEqual(props.scale, AxisScale(range=12.0, lowest=-2.0, highest=10.0, length=120))
        self.assertEqual(props.opposite_scale, AxisScale(range=12.0, lowest=-6.0, highest=6.0, length=100))

    def test_missing_axes_fall_back_to_ten_automatic_ticks(self) -> None:
        configs = resolve_axis_configs([SIGNAL, Grid("x")])
        self.assertEqual(configs["x"].ticks, FromCount(10))
        self.assertEqual(configs["y"].ticks, FromCount(10))
        props = assemble_plot_props(PlotConfig(width=120, height=100, elements=(SIGNAL,)))
        self.assertEqual(props.opposite_ticks, tuple(float(v) for v in range(-5, 6)))

    def test_last_axis_per_orientation_wins(self) -> None:
        elements = (
            SIGNAL,
            Axis("x", AxisConfig(ticks=FromDelta(4))),
            Axis("y", AxisConfig(ticks=FromDelta(5))),
            Axis("x", AxisConfig().with_tick_values([1, 2])),
        )
        props = assemble_plot_props(PlotConfig(width=120, height=100, elements=elements))
        self.assertEqual(props.ticks, (1.0, 2.0))
        self.assertEqual(props.opposite_ticks, (-5.0, 0.0, 5.0))

    def test_axis_include_values_widen_the_scale(self) -> None:
        elements = (SIGNAL, Axis("y", AxisConfig(include=(20.0,))))
        props = assemble_plot_props(PlotConfig(width=120, height=100, elements=elements))
        self.assertEqual(props.opposite_scale.highest, 20.0)
        self.assertEqual(props.scale.highest, 10.0)

    def test_axis_only_plot_has_no_range(self) -> None:
        from vecplot import PlotDataError

        with self.assertRaises(PlotDataError):
            assemble_plot_props(PlotConfig(width=10, height=10, elements=(Axis("x"),)))


class SeriesGeometryTests(unittest.TestCase):
    def test_line_path(self) -> None:
        line = Line(points=[(0, 0), (10, 10)])
        geometry = render_plot(PlotConfig(width=100, height=50, elements=(line,)))
        (path,) = geometry.items
        self.assertIsInstance(path, PathGeometry)
        self.assertEqual(
            path.commands,
            (PathCommand("M", Point(0.0, 50.0)), PathCommand("L", Point(100.0, 0.0))),
        )
        self.assertEqual(path_data(path), "M0 50 L100 0")

    def test_area_closes_on_clamped_baseline(self) -> None:
        area = Area(points=[(0, 2), (10, 8)], label="band")
        geometry = render_plot(PlotConfig(width=100, height=50, elements=(area,)))
        (path,) = geometry.items
        self.assertEqual(path.kind, "area")
        self.assertEqual(path.label, "band")
        self.assertEqual([c.op for c in path.commands], ["M", "L", "L", "L", "Z"])
        self.assertEqual(path_data(path), "M0 50 L0 50 L100 0 L100 50 Z")

    def test_area_baseline_sits_at_zero_when_in_range(self) -> None:
        area = Area(points=[(0, -4), (10, 6)])
        geometry = render_plot(PlotConfig(width=100, height=100, elements=(area,)))
        (path,) = geometry.items
        self.assertEqual(path.commands[0].point, Point(0.0, 60.0))
        self.assertEqual(path.commands[-2].point, Point(100.0, 60.0))


class AxisGeometryTests(unittest.TestCase):
    def _render(self, *elements) -> tuple:
        config = PlotConfig(width=120, height=100, elements=(SIGNAL,) + elements)
        return render_plot(config).items[1:]

    def test_x_axis_ticks_and_line(self) -> None:
        (axis,) = self._render(Axis("x", AxisConfig(ticks=FromDelta(4))))
        self.assertIsInstance(axis, AxisGeometry)
        self.assertEqual(axis.start, Point(0.0, 50.0))
        self.assertEqual(axis.end, Point(120.0, 50.0))
        self.assertEqual([(t.index, t.value, t.label) for t in axis.ticks], [(0, 0.0, "0"), (1, 4.0, "4"), (2, 8.0, "8")])
        self.assertEqual([t.position for t in axis.ticks], [(20.0, 50.0), (60.0, 50.0), (100.0, 50.0)])

    def test_y_axis_renders_through_the_flipped_props(self) -> None:
        (axis,) = self._render(Axis("y"))
        self.assertEqual(axis.orientation, "y")
        self.assertEqual(axis.start, Point(20.0, 100.0))
        self.assertEqual(axis.end, Point(20.0, 0.0))
        self.assertEqual([t.index for t in axis.ticks], list(range(-5, 6)))
        self.assertEqual(axis.ticks[-1].position, Point(20.0, 0.0))
        self.assertEqual(axis.ticks[0].position, Point(20.0, 100.0))
        self.assertTrue(all(t.position.x == 20.0 for t in axis.ticks))

    def test_hide_zero_and_label_callbacks(self) -> None:
        config = (
            AxisConfig(ticks=FromValues([-4, -2, 0, 2, 4]))
            .with_hide_zero()
            .with_label_formatter(lambda index, value: f"{index}@{value:g}")
            .with_label_filter(lambda index, value: index % 2 == 0)
        )
        (axis,) = self._render(Axis("x", config))
        self.assertEqual([t.index for t in axis.ticks], [-2, -1, 1, 2])
        self.assertEqual([t.label for t in axis.ticks], ["-2@-4", None, None, "2@4"])

    def test_grid_lines_span_the_opposite_scale(self) -> None:
        (grid,) = self._render(Axis("y", AxisConfig(ticks=FromDelta(5))), Grid("y", GridConfig(hide_zero=True)))[1:]
        self.assertIsInstance(grid, GridGeometry)
        self.assertEqual([line.value for line in grid.lines], [-5.0, 5.0])
        top = grid.lines[-1]
        self.assertEqual((top.index, top.start, top.end), (1, Point(0.0, 0.0), Point(120.0, 0.0)))

    def test_x_grid_uses_x_ticks(self) -> None:
        (grid,) = self._render(Axis("x", AxisConfig(ticks=FromDelta(4))), Grid("x"))[1:]
        self.assertEqual([line.start for line in grid.lines], [(20.0, 100.0), (60.0, 100.0), (100.0, 100.0)])
        self.assertEqual([line.end for line in grid.lines], [(20.0, 0.0), (60.0, 0.0), (100.0, 0.0)])


class RenderPassTests(unittest.TestCase):
    def test_unknown_renderable_is_rejected(self) -> None:
        props = assemble_plot_props(PlotConfig(width=10, height=10, elements=(SIGNAL,)))
        with self.assertRaises(PlotConfigError):
            render_element(object(), props)  # type: ignore[arg-type]

    def test_render_is_deterministic(self) -> None:
        config = PlotConfig(
            width=333,
            height=217,
            padding=(7, 3),
            elements=(SIGNAL, Area(points=[(0.3, 1.7), (4.1, -2.2)]), Axis("x"), Axis("y"), Grid("x"), Grid("y")),
        )
        self.assertEqual(render_plot(config), render_plot(config))

    def test_geometry_to_dict_is_json_serialisable(self) -> None:
        geometry = render_plot(PlotConfig(width=120, height=100, elements=(SIGNAL, Axis("x"), Grid("y"))))
        payload = json.loads(json.dumps(geometry_to_dict(geometry)))
        self.assertEqual([item["kind"] for item in payload["items"]], ["line", "axis", "grid"])
        self.assertEqual(payload["x_scale"]["range"], 12.0)
        self.assertEqual(payload["items"][0]["d"], "M0 100 L120 0")

    def test_plot_derives_missing_dimension_from_aspect_ratio(self) -> None:
        self.assertEqual(plot_config(SIGNAL, width=1000).height, 562)
        self.assertEqual(plot_config(SIGNAL, height=90).width, 160)
        geometry = plot(SIGNAL, Axis("x"))
        self.assertEqual((geometry.width, geometry.height), (640, 360))


if __name__ == "__main__":
    unittest.main()
