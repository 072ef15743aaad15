from __future__ import annotations

import math

from vecplot import Axis, AxisConfig, Grid, GridConfig, Line, plot
from vecplot.geometry import AxisGeometry, PathGeometry, path_data


def main() -> None:
    xs = [i * 0.25 for i in range(41)]
    wave = Line.from_xy([math.sin(x) * 3.0 for x in xs], x=xs, label="sin")
    y_axis = AxisConfig().with_tick_delta(1).with_hide_zero().with_label_filter(lambda index, value: index % 2 == 0)
    geometry = plot(
        Grid("x", GridConfig(hide_zero=True)),
        wave,
        Axis("x", AxisConfig().with_tick_count(5)),
        Axis("y", y_axis),
        width=640,
        padding=(16, 16),
    )
    for item in geometry.items:
        if isinstance(item, PathGeometry):
            print(item.label, path_data(item)[:72], "...")
        elif isinstance(item, AxisGeometry):
            print(item.orientation, [(t.index, t.label) for t in item.ticks])


if __name__ == "__main__":
    main()
