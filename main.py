from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from vecplot.config import load_plot_config
from vecplot.geometry import AxisGeometry, GridGeometry, PathGeometry, geometry_to_dict, path_data, render_plot
from vecplot.scales import AxisScale
from vecplot.ticks import FromCount, FromDelta, FromValues, TickStrategy, generate_ticks, index_ticks


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="vecplot")
    parser.add_argument("--log-level", choices=["DEBUG", "INFO", "WARNING", "ERROR"], default="WARNING")
    sub = parser.add_subparsers(dest="command", required=True)

    render = sub.add_parser("render", help="Compute plot geometry from a TOML plot config.")
    render.add_argument("config", type=Path)
    render.add_argument("--json", action="store_true", help="Print the full geometry as JSON.")

    ticks = sub.add_parser("ticks", help="Print indexed ticks for a data interval.")
    ticks.add_argument("--lowest", type=float, required=True)
    ticks.add_argument("--highest", type=float, required=True)
    ticks.add_argument("--length", type=float, default=500.0, help="Pixel length of the axis.")
    strategy = ticks.add_mutually_exclusive_group()
    strategy.add_argument("--delta", type=float, default=None)
    strategy.add_argument("--count", type=int, default=None)
    strategy.add_argument("--values", type=float, nargs="+", default=None)
    ticks.add_argument("--hide-zero", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")

    if args.command == "render":
        geometry = render_plot(load_plot_config(args.config))
        if args.json:
            print(json.dumps(geometry_to_dict(geometry), indent=2, sort_keys=True))
            return
        print(f"plot {geometry.width}x{geometry.height}")
        for item in geometry.items:
            if isinstance(item, PathGeometry):
                print(f"{item.kind} {item.label or ''}: {path_data(item)}")
            elif isinstance(item, AxisGeometry):
                labels = " ".join(f"{t.index}:{t.label}" for t in item.ticks if t.label is not None)
                print(f"axis {item.orientation}: {labels}")
            elif isinstance(item, GridGeometry):
                print(f"grid {item.orientation}: {len(item.lines)} lines")
        return

    if args.command == "ticks":
        if args.highest < args.lowest:
            raise ValueError("--highest must be >= --lowest")
        scale = AxisScale(
            range=args.highest - args.lowest,
            lowest=args.lowest,
            highest=args.highest,
            length=args.length,
        )
        chosen: TickStrategy
        if args.delta is not None:
            chosen = FromDelta(args.delta)
        elif args.values is not None:
            chosen = FromValues(tuple(args.values))
        else:
            chosen = FromCount(args.count if args.count is not None else 10)
        for tick in index_ticks(generate_ticks(chosen, scale), hide_zero=args.hide_zero):
            print(f"{tick.index}\t{tick.value:g}")
        return

    raise RuntimeError(f"unsupported command: {args.command}")


if __name__ == "__main__":
    main()
