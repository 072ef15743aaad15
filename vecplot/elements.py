from __future__ import annotations

from dataclasses import dataclass, field, replace
from functools import reduce
from typing import Callable, Iterable, Literal, Union

from vecplot.errors import PlotConfigError
from vecplot.series import Area, Line
from vecplot.ticks import FromCount, FromDelta, FromValues, TickStrategy


Orientation = Literal["x", "y"]
ORIENTATIONS: tuple[str, ...] = ("x", "y")

LabelFormatter = Callable[[int, float], str]
LabelFilter = Callable[[int, float], bool]


@dataclass(frozen=True)
class HideZero:
    hide: bool = True


@dataclass(frozen=True)
class FormatLabels:
    formatter: LabelFormatter


@dataclass(frozen=True)
class FilterLabels:
    predicate: LabelFilter


@dataclass(frozen=True)
class IncludeValues:
    values: tuple[float, ...]


AxisOption = Union[FromValues, FromDelta, FromCount, HideZero, FormatLabels, FilterLabels, IncludeValues]


@dataclass(frozen=True)
class AxisConfig:
    """Tick and label settings for one axis.

    ``ticks`` defaults to about ten automatic ticks. ``hide_zero`` drops the
    zero tick before indexing, ``label_formatter``/``label_filter`` receive
    ``(index, value)``, and ``include`` lists values the scale must span.
    """

    ticks: TickStrategy = field(default_factory=FromCount)
    hide_zero: bool = False
    label_formatter: LabelFormatter | None = None
    label_filter: LabelFilter | None = None
    include: tuple[float, ...] = ()

    @classmethod
    def from_options(cls, *options: AxisOption) -> "AxisConfig":
        return reduce(_apply_option, options, cls())

    def with_tick_values(self, values: Iterable[float]) -> "AxisConfig":
        return replace(self, ticks=FromValues(tuple(values)))

    def with_tick_delta(self, delta: float) -> "AxisConfig":
        return replace(self, ticks=FromDelta(delta))

    def with_tick_count(self, count: int) -> "AxisConfig":
        return replace(self, ticks=FromCount(count))

    def with_hide_zero(self, hide: bool = True) -> "AxisConfig":
        return replace(self, hide_zero=hide)

    def with_label_formatter(self, formatter: LabelFormatter | None) -> "AxisConfig":
        return replace(self, label_formatter=formatter)

    def with_label_filter(self, predicate: LabelFilter | None) -> "AxisConfig":
        return replace(self, label_filter=predicate)

    def with_include(self, values: Iterable[float]) -> "AxisConfig":
        return replace(self, include=tuple(float(v) for v in values))


def _apply_option(config: AxisConfig, option: AxisOption) -> AxisConfig:
    if isinstance(option, (FromValues, FromDelta, FromCount)):
        return replace(config, ticks=option)
    if isinstance(option, HideZero):
        return replace(config, hide_zero=option.hide)
    if isinstance(option, FormatLabels):
        return replace(config, label_formatter=option.formatter)
    if isinstance(option, FilterLabels):
        return replace(config, label_filter=option.predicate)
    if isinstance(option, IncludeValues):
        return replace(config, include=config.include + tuple(float(v) for v in option.values))
    raise PlotConfigError(f"unsupported axis option: {option!r}")


@dataclass(frozen=True)
class GridConfig:
    hide_zero: bool = False

    def with_hide_zero(self, hide: bool = True) -> "GridConfig":
        return replace(self, hide_zero=hide)


def _check_orientation(orientation: str) -> None:
    if orientation not in ORIENTATIONS:
        raise PlotConfigError(f"orientation must be one of {ORIENTATIONS}, got {orientation!r}")


@dataclass(frozen=True)
class Axis:
    orientation: Orientation
    config: AxisConfig = field(default_factory=AxisConfig)

    def __post_init__(self) -> None:
        _check_orientation(self.orientation)


@dataclass(frozen=True)
class Grid:
    orientation: Orientation
    config: GridConfig = field(default_factory=GridConfig)

    def __post_init__(self) -> None:
        _check_orientation(self.orientation)


Renderable = Union[Axis, Grid, Line, Area]
