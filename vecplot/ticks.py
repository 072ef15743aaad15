from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import NamedTuple, Sequence, Union

import numpy as np

from vecplot.errors import PlotConfigError
from vecplot.scales import AxisScale, ceil_to_nearest_multiple, nice_delta, steps_within, tick_precision


LOGGER = logging.getLogger(__name__)

DEFAULT_TICK_COUNT = 10


@dataclass(frozen=True)
class FromValues:
    values: tuple[float, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", tuple(float(v) for v in self.values))


@dataclass(frozen=True)
class FromDelta:
    delta: float

    def __post_init__(self) -> None:
        if not self.delta > 0:
            raise PlotConfigError(f"tick delta must be > 0, got {self.delta!r}")


@dataclass(frozen=True)
class FromCount:
    count: int = DEFAULT_TICK_COUNT

    def __post_init__(self) -> None:
        if self.count <= 0:
            raise PlotConfigError(f"tick count must be > 0, got {self.count!r}")


TickStrategy = Union[FromValues, FromDelta, FromCount]


class IndexedTick(NamedTuple):
    index: int
    value: float


def generate_ticks(strategy: TickStrategy, scale: AxisScale) -> tuple[float, ...]:
    if isinstance(strategy, FromValues):
        return strategy.values
    if isinstance(strategy, FromDelta):
        return ticks_from_delta(strategy.delta, scale)
    if isinstance(strategy, FromCount):
        delta = nice_delta(scale.range, strategy.count)
        LOGGER.debug("auto ticks: range=%s count=%s -> delta=%s", scale.range, strategy.count, delta)
        return ticks_from_delta(delta, scale)
    raise PlotConfigError(f"unsupported tick strategy: {strategy!r}")


def ticks_from_delta(delta: float, scale: AxisScale) -> tuple[float, ...]:
    """Multiples of ``delta`` from the first one at or above ``scale.lowest``.

    Values are rounded to ``tick_precision(delta)`` places so repeated
    additions never leak float drift into the output.
    """
    first = ceil_to_nearest_multiple(delta, scale.lowest)
    # Equivalent to range - (|lowest| - |first|) whenever lowest <= 0.
    count = steps_within(scale.range - (first - scale.lowest), delta)
    if count < 0:
        return ()
    values = first + np.arange(count + 1, dtype=np.float64) * delta
    # Adding 0.0 turns -0.0 into 0.0.
    rounded = np.round(values, tick_precision(delta)) + 0.0
    return tuple(float(v) for v in rounded)


def index_ticks(ticks: Sequence[float], *, hide_zero: bool = False) -> tuple[IndexedTick, ...]:
    """Label each tick with its signed distance, in ticks, from zero.

    ``ticks`` must be in ascending order. The first positive tick is always 1
    and the first negative tick -1, whether or not zero itself is present.
    """
    values = [float(t) for t in ticks if not (hide_zero and t == 0)]
    neg_count = sum(1 for t in values if t < 0)
    has_zero = any(t == 0 for t in values)
    out: list[IndexedTick] = []
    for i, t in enumerate(values):
        if t == 0:
            index = 0
        elif t > 0 and not has_zero:
            index = i - neg_count + 1
        else:
            index = i - neg_count
        out.append(IndexedTick(index=index, value=t))
    return tuple(out)
