from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, NamedTuple


class Point(NamedTuple):
    x: float
    y: float


def _coerce_points(points: Iterable[Any]) -> tuple[Point, ...]:
    return tuple(Point(float(p[0]), float(p[1])) for p in points)


@dataclass(frozen=True)
class Line:
    points: tuple[Point, ...]
    label: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "points", _coerce_points(self.points))

    @classmethod
    def from_xy(cls, y: Any = None, *, x: Any = None, data: Any = None, label: str | None = None) -> "Line":
        from vecplot.adapters import normalize_points

        return cls(points=normalize_points(y=y, x=x, data=data), label=label)


@dataclass(frozen=True)
class Area:
    points: tuple[Point, ...]
    label: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "points", _coerce_points(self.points))

    @classmethod
    def from_xy(cls, y: Any = None, *, x: Any = None, data: Any = None, label: str | None = None) -> "Area":
        from vecplot.adapters import normalize_points

        return cls(points=normalize_points(y=y, x=x, data=data), label=label)
