from __future__ import annotations

from vecplot.config import PlotConfig
from vecplot.elements import Renderable
from vecplot.geometry import PlotGeometry, render_plot


DEFAULT_ASPECT_RATIO = 16.0 / 9.0
DEFAULT_SIZE = (640, 360)


def plot(
    *elements: Renderable,
    width: int | None = None,
    height: int | None = None,
    padding: tuple[int, int] = (0, 0),
    aspect_ratio: float = DEFAULT_ASPECT_RATIO,
) -> PlotGeometry:
    return render_plot(plot_config(*elements, width=width, height=height, padding=padding, aspect_ratio=aspect_ratio))


def plot_config(
    *elements: Renderable,
    width: int | None = None,
    height: int | None = None,
    padding: tuple[int, int] = (0, 0),
    aspect_ratio: float = DEFAULT_ASPECT_RATIO,
) -> PlotConfig:
    if aspect_ratio <= 0:
        raise ValueError("aspect_ratio must be > 0")
    if width is None and height is None:
        width, height = DEFAULT_SIZE
    elif width is None and height is not None:
        if height <= 0:
            raise ValueError("height must be > 0")
        width = max(1, int(round(height * aspect_ratio)))
    elif width is not None and height is None:
        if width <= 0:
            raise ValueError("width must be > 0")
        height = max(1, int(round(width / aspect_ratio)))
    assert width is not None and height is not None
    return PlotConfig(width=width, height=height, padding=padding, elements=tuple(elements))
