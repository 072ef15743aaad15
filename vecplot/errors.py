from __future__ import annotations


class PlotDataError(ValueError):
    """Raised when series input cannot be turned into plottable points."""


class PlotConfigError(ValueError):
    """Raised when a plot, axis or grid configuration record is invalid."""
