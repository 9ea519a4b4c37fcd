"""Chart error types.

Rendering itself never raises for degenerate data (it draws an empty chart);
these exceptions cover bad input at the data model boundary.
"""

from __future__ import annotations

__all__ = ["ChartError", "InvalidSeriesError"]


class ChartError(Exception):
    """Base class for chartkit errors."""


class InvalidSeriesError(ChartError, ValueError):
    """Raised when series data cannot be plotted (non-finite values, bad color)."""
