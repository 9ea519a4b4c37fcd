"""chartkit: animated pseudo-3D pie, bar and line charts.

Charts draw through a small canvas-style ``DrawingSurface`` protocol; a
QPainter implementation lives in ``chartkit.surfaces`` and offscreen image
helpers in ``chartkit.export``. Neither is imported here, so the core works
without Qt.

Quick start::

    from chartkit import BarChart, PieChart

    bars = BarChart()
    bars.add_bar("A", 2)
    bars.add_bar("B", 3)
    pie = PieChart(bars)
"""

from __future__ import annotations

from .config import ChartConfig, default_config
from .charting import (
    AnimationSession,
    BarChart,
    ChartData,
    ChartError,
    ChartRenderer,
    InvalidSeriesError,
    LineChart,
    ManualScheduler,
    PieChart,
    QtScheduler,
    Series,
    annuity_series,
    chart_registry,
)

__all__ = [
    "AnimationSession",
    "BarChart",
    "ChartConfig",
    "ChartData",
    "ChartError",
    "ChartRenderer",
    "InvalidSeriesError",
    "LineChart",
    "ManualScheduler",
    "PieChart",
    "QtScheduler",
    "Series",
    "annuity_series",
    "chart_registry",
    "default_config",
]

__version__ = "0.1.0"
