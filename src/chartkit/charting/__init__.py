"""Charting core: data model, renderer variants and animation sessions.

Nothing in this package imports Qt at module import time; the renderers draw
through the ``DrawingSurface`` protocol and defer ticks through a
``Scheduler``. Qt backed implementations live in ``chartkit.surfaces`` and
``chartkit.charting.scheduler.QtScheduler``.
"""

from .errors import ChartError, InvalidSeriesError  # noqa: F401
from .model import ChartData, Series, first_value  # noqa: F401
from .types import DrawingSurface, Scheduler, SurfaceGradient  # noqa: F401
from .animation import AnimationSession  # noqa: F401
from .scheduler import ManualScheduler, QtScheduler  # noqa: F401
from .base import ChartRenderer  # noqa: F401
from .pie import PieChart  # noqa: F401
from .bar import BarChart, BarLayout  # noqa: F401
from .line import LineChart  # noqa: F401
from .registry import ChartRegistry, chart_registry, register_chart_kind  # noqa: F401
from .annuity import annuity_series  # noqa: F401
