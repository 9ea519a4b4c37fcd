"""Qt backed implementations of the drawing surface protocol."""

from .qt_surface import QPainterSurface, QtGradient, arc_sweep, parse_color  # noqa: F401
