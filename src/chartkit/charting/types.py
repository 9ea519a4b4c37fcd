"""Core charting contracts.

The renderers only talk to these structural protocols, so the charting core
stays importable (and testable) without Qt. Concrete implementations live in
``chartkit.surfaces`` (QPainter) and ``chartkit.testing`` (recording).

Coordinate conventions follow the HTML canvas: ``x, y, w, h`` describe a
rectangle by its top-left corner, the y axis points down and angles are in
radians, positive angles turning clockwise on screen.
"""

from __future__ import annotations

from typing import Any, Callable, Protocol, Union

__all__ = ["SurfaceGradient", "Style", "DrawingSurface", "Scheduler"]


class SurfaceGradient(Protocol):  # pragma: no cover - structural only
    def add_color_stop(self, offset: float, color: str) -> None:
        ...


Style = Union[str, Any]  # CSS color string or a SurfaceGradient from the same surface


class DrawingSurface(Protocol):  # pragma: no cover - structural only
    """Minimal 2D drawing capability consumed by the chart renderers."""

    # State -----------------------------------------------------------
    def save(self) -> None:
        ...

    def restore(self) -> None:
        ...

    def set_fill_style(self, style: Style) -> None:
        ...

    def set_stroke_style(self, style: Style) -> None:
        ...

    def set_line_width(self, width: float) -> None:
        ...

    def set_line_cap(self, cap: str) -> None:
        ...

    def set_shadow(self, offset_x: float, offset_y: float, blur: float, color: str) -> None:
        ...

    def scale(self, sx: float, sy: float) -> None:
        ...

    # Gradients -------------------------------------------------------
    def create_linear_gradient(self, x0: float, y0: float, x1: float, y1: float) -> SurfaceGradient:
        ...

    def create_radial_gradient(
        self, x0: float, y0: float, r0: float, x1: float, y1: float, r1: float
    ) -> SurfaceGradient:
        ...

    # Paths -----------------------------------------------------------
    def begin_path(self) -> None:
        ...

    def close_path(self) -> None:
        ...

    def move_to(self, x: float, y: float) -> None:
        ...

    def line_to(self, x: float, y: float) -> None:
        ...

    def arc(
        self, x: float, y: float, r: float, start: float, end: float, anticlockwise: bool = False
    ) -> None:
        ...

    def fill(self) -> None:
        ...

    def stroke(self) -> None:
        ...

    def clip(self) -> None:
        ...

    def clear_rect(self, x: float, y: float, w: float, h: float) -> None:
        ...


class Scheduler(Protocol):  # pragma: no cover - structural only
    """Deferred invocation: run ``callback`` after at least ``delay_ms`` milliseconds."""

    def call_later(self, delay_ms: float, callback: Callable[[], None]) -> None:
        ...
