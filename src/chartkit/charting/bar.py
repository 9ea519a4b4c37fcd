"""Pseudo-3D bar chart using the first value of each series.

       _
      (_)      _
      | |  _  (_)
      | |_(_)_| |
     /|_| |_| |_|\\
    /_____________\\

Bars are cylinders: a body filled with a horizontal highlight gradient and a
round lid, both drawn under a vertical ``scale`` transform. All bars stand on
a shared trapezoidal floor. Animation makes the bars rise: a bar never
exceeds the current progress even if its true height is larger.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
import math
from typing import List, Optional

from ..design.gradients import apply_stops
from .animation import AnimationSession, FrameCallback
from .base import ChartRenderer
from .model import first_value
from .types import DrawingSurface, Scheduler

__all__ = ["BarChart", "BarLayout"]

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class BarLayout:
    bar_w: float
    floor_x: float
    floor_y: float
    floor_w: float
    floor_h: float
    bars_x: float  # left edge of the first bar
    bars_y: float
    bars_h: float

    def bar_x(self, index: int, bar_distance: float) -> float:
        return self.bars_x + (self.bar_w + bar_distance) * index


class BarChart(ChartRenderer):
    """Bar chart.

    Properties
    ----------
    bar_distance: Space between two bars.
    scale: Vertical compression defining the angle of the 3D effect.
    """

    kind = "bar"

    X_OFF = 10.0  # horizontal inset of the bars inside the floor
    FLOOR_DIST = 2.0

    def __init__(self, source=None, *, config=None) -> None:
        super().__init__(source, config=config)
        self.bar_distance: float = 10.0
        self.scale: float = 0.4

    # Geometry --------------------------------------------------------
    def layout(self, x: float, y: float, w: float, h: float) -> BarLayout:
        """Split the usable width evenly among the series.

        With no series the floor is sized for a single virtual slot.
        """
        slots = len(self.data.series) or 1
        inner_w = w - 2 * self.X_OFF
        inner_h = h - (self.FLOOR_DIST + 1)
        bar_w = (inner_w + self.bar_distance) / slots - self.bar_distance
        floor_h = max(bar_w, 0.0) * self.scale + self.FLOOR_DIST * 2
        return BarLayout(
            bar_w=bar_w,
            floor_x=x,
            floor_y=y + inner_h - floor_h + self.FLOOR_DIST + 1,
            floor_w=w,
            floor_h=floor_h,
            bars_x=x + self.X_OFF,
            bars_y=y,
            bars_h=inner_h,
        )

    def bar_sizes(self, progress: float = 1.0) -> List[float]:
        """Normalized bar heights (0..1) clamped to ``progress``."""
        data = self.data
        sizes: List[float] = []
        for s in data.series:
            if s.values and data.max_first_value != 0:
                size = min(first_value(s) / data.max_first_value, progress)
            else:
                size = 0.0
            sizes.append(max(size, 0.0))
        return sizes

    # Contract --------------------------------------------------------
    def render(self, surface: DrawingSurface, x: float, y: float, w: float, h: float) -> None:
        if not self.scale > 0:
            raise ValueError("bar scale must be > 0")
        self._paint_frame(surface, x, y, w, h, lambda: self._draw_chart(surface, x, y, w, h, 1.0))

    def animate(
        self,
        surface: DrawingSurface,
        x: float,
        y: float,
        w: float,
        h: float,
        duration_ms: float,
        *,
        scheduler: Scheduler | None = None,
        on_frame: Optional[FrameCallback] = None,
    ) -> AnimationSession:
        if not self.scale > 0:
            raise ValueError("bar scale must be > 0")

        def draw_frame(progress: float) -> None:
            self._paint_frame(surface, x, y, w, h, lambda: self._draw_chart(surface, x, y, w, h, progress))

        return self._start_session(draw_frame, duration_ms, scheduler, on_frame)

    # Internal --------------------------------------------------------
    def _draw_chart(
        self, surface: DrawingSurface, x: float, y: float, w: float, h: float, progress: float
    ) -> None:
        lay = self.layout(x, y, w, h)
        self._draw_floor(surface, lay.floor_x, lay.floor_y, lay.floor_w, lay.floor_h)
        if not self.data.series:
            return
        if lay.bar_w <= 0 or not math.isfinite(lay.bar_w):
            log.debug("bar chart skipped bars: width %.2f too small for %d series", w, len(self.data.series))
            return
        for i, (series, size) in enumerate(zip(self.data.series, self.bar_sizes(progress))):
            self._draw_bar(
                surface,
                lay.bar_x(i, self.bar_distance),
                lay.bars_y,
                lay.bar_w,
                lay.bars_h,
                size,
                series.color,
            )

    def _draw_floor(self, surface: DrawingSurface, x: float, y: float, w: float, h: float) -> None:
        x_off = self.X_OFF
        surface.save()
        try:
            surface.begin_path()
            surface.move_to(x, y + h)
            surface.line_to(x + w, y + h)
            surface.line_to(x + w - x_off, y)
            surface.line_to(x + x_off, y)
            surface.close_path()
            ramp = surface.create_linear_gradient(x - x_off, y, x + w / 2, y + h)
            surface.set_fill_style(apply_stops(ramp, "bar-floor"))
            surface.fill()
            surface.stroke()
        finally:
            surface.restore()

    def _draw_bar(
        self,
        surface: DrawingSurface,
        x: float,
        y: float,
        w: float,
        h: float,
        size: float,
        color: str,
    ) -> None:
        """Draw one bar in the box; ``size`` (0..1) is the filled fraction of the height."""
        r = w / 2
        h = h / self.scale - 2 * r
        y = y / self.scale + r
        bar_top = h - h * size

        surface.save()
        try:
            body = surface.create_linear_gradient(x - r, y, x + r, y)
            surface.set_fill_style(apply_stops(body, "bar-tube", color))
            surface.scale(1, self.scale)

            surface.begin_path()
            surface.move_to(x, y + bar_top)
            surface.arc(x + r, y + h, r, math.pi, 2 * math.pi, True)
            surface.line_to(x + w, y + bar_top)
            surface.fill()
            surface.stroke()

            lid = surface.create_radial_gradient(
                x + 0.1 * r, y + bar_top + 0.2 * r, r * 0.03, x + r / 3, y + bar_top, r * 2
            )
            surface.set_fill_style(apply_stops(lid, "lid", color))
            surface.begin_path()
            surface.arc(x + r, y + bar_top, r, 0, 2 * math.pi, False)
            surface.fill()
            surface.stroke()
        finally:
            surface.restore()
