"""Pseudo-3D pie chart using the first value of each series.

     _____
    /     \\
   |\\_____/|
    \\_____/

Each slice is a lid (wedge filled with a radial highlight) plus, for slices
that face the viewer (start angle <= pi), a side wall ("tube") between the
lid edge and the same arc shifted down by ``height``. The 3D look comes from
a uniform vertical ``scale`` applied while drawing.

Pie charts do not animate; ``animate`` draws the static frame in one tick.
"""

from __future__ import annotations

import logging
import math
from typing import List, Optional, Tuple

from ..design.gradients import apply_stops
from .animation import AnimationSession, FrameCallback
from .base import ChartRenderer
from .model import first_value
from .types import DrawingSurface, Scheduler

__all__ = ["PieChart"]

log = logging.getLogger(__name__)

TWO_PI = 2 * math.pi


class PieChart(ChartRenderer):
    """Pie chart.

    Properties
    ----------
    scale: Vertical compression giving the perspective (3D) look.
    height: Thickness of the pie in pixels.
    """

    kind = "pie"

    def __init__(self, source=None, *, config=None) -> None:
        super().__init__(source, config=config)
        self.scale: float = 0.4
        self.height: float = 50.0

    def slice_angles(self) -> List[Tuple[float, float]]:
        """Return ``(start, end)`` angles per series, consecutive from 0.

        Empty when there is nothing to normalize against.
        """
        data = self.data
        total = data.first_values_total
        if data.max_first_value == 0 or total <= 0:
            return []
        out: List[Tuple[float, float]] = []
        start = 0.0
        for s in data.series:
            span = first_value(s) / total * TWO_PI
            out.append((start, start + span))
            start += span
        return out

    def render(self, surface: DrawingSurface, x: float, y: float, w: float, h: float) -> None:
        angles = self.slice_angles()
        if not angles:
            log.debug("pie chart has no first values to plot")
            return
        if not self.scale > 0:
            raise ValueError("pie scale must be > 0")
        xc = x + w / 2
        yc = y + (h - self.height) / 2
        r = w / 2
        if r <= 0:
            log.debug("pie chart skipped: non-positive width %s", w)
            return

        surface.save()
        try:
            surface.set_stroke_style("black")
            self._apply_shadow(surface)
            for series, (start, end) in zip(self.data.series, angles):
                if end <= start:
                    continue  # zero share, nothing visible
                self._draw_slice(surface, xc, yc, r, start, end, series.color)
        finally:
            surface.restore()

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
        if duration_ms > 0:
            log.debug("pie charts do not animate; drawing the static frame")
        return self._start_session(
            lambda _progress: self.render(surface, x, y, w, h), 0, scheduler, on_frame
        )

    # Internal --------------------------------------------------------
    def _draw_slice(
        self,
        surface: DrawingSurface,
        x: float,
        y: float,
        r: float,
        start: float,
        end: float,
        color: str,
    ) -> None:
        tube_h = self.height / self.scale
        y /= self.scale

        surface.save()
        try:
            surface.scale(1, self.scale)

            # lid
            lid = surface.create_radial_gradient(x - r, y + r * 0.3, r * 0.01, x, y, r * 2)
            surface.set_fill_style(apply_stops(lid, "lid", color))
            surface.begin_path()
            surface.arc(x, y, r, start, end, False)
            surface.line_to(x, y)
            surface.close_path()
            surface.fill()
            surface.stroke()

            # side wall, only the part in front (angles 0..pi face the viewer)
            if start <= math.pi:
                end = min(end, math.pi)
                tube = surface.create_linear_gradient(x - 1.2 * r, y, x + r, y)
                surface.set_fill_style(apply_stops(tube, "pie-tube", color))
                surface.begin_path()
                surface.arc(x, y + tube_h, r, start, end, False)
                surface.arc(x, y, r, end, start, True)
                surface.close_path()
                surface.fill()
                surface.stroke()
        finally:
            surface.restore()
