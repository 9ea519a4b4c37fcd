"""Line chart ("graph") plotting every value of every series.

    |       __/___/
    |  ____/ /
    | /_____/_
    |//    /  \\
    |/____/____\\____

Each frame draws a light background grid, one polyline per series (starting
at the zero baseline) and the coordinate axes with arrowheads. All series
share the global ``max_value`` for vertical normalization.

Animation plots the lines from left to right. The full polylines are drawn
every frame and the visible part is limited by a clip rectangle whose right
edge sits at ``x + w * progress``.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from .animation import AnimationSession, FrameCallback
from .base import ChartRenderer
from .types import DrawingSurface, Scheduler

__all__ = ["LineChart"]

log = logging.getLogger(__name__)

ARROW_W = 4.0
ARROW_H = 8.0


class LineChart(ChartRenderer):
    """Line chart.

    Properties
    ----------
    vertical_lines, horizontal_lines: Number of lines in the background grid.
    """

    kind = "line"

    def __init__(self, source=None, *, config=None) -> None:
        super().__init__(source, config=config)
        self.vertical_lines: int = 10
        self.horizontal_lines: int = 10

    def can_plot(self) -> bool:
        """True when the data supports a polyline (needs max_value > 0 and 2+ points)."""
        return self.data.max_value > 0 and self.data.max_len > 1

    def polyline_points(
        self, x: float, y: float, w: float, h: float
    ) -> List[List[Tuple[float, float]]]:
        """Return the polyline vertices per series for the plot rectangle.

        Every polyline starts at the baseline ``(x, y + h)``. Returns an empty
        list when ``can_plot()`` is False.
        """
        if not self.can_plot():
            return []
        data = self.data
        point_dist = w / (data.max_len - 1)
        out: List[List[Tuple[float, float]]] = []
        for s in data.series:
            pts = [(x, y + h)]
            for a, value in enumerate(s.values):
                pts.append((x + point_dist * a, y + (1.0 - value / data.max_value) * h))
            out.append(pts)
        return out

    # Contract --------------------------------------------------------
    def render(self, surface: DrawingSurface, x: float, y: float, w: float, h: float) -> None:
        self._draw_frame(surface, x, y, w, h, 1.0)

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
        return self._start_session(
            lambda progress: self._draw_frame(surface, x, y, w, h, progress),
            duration_ms,
            scheduler,
            on_frame,
        )

    # Internal --------------------------------------------------------
    def _draw_frame(
        self, surface: DrawingSurface, x: float, y: float, w: float, h: float, progress: float
    ) -> None:
        def paint() -> None:
            ix, iy, iw, ih = x + ARROW_W, y + ARROW_W, w - 2 * ARROW_W, h - 2 * ARROW_W
            self._draw_grid(surface, ix, iy, iw, ih)
            self._plot_values(surface, ix, iy, iw, ih, progress)
            self._draw_axes(surface, x, y, w, h)

        self._paint_frame(surface, x, y, w, h, paint)

    def _draw_grid(self, surface: DrawingSurface, x: float, y: float, w: float, h: float) -> None:
        surface.save()
        try:
            surface.set_line_width(0.5)
            surface.set_stroke_style("#CCC")
            surface.begin_path()
            rows = max(0, int(self.horizontal_lines))
            cols = max(0, int(self.vertical_lines))
            for i in range(rows):
                surface.move_to(x, y + h * i / rows)
                surface.line_to(x + w, y + h * i / rows)
            for i in range(cols):
                surface.move_to(x + w * (i + 1) / cols, y)
                surface.line_to(x + w * (i + 1) / cols, y + h)
            surface.stroke()
        finally:
            surface.restore()

    def _draw_axes(self, surface: DrawingSurface, x: float, y: float, w: float, h: float) -> None:
        surface.begin_path()
        # y axis arrowhead
        surface.move_to(x, y + ARROW_H)
        surface.line_to(x + ARROW_W, y)
        surface.line_to(x + 2 * ARROW_W, y + ARROW_H)
        # axes
        surface.move_to(x + ARROW_W, y)
        surface.line_to(x + ARROW_W, y + h - ARROW_W)
        surface.line_to(x + w, y + h - ARROW_W)
        # x axis arrowhead
        surface.move_to(x + w - ARROW_H, y + h - 2 * ARROW_W)
        surface.line_to(x + w, y + h - ARROW_W)
        surface.line_to(x + w - ARROW_H, y + h)
        surface.stroke()

    def _plot_values(
        self, surface: DrawingSurface, x: float, y: float, w: float, h: float, progress: float
    ) -> None:
        polylines = self.polyline_points(x, y, w, h)
        if not polylines:
            log.debug(
                "line chart has nothing to plot (max_value=%s, max_len=%s)",
                self.data.max_value,
                self.data.max_len,
            )
            return
        surface.save()
        try:
            reveal = x + w * progress
            surface.begin_path()
            surface.move_to(x, y)
            surface.line_to(x, y + h)
            surface.line_to(reveal, y + h)
            surface.line_to(reveal, y)
            surface.close_path()
            surface.clip()

            surface.set_line_width(2)
            surface.set_line_cap("round")
            for series, pts in zip(self.data.series, polylines):
                if len(pts) < 2:
                    continue  # series without values
                surface.begin_path()
                surface.set_stroke_style(series.color)
                surface.move_to(*pts[0])
                for px, py in pts[1:]:
                    surface.line_to(px, py)
                surface.stroke()
        finally:
            surface.restore()
