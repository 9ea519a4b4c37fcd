"""Renderer contract shared by the chart variants.

``ChartRenderer`` is an abstract interface: ``render`` draws one static frame
inside ``(x, y, w, h)`` and ``animate`` draws a progressive reveal that ends
on the same frame, returning the ``AnimationSession`` handle. Each variant
(pie, bar, line) implements both; the base methods raise if reached.

Chart data is composed, not inherited: every renderer owns a ``ChartData``.
Passing an existing model (or another chart) to a variant's constructor
snapshots it via ``copy_into`` so the same data can be shown by several
variants without re-entering it::

    bars = BarChart()
    bars.add_bar("A", 2)
    pie = PieChart(bars)   # independent copy of the data
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, List, Optional, Tuple, Union

from ..config.settings import (
    ChartConfig,
    SHADOW_BLUR,
    SHADOW_COLOR,
    SHADOW_OFFSET_X,
    SHADOW_OFFSET_Y,
)
from ..design import reduced_motion
from .animation import AnimationSession, FrameCallback
from .model import ChartData, Series
from .scheduler import QtScheduler
from .types import DrawingSurface, Scheduler

__all__ = ["ChartRenderer", "ChartSource"]

ChartSource = Union[ChartData, "ChartRenderer"]


class ChartRenderer(ABC):
    """Abstract render/animate contract over an owned ``ChartData``."""

    kind: str = "chart"

    def __init__(self, source: ChartSource | None = None, *, config: ChartConfig | None = None) -> None:
        if source is None:
            self._data = ChartData(config)
        else:
            if isinstance(source, ChartRenderer):
                source = source.data
            if not isinstance(source, ChartData):
                raise TypeError(f"Cannot build a chart from {type(source).__name__}")
            self._data = source.copy()
            if config is not None:
                # an explicit config replaces the snapshot's palette, fps and blur
                self._data.config = config
                self._data.fps = config.fps
                self._data.use_blur = config.use_blur
        self.last_session: AnimationSession | None = None

    # Data ------------------------------------------------------------
    @property
    def data(self) -> ChartData:
        return self._data

    @property
    def series(self) -> List[Series]:
        return self._data.series

    def add_series(self, description: str, values, color: str | None = None) -> Series:
        return self._data.add_series(description, values, color)

    def add_bar(self, description: str, value: float, color: str | None = None) -> Series:
        return self._data.add_bar(description, value, color)

    def legend_entries(self) -> List[Tuple[str, str]]:
        return self._data.legend_entries()

    # Contract --------------------------------------------------------
    @abstractmethod
    def render(self, surface: DrawingSurface, x: float, y: float, w: float, h: float) -> None:
        """Draw one static frame inside the rectangle."""
        raise NotImplementedError(
            "ChartRenderer.render is abstract; use a chart variant such as BarChart"
        )

    @abstractmethod
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
        """Progressively reveal the chart over ``duration_ms`` milliseconds."""
        raise NotImplementedError(
            "ChartRenderer.animate is abstract; use a chart variant such as BarChart"
        )

    # Shared helpers --------------------------------------------------
    def _apply_shadow(self, surface: DrawingSurface) -> None:
        if self._data.use_blur:
            surface.set_shadow(SHADOW_OFFSET_X, SHADOW_OFFSET_Y, SHADOW_BLUR, SHADOW_COLOR)

    def _paint_frame(
        self,
        surface: DrawingSurface,
        x: float,
        y: float,
        w: float,
        h: float,
        paint: Callable[[], None],
    ) -> None:
        """Clear the chart region and repaint it with black strokes (and shadow)."""
        surface.save()
        try:
            surface.clear_rect(x, y, w, h)
            surface.set_stroke_style("black")
            self._apply_shadow(surface)
            paint()
        finally:
            surface.restore()

    def _start_session(
        self,
        draw_frame: FrameCallback,
        duration_ms: float,
        scheduler: Scheduler | None,
        on_frame: Optional[FrameCallback],
    ) -> AnimationSession:
        session = AnimationSession(
            draw_frame,
            duration_ms=reduced_motion.adjust_duration(duration_ms),
            fps=self._data.fps,
            scheduler=scheduler if scheduler is not None else QtScheduler(),
            on_frame=on_frame,
            label=self.kind,
        )
        self.last_session = session
        return session.start()

    def __repr__(self) -> str:  # pragma: no cover - debugging aid
        return f"{type(self).__name__}({self._data!r})"
