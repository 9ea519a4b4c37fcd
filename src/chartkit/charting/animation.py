"""Progress-driven animation sessions.

A session turns a duration into a sequence of progress ticks and re-invokes
a draw step until the reveal is complete:

    delta    = 1000 / max(1, duration_ms) / fps
    progress = n * delta                 (n = 1, 2, ... ; first tick is n = 1)

Each tick draws one full frame at ``min(progress, 1.0)``; while the raw
progress is below 1 the next tick is scheduled ``1000 / fps`` ms later.
A duration <= 0 yields exactly one frame at full progress.

The session is the handle returned from ``ChartRenderer.animate``; ``cancel``
stops further ticks. Sessions are independent: starting a second animation
on the same target does not stop the first one.
"""

from __future__ import annotations

import logging
import math
from typing import Callable, Optional

from .types import Scheduler

__all__ = ["AnimationSession", "FrameCallback"]

log = logging.getLogger(__name__)

FrameCallback = Callable[[float], None]


class AnimationSession:
    """Owns the progress counter of one ``animate`` call."""

    def __init__(
        self,
        draw_frame: FrameCallback,
        *,
        duration_ms: float,
        fps: float,
        scheduler: Scheduler,
        on_frame: Optional[FrameCallback] = None,
        label: str = "chart",
    ) -> None:
        if not (math.isfinite(fps) and fps > 0):
            raise ValueError("fps must be a finite number > 0")
        self._draw_frame = draw_frame
        self._instant = duration_ms <= 0
        self._duration_ms = max(1.0, float(duration_ms))
        self._fps = float(fps)
        self._scheduler = scheduler
        self._on_frame = on_frame
        self._label = label
        self._tick_index = 0
        self._progress = 0.0
        self._frames = 0
        self._started = False
        self._finished = False
        self._cancelled = False

    # Properties ------------------------------------------------------
    @property
    def tick_delta(self) -> float:
        return 1000.0 / self._duration_ms / self._fps

    @property
    def interval_ms(self) -> float:
        return 1000.0 / self._fps

    @property
    def progress(self) -> float:
        """Progress (0..1) of the most recently drawn frame."""
        return self._progress

    @property
    def frames_drawn(self) -> int:
        return self._frames

    @property
    def finished(self) -> bool:
        return self._finished

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    @property
    def active(self) -> bool:
        return self._started and not (self._finished or self._cancelled)

    # Control ---------------------------------------------------------
    def start(self) -> "AnimationSession":
        """Draw the first frame synchronously and schedule the rest."""
        if self._started:
            raise RuntimeError("animation session already started")
        self._started = True
        log.debug(
            "%s animation started (%.0f ms @ %g fps, delta=%.4f)",
            self._label,
            self._duration_ms,
            self._fps,
            self.tick_delta,
        )
        self._tick()
        return self

    def cancel(self) -> None:
        if self._cancelled or self._finished:
            return
        self._cancelled = True
        log.debug("%s animation cancelled after %d frames", self._label, self._frames)

    def _tick(self) -> None:
        if self._cancelled:
            return
        self._tick_index += 1
        if self._instant:
            raw = 1.0
        else:
            # n * 1000 / (duration * fps) avoids drift from repeated float addition
            raw = self._tick_index * 1000.0 / (self._duration_ms * self._fps)
        self._progress = min(raw, 1.0)
        self._draw_frame(self._progress)
        self._frames += 1
        if self._on_frame is not None:
            self._on_frame(self._progress)
        if self._cancelled:
            return
        if raw < 1.0:
            self._scheduler.call_later(self.interval_ms, self._tick)
        else:
            self._finished = True
            log.debug("%s animation finished after %d frames", self._label, self._frames)
