"""Deferred invocation backends for animation sessions.

``QtScheduler`` hands callbacks to the Qt event loop (``QTimer.singleShot``);
ticks only fire while an event loop is running.

``ManualScheduler`` is a virtual clock for deterministic tests and offscreen
frame export: nothing runs until ``advance`` / ``run_until_idle`` is called,
and a callback never runs before its due time.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import heapq
import itertools
from typing import Callable, List

__all__ = ["QtScheduler", "ManualScheduler"]


class QtScheduler:
    """Schedule callbacks on the Qt event loop."""

    def call_later(self, delay_ms: float, callback: Callable[[], None]) -> None:
        from PyQt6.QtCore import QTimer  # local import keeps the core headless

        QTimer.singleShot(max(0, int(round(delay_ms))), callback)


@dataclass(order=True)
class _Pending:
    due_ms: float
    seq: int
    callback: Callable[[], None] = field(compare=False)


class ManualScheduler:
    """Virtual-time scheduler.

    Usage::

        sched = ManualScheduler()
        session = chart.animate(surface, 0, 0, 300, 300, 1000, scheduler=sched)
        sched.run_until_idle()
    """

    def __init__(self) -> None:
        self._now: float = 0.0
        self._queue: List[_Pending] = []
        self._seq = itertools.count()

    @property
    def now_ms(self) -> float:
        return self._now

    @property
    def pending(self) -> int:
        return len(self._queue)

    def call_later(self, delay_ms: float, callback: Callable[[], None]) -> None:
        heapq.heappush(self._queue, _Pending(self._now + max(0.0, delay_ms), next(self._seq), callback))

    def advance(self, ms: float) -> int:
        """Move the clock forward by ``ms`` running every callback that became due.

        Callbacks scheduled while advancing also run if they fall inside the
        window. Returns the number of callbacks executed.
        """
        target = self._now + max(0.0, ms)
        ran = 0
        while self._queue and self._queue[0].due_ms <= target:
            item = heapq.heappop(self._queue)
            self._now = item.due_ms
            item.callback()
            ran += 1
        self._now = target
        return ran

    def run_until_idle(self, max_steps: int = 10_000) -> int:
        """Run callbacks in due order until the queue drains.

        Raises RuntimeError if more than ``max_steps`` callbacks run, which
        indicates a session that never finishes.
        """
        ran = 0
        while self._queue:
            if ran >= max_steps:
                raise RuntimeError(f"scheduler still busy after {max_steps} callbacks")
            item = heapq.heappop(self._queue)
            self._now = max(self._now, item.due_ms)
            item.callback()
            ran += 1
        return ran
