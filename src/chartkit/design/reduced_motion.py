"""Reduced motion preference for chart animations.

A single process-wide switch: when enabled, ``animate`` calls collapse to an
instant one-tick render (the final frame) instead of a progressive reveal.
Useful for accessibility preferences and for headless snapshot runs.

Bootstrap: ``CHARTKIT_PREFER_REDUCED_MOTION=1`` (or true/yes/on, case
insensitive) enables the preference at import time.

Public API:
- set_reduced_motion(enabled) -> None
- is_reduced_motion() -> bool
- adjust_duration(ms, minimum_ms=0) -> float
- temporarily_reduced_motion(force=True) -> context manager
"""

from __future__ import annotations

import contextlib
import os
from typing import Iterator

__all__ = [
    "set_reduced_motion",
    "is_reduced_motion",
    "adjust_duration",
    "temporarily_reduced_motion",
]

_reduced_motion_enabled: bool = (
    os.getenv("CHARTKIT_PREFER_REDUCED_MOTION", "").strip().lower() in {"1", "true", "yes", "on"}
)


def set_reduced_motion(enabled: bool) -> None:
    global _reduced_motion_enabled
    _reduced_motion_enabled = bool(enabled)


def is_reduced_motion() -> bool:
    return _reduced_motion_enabled


def adjust_duration(ms: float, minimum_ms: float = 0) -> float:
    """Return the animation duration to use under the current preference.

    Negative inputs are clamped to 0. With reduced motion enabled the result
    is ``minimum_ms`` (itself clamped to >= 0), otherwise ``ms``.
    """
    minimum_ms = max(0, minimum_ms)
    ms = max(0, ms)
    return minimum_ms if _reduced_motion_enabled else ms


@contextlib.contextmanager
def temporarily_reduced_motion(force: bool = True) -> Iterator[None]:
    """Override the preference inside the block; the prior value is restored on exit."""
    prev = _reduced_motion_enabled
    try:
        set_reduced_motion(force)
        yield
    finally:
        set_reduced_motion(prev)
