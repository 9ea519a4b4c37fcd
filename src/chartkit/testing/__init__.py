"""Testing utilities for headless chart verification.

``RecordingSurface`` is pure Python. The visual regression helpers import
PyQt6 lazily inside the capture function only.
"""

from __future__ import annotations

__all__ = [
    "Op",
    "RecordingGradient",
    "RecordingSurface",
    "capture_chart_png",
    "hash_image_bytes",
    "compare_or_update_baseline",
    "VisualDiffResult",
]

from .recording import Op, RecordingGradient, RecordingSurface
from .visual_regression import (
    capture_chart_png,
    hash_image_bytes,
    compare_or_update_baseline,
    VisualDiffResult,
)
