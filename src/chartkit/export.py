"""Offscreen rendering of charts to images.

Thin helpers that pair a chart with a ``QPainterSurface`` over a transparent
``QImage``. PyQt6 is imported lazily so ``import chartkit`` stays headless.

``render_frames`` drives the animation with a ``ManualScheduler``, so every
frame of a reveal is produced synchronously without an event loop.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List

from .charting.base import ChartRenderer
from .charting.scheduler import ManualScheduler

__all__ = ["render_to_image", "render_frames", "image_to_png_bytes", "export_chart"]

log = logging.getLogger(__name__)

DEFAULT_MARGIN = 3


def _new_image(width: int, height: int):
    from PyQt6.QtCore import Qt
    from PyQt6.QtGui import QImage

    if width <= 0 or height <= 0:
        raise ValueError(f"image size must be positive, got {width}x{height}")
    image = QImage(int(width), int(height), QImage.Format.Format_ARGB32)
    image.fill(Qt.GlobalColor.transparent)
    return image


def _inner_rect(width: int, height: int, margin: float):
    return margin, margin, width - 2 * margin, height - 2 * margin


def render_to_image(chart: ChartRenderer, width: int, height: int, *, margin: float = DEFAULT_MARGIN):
    """Render the static frame of ``chart`` into a new ARGB32 ``QImage``."""
    from PyQt6.QtGui import QPainter

    from .surfaces.qt_surface import QPainterSurface

    image = _new_image(width, height)
    painter = QPainter(image)
    try:
        chart.render(QPainterSurface(painter), *_inner_rect(width, height, margin))
    finally:
        painter.end()
    return image


def render_frames(
    chart: ChartRenderer,
    width: int,
    height: int,
    duration_ms: float,
    *,
    margin: float = DEFAULT_MARGIN,
) -> List:
    """Run ``chart``'s animation to completion and return a ``QImage`` per frame."""
    from PyQt6.QtGui import QPainter

    from .surfaces.qt_surface import QPainterSurface

    image = _new_image(width, height)
    frames: List = []
    scheduler = ManualScheduler()
    painter = QPainter(image)
    try:
        chart.animate(
            QPainterSurface(painter),
            *_inner_rect(width, height, margin),
            duration_ms,
            scheduler=scheduler,
            on_frame=lambda _progress: frames.append(image.copy()),
        )
        scheduler.run_until_idle()
    finally:
        painter.end()
    log.debug("rendered %d %s frames (%dx%d)", len(frames), chart.kind, width, height)
    return frames


def image_to_png_bytes(image) -> bytes:
    """Encode a ``QImage`` as PNG bytes."""
    from PyQt6.QtCore import QBuffer

    buff = QBuffer()
    buff.open(QBuffer.OpenModeFlag.ReadWrite)
    try:
        if not image.save(buff, "PNG"):
            raise RuntimeError("PNG encoding failed")
        return bytes(buff.data())
    finally:
        buff.close()


def export_chart(
    chart: ChartRenderer,
    path: str | Path,
    width: int,
    height: int,
    *,
    margin: float = DEFAULT_MARGIN,
) -> Path:
    """Write the static frame of ``chart`` to ``path`` as PNG; the parent dir must exist."""
    target = Path(path)
    target.write_bytes(image_to_png_bytes(render_to_image(chart, width, height, margin=margin)))
    return target
