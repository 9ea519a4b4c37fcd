"""QPainter backed drawing surface.

Adapts an active ``QPainter`` (on a QImage, QPixmap or inside a widget's
paintEvent) to the canvas-style ``DrawingSurface`` protocol used by the
renderers.

Mapping notes:
 - Canvas angles are radians with the y axis pointing down (positive =
   clockwise on screen); Qt arcs use degrees with positive = counter
   clockwise. ``arc_sweep`` applies the canvas normalization rules and the
   result is negated when converted to degrees.
 - ``create_radial_gradient(x0, y0, r0, x1, y1, r1)`` maps the start circle
   to Qt's focal circle and the end circle to the center circle.
 - Paths use the non-zero (winding) fill rule like the canvas default.
 - Drop shadows are approximated by painting the path offset in the shadow
   color before the real fill / stroke; the blur radius is not rendered.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
import math
from typing import List, Optional, Tuple

from PyQt6.QtCore import QPointF, QRectF, Qt
from PyQt6.QtGui import (
    QBrush,
    QColor,
    QGradient,
    QLinearGradient,
    QPainter,
    QPainterPath,
    QPen,
    QRadialGradient,
)

__all__ = ["QPainterSurface", "QtGradient", "arc_sweep", "parse_color"]

TWO_PI = 2 * math.pi

_LINE_CAPS = {
    "butt": Qt.PenCapStyle.FlatCap,
    "round": Qt.PenCapStyle.RoundCap,
    "square": Qt.PenCapStyle.SquareCap,
}


def arc_sweep(start: float, end: float, anticlockwise: bool = False) -> float:
    """Return the signed canvas sweep (radians, positive = clockwise) of an arc.

    A difference of at least a full turn in the drawing direction yields a
    full circle; otherwise the sweep is normalized into one turn.
    """
    if not anticlockwise:
        if end - start >= TWO_PI:
            return TWO_PI
        return (end - start) % TWO_PI
    if start - end >= TWO_PI:
        return -TWO_PI
    return -((start - end) % TWO_PI)


def parse_color(color: str) -> QColor:
    qc = QColor(color)
    if not qc.isValid():
        raise ValueError(f"Invalid color: {color!r}")
    return qc


class QtGradient:
    """Gradient handle returned by ``QPainterSurface.create_*_gradient``."""

    def __init__(self, gradient: QGradient) -> None:
        self.qgradient = gradient

    def add_color_stop(self, offset: float, color: str) -> None:
        if not (0.0 <= offset <= 1.0):
            raise ValueError("Stop offset out of range [0,1]")
        self.qgradient.setColorAt(offset, parse_color(color))


@dataclass
class _State:
    fill: QColor | QtGradient
    stroke: QColor | QtGradient
    line_width: float = 1.0
    line_cap: Qt.PenCapStyle = Qt.PenCapStyle.FlatCap
    shadow: Optional[Tuple[float, float, QColor]] = None


class QPainterSurface:
    """``DrawingSurface`` implementation over an active QPainter."""

    def __init__(self, painter: QPainter, *, antialias: bool = True) -> None:
        if not painter.isActive():
            raise ValueError("QPainterSurface requires an active QPainter")
        painter.setRenderHint(QPainter.RenderHint.Antialiasing, antialias)
        self._painter = painter
        self._state = _State(fill=QColor("black"), stroke=QColor("black"))
        self._stack: List[_State] = []
        self._path = self._new_path()
        self._has_point = False

    @property
    def painter(self) -> QPainter:
        return self._painter

    # State -----------------------------------------------------------
    def save(self) -> None:
        self._painter.save()
        self._stack.append(replace(self._state))

    def restore(self) -> None:
        if not self._stack:
            return  # unbalanced restore is ignored, as on a canvas
        self._painter.restore()
        self._state = self._stack.pop()

    def set_fill_style(self, style) -> None:
        self._state.fill = self._style(style)

    def set_stroke_style(self, style) -> None:
        self._state.stroke = self._style(style)

    def set_line_width(self, width: float) -> None:
        if width > 0 and math.isfinite(width):
            self._state.line_width = float(width)

    def set_line_cap(self, cap: str) -> None:
        try:
            self._state.line_cap = _LINE_CAPS[cap]
        except KeyError:
            raise ValueError(f"Unknown line cap: {cap!r}") from None

    def set_shadow(self, offset_x: float, offset_y: float, blur: float, color: str) -> None:
        qc = parse_color(color)
        if qc.alpha() == 0 or (offset_x == 0 and offset_y == 0 and blur == 0):
            self._state.shadow = None
        else:
            self._state.shadow = (float(offset_x), float(offset_y), qc)

    def scale(self, sx: float, sy: float) -> None:
        self._painter.scale(sx, sy)

    # Gradients -------------------------------------------------------
    def create_linear_gradient(self, x0: float, y0: float, x1: float, y1: float) -> QtGradient:
        return QtGradient(QLinearGradient(x0, y0, x1, y1))

    def create_radial_gradient(
        self, x0: float, y0: float, r0: float, x1: float, y1: float, r1: float
    ) -> QtGradient:
        if r0 < 0 or r1 < 0:
            raise ValueError("Gradient radius must be >= 0")
        return QtGradient(QRadialGradient(QPointF(x1, y1), r1, QPointF(x0, y0), r0))

    # Paths -----------------------------------------------------------
    def begin_path(self) -> None:
        self._path = self._new_path()
        self._has_point = False

    def close_path(self) -> None:
        if self._has_point:
            self._path.closeSubpath()

    def move_to(self, x: float, y: float) -> None:
        self._path.moveTo(x, y)
        self._has_point = True

    def line_to(self, x: float, y: float) -> None:
        if not self._has_point:
            self.move_to(x, y)
            return
        self._path.lineTo(x, y)

    def arc(
        self, x: float, y: float, r: float, start: float, end: float, anticlockwise: bool = False
    ) -> None:
        if r < 0:
            raise ValueError("Arc radius must be >= 0")
        rect = QRectF(x - r, y - r, 2 * r, 2 * r)
        qt_start = -math.degrees(start)
        qt_sweep = -math.degrees(arc_sweep(start, end, anticlockwise))
        if not self._has_point:
            self._path.arcMoveTo(rect, qt_start)
        self._path.arcTo(rect, qt_start, qt_sweep)
        self._has_point = True

    def fill(self) -> None:
        if self._state.shadow is not None:
            dx, dy, color = self._state.shadow
            self._painter.fillPath(self._path.translated(dx, dy), QBrush(color))
        self._painter.fillPath(self._path, self._brush(self._state.fill))

    def stroke(self) -> None:
        if self._state.shadow is not None:
            dx, dy, color = self._state.shadow
            self._painter.strokePath(self._path.translated(dx, dy), self._pen(QBrush(color)))
        self._painter.strokePath(self._path, self._pen(self._brush(self._state.stroke)))

    def clip(self) -> None:
        self._painter.setClipPath(self._path, Qt.ClipOperation.IntersectClip)

    def clear_rect(self, x: float, y: float, w: float, h: float) -> None:
        p = self._painter
        p.save()
        p.setCompositionMode(QPainter.CompositionMode.CompositionMode_Clear)
        p.fillRect(QRectF(x, y, w, h), Qt.GlobalColor.transparent)
        p.restore()

    # Internal --------------------------------------------------------
    @staticmethod
    def _new_path() -> QPainterPath:
        path = QPainterPath()
        path.setFillRule(Qt.FillRule.WindingFill)
        return path

    @staticmethod
    def _style(style) -> QColor | QtGradient:
        if isinstance(style, QtGradient):
            return style
        if isinstance(style, str):
            return parse_color(style)
        raise TypeError(f"Unsupported style object: {type(style).__name__}")

    @staticmethod
    def _brush(source: QColor | QtGradient) -> QBrush:
        if isinstance(source, QtGradient):
            return QBrush(source.qgradient)
        return QBrush(source)

    def _pen(self, brush: QBrush) -> QPen:
        pen = QPen(brush, self._state.line_width)
        pen.setCapStyle(self._state.line_cap)
        pen.setJoinStyle(Qt.PenJoinStyle.MiterJoin)
        return pen
