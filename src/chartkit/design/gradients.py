"""Gradient stop definitions used for the pseudo-3D shading.

Gradients are declared once as ordered stop lists. Stops whose color is the
``SERIES_COLOR`` token are bound to the series color at draw time, which lets
the tube / lid shading be shared by all series while the floor ramp stays a
fixed gray.

Renderers create the geometric gradient on the drawing surface and then call
``apply_stops`` to populate it from a registered ``GradientDef``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Tuple

__all__ = [
    "SERIES_COLOR",
    "GradientStop",
    "GradientDef",
    "register_gradient",
    "get_gradient",
    "list_gradients",
    "validate_gradient",
    "shaded_stops",
    "apply_stops",
]

SERIES_COLOR = "{series}"


@dataclass(frozen=True)
class GradientStop:
    position: float  # 0.0 .. 1.0
    color: str  # CSS color or SERIES_COLOR


@dataclass(frozen=True)
class GradientDef:
    id: str
    kind: str  # "linear" | "radial"
    stops: Tuple[GradientStop, ...]
    description: str | None = None


_REGISTRY: Dict[str, GradientDef] = {}


def validate_gradient(gradient: GradientDef) -> None:
    if not gradient.id or any(ch.isspace() for ch in gradient.id):
        raise ValueError("Gradient id must be non-empty and contain no whitespace")
    if gradient.kind not in {"linear", "radial"}:
        raise ValueError(f"Unsupported gradient kind: {gradient.kind}")
    if len(gradient.stops) < 2:
        raise ValueError("Gradient must have at least two stops")
    last_pos = -1.0
    for stop in gradient.stops:
        if not (0.0 <= stop.position <= 1.0):
            raise ValueError("Stop position out of range [0,1]")
        if stop.position < last_pos:
            raise ValueError("Stop positions must be non-decreasing")
        if not stop.color or not stop.color.strip():
            raise ValueError("Stop color must be a non-empty string")
        last_pos = stop.position


def register_gradient(gradient: GradientDef) -> None:
    validate_gradient(gradient)
    _REGISTRY[gradient.id] = gradient


def get_gradient(grad_id: str) -> GradientDef:
    return _REGISTRY[grad_id]


def list_gradients() -> List[GradientDef]:
    return list(_REGISTRY.values())


def shaded_stops(gradient: GradientDef, color: str) -> List[Tuple[float, str]]:
    """Resolve a definition into ``(position, color)`` pairs for ``color``."""
    return [
        (s.position, color if s.color == SERIES_COLOR else s.color) for s in gradient.stops
    ]


def apply_stops(surface_gradient: Any, gradient: GradientDef | str, color: str = "black") -> Any:
    """Add the stops of ``gradient`` to a surface gradient object and return it."""
    if isinstance(gradient, str):
        gradient = get_gradient(gradient)
    for position, stop_color in shaded_stops(gradient, color):
        surface_gradient.add_color_stop(position, stop_color)
    return surface_gradient


def _stops(*pairs: Tuple[float, str]) -> Tuple[GradientStop, ...]:
    return tuple(GradientStop(p, c) for p, c in pairs)


# Built-in gradients ---------------------------------------------------
register_gradient(
    GradientDef(
        id="lid",
        kind="radial",
        stops=_stops((0.0, "white"), (1.0, SERIES_COLOR)),
        description="Highlight on top lids (pie slices, bar caps)",
    )
)
register_gradient(
    GradientDef(
        id="pie-tube",
        kind="linear",
        stops=_stops((0.0, SERIES_COLOR), (0.1, "white"), (0.6, SERIES_COLOR)),
        description="Cylindrical side wall of a pie slice",
    )
)
register_gradient(
    GradientDef(
        id="bar-tube",
        kind="linear",
        stops=_stops((0.3, SERIES_COLOR), (0.43, "white"), (1.0, SERIES_COLOR)),
        description="Curved body of a bar",
    )
)
register_gradient(
    GradientDef(
        id="bar-floor",
        kind="linear",
        stops=_stops(
            (0.0, "#DDD"),
            (0.1, "#BBB"),
            (0.3, "#CCC"),
            (0.5, "#EEE"),
            (0.6, "#DDD"),
            (1.0, "#CCC"),
        ),
        description="Gray ramp of the floor bars stand on",
    )
)
