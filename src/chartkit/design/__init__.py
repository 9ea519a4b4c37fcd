"""Design helpers: shading gradients and the reduced motion preference."""

from .gradients import (  # noqa: F401
    GradientDef,
    GradientStop,
    apply_stops,
    get_gradient,
    list_gradients,
    register_gradient,
)
from . import reduced_motion  # noqa: F401
