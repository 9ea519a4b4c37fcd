"""Configuration defaults for charts."""

from .settings import (  # noqa: F401
    ChartConfig,
    default_config,
    DEFAULT_FPS,
    DEFAULT_PALETTE,
    DEFAULT_USE_BLUR,
)
