"""Chart defaults and per-chart configuration.

Every chart owns a ``ChartConfig`` value instead of reading shared mutable
globals. The module level constants below are the library defaults; they can
be bootstrapped from the environment via ``default_config()``:

 - ``CHARTKIT_FPS``: animation frame rate (positive number)
 - ``CHARTKIT_USE_BLUR``: ``1``/``true``/``yes``/``on`` enables drop shadows,
   anything else disables them
 - ``CHARTKIT_PALETTE``: comma separated list of CSS colors

``ChartConfig.from_dict`` parses defensively: malformed entries fall back to
the defaults (with a warning) instead of raising, mirroring how persisted UI
state is loaded elsewhere.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
import math
import os
from typing import Any, Dict, Final, Mapping, Tuple

__all__ = [
    "DEFAULT_FPS",
    "DEFAULT_USE_BLUR",
    "DEFAULT_PALETTE",
    "SHADOW_OFFSET_X",
    "SHADOW_OFFSET_Y",
    "SHADOW_BLUR",
    "SHADOW_COLOR",
    "ChartConfig",
    "default_config",
]

log = logging.getLogger(__name__)

DEFAULT_FPS: Final = 25
DEFAULT_USE_BLUR: Final = True

# Colors are picked cyclically by series index at append time.
DEFAULT_PALETTE: Final[Tuple[str, ...]] = (
    "#FF1111",
    "blue",
    "yellow",
    "#088A85",
    "#F0F",
    "#FF8000",
    "aqua",
    "lime",
    "#FFF087",
)

SHADOW_OFFSET_X: Final = 1.0
SHADOW_OFFSET_Y: Final = 1.0
SHADOW_BLUR: Final = 4.0
SHADOW_COLOR: Final = "#AAA"

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class ChartConfig:
    """Styling and animation defaults owned by a chart instance.

    Attributes
    ----------
    palette: Ordered default series colors (cyclic).
    fps: Animation frame rate used for new models.
    use_blur: Whether new models draw with a drop shadow.
    """

    palette: Tuple[str, ...] = field(default=DEFAULT_PALETTE)
    fps: float = DEFAULT_FPS
    use_blur: bool = DEFAULT_USE_BLUR

    def __post_init__(self) -> None:
        # Accept any sequence but store an immutable tuple
        object.__setattr__(self, "palette", tuple(self.palette))
        if not self.palette:
            raise ValueError("palette must contain at least one color")
        if any(not isinstance(c, str) or not c.strip() for c in self.palette):
            raise ValueError("palette colors must be non-empty strings")
        if not (math.isfinite(self.fps) and self.fps > 0):
            raise ValueError("fps must be a finite number > 0")

    def color_for_series(self, index: int) -> str:
        if index < 0:
            index = 0
        return self.palette[index % len(self.palette)]

    def to_dict(self) -> Dict[str, Any]:
        return {"palette": list(self.palette), "fps": self.fps, "use_blur": self.use_blur}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ChartConfig":
        fps: float = DEFAULT_FPS
        raw_fps = data.get("fps", DEFAULT_FPS)
        try:
            fps = float(raw_fps)
            if not math.isfinite(fps) or fps <= 0:
                raise ValueError(raw_fps)
        except (TypeError, ValueError):
            log.warning("Invalid fps %r in chart config; using %s", raw_fps, DEFAULT_FPS)
            fps = DEFAULT_FPS

        palette: Tuple[str, ...] = DEFAULT_PALETTE
        raw_palette = data.get("palette")
        if raw_palette is not None:
            if isinstance(raw_palette, str):
                raw_palette = raw_palette.split(",")
            try:
                candidate = tuple(str(c).strip() for c in raw_palette)
            except TypeError:
                candidate = ()
            if candidate and all(candidate):
                palette = candidate
            else:
                log.warning("Invalid palette %r in chart config; using defaults", raw_palette)

        raw_blur = data.get("use_blur", DEFAULT_USE_BLUR)
        if isinstance(raw_blur, str):
            use_blur = raw_blur.strip().lower() in _TRUTHY
        else:
            use_blur = bool(raw_blur)
        return cls(palette=palette, fps=fps, use_blur=use_blur)


def default_config(environ: Mapping[str, str] | None = None) -> ChartConfig:
    """Build the default config, honoring ``CHARTKIT_*`` environment overrides."""
    env = os.environ if environ is None else environ
    data: Dict[str, Any] = {}
    if env.get("CHARTKIT_FPS"):
        data["fps"] = env["CHARTKIT_FPS"]
    if env.get("CHARTKIT_USE_BLUR"):
        data["use_blur"] = env["CHARTKIT_USE_BLUR"]
    if env.get("CHARTKIT_PALETTE"):
        data["palette"] = env["CHARTKIT_PALETTE"]
    if not data:
        return ChartConfig()
    return ChartConfig.from_dict(data)
