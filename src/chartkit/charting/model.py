"""Chart data model: ordered series plus running aggregates.

Data is a table: each ``Series`` has a description, a color and a sequence of
values. Insertion order is render / stack order.

Aggregates are updated exactly on every append (never recomputed lazily at
render time), so they always equal the true max / sum over ``series``:

 - ``max_len``            length of the longest series
 - ``max_value``          largest value anywhere (>= 0)
 - ``max_first_value``    largest first value (bar normalization)
 - ``first_values_total`` sum of first values (pie normalization)

When a color is omitted it is picked from the config palette by index *at
append time*; later appends never change an existing series' color.

Usage::

    data = ChartData()
    data.add_bar("A", 2)
    data.add_series("Trend", [1, 5, 3], color="#336699")
"""

from __future__ import annotations

from dataclasses import dataclass
import math
from numbers import Real
from typing import Iterable, List, Tuple

from ..config.settings import ChartConfig, default_config
from .errors import InvalidSeriesError

__all__ = ["Series", "ChartData", "first_value"]


@dataclass(frozen=True)
class Series:
    description: str
    color: str
    values: Tuple[float, ...]


def first_value(series: Series) -> float:
    """Return the first value of ``series`` or 0.0 when it has none."""
    return series.values[0] if series.values else 0.0


def _coerce_values(values: Iterable[float]) -> Tuple[float, ...]:
    out: List[float] = []
    for idx, v in enumerate(values):
        if isinstance(v, bool) or not isinstance(v, Real):
            raise InvalidSeriesError(f"value #{idx} is not a real number: {v!r}")
        fv = float(v)
        if not math.isfinite(fv):
            raise InvalidSeriesError(f"value #{idx} is not finite: {v!r}")
        out.append(fv)
    return tuple(out)


class ChartData:
    """Series container with exact running aggregates."""

    def __init__(self, config: ChartConfig | None = None) -> None:
        self.config: ChartConfig = config if config is not None else default_config()
        self.series: List[Series] = []
        self.max_len: int = 0
        self.max_value: float = 0.0
        self.max_first_value: float = 0.0
        self.first_values_total: float = 0.0
        self.use_blur: bool = self.config.use_blur
        self.fps: float = self.config.fps

    # Appending -------------------------------------------------------
    def add_series(
        self, description: str, values: Iterable[float], color: str | None = None
    ) -> Series:
        """Append a series; ``color`` defaults to the palette entry for its index."""
        coerced = _coerce_values(values)
        if color is None:
            color = self.config.color_for_series(len(self.series))
        elif not isinstance(color, str) or not color.strip():
            raise InvalidSeriesError(f"color must be a non-empty string, got {color!r}")

        for v in coerced:
            self.max_value = max(v, self.max_value)
        if coerced:
            self.first_values_total += coerced[0]
            self.max_first_value = max(coerced[0], self.max_first_value)
            self.max_len = max(len(coerced), self.max_len)

        series = Series(description=str(description), color=color, values=coerced)
        self.series.append(series)
        return series

    def add_bar(self, description: str, value: float, color: str | None = None) -> Series:
        """Append a single-value series."""
        return self.add_series(description, [value], color)

    # Copying ---------------------------------------------------------
    def copy_into(self, target: "ChartData") -> "ChartData":
        """Overwrite ``target`` with a snapshot of this model and return it.

        The series list is copied (``Series`` are immutable and shared), so
        later appends to either model do not affect the other.
        """
        target.config = self.config
        target.max_len = self.max_len
        target.max_value = self.max_value
        target.max_first_value = self.max_first_value
        target.first_values_total = self.first_values_total
        target.series = list(self.series)
        target.use_blur = self.use_blur
        target.fps = self.fps
        return target

    def copy(self) -> "ChartData":
        return self.copy_into(ChartData(self.config))

    # Queries ---------------------------------------------------------
    def legend_entries(self) -> List[Tuple[str, str]]:
        return [(s.description, s.color) for s in self.series]

    def is_empty(self) -> bool:
        return not self.series

    def __len__(self) -> int:
        return len(self.series)

    def __repr__(self) -> str:  # pragma: no cover - debugging aid
        return (
            f"ChartData(series={len(self.series)}, max_len={self.max_len}, "
            f"max_value={self.max_value}, max_first_value={self.max_first_value}, "
            f"first_values_total={self.first_values_total})"
        )
