"""Chart variant registry.

Maps a chart kind ("pie", "bar", "line") to its renderer class so callers can
select (or convert between) variants by name::

    chart = chart_registry.create("bar")
    chart.add_bar("A", 2)
    pie = chart_registry.convert(chart, "pie")
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Type

from ..config.settings import ChartConfig
from .bar import BarChart
from .base import ChartRenderer, ChartSource
from .line import LineChart
from .pie import PieChart

__all__ = ["ChartKind", "ChartRegistry", "chart_registry", "register_chart_kind"]


@dataclass(frozen=True)
class ChartKind:
    """Metadata for a registered chart variant."""

    kind: str
    renderer: Type[ChartRenderer]
    description: str


class ChartRegistry:
    def __init__(self) -> None:
        self._kinds: Dict[str, ChartKind] = {}

    def register(self, kind: str, renderer: Type[ChartRenderer], description: str) -> None:
        if kind in self._kinds:
            raise ValueError(f"Chart kind already registered: {kind}")
        if not (isinstance(renderer, type) and issubclass(renderer, ChartRenderer)):
            raise TypeError("renderer must be a ChartRenderer subclass")
        self._kinds[kind] = ChartKind(kind, renderer, description)

    def get(self, kind: str) -> ChartKind:
        entry = self._kinds.get(kind)
        if entry is None:
            raise KeyError(f"Unknown chart kind: {kind}")
        return entry

    def create(
        self, kind: str, source: ChartSource | None = None, *, config: ChartConfig | None = None
    ) -> ChartRenderer:
        """Build a chart of ``kind``, empty or from a copy of ``source``."""
        return self.get(kind).renderer(source, config=config)

    def convert(self, chart: ChartRenderer, kind: str) -> ChartRenderer:
        """Return a ``kind`` chart showing a snapshot of ``chart``'s data."""
        return self.create(kind, chart)

    def list_kinds(self) -> Dict[str, str]:
        return {k: v.description for k, v in self._kinds.items()}

    def __contains__(self, kind: object) -> bool:
        return kind in self._kinds


chart_registry = ChartRegistry()


def register_chart_kind(kind: str, renderer: Type[ChartRenderer], description: str) -> None:
    chart_registry.register(kind, renderer, description)


register_chart_kind("pie", PieChart, "Pseudo-3D pie chart of each series' first value")
register_chart_kind("bar", BarChart, "Pseudo-3D bar chart of each series' first value")
register_chart_kind("line", LineChart, "Line graph of all series values")
