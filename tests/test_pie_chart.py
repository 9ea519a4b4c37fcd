"""Pie chart geometry tests against the recording surface."""

from __future__ import annotations

import math

import pytest

from chartkit import BarChart, ChartConfig, ManualScheduler, PieChart
from chartkit.testing import RecordingSurface

TWO_PI = 2 * math.pi


def _pie(*bars, **cfg) -> PieChart:
    pie = PieChart(config=ChartConfig(**cfg))
    for i, value in enumerate(bars):
        pie.add_bar(chr(ord("A") + i), value)
    return pie


def test_slice_angles_scenario():
    angles = _pie(2, 3, 4).slice_angles()
    spans = [end - start for start, end in angles]
    assert spans == pytest.approx([TWO_PI * 2 / 9, TWO_PI * 3 / 9, TWO_PI * 4 / 9])
    assert angles[0][0] == 0
    # consecutive, summing to a full turn
    for (_, end), (start, _) in zip(angles, angles[1:]):
        assert start == end
    assert angles[-1][1] == pytest.approx(TWO_PI)


def test_single_series_is_full_circle():
    assert _pie(7).slice_angles() == [(0.0, pytest.approx(TWO_PI))]


@pytest.mark.parametrize("values", [(), (0,), (0, 0), (-1, 0)])
def test_no_slices_without_positive_total(values):
    pie = _pie(*values)
    assert pie.slice_angles() == []
    surface = RecordingSurface()
    pie.render(surface, 0, 0, 200, 200)
    assert surface.ops == []


def test_render_geometry():
    pie = _pie(2, 3, 4)
    surface = RecordingSurface()
    pie.render(surface, 0, 0, 200, 200)

    assert surface.depth == 0
    assert surface.calls("set_shadow")[0].args == (1.0, 1.0, 4.0, "#AAA")
    assert [op.args for op in surface.calls("scale")] == [(1, 0.4)] * 3

    arcs = surface.calls("arc")
    # two slices start in front (<= pi) and get a side wall: lid + 2 tube arcs
    assert len(arcs) == 3 + 3 + 1
    xc, yc, r = arcs[0].args[:3]
    assert (xc, r) == (100, 100)
    assert yc == pytest.approx(75 / 0.4)
    tube_front = arcs[1].args
    assert tube_front[1] == pytest.approx(yc + 50 / 0.4)
    # second slice's wall is cut at pi
    assert arcs[4].args[4] == pytest.approx(math.pi)
    assert arcs[5].args[5] is True
    assert surface.count("fill") == 5


def test_lid_uses_series_color():
    pie = _pie(1, 1, palette=("red", "blue"))
    surface = RecordingSurface()
    pie.render(surface, 0, 0, 100, 100)
    radial = [g for g in surface.gradients if g.kind == "radial"]
    assert [g.stops[-1][1] for g in radial] == ["red", "blue"]


def test_zero_share_slice_skipped():
    pie = _pie(3, 0, 1)
    surface = RecordingSurface()
    pie.render(surface, 0, 0, 200, 200)
    assert len([g for g in surface.gradients if g.kind == "radial"]) == 2


def test_no_shadow_when_blur_disabled():
    surface = RecordingSurface()
    _pie(1, 2, use_blur=False).render(surface, 0, 0, 200, 200)
    assert surface.calls("set_shadow") == []


def test_animate_draws_static_frame_once():
    pie = _pie(2, 3)
    animated, static = RecordingSurface(), RecordingSurface()
    sched = ManualScheduler()
    session = pie.animate(animated, 0, 0, 200, 200, 1000, scheduler=sched)
    assert sched.pending == 0
    assert session.finished and session.frames_drawn == 1
    pie.render(static, 0, 0, 200, 200)
    assert animated.ops == static.ops
    assert pie.last_session is session


def test_built_from_bar_chart_snapshot():
    bars = BarChart(config=ChartConfig())
    bars.add_bar("A", 2)
    pie = PieChart(bars)
    bars.add_bar("B", 2)
    assert len(pie.series) == 1
    assert pie.slice_angles() == [(0.0, pytest.approx(TWO_PI))]


def test_invalid_scale_rejected():
    pie = _pie(1)
    pie.scale = 0
    with pytest.raises(ValueError):
        pie.render(RecordingSurface(), 0, 0, 100, 100)
