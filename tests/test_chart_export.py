"""Offscreen rendering and visual baseline helpers."""

from __future__ import annotations

import json

import pytest

from chartkit import BarChart, ChartConfig, LineChart, PieChart
from chartkit.testing import compare_or_update_baseline, hash_image_bytes

pytestmark = pytest.mark.gui


def _chart(cls):
    chart = cls(config=ChartConfig())
    chart.add_series("A", [2, 4, 1])
    chart.add_series("B", [3, 1])
    chart.add_bar("C", 4)
    return chart


def _has_ink(image) -> bool:
    return any(
        image.pixelColor(x, y).alpha() > 0
        for x in range(0, image.width(), 4)
        for y in range(0, image.height(), 4)
    )


@pytest.mark.parametrize("cls", [PieChart, BarChart, LineChart])
def test_render_to_image_draws(qtbot, cls):
    from chartkit.export import render_to_image

    image = render_to_image(_chart(cls), 300, 300)
    assert (image.width(), image.height()) == (300, 300)
    assert _has_ink(image)


@pytest.mark.parametrize("cls", [BarChart, LineChart, PieChart])
def test_animate_zero_matches_render(qtbot, cls):
    from chartkit.export import image_to_png_bytes, render_frames, render_to_image

    chart = _chart(cls)
    frames = render_frames(chart, 240, 200, 0)
    assert len(frames) == 1
    static = render_to_image(chart, 240, 200)
    assert hash_image_bytes(image_to_png_bytes(frames[0])) == hash_image_bytes(
        image_to_png_bytes(static)
    )


def test_bar_frames_differ_while_growing(qtbot):
    from chartkit.export import image_to_png_bytes, render_frames

    chart = _chart(BarChart)
    frames = render_frames(chart, 240, 200, 200)
    assert len(frames) == 5
    hashes = [hash_image_bytes(image_to_png_bytes(f)) for f in frames]
    assert len(set(hashes)) == 5


def test_empty_pie_is_transparent(qtbot):
    from chartkit.export import render_to_image

    assert not _has_ink(render_to_image(PieChart(config=ChartConfig()), 100, 100))


def test_invalid_image_size(qtbot):
    from chartkit.export import render_to_image

    with pytest.raises(ValueError):
        render_to_image(_chart(BarChart), 0, 100)


def test_export_chart_writes_png(qtbot, tmp_path):
    from chartkit.export import export_chart

    path = export_chart(_chart(LineChart), tmp_path / "line.png", 200, 150)
    assert path.read_bytes().startswith(b"\x89PNG")


def test_baseline_create_then_match(qtbot, tmp_path):
    from chartkit.testing import capture_chart_png

    data = capture_chart_png(_chart(BarChart), 160, 120)
    missing = compare_or_update_baseline("charts", "bar", data, root=tmp_path)
    assert not missing.matched and missing.reason == "Baseline missing"

    created = compare_or_update_baseline("charts", "bar", data, update=True, root=tmp_path, size=(160, 120))
    assert created.updated and created.baseline_path.exists()
    meta = json.loads((tmp_path / "charts" / "bar.json").read_text(encoding="utf-8"))
    assert meta == {"hash": hash_image_bytes(data), "width": 160, "height": 120}

    again = compare_or_update_baseline("charts", "bar", capture_chart_png(_chart(BarChart), 160, 120), root=tmp_path)
    assert again.matched


def test_baseline_mismatch_and_update(tmp_path):
    compare_or_update_baseline("charts", "case", b"old", update=True, root=tmp_path)
    result = compare_or_update_baseline("charts", "case", b"new", root=tmp_path)
    assert not result.matched and result.reason == "Hash mismatch"
    updated = compare_or_update_baseline("charts", "case", b"new", update=True, root=tmp_path)
    assert updated.updated
    assert compare_or_update_baseline("charts", "case", b"new", root=tmp_path).matched
