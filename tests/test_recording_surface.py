import math

import pytest

from chartkit.testing import Op, RecordingSurface


def test_records_operations_in_order():
    s = RecordingSurface()
    s.begin_path()
    s.move_to(1, 2)
    s.line_to(3, 4)
    s.stroke()
    assert s.ops == [Op("begin_path"), Op("move_to", (1, 2)), Op("line_to", (3, 4)), Op("stroke")]
    assert s.names() == ["begin_path", "move_to", "line_to", "stroke"]


@pytest.mark.parametrize("bad", [math.nan, math.inf, -math.inf])
def test_non_finite_arguments_rejected(bad):
    s = RecordingSurface()
    with pytest.raises(ValueError):
        s.line_to(0, bad)
    with pytest.raises(ValueError):
        s.arc(0, 0, 1, 0, bad)


def test_state_stack_restores_styles_scale_and_clip():
    s = RecordingSurface()
    s.set_fill_style("red")
    s.save()
    s.set_fill_style("blue")
    s.scale(1, 0.4)
    s.scale(2, 0.5)
    s.clip()
    assert s.depth == 1
    assert s.current_scale == (2, pytest.approx(0.2))
    assert s.clip_count == 1
    s.restore()
    assert s.fill_style == "red"
    assert s.current_scale == (1.0, 1.0)
    assert s.clip_count == 0


def test_unbalanced_restore_is_ignored():
    s = RecordingSurface()
    s.restore()
    assert s.depth == 0


def test_gradients_collect_stops():
    s = RecordingSurface()
    g = s.create_linear_gradient(0, 0, 10, 0)
    g.add_color_stop(0, "red")
    g.add_color_stop(1, "blue")
    assert s.gradients == [g]
    assert g.stops == [(0, "red"), (1, "blue")]
    with pytest.raises(ValueError):
        g.add_color_stop(1.5, "red")
    with pytest.raises(ValueError):
        s.create_radial_gradient(0, 0, -1, 0, 0, 1)
