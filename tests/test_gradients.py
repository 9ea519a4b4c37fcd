import pytest

from chartkit.design import GradientDef, GradientStop, apply_stops, get_gradient, list_gradients, register_gradient
from chartkit.design.gradients import SERIES_COLOR, shaded_stops, validate_gradient
from chartkit.testing import RecordingGradient


def test_builtin_gradients_present():
    ids = {g.id for g in list_gradients()}
    assert {"lid", "pie-tube", "bar-tube", "bar-floor"}.issubset(ids)
    assert get_gradient("lid").kind == "radial"


def test_shaded_stops_binds_series_color():
    assert shaded_stops(get_gradient("pie-tube"), "red") == [(0.0, "red"), (0.1, "white"), (0.6, "red")]
    assert shaded_stops(get_gradient("bar-tube"), "blue") == [
        (0.3, "blue"),
        (0.43, "white"),
        (1.0, "blue"),
    ]


def test_floor_ramp_is_fixed_gray():
    stops = shaded_stops(get_gradient("bar-floor"), "red")
    assert [c for _, c in stops] == ["#DDD", "#BBB", "#CCC", "#EEE", "#DDD", "#CCC"]


def test_apply_stops_by_id():
    grad = RecordingGradient("radial", (0, 0, 1, 0, 0, 2))
    assert apply_stops(grad, "lid", "lime") is grad
    assert grad.stops == [(0.0, "white"), (1.0, "lime")]


@pytest.mark.parametrize(
    "gradient",
    [
        GradientDef(id="one", kind="linear", stops=(GradientStop(0.2, "#123456"),)),
        GradientDef(id="has space", kind="linear", stops=(GradientStop(0, "a"), GradientStop(1, "b"))),
        GradientDef(id="conic", kind="conic", stops=(GradientStop(0, "a"), GradientStop(1, "b"))),
        GradientDef(id="order", kind="linear", stops=(GradientStop(0.5, "a"), GradientStop(0.1, "b"))),
        GradientDef(id="range", kind="linear", stops=(GradientStop(0, "a"), GradientStop(1.5, "b"))),
        GradientDef(id="blank", kind="linear", stops=(GradientStop(0, "a"), GradientStop(1, " "))),
    ],
)
def test_invalid_gradients_rejected(gradient):
    with pytest.raises(ValueError):
        validate_gradient(gradient)


def test_register_custom_gradient():
    register_gradient(
        GradientDef(
            id="test-custom",
            kind="linear",
            stops=(GradientStop(0.0, SERIES_COLOR), GradientStop(1.0, "black")),
        )
    )
    grad = apply_stops(RecordingGradient("linear", (0, 0, 1, 1)), "test-custom", "red")
    assert grad.stops == [(0.0, "red"), (1.0, "black")]
