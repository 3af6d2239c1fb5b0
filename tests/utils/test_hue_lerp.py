import pytest

from chromodels.errors import InvalidStep
from chromodels.utils.interpolation import (
    HueMode,
    as_hue_mode,
    hue_delta,
    hue_lerp,
    lerp,
    lerp_positions,
    validate_step,
    wrap_hue,
)


def test_wrap_hue():
    assert wrap_hue(0) == 0.0
    assert wrap_hue(360) == 0.0
    assert wrap_hue(370) == 10.0
    assert wrap_hue(-90) == 270.0
    assert wrap_hue(720.5) == 0.5


def test_hue_delta_modes():
    assert hue_delta(350, 10, HueMode.SHORTEST) == 20
    assert hue_delta(10, 350, HueMode.SHORTEST) == -20
    assert hue_delta(350, 10, HueMode.CW) == 20
    assert hue_delta(350, 10, HueMode.CCW) == -340
    assert hue_delta(350, 10, HueMode.LONGEST) == -340
    assert hue_delta(10, 350, HueMode.LONGEST) == 340
    assert hue_delta(40, 40, HueMode.LONGEST) == 0.0
    assert hue_delta(40, 40, HueMode.CCW) == 0.0


def test_hue_delta_shortest_is_at_most_half_turn():
    for h0 in range(0, 360, 15):
        for h1 in range(0, 360, 15):
            d = hue_delta(h0, h1)
            assert -180 <= d < 180
            assert wrap_hue(h0 + d) == pytest.approx(wrap_hue(h1))


def test_hue_lerp_shortest_crosses_zero():
    assert hue_lerp(350, 10, 0.5) == 0.0
    assert hue_lerp(10, 350, 0.25) == 5.0
    assert hue_lerp(350, 10, 0.25) == 355.0


def test_hue_lerp_other_modes():
    assert hue_lerp(0, 90, 0.5, HueMode.CW) == 45.0
    assert hue_lerp(0, 90, 0.5, HueMode.CCW) == 225.0
    assert hue_lerp(0, 90, 0.5, HueMode.LONGEST) == 225.0


def test_hue_lerp_endpoints_exact():
    assert hue_lerp(123.4, 300.1, 0) == 123.4
    assert hue_lerp(123.4, 300.1, 1) == 300.1


def test_hue_lerp_endpoints_are_not_wrapped():
    assert hue_lerp(360, 10, 0) == 360.0
    assert hue_lerp(10, 360, 1) == 360.0
    assert hue_lerp(360, 10, 0.5) == 5.0


def test_lerp_endpoints_exact():
    a, b = 0.1, 0.7
    assert lerp(a, b, 0.0) == a
    assert lerp(a, b, 1.0) == b
    assert lerp(0, 100, 0.25) == 25.0


@pytest.mark.parametrize("bad", [-0.01, 1.01, float("nan"), "0.5", None, True])
def test_validate_step_rejects(bad):
    with pytest.raises(InvalidStep):
        validate_step(bad)


def test_lerp_positions():
    assert lerp_positions(3) == [0.0, 0.5, 1.0]
    assert lerp_positions(1) == [0.0]
    assert lerp_positions(3, exclude_original_colors=True) == [0.25, 0.5, 0.75]
    assert lerp_positions(1, exclude_original_colors=True) == [0.5]


@pytest.mark.parametrize("bad", [0, -1, 2.0, True])
def test_lerp_positions_invalid_steps(bad):
    with pytest.raises(InvalidStep):
        lerp_positions(bad)


def test_as_hue_mode():
    assert as_hue_mode(None) == HueMode.SHORTEST
    assert as_hue_mode("cw") == HueMode.CW
    assert as_hue_mode("Clockwise") == HueMode.CW
    assert as_hue_mode("counterclockwise") == HueMode.CCW
    assert as_hue_mode(HueMode.LONGEST) == HueMode.LONGEST
    with pytest.raises(ValueError, match="Invalid hue direction"):
        as_hue_mode("sideways")
