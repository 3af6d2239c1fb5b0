import numpy as np
import pytest

from chromodels import HsbColor, RgbColor, HsvColor
from chromodels.errors import InvalidRandomRange, RangeViolation


def _hsb_grid():
    for hue in range(0, 361, 30):
        for saturation in (0, 25, 50, 75, 100):
            for brightness in (0, 25, 50, 75, 100):
                for alpha in (0, 128, 255):
                    yield HsbColor(hue, saturation, brightness, alpha)


def test_round_trip_through_rgb_within_one_unit():
    for color in _hsb_grid():
        back = HsbColor.from_rgb(color.to_rgb())
        assert back.alpha == color.alpha
        if color.saturation == 0 or color.brightness == 0:
            # achromatic colors have no hue; compare what they look like
            assert np.allclose(back.to_rgb().value, color.to_rgb().value, atol=1e-9)
            assert abs(back.brightness - color.brightness) <= 1
        else:
            assert back.is_close(color, tolerance=1)


def test_interpolation_endpoints():
    x = HsbColor(40, 20, 90, 10)
    y = HsbColor(300, 80, 30, 250)
    assert x.interpolate(y, 0.0) == x
    assert x.interpolate(y, 1.0) == y


def test_interpolation_endpoints_keep_hue_360():
    x = HsbColor(360, 50, 50)
    y = HsbColor(20, 80, 30)
    assert x.interpolate(y, 0.0) == x
    assert y.interpolate(x, 1.0) == x
    assert x.interpolate(y, 0.5).hue == 10.0


def test_interpolation_takes_the_short_arc():
    a = HsbColor(350, 100, 100)
    b = HsbColor(10, 100, 100)
    mid = a.interpolate(b, 0.5)
    assert mid.hue == 0.0
    assert b.interpolate(a, 0.5).hue == 0.0


def test_lerp_to_includes_originals():
    x = HsbColor(0, 100, 100)
    y = HsbColor(120, 50, 50)
    colors = x.lerp_to(y, 3)
    assert len(colors) == 3
    assert colors[0] == x
    assert colors[-1] == y
    assert colors[1].is_close(HsbColor(60, 75, 75))


def test_lerp_to_excludes_originals():
    x = HsbColor(0, 100, 100)
    y = HsbColor(120, 50, 50)
    colors = x.lerp_to(y, 3, exclude_original_colors=True)
    assert len(colors) == 3
    assert all(c != x and c != y for c in colors)
    assert colors[1].is_close(HsbColor(60, 75, 75))


def test_rotate_hue_inverse():
    for color in _hsb_grid():
        assert color.rotate_hue(90).rotate_hue(-90).is_close(color, tolerance=1e-9)


def test_double_inversion_is_identity():
    for color in _hsb_grid():
        twice = color.inverted.inverted
        assert twice.alpha == color.alpha
        if color.saturation == 0 or color.brightness == 0:
            assert np.allclose(twice.to_rgb().value, color.to_rgb().value, atol=1e-9)
            assert twice.hue == color.hue % 360
        else:
            assert twice.is_close(color, tolerance=1e-6)


def test_inverted_red_is_cyan():
    assert HsbColor(0, 100, 100).inverted == HsbColor(180, 100, 100)


def test_from_hex_matches_from_list():
    assert HsbColor.from_hex("#F00") == HsbColor.from_list([0, 100, 100])
    assert HsbColor.from_hex("#F00").alpha == 255


@pytest.mark.parametrize(
    "args, channel",
    [
        ((361, 50, 50), "hue"),
        ((0, -1, 50), "saturation"),
        ((0, 50, 101), "brightness"),
        ((0, 50, 50, 256), "alpha"),
    ],
)
def test_construction_rejects_out_of_range(args, channel):
    with pytest.raises(RangeViolation, match=channel) as exc:
        HsbColor(*args)
    assert exc.value.channel == channel


def test_random_hue_wraps_through_zero():
    rng = np.random.default_rng(7)
    for _ in range(500):
        color = HsbColor.random(min_hue=350, max_hue=10, rng=rng)
        assert color.hue >= 350 or color.hue <= 10
        assert 0 <= color.hue < 360


def test_random_respects_bounds():
    rng = np.random.default_rng(1)
    for _ in range(200):
        color = HsbColor.random(
            min_hue=100, max_hue=140,
            min_saturation=20, max_saturation=30,
            min_brightness=90, max_brightness=100,
            rng=rng,
        )
        assert 100 <= color.hue <= 140
        assert 20 <= color.saturation <= 30
        assert 90 <= color.brightness <= 100
        assert color.alpha == 255


def test_random_invalid_ranges():
    with pytest.raises(InvalidRandomRange):
        HsbColor.random(min_saturation=60, max_saturation=40)
    with pytest.raises(InvalidRandomRange):
        HsbColor.random(max_brightness=120)
    with pytest.raises(InvalidRandomRange):
        HsbColor.random(min_hue=-10)


def test_random_is_reproducible_with_a_seed():
    a = HsbColor.random(rng=np.random.default_rng(42))
    b = HsbColor.random(rng=np.random.default_rng(42))
    assert a == b


def test_accessors_and_with_methods():
    color = HsbColor(200, 40, 60, 100)
    assert (color.hue, color.saturation, color.brightness, color.alpha) == (200, 40, 60, 100)
    assert color.with_hue(10).hue == 10
    assert color.with_saturation(5).saturation == 5
    assert color.with_brightness(70).value == (200, 40, 70)
    assert color.with_brightness(70).alpha == 100
    with pytest.raises(RangeViolation):
        color.with_saturation(120)


def test_hsv_alias():
    assert HsvColor is HsbColor


def test_to_rgb_primary():
    assert HsbColor(120, 100, 100).to_rgb() == RgbColor(0, 255, 0)
