from chromodels.conversions import (
    unit_rgb_to_hsb,
    unit_rgb_to_hsl,
    unit_rgb_to_hsi,
    unit_rgb_to_hsp,
    unit_rgb_to_cmyk,
    unit_rgb_to_xyz,
    unit_rgb_to_lab,
    unit_rgb_to_oklab,
    perceived_brightness,
)
from chromodels.samples import (
    samples_rgb_hsb,
    samples_rgb_hsl,
    samples_rgb_hsi,
    samples_rgb_hsp,
    samples_rgb_cmyk,
    samples_rgb_xyz,
    samples_rgb_lab,
    samples_rgb_oklab,
    rgb_grid,
)


def _assert_hue_model(func, samples, tol=1e-9):
    for (r, g, b), (h_exp, s_exp, x_exp) in samples.items():
        h, s, x = func(r, g, b)
        assert abs(h - h_exp) < 1e-6, (r, g, b)
        assert abs(s - s_exp) < tol, (r, g, b)
        assert abs(x - x_exp) < tol, (r, g, b)


def test_unit_rgb_to_hsb():
    _assert_hue_model(unit_rgb_to_hsb, samples_rgb_hsb)


def test_unit_rgb_to_hsl():
    _assert_hue_model(unit_rgb_to_hsl, samples_rgb_hsl)


def test_unit_rgb_to_hsi():
    _assert_hue_model(unit_rgb_to_hsi, samples_rgb_hsi)


def test_unit_rgb_to_hsp():
    _assert_hue_model(unit_rgb_to_hsp, samples_rgb_hsp)


def test_unit_rgb_to_cmyk():
    for (r, g, b), expected in samples_rgb_cmyk.items():
        result = unit_rgb_to_cmyk(r, g, b)
        assert all(abs(a - e) < 1e-9 for a, e in zip(result, expected)), (r, g, b)


def test_unit_rgb_to_xyz():
    for (r, g, b), expected in samples_rgb_xyz.items():
        result = unit_rgb_to_xyz(r, g, b)
        assert all(abs(a - e) < 1e-3 for a, e in zip(result, expected)), (r, g, b)


def test_unit_rgb_to_lab():
    for (r, g, b), expected in samples_rgb_lab.items():
        result = unit_rgb_to_lab(r, g, b)
        assert all(abs(a - e) < 1e-2 for a, e in zip(result, expected)), (r, g, b)


def test_unit_rgb_to_oklab():
    for (r, g, b), expected in samples_rgb_oklab.items():
        result = unit_rgb_to_oklab(r, g, b)
        assert all(abs(a - e) < 1e-3 for a, e in zip(result, expected)), (r, g, b)


def test_hues_are_in_range():
    for func in (unit_rgb_to_hsb, unit_rgb_to_hsl, unit_rgb_to_hsi, unit_rgb_to_hsp):
        for r, g, b in rgb_grid(5):
            h, s, x = func(r, g, b)
            assert 0 <= h < 360
            assert -1e-12 <= s <= 1 + 1e-12
            assert -1e-12 <= x <= 1 + 1e-12


def test_achromatic_hue_is_zero():
    for v in (0.0, 0.25, 0.5, 1.0):
        assert unit_rgb_to_hsb(v, v, v)[0] == 0.0
        assert unit_rgb_to_hsl(v, v, v)[0] == 0.0
        assert unit_rgb_to_hsi(v, v, v)[0] == 0.0
        assert unit_rgb_to_hsp(v, v, v)[0] == 0.0


def test_perceived_brightness_weights():
    assert abs(perceived_brightness(1, 1, 1) - 1.0) < 1e-12
    assert abs(perceived_brightness(1, 0, 0) ** 2 - 0.299) < 1e-12
    assert abs(perceived_brightness(0, 1, 0) ** 2 - 0.587) < 1e-12
    assert abs(perceived_brightness(0, 0, 1) ** 2 - 0.114) < 1e-12


def test_lab_lightness_matches_relative_luminance():
    # L* = 116 * Y^(1/3) - 16 above the linear toe
    _, y, _ = unit_rgb_to_xyz(0.5, 0.5, 0.5)
    lightness, a, b = unit_rgb_to_lab(0.5, 0.5, 0.5)
    assert abs(lightness - (116 * (y / 100) ** (1 / 3) - 16)) < 1e-9
    assert abs(a) < 1e-3
    assert abs(b) < 1e-3
