import pytest

from chromodels.conversions import convert, to_unit_rgb, from_unit_rgb
from chromodels.conversions.wrapper import normalize, scale
from chromodels.errors import UnknownColorSpace
from chromodels.types.color_types import ColorSpace


def test_convert_rgb_to_hsb():
    h, s, b = convert((255, 0, 0), "rgb", "hsb")
    assert (h, s, b) == (0.0, 100.0, 100.0)


def test_convert_accepts_enum_and_upper_case():
    assert convert((0, 255, 0), ColorSpace.RGB, "HSL") == convert((0, 255, 0), "rgb", ColorSpace.HSL)


def test_convert_same_space_is_identity():
    values = (12.5, 40.0, 60.0)
    assert convert(values, "hsb", "hsb") == values


def test_convert_between_two_non_rgb_models():
    # pure red in HSB is pure red in CMYK
    c, m, y, k = convert((0, 100, 100), "hsb", "cmyk")
    assert abs(c) < 1e-9 and abs(m - 100) < 1e-9 and abs(y - 100) < 1e-9 and abs(k) < 1e-9


def test_convert_unknown_space():
    with pytest.raises(UnknownColorSpace, match="Unsupported color space"):
        convert((0, 0, 0), "rgb", "hsv")
    with pytest.raises(UnknownColorSpace):
        convert((0, 0, 0), "yuv", "rgb")


def test_unknown_space_is_a_value_error():
    with pytest.raises(ValueError):
        to_unit_rgb((0, 0, 0), "ycbcr")


def test_routing_is_logged(chromodels_debug):
    convert((50, 20, 30), "lab", "xyz")
    convert((50, 20, 30), "lab", "hsl")
    assert "Converting lab -> xyz through XYZ" in chromodels_debug.text
    assert "Converting lab -> hsl through sRGB" in chromodels_debug.text


def test_to_and_from_unit_rgb():
    assert to_unit_rgb((255, 51, 0), "rgb") == (1.0, 0.2, 0.0)
    assert to_unit_rgb((0, 100, 50), "hsl") == (1.0, 0.0, 0.0)
    h, s, v = from_unit_rgb((1.0, 0.5, 0.0), "hsb")
    assert (h, s, v) == (30.0, 100.0, 100.0)


def test_normalize_and_scale_use_channel_units():
    assert normalize((180, 50, 25), ColorSpace.HSB) == (180.0, 0.5, 0.25)
    assert scale((180, 0.5, 0.25), ColorSpace.HSB) == (180.0, 50.0, 25.0)
    # LAB is already native
    assert normalize((50, -20, 30), ColorSpace.LAB) == (50.0, -20.0, 30.0)


def test_scale_fits_drift_into_bounds():
    h, s, v = scale((360.0, 1.0000000001, -1e-12), ColorSpace.HSB)
    assert h == 0.0
    assert s == 100.0
    assert v == 0.0
