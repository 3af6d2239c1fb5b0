import pytest

from chromodels import (
    ColorModel,
    RgbColor,
    HsbColor,
    HslColor,
    HsiColor,
    HspColor,
    CmykColor,
    LabColor,
    XyzColor,
    OklabColor,
    cast,
    get_color_class,
)
from chromodels.colors import unified_space_to_class
from chromodels.errors import UnknownColorSpace
from chromodels.types.color_types import ColorSpace, HUE_SPACES, is_hue_space


def test_registry_covers_every_space():
    assert set(unified_space_to_class) == set(ColorSpace)
    for space, cls in unified_space_to_class.items():
        assert cls.mode == space


@pytest.mark.parametrize(
    "space, cls",
    [
        ("rgb", RgbColor),
        ("HSB", HsbColor),
        (ColorSpace.HSL, HslColor),
        ("hsi", HsiColor),
        ("hsp", HspColor),
        ("cmyk", CmykColor),
        ("lab", LabColor),
        ("xyz", XyzColor),
        ("oklab", OklabColor),
    ],
)
def test_get_color_class(space, cls):
    assert get_color_class(space) is cls


@pytest.mark.parametrize("space", ["hsv", "", "rgba", None, 3])
def test_unknown_space(space):
    with pytest.raises(UnknownColorSpace):
        get_color_class(space)
    with pytest.raises(UnknownColorSpace):
        cast(RgbColor(0, 0, 0), space)


def test_cast_returns_concrete_class_and_keeps_alpha():
    source = HsbColor(200, 60, 80, 17)
    for space in ColorSpace:
        result = cast(source, space)
        assert type(result) is get_color_class(space)
        assert result.alpha == 17
        assert isinstance(result, ColorModel)


def test_cast_to_same_space_returns_same_instance():
    color = LabColor(50, 10, 10)
    assert cast(color, "lab") is color


def test_to_shortcuts():
    red = RgbColor(255, 0, 0)
    assert type(red.to_hsb()) is HsbColor
    assert type(red.to_hsl()) is HslColor
    assert type(red.to_hsi()) is HsiColor
    assert type(red.to_hsp()) is HspColor
    assert type(red.to_cmyk()) is CmykColor
    assert type(red.to_lab()) is LabColor
    assert type(red.to_xyz()) is XyzColor
    assert type(red.to_oklab()) is OklabColor


def test_lab_and_xyz_skip_rgb_clipping():
    # a LAB color outside sRGB survives a trip through XYZ but not through RGB
    vivid = LabColor(60, -110, 60)
    assert vivid.to_xyz().to_lab().is_close(vivid, tolerance=1e-6)
    assert not vivid.to_rgb().to_lab().is_close(vivid, tolerance=1)


def test_from_color_and_from_rgb():
    rgb = RgbColor(0, 0, 255, 99)
    assert HsbColor.from_color(rgb) == HsbColor(240, 100, 100, 99)
    assert HslColor.from_rgb(HsbColor(240, 100, 100, 99)) == HslColor(240, 100, 50, 99)


def test_hue_spaces():
    assert HUE_SPACES == {ColorSpace.HSB, ColorSpace.HSL, ColorSpace.HSI, ColorSpace.HSP}
    assert is_hue_space("hsl")
    assert not is_hue_space(ColorSpace.LAB)
