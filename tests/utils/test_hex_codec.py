import pytest

from chromodels.errors import InvalidHexString, RangeViolation
from chromodels.utils.hex_codec import format_hex, pack_argb, parse_hex, unpack_argb


def test_parse_hex_forms():
    assert parse_hex("#F00") == (255, 0, 0, 255)
    assert parse_hex("f00") == (255, 0, 0, 255)
    assert parse_hex("#1a2B3c") == (0x1A, 0x2B, 0x3C, 255)
    assert parse_hex("#11223380") == (0x11, 0x22, 0x33, 0x80)
    assert parse_hex("  #abc  ") == (0xAA, 0xBB, 0xCC, 255)


@pytest.mark.parametrize(
    "bad",
    ["", "#", "#12", "#1234", "#12345", "#1234567", "#123456789", "#GGGGGG", "##FFF", "0xFFFFFF", None, 0xFF0000],
)
def test_parse_hex_rejects(bad):
    with pytest.raises(InvalidHexString):
        parse_hex(bad)


def test_invalid_hex_keeps_input():
    with pytest.raises(InvalidHexString) as exc:
        parse_hex("#12345")
    assert exc.value.hex_string == "#12345"
    assert "3, 6 or 8 hex digits" in str(exc.value)


def test_format_hex():
    assert format_hex(255, 0, 0) == "#FF0000"
    assert format_hex(10, 11, 12, 128) == "#0A0B0C"
    assert format_hex(10, 11, 12, 128, include_alpha=True) == "#0A0B0C80"


def test_hex_round_trip():
    for text in ("#000000", "#FFFFFF", "#7F3A10", "#C0FFEE"):
        r, g, b, a = parse_hex(text)
        assert format_hex(r, g, b, a) == text
    r, g, b, a = parse_hex("#01020304")
    assert format_hex(r, g, b, a, include_alpha=True) == "#01020304"


def test_pack_argb_bit_layout():
    assert pack_argb(0x12, 0x34, 0x56, 0x78) == 0x78123456
    assert pack_argb(255, 0, 0) == 0xFFFF0000
    assert pack_argb(0, 0, 0, 0) == 0


def test_unpack_argb():
    assert unpack_argb(0x78123456) == (0x12, 0x34, 0x56, 0x78)
    assert unpack_argb(0xFFFFFFFF) == (255, 255, 255, 255)
    assert unpack_argb(0) == (0, 0, 0, 0)


@pytest.mark.parametrize("bad", [-1, 0x100000000, 1.5, True, "0xFF000000"])
def test_unpack_argb_out_of_range(bad):
    with pytest.raises(RangeViolation, match="argb"):
        unpack_argb(bad)
