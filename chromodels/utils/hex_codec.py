"""Hex string and packed ARGB integer codecs for 8-bit RGBA."""
from __future__ import annotations
import re
from typing import Tuple

from ..errors import InvalidHexString, RangeViolation
from ..types.channel_types import ALPHA_MAX, RGB_MAX

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")

ARGB_MAX = 0xFFFFFFFF

RGBA8 = Tuple[int, int, int, int]


def parse_hex(hex_string: str) -> RGBA8:
    """
    Parse a CSS-style hex color.

    Accepts ``RGB``, ``RRGGBB`` and ``RRGGBBAA`` with an optional leading ``#``,
    case-insensitive. Shorthand digits are doubled (``F`` -> ``FF``). Alpha is
    255 unless the 8-digit form supplies it.

    Returns:
        (red, green, blue, alpha) as integers 0-255

    Raises:
        InvalidHexString: for anything else
    """
    if not isinstance(hex_string, str):
        raise InvalidHexString(hex_string)
    match = _HEX_RE.match(hex_string.strip())
    if match is None:
        raise InvalidHexString(hex_string)
    digits = match.group(1)
    if len(digits) == 3:
        digits = "".join(d * 2 for d in digits)
    if len(digits) == 6:
        digits += "FF"
    r, g, b, a = (int(digits[i:i + 2], 16) for i in (0, 2, 4, 6))
    return r, g, b, a


def format_hex(red: int, green: int, blue: int, alpha: int = ALPHA_MAX, include_alpha: bool = False) -> str:
    if include_alpha:
        return f"#{red:02X}{green:02X}{blue:02X}{alpha:02X}"
    return f"#{red:02X}{green:02X}{blue:02X}"


def pack_argb(red: int, green: int, blue: int, alpha: int = ALPHA_MAX) -> int:
    """Pack 8-bit channels as ``(alpha << 24) | (red << 16) | (green << 8) | blue``."""
    return ((alpha & 0xFF) << 24) | ((red & 0xFF) << 16) | ((green & 0xFF) << 8) | (blue & 0xFF)


def unpack_argb(argb: int) -> RGBA8:
    """
    Split a 32-bit ARGB integer into (red, green, blue, alpha).

    Raises:
        RangeViolation: if ``argb`` is not an integer in [0, 0xFFFFFFFF]
    """
    if isinstance(argb, bool) or not isinstance(argb, int) or not 0 <= argb <= ARGB_MAX:
        raise RangeViolation("argb", argb, 0, ARGB_MAX)
    return (
        (argb >> 16) & RGB_MAX,
        (argb >> 8) & RGB_MAX,
        argb & RGB_MAX,
        (argb >> 24) & ALPHA_MAX,
    )
