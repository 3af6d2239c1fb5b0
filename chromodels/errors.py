"""
Contract violations raised by chromodels.

Every error is raised at the point of the invalid call; nothing is clamped
or retried on the caller's behalf.
"""
from __future__ import annotations
from typing import Any


class ColorModelError(ValueError):
    """Base class for all chromodels errors."""


class RangeViolation(ColorModelError):
    """A channel value lies outside the bounds its model declares."""

    def __init__(self, channel: str, value: Any, lower: float, upper: float, mode: str | None = None) -> None:
        self.channel = channel
        self.value = value
        self.lower = lower
        self.upper = upper
        self.mode = mode
        where = f"{mode} " if mode else ""
        super().__init__(
            f"{where}channel '{channel}' must be >= {lower} and <= {upper}, got {value!r}"
        )


class ArityMismatch(ColorModelError):
    """A list-based constructor received the wrong number of values."""

    def __init__(self, mode: str, expected: tuple[int, ...], actual: int) -> None:
        self.mode = mode
        self.expected = expected
        self.actual = actual
        allowed = " or ".join(str(n) for n in expected)
        super().__init__(f"{mode} expects {allowed} values, got {actual}")


class InvalidStep(ColorModelError):
    """An interpolation step or a lerp step count is outside its domain."""


class InvalidRandomRange(ColorModelError):
    """Random sampling bounds are reversed or fall outside the model range."""


class InvalidAdjustment(ColorModelError):
    """A warmer/cooler amount is not positive, or exceeds 100 in relative mode."""


class InvalidHexString(ColorModelError):
    """A hex color string is not 3, 6 or 8 hex digits after an optional '#'."""

    def __init__(self, hex_string: Any) -> None:
        self.hex_string = hex_string
        super().__init__(
            f"Invalid hex color {hex_string!r}: expected 3, 6 or 8 hex digits with an optional leading '#'"
        )


class UnknownColorSpace(ColorModelError):
    """The requested color space is not part of the supported set."""

    def __init__(self, space: Any) -> None:
        self.space = space
        super().__init__(f"Unsupported color space: {space!r}")
