"""
Scalar interpolation primitives.

Linear channels interpolate as ``a * (1 - t) + b * t`` so both endpoints are
reproduced exactly. Hue channels interpolate around the color wheel in one of
four directions (see HueMode); the default takes the shorter arc.
"""
from __future__ import annotations
from enum import IntEnum
from numbers import Real
from typing import List, Union

from boundednumbers.functions import cyclic_wrap_float

from ..errors import InvalidStep
from ..types.channel_types import HUE_360


class HueMode(IntEnum):
    """
    Hue interpolation modes for cyclical channels.

    CW:       Clockwise (increasing hue direction)
    CCW:      Counterclockwise (decreasing hue direction)
    SHORTEST: Shortest path (<=180 degree arc) - the default
    LONGEST:  Longest path (>=180 degree arc)
    """
    CW = 0
    CCW = 1
    SHORTEST = 2
    LONGEST = 3


_DIRECTION_NAMES = {
    'cw': HueMode.CW,
    'clockwise': HueMode.CW,
    'ccw': HueMode.CCW,
    'counterclockwise': HueMode.CCW,
    'shortest': HueMode.SHORTEST,
    'longest': HueMode.LONGEST,
}


def as_hue_mode(mode: Union[HueMode, str, None]) -> HueMode:
    """Accept a HueMode, one of its lower-case direction names, or None (shortest)."""
    if mode is None:
        return HueMode.SHORTEST
    if isinstance(mode, HueMode):
        return mode
    if isinstance(mode, str) and mode.lower() in _DIRECTION_NAMES:
        return _DIRECTION_NAMES[mode.lower()]
    raise ValueError(f"Invalid hue direction: {mode!r}")


def validate_step(t: float) -> float:
    if isinstance(t, bool) or not isinstance(t, Real) or not 0.0 <= t <= 1.0:
        raise InvalidStep(f"Interpolation step must be >= 0 and <= 1, got {t!r}")
    return float(t)


def validate_steps(steps: int) -> int:
    if isinstance(steps, bool) or not isinstance(steps, int) or steps <= 0:
        raise InvalidStep(f"steps must be a positive integer, got {steps!r}")
    return steps


def lerp(a: float, b: float, t: float) -> float:
    return a * (1.0 - t) + b * t


def wrap_hue(hue: float) -> float:
    """Normalize any angle in degrees into [0, 360)."""
    return float(cyclic_wrap_float(hue, 0.0, float(HUE_360)))


def hue_delta(h0: float, h1: float, mode: HueMode = HueMode.SHORTEST) -> float:
    """
    Signed angular distance travelled from ``h0`` to ``h1`` in the given mode.

    SHORTEST returns a value in [-180, 180); LONGEST the complementary arc.
    """
    cw = wrap_hue(h1 - h0)  # [0, 360)
    if mode == HueMode.CW:
        return cw
    if mode == HueMode.CCW:
        return cw - HUE_360 if cw > 0 else 0.0
    shortest = cw - HUE_360 if cw >= HUE_360 / 2 else cw
    if mode == HueMode.SHORTEST:
        return shortest
    if shortest == 0:
        return 0.0
    return shortest - HUE_360 if shortest > 0 else shortest + HUE_360


def hue_lerp(h0: float, h1: float, t: float, mode: HueMode = HueMode.SHORTEST) -> float:
    """
    Interpolate two hues in degrees.

    Endpoints come back as given (360 stays 360); in-between results lie in
    [0, 360).
    """
    if t == 0:
        return float(h0)
    if t == 1:
        return float(h1)
    return wrap_hue(h0 + hue_delta(h0, h1, mode) * t)


def lerp_positions(steps: int, exclude_original_colors: bool = False) -> List[float]:
    """
    Interpolation positions for an N-step sequence.

    With ``exclude_original_colors`` the positions are i / (steps + 1) for
    i = 1..steps. Otherwise both endpoints are included and the ``steps``
    positions are evenly spaced over [0, 1]; a single step yields [0.0].
    """
    validate_steps(steps)
    if exclude_original_colors:
        return [i / (steps + 1) for i in range(1, steps + 1)]
    if steps == 1:
        return [0.0]
    return [i / (steps - 1) for i in range(steps)]
