"""Channel range checks shared by every color model."""
from __future__ import annotations
import math
from numbers import Integral, Real
from typing import Sequence, Tuple

from boundednumbers.functions import clamp, cyclic_wrap_float

from ..errors import ArityMismatch, RangeViolation
from ..types.channel_types import ALPHA, HUE_360, Channel


def validate_channel(channel: Channel, value: float, mode: str | None = None) -> float:
    """
    Check that ``value`` is a real number inside ``channel``'s bounds.

    Args:
        channel: Channel descriptor carrying the bounds
        value: Candidate value
        mode: Color space name used in the error message

    Returns:
        The value, unchanged

    Raises:
        RangeViolation: if the value is not a finite real inside the bounds
    """
    if isinstance(value, bool) or not isinstance(value, Real) or math.isnan(value):
        raise RangeViolation(channel.name, value, channel.lower, channel.upper, mode)
    if not channel.contains(value):
        raise RangeViolation(channel.name, value, channel.lower, channel.upper, mode)
    return value


def validate_alpha(alpha: int, mode: str | None = None) -> int:
    """Alpha must be an integer in [0, 255]."""
    if isinstance(alpha, float) and alpha.is_integer():
        alpha = int(alpha)
    if isinstance(alpha, bool) or not isinstance(alpha, Integral):
        raise RangeViolation(ALPHA.name, alpha, ALPHA.lower, ALPHA.upper, mode)
    validate_channel(ALPHA, alpha, mode)
    return int(alpha)


def validate_values(
    channels: Sequence[Channel],
    values: Sequence[float],
    mode: str | None = None,
) -> Tuple[float, ...]:
    if len(values) != len(channels):
        raise ArityMismatch(str(mode), (len(channels),), len(values))
    return tuple(validate_channel(c, v, mode) for c, v in zip(channels, values))


def validate_opacity(opacity: float) -> float:
    if isinstance(opacity, bool) or not isinstance(opacity, Real) or not 0.0 <= opacity <= 1.0:
        raise RangeViolation("opacity", opacity, 0.0, 1.0)
    return opacity


def fit_channel(channel: Channel, value: float) -> float:
    """
    Bring a computed value back inside the channel bounds.

    Used on conversion and interpolation outputs only, where floating point
    drift can leave a value a few ulps outside its range. Cyclic channels wrap.
    """
    if channel.cyclic:
        return float(cyclic_wrap_float(value, 0.0, float(HUE_360)))
    return float(clamp(value, channel.lower, channel.upper))


def fit_values(channels: Sequence[Channel], values: Sequence[float]) -> Tuple[float, ...]:
    return tuple(fit_channel(c, v) for c, v in zip(channels, values))


def round_alpha(alpha: float) -> int:
    return int(clamp(round(alpha), ALPHA.lower, ALPHA.upper))
