from __future__ import annotations
import math
from typing import Any, Callable, ClassVar, Dict, List, Optional, Sequence, Tuple, TYPE_CHECKING

import numpy as np

from ..errors import ArityMismatch, InvalidAdjustment, InvalidRandomRange, RangeViolation
from ..types.channel_types import ALPHA, ALPHA_MAX, COOL_HUE, WARM_HUE, Channel, hue_index
from ..types.color_types import HUE_SPACES, ChannelValues, ColorSpace, ScalarVector
from ..utils.hex_codec import format_hex, pack_argb, parse_hex, unpack_argb
from ..utils.interpolation import (
    HueMode,
    as_hue_mode,
    hue_delta,
    hue_lerp,
    lerp,
    lerp_positions,
    validate_step,
    wrap_hue,
)
from ..utils.validation import (
    fit_values,
    round_alpha,
    validate_alpha,
    validate_channel,
    validate_opacity,
    validate_values,
)

if TYPE_CHECKING:
    from .rgb import RgbColor

# Bounds accepted by extrapolate()
UNIT_CHANNEL = Channel("unit", 0.0, 1.0)

# RGB channel spread below which an inverse counts as gray
ACHROMATIC_EPS = 1e-9


class ColorModel:
    """
    Immutable color value in one color space.

    Concrete models fix ``mode`` and ``channels``. Every operation that
    produces a new color returns an instance of the receiver's class, whatever
    model its operands came from.
    """
    __slots__ = ('_value', '_alpha', '_is_frozen')  # prevents adding new attributes → immutability

    mode:     ClassVar[ColorSpace]
    channels: ClassVar[Tuple[Channel, ...]]

    # assigned in colors/color.py
    to: Callable[[ColorModel, ColorSpace | str], ColorModel]

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, value: ChannelValues, alpha: int = ALPHA_MAX) -> None:
        values = validate_values(self.channels, tuple(value), self.mode.value)
        self._value = tuple(float(v) for v in values)
        self._alpha = validate_alpha(alpha, self.mode.value)

        # freeze instance, no more writes allowed
        super().__setattr__('_is_frozen', True)

    @classmethod
    def _make(cls, values: Sequence[float], alpha: int = ALPHA_MAX):
        return cls(*values, alpha)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> ScalarVector:
        """Channel values, alpha excluded."""
        return self._value

    @property
    def alpha(self) -> int:
        return self._alpha

    @property
    def opacity(self) -> float:
        return self._alpha / ALPHA_MAX

    @property
    def num_channels(self) -> int:
        return len(self.channels)

    @property
    def has_hue(self) -> bool:
        """Check if this color space includes a hue channel."""
        return self.mode in HUE_SPACES

    @property
    def red(self) -> float:
        return self.to_rgb().value[0]

    @property
    def green(self) -> float:
        return self.to_rgb().value[1]

    @property
    def blue(self) -> float:
        return self.to_rgb().value[2]

    @property
    def argb(self) -> int:
        """The color packed as a 32-bit ARGB integer."""
        return self.to_argb()

    # ------------------ VALUE SEMANTICS ------------------
    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, ColorModel):
            return NotImplemented
        return self.mode == other.mode and self._value == other._value and self._alpha == other._alpha

    def __hash__(self) -> int:
        return hash((self.mode, self._value, self._alpha))

    def __repr__(self) -> str:
        fields = ", ".join(f"{c.name}={v!r}" for c, v in zip(self.channels, self._value))
        return f"{self.__class__.__name__}({fields}, alpha={self._alpha})"

    def is_close(self, other: ColorModel, tolerance: float = 1e-6) -> bool:
        """
        Compare with ``other`` in this color's model, channel by channel.

        Hue differences are measured around the wheel, so 359.9 is close to 0.
        Alpha must match exactly.
        """
        other = self.convert(other)
        if self._alpha != other._alpha:
            return False
        for channel, a, b in zip(self.channels, self._value, other._value):
            diff = abs(hue_delta(a, b)) if channel.cyclic else abs(a - b)
            if diff > tolerance:
                return False
        return True

    # ------------------ CHANNEL REPLACEMENT ------------------
    def _with(self, index: int, value: float):
        values = list(self._value)
        values[index] = value
        return self._make(values, self._alpha)

    def with_channel(self, name: str, value: float):
        """Return a copy with the channel called ``name`` replaced."""
        for i, channel in enumerate(self.channels):
            if channel.name == name:
                return self._with(i, value)
        raise KeyError(f"{self.mode.value} has no channel named {name!r}")

    def _with_rgb(self, index: int, value: float):
        rgb = self.to_rgb()
        validate_channel(rgb.channels[index], value, rgb.mode.value)
        return rgb._with(index, value).to(self.mode)

    def with_red(self, red: float):
        """Replace the red channel in RGB and convert back to this model."""
        return self._with_rgb(0, red)

    def with_green(self, green: float):
        return self._with_rgb(1, green)

    def with_blue(self, blue: float):
        return self._with_rgb(2, blue)

    def with_alpha(self, alpha: int):
        return self._make(self._value, alpha)

    def with_opacity(self, opacity: float):
        """Set alpha from a fraction in [0, 1]; alpha = round(opacity * 255)."""
        return self.with_alpha(round(validate_opacity(opacity) * ALPHA_MAX))

    # ------------------ CONVERSION ------------------
    def to_rgb(self) -> RgbColor:
        return self.to(ColorSpace.RGB)  # type: ignore[return-value]

    def to_hsb(self):
        return self.to(ColorSpace.HSB)

    def to_hsl(self):
        return self.to(ColorSpace.HSL)

    def to_hsi(self):
        return self.to(ColorSpace.HSI)

    def to_hsp(self):
        return self.to(ColorSpace.HSP)

    def to_cmyk(self):
        return self.to(ColorSpace.CMYK)

    def to_lab(self):
        return self.to(ColorSpace.LAB)

    def to_xyz(self):
        return self.to(ColorSpace.XYZ)

    def to_oklab(self):
        return self.to(ColorSpace.OKLAB)

    def convert(self, other: ColorModel):
        """Return ``other`` expressed in this color's model."""
        return other.to(self.mode)

    @classmethod
    def from_color(cls, color: ColorModel):
        """Construct from a color in any model."""
        return color.to(cls.mode)

    @classmethod
    def from_rgb(cls, rgb: ColorModel):
        return rgb.to_rgb().to(cls.mode)

    def to_list(self) -> List[float]:
        """Channel values followed by alpha."""
        return [*self._value, self._alpha]

    def to_extrapolated(self) -> List[float]:
        """Channel values and alpha scaled to [0, 1]; the inverse of extrapolate()."""
        scaled = [(v - c.lower) / c.span for c, v in zip(self.channels, self._value)]
        return [*scaled, self._alpha / ALPHA_MAX]

    def _rgb8(self) -> Tuple[int, int, int]:
        r, g, b = (int(round(v)) for v in self.to_rgb().value)
        return r, g, b

    def to_argb(self) -> int:
        return pack_argb(*self._rgb8(), self._alpha)

    def to_hex(self, include_alpha: bool = False) -> str:
        """``#RRGGBB``, or ``#RRGGBBAA`` with ``include_alpha``."""
        return format_hex(*self._rgb8(), self._alpha, include_alpha=include_alpha)

    # ------------------ NAMED CONSTRUCTORS ------------------
    @classmethod
    def _split_alpha(cls, values: Sequence[float]) -> Tuple[Sequence[float], Optional[float]]:
        n = len(cls.channels)
        if len(values) not in (n, n + 1):
            raise ArityMismatch(cls.mode.value, (n, n + 1), len(values))
        return values[:n], (values[n] if len(values) == n + 1 else None)

    @classmethod
    def from_list(cls, values: Sequence[float]):
        """
        Construct from channel values in their native ranges.

        ``values`` holds exactly one value per channel, optionally followed by
        alpha (0-255, rounded).
        """
        channel_values, alpha = cls._split_alpha(list(values))
        if alpha is None:
            return cls._make(channel_values)
        validate_channel(ALPHA, alpha, cls.mode.value)
        return cls._make(channel_values, int(round(alpha)))

    @classmethod
    def extrapolate(cls, values: Sequence[float]):
        """
        Construct from values on a 0-1 scale, each stretched over its channel range.

        ``values`` holds one value per channel, optionally followed by alpha.
        """
        channel_values, alpha = cls._split_alpha(list(values))
        native = []
        for channel, unit in zip(cls.channels, channel_values):
            validate_channel(UNIT_CHANNEL._replace(name=channel.name), unit, cls.mode.value)
            native.append(channel.lower + unit * channel.span)
        native = list(fit_values(cls.channels, native))
        if alpha is None:
            return cls._make(native)
        validate_channel(UNIT_CHANNEL._replace(name=ALPHA.name), alpha, cls.mode.value)
        return cls._make(native, int(round(alpha * ALPHA_MAX)))

    @classmethod
    def from_hex(cls, hex_string: str):
        """
        Construct from a hex color.

        ``hex_string`` is case-insensitive with an optional leading ``#`` and
        holds 3, 6 or 8 (``RRGGBBAA``) digits.
        """
        r, g, b, a = parse_hex(hex_string)
        return cls._rgba8(r, g, b, a)

    @classmethod
    def from_argb(cls, argb: int):
        """Construct from a 32-bit ``0xAARRGGBB`` integer."""
        r, g, b, a = unpack_argb(argb)
        return cls._rgba8(r, g, b, a)

    @classmethod
    def _rgba8(cls, r: int, g: int, b: int, a: int):
        from .rgb import RgbColor
        return RgbColor(r, g, b, a).to(cls.mode)

    @classmethod
    def _sample(
        cls,
        bounds: Sequence[Tuple[float, float]],
        rng: Optional[np.random.Generator] = None,
    ):
        """
        Draw one value per channel uniformly from caller-supplied bounds.

        A hue range with ``min > max`` runs counter-clockwise through 0;
        otherwise the range is the clockwise arc from min to max.
        """
        rng = rng if rng is not None else np.random.default_rng()
        values = []
        for channel, (low, high) in zip(cls.channels, bounds):
            for bound in (low, high):
                try:
                    validate_channel(channel, bound, cls.mode.value)
                except RangeViolation as e:
                    raise InvalidRandomRange(str(e)) from None
            if channel.cyclic and low > high:
                span = channel.upper - low + high
                values.append(wrap_hue(low + rng.random() * span))
            elif low > high:
                raise InvalidRandomRange(
                    f"{cls.mode.value} min_{channel.name} ({low}) must be <= max_{channel.name} ({high})"
                )
            else:
                values.append(low + rng.random() * (high - low))
        return cls._make(fit_values(cls.channels, values))

    # ------------------ INTERPOLATION ------------------
    def interpolate(self, other: ColorModel, step: float, hue_mode: HueMode | str = HueMode.SHORTEST):
        """
        Blend toward ``other`` by ``step`` in this color's model.

        Args:
            other: End color in any model; converted into this model first
            step: Position in [0, 1]; 0 returns this color, 1 returns ``other``
            hue_mode: Direction around the wheel for hue channels, as a HueMode
                or one of "cw", "ccw", "shortest", "longest"

        Raises:
            InvalidStep: if ``step`` is outside [0, 1]
        """
        t = validate_step(step)
        hue_mode = as_hue_mode(hue_mode)
        end = self.convert(other)
        if t == 0:
            return self
        if t == 1:
            return end
        values = [
            hue_lerp(a, b, t, hue_mode) if channel.cyclic else lerp(a, b, t)
            for channel, a, b in zip(self.channels, self._value, end._value)
        ]
        alpha = round_alpha(lerp(self._alpha, end._alpha, t))
        return self._make(fit_values(self.channels, values), alpha)

    def lerp_to(
        self,
        other: ColorModel,
        steps: int,
        exclude_original_colors: bool = False,
        hue_mode: HueMode | str = HueMode.SHORTEST,
    ) -> list:
        """
        Produce ``steps`` evenly spaced colors between this color and ``other``.

        Without ``exclude_original_colors`` the first color is this color and
        the last is ``other``; with it, ``steps`` intermediate colors are
        returned and both originals are left out.

        Raises:
            InvalidStep: if ``steps <= 0``
        """
        return [
            self.interpolate(other, t, hue_mode)
            for t in lerp_positions(steps, exclude_original_colors)
        ]

    # ------------------ DERIVED OPERATIONS ------------------
    @property
    def inverted(self):
        """
        The RGB inverse (255 - channel) expressed in this color's model.

        Grays carry no hue, so when the inverse is achromatic the hue channel
        keeps this color's hue rotated by 180 degrees. Applying it twice
        returns the original wherever the hue is defined.
        """
        rgb = self.to_rgb()
        mirrored = [c.lower + c.upper - v for c, v in zip(rgb.channels, rgb._value)]
        result = rgb._make(mirrored, self._alpha).to(self.mode)
        index = self._hue_index()
        if index is not None and max(mirrored) - min(mirrored) <= ACHROMATIC_EPS:
            result = result._with(index, wrap_hue(self._value[index] + 180))
        return result

    @property
    def opposite(self):
        """The complementary color: hue rotated by exactly 180 degrees."""
        return self.rotate_hue(180)

    def _hue_index(self) -> Optional[int]:
        return hue_index(self.mode)

    def _via_hue_model(self, operation: Callable[[ColorModel], ColorModel]):
        # models without a hue channel borrow HSL's
        return operation(self.to(ColorSpace.HSL)).to(self.mode)

    def rotate_hue(self, amount: float):
        """Add ``amount`` degrees to the hue, wrapping into [0, 360)."""
        index = self._hue_index()
        if index is None:
            return self._via_hue_model(lambda c: c.rotate_hue(amount))
        return self._with(index, wrap_hue(self._value[index] + amount))

    def warmer(self, amount: float, relative: bool = True):
        """
        Shift the hue toward red (0 degrees) along the shorter arc.

        Args:
            amount: Percent of the remaining distance when ``relative``
                (0 < amount <= 100), otherwise degrees (> 0); the hue never
                overshoots the anchor
            relative: Interpret ``amount`` as a percentage
        """
        return self._shift_hue(WARM_HUE, amount, relative)

    def cooler(self, amount: float, relative: bool = True):
        """Shift the hue toward cyan (180 degrees); see warmer()."""
        return self._shift_hue(COOL_HUE, amount, relative)

    def _shift_hue(self, anchor: float, amount: float, relative: bool):
        if not amount > 0:
            raise InvalidAdjustment(f"amount must be > 0, got {amount!r}")
        if relative and amount > 100:
            raise InvalidAdjustment(f"relative amount must be <= 100, got {amount!r}")

        index = self._hue_index()
        if index is None:
            return self._via_hue_model(lambda c: c._shift_hue(anchor, amount, relative))

        hue = self._value[index]
        distance = hue_delta(hue, anchor)
        if relative:
            shift = distance * amount / 100
        else:
            shift = math.copysign(min(amount, abs(distance)), distance)
        return self._with(index, wrap_hue(hue + shift))


def build_registry(*classes: type[ColorModel]) -> Dict[ColorSpace, type[ColorModel]]:
    return {cls.mode: cls for cls in classes}
