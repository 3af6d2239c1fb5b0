from __future__ import annotations
from typing import ClassVar, Optional, Tuple

import numpy as np

from ..types.channel_types import ALPHA_MAX, CHANNELS, HUE_360, PERCENT_MAX, Channel
from ..types.color_types import ColorSpace
from .color_base import ColorModel


class HsbColor(ColorModel):
    """
    A color in the HSB (hue, saturation, brightness) color space, also known as HSV.

    ``hue`` must be >= 0 and <= 360; ``saturation`` and ``brightness`` must
    both be >= 0 and <= 100. ``alpha`` is an integer 0-255, opaque by default.
    """
    mode:     ClassVar[ColorSpace] = ColorSpace.HSB
    channels: ClassVar[Tuple[Channel, ...]] = CHANNELS[ColorSpace.HSB]

    def __init__(self, hue: float, saturation: float, brightness: float, alpha: int = ALPHA_MAX) -> None:
        super().__init__((hue, saturation, brightness), alpha)

    @property
    def hue(self) -> float:
        return self._value[0]

    @property
    def saturation(self) -> float:
        return self._value[1]

    @property
    def brightness(self) -> float:
        return self._value[2]

    def with_hue(self, hue: float) -> HsbColor:
        return self._with(0, hue)

    def with_saturation(self, saturation: float) -> HsbColor:
        return self._with(1, saturation)

    def with_brightness(self, brightness: float) -> HsbColor:
        return self._with(2, brightness)

    @classmethod
    def random(
        cls,
        min_hue: float = 0,
        max_hue: float = HUE_360,
        min_saturation: float = 0,
        max_saturation: float = PERCENT_MAX,
        min_brightness: float = 0,
        max_brightness: float = PERCENT_MAX,
        rng: Optional[np.random.Generator] = None,
    ) -> HsbColor:
        """
        Generate an HsbColor at random.

        ``min_hue`` and ``max_hue`` constrain the hue. If ``min_hue < max_hue``
        the range runs clockwise between the two; if ``min_hue > max_hue`` it
        runs counter-clockwise through 0. Both must be in [0, 360].

        The other bounds must satisfy ``min <= max`` and lie in [0, 100].
        """
        return cls._sample(
            (
                (min_hue, max_hue),
                (min_saturation, max_saturation),
                (min_brightness, max_brightness),
            ),
            rng,
        )
