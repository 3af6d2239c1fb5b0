from __future__ import annotations
from typing import ClassVar, Optional, Tuple

import numpy as np

from ..types.channel_types import ALPHA_MAX, CHANNELS, HUE_360, PERCENT_MAX, Channel
from ..types.color_types import ColorSpace
from .color_base import ColorModel


class HspColor(ColorModel):
    """
    A color in the HSP (hue, saturation, perceived brightness) color space.

    Perceived brightness weighs the RGB channels .299/.587/.114 as a quadratic
    mean, so equal brightness looks equally bright across hues.
    """
    mode:     ClassVar[ColorSpace] = ColorSpace.HSP
    channels: ClassVar[Tuple[Channel, ...]] = CHANNELS[ColorSpace.HSP]

    def __init__(
        self,
        hue: float,
        saturation: float,
        perceived_brightness: float,
        alpha: int = ALPHA_MAX,
    ) -> None:
        super().__init__((hue, saturation, perceived_brightness), alpha)

    @property
    def hue(self) -> float:
        return self._value[0]

    @property
    def saturation(self) -> float:
        return self._value[1]

    @property
    def perceived_brightness(self) -> float:
        return self._value[2]

    def with_hue(self, hue: float) -> HspColor:
        return self._with(0, hue)

    def with_saturation(self, saturation: float) -> HspColor:
        return self._with(1, saturation)

    def with_perceived_brightness(self, perceived_brightness: float) -> HspColor:
        return self._with(2, perceived_brightness)

    @classmethod
    def random(
        cls,
        min_hue: float = 0,
        max_hue: float = HUE_360,
        min_saturation: float = 0,
        max_saturation: float = PERCENT_MAX,
        min_perceived_brightness: float = 0,
        max_perceived_brightness: float = PERCENT_MAX,
        rng: Optional[np.random.Generator] = None,
    ) -> HspColor:
        return cls._sample(
            (
                (min_hue, max_hue),
                (min_saturation, max_saturation),
                (min_perceived_brightness, max_perceived_brightness),
            ),
            rng,
        )
