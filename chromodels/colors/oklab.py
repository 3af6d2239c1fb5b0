from __future__ import annotations
from typing import ClassVar, Optional, Tuple

import numpy as np

from ..types.channel_types import ALPHA_MAX, CHANNELS, Channel
from ..types.color_types import ColorSpace
from .color_base import ColorModel


class OklabColor(ColorModel):
    """
    A color in Björn Ottosson's Oklab perceptual color space.

    ``lightness`` is in [0, 1]; ``a`` and ``b`` are in [-0.5, 0.5], which
    covers sRGB (about +-0.32) with headroom for wider-gamut values.
    """
    mode:     ClassVar[ColorSpace] = ColorSpace.OKLAB
    channels: ClassVar[Tuple[Channel, ...]] = CHANNELS[ColorSpace.OKLAB]

    def __init__(self, lightness: float, a: float, b: float, alpha: int = ALPHA_MAX) -> None:
        super().__init__((lightness, a, b), alpha)

    @property
    def lightness(self) -> float:
        return self._value[0]

    @property
    def a(self) -> float:
        return self._value[1]

    @property
    def b(self) -> float:
        return self._value[2]

    def with_lightness(self, lightness: float) -> OklabColor:
        return self._with(0, lightness)

    def with_a(self, a: float) -> OklabColor:
        return self._with(1, a)

    def with_b(self, b: float) -> OklabColor:
        return self._with(2, b)

    @classmethod
    def random(
        cls,
        min_lightness: float = 0,
        max_lightness: float = 1,
        min_a: float = -0.5,
        max_a: float = 0.5,
        min_b: float = -0.5,
        max_b: float = 0.5,
        rng: Optional[np.random.Generator] = None,
    ) -> OklabColor:
        return cls._sample(
            (
                (min_lightness, max_lightness),
                (min_a, max_a),
                (min_b, max_b),
            ),
            rng,
        )
