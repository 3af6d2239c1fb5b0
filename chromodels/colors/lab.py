from __future__ import annotations
from typing import ClassVar, Optional, Tuple

import numpy as np

from ..types.channel_types import ALPHA_MAX, CHANNELS, PERCENT_MAX, Channel
from ..types.color_types import ColorSpace
from .color_base import ColorModel


class LabColor(ColorModel):
    """
    A color in the CIE L*a*b* color space under the D65 illuminant.

    ``lightness`` is in [0, 100]; ``a`` and ``b`` are in [-128, 127].
    LAB reaches colors outside sRGB: it converts to XYZ losslessly but is
    clipped to the sRGB gamut when converted to any other model.
    """
    mode:     ClassVar[ColorSpace] = ColorSpace.LAB
    channels: ClassVar[Tuple[Channel, ...]] = CHANNELS[ColorSpace.LAB]

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

    def with_lightness(self, lightness: float) -> LabColor:
        return self._with(0, lightness)

    def with_a(self, a: float) -> LabColor:
        return self._with(1, a)

    def with_b(self, b: float) -> LabColor:
        return self._with(2, b)

    @classmethod
    def random(
        cls,
        min_lightness: float = 0,
        max_lightness: float = PERCENT_MAX,
        min_a: float = -128,
        max_a: float = 127,
        min_b: float = -128,
        max_b: float = 127,
        rng: Optional[np.random.Generator] = None,
    ) -> LabColor:
        return cls._sample(
            (
                (min_lightness, max_lightness),
                (min_a, max_a),
                (min_b, max_b),
            ),
            rng,
        )
