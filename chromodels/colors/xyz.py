from __future__ import annotations
from typing import ClassVar, Optional, Tuple

import numpy as np

from ..types.channel_types import ALPHA_MAX, CHANNELS, D65_X, D65_Y, D65_Z, Channel
from ..types.color_types import ColorSpace
from .color_base import ColorModel


class XyzColor(ColorModel):
    """
    A color in the CIE XYZ color space, scaled so the D65 white is
    (95.047, 100, 108.883).
    """
    mode:     ClassVar[ColorSpace] = ColorSpace.XYZ
    channels: ClassVar[Tuple[Channel, ...]] = CHANNELS[ColorSpace.XYZ]

    def __init__(self, x: float, y: float, z: float, alpha: int = ALPHA_MAX) -> None:
        super().__init__((x, y, z), alpha)

    @property
    def x(self) -> float:
        return self._value[0]

    @property
    def y(self) -> float:
        return self._value[1]

    @property
    def z(self) -> float:
        return self._value[2]

    def with_x(self, x: float) -> XyzColor:
        return self._with(0, x)

    def with_y(self, y: float) -> XyzColor:
        return self._with(1, y)

    def with_z(self, z: float) -> XyzColor:
        return self._with(2, z)

    @classmethod
    def random(
        cls,
        min_x: float = 0,
        max_x: float = D65_X,
        min_y: float = 0,
        max_y: float = D65_Y,
        min_z: float = 0,
        max_z: float = D65_Z,
        rng: Optional[np.random.Generator] = None,
    ) -> XyzColor:
        return cls._sample(((min_x, max_x), (min_y, max_y), (min_z, max_z)), rng)
