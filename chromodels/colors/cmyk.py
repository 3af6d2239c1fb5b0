from __future__ import annotations
from typing import ClassVar, Optional, Tuple

import numpy as np

from ..types.channel_types import ALPHA_MAX, CHANNELS, PERCENT_MAX, Channel
from ..types.color_types import ColorSpace
from .color_base import ColorModel


class CmykColor(ColorModel):
    """
    A color in the CMYK (cyan, magenta, yellow, black) color space.

    Every channel is in [0, 100]. Conversion from RGB always generates the
    full black plate, so a CMYK value with black not maximal (e.g. 50/50/50/0)
    comes back from RGB in its canonical form.
    """
    mode:     ClassVar[ColorSpace] = ColorSpace.CMYK
    channels: ClassVar[Tuple[Channel, ...]] = CHANNELS[ColorSpace.CMYK]

    def __init__(
        self,
        cyan: float,
        magenta: float,
        yellow: float,
        black: float,
        alpha: int = ALPHA_MAX,
    ) -> None:
        super().__init__((cyan, magenta, yellow, black), alpha)

    @property
    def cyan(self) -> float:
        return self._value[0]

    @property
    def magenta(self) -> float:
        return self._value[1]

    @property
    def yellow(self) -> float:
        return self._value[2]

    @property
    def black(self) -> float:
        return self._value[3]

    def with_cyan(self, cyan: float) -> CmykColor:
        return self._with(0, cyan)

    def with_magenta(self, magenta: float) -> CmykColor:
        return self._with(1, magenta)

    def with_yellow(self, yellow: float) -> CmykColor:
        return self._with(2, yellow)

    def with_black(self, black: float) -> CmykColor:
        return self._with(3, black)

    @classmethod
    def random(
        cls,
        min_cyan: float = 0,
        max_cyan: float = PERCENT_MAX,
        min_magenta: float = 0,
        max_magenta: float = PERCENT_MAX,
        min_yellow: float = 0,
        max_yellow: float = PERCENT_MAX,
        min_black: float = 0,
        max_black: float = PERCENT_MAX,
        rng: Optional[np.random.Generator] = None,
    ) -> CmykColor:
        return cls._sample(
            (
                (min_cyan, max_cyan),
                (min_magenta, max_magenta),
                (min_yellow, max_yellow),
                (min_black, max_black),
            ),
            rng,
        )
