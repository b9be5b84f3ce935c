# tonal_theme/core_types.py
from __future__ import annotations

"""
Core type aliases, small value objects, and lightweight helpers.
"""

from dataclasses import dataclass
from typing import Dict, Mapping, Tuple

import numpy as np
from numpy.typing import NDArray

# Basic aliases

RGBTuple = Tuple[int, int, int]
HexStr = str

U8Pixels = NDArray[np.uint8]  # (N, 4) RGBA rows
HctArray = NDArray[np.float64]  # (..., 3) hue, chroma, tone

Scheme = Mapping[str, HexStr]  # role name -> "#RRGGBB", read-only
TonalPalette = Tuple[HexStr, ...]  # 13 entries, one per tone stop
PixelHistogram = Dict[RGBTuple, int]  # quantized bucket -> pixel count


class InvalidColorFormat(ValueError):
    """Hex colour string that is not exactly six hex digits."""


# Small helpers


def clamp_value(value: float, lo: float, hi: float) -> float:
    """Clamp value to [lo, hi]."""
    return lo if value < lo else hi if value > hi else value


# Value objects


@dataclass(frozen=True)
class HCT:
    """
    Hue / chroma / tone triple.

    Normalised on construction: hue wraps into [0, 360), chroma is floored
    at 0 and tone is clamped to [0, 100].
    """

    hue: float
    chroma: float
    tone: float

    def __post_init__(self) -> None:
        hue = float(self.hue) % 360.0
        object.__setattr__(self, "hue", 0.0 if hue >= 360.0 else hue)
        object.__setattr__(self, "chroma", max(0.0, float(self.chroma)))
        object.__setattr__(self, "tone", clamp_value(float(self.tone), 0.0, 100.0))

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int) -> "HCT":
        from .colour_convert import rgb_to_hct

        return rgb_to_hct(r, g, b)

    @classmethod
    def from_hex(cls, hex_str: str) -> "HCT":
        from .codec import hex_to_rgb

        return cls.from_rgb(*hex_to_rgb(hex_str))

    def to_rgb(self) -> RGBTuple:
        from .colour_convert import hct_to_rgb

        return hct_to_rgb(self)

    def to_hex(self) -> HexStr:
        from .codec import rgb_to_hex

        return rgb_to_hex(*self.to_rgb())

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.hue, self.chroma, self.tone)


__all__ = [
    # aliases / types
    "RGBTuple",
    "HexStr",
    "U8Pixels",
    "HctArray",
    "Scheme",
    "TonalPalette",
    "PixelHistogram",
    # errors
    "InvalidColorFormat",
    # value objects
    "HCT",
    # helpers
    "clamp_value",
]
