# tonal_theme/codec.py
from __future__ import annotations

"""
Hex <-> RGB conversion.

Exports:
  hex_to_rgb(hex_str) -> RGBTuple
  rgb_to_hex(r, g, b) -> '#RRGGBB'
  normalise_hex(hex_str) -> '#RRGGBB'
"""

import math
import re

from .core_types import HexStr, InvalidColorFormat, RGBTuple, clamp_value

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})$")


def hex_to_rgb(hex_str: str) -> RGBTuple:
    """
    Parse 'RRGGBB' with an optional leading '#' (case-insensitive).

    Raises InvalidColorFormat for anything else; callers that want a
    fallback colour must catch it themselves.
    """
    if not isinstance(hex_str, str):
        raise InvalidColorFormat(f"expected a hex string, got {type(hex_str).__name__}")
    m = _HEX_RE.match(hex_str)
    if m is None:
        raise InvalidColorFormat(f"invalid hex colour: {hex_str!r}")
    return (int(m.group(1), 16), int(m.group(2), 16), int(m.group(3), 16))


def rgb_to_hex(r: float, g: float, b: float) -> HexStr:
    """
    RGB channels to uppercase '#RRGGBB'. Float channels round half-up, then
    each is clamped to [0, 255].
    """
    channels = [int(clamp_value(math.floor(float(c) + 0.5), 0, 255)) for c in (r, g, b)]
    return "#{:02X}{:02X}{:02X}".format(*channels)


def normalise_hex(hex_str: str) -> HexStr:
    """Canonical uppercase '#RRGGBB' form of a valid hex colour."""
    return rgb_to_hex(*hex_to_rgb(hex_str))


__all__ = [
    "hex_to_rgb",
    "rgb_to_hex",
    "normalise_hex",
]
