# tonal_theme/contrast.py
from __future__ import annotations

"""
Relative luminance and WCAG contrast.

Exports:
  relative_luminance(r, g, b) -> float in [0, 1]
  contrast_ratio(hex_a, hex_b) -> float in [1, 21]
  get_accessible_text_color(background_hex, min_ratio=4.5) -> '#000000' | '#FFFFFF'
  get_contrast_color(background_hex, high_contrast=False)
  meets_contrast(hex_a, hex_b, min_ratio=4.5) -> bool
"""

from .codec import hex_to_rgb
from .constants import (
    BLACK,
    LUMINANCE_DECODE_THRESHOLD,
    WCAG_AA,
    WCAG_AAA,
    WHITE,
)
from .core_types import HexStr


def _channel_to_linear(c: float) -> float:
    u = c / 255.0
    if u <= LUMINANCE_DECODE_THRESHOLD:
        return u / 12.92
    return ((u + 0.055) / 1.055) ** 2.4


def relative_luminance(r: float, g: float, b: float) -> float:
    """WCAG relative luminance of an sRGB colour given as 0..255 channels."""
    return (
        0.2126 * _channel_to_linear(r)
        + 0.7152 * _channel_to_linear(g)
        + 0.0722 * _channel_to_linear(b)
    )


def contrast_ratio(hex_a: str, hex_b: str) -> float:
    """(L_lighter + 0.05) / (L_darker + 0.05). Symmetric; 1.0 for equal luminance."""
    lum_a = relative_luminance(*hex_to_rgb(hex_a))
    lum_b = relative_luminance(*hex_to_rgb(hex_b))
    lighter = max(lum_a, lum_b)
    darker = min(lum_a, lum_b)
    return (lighter + 0.05) / (darker + 0.05)


def meets_contrast(hex_a: str, hex_b: str, min_ratio: float = WCAG_AA) -> bool:
    return contrast_ratio(hex_a, hex_b) >= min_ratio


def get_accessible_text_color(
    background_hex: str, min_ratio: float = WCAG_AA
) -> HexStr:
    """
    Pick black or white text for a background.

    Black wins when it clears min_ratio, then white. When neither does, the
    background's luminance decides (above 0.5 -> black).
    """
    if contrast_ratio(background_hex, BLACK) >= min_ratio:
        return BLACK
    if contrast_ratio(background_hex, WHITE) >= min_ratio:
        return WHITE
    luminance = relative_luminance(*hex_to_rgb(background_hex))
    return BLACK if luminance > 0.5 else WHITE


def get_contrast_color(background_hex: str, high_contrast: bool = False) -> HexStr:
    """Text colour at the AA threshold, or AAA when high_contrast is set."""
    return get_accessible_text_color(
        background_hex, WCAG_AAA if high_contrast else WCAG_AA
    )


__all__ = [
    "relative_luminance",
    "contrast_ratio",
    "meets_contrast",
    "get_accessible_text_color",
    "get_contrast_color",
]
