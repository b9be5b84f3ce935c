# tonal_theme/tonal_palette.py
from __future__ import annotations

"""
Tonal palettes.

Exports:
  generate_tonal_palette(hct) -> 13 hex strings, one per TONE_STOPS entry
  generate_dynamic_palette(seed_hex) -> key colours plus the seed's tonal palette
"""

from typing import Dict, Union

import numpy as np

from .codec import normalise_hex, rgb_to_hex
from .colour_convert import adjust_chroma, adjust_hue, hct_to_rgb_batch
from .constants import (
    NEUTRAL_CHROMA_DELTA,
    NEUTRAL_VARIANT_CHROMA_DELTA,
    PALETTE_ERROR,
    SECONDARY_HUE_SHIFT,
    TERTIARY_HUE_SHIFT,
    TONE_STOPS,
)
from .core_types import HCT, HexStr, TonalPalette


def generate_tonal_palette(color: HCT) -> TonalPalette:
    """Same hue and chroma at every tone stop, darkest first."""
    rows = np.array(
        [[color.hue, color.chroma, float(tone)] for tone in TONE_STOPS],
        dtype=np.float64,
    )
    return tuple(rgb_to_hex(*rgb) for rgb in hct_to_rgb_batch(rows).tolist())


def generate_dynamic_palette(seed_hex: str) -> Dict[str, Union[HexStr, TonalPalette]]:
    """
    Key colours derived from a seed:
      secondary / tertiary rotate the hue, neutral / neutralVariant drop chroma,
      error is fixed. 'palette' is the seed's tonal palette.
    """
    seed = HCT.from_hex(seed_hex)
    return {
        "primary": normalise_hex(seed_hex),
        "secondary": adjust_hue(seed, SECONDARY_HUE_SHIFT).to_hex(),
        "tertiary": adjust_hue(seed, TERTIARY_HUE_SHIFT).to_hex(),
        "neutral": adjust_chroma(seed, NEUTRAL_CHROMA_DELTA).to_hex(),
        "neutralVariant": adjust_chroma(seed, NEUTRAL_VARIANT_CHROMA_DELTA).to_hex(),
        "error": PALETTE_ERROR,
        "palette": generate_tonal_palette(seed),
    }


__all__ = ["generate_tonal_palette", "generate_dynamic_palette"]
