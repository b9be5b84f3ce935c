# tonal_theme/scheme.py
from __future__ import annotations

"""
Colour scheme generation from a single seed.

Exports:
  SCHEME_ROLES: ordered role names present in every scheme
  generate_scheme_from_color(seed_hex, is_dark) -> Scheme (read-only mapping)
  generate_scheme_pair(seed_hex) -> {"light": Scheme, "dark": Scheme}

Notes:
  - primary is the seed itself; everything else is derived in HCT.
  - on* roles for accent and surface colours come from
    get_accessible_text_color, so they are always black or white.
  - Error roles are fixed per mode and do not follow the seed.
  - Surface tier deltas are per-mode constants, see constants.SURFACE_TIER_DELTAS.
"""

from types import MappingProxyType
from typing import Dict, Tuple

from .codec import normalise_hex
from .colour_convert import adjust_chroma, adjust_hue, adjust_tone, with_tone
from .constants import (
    ACCENT_CONTAINER_DELTA,
    BASE_TONE,
    CONTAINER_TONE,
    ERROR_COLOURS,
    OUTLINE_TONE,
    OUTLINE_VARIANT_TONE,
    SECONDARY_HUE_SHIFT,
    SURFACE_CHROMA_DELTA,
    SURFACE_TIER_DELTAS,
    SURFACE_TONE,
    TERTIARY_HUE_SHIFT,
)
from .contrast import get_accessible_text_color
from .core_types import HCT, HexStr, Scheme

SCHEME_ROLES: Tuple[str, ...] = (
    "primary",
    "onPrimary",
    "primaryContainer",
    "onPrimaryContainer",
    "secondary",
    "onSecondary",
    "secondaryContainer",
    "onSecondaryContainer",
    "tertiary",
    "onTertiary",
    "tertiaryContainer",
    "onTertiaryContainer",
    "surface",
    "surfaceDim",
    "surfaceBright",
    "surfaceContainerLowest",
    "surfaceContainerLow",
    "surfaceContainer",
    "surfaceContainerHigh",
    "surfaceContainerHighest",
    "onSurface",
    "onSurfaceVariant",
    "outline",
    "outlineVariant",
    "error",
    "onError",
    "errorContainer",
    "onErrorContainer",
)


def _mode(is_dark: bool) -> str:
    return "dark" if is_dark else "light"


def _accent_roles(name: str, base: HCT) -> Dict[str, HexStr]:
    """base / on-base / container / on-container for a hue-rotated accent."""
    cap = name[0].upper() + name[1:]
    base_hex = base.to_hex()
    container_hex = adjust_tone(base, ACCENT_CONTAINER_DELTA).to_hex()
    return {
        name: base_hex,
        f"on{cap}": get_accessible_text_color(base_hex),
        f"{name}Container": container_hex,
        f"on{cap}Container": get_accessible_text_color(container_hex),
    }


def generate_scheme_from_color(seed_hex: str, is_dark: bool = False) -> Scheme:
    """
    Build the full role -> '#RRGGBB' mapping for one mode.

    Deterministic: the same seed and mode always give an identical mapping.
    Raises InvalidColorFormat for a malformed seed.
    """
    mode = _mode(is_dark)
    primary_hex = normalise_hex(seed_hex)
    seed = HCT.from_hex(primary_hex)

    base_tone = BASE_TONE[mode]
    container_tone = CONTAINER_TONE[mode]

    roles: Dict[str, HexStr] = {}

    # primary
    primary_container = adjust_tone(seed, container_tone - seed.tone).to_hex()
    roles["primary"] = primary_hex
    roles["onPrimary"] = get_accessible_text_color(primary_hex)
    roles["primaryContainer"] = primary_container
    roles["onPrimaryContainer"] = get_accessible_text_color(primary_container)

    # secondary / tertiary: rotate hue, then move to the mode's base tone
    for name, shift in (("secondary", SECONDARY_HUE_SHIFT), ("tertiary", TERTIARY_HUE_SHIFT)):
        rotated = adjust_hue(seed, shift)
        roles.update(_accent_roles(name, adjust_tone(rotated, base_tone - rotated.tone)))

    # surfaces
    surface = with_tone(adjust_chroma(seed, SURFACE_CHROMA_DELTA), SURFACE_TONE[mode])
    roles["surface"] = surface.to_hex()
    for role, delta in SURFACE_TIER_DELTAS[mode].items():
        roles[role] = adjust_tone(surface, delta).to_hex()
    roles["onSurface"] = get_accessible_text_color(roles["surface"])
    roles["onSurfaceVariant"] = get_accessible_text_color(roles["surfaceContainerHighest"])

    # outlines keep the seed's hue and chroma
    roles["outline"] = with_tone(seed, OUTLINE_TONE[mode]).to_hex()
    roles["outlineVariant"] = with_tone(seed, OUTLINE_VARIANT_TONE[mode]).to_hex()

    roles.update(ERROR_COLOURS[mode])

    return MappingProxyType({role: roles[role] for role in SCHEME_ROLES})


def generate_scheme_pair(seed_hex: str) -> Dict[str, Scheme]:
    """Light and dark schemes for one seed."""
    return {
        "light": generate_scheme_from_color(seed_hex, False),
        "dark": generate_scheme_from_color(seed_hex, True),
    }


__all__ = ["SCHEME_ROLES", "generate_scheme_from_color", "generate_scheme_pair"]
