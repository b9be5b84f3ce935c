# tonal_theme/constants.py
"""
Global tunables used across the project.

- Colour space constants (D65 white, sRGB <-> XYZ matrices, Lab epsilon/kappa)
- Contrast thresholds (WCAG)
- Scheme tone targets, surface tier deltas and fixed error colours
- Wallpaper extraction knobs and seed scoring weights

Several values below are empirical rather than derived (CHROMA_SCALE, the
surface tier deltas, DISTINCT_CONTRAST). Keep them as they are.
"""
from __future__ import annotations

from typing import Dict, Tuple

# =========================
# Colour space (D65)
# =========================
WHITE_D65: Tuple[float, float, float] = (0.95047, 1.00000, 1.08883)

SRGB_TO_XYZ: Tuple[Tuple[float, float, float], ...] = (
    (0.4124564, 0.3575761, 0.1804375),
    (0.2126729, 0.7151522, 0.0721750),
    (0.0193339, 0.1191920, 0.9503041),
)
XYZ_TO_SRGB: Tuple[Tuple[float, float, float], ...] = (
    (3.2404542, -1.5371385, -0.4985314),
    (-0.9692660, 1.8760108, 0.0415560),
    (0.0556434, -0.2040259, 1.0572252),
)

LAB_EPSILON = 0.008856
LAB_KAPPA = 903.3

# sRGB transfer function (encode only)
SRGB_ENCODE_THRESHOLD = 0.0031308

# Empirical Lab chroma -> HCT chroma scale.
CHROMA_SCALE = 0.8

# =========================
# Contrast (WCAG 2.x)
# =========================
LUMINANCE_DECODE_THRESHOLD = 0.03928
WCAG_AA = 4.5
WCAG_AAA = 7.0
BLACK = "#000000"
WHITE = "#FFFFFF"

# =========================
# Palettes
# =========================
TONE_STOPS: Tuple[int, ...] = (0, 10, 20, 30, 40, 50, 60, 70, 80, 90, 95, 99, 100)
HUE_WHEEL_STEPS = 12

SECONDARY_HUE_SHIFT = 60.0
TERTIARY_HUE_SHIFT = 120.0
NEUTRAL_CHROMA_DELTA = -30.0
NEUTRAL_VARIANT_CHROMA_DELTA = -15.0
PALETTE_ERROR = "#BA1A1A"

DEFAULT_SEED = "#6750A4"

# =========================
# Scheme generation
# =========================
BASE_TONE = {"light": 80.0, "dark": 20.0}
CONTAINER_TONE = {"light": 90.0, "dark": 30.0}
ACCENT_CONTAINER_DELTA = 10.0

SURFACE_CHROMA_DELTA = -40.0
SURFACE_TONE = {"light": 99.0, "dark": 10.0}

# Tone deltas relative to the base surface tone, per mode.
SURFACE_TIER_DELTAS: Dict[str, Dict[str, float]] = {
    "light": {
        "surfaceDim": -12.0,
        "surfaceBright": 4.0,
        "surfaceContainerLowest": 5.0,
        "surfaceContainerLow": 8.0,
        "surfaceContainer": 12.0,
        "surfaceContainerHigh": 16.0,
        "surfaceContainerHighest": 22.0,
    },
    "dark": {
        "surfaceDim": -4.0,
        "surfaceBright": 14.0,
        "surfaceContainerLowest": 0.0,
        "surfaceContainerLow": 4.0,
        "surfaceContainer": 6.0,
        "surfaceContainerHigh": 8.0,
        "surfaceContainerHighest": 12.0,
    },
}

OUTLINE_TONE = {"light": 50.0, "dark": 60.0}
OUTLINE_VARIANT_TONE = {"light": 80.0, "dark": 30.0}

ERROR_COLOURS: Dict[str, Dict[str, str]] = {
    "light": {
        "error": "#BA1A1A",
        "onError": "#FFFFFF",
        "errorContainer": "#FFDAD6",
        "onErrorContainer": "#410002",
    },
    "dark": {
        "error": "#F2B8B5",
        "onError": "#601410",
        "errorContainer": "#8C1D18",
        "onErrorContainer": "#F9DEDC",
    },
}

# =========================
# Wallpaper extraction
# =========================
SAMPLE_WIDTH = 100
ALPHA_MIN = 128
QUANT_STEP = 16
CANDIDATE_FACTOR = 2
DISTINCT_CONTRAST = 1.5
DEFAULT_COLOR_COUNT = 5
IMAGE_COLOR_COUNT = 8

# Seed scoring: (lo, hi) are exclusive bounds.
SCORE_CHROMA_RANGE = (20.0, 60.0)
SCORE_CHROMA_BONUS = 30
SCORE_TONE_RANGE = (30.0, 70.0)
SCORE_TONE_BONUS = 30
SCORE_SATURATION_RANGE = (0.3, 0.8)
SCORE_SATURATION_BONUS = 20
SCORE_GREY_SPREAD = 30
SCORE_GREY_PENALTY = -50
SCORE_TONE_EXTREMES = (10.0, 90.0)
SCORE_TONE_EXTREME_PENALTY = -30
