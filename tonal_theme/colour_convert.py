# tonal_theme/colour_convert.py
from __future__ import annotations

"""
Colour conversions between sRGB and HCT (D65).

HCT here is a Lab-based approximation: tone is L*, hue is the Lab hue angle
and chroma is the Lab chroma scaled by CHROMA_SCALE. It is not the CAM16
model.

The forward path feeds the 0..1 sRGB channels straight into the XYZ matrix,
while the inverse path gamma-encodes the linear result. The two are not
mirror images: hct_to_rgb(rgb_to_hct(x)) is the sRGB encoding of x / 255
(black and white map to themselves, mid greys drift lighter by up to ~73
levels). Out-of-gamut HCT values are clipped per channel.

Exports:
  linear_to_srgb(v)
  rgb_to_hct_batch(rgb)   -> float64 [...,3] (hue, chroma, tone)
  hct_to_rgb_batch(hct)   -> uint8 [...,3]
  rgb_to_hct(r, g, b)     -> HCT
  hct_to_rgb(hct)         -> RGBTuple
  adjust_hue / adjust_chroma / adjust_tone
  hue_palette(hct, count)
"""

from typing import List, Sequence, Union

import numpy as np

from .constants import (
    CHROMA_SCALE,
    HUE_WHEEL_STEPS,
    LAB_EPSILON,
    LAB_KAPPA,
    SRGB_ENCODE_THRESHOLD,
    SRGB_TO_XYZ,
    WHITE_D65,
    XYZ_TO_SRGB,
)
from .codec import rgb_to_hex
from .core_types import HCT, HctArray, HexStr, RGBTuple

_M_FWD = np.array(SRGB_TO_XYZ, dtype=np.float64)
_M_INV = np.array(XYZ_TO_SRGB, dtype=np.float64)
_WHITE = np.array(WHITE_D65, dtype=np.float64)

HctLike = Union[HCT, Sequence[float]]


# sRGB transfer function


def linear_to_srgb(v: np.ndarray) -> np.ndarray:
    """Linear RGB to sRGB (non-linear). No clipping."""
    v = np.asarray(v, dtype=np.float64)
    return np.where(
        v > SRGB_ENCODE_THRESHOLD,
        1.055 * np.power(np.maximum(v, SRGB_ENCODE_THRESHOLD), 1.0 / 2.4) - 0.055,
        12.92 * v,
    )


# Lab companding


def _lab_f(t: np.ndarray) -> np.ndarray:
    return np.where(t > LAB_EPSILON, np.cbrt(t), (LAB_KAPPA * t + 16.0) / 116.0)


def _lab_f_inv(f: np.ndarray) -> np.ndarray:
    cube = f * f * f
    return np.where(cube > LAB_EPSILON, cube, (116.0 * f - 16.0) / LAB_KAPPA)


# sRGB <-> HCT (vectorised)


def rgb_to_hct_batch(rgb: np.ndarray) -> HctArray:
    """
    sRGB [...,3] in 0..255 to HCT [...,3] as (hue, chroma, tone).
    Hue in [0, 360), chroma >= 0, tone in [0, 100]. Returns float64.
    """
    arr = np.clip(np.asarray(rgb, dtype=np.float64), 0.0, 255.0) / 255.0

    # channels go through the matrix as-is, no gamma decode
    xyz = arr @ _M_FWD.T
    ratios = xyz / _WHITE

    f = _lab_f(ratios)
    fx, fy, fz = f[..., 0], f[..., 1], f[..., 2]
    L = 116.0 * fy - 16.0
    a = 500.0 * (fx - fy)
    b = 200.0 * (fy - fz)

    out = np.empty(arr.shape, dtype=np.float64)
    hue = np.degrees(np.arctan2(b, a)) % 360.0
    out[..., 0] = np.where(hue >= 360.0, 0.0, hue)
    out[..., 1] = np.hypot(a, b) * CHROMA_SCALE
    out[..., 2] = np.clip(L, 0.0, 100.0)
    return out


def hct_to_rgb_batch(hct: np.ndarray) -> np.ndarray:
    """
    HCT [...,3] to sRGB uint8 [...,3].
    Each channel is clipped to [0, 1] before scaling; rounding is half-up.
    """
    arr = np.asarray(hct, dtype=np.float64)
    h_rad = np.radians(arr[..., 0])
    chroma = np.maximum(arr[..., 1], 0.0) / CHROMA_SCALE
    L = np.clip(arr[..., 2], 0.0, 100.0)

    a = chroma * np.cos(h_rad)
    b = chroma * np.sin(h_rad)

    fy = (L + 16.0) / 116.0
    fx = fy + a / 500.0
    fz = fy - b / 200.0

    xyz = np.stack([_lab_f_inv(fx), _lab_f_inv(fy), _lab_f_inv(fz)], axis=-1)
    xyz = xyz * _WHITE
    lin = xyz @ _M_INV.T

    srgb = np.clip(linear_to_srgb(lin), 0.0, 1.0)
    return np.floor(srgb * 255.0 + 0.5).astype(np.uint8)


# Scalar wrappers


def rgb_to_hct(r: float, g: float, b: float) -> HCT:
    """sRGB channels (0..255) to an HCT value."""
    hue, chroma, tone = rgb_to_hct_batch(np.array([r, g, b], dtype=np.float64))
    return HCT(float(hue), float(chroma), float(tone))


def hct_to_rgb(hct: HctLike) -> RGBTuple:
    """HCT value (or a (hue, chroma, tone) triple) to an sRGB tuple."""
    if isinstance(hct, HCT):
        row = hct.as_tuple()
    else:
        h, c, t = hct
        row = HCT(h, c, t).as_tuple()
    r, g, b = hct_to_rgb_batch(np.array(row, dtype=np.float64)).tolist()
    return (int(r), int(g), int(b))


# Adjustments


def adjust_hue(color: HCT, delta: float) -> HCT:
    """Rotate hue by delta degrees (wraps modulo 360)."""
    return HCT(color.hue + delta, color.chroma, color.tone)


def adjust_chroma(color: HCT, delta: float, floor: float = 0.0) -> HCT:
    """Shift chroma by delta, never below floor."""
    return HCT(color.hue, max(floor, color.chroma + delta), color.tone)


def adjust_tone(color: HCT, delta: float, lo: float = 0.0, hi: float = 100.0) -> HCT:
    """Shift tone by delta, clamped to [lo, hi]."""
    tone = color.tone + delta
    return HCT(color.hue, color.chroma, lo if tone < lo else hi if tone > hi else tone)


def with_tone(color: HCT, tone: float) -> HCT:
    """Same hue and chroma at an absolute tone."""
    return HCT(color.hue, color.chroma, tone)


def hue_palette(color: HCT, count: int = HUE_WHEEL_STEPS) -> List[HexStr]:
    """count evenly spaced hues at the colour's chroma and tone, starting at its hue."""
    if count <= 0:
        return []
    step = 360.0 / count
    rows = np.array(
        [[(color.hue + i * step) % 360.0, color.chroma, color.tone] for i in range(count)],
        dtype=np.float64,
    )
    return [rgb_to_hex(*rgb) for rgb in hct_to_rgb_batch(rows).tolist()]


__all__ = [
    "linear_to_srgb",
    "rgb_to_hct_batch",
    "hct_to_rgb_batch",
    "rgb_to_hct",
    "hct_to_rgb",
    "adjust_hue",
    "adjust_chroma",
    "adjust_tone",
    "with_tone",
    "hue_palette",
]
