# tonal_theme/extraction.py
from __future__ import annotations

"""
Wallpaper colour extraction.

Pipeline:
  RGBA pixels -> downsample to SAMPLE_WIDTH when wider -> drop alpha < ALPHA_MIN
  -> quantize channels to QUANT_STEP buckets -> histogram by frequency
  -> keep the top CANDIDATE_FACTOR * k buckets -> keep a bucket only when its
  contrast against every kept bucket exceeds DISTINCT_CONTRAST.

extract_primary_color() then scores candidates to pick a seed.

Exports:
  as_rgba_rows(pixels) -> uint8 [N,4]
  downsample_rgba(rows, width, height, target_width) -> (rows, width, height)
  quantize_pixels(rows) -> PixelHistogram
  extract_colors_from_pixels(pixels, width, height, k, debug=False) -> list[hex]
  score_color(hex) -> int
  extract_primary_color(colors) -> hex
"""

import math
from typing import Any, List, Sequence, Tuple

import numpy as np
from PIL import Image

from .codec import hex_to_rgb, normalise_hex, rgb_to_hex
from .colour_convert import rgb_to_hct_batch
from .constants import (
    ALPHA_MIN,
    CANDIDATE_FACTOR,
    DEFAULT_COLOR_COUNT,
    DEFAULT_SEED,
    DISTINCT_CONTRAST,
    QUANT_STEP,
    SAMPLE_WIDTH,
    SCORE_CHROMA_BONUS,
    SCORE_CHROMA_RANGE,
    SCORE_GREY_PENALTY,
    SCORE_GREY_SPREAD,
    SCORE_SATURATION_BONUS,
    SCORE_SATURATION_RANGE,
    SCORE_TONE_BONUS,
    SCORE_TONE_EXTREME_PENALTY,
    SCORE_TONE_EXTREMES,
    SCORE_TONE_RANGE,
)
from .contrast import contrast_ratio
from .core_types import HexStr, PixelHistogram, U8Pixels
from .utils import debug_log, key_value_pairs_to_string


# Pixel buffers


def as_rgba_rows(pixels: Any) -> U8Pixels:
    """
    Coerce a pixel buffer to (N,4) uint8 RGBA rows.

    Accepts bytes-like objects, numpy arrays (flat, [N,4] or [H,W,4]) and
    sequences of ints or 4-tuples. Values outside 0..255 are clipped; a
    trailing partial pixel is dropped.
    """
    if isinstance(pixels, (bytes, bytearray, memoryview)):
        flat = np.frombuffer(pixels, dtype=np.uint8)
    elif isinstance(pixels, np.ndarray):
        if pixels.dtype == np.uint8:
            flat = pixels.reshape(-1)
        else:
            flat = np.clip(pixels, 0, 255).astype(np.uint8).reshape(-1)
    elif isinstance(pixels, (list, tuple)):
        if len(pixels) == 0:
            return np.zeros((0, 4), dtype=np.uint8)
        arr = np.asarray(pixels, dtype=np.int64)
        flat = np.clip(arr, 0, 255).astype(np.uint8).reshape(-1)
    else:
        raise TypeError(f"unsupported pixel buffer type: {type(pixels).__name__}")

    n = flat.size // 4
    return flat[: n * 4].reshape(n, 4)


def downsample_rgba(
    rows: U8Pixels, width: int, height: int, target_width: int = SAMPLE_WIDTH
) -> Tuple[U8Pixels, int, int]:
    """
    Resize to target_width keeping aspect ratio. Images already at or below
    target_width are returned unchanged.
    """
    if width <= target_width or rows.shape[0] == 0:
        return rows, width, height
    dst_h = max(1, int(math.floor(height * target_width / float(width) + 0.5)))
    im = Image.fromarray(np.ascontiguousarray(rows.reshape(height, width, 4)))
    im2 = im.convert("RGBA").resize(
        (target_width, dst_h), resample=Image.Resampling.BILINEAR
    )
    arr = np.array(im2, dtype=np.uint8)
    return arr.reshape(-1, 4), target_width, dst_h


def quantize_pixels(rows: U8Pixels) -> PixelHistogram:
    """
    Histogram of opaque-enough pixels keyed by quantized (r, g, b).

    Ordered by descending count; equal counts keep first-appearance order.
    """
    visible = rows[rows[:, 3] >= ALPHA_MIN]
    if visible.shape[0] == 0:
        return {}
    q = (visible[:, :3] // QUANT_STEP).astype(np.int32) * QUANT_STEP
    keys = (q[:, 0] << 16) | (q[:, 1] << 8) | q[:, 2]
    uniq, first_idx, counts = np.unique(keys, return_index=True, return_counts=True)
    order = np.lexsort((first_idx, -counts))

    hist: PixelHistogram = {}
    for i in order.tolist():
        key = int(uniq[i])
        hist[((key >> 16) & 0xFF, (key >> 8) & 0xFF, key & 0xFF)] = int(counts[i])
    return hist


def extract_colors_from_pixels(
    pixels: Any,
    width: int,
    height: int,
    k: int = DEFAULT_COLOR_COUNT,
    debug: bool = False,
) -> List[HexStr]:
    """
    Up to k perceptually distinct colours, most frequent first.

    width / height describe the row-major RGBA buffer and must match it.
    Images wider than SAMPLE_WIDTH are downsampled before counting. Returns
    an empty list when no pixel is opaque enough.
    """
    if k <= 0:
        return []
    rows = as_rgba_rows(pixels)
    if width < 0 or height < 0 or width * height != rows.shape[0]:
        raise ValueError(
            f"pixel buffer holds {rows.shape[0]} pixels, expected {width}x{height}"
        )
    rows, width, height = downsample_rgba(rows, width, height)

    hist = quantize_pixels(rows)
    candidates = [rgb_to_hex(*rgb) for rgb in list(hist)[: k * CANDIDATE_FACTOR]]

    distinct: List[HexStr] = []
    for hex_colour in candidates:
        if all(contrast_ratio(hex_colour, kept) > DISTINCT_CONTRAST for kept in distinct):
            distinct.append(hex_colour)
            if len(distinct) >= k:
                break

    if debug:
        debug_log(
            key_value_pairs_to_string(
                [
                    ("Sampled", f"{width}x{height}"),
                    ("Visible", sum(hist.values())),
                    ("Buckets", len(hist)),
                    ("Candidates", len(candidates)),
                    ("Kept", len(distinct)),
                ]
            )
        )
    return distinct


# Seed scoring


def _in_open_range(value: float, bounds: Tuple[float, float]) -> bool:
    return bounds[0] < value < bounds[1]


def score_color(hex_colour: str) -> int:
    """
    Suitability of a colour as a scheme seed. Higher is better.

    Rewards mid chroma, mid tone and moderate RGB saturation; penalises
    near-greys and very dark or very light colours.
    """
    r, g, b = hex_to_rgb(hex_colour)
    _hue, chroma, tone = rgb_to_hct_batch(np.array([r, g, b], dtype=np.float64)).tolist()

    score = 0
    if _in_open_range(chroma, SCORE_CHROMA_RANGE):
        score += SCORE_CHROMA_BONUS
    if _in_open_range(tone, SCORE_TONE_RANGE):
        score += SCORE_TONE_BONUS

    hi, lo = max(r, g, b), min(r, g, b)
    saturation = (hi - lo) / hi if hi > 0 else 0.0
    if _in_open_range(saturation, SCORE_SATURATION_RANGE):
        score += SCORE_SATURATION_BONUS

    if abs(r - g) < SCORE_GREY_SPREAD and abs(g - b) < SCORE_GREY_SPREAD:
        score += SCORE_GREY_PENALTY
    if tone < SCORE_TONE_EXTREMES[0] or tone > SCORE_TONE_EXTREMES[1]:
        score += SCORE_TONE_EXTREME_PENALTY
    return score


def extract_primary_color(colors: Sequence[str]) -> HexStr:
    """
    Best-scoring candidate as '#RRGGBB'; ties go to the earlier candidate.
    An empty input yields DEFAULT_SEED.
    """
    if not colors:
        return DEFAULT_SEED
    ranked = sorted(colors, key=score_color, reverse=True)
    return normalise_hex(ranked[0])


__all__ = [
    "as_rgba_rows",
    "downsample_rgba",
    "quantize_pixels",
    "extract_colors_from_pixels",
    "score_color",
    "extract_primary_color",
]
