# tonal_theme/image_io.py
from __future__ import annotations

import io
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from pathlib import Path
from typing import BinaryIO, Optional, Tuple, Union

import numpy as np
from PIL import Image, ImageOps

from .constants import SAMPLE_WIDTH

"""
Image decoding for wallpaper extraction (RGBA in sRGB).

Decoding sits outside the colour engine: these helpers turn a file into the
flat RGBA buffer that extraction.extract_colors_from_pixels() consumes.
Decode failures propagate as UnidentifiedImageError / OSError.
"""

try:
    from PIL import ImageCms  # ICC conversion if profile present
except ImportError:  # pragma: no cover
    ImageCms = None  # type: ignore[assignment]

ImageSource = Union[str, Path, BinaryIO]
PixelBuffer = Tuple[bytes, int, int]  # (rgba bytes, width, height)


def _convert_to_srgb_rgba(im: Image.Image) -> Image.Image:
    im = ImageOps.exif_transpose(im)
    icc_bytes = im.info.get("icc_profile")

    if icc_bytes and ImageCms is not None:
        try:
            src_prof = ImageCms.ImageCmsProfile(io.BytesIO(icc_bytes))
            dst_prof = ImageCms.createProfile("sRGB")
            im2 = ImageCms.profileToProfile(
                im,
                src_prof,
                dst_prof,
                renderingIntent=ImageCms.Intent.PERCEPTUAL,
                outputMode="RGBA",
            )
            if im2 is None:
                return im.convert("RGBA")
            return im2
        except (ImageCms.PyCMSError, OSError, ValueError):
            return im.convert("RGBA")

    return im.convert("RGBA")


def resize_to_width(im: Image.Image, dst_w: int = SAMPLE_WIDTH) -> Image.Image:
    """Shrink to dst_w keeping aspect ratio; narrower images are left alone."""
    W0, H0 = im.size
    if W0 <= dst_w:
        return im
    dst_h = max(1, int(round(H0 * (dst_w / float(W0)))))
    return im.resize((dst_w, dst_h), resample=Image.Resampling.BILINEAR)


def load_image_pixels(
    source: ImageSource, target_width: int = SAMPLE_WIDTH
) -> PixelBuffer:
    """
    Decode an image into (rgba_bytes, width, height), already downsampled to
    target_width so extraction never scans a full-resolution wallpaper.
    """
    with Image.open(source) as im0:
        im = _convert_to_srgb_rgba(im0)
        im = resize_to_width(im, target_width)
        arr = np.array(im, dtype=np.uint8)
    height, width = arr.shape[0], arr.shape[1]
    return arr.tobytes(), width, height


def load_image_pixels_async(
    source: ImageSource,
    executor: Optional[Executor] = None,
    target_width: int = SAMPLE_WIDTH,
) -> "Future[PixelBuffer]":
    """
    Decode on a worker thread. The returned future yields the same tuple as
    load_image_pixels() or raises its decode error from .result().
    """
    if executor is not None:
        return executor.submit(load_image_pixels, source, target_width)
    own = ThreadPoolExecutor(max_workers=1)
    try:
        return own.submit(load_image_pixels, source, target_width)
    finally:
        own.shutdown(wait=False)


__all__ = [
    "load_image_pixels",
    "load_image_pixels_async",
    "resize_to_width",
]
