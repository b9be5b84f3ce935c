# tonal_theme/__init__.py
"""
tonal_theme package.

Purpose:
  Seed-driven colour scheme generation with an approximate HCT colour space,
  plus wallpaper seed extraction. See tonal_theme.cli for the command line.

Public API:
  hex_to_rgb / rgb_to_hex        : hex codec (raises InvalidColorFormat)
  contrast_ratio                 : WCAG contrast ratio of two hex colours
  get_accessible_text_color      : black or white text for a background
  rgb_to_hct / hct_to_rgb        : sRGB <-> HCT
  generate_tonal_palette         : 13 tone stops from one HCT colour
  generate_scheme_from_color     : full light or dark role mapping from a seed
  extract_colors_from_pixels     : distinct colours from RGBA pixels
  extract_primary_color          : best seed among extracted colours
  ThemeState / ImageTheme        : caller-owned theme values and export

Quick start:
  from tonal_theme import generate_scheme_from_color
  scheme = generate_scheme_from_color("#6750A4", is_dark=False)
"""

__version__ = "0.1.0"

# Re-export namespaces for convenience.
from . import codec
from . import colour_convert
from . import constants
from . import contrast
from . import core_types
from . import extraction
from . import scheme
from . import theme
from . import tonal_palette

from .codec import hex_to_rgb, rgb_to_hex  # noqa: E402,F401
from .colour_convert import (  # noqa: E402,F401
    adjust_chroma,
    adjust_hue,
    adjust_tone,
    hct_to_rgb,
    rgb_to_hct,
)
from .contrast import (  # noqa: E402,F401
    contrast_ratio,
    get_accessible_text_color,
    relative_luminance,
)
from .core_types import HCT, InvalidColorFormat  # noqa: E402,F401
from .extraction import (  # noqa: E402,F401
    extract_colors_from_pixels,
    extract_primary_color,
)
from .scheme import SCHEME_ROLES, generate_scheme_from_color  # noqa: E402,F401
from .theme import ImageTheme, ThemeState, export_theme  # noqa: E402,F401
from .tonal_palette import generate_tonal_palette  # noqa: E402,F401

__all__ = [
    "__version__",
    "codec",
    "colour_convert",
    "constants",
    "contrast",
    "core_types",
    "extraction",
    "scheme",
    "theme",
    "tonal_palette",
    "hex_to_rgb",
    "rgb_to_hex",
    "adjust_chroma",
    "adjust_hue",
    "adjust_tone",
    "hct_to_rgb",
    "rgb_to_hct",
    "contrast_ratio",
    "get_accessible_text_color",
    "relative_luminance",
    "HCT",
    "InvalidColorFormat",
    "extract_colors_from_pixels",
    "extract_primary_color",
    "SCHEME_ROLES",
    "generate_scheme_from_color",
    "ImageTheme",
    "ThemeState",
    "export_theme",
    "generate_tonal_palette",
]
