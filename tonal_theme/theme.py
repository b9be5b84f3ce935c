# tonal_theme/theme.py
from __future__ import annotations

"""
Themes: image-derived scheme bundles, the caller-owned theme state, and export.

Nothing here is global. A ThemeState is an immutable value; switching mode
or seed returns a new state, and whoever holds the "current" state is
responsible for serialising access to it.

Exports:
  ImageTheme, generate_theme_from_pixels, generate_theme_from_image
  ThemeState
  export_theme(state, fmt) -> str  (json | css | scss)
  extract_themes_parallel(paths, workers, ...) -> list[ImageTheme]
"""

import json
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple

from PIL import UnidentifiedImageError

from .codec import normalise_hex
from .constants import DEFAULT_SEED, IMAGE_COLOR_COUNT
from .core_types import HCT, HexStr, Scheme, TonalPalette
from .extraction import extract_colors_from_pixels, extract_primary_color
from .image_io import ImageSource, load_image_pixels
from .scheme import generate_scheme_from_color
from .tonal_palette import generate_tonal_palette
from .utils import kebab_case, warn


# Image themes


@dataclass(frozen=True)
class ImageTheme:
    """Seed picked from an image with its tonal palette and both schemes."""

    primary: HexStr
    colors: Tuple[HexStr, ...]
    palette: TonalPalette
    light: Scheme
    dark: Scheme
    source: Optional[str] = None

    def scheme(self, is_dark: bool) -> Scheme:
        return self.dark if is_dark else self.light

    def to_dict(self) -> Dict[str, Any]:
        return {
            "primary": self.primary,
            "colors": list(self.colors),
            "palette": list(self.palette),
            "scheme": {"light": dict(self.light), "dark": dict(self.dark)},
            "source": self.source,
        }


def _theme_from_colors(colors: Sequence[HexStr], source: Optional[str]) -> ImageTheme:
    primary = extract_primary_color(colors)
    return ImageTheme(
        primary=primary,
        colors=tuple(colors),
        palette=generate_tonal_palette(HCT.from_hex(primary)),
        light=generate_scheme_from_color(primary, False),
        dark=generate_scheme_from_color(primary, True),
        source=source,
    )


def generate_theme_from_pixels(
    pixels: Any,
    width: int,
    height: int,
    k: int = IMAGE_COLOR_COUNT,
    debug: bool = False,
) -> ImageTheme:
    """Extract up to k colours, pick the seed, derive palette and schemes."""
    colors = extract_colors_from_pixels(pixels, width, height, k, debug=debug)
    return _theme_from_colors(colors, None)


def generate_theme_from_image(
    source: ImageSource, k: int = IMAGE_COLOR_COUNT, debug: bool = False
) -> ImageTheme:
    """
    Same as generate_theme_from_pixels() for an image file.

    An unreadable image counts as having no pixels: a warning is logged and
    the theme falls back to DEFAULT_SEED with no extracted colours.
    """
    label = str(source) if isinstance(source, (str, Path)) else None
    try:
        rgba, width, height = load_image_pixels(source)
    except (UnidentifiedImageError, OSError) as exc:
        warn(f"could not decode image {label or '<stream>'}: {exc}")
        rgba, width, height = b"", 0, 0
    colors = extract_colors_from_pixels(rgba, width, height, k, debug=debug)
    return _theme_from_colors(colors, label)


def extract_themes_parallel(
    sources: Sequence[ImageSource],
    workers: int = 2,
    k: int = IMAGE_COLOR_COUNT,
) -> List[ImageTheme]:
    """Process several images on a thread pool; results keep input order."""
    if workers <= 1 or len(sources) <= 1:
        return [generate_theme_from_image(src, k) for src in sources]
    with ThreadPoolExecutor(max_workers=workers) as ex:
        futures = [ex.submit(generate_theme_from_image, src, k) for src in sources]
        return [f.result() for f in futures]


# Theme state


@dataclass(frozen=True)
class ThemeState:
    """
    Seed, mode and the scheme derived from them.

    Build with from_seed() / from_image() / default(); the constructor does
    not regenerate the scheme.
    """

    seed: HexStr
    is_dark: bool
    scheme: Scheme
    source: str = "seed"
    image_path: Optional[str] = None
    extracted_colors: Tuple[HexStr, ...] = field(default_factory=tuple)

    @classmethod
    def from_seed(cls, seed_hex: str, is_dark: bool = False) -> "ThemeState":
        seed = normalise_hex(seed_hex)
        return cls(seed, is_dark, generate_scheme_from_color(seed, is_dark))

    @classmethod
    def from_image(cls, theme: ImageTheme, is_dark: bool = False) -> "ThemeState":
        return cls(
            seed=theme.primary,
            is_dark=is_dark,
            scheme=theme.scheme(is_dark),
            source="image",
            image_path=theme.source,
            extracted_colors=theme.colors,
        )

    @classmethod
    def default(cls) -> "ThemeState":
        return cls.from_seed(DEFAULT_SEED, False)

    def with_mode(self, is_dark: bool) -> "ThemeState":
        if is_dark == self.is_dark:
            return self
        return replace(
            self,
            is_dark=is_dark,
            scheme=generate_scheme_from_color(self.seed, is_dark),
        )

    def toggled(self) -> "ThemeState":
        return self.with_mode(not self.is_dark)

    def info(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {
            "seed": self.seed,
            "isDark": self.is_dark,
            "source": self.source,
            "scheme": dict(self.scheme),
        }
        if self.source == "image":
            out["imagePath"] = self.image_path
            out["extractedColors"] = list(self.extracted_colors)
        return out


# Export


def export_css(scheme: Scheme) -> str:
    lines = [f"  --m3-sys-{kebab_case(role)}: {value};" for role, value in scheme.items()]
    return ":root {\n" + "\n".join(lines) + "\n}"


def export_scss(scheme: Scheme) -> str:
    return "\n".join(f"$m3-{kebab_case(role)}: {value};" for role, value in scheme.items())


def export_theme(state: ThemeState, fmt: str = "json") -> str:
    """Serialise a theme as 'json', 'css' or 'scss'; other formats give json."""
    fmt = fmt.lower()
    if fmt == "css":
        return export_css(state.scheme)
    if fmt == "scss":
        return export_scss(state.scheme)
    return json.dumps(state.info(), indent=2)


__all__ = [
    "ImageTheme",
    "generate_theme_from_pixels",
    "generate_theme_from_image",
    "extract_themes_parallel",
    "ThemeState",
    "export_css",
    "export_scss",
    "export_theme",
]
