# tonal_theme/cli.py
"""
tonal-theme
Build colour schemes from a seed colour or from wallpaper images.

Usage:
  tonal-theme seed HEX [--dark] [--format json|css|scss]
  tonal-theme palette HEX
  tonal-theme contrast HEX_A HEX_B
  tonal-theme text-color HEX [--high-contrast]
  tonal-theme image PATH [PATH ...] [--count K] [--dark] [--format ...] [--jobs N] [--debug]

Notes:
  Folders passed to 'image' are scanned for .png/.jpg/.jpeg/.webp files.
  Exit status 2 on a malformed colour or a missing path.
"""

from __future__ import annotations

import argparse
import sys
import time
from concurrent.futures import ThreadPoolExecutor
from functools import partial
from pathlib import Path
from typing import List, Optional, Sequence

from .codec import normalise_hex
from .constants import IMAGE_COLOR_COUNT, TONE_STOPS, WCAG_AA
from .contrast import contrast_ratio, get_contrast_color
from .core_types import HCT, InvalidColorFormat
from .theme import ThemeState, export_theme, generate_theme_from_image
from .tonal_palette import generate_tonal_palette
from .utils import (
    enable_line_buffered_stdout,
    error,
    format_seconds_compact,
    key_value_pairs_to_string,
    log,
    print_config_line,
)

IMAGE_EXTS = {".png", ".jpg", ".jpeg", ".webp"}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tonal-theme",
        description="Generate tonal colour schemes from a seed colour or an image.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p_seed = sub.add_parser("seed", help="Scheme from a seed colour")
    p_seed.add_argument("color", help="Seed colour, e.g. #6750A4")
    p_seed.add_argument("--dark", action="store_true", help="Dark scheme")
    p_seed.add_argument(
        "--format", choices=["json", "css", "scss"], default="json", help="Output format"
    )

    p_pal = sub.add_parser("palette", help="13-stop tonal palette")
    p_pal.add_argument("color")

    p_con = sub.add_parser("contrast", help="WCAG contrast ratio of two colours")
    p_con.add_argument("color_a")
    p_con.add_argument("color_b")

    p_txt = sub.add_parser("text-color", help="Accessible text colour for a background")
    p_txt.add_argument("color")
    p_txt.add_argument(
        "--high-contrast", action="store_true", help="Use the 7:1 threshold"
    )

    p_img = sub.add_parser("image", help="Scheme from wallpaper image(s)")
    p_img.add_argument("paths", nargs="+", type=Path, help="Images or folders")
    p_img.add_argument(
        "--count", type=int, default=IMAGE_COLOR_COUNT, help="Colours to extract"
    )
    p_img.add_argument("--dark", action="store_true", help="Dark scheme")
    p_img.add_argument(
        "--format", choices=["json", "css", "scss"], default="json", help="Output format"
    )
    p_img.add_argument("--jobs", type=int, default=2, help="Images processed in parallel")
    p_img.add_argument("--debug", action="store_true", help="Verbose extraction details")
    return parser


def _collect_images(paths: Sequence[Path]) -> List[Path]:
    files: List[Path] = []
    for src in paths:
        if not src.exists():
            raise FileNotFoundError(src)
        if src.is_dir():
            found = [
                p for p in src.iterdir() if p.is_file() and p.suffix.lower() in IMAGE_EXTS
            ]
            files.extend(sorted(found, key=lambda p: p.name.lower()))
        else:
            files.append(src)
    return files


def _render_image(path: Path, count: int, is_dark: bool, fmt: str, debug: bool) -> str:
    """Extract one image's theme and render its report block."""
    t_start = time.perf_counter()
    theme = generate_theme_from_image(path, k=count, debug=debug)
    lines = [
        f"\n=== {path.name} ===",
        f"Colours: {' '.join(theme.colors) if theme.colors else '(none)'}",
        f"Primary: {theme.primary}",
        export_theme(ThemeState.from_image(theme, is_dark), fmt),
    ]
    if debug:
        lines.append(
            f"[debug] took {format_seconds_compact(time.perf_counter() - t_start)}"
        )
    return "\n".join(lines) + "\n"


def _run_images(args: argparse.Namespace) -> None:
    files = _collect_images(args.paths)
    print_config_line(
        "image",
        [
            ("Images", len(files)),
            ("Count", args.count),
            ("Mode", "dark" if args.dark else "light"),
            ("Jobs", args.jobs),
        ],
        debug=args.debug,
    )
    render = partial(
        _render_image, count=args.count, is_dark=args.dark, fmt=args.format, debug=args.debug
    )
    if args.jobs <= 1 or len(files) <= 1:
        for p in files:
            print(render(p), end="", flush=True)
        return
    # Workers only return text; printing stays on this thread and in input order.
    with ThreadPoolExecutor(max_workers=args.jobs) as ex:
        blocks = list(ex.map(render, files))
    print("".join(blocks), end="", flush=True)


def run(argv: Optional[Sequence[str]] = None) -> int:
    """Parse argv and execute one command. Returns the process exit status."""
    args = build_parser().parse_args(argv)
    try:
        if args.command == "seed":
            log(export_theme(ThemeState.from_seed(args.color, args.dark), args.format))
        elif args.command == "palette":
            tones = generate_tonal_palette(HCT.from_hex(args.color))
            for tone, hex_colour in zip(TONE_STOPS, tones):
                log(f"{tone:>3}  {hex_colour}")
        elif args.command == "contrast":
            ratio = contrast_ratio(args.color_a, args.color_b)
            log(
                key_value_pairs_to_string(
                    [
                        ("A", normalise_hex(args.color_a)),
                        ("B", normalise_hex(args.color_b)),
                        ("Ratio", round(ratio, 2)),
                        ("AA", ratio >= WCAG_AA),
                    ]
                )
            )
        elif args.command == "text-color":
            log(get_contrast_color(args.color, args.high_contrast))
        elif args.command == "image":
            _run_images(args)
    except InvalidColorFormat as exc:
        error(str(exc))
        return 2
    except FileNotFoundError as exc:
        error(f"not found: {exc}")
        return 2
    return 0


def main() -> None:
    """CLI entry point."""
    enable_line_buffered_stdout()
    sys.exit(run())


if __name__ == "__main__":
    main()
