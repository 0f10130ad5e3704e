#!/usr/bin/env python3
"""
find_readable.py
Pick a foreground colour that stays readable on top of an image region.

Usage:
  python find_readable.py IMAGE [IMAGE ...] --region X,Y,W,H --preferred HEX --strategy linear --verbose --debug

Strategies:
  linear : The same factor is applied to the RGB values when increasing or decreasing them.

Input:
  Any Pillow-readable image. The region (whole image by default) is averaged
  into one background colour, alpha included.

Output:
  Background and elected colour as '#rrggbb', with brightness and colour
  differences. Exit code 1 when a region cannot be sampled, 2 when an input
  is missing or not an image.

Notes:
  Thresholds live in readable_color.constants.
  Report lines are built with readable_color.utils.format_fields.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional, Sequence

import numpy as np

from readable_color.core_types import Color, Region
from readable_color.errors import InvalidBackgroundContent
from readable_color.image_io import is_image_file, load_image_rgba
from readable_color.matcher import match_readable_color
from readable_color.sampler import average_region_color
from readable_color.scoring import darkness_scores
from readable_color.strategy import MatchStrategy
from readable_color.utils import debug_log, error, format_fields, log, warn

# CLI args & small helpers


def parse_region(text: str) -> Region:
    """Parse 'X,Y,W,H' into a Region."""
    parts = [p.strip() for p in text.split(",")]
    if len(parts) != 4:
        raise argparse.ArgumentTypeError("region must be X,Y,W,H")
    try:
        x, y, w, h = (int(p) for p in parts)
    except ValueError:
        raise argparse.ArgumentTypeError(f"region values must be integers: {text!r}")
    return Region(x, y, w, h)


def parse_hex_color(text: str) -> Color:
    try:
        return Color.from_hex(text if text.startswith("#") else f"#{text}")
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc))


def parse_cli_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """
    Parse CLI arguments.

    Returns:
      argparse.Namespace with:
        src: list of image Paths
        region: optional Region (whole image when omitted)
        preferred: optional Color to start from
        strategy: strategy name
        verbose: bool, trace every candidate step
        debug: bool, extra sampling details
    """
    parser = argparse.ArgumentParser(
        prog="find_readable",
        description="Find the first readable foreground colour for an image region.",
    )
    parser.add_argument("src", type=Path, nargs="+", help="Input image(s)")
    parser.add_argument(
        "--region",
        type=parse_region,
        default=None,
        help="Region X,Y,W,H in pixels. Omit for the whole image.",
    )
    parser.add_argument(
        "--preferred",
        type=parse_hex_color,
        default=None,
        help="Preferred foreground '#rrggbb'. Defaults to the region colour.",
    )
    parser.add_argument(
        "--strategy",
        choices=[s.value for s in MatchStrategy],
        default=MatchStrategy.LINEAR.value,
        help="Candidate stepping strategy.",
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Trace every candidate step"
    )
    parser.add_argument("--debug", action="store_true", help="Sampling details")
    return parser.parse_args(argv)


def _debug_region_stats(image_rgba: np.ndarray, region: Region) -> None:
    """Darkness spread of the visible pixels inside region."""
    clipped = region.clip(image_rgba.shape[1], image_rgba.shape[0])
    if clipped.area == 0:
        return
    left, upper, right, lower = clipped.box
    block = image_rgba[upper:lower, left:right]
    visible = block[..., 3] > 0
    if not np.any(visible):
        debug_log("region: (no visible pixels)")
        return
    scores = darkness_scores(block[visible][:, :3])
    debug_log(
        format_fields(
            [
                ("Region", f"{clipped.width}x{clipped.height}@{left},{upper}"),
                ("Visible", int(visible.sum())),
                ("Darkness min", float(scores.min())),
                ("mean", float(scores.mean())),
                ("max", float(scores.max())),
            ]
        )
    )


# Per-file processing


def _process_single_image(
    src_path: Path,
    region: Optional[Region],
    preferred: Optional[Color],
    strategy: str,
    verbose: bool,
    debug: bool,
) -> int:
    """Load -> sample -> match -> report. Returns an exit code."""
    log(f"\n=== {src_path.name} ===")

    if not src_path.is_file() or not is_image_file(src_path):
        error(f"not an image: {src_path}")
        return 2

    im = load_image_rgba(src_path)
    if region is None:
        region = Region(0, 0, im.width, im.height)

    if debug:
        debug_log(
            format_fields(
                [("Loaded", f"{im.width}x{im.height}"), ("Mode", im.mode)]
            )
        )
        _debug_region_stats(np.asarray(im, dtype=np.uint8), region)

    try:
        background = average_region_color(im, region)
        result = match_readable_color(
            background, preferred, strategy=strategy, verbose=verbose
        )
    except InvalidBackgroundContent as e:
        error(f"{src_path.name}: {e}")
        return 1

    log(
        format_fields(
            [
                ("Background", background),
                ("Alpha", background.alpha),
                ("Start", preferred or background),
            ]
        )
    )
    log(
        format_fields(
            [
                ("Result", result.color),
                ("BDiff", result.brightness_difference),
                ("CDiff", result.color_difference),
                ("Steps", result.steps),
                ("Readable", result.readable),
            ]
        )
    )
    if not result.readable:
        warn(
            f"no candidate met both thresholds after {result.steps} steps; "
            "result is best effort"
        )
    return 0


# Entry point


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    CLI entry point.

    Processes each input in turn. The exit code is the highest per-file code.
    """
    args = parse_cli_args(argv)

    run_fields = format_fields(
        [
            ("Strategy", MatchStrategy(args.strategy).label),
            ("Verbose", args.verbose),
            ("Inputs", len(args.src)),
        ]
    )
    log(f"[run] {run_fields}")

    codes: List[int] = []
    for src in args.src:
        if not src.exists():
            error(f"not found: {src}")
            codes.append(2)
            continue
        codes.append(
            _process_single_image(
                src,
                args.region,
                args.preferred,
                args.strategy,
                args.verbose,
                args.debug,
            )
        )
    return max(codes) if codes else 0


if __name__ == "__main__":
    sys.exit(main())
