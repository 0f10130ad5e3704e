# readable_color/api.py
from __future__ import annotations

from typing import Optional, Sequence, Union

from .core_types import Color, coerce_color
from .matcher import LogFn, MatchResult, match_readable_color
from .sampler import RegionLike, Surface, average_region_color
from .strategy import MatchStrategy

"""
Entry point: sample a region of a surface and find a readable foreground for it.
"""

PreferredColor = Union[Color, str, Sequence[float]]


def match_first_readable_color(
    surface: Surface,
    region: RegionLike,
    preferred_color: Optional[PreferredColor] = None,
    strategy: Union[MatchStrategy, str] = MatchStrategy.LINEAR,
    verbose: bool = False,
    log_fn: Optional[LogFn] = None,
) -> MatchResult:
    """
    Same as find_first_readable_color but returns the full MatchResult.

    Raises:
      InvalidBackgroundContent if the region cannot be sampled. Nothing is
      scored in that case.
    """
    background = average_region_color(surface, region)
    start = None if preferred_color is None else coerce_color(preferred_color)
    return match_readable_color(
        background, start, strategy=strategy, verbose=verbose, log_fn=log_fn
    )


def find_first_readable_color(
    surface: Surface,
    region: RegionLike,
    preferred_color: Optional[PreferredColor] = None,
    strategy: Union[MatchStrategy, str] = MatchStrategy.LINEAR,
    verbose: bool = False,
    log_fn: Optional[LogFn] = None,
) -> Color:
    """
    First colour readable on top of region of surface.

    Args:
      surface         : Pillow image or uint8 (H,W,3/4) array
      region          : Region or (x, y, width, height)
      preferred_color : starting foreground (Color, hex or components);
                        defaults to the region's own average colour
      strategy        : channel stepping strategy
      verbose         : trace each step through log_fn
      log_fn          : trace sink, defaults to utils.debug_log

    Raises:
      InvalidBackgroundContent if the region cannot be sampled.
    """
    return match_first_readable_color(
        surface, region, preferred_color, strategy, verbose, log_fn
    ).color


__all__ = [
    "PreferredColor",
    "match_first_readable_color",
    "find_first_readable_color",
]
