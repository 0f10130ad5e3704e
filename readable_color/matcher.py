# readable_color/matcher.py
from __future__ import annotations

"""
Readable foreground search.

Exports:
- MatchResult
- match_readable_color(background, starting_from=None, strategy, verbose, log_fn) -> MatchResult
- find_readable_color(background, starting_from=None, strategy, verbose, log_fn) -> Color

Notes:
- Light backgrounds (darkness >= 125) darken the candidate; dark ones brighten it.
- The first step meeting both thresholds wins. If none does within the step
  budget, the last candidate is returned and MatchResult.readable is False.
- With no starting colour the background itself is the starting point.
"""

from dataclasses import dataclass
from typing import Callable, Optional, Union

from .constants import (
    BRIGHTNESS_DIFF_THRESHOLD,
    COLOR_DIFF_THRESHOLD,
    LIGHT_BACKGROUND_THRESHOLD,
)
from .core_types import Color
from .scoring import contrast_difference, darkness_score
from .strategy import MatchStrategy, resolve_strategy, step_generator
from .utils import debug_log, format_factor_percent

LogFn = Callable[[str], None]


@dataclass(frozen=True)
class MatchResult:
    """Outcome of one search. readable is False for a best-effort result."""

    color: Color
    readable: bool
    steps: int
    brightness_difference: float
    color_difference: float
    strategy: MatchStrategy


def match_readable_color(
    background: Color,
    starting_from: Optional[Color] = None,
    strategy: Union[MatchStrategy, str] = MatchStrategy.LINEAR,
    verbose: bool = False,
    log_fn: Optional[LogFn] = None,
) -> MatchResult:
    """
    Step the candidate's RGB channels until it is readable on background.

    Args:
      background    : sampled background colour
      starting_from : preferred foreground; defaults to background
      strategy      : how channels are stepped each iteration
      verbose       : emit a per-step trace through log_fn
      log_fn        : trace sink, defaults to utils.debug_log

    Returns:
      MatchResult with the elected (or last) candidate.
    """
    strategy = resolve_strategy(strategy)
    start = background if starting_from is None else starting_from
    emit: LogFn = (log_fn or debug_log) if verbose else _silent

    bg_darkness = darkness_score(background)
    darken = bg_darkness >= LIGHT_BACKGROUND_THRESHOLD
    r, g, b = start.rgb255()

    emit(f"Background color: {background.to_hex()}")
    emit(f"Find right color using {strategy.label}")
    emit("Decreasing" if darken else "Increasing")

    made = start
    b_diff = abs(darkness_score(start) - bg_darkness)
    c_diff = contrast_difference(background, start)
    steps = 0
    readable = False

    for state in step_generator(strategy)(r, g, b, darken):
        steps += 1
        made = Color.from_rgb255(state.r, state.g, state.b)
        emit(f"{format_factor_percent(state.factor)} Candidate {made.to_hex()}")

        b_diff = abs(darkness_score(made) - bg_darkness)
        c_diff = contrast_difference(background, made)
        diff_line = f"BDiff {b_diff} - CDiff {c_diff}"
        emit(diff_line)

        if b_diff >= BRIGHTNESS_DIFF_THRESHOLD and c_diff >= COLOR_DIFF_THRESHOLD:
            readable = True
            emit(f"Elected Candidate {made.to_hex()}")
            emit(diff_line)
            break

    return MatchResult(
        color=made,
        readable=readable,
        steps=steps,
        brightness_difference=b_diff,
        color_difference=c_diff,
        strategy=strategy,
    )


def find_readable_color(
    background: Color,
    starting_from: Optional[Color] = None,
    strategy: Union[MatchStrategy, str] = MatchStrategy.LINEAR,
    verbose: bool = False,
    log_fn: Optional[LogFn] = None,
) -> Color:
    """First readable colour reached from starting_from (best effort, never raises)."""
    return match_readable_color(
        background,
        starting_from,
        strategy=strategy,
        verbose=verbose,
        log_fn=log_fn,
    ).color


def _silent(message: str) -> None:
    return None


__all__ = [
    "LogFn",
    "MatchResult",
    "match_readable_color",
    "find_readable_color",
]
