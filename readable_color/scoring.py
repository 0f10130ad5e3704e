# readable_color/scoring.py
from __future__ import annotations

"""
Darkness and colour-difference scores (W3C AERT colour contrast).

Exports:
- darkness_score(color)                 -> float in [0, 255]
- darkness_scores(rgb)                  -> vectorized variant for (..., 3) arrays
- contrast_difference(a, b)             -> float >= 0 (alpha ignored)
- brightness_difference(a, b)           -> |darkness(a) - darkness(b)|
- is_readable(background, foreground)   -> both thresholds met

http://www.w3.org/WAI/ER/WD-AERT/#color-contrast
"""

import numpy as np

from .constants import (
    BRIGHTNESS_DIFF_THRESHOLD,
    COLOR_DIFF_THRESHOLD,
    LUMA_DIVISOR,
    LUMA_WEIGHTS,
)
from .core_types import Color


def darkness_score(color: Color) -> float:
    """Weighted luma of the colour at byte scale: 0 for black, 255 for white."""
    r, g, b = color.rgb255()
    wr, wg, wb = LUMA_WEIGHTS
    return (r * wr + g * wg + b * wb) / LUMA_DIVISOR


def darkness_scores(rgb: np.ndarray) -> np.ndarray:
    """
    Darkness score for every row of an (..., 3) array.
    uint8 input is taken at byte scale, float input as [0, 1]. Returns float64.
    """
    arr = np.asarray(rgb)
    if arr.dtype == np.uint8:
        vals = arr.astype(np.float64)
    else:
        vals = np.clip(arr.astype(np.float64), 0.0, 1.0) * 255.0
    weights = np.asarray(LUMA_WEIGHTS, dtype=np.float64) / LUMA_DIVISOR
    return vals[..., :3] @ weights


def contrast_difference(color_a: Color, color_b: Color) -> float:
    """Sum of per-channel absolute differences at byte scale."""
    total = 0.0
    for ca, cb in zip(color_a.rgb255(), color_b.rgb255()):
        total += max(ca, cb) - min(ca, cb)
    return total


def brightness_difference(color_a: Color, color_b: Color) -> float:
    return abs(darkness_score(color_a) - darkness_score(color_b))


def is_readable(background: Color, foreground: Color) -> bool:
    """True when both the brightness and colour difference thresholds are met."""
    return (
        brightness_difference(background, foreground) >= BRIGHTNESS_DIFF_THRESHOLD
        and contrast_difference(background, foreground) >= COLOR_DIFF_THRESHOLD
    )


__all__ = [
    "darkness_score",
    "darkness_scores",
    "contrast_difference",
    "brightness_difference",
    "is_readable",
]
