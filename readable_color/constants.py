# readable_color/constants.py
"""
Tunables used across the project.

- Luma weights for the darkness score (W3C AERT / ITU-R BT.601)
- Readability thresholds (brightness difference, colour difference)
- Linear strategy step budget
"""
from __future__ import annotations

from typing import Tuple

BYTE_MAX: float = 255.0

# =========================
# Darkness score
# =========================
# Weights are per mille so the score is (R*299 + G*587 + B*114) / 1000.
LUMA_WEIGHTS: Tuple[int, int, int] = (299, 587, 114)
LUMA_DIVISOR: float = 1000.0

# Backgrounds at or above this darkness score count as light.
LIGHT_BACKGROUND_THRESHOLD: float = 125.0

# =========================
# Readability thresholds
# =========================
# http://www.w3.org/WAI/ER/WD-AERT/#color-contrast
BRIGHTNESS_DIFF_THRESHOLD: float = 125.0
COLOR_DIFF_THRESHOLD: float = 300.0

# =========================
# Linear strategy
# =========================
LINEAR_STEPS: int = 55
