"""Shared pytest fixtures for readable_color tests."""

from __future__ import annotations

from typing import List

import numpy as np
import pytest
from PIL import Image

from readable_color.core_types import Color


def solid_rgba(rgba, width: int = 4, height: int = 4) -> np.ndarray:
    """uint8 (H, W, 4) array filled with one RGBA value."""
    arr = np.zeros((height, width, 4), dtype=np.uint8)
    arr[...] = np.asarray(rgba, dtype=np.uint8)
    return arr


# ============================================================================
# Colour fixtures
# ============================================================================


@pytest.fixture
def white() -> Color:
    return Color.from_rgb255(255, 255, 255)


@pytest.fixture
def black() -> Color:
    return Color.from_rgb255(0, 0, 0)


# ============================================================================
# Surface fixtures
# ============================================================================


@pytest.fixture
def white_surface() -> np.ndarray:
    return solid_rgba((255, 255, 255, 255))


@pytest.fixture
def split_surface() -> np.ndarray:
    """4x4: left half opaque black, right half opaque white."""
    arr = solid_rgba((0, 0, 0, 255))
    arr[:, 2:] = (255, 255, 255, 255)
    return arr


@pytest.fixture
def white_png(tmp_path):
    path = tmp_path / "white.png"
    Image.fromarray(solid_rgba((255, 255, 255, 255), 8, 8)).save(path)
    return path


@pytest.fixture
def trace_lines() -> List[str]:
    return []
