# readable_color/core_types.py
from __future__ import annotations

"""
Core type aliases, small value objects, and lightweight helpers.
"""

from dataclasses import dataclass
from typing import Sequence, Tuple, Union

import numpy as np
from numpy.typing import NDArray

from .constants import BYTE_MAX

# Basic aliases

RGBTuple = Tuple[int, int, int]
RGBFloat = Tuple[float, float, float]
HexStr = str

U8Image = NDArray[np.uint8]  # (H, W, 3) or (H, W, 4)

# Small helpers


def clamp_value(value: float, lo: float, hi: float) -> float:
    """Clamp value to [lo, hi]."""
    return lo if value < lo else hi if value > hi else value


# Value objects


@dataclass(frozen=True)
class Color:
    """RGBA colour with every channel normalised to [0, 1]."""

    red: float
    green: float
    blue: float
    alpha: float = 1.0

    def __post_init__(self) -> None:
        for name in ("red", "green", "blue", "alpha"):
            v = float(getattr(self, name))
            if not 0.0 <= v <= 1.0:
                raise ValueError(f"{name} channel out of range [0, 1]: {v}")
            object.__setattr__(self, name, v)

    @classmethod
    def from_rgb255(
        cls, r: float, g: float, b: float, a: float = BYTE_MAX
    ) -> "Color":
        """Build from byte-range values. Values are clamped to [0, 255] first."""
        return cls(
            clamp_value(float(r), 0.0, BYTE_MAX) / BYTE_MAX,
            clamp_value(float(g), 0.0, BYTE_MAX) / BYTE_MAX,
            clamp_value(float(b), 0.0, BYTE_MAX) / BYTE_MAX,
            clamp_value(float(a), 0.0, BYTE_MAX) / BYTE_MAX,
        )

    @classmethod
    def from_components(cls, components: Sequence[float]) -> "Color":
        """
        Normalised component sequence to Color.

        (grey, alpha) is broadcast to R=G=B=grey, (r, g, b) gets alpha 1,
        (r, g, b, a) is taken as is.
        """
        values = [float(c) for c in components]
        if len(values) == 2:
            grey, alpha = values
            return cls(grey, grey, grey, alpha)
        if len(values) == 3:
            return cls(values[0], values[1], values[2], 1.0)
        if len(values) == 4:
            return cls(values[0], values[1], values[2], values[3])
        raise ValueError(f"expected 2, 3 or 4 components, got {len(values)}")

    @classmethod
    def from_hex(cls, hex_str: str) -> "Color":
        """Parse '#rgb', '#rrggbb' or '#rrggbbaa' (case-insensitive)."""
        s = hex_str.strip().lower()
        if not s.startswith("#"):
            raise ValueError("hex must start with '#'")
        if len(s) == 4:
            r, g, b = s[1], s[2], s[3]
            s = f"#{r}{r}{g}{g}{b}{b}"
        if len(s) not in (7, 9):
            raise ValueError("hex must be '#rgb', '#rrggbb' or '#rrggbbaa'")
        try:
            parts = [int(s[i : i + 2], 16) for i in range(1, len(s), 2)]
        except ValueError as exc:
            raise ValueError(f"invalid hex colour {hex_str!r}") from exc
        if len(parts) == 3:
            parts.append(255)
        return cls.from_rgb255(*parts)

    def rgb255(self) -> RGBFloat:
        """(r, g, b) scaled to [0, 255]."""
        return (self.red * BYTE_MAX, self.green * BYTE_MAX, self.blue * BYTE_MAX)

    def to_hex(self) -> HexStr:
        """
        Lowercase '#rrggbb'. Channels are rounded at byte scale, so a
        channel of 125/255 prints as 7d whatever float path produced it.
        """
        r, g, b = (int(round(c)) for c in self.rgb255())
        return rgb_to_hex((r, g, b))


@dataclass(frozen=True)
class Region:
    """Axis-aligned rectangle in surface pixel coordinates."""

    x: int
    y: int
    width: int
    height: int

    @classmethod
    def coerce(cls, value: Union["Region", Sequence[int]]) -> "Region":
        if isinstance(value, Region):
            return value
        if len(value) != 4:
            raise ValueError("region must be (x, y, width, height)")
        x, y, w, h = (int(v) for v in value)
        return cls(x, y, w, h)

    @property
    def area(self) -> int:
        if self.width <= 0 or self.height <= 0:
            return 0
        return self.width * self.height

    @property
    def box(self) -> Tuple[int, int, int, int]:
        """Pillow crop box (left, upper, right, lower)."""
        return (self.x, self.y, self.x + self.width, self.y + self.height)

    def clip(self, width: int, height: int) -> "Region":
        """Intersection with a width x height surface. May have zero area."""
        left = max(self.x, 0)
        upper = max(self.y, 0)
        right = min(self.x + self.width, width)
        lower = min(self.y + self.height, height)
        return Region(left, upper, max(0, right - left), max(0, lower - upper))


def rgb_to_hex(rgb: RGBTuple) -> HexStr:
    """RGB tuple to lowercase hex string '#rrggbb'."""
    return f"#{rgb[0]:02x}{rgb[1]:02x}{rgb[2]:02x}"


def coerce_color(value: Union[Color, str, Sequence[float]]) -> Color:
    """Accept a Color, a hex string, or a normalised component sequence."""
    if isinstance(value, Color):
        return value
    if isinstance(value, str):
        return Color.from_hex(value)
    return Color.from_components(value)


def assert_u8_rgba_array(image: np.ndarray) -> U8Image:
    """Validate a uint8 (H,W,3 or 4) array and return it typed as U8Image."""
    if image.dtype != np.uint8 or image.ndim != 3 or image.shape[-1] not in (3, 4):
        raise TypeError("expected uint8 (H,W,3/4) image")
    return image  # type: ignore[return-value]


BLACK = Color(0.0, 0.0, 0.0, 1.0)
WHITE = Color(1.0, 1.0, 1.0, 1.0)

__all__ = [
    # aliases / types
    "RGBTuple",
    "RGBFloat",
    "HexStr",
    "U8Image",
    # value objects
    "Color",
    "Region",
    "BLACK",
    "WHITE",
    # helpers
    "clamp_value",
    "rgb_to_hex",
    "coerce_color",
    "assert_u8_rgba_array",
]
