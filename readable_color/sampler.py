# readable_color/sampler.py
from __future__ import annotations

from typing import Sequence, Union

import numpy as np
from PIL import Image

from .constants import BYTE_MAX
from .core_types import Color, Region, assert_u8_rgba_array, clamp_value
from .errors import InvalidBackgroundContent

"""
Average colour of a surface region.

Exports:
- color_from_rgba_bytes(r, g, b, a)                 -> Color
- average_color(surface)                            -> Color
- average_region_color(surface, region)             -> Color
- average_buffer_color(buffer, width, height, region=None) -> Color
- as_rgba_image(surface)                            -> PIL RGBA image

Notes:
- The region is box-filtered into a single premultiplied RGBA pixel, the same
  way drawing it into a 1x1 bitmap context would.
- Regions are clipped to the surface. An empty intersection raises
  InvalidBackgroundContent.
"""

Surface = Union[Image.Image, np.ndarray]
RegionLike = Union[Region, Sequence[int]]


def color_from_rgba_bytes(r: int, g: int, b: int, a: int) -> Color:
    """
    Read one premultiplied RGBA pixel.
    alpha > 0 : channel * (alpha/255) / 255, alpha/255
    alpha == 0: channel / 255, alpha 0
    """
    if a > 0:
        alpha = a / BYTE_MAX
        multiplier = alpha / BYTE_MAX
        return Color(
            clamp_value(r * multiplier, 0.0, 1.0),
            clamp_value(g * multiplier, 0.0, 1.0),
            clamp_value(b * multiplier, 0.0, 1.0),
            alpha,
        )
    return Color(r / BYTE_MAX, g / BYTE_MAX, b / BYTE_MAX, 0.0)


def as_rgba_image(surface: Surface) -> Image.Image:
    """Pillow image or uint8 (H,W,3/4) array to an RGBA Pillow image."""
    if isinstance(surface, Image.Image):
        return surface if surface.mode == "RGBA" else surface.convert("RGBA")
    arr = assert_u8_rgba_array(np.asarray(surface))
    if arr.shape[0] == 0 or arr.shape[1] == 0:
        raise InvalidBackgroundContent("surface has no pixels")
    if arr.shape[-1] == 3:
        alpha = np.full(arr.shape[:2] + (1,), 255, dtype=np.uint8)
        arr = np.concatenate([arr, alpha], axis=-1)
    return Image.fromarray(np.ascontiguousarray(arr))


def average_color(surface: Surface) -> Color:
    """Average colour over the whole surface."""
    im = as_rgba_image(surface)
    return average_region_color(im, Region(0, 0, im.width, im.height))


def average_region_color(surface: Surface, region: RegionLike) -> Color:
    """Box-filter region of surface down to one pixel and read it back."""
    im = as_rgba_image(surface)
    requested = Region.coerce(region)
    if requested.area == 0:
        raise InvalidBackgroundContent(f"region has zero area: {requested}")
    clipped = requested.clip(im.width, im.height)
    if clipped.area == 0:
        raise InvalidBackgroundContent(
            f"region {requested} does not intersect the {im.width}x{im.height} surface"
        )

    premultiplied = im.crop(clipped.box).convert("RGBa")
    pixel = premultiplied.resize((1, 1), Image.Resampling.BOX).getpixel((0, 0))
    r, g, b, a = (int(v) for v in pixel)  # type: ignore[union-attr]
    return color_from_rgba_bytes(r, g, b, a)


def average_buffer_color(
    buffer: bytes,
    width: int,
    height: int,
    region: RegionLike | None = None,
) -> Color:
    """Average colour of a flat, row-major RGBA byte buffer."""
    if width <= 0 or height <= 0:
        raise InvalidBackgroundContent(f"buffer size {width}x{height} has no pixels")
    expected = width * height * 4
    if len(buffer) != expected:
        raise ValueError(
            f"buffer holds {len(buffer)} bytes, expected {expected} for {width}x{height} RGBA"
        )
    arr = np.frombuffer(buffer, dtype=np.uint8).reshape(height, width, 4).copy()
    if region is None:
        return average_color(arr)
    return average_region_color(arr, region)


__all__ = [
    "Surface",
    "RegionLike",
    "color_from_rgba_bytes",
    "as_rgba_image",
    "average_color",
    "average_region_color",
    "average_buffer_color",
]
