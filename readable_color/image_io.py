# readable_color/image_io.py
from __future__ import annotations

import io
from pathlib import Path
from typing import Optional

from PIL import Image, ImageOps, UnidentifiedImageError

"""
Loading background images for sampling.

Exports:
- load_image_rgba(path)  -> Pillow RGBA image, upright, sRGB
- is_image_file(path)    -> bool

Sampling averages straight (non-premultiplied) RGBA in sRGB, so embedded
colour profiles are applied before the pixels are handed to the sampler.
"""

try:
    from PIL import ImageCms
except ImportError:  # pragma: no cover
    ImageCms = None  # type: ignore[assignment]


def _profile_to_srgb(im: Image.Image) -> Optional[Image.Image]:
    """RGBA copy of im in sRGB, or None when it has no usable ICC profile."""
    icc_bytes = im.info.get("icc_profile")
    if not icc_bytes or ImageCms is None:
        return None
    try:
        return ImageCms.profileToProfile(
            im,
            ImageCms.ImageCmsProfile(io.BytesIO(icc_bytes)),
            ImageCms.createProfile("sRGB"),
            renderingIntent=ImageCms.Intent.PERCEPTUAL,
            outputMode="RGBA",
        )
    except (ImageCms.PyCMSError, OSError, ValueError):
        return None


def load_image_rgba(path: Path) -> Image.Image:
    """Open an image, apply EXIF orientation and ICC profile, return it as RGBA."""
    with Image.open(path) as src:
        upright = ImageOps.exif_transpose(src)
        im = _profile_to_srgb(upright)
        if im is None:
            im = upright.convert("RGBA")
        im.load()
    return im


def is_image_file(path: Path) -> bool:
    try:
        with Image.open(path) as im:
            im.load()
        return True
    except (UnidentifiedImageError, OSError):
        return False


__all__ = [
    "load_image_rgba",
    "is_image_file",
]
