from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from PIL import Image

from .bitmap import Bitmap

DEFAULT_SCALE = 4
BLACK = 0
WHITE = 255


@dataclass
class ExportSettings:
    scale: int = DEFAULT_SCALE
    invert: bool = False


def bitmap_to_image(bitmap: Bitmap, settings: Optional[ExportSettings] = None) -> Image.Image:
    """Convert a bitmap into a 1-bit Pillow image, foreground black by default."""
    settings = settings or ExportSettings()
    if settings.scale < 1:
        raise ValueError("Scale must be at least 1")
    fg, bg = (WHITE, BLACK) if settings.invert else (BLACK, WHITE)
    img = Image.new("L", (bitmap.width, bitmap.height), bg)
    img.putdata([fg if p else bg for p in bitmap.to_pixels()])
    if settings.scale != 1:
        size = (bitmap.width * settings.scale, bitmap.height * settings.scale)
        img = img.resize(size, Image.NEAREST)
    return img.point(lambda v: WHITE if v else BLACK, "1")


def save_bitmap(bitmap: Bitmap, path: str, settings: Optional[ExportSettings] = None) -> None:
    """Write a bitmap to disk; the format follows the file extension."""
    bitmap_to_image(bitmap, settings).save(path)
