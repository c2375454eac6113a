from .bitmap import Bitmap
from .bitplane import BitPlane, Point
from .image import ExportSettings, bitmap_to_image, save_bitmap
from .writer import (
    draw_alignment_pattern,
    draw_circle,
    draw_finder_pattern,
    draw_symbol,
    fill_rect,
    image_size,
    pattern_radii,
    render,
    symbol_origin,
)

__all__ = [
    "BitPlane",
    "Bitmap",
    "ExportSettings",
    "Point",
    "bitmap_to_image",
    "draw_alignment_pattern",
    "draw_circle",
    "draw_finder_pattern",
    "draw_symbol",
    "fill_rect",
    "image_size",
    "pattern_radii",
    "render",
    "save_bitmap",
    "symbol_origin",
]
