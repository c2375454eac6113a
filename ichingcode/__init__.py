"""Encode short alphanumeric content as an IChing code and rasterize it."""

from .encoding import ContentTooLong, EncodedGrid, EncodingError, UnsupportedCharacter, encode
from .rendering import BitPlane, Bitmap, ExportSettings, Point, bitmap_to_image, render, save_bitmap

__version__ = "0.1.0"

__all__ = [
    "BitPlane",
    "Bitmap",
    "ContentTooLong",
    "EncodedGrid",
    "EncodingError",
    "ExportSettings",
    "Point",
    "UnsupportedCharacter",
    "bitmap_to_image",
    "encode",
    "render",
    "save_bitmap",
]
