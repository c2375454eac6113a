"""Tests for exporting bitmaps through Pillow."""

import pytest
from PIL import Image

from ichingcode import constants as c
from ichingcode.rendering import ExportSettings, bitmap_to_image, save_bitmap


def test_default_export(sample_bitmap):
    img = bitmap_to_image(sample_bitmap)
    assert img.mode == "1"
    assert img.size == (sample_bitmap.width * 4, sample_bitmap.height * 4)


def test_foreground_is_black(sample_bitmap):
    img = bitmap_to_image(sample_bitmap, ExportSettings(scale=1))
    assert img.size == (sample_bitmap.width, sample_bitmap.height)
    f = c.FINDER_OFFSET
    assert img.getpixel((f, f)) == 0
    assert img.getpixel((0, 0)) == 255


def test_scaled_blocks(sample_bitmap):
    img = bitmap_to_image(sample_bitmap, ExportSettings(scale=3))
    f = c.FINDER_OFFSET
    for dx in range(3):
        for dy in range(3):
            assert img.getpixel((f * 3 + dx, f * 3 + dy)) == 0


def test_invert(sample_bitmap):
    img = bitmap_to_image(sample_bitmap, ExportSettings(scale=1, invert=True))
    f = c.FINDER_OFFSET
    assert img.getpixel((f, f)) == 255
    assert img.getpixel((0, 0)) == 0


def test_invalid_scale(sample_bitmap):
    with pytest.raises(ValueError):
        bitmap_to_image(sample_bitmap, ExportSettings(scale=0))


def test_save_png(sample_bitmap, tmp_path):
    path = tmp_path / "code.png"
    save_bitmap(sample_bitmap, str(path), ExportSettings(scale=2))
    with Image.open(path) as img:
        assert img.format == "PNG"
        assert img.size == (sample_bitmap.width * 2, sample_bitmap.height * 2)
