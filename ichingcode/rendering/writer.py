from __future__ import annotations

import logging
from typing import Tuple

from .. import constants as c
from ..encoding.types import EncodedGrid
from .bitmap import Bitmap
from .bitplane import BitPlane, Point

logger = logging.getLogger(__name__)


def image_size(rows: int, cols: int) -> Tuple[int, int]:
    """Return (width, height) in pixels of a code with the given grid size."""
    height = rows * c.SYMBOL_DIM + (rows - 1) * c.GAP_DIM + c.GRID_OFFSET * 2
    width = cols * c.SYMBOL_DIM + (cols - 1) * c.GAP_DIM + c.GRID_OFFSET * 2
    return width, height


def render(grid: EncodedGrid) -> Bitmap:
    """Render an encoded grid together with its registration patterns."""
    grid.validate()
    width, height = image_size(grid.rows, grid.cols)
    plane = BitPlane(height, width)

    draw_finder_pattern(plane, Point(c.FINDER_OFFSET, c.FINDER_OFFSET))
    draw_finder_pattern(plane, Point(width - c.FINDER_OFFSET, c.FINDER_OFFSET))
    draw_finder_pattern(plane, Point(c.FINDER_OFFSET, height - c.FINDER_OFFSET))
    draw_alignment_pattern(plane, Point(width - c.FINDER_OFFSET, height - c.FINDER_OFFSET))

    for row in range(grid.rows):
        for col in range(grid.cols):
            draw_symbol(plane, row, col, grid.cells[row * grid.cols + col])

    logger.debug("Rendered %dx%d grid into %dx%d bitmap", grid.rows, grid.cols, width, height)
    return Bitmap.from_plane(plane)


def pattern_radii(radius: int = c.FINDER_RADIUS) -> Tuple[int, int, int]:
    """Return the (core, gap, outer) radii of a registration pattern."""
    return radius * 3 // 7, radius * 5 // 7, radius


def draw_finder_pattern(plane: BitPlane, centre: Point) -> None:
    r1, r2, r3 = pattern_radii()

    # Inner disk.
    for r in range(0, r1 + 1):
        draw_circle(plane, centre, r, 1)

    # Outer ring.
    for r in range(r2 + 1, r3 + 1):
        draw_circle(plane, centre, r, 1)


def draw_alignment_pattern(plane: BitPlane, centre: Point) -> None:
    """Fill the band a finder pattern leaves empty, and nothing else."""
    r1, r2, _ = pattern_radii()
    for r in range(r1 + 1, r2 + 1):
        draw_circle(plane, centre, r, 1)


def draw_circle(plane: BitPlane, centre: Point, radius: int, color: int) -> None:
    """Draw a one pixel wide circle with the integer midpoint algorithm.

    Walks one octant from (radius, 0) until x < y and mirrors every step into
    the other seven.
    """
    x = radius
    y = 0
    dx = 1
    dy = 1
    err = dx - 2 * radius
    while x >= y:
        _set_octants(plane, centre, x, y, color)
        if err <= 0:
            y += 1
            err += dy
            dy += 2
        else:
            x -= 1
            dx += 2
            err += dx - 2 * radius


def _set_octants(plane: BitPlane, centre: Point, x: int, y: int, color: int) -> None:
    plane.set(centre.x + x, centre.y + y, color)
    plane.set(centre.x + x, centre.y - y, color)
    plane.set(centre.x - x, centre.y + y, color)
    plane.set(centre.x - x, centre.y - y, color)
    plane.set(centre.x + y, centre.y + x, color)
    plane.set(centre.x + y, centre.y - x, color)
    plane.set(centre.x - y, centre.y + x, color)
    plane.set(centre.x - y, centre.y - x, color)


def symbol_origin(row: int, col: int) -> Point:
    """Return the top-left pixel of a grid cell."""
    step = c.SYMBOL_DIM + c.GAP_DIM
    return Point(col * step + c.GRID_OFFSET, row * step + c.GRID_OFFSET)


def draw_symbol(plane: BitPlane, row: int, col: int, value: int) -> None:
    """Draw one bar per bit: solid for 1, notched in the middle for 0."""
    origin = symbol_origin(row, col)
    notch_x = origin.x + c.UNIT_DIM * 9 // 2
    for bit in range(c.BITS_PER_SYMBOL):
        bar_y = origin.y + c.UNIT_DIM * bit * 2
        fill_rect(plane, origin.x, bar_y, c.SYMBOL_DIM, c.UNIT_DIM, 1)
        # Punch after the fill, the notch lies inside the bar.
        if value & (1 << bit) == 0:
            fill_rect(plane, notch_x, bar_y, c.UNIT_DIM * 2, c.UNIT_DIM, 0)


def fill_rect(plane: BitPlane, x: int, y: int, width: int, height: int, color: int) -> None:
    for i in range(height):
        for j in range(width):
            plane.set(x + j, y + i, color)
