from __future__ import annotations

# Code format
VERSION = 0
WIDTH = 8
HEIGHT = 8
# Cells 0 and 1 hold the version and the content length.
HEADER_CELLS = 2
CAPACITY = WIDTH * HEIGHT - HEADER_CELLS

# Glyph geometry. SYMBOL_DIM must stay 11 * UNIT_DIM so the six bars and the
# centred notch fit the cell, and UNIT_DIM must be even for the notch offset.
UNIT_DIM = 2
BITS_PER_SYMBOL = 6
SYMBOL_DIM = 11 * UNIT_DIM
GAP_DIM = 8

# Registration patterns
FINDER_RADIUS = 14
FINDER_OFFSET = 16
GRID_OFFSET = 36
