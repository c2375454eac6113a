from __future__ import annotations

from typing import Tuple

UNSUPPORTED = -1

# Indexed by code point: lowercase -> 0..25, uppercase -> 26..51, digits -> 52..61.
MAPPING_TABLE: Tuple[int, ...] = (
    -1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1,
    -1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1,
    -1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1,
    52, 53, 54, 55, 56, 57, 58, 59, 60, 61, -1, -1, -1, -1, -1, -1,
    -1, 26, 27, 28, 29, 30, 31, 32, 33, 34, 35, 36, 37, 38, 39, 40,
    41, 42, 43, 44, 45, 46, 47, 48, 49, 50, 51, -1, -1, -1, -1, -1,
    -1, 0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14,
    15, 16, 17, 18, 19, 20, 21, 22, 23, 24, 25, -1, -1, -1, -1, -1,
)


def symbol_for(char: str) -> int:
    """Return the symbol code for a character, or UNSUPPORTED."""
    code = ord(char)
    if code >= len(MAPPING_TABLE):
        return UNSUPPORTED
    return MAPPING_TABLE[code]


def is_supported(char: str) -> bool:
    return symbol_for(char) != UNSUPPORTED
