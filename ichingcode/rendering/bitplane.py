from __future__ import annotations

from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class Point:
    x: int
    y: int


class BitPlane:
    """Fixed-size grid of 0/1 pixels addressed as (x, y).

    Reads outside the plane return 0 and writes outside it are ignored, so
    pattern drawing near the edges needs no clipping of its own.
    """

    def __init__(self, height: int, width: int) -> None:
        if height <= 0 or width <= 0:
            raise ValueError("BitPlane dimensions must be greater than zero")
        self._height = height
        self._width = width
        self._bits = bytearray(width * height)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def get(self, x: int, y: int) -> int:
        if not self.contains(x, y):
            return 0
        return self._bits[y * self._width + x]

    def set(self, x: int, y: int, value: int) -> None:
        if not self.contains(x, y):
            return
        self._bits[y * self._width + x] = 1 if value else 0

    def row(self, y: int) -> List[int]:
        if not 0 <= y < self._height:
            raise IndexError(f"Row {y} out of range")
        start = y * self._width
        return list(self._bits[start : start + self._width])

    def to_bytes(self) -> bytes:
        """Return a row-major snapshot of the pixels."""
        return bytes(self._bits)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BitPlane):
            return NotImplemented
        return (
            self._width == other._width
            and self._height == other._height
            and self._bits == other._bits
        )

    def __repr__(self) -> str:
        return f"BitPlane(height={self._height}, width={self._width})"
