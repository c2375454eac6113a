from __future__ import annotations

from dataclasses import dataclass
from typing import List

from .bitplane import BitPlane


@dataclass(frozen=True)
class Bitmap:
    """Finished rendering of a code, as an immutable row-major 0/1 buffer."""

    width: int
    height: int
    bits: bytes

    @classmethod
    def from_plane(cls, plane: BitPlane) -> "Bitmap":
        return cls(plane.width, plane.height, plane.to_bytes())

    def get(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            return 0
        return self.bits[y * self.width + x]

    def rows(self) -> List[List[int]]:
        return [list(self.bits[y * self.width : (y + 1) * self.width]) for y in range(self.height)]

    def to_pixels(self) -> List[int]:
        """Return a row-major 0/1 pixel buffer."""
        return list(self.bits)
