from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Tuple


@dataclass(frozen=True)
class EncodedGrid:
    """Row-major grid of cell values produced by the encoder."""

    version: int
    rows: int
    cols: int
    cells: Tuple[int, ...]

    def validate(self) -> None:
        """Validate that the cell sequence matches the declared dimensions."""
        if self.rows <= 0 or self.cols <= 0:
            raise ValueError("Grid dimensions must be greater than zero")
        if len(self.cells) != self.rows * self.cols:
            raise ValueError("Cells length must equal rows * cols")

    def cell(self, row: int, col: int) -> int:
        return self.cells[row * self.cols + col]

    def iter_rows(self) -> Iterator[Tuple[int, ...]]:
        for row in range(self.rows):
            start = row * self.cols
            yield self.cells[start : start + self.cols]
