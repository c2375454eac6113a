"""Shared test fixtures."""

from __future__ import annotations

import pytest

from ichingcode.encoding import EncodedGrid, encode
from ichingcode.rendering import render

SAMPLE_TEXT = "IChing2024"


@pytest.fixture
def single_cell_grid():
    def build(value: int) -> EncodedGrid:
        return EncodedGrid(version=0, rows=1, cols=1, cells=(value,))

    return build


@pytest.fixture
def sample_grid() -> EncodedGrid:
    return encode(SAMPLE_TEXT)


@pytest.fixture
def sample_bitmap(sample_grid):
    return render(sample_grid)
