from __future__ import annotations

import logging
from typing import List

from ..constants import CAPACITY, HEADER_CELLS, HEIGHT, VERSION, WIDTH
from .errors import ContentTooLong, UnsupportedCharacter
from .mapping import UNSUPPORTED, symbol_for
from .types import EncodedGrid

logger = logging.getLogger(__name__)


def map_content(content: str) -> List[int]:
    """Map every character to its symbol code, failing on the first unsupported one."""
    if len(content) > CAPACITY:
        raise ContentTooLong(len(content), CAPACITY)
    symbols = []
    for position, char in enumerate(content):
        symbol = symbol_for(char)
        if symbol == UNSUPPORTED:
            raise UnsupportedCharacter(char, position)
        symbols.append(symbol)
    return symbols


def encode(content: str) -> EncodedGrid:
    """Pack content into a versioned WIDTH x HEIGHT grid."""
    symbols = map_content(content)

    # Unused cells hold their own index. A decoder tells them apart from
    # payload because payload indices are bounded by the length in cell 1.
    cells = list(range(WIDTH * HEIGHT))
    cells[0] = VERSION
    cells[1] = len(content)
    cells[HEADER_CELLS : HEADER_CELLS + len(symbols)] = symbols

    logger.debug("Encoded %d characters into a %dx%d grid", len(content), HEIGHT, WIDTH)
    return EncodedGrid(version=VERSION, rows=HEIGHT, cols=WIDTH, cells=tuple(cells))
