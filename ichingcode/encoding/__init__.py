from .encoder import encode, map_content
from .errors import ContentTooLong, EncodingError, UnsupportedCharacter
from .mapping import MAPPING_TABLE, UNSUPPORTED, is_supported, symbol_for
from .types import EncodedGrid

__all__ = [
    "ContentTooLong",
    "EncodedGrid",
    "EncodingError",
    "MAPPING_TABLE",
    "UNSUPPORTED",
    "UnsupportedCharacter",
    "encode",
    "is_supported",
    "map_content",
    "symbol_for",
]
