from __future__ import annotations


class EncodingError(ValueError):
    """Base class for content that cannot be packed into a code."""


class ContentTooLong(EncodingError):
    def __init__(self, length: int, capacity: int) -> None:
        super().__init__(f"Content has {length} characters, at most {capacity} fit in a code")
        self.length = length
        self.capacity = capacity


class UnsupportedCharacter(EncodingError):
    def __init__(self, character: str, position: int) -> None:
        super().__init__(f"Unsupported character {character!r} at position {position}")
        self.character = character
        self.position = position
