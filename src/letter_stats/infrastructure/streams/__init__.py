"""Character stream modules for the letter_stats infrastructure layer."""

from .character_stream import (
    CharacterStream,
    FileCharacterStream,
    StringCharacterStream,
    iter_chars,
)

__all__ = [
    "CharacterStream",
    "FileCharacterStream",
    "StringCharacterStream",
    "iter_chars",
]
