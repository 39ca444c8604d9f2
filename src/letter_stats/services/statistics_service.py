"""Service for computing letter statistics from character streams.

This module provides the single-letter and doubled-letter scans, plus the
vowel/consonant filter applied to their results.
"""

import logging

from letter_stats.alphabet import letters_of_type
from letter_stats.infrastructure.exceptions.stats_exceptions import (
    InvalidArgumentError,
)
from letter_stats.infrastructure.streams.character_stream import (
    CharacterStream,
    iter_chars,
)
from letter_stats.models import CharType, LetterStatsTable

logger = logging.getLogger(__name__)


def _upper_char(char: str) -> str:
    # Characters whose uppercase form expands (e.g. "ß" -> "SS") keep their case
    upper = char.upper()
    return upper if len(upper) == 1 else char


class StatisticsService:
    """Computes letter frequency statistics from character streams."""

    @staticmethod
    def fill_single_letter_stats(stream: CharacterStream | None) -> LetterStatsTable:
        """Count every letter in the stream.

        Statistics are case-sensitive: "A" and "a" are separate entries.

        Args:
            stream: The stream to scan from its start

        Returns
        -------
            Table mapping each letter to its number of occurrences

        Raises
        ------
            InvalidArgumentError: If no stream is given
        """
        if stream is None:
            raise InvalidArgumentError("A stream is required", argument_name="stream")

        result = LetterStatsTable()
        stream.reset_position_to_start()
        for char in iter_chars(stream):
            if not char.isalpha():
                continue
            result.increment(char)

        logger.debug(f"Found {len(result)} distinct letters ({result.total} total)")
        return result

    @staticmethod
    def fill_double_letter_stats(stream: CharacterStream | None) -> LetterStatsTable:
        """Count adjacent pairs of identical letters in the stream.

        Statistics are case-insensitive and keyed by the uppercase pair, so
        "aA" counts as "AA". Pairs overlap: "AAA" holds two pairs, at
        positions 0-1 and 1-2.

        Args:
            stream: The stream to scan from its start

        Returns
        -------
            Table mapping each doubled letter pair to its number of occurrences

        Raises
        ------
            InvalidArgumentError: If no stream is given
        """
        if stream is None:
            raise InvalidArgumentError("A stream is required", argument_name="stream")

        result = LetterStatsTable()
        stream.reset_position_to_start()
        chars = iter_chars(stream)

        first = ""
        for char in chars:
            if char.isalpha():
                first = char
                break
        if not first:
            logger.debug("No letters found in stream")
            return result

        for second in chars:
            pair = _upper_char(first) + _upper_char(second)
            if first.isalpha() and second.isalpha() and pair[0] == pair[1]:
                result.increment(pair)
            first = second

        logger.debug(f"Found {len(result)} distinct pairs ({result.total} total)")
        return result

    @staticmethod
    def remove_char_stats_by_type(
        letters: LetterStatsTable | None, char_type: CharType
    ) -> None:
        """Remove entries containing a letter of the given class.

        An entry is removed if any character of its key belongs to the class.
        The table is modified in place; unknown classes leave it untouched.

        Args:
            letters: The statistics table to filter
            char_type: The class of letters to remove
        """
        if letters is None or len(letters) == 0:
            return

        members = letters_of_type(char_type)
        if not members:
            return

        removed = [key for key in letters.keys() if any(c in members for c in key)]
        for key in removed:
            letters.remove(key)

        logger.debug(f"Removed {len(removed)} entries of type {char_type}")
