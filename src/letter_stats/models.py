"""Data models for letter statistics.

This module contains the character class enum, the single statistics entry
and the table that collects entries during a scan.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum


class CharType(Enum):
    """Character classes that can be filtered out of a statistics table."""

    VOWEL = "vowel"
    CONSONANT = "consonant"


@dataclass
class LetterStats:
    """Represents the number of occurrences of a letter or a letter pair."""

    letter: str  # One character for singles, two for doubled pairs
    count: int

    def __str__(self) -> str:
        return f"{self.letter} : {self.count}"


class LetterStatsTable:
    """Collection of letter statistics keyed by letter.

    Keys are unique and insertion order carries no meaning; use
    ``sorted_entries`` to get a stable ordering for output.
    """

    def __init__(self, counts: dict[str, int] | None = None) -> None:
        """Initialize the table.

        Args:
            counts: Optional initial mapping of letter keys to counts
        """
        self._counts: dict[str, int] = dict(counts) if counts else {}

    def increment(self, letter: str) -> int:
        """Count one more occurrence of a letter key.

        Args:
            letter: The letter or letter pair that was seen

        Returns
        -------
            The updated count for the key
        """
        self._counts[letter] = self._counts.get(letter, 0) + 1
        return self._counts[letter]

    def get(self, letter: str) -> int:
        """Return the count for a key, or 0 if it was never seen."""
        return self._counts.get(letter, 0)

    def remove(self, letter: str) -> None:
        """Remove the entry for a key.

        Raises
        ------
            KeyError: If the key is not in the table
        """
        del self._counts[letter]

    def keys(self) -> list[str]:
        return list(self._counts)

    def as_dict(self) -> dict[str, int]:
        """Return a copy of the table as a plain dictionary."""
        return dict(self._counts)

    def sorted_entries(self) -> list[LetterStats]:
        """Return the entries sorted by key in ascending ordinal order."""
        return [
            LetterStats(letter, self._counts[letter]) for letter in sorted(self._counts)
        ]

    @property
    def total(self) -> int:
        """Sum of the counts of all entries."""
        return sum(self._counts.values())

    def __iter__(self) -> Iterator[LetterStats]:
        for letter, count in self._counts.items():
            yield LetterStats(letter, count)

    def __contains__(self, letter: object) -> bool:
        return letter in self._counts

    def __len__(self) -> int:
        return len(self._counts)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, LetterStatsTable):
            return self._counts == other._counts
        if isinstance(other, dict):
            return self._counts == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"LetterStatsTable({self._counts!r})"
