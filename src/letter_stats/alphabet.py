"""Vowel and consonant membership tables.

Only Latin and Cyrillic letters are classified. ``y``/``Y`` appears in both
tables, so it is removed by either filter.
"""

from letter_stats.models import CharType

VOWELS = frozenset("аеёиоуыэюя" "АЕЁИОУЫЭЮЯ" "aeiouy" "AEIOUY")

CONSONANTS = frozenset(
    "бвгджзйклмнпрстфхцчшщ"
    "БВГДЖЗЙКЛМНПРСТФХЦЧШЩ"
    "bcdfghjklmnpqrstvwxyz"
    "BCDFGHJKLMNPQRSTVWXYZ"
)

CHAR_TYPE_LETTERS: dict[CharType, frozenset[str]] = {
    CharType.VOWEL: VOWELS,
    CharType.CONSONANT: CONSONANTS,
}


def letters_of_type(char_type: object) -> frozenset[str]:
    """Return the letters belonging to a character class.

    Args:
        char_type: The character class to look up

    Returns
    -------
        The member letters, or an empty set for an unknown class
    """
    if not isinstance(char_type, CharType):
        return frozenset()
    return CHAR_TYPE_LETTERS.get(char_type, frozenset())
