"""Latin-1 Supplement to ASCII fallback table.

Responsibilities:
- Map every code point in 0xA0-0xFF to a plain ASCII replacement string.
- Stay immutable after import so the table can be shared across threads.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

LATIN1_FIRST_CODE_POINT = 0xA0
LATIN1_LAST_CODE_POINT = 0xFF

# Rows cover 0xA0-0xAF, 0xB0-0xBF, ... 0xF0-0xFF.
_FALLBACK_ROWS: tuple[tuple[str, ...], ...] = (
    (" ", " ", "C", " ", " ", "Y", " ", "SS", " ", " ", "a", " ", " ", "", " ", " "),
    (" ", " ", "2", "3", "", "u", "P", " ", " ", "1", "o", " ", "1/4", "1/2", "3/4", " "),
    ("A", "A", "A", "A", "A", "A", "AE", "C", "E", "E", "E", "E", "I", "I", "I", "I"),
    ("D", "N", "O", "O", "O", "O", "O", "x", "O", "U", "U", "U", "U", "U", "Th", "ss"),
    ("a", "a", "a", "a", "a", "a", "ae", "c", "e", "e", "e", "e", "i", "i", "i", "i"),
    ("d", "n", "o", "o", "o", "o", "o", " ", "o", "u", "u", "u", "u", "y", "th", "y"),
)

LATIN1_FALLBACK: Mapping[int, str] = MappingProxyType(
    {
        LATIN1_FIRST_CODE_POINT + offset: replacement
        for offset, replacement in enumerate(
            value for row in _FALLBACK_ROWS for value in row
        )
    }
)

LATIN1_FALLBACK_CHARS: Mapping[str, str] = MappingProxyType(
    {chr(code_point): replacement for code_point, replacement in LATIN1_FALLBACK.items()}
)


def is_latin1_supplement(char: str) -> bool:
    """Return whether a single character lies in the Latin-1 Supplement block."""

    return LATIN1_FIRST_CODE_POINT <= ord(char) <= LATIN1_LAST_CODE_POINT


def fallback_for(char: str) -> str:
    """Return the ASCII fallback for `char`, or `char` itself outside 0xA0-0xFF."""

    if not is_latin1_supplement(char):
        return char
    return LATIN1_FALLBACK_CHARS[char]
