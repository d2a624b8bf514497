"""NACO heading normalization.

Responsibilities:
- Rewrite bibliographic heading strings into a canonical comparable form.
- Keep normalization deterministic for a given text and case mode.

Key public API:
- `naco_normalize`: stateless normalization with inline options.
- `NacoNormalizer`: holds a case mode and normalizes with it.
"""

from __future__ import annotations

import re
import string
from typing import Iterable, Literal, Mapping

from .fallback import LATIN1_FALLBACK

CaseMode = Literal["upper", "lower"]

DEFAULT_CASE: CaseMode = "upper"

SPACE_CHARACTERS = "!(){}<>-;:.?,/\\@*%=$^_~"
DELETED_CHARACTERS = "'[]|"

_SPACE_TABLE = str.maketrans({char: " " for char in SPACE_CHARACTERS})
_DELETE_TABLE = str.maketrans("", "", DELETED_CHARACTERS)
_FALLBACK_TABLE = dict(LATIN1_FALLBACK)
_UPPER_TABLE = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)
_LOWER_TABLE = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_WHITESPACE_RE = re.compile(r"\s+")


def resolve_case_mode(value: object) -> CaseMode:
    """Return `lower` only for the exact value `lower`; anything else is `upper`."""

    if value == "lower":
        return "lower"
    return DEFAULT_CASE


def _apply_case(text: str, case: CaseMode) -> str:
    """Fold basic Latin letters only, leaving every other character untouched."""

    if case == "lower":
        return text.translate(_LOWER_TABLE)
    return text.translate(_UPPER_TABLE)


def naco_normalize(
    text: str | None,
    options: Mapping[str, object] | None = None,
) -> str:
    """Normalize `text` according to the NACO rules.

    Args:
        text: Heading text to normalize. `None` is treated as an empty string.
        options: Optional mapping; only the `case` key is read
            (`"upper"` or `"lower"`, defaulting to `"upper"`).

    Returns:
        The normalized heading string.
    """

    if not text:
        return ""

    case = resolve_case_mode((options or {}).get("case"))

    data = text.translate(_SPACE_TABLE)
    data = data.translate(_DELETE_TABLE)
    data = data.translate(_FALLBACK_TABLE)
    data = _apply_case(data, case)
    data = data.strip()
    return _WHITESPACE_RE.sub(" ", data)


class NacoNormalizer:
    """Normalize headings with a stored, mutable case mode."""

    def __init__(self, case: object = DEFAULT_CASE) -> None:
        """Initialize with a case mode; unknown values fall back to `upper`."""

        self._case: CaseMode = resolve_case_mode(case)

    @property
    def case(self) -> CaseMode:
        """Case mode applied to normalized output."""

        return self._case

    @case.setter
    def case(self, value: object) -> None:
        self._case = resolve_case_mode(value)

    def get_case(self) -> CaseMode:
        """Return the current case mode."""

        return self._case

    def set_case(self, value: object) -> None:
        """Change the case mode used by subsequent `normalize` calls."""

        self.case = value

    def normalize(self, text: str | None) -> str:
        """Normalize one heading with this instance's case mode."""

        return naco_normalize(text, {"case": self._case})

    def normalize_many(self, texts: Iterable[str | None]) -> list[str]:
        """Normalize each text in order."""

        return [self.normalize(text) for text in texts]

    def __repr__(self) -> str:
        return f"NacoNormalizer(case={self._case!r})"
