"""Tab-separated normalization fixture files.

Responsibilities:
- Read and write `original<TAB>normalized` fixture pairs, one per line.
- Check fixture pairs against a normalizer and report mismatches.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

from ..errors import FixtureFormatError
from ..text.normalizer import NacoNormalizer


@dataclass(frozen=True, slots=True)
class FixturePair:
    """One fixture row: an original heading and its expected normalized form."""

    line_number: int
    original: str
    expected: str


@dataclass(frozen=True, slots=True)
class FixtureMismatch:
    """A fixture row whose normalized output differs from the expected value."""

    line_number: int
    original: str
    expected: str
    actual: str


@dataclass(frozen=True, slots=True)
class FixtureCheckReport:
    """Outcome of checking fixture pairs against a normalizer."""

    total: int
    mismatches: list[FixtureMismatch] = field(default_factory=list)

    @property
    def passed(self) -> int:
        return self.total - len(self.mismatches)

    @property
    def ok(self) -> bool:
        return not self.mismatches


def _strip_line_ending(line: str) -> str:
    """Drop only the newline terminator; surrounding spaces are significant."""

    if line.endswith("\r\n"):
        return line[:-2]
    if line.endswith("\n"):
        return line[:-1]
    return line


def read_fixture_pairs(path: Path) -> list[FixturePair]:
    """Read fixture pairs from a UTF-8 tab-separated file.

    Blank lines are skipped. Each remaining line is split on its first tab.

    Raises:
        FixtureFormatError: If a line is not valid UTF-8 or a non-blank line
            contains no tab separator.
    """

    pairs: list[FixturePair] = []
    with path.open("rb") as handle:
        for line_number, raw_bytes in enumerate(handle, start=1):
            try:
                raw_line = raw_bytes.decode("utf-8")
            except UnicodeDecodeError as exc:
                raise FixtureFormatError(
                    path, line_number, f"line is not valid UTF-8 ({exc.reason})."
                ) from exc
            line = _strip_line_ending(raw_line)
            if not line.strip():
                continue
            original, separator, expected = line.partition("\t")
            if not separator:
                raise FixtureFormatError(
                    path, line_number, "expected `original<TAB>normalized` pair."
                )
            pairs.append(
                FixturePair(line_number=line_number, original=original, expected=expected)
            )
    return pairs


def write_fixture_pairs(path: Path, pairs: Iterable[tuple[str, str]]) -> int:
    """Write `(original, normalized)` pairs as newline-terminated fixture lines.

    Returns:
        Number of written lines.
    """

    count = 0
    with path.open("w", encoding="utf-8", newline="\n") as handle:
        for original, normalized in pairs:
            if "\t" in original or "\n" in original:
                raise ValueError("Fixture originals must not contain tabs or newlines.")
            handle.write(f"{original}\t{normalized}\n")
            count += 1
    return count


def check_fixture_pairs(
    pairs: Iterable[FixturePair], normalizer: NacoNormalizer
) -> FixtureCheckReport:
    """Normalize each fixture original and collect rows that do not match."""

    total = 0
    mismatches: list[FixtureMismatch] = []
    for pair in pairs:
        total += 1
        actual = normalizer.normalize(pair.original)
        if actual != pair.expected:
            mismatches.append(
                FixtureMismatch(
                    line_number=pair.line_number,
                    original=pair.original,
                    expected=pair.expected,
                    actual=actual,
                )
            )
    return FixtureCheckReport(total=total, mismatches=mismatches)
