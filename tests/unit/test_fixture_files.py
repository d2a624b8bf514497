"""Unit tests for tab-separated fixture reading, writing, and checking."""

from __future__ import annotations

from pathlib import Path

import pytest

from naconorm import NacoNormalizer
from naconorm.errors import FixtureFormatError
from naconorm.io.fixtures import (
    FixturePair,
    check_fixture_pairs,
    read_fixture_pairs,
    write_fixture_pairs,
)


def test_read_fixture_pairs_keeps_significant_spaces(tmp_path: Path) -> None:
    """Only line terminators should be stripped; blank lines are skipped."""

    fixture_path = tmp_path / "pairs.tsv"
    fixture_path.write_bytes(
        "  padded  \tPADDED\r\n\nwith\ttab\tWITH TAB\n".encode("utf-8")
    )

    pairs = read_fixture_pairs(fixture_path)

    assert pairs == [
        FixturePair(line_number=1, original="  padded  ", expected="PADDED"),
        FixturePair(line_number=3, original="with", expected="tab\tWITH TAB"),
    ]


def test_read_fixture_pairs_rejects_line_without_tab(tmp_path: Path) -> None:
    """A non-blank line without a separator should report its line number."""

    fixture_path = tmp_path / "broken.tsv"
    fixture_path.write_text("ok\tOK\nmissing separator\n", encoding="utf-8")

    with pytest.raises(FixtureFormatError) as exc_info:
        read_fixture_pairs(fixture_path)

    assert exc_info.value.line_number == 2
    assert exc_info.value.path == fixture_path


def test_write_fixture_pairs_writes_newline_terminated_lines(tmp_path: Path) -> None:
    """Writer should emit one `original<TAB>normalized` line per pair."""

    fixture_path = tmp_path / "written.tsv"
    count = write_fixture_pairs(fixture_path, [("café", "CAFE"), ("a, b", "A B")])

    assert count == 2
    assert fixture_path.read_bytes() == "café\tCAFE\na, b\tA B\n".encode("utf-8")


def test_write_fixture_pairs_rejects_tabs_in_original(tmp_path: Path) -> None:
    """Originals containing tabs cannot be represented in the format."""

    with pytest.raises(ValueError, match="tabs or newlines"):
        write_fixture_pairs(tmp_path / "bad.tsv", [("a\tb", "A B")])


def test_bundled_upper_fixture_passes(headings_fixture_path: Path) -> None:
    """Every bundled upper-case fixture pair should match normalizer output."""

    pairs = read_fixture_pairs(headings_fixture_path)
    report = check_fixture_pairs(pairs, NacoNormalizer())

    assert report.total == len(pairs) > 0
    assert report.mismatches == []
    assert report.ok


def test_bundled_lower_fixture_passes(lower_headings_fixture_path: Path) -> None:
    """Every bundled lower-case fixture pair should match lower-case output."""

    pairs = read_fixture_pairs(lower_headings_fixture_path)
    report = check_fixture_pairs(pairs, NacoNormalizer(case="lower"))

    assert report.ok
    assert report.passed == report.total


def test_check_fixture_pairs_reports_mismatches() -> None:
    """Mismatching rows should carry expected and actual values."""

    pairs = [
        FixturePair(line_number=1, original="café", expected="CAFE"),
        FixturePair(line_number=2, original="café", expected="café"),
    ]

    report = check_fixture_pairs(pairs, NacoNormalizer())

    assert report.total == 2
    assert report.passed == 1
    assert not report.ok
    (mismatch,) = report.mismatches
    assert mismatch.line_number == 2
    assert mismatch.actual == "CAFE"
    assert mismatch.expected == "café"


def test_read_fixture_pairs_rejects_invalid_utf8_with_line_number(tmp_path: Path) -> None:
    """Undecodable bytes should surface as a format error on the right line."""

    fixture_path = tmp_path / "latin1.tsv"
    fixture_path.write_bytes(b"ok\tOK\ncaf\xe9\tCAFE\n")

    with pytest.raises(FixtureFormatError, match="not valid UTF-8") as exc_info:
        read_fixture_pairs(fixture_path)

    assert exc_info.value.line_number == 2
