"""Fixture file I/O for normalization regression data."""

from .fixtures import (
    FixtureCheckReport,
    FixtureMismatch,
    FixturePair,
    check_fixture_pairs,
    read_fixture_pairs,
    write_fixture_pairs,
)

__all__ = [
    "FixtureCheckReport",
    "FixtureMismatch",
    "FixturePair",
    "check_fixture_pairs",
    "read_fixture_pairs",
    "write_fixture_pairs",
]
