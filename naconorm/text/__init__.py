"""NACO text normalization components.

This package provides the Latin-1 fallback table and the deterministic
heading normalizer built on top of it.
"""

from .fallback import LATIN1_FALLBACK, LATIN1_FALLBACK_CHARS, fallback_for
from .normalizer import (
    DEFAULT_CASE,
    CaseMode,
    NacoNormalizer,
    naco_normalize,
    resolve_case_mode,
)

__all__ = [
    "CaseMode",
    "DEFAULT_CASE",
    "LATIN1_FALLBACK",
    "LATIN1_FALLBACK_CHARS",
    "NacoNormalizer",
    "fallback_for",
    "naco_normalize",
    "resolve_case_mode",
]
