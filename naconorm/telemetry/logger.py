"""Structured run logging utilities.

Responsibilities:
- Emit concise, deterministic stage-level runtime logs through `loguru`.
"""

from __future__ import annotations

import re
import sys
from typing import TextIO

from loguru import logger as _loguru_logger

_WHITESPACE_RE = re.compile(r"\s+")


def _context_token(key: str, value: object) -> str:
    """Render one `key=value` token; whitespace in paths or headings becomes `_`."""

    text = _WHITESPACE_RE.sub("_", str(value).strip())
    return f"{key}={text or 'none'}"


def _format_context(context: dict[str, object]) -> str:
    """Serialize context pairs in sorted key order, with a leading space."""

    return "".join(" " + _context_token(key, context[key]) for key in sorted(context))


class RunLogger:
    """Emit deterministic stage logs for CLI commands."""

    def __init__(self, sink: TextIO | None = None) -> None:
        """Initialize logger sink and configure deterministic formatting."""

        self._sink = sink or sys.stderr
        _loguru_logger.remove()
        _loguru_logger.add(self._sink, format="{message}", level="INFO", colorize=False)

    def _emit(self, level: str, event: str, stage: str, **context: object) -> None:
        """Emit one structured runtime log line."""

        line = f"[phase] level={level} stage={stage} event={event}{_format_context(context)}"
        _loguru_logger.log(level, line)

    def log_stage_start(self, stage: str, **context: object) -> None:
        """Emit a stage-start runtime event."""

        self._emit("INFO", "start", stage, **context)

    def log_stage_complete(self, stage: str, **context: object) -> None:
        """Emit a stage-complete runtime event."""

        self._emit("INFO", "complete", stage, **context)

    def log_stage_failure(self, stage: str, error_type: str) -> None:
        """Emit a stage-failure runtime event without sensitive payload details."""

        self._emit("ERROR", "failure", stage, error_type=error_type)
