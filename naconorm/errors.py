"""Domain exceptions for fixture handling and CLI diagnostics."""

from __future__ import annotations

from pathlib import Path


class CommandStageError(RuntimeError):
    """Raised when a specific command stage fails."""

    def __init__(
        self,
        *,
        stage: str,
        detail: str,
        hint: str | None = None,
    ) -> None:
        """Initialize a stage-scoped command error."""

        super().__init__(detail)
        self.stage = stage
        self.detail = detail
        self.hint = hint


class FixtureFormatError(ValueError):
    """Raised when a fixture line is not an `original<TAB>normalized` pair."""

    def __init__(self, path: Path, line_number: int, detail: str) -> None:
        super().__init__(f"{path}:{line_number}: {detail}")
        self.path = path
        self.line_number = line_number
        self.detail = detail
