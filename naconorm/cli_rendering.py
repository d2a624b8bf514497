"""CLI output and error rendering helpers.

This module centralizes user-facing CLI presentation for command diagnostics
and fixture check summaries.
"""

from __future__ import annotations

from pathlib import Path
from typing import NoReturn

import typer

from .errors import CommandStageError
from .io.fixtures import FixtureCheckReport


def exit_with_command_error(command_name: str, exc: Exception) -> NoReturn:
    """Print concise diagnostics for command failures and exit with code 1."""

    if isinstance(exc, CommandStageError):
        typer.secho(
            f"{command_name} failed at stage `{exc.stage}`: {exc.detail}",
            fg=typer.colors.RED,
            err=True,
        )
        if exc.hint:
            typer.secho(f"Hint: {exc.hint}", fg=typer.colors.YELLOW, err=True)
    else:
        typer.secho(f"{command_name} failed: {exc}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1) from exc


def echo_fixture_report(path: Path, report: FixtureCheckReport) -> None:
    """Print fixture mismatches followed by a one-line summary."""

    for mismatch in report.mismatches:
        typer.echo(
            f"{path}:{mismatch.line_number}: {mismatch.original!r} -> "
            f"{mismatch.actual!r} (expected {mismatch.expected!r})"
        )
    status = "ok" if report.ok else "FAILED"
    typer.echo(f"{path}: {report.passed}/{report.total} passed [{status}]")
