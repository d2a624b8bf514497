"""Command-line interface for naconorm.

Responsibilities:
- Expose user-facing commands for heading normalization.
- Convert CLI arguments into `NormalizerConfig` and run the normalizer.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Annotated

import typer

from .cli_rendering import echo_fixture_report, exit_with_command_error
from .config import NormalizerConfig, resolve_config
from .errors import CommandStageError, FixtureFormatError
from .io.fixtures import check_fixture_pairs, read_fixture_pairs
from .telemetry.logger import RunLogger

app = typer.Typer(
    name="naconorm",
    no_args_is_help=True,
    help="NACO heading normalization CLI.",
)

_CaseOption = Annotated[
    str | None,
    typer.Option("--case", help="Output case: `upper` (default) or `lower`."),
]
_ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", help="Optional YAML config file with a `case` key."),
]


def _load_config(case: str | None, config_file: Path | None) -> NormalizerConfig:
    """Resolve effective config and map loader failures to stage errors."""

    try:
        return resolve_config(case=case, config_path=config_file)
    except FileNotFoundError as exc:
        raise CommandStageError(
            stage="config",
            detail=f"Config file not found: `{config_file}`.",
            hint="Provide an existing path via `--config <path.yaml>`.",
        ) from exc
    except ValueError as exc:
        raise CommandStageError(
            stage="config",
            detail=f"Invalid config file `{config_file}`: {exc}",
            hint="Only the `case` key (`upper` or `lower`) is supported.",
        ) from exc


@app.command("normalize")
def normalize_command(
    texts: Annotated[
        list[str] | None,
        typer.Argument(help="Headings to normalize. Reads stdin lines when omitted."),
    ] = None,
    case: _CaseOption = None,
    config_file: _ConfigOption = None,
) -> None:
    """Normalize headings and print one result per line."""

    run_logger = RunLogger()
    try:
        normalizer = _load_config(case, config_file).build_normalizer()
    except Exception as exc:
        run_logger.log_stage_failure("config", type(exc).__name__)
        exit_with_command_error("normalize", exc)

    source = texts if texts else (line.rstrip("\r\n") for line in sys.stdin)
    count = 0
    for text in source:
        typer.echo(normalizer.normalize(text))
        count += 1
    run_logger.log_stage_complete("normalize", case=normalizer.case, count=count)


@app.command("check")
def check_command(
    fixtures: Annotated[
        list[Path],
        typer.Argument(help="Tab-separated `original<TAB>normalized` fixture files."),
    ],
    case: _CaseOption = None,
    config_file: _ConfigOption = None,
) -> None:
    """Verify fixture files against the normalizer."""

    run_logger = RunLogger()
    try:
        normalizer = _load_config(case, config_file).build_normalizer()
    except Exception as exc:
        run_logger.log_stage_failure("config", type(exc).__name__)
        exit_with_command_error("check", exc)

    failed = False
    for fixture_path in fixtures:
        run_logger.log_stage_start("check", fixture=fixture_path)
        try:
            pairs = read_fixture_pairs(fixture_path)
        except FileNotFoundError as exc:
            run_logger.log_stage_failure("check", type(exc).__name__)
            exit_with_command_error(
                "check",
                CommandStageError(
                    stage="fixtures",
                    detail=f"Fixture file not found: `{fixture_path}`.",
                    hint="Pass existing tab-separated fixture files.",
                ),
            )
        except OSError as exc:
            run_logger.log_stage_failure("check", type(exc).__name__)
            exit_with_command_error(
                "check",
                CommandStageError(
                    stage="fixtures",
                    detail=f"Cannot read fixture file `{fixture_path}`: {exc.strerror or exc}",
                    hint="Pass readable tab-separated fixture files, not directories.",
                ),
            )
        except FixtureFormatError as exc:
            run_logger.log_stage_failure("check", type(exc).__name__)
            exit_with_command_error(
                "check",
                CommandStageError(
                    stage="fixtures",
                    detail=f"Malformed fixture line {exc.path}:{exc.line_number}: {exc.detail}",
                    hint="Each line must be `original<TAB>normalized`.",
                ),
            )

        report = check_fixture_pairs(pairs, normalizer)
        echo_fixture_report(fixture_path, report)
        run_logger.log_stage_complete(
            "check",
            fixture=fixture_path,
            passed=report.passed,
            total=report.total,
        )
        failed = failed or not report.ok

    if failed:
        raise typer.Exit(code=1)


def main() -> None:
    """CLI entrypoint for console scripts."""
    app()


if __name__ == "__main__":
    main()
