# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI command running static analysis and emitting the report."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from ...config import LoaderConfig
from ...errors import ConfigError, TcsaError
from ...pipeline import run
from ...reporting import REPORT_FORMATS
from ...verdict import Verdict
from ...versioning import MIN_TWINCAT_VERSION
from ..shared import build_cli_logger


def analyze_command(
    solution: Annotated[Path, typer.Option("--solution", "-v", help="Visual Studio solution file.")],
    project: Annotated[Path, typer.Option("--project", "-t", help="TwinCAT project file (.tsproj).")],
    report_path: Annotated[
        Path | None,
        typer.Option("--report-path", "-r", help="Write the report to this file."),
    ] = None,
    report_format: Annotated[
        str,
        typer.Option("--report-format", "-f", help=f"Report format: {', '.join(REPORT_FORMATS)}."),
    ] = "default",
    minimum_version: Annotated[
        str,
        typer.Option("--minimum-version", help="Lowest TwinCAT version accepted."),
    ] = MIN_TWINCAT_VERSION,
    include_low: Annotated[
        bool,
        typer.Option("--include-low", help="Keep Low severity diagnostics in the report."),
    ] = False,
    diagnostics: Annotated[
        Path | None,
        typer.Option("--diagnostics", help="Replay recorded raw diagnostics (JSON) instead of running the shell."),
    ] = None,
    no_emoji: Annotated[bool, typer.Option("--no-emoji", help="Disable emoji output.")] = False,
    no_color: Annotated[bool, typer.Option("--no-color", help="Disable coloured output.")] = False,
    debug: Annotated[bool, typer.Option("--debug", help="Print debug details.")] = False,
) -> None:
    """Run TE1200 static analysis and exit with the run verdict.

    Exit codes: 0 clean, 1 errors found, 2 warnings only, -1 run failed.
    """

    logger = build_cli_logger(emoji=not no_emoji, debug=debug, no_color=no_color)
    try:
        config = LoaderConfig.build(
            solution_path=solution,
            project_path=project,
            report_path=report_path,
            report_format=report_format,
            minimum_version=minimum_version,
            include_low=include_low,
            diagnostics_path=diagnostics,
        ).resolve_paths()
    except ConfigError as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=int(Verdict.RUN_FAILED)) from exc

    try:
        outcome = run(config, logger)
    except TcsaError as exc:
        logger.fail(f"Static analysis aborted: {exc}")
        raise typer.Exit(code=int(Verdict.RUN_FAILED)) from exc
    if outcome.verdict is not Verdict.RUN_FAILED:
        logger.section("Summary")
    if outcome.verdict is Verdict.OK:
        logger.ok("Static analysis finished without errors or warnings")
    elif outcome.verdict is Verdict.OK_WITH_WARNINGS:
        logger.warn("Static analysis finished with warnings")
    elif outcome.verdict is Verdict.OK_WITH_ERRORS:
        logger.fail("Static analysis finished with errors")
    raise typer.Exit(code=outcome.exit_code)


__all__ = ["analyze_command"]
