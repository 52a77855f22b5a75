# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI command checking a TwinCAT version against the analysis floor."""

from __future__ import annotations

from typing import Annotated

import typer

from ...errors import InvalidVersionFormatError
from ...verdict import Verdict
from ...versioning import MIN_TWINCAT_VERSION, is_supported
from ..shared import build_cli_logger


def version_check_command(
    detected: Annotated[str, typer.Argument(help="Detected TwinCAT version.")],
    minimum: Annotated[str, typer.Option("--minimum", help="Lowest supported version.")] = MIN_TWINCAT_VERSION,
    no_emoji: Annotated[bool, typer.Option("--no-emoji", help="Disable emoji output.")] = False,
) -> None:
    """Exit 0 when DETECTED supports static analysis, 1 when it does not."""

    logger = build_cli_logger(emoji=not no_emoji)
    try:
        supported = is_supported(detected, minimum)
    except InvalidVersionFormatError as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=int(Verdict.RUN_FAILED)) from exc
    if supported:
        logger.ok(f"TwinCAT {detected} supports TE1200 static code analysis")
        raise typer.Exit(code=0)
    logger.fail(f"TwinCAT {detected} is older than the minimum supported version {minimum}")
    raise typer.Exit(code=1)


__all__ = ["version_check_command"]
