# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""CLI command registry."""

from __future__ import annotations

import typer

from .analyze import analyze_command
from .version_check import version_check_command

__all__ = ["register_commands"]


def register_commands(app: typer.Typer) -> None:
    """Register built-in CLI commands on ``app``."""

    app.command(name="analyze")(analyze_command)
    app.command(name="version-check")(version_check_command)
