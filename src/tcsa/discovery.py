# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Read tool version markers from solution and TwinCAT project files."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Final

from .errors import ProjectDiscoveryError

VISUAL_STUDIO_PROG_ID_PREFIX: Final[str] = "TcXaeShell.DTE."

_VS_VERSION_RE: Final[re.Pattern[str]] = re.compile(r"^\s*VisualStudioVersion\s*=\s*(\d+\.\d+)", re.MULTILINE)
_TC_VERSION_RE: Final[re.Pattern[str]] = re.compile(r'TcVersion\s*=\s*"(\d[^"]*)"')


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8-sig", errors="replace")
    except OSError as exc:
        raise ProjectDiscoveryError(f"unable to read {path}: {exc}") from exc


def detect_visual_studio_version(solution_file: Path) -> str:
    """Return the ``major.minor`` Visual Studio version recorded in *solution_file*.

    Raises:
        ProjectDiscoveryError: If the file is unreadable or lacks the marker.
    """

    match = _VS_VERSION_RE.search(_read_text(solution_file))
    if match is None:
        raise ProjectDiscoveryError("Did not find Visual Studio version in Visual Studio solution file")
    return match.group(1)


def detect_twincat_version(project_file: Path) -> str:
    """Return the ``TcVersion`` attribute recorded in *project_file*.

    Raises:
        ProjectDiscoveryError: If the file is unreadable or lacks the marker.
    """

    match = _TC_VERSION_RE.search(_read_text(project_file))
    if match is None:
        raise ProjectDiscoveryError("Did not find TcVersion in TwinCAT project file")
    return match.group(1).strip()


def automation_prog_id(vs_version: str) -> str:
    """Return the automation ProgID matching the solution's shell version."""

    return f"{VISUAL_STUDIO_PROG_ID_PREFIX}{vs_version}"


__all__ = [
    "VISUAL_STUDIO_PROG_ID_PREFIX",
    "automation_prog_id",
    "detect_twincat_version",
    "detect_visual_studio_version",
]
