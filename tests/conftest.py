# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path

import pytest

from tcsa.models import RawDiagnostic
from tcsa.severity import Severity

SOLUTION_TEXT = """\ufeff
Microsoft Visual Studio Solution File, Format Version 12.00
# Visual Studio Version 15
VisualStudioVersion = 15.0.28307.1321
MinimumVisualStudioVersion = 10.0.40219.1
"""

PROJECT_TEMPLATE = """<?xml version="1.0"?>
<TcSmProject xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance" TcSmVersion="1.0" TcVersion="{version}">
  <Project ProjectGUID="{{00000000-0000-0000-0000-000000000000}}" />
</TcSmProject>
"""


@pytest.fixture
def scenario_raw() -> list[RawDiagnostic]:
    """Return the mixed-severity scenario from the loader documentation."""
    return [
        RawDiagnostic(description="Unused variable X", severity=Severity.MEDIUM, file_name="PLC1.TcPOU"),
        RawDiagnostic(description="Missing return", severity=Severity.HIGH, file_name="FB_Main.TcPOU"),
        RawDiagnostic(description="Style nit", severity=Severity.LOW, file_name="PLC1.TcPOU"),
    ]


@pytest.fixture
def twincat_solution(tmp_path: Path) -> tuple[Path, Path]:
    """Create a solution/project pair targeting a supported TwinCAT version."""
    solution = tmp_path / "Machine.sln"
    project = tmp_path / "Machine" / "Machine.tsproj"
    project.parent.mkdir()
    solution.write_text(SOLUTION_TEXT, encoding="utf-8")
    project.write_text(PROJECT_TEMPLATE.format(version="3.1.4024.12"), encoding="utf-8")
    return solution, project


def _write_recorded(path: Path, entries: list[dict[str, object]]) -> Path:
    """Write recorded raw diagnostics to *path* and return it."""
    path.write_text(json.dumps(entries), encoding="utf-8")
    return path


@pytest.fixture
def recorded_scenario(tmp_path: Path) -> Path:
    """Recorded diagnostics file mirroring :func:`scenario_raw`."""
    return _write_recorded(
        tmp_path / "diagnostics.json",
        [
            {"description": "Unused variable X", "severity": "Medium", "fileName": "PLC1.TcPOU"},
            {"description": "Missing return", "severity": "High", "fileName": "FB_Main.TcPOU", "line": 12},
            {"description": "Style nit", "severity": "Low", "fileName": "PLC1.TcPOU"},
        ],
    )


@pytest.fixture
def write_recorded() -> Callable[[Path, list[dict[str, object]]], Path]:
    """Return a helper writing recorded raw diagnostics to a path."""
    return _write_recorded
