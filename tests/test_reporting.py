# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for report serializers and emitters."""

from __future__ import annotations

import json
import os
import subprocess
import sys
from pathlib import Path

import pytest

from tcsa.aggregation import collect_report, new_report
from tcsa.errors import UnsupportedFormatError
from tcsa.models import RawDiagnostic, Report
from tcsa.reporting import (
    REPORT_FORMATS,
    diagnostic_fingerprint,
    load_default_report,
    serialize_report,
    write_report,
)
from tcsa.severity import Severity

SOLUTION = "C:\\work\\Machine.sln"
PROJECT = "C:\\work\\Machine\\Machine.tsproj"


def _report() -> Report:
    return collect_report(
        SOLUTION,
        PROJECT,
        [
            RawDiagnostic(
                description="Unused variable X",
                severity=Severity.MEDIUM,
                file_name="C:\\work\\Machine\\PLC1\\POUs\\PLC1.TcPOU",
            ),
            RawDiagnostic(
                description="Missing return",
                severity=Severity.HIGH,
                file_name="D:\\shared\\FB_Main.TcPOU",
                line=42,
            ),
        ],
    )


def test_formats() -> None:
    assert REPORT_FORMATS == ("default", "gitlab")


def test_default_report_shape() -> None:
    data = json.loads(serialize_report(_report(), "default"))

    assert list(data) == ["solutionPath", "projectPath", "diagnostics"]
    assert data["solutionPath"] == SOLUTION
    assert data["projectPath"] == PROJECT
    first, second = data["diagnostics"]
    assert first == {
        "description": "Unused variable X",
        "severity": "Medium",
        "location": {"fileName": "C:\\work\\Machine\\PLC1\\POUs\\PLC1.TcPOU"},
    }
    assert second["severity"] == "High"
    assert second["location"] == {"fileName": "D:\\shared\\FB_Main.TcPOU", "line": 42}


def test_default_report_round_trip() -> None:
    report = _report()
    restored = load_default_report(serialize_report(report, "default"))
    assert restored.diagnostics == report.diagnostics
    assert restored.solution_path == report.solution_path
    assert restored.project_path == report.project_path


def test_empty_default_report() -> None:
    data = json.loads(serialize_report(new_report("a.sln", "b.tsproj"), "default"))
    assert data == {"solutionPath": "a.sln", "projectPath": "b.tsproj", "diagnostics": []}


def test_gitlab_report_entries() -> None:
    entries = json.loads(serialize_report(_report(), "GitLab"))

    assert len(entries) == 2
    first, second = entries
    assert first["description"] == "Unused variable X"
    assert first["severity"] == "minor"
    assert first["check_name"] == "TE1200"
    assert first["location"] == {"path": "Machine/PLC1/POUs/PLC1.TcPOU", "lines": {"begin": 1}}
    assert second["severity"] == "major"
    assert second["location"] == {"path": "D:/shared/FB_Main.TcPOU", "lines": {"begin": 42}}
    assert second["fingerprint"] == diagnostic_fingerprint("Missing return", "D:\\shared\\FB_Main.TcPOU")


def test_gitlab_posix_and_relative_paths() -> None:
    report = collect_report(
        "/builds/app/Machine.sln",
        "/builds/app/Machine/Machine.tsproj",
        [
            RawDiagnostic(description="a", severity="High", file_name="/builds/app/Machine/A.TcPOU"),
            RawDiagnostic(description="b", severity="High", file_name="B.TcPOU"),
        ],
    )
    entries = json.loads(serialize_report(report, "gitlab"))
    assert [entry["location"]["path"] for entry in entries] == ["Machine/A.TcPOU", "B.TcPOU"]


def test_empty_gitlab_report() -> None:
    assert json.loads(serialize_report(new_report("a", "b"), "gitlab")) == []


def test_fingerprint_is_stable_and_distinct() -> None:
    base = diagnostic_fingerprint("Missing return", "FB_Main.TcPOU")
    assert base == diagnostic_fingerprint("Missing return", "FB_Main.TcPOU")
    assert len(base) == 32
    assert base != diagnostic_fingerprint("Missing return", "FB_Other.TcPOU")
    assert base != diagnostic_fingerprint("Missing value", "FB_Main.TcPOU")
    assert diagnostic_fingerprint("ab", "c") != diagnostic_fingerprint("a", "bc")


def test_fingerprint_is_stable_across_processes() -> None:
    expected = diagnostic_fingerprint("Missing return", "FB_Main.TcPOU")
    src_dir = Path(__file__).resolve().parents[1] / "src"
    env = {**os.environ, "PYTHONPATH": os.pathsep.join(filter(None, [str(src_dir), os.environ.get("PYTHONPATH")]))}
    output = subprocess.run(
        [
            sys.executable,
            "-c",
            "from tcsa.reporting import diagnostic_fingerprint;"
            "print(diagnostic_fingerprint('Missing return', 'FB_Main.TcPOU'))",
        ],
        check=True,
        capture_output=True,
        text=True,
        env=env,
    ).stdout.strip()
    assert output == expected


def test_gitlab_serialization_is_deterministic() -> None:
    assert serialize_report(_report(), "gitlab") == serialize_report(_report(), "gitlab")


def test_unsupported_format() -> None:
    with pytest.raises(UnsupportedFormatError) as excinfo:
        serialize_report(_report(), "sarif")
    assert "sarif" in str(excinfo.value)


def test_write_report_creates_parents(tmp_path: Path) -> None:
    dest = tmp_path / "out" / "codequality.json"
    write_report(_report(), dest, " gitlab ")
    assert len(json.loads(dest.read_text(encoding="utf-8"))) == 2
