# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Smoke tests for the command-line interface."""

from __future__ import annotations

import json
from pathlib import Path

from typer.testing import CliRunner

from tcsa.cli.app import app


def _analyze_args(solution_pair: tuple[Path, Path], *extra: str) -> list[str]:
    solution, project = solution_pair
    return ["analyze", "-v", str(solution), "-t", str(project), "--no-emoji", "--no-color", *extra]


def test_help_lists_commands() -> None:
    result = CliRunner().invoke(app, ["--help"])
    assert result.exit_code == 0
    assert "analyze" in result.stdout
    assert "version-check" in result.stdout


def test_analyze_gitlab_report(
    twincat_solution: tuple[Path, Path],
    recorded_scenario: Path,
    tmp_path: Path,
) -> None:
    report = tmp_path / "gl-code-quality-report.json"
    result = CliRunner().invoke(
        app,
        _analyze_args(
            twincat_solution,
            "--diagnostics",
            str(recorded_scenario),
            "-r",
            str(report),
            "-f",
            "GITLAB",
        ),
    )

    assert result.exit_code == 1
    entries = json.loads(report.read_text(encoding="utf-8"))
    assert [entry["severity"] for entry in entries] == ["minor", "major"]
    assert entries[1]["location"]["lines"]["begin"] == 12
    assert "Missing return" in result.stdout


def test_analyze_warnings_only(twincat_solution: tuple[Path, Path], tmp_path: Path) -> None:
    recorded = tmp_path / "warnings.json"
    recorded.write_text(
        json.dumps([{"description": "Unused variable X", "severity": "Medium", "fileName": "PLC1.TcPOU"}]),
        encoding="utf-8",
    )
    result = CliRunner().invoke(app, _analyze_args(twincat_solution, "--diagnostics", str(recorded)))
    assert result.exit_code == 2


def test_analyze_clean_run_writes_default_report(twincat_solution: tuple[Path, Path], tmp_path: Path) -> None:
    recorded = tmp_path / "empty.json"
    recorded.write_text("[]", encoding="utf-8")
    report = tmp_path / "report.json"

    result = CliRunner().invoke(
        app,
        _analyze_args(twincat_solution, "--diagnostics", str(recorded), "--report-path", str(report)),
    )

    assert result.exit_code == 0
    assert json.loads(report.read_text(encoding="utf-8"))["diagnostics"] == []


def test_analyze_unknown_format_still_exits_with_verdict(
    twincat_solution: tuple[Path, Path],
    recorded_scenario: Path,
    tmp_path: Path,
) -> None:
    report = tmp_path / "report.out"
    result = CliRunner().invoke(
        app,
        _analyze_args(twincat_solution, "--diagnostics", str(recorded_scenario), "-r", str(report), "-f", "html"),
    )
    assert result.exit_code == 1
    assert not report.exists()
    assert "Unrecognized report format option: html" in result.stdout


def test_analyze_missing_files(tmp_path: Path) -> None:
    result = CliRunner().invoke(
        app,
        ["analyze", "-v", str(tmp_path / "x.sln"), "-t", str(tmp_path / "x.tsproj"), "--no-emoji"],
    )
    assert result.exit_code == -1
    assert "does not exist" in result.stdout


def test_analyze_invalid_minimum_version(twincat_solution: tuple[Path, Path]) -> None:
    result = CliRunner().invoke(app, _analyze_args(twincat_solution, "--minimum-version", "newest"))
    assert result.exit_code == -1


def test_version_check() -> None:
    runner = CliRunner()
    assert runner.invoke(app, ["version-check", "3.1.4024.0", "--no-emoji"]).exit_code == 0
    assert runner.invoke(app, ["version-check", "3.1.4020.0", "--no-emoji"]).exit_code == 1
    assert runner.invoke(app, ["version-check", "3.1", "--minimum", "3.1.0.0"]).exit_code == 0
    assert runner.invoke(app, ["version-check", "bogus"]).exit_code == -1


def test_analyze_unknown_severity_fails_the_run(twincat_solution: tuple[Path, Path], tmp_path: Path) -> None:
    recorded = tmp_path / "critical.json"
    recorded.write_text(
        json.dumps([{"description": "Boom", "severity": "Critical", "fileName": "PLC1.TcPOU"}]),
        encoding="utf-8",
    )

    result = CliRunner().invoke(app, _analyze_args(twincat_solution, "--diagnostics", str(recorded)))

    assert result.exit_code == -1
    assert "unknown diagnostic severity: 'Critical'" in result.stdout


def test_analyze_numeric_severity_fails_the_run(twincat_solution: tuple[Path, Path], tmp_path: Path) -> None:
    recorded = tmp_path / "numeric.json"
    recorded.write_text(
        json.dumps([{"description": "Boom", "severity": 2, "fileName": "PLC1.TcPOU"}]),
        encoding="utf-8",
    )

    result = CliRunner().invoke(app, _analyze_args(twincat_solution, "--diagnostics", str(recorded)))

    assert result.exit_code == -1
    assert "unknown diagnostic severity: '2'" in result.stdout
