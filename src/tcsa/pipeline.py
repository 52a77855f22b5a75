# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Run the analysis pipeline and reduce it to a single verdict."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from .aggregation import collect_report
from .analysis import AutomationAnalysisRunner, RecordedAnalysisRunner, StaticAnalysisRunner
from .config import LoaderConfig
from .discovery import detect_twincat_version, detect_visual_studio_version
from .errors import AnalysisError, InvalidVersionFormatError, ProjectDiscoveryError, UnsupportedFormatError
from .models import Report
from .reporting import write_report
from .verdict import Verdict, resolve_verdict
from .versioning import is_supported


class RunLogger(Protocol):
    """Console sink used by the pipeline."""

    def ok(self, message: str) -> None: ...

    def info(self, message: str) -> None: ...

    def warn(self, message: str) -> None: ...

    def fail(self, message: str) -> None: ...

    def debug(self, message: str) -> None: ...


@dataclass(slots=True)
class RunOutcome:
    """Verdict of a run plus the report when analysis got that far."""

    verdict: Verdict
    report: Report | None = None

    @property
    def exit_code(self) -> int:
        """Return the process exit code for the verdict."""
        return int(self.verdict)


def _failed(logger: RunLogger, message: str) -> RunOutcome:
    logger.fail(message)
    return RunOutcome(Verdict.RUN_FAILED)


def build_runner(config: LoaderConfig, twincat_version: str) -> StaticAnalysisRunner:
    """Return the collaborator that will produce raw diagnostics for *config*.

    Raises:
        ProjectDiscoveryError: If the solution lacks a Visual Studio version.
    """

    if config.diagnostics_path is not None:
        return RecordedAnalysisRunner(config.diagnostics_path)
    return AutomationAnalysisRunner(
        solution_path=config.solution_path,
        project_path=config.project_path,
        twincat_version=twincat_version,
        visual_studio_version=detect_visual_studio_version(config.solution_path),
    )


def run(config: LoaderConfig, logger: RunLogger, runner: StaticAnalysisRunner | None = None) -> RunOutcome:
    """Execute one analysis run described by *config*.

    Precondition failures (missing files, unsupported TwinCAT version, an
    unreachable analysis tool) yield ``Verdict.RUN_FAILED``. An unsupported
    report format only skips the report. ``UnknownSeverityError`` propagates.

    Args:
        config: Resolved loader configuration.
        logger: Console sink for progress and diagnostics.
        runner: Optional collaborator overriding :func:`build_runner`.

    Returns:
        RunOutcome: Verdict and, for completed runs, the aggregated report.
    """

    logger.debug(f"solution={config.solution_path}")
    logger.debug(f"project={config.project_path}")
    if not config.solution_path.is_file():
        return _failed(logger, f"Visual Studio solution {config.solution_path} does not exist!")
    if not config.project_path.is_file():
        return _failed(logger, f"TwinCAT project file {config.project_path} does not exist!")

    try:
        twincat_version = detect_twincat_version(config.project_path)
        logger.info(f"In TwinCAT project file, found version {twincat_version}")
        supported = is_supported(twincat_version, config.minimum_version)
    except (ProjectDiscoveryError, InvalidVersionFormatError) as exc:
        return _failed(logger, str(exc))
    if not supported:
        return _failed(
            logger,
            "The detected TwinCAT version in the project does not support TE1200 static code analysis. "
            f"The minimum version that supports TE1200 is {config.minimum_version}",
        )

    try:
        active_runner = runner if runner is not None else build_runner(config, twincat_version)
        raw_diagnostics = active_runner.run_static_analysis()
    except (AnalysisError, ProjectDiscoveryError) as exc:
        return _failed(logger, str(exc))

    report = collect_report(
        str(config.solution_path),
        str(config.project_path),
        raw_diagnostics,
        policy=config.severity_policy,
    )
    for diag in report.findings_only():
        logger.info(
            f"Description: {diag.description}\n"
            f"ErrorLevel: {diag.severity.value}\n"
            f"Filename: {diag.location.file_name}"
        )

    if config.report_path is not None:
        try:
            write_report(report, config.report_path, config.report_format)
        except UnsupportedFormatError as exc:
            logger.warn(str(exc))
        except OSError as exc:
            logger.warn(f"unable to write report {config.report_path}: {exc}")
        else:
            logger.debug(f"report={config.report_path} format={config.report_format}")

    verdict = resolve_verdict(report)
    logger.debug(f"diagnostics={len(report.diagnostics)} verdict={verdict.name}")
    return RunOutcome(verdict, report)


__all__ = ["RunLogger", "RunOutcome", "build_runner", "run"]
