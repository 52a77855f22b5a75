# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Build run reports from raw diagnostics."""

from __future__ import annotations

from collections.abc import Iterable

from .classification import DEFAULT_POLICY, SeverityPolicy, classify
from .models import Diagnostic, RawDiagnostic, Report


def new_report(solution_path: str, project_path: str) -> Report:
    """Return an empty report bound to the run's solution and project."""

    return Report(solution_path=str(solution_path), project_path=str(project_path))


def add_diagnostic(
    report: Report,
    raw: RawDiagnostic,
    *,
    policy: SeverityPolicy = DEFAULT_POLICY,
) -> Diagnostic | None:
    """Classify *raw* and append it to *report* unless it is excluded.

    Identical diagnostics are all kept; the report is positional.

    Returns:
        Diagnostic | None: The appended diagnostic, or ``None`` when excluded.
    """

    diagnostic = classify(raw, policy=policy)
    if diagnostic is not None:
        report.diagnostics.append(diagnostic)
    return diagnostic


def collect_report(
    solution_path: str,
    project_path: str,
    raw_items: Iterable[RawDiagnostic],
    *,
    policy: SeverityPolicy = DEFAULT_POLICY,
) -> Report:
    """Return a report holding every retained item of *raw_items* in order.

    Raises:
        UnknownSeverityError: If any item has an unknown severity; no partial
            report is returned.
    """

    report = new_report(solution_path, project_path)
    for raw in raw_items:
        add_diagnostic(report, raw, policy=policy)
    return report


__all__ = ["add_diagnostic", "collect_report", "new_report"]
