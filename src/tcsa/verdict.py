# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Reduce a report to the overall run verdict and process exit code."""

from __future__ import annotations

from enum import IntEnum

from .models import Report
from .severity import Severity


class Verdict(IntEnum):
    """Overall run outcome; the value is the process exit code."""

    RUN_FAILED = -1
    OK = 0
    OK_WITH_ERRORS = 1
    OK_WITH_WARNINGS = 2


def resolve_verdict(report: Report) -> Verdict:
    """Return the verdict for *report* by strict severity priority.

    ``RUN_FAILED`` is never produced here; it belongs to precondition checks.
    """

    if report.has_severity(Severity.HIGH):
        return Verdict.OK_WITH_ERRORS
    if report.has_severity(Severity.MEDIUM):
        return Verdict.OK_WITH_WARNINGS
    return Verdict.OK


__all__ = ["Verdict", "resolve_verdict"]
