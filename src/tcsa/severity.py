# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Severity related types and helpers."""

from __future__ import annotations

from enum import Enum
from typing import Final

from .errors import UnknownSeverityError


class Severity(str, Enum):
    """Tri-level severity reported by the static-analysis error list."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


_SEVERITY_BY_NAME: Final[dict[str, Severity]] = {member.value.lower(): member for member in Severity}


def coerce_severity(value: object) -> Severity:
    """Return the :class:`Severity` named by *value*.

    Args:
        value: Severity member or its case-insensitive name.

    Returns:
        Severity: Matching severity member.

    Raises:
        UnknownSeverityError: If *value* names no known severity.
    """

    if isinstance(value, Severity):
        return value
    if isinstance(value, str):
        member = _SEVERITY_BY_NAME.get(value.strip().lower())
        if member is not None:
            return member
    raise UnknownSeverityError(value)


_SEVERITY_TO_GITLAB: Final[dict[Severity, str]] = {
    Severity.HIGH: "major",
    Severity.MEDIUM: "minor",
    Severity.LOW: "info",
}


def severity_to_gitlab(severity: Severity) -> str:
    """Map :class:`Severity` to a GitLab Code Quality severity."""

    return _SEVERITY_TO_GITLAB[severity]


__all__ = ["Severity", "coerce_severity", "severity_to_gitlab"]
