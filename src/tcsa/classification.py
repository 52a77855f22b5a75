# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Map raw error-list items onto retained diagnostics."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from .models import Diagnostic, Location, RawDiagnostic
from .severity import Severity, coerce_severity


@dataclass(frozen=True, slots=True)
class SeverityPolicy:
    """Intake policy deciding which severities become findings."""

    include_low: bool = False

    def retains(self, severity: Severity) -> bool:
        """Return ``True`` when diagnostics of *severity* are kept."""
        return self.include_low or severity is not Severity.LOW


DEFAULT_POLICY: Final[SeverityPolicy] = SeverityPolicy()


def classify(raw: RawDiagnostic, *, policy: SeverityPolicy = DEFAULT_POLICY) -> Diagnostic | None:
    """Return the :class:`Diagnostic` for *raw*, or ``None`` when it is excluded.

    Args:
        raw: Raw diagnostic read from the analysis tool.
        policy: Intake policy; by default Low severity items are excluded.

    Returns:
        Diagnostic | None: Classified diagnostic, ``None`` for excluded items.

    Raises:
        UnknownSeverityError: If the raw severity is outside Low/Medium/High.
    """

    severity = coerce_severity(raw.severity)
    if not policy.retains(severity):
        return None
    return Diagnostic(
        description=raw.description,
        severity=severity,
        location=Location(file_name=raw.file_name, line=raw.line),
    )


__all__ = ["DEFAULT_POLICY", "SeverityPolicy", "classify"]
