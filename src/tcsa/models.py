# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Core data models shared across the tcsa package."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from .severity import Severity


class RawDiagnostic(BaseModel):
    """Unprocessed finding as emitted by the static-analysis error list.

    Severity also accepts plain strings; values outside Low/Medium/High are
    rejected by :func:`tcsa.classification.classify`, not at construction.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel)

    description: str
    severity: Severity | str
    file_name: str
    line: int | None = None

    @field_validator("severity", mode="before")
    @classmethod
    def _stringify_severity(cls, value: object) -> object:
        """Keep unrecognised severity values as text so classification can reject them."""
        if isinstance(value, (Severity, str)):
            return value
        return str(value)


class Location(BaseModel):
    """File position a diagnostic points at."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel)

    file_name: str
    line: int | None = None


class Diagnostic(BaseModel):
    """Classified diagnostic retained in a :class:`Report`."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel)

    description: str
    severity: Severity
    location: Location


class Report(BaseModel):
    """Aggregate of the diagnostics retained during one analysis run."""

    model_config = ConfigDict(validate_assignment=True, populate_by_name=True, alias_generator=to_camel)

    solution_path: str = Field(frozen=True)
    project_path: str = Field(frozen=True)
    diagnostics: list[Diagnostic] = Field(default_factory=list)

    def findings_only(self) -> tuple[Diagnostic, ...]:
        """Return the actionable findings.

        Exclusion already happens at intake, so this is the full diagnostic
        sequence in observation order.
        """
        return tuple(self.diagnostics)

    def has_severity(self, severity: Severity) -> bool:
        """Return ``True`` when any diagnostic carries *severity*."""
        return any(diag.severity is severity for diag in self.diagnostics)


__all__ = ["Diagnostic", "Location", "RawDiagnostic", "Report"]
