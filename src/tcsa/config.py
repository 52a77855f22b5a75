# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration model for a loader run."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .classification import SeverityPolicy
from .errors import ConfigError
from .versioning import MIN_TWINCAT_VERSION, normalize_version


class LoaderConfig(BaseModel):
    """Inputs describing which solution to analyse and how to report it."""

    model_config = ConfigDict(validate_assignment=True)

    solution_path: Path
    project_path: Path
    report_path: Path | None = None
    report_format: str = "default"
    minimum_version: str = MIN_TWINCAT_VERSION
    include_low: bool = False
    diagnostics_path: Path | None = Field(
        default=None,
        description="Recorded raw diagnostics replayed instead of driving the automation interface.",
    )

    @field_validator("report_format")
    @classmethod
    def _normalise_format(cls, value: str) -> str:
        return value.strip().lower()

    @field_validator("minimum_version")
    @classmethod
    def _validate_minimum(cls, value: str) -> str:
        return normalize_version(value)

    @classmethod
    def build(cls, **values: Any) -> LoaderConfig:
        """Validate *values* into a config, raising :class:`ConfigError` on bad input."""

        try:
            return cls(**values)
        except ValidationError as exc:
            raise ConfigError(str(exc)) from exc

    @property
    def severity_policy(self) -> SeverityPolicy:
        """Return the intake policy described by this config."""
        return SeverityPolicy(include_low=self.include_low)

    def resolve_paths(self) -> LoaderConfig:
        """Return a copy with every configured path made absolute."""

        updates: dict[str, Path] = {
            "solution_path": self.solution_path.expanduser().resolve(),
            "project_path": self.project_path.expanduser().resolve(),
        }
        if self.report_path is not None:
            updates["report_path"] = self.report_path.expanduser().resolve()
        if self.diagnostics_path is not None:
            updates["diagnostics_path"] = self.diagnostics_path.expanduser().resolve()
        return self.model_copy(update=updates)


__all__ = ["LoaderConfig"]
