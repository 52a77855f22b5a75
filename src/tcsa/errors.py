# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Exception hierarchy shared by the loader pipeline."""

from __future__ import annotations


class TcsaError(Exception):
    """Base class for every error raised by the loader."""


class InvalidVersionFormatError(TcsaError, ValueError):
    """Raised when a version string is not made of 1-4 dotted integers."""

    def __init__(self, text: str) -> None:
        super().__init__(f"invalid version string: {text!r}")
        self.text = text


class UnknownSeverityError(TcsaError, ValueError):
    """Raised when a raw diagnostic carries a severity outside Low/Medium/High."""

    def __init__(self, value: object) -> None:
        super().__init__(f"unknown diagnostic severity: {value!r}")
        self.value = value


class UnsupportedFormatError(TcsaError, ValueError):
    """Raised when a report format name is not recognised."""

    def __init__(self, fmt: str) -> None:
        super().__init__(f"Unrecognized report format option: {fmt}")
        self.format = fmt


class ProjectDiscoveryError(TcsaError):
    """Raised when version markers cannot be read from solution or project files."""


class AnalysisError(TcsaError):
    """Raised when the static-analysis collaborator cannot produce diagnostics."""


class ConfigError(TcsaError):
    """Raised when configuration input is invalid."""


__all__ = [
    "AnalysisError",
    "ConfigError",
    "InvalidVersionFormatError",
    "ProjectDiscoveryError",
    "TcsaError",
    "UnknownSeverityError",
    "UnsupportedFormatError",
]
