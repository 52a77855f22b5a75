# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Emit machine-readable reports for analysis results."""

from __future__ import annotations

import hashlib
import json
from collections.abc import Callable
from pathlib import Path, PurePath, PurePosixPath, PureWindowsPath
from typing import Final

from ..errors import UnsupportedFormatError
from ..models import Diagnostic, Report
from ..severity import severity_to_gitlab

GITLAB_CHECK_NAME: Final[str] = "TE1200"
_FINGERPRINT_SEPARATOR: Final[str] = "\x1f"

ReportRenderer = Callable[[Report], bytes]


def render_default_report(report: Report) -> bytes:
    """Render *report* as JSON mirroring the report model."""

    payload = report.model_dump(mode="json", by_alias=True, exclude_none=True)
    return json.dumps(payload, indent=2).encode("utf-8")


def load_default_report(data: bytes | str) -> Report:
    """Rehydrate a :class:`Report` from :func:`render_default_report` output."""

    return Report.model_validate_json(data)


def render_gitlab_report(report: Report) -> bytes:
    """Render *report* as a GitLab Code Quality array."""

    entries = [_gitlab_entry(diag, report.solution_path) for diag in report.diagnostics]
    return json.dumps(entries, indent=2).encode("utf-8")


def diagnostic_fingerprint(description: str, file_name: str) -> str:
    """Return a stable 128-bit hex fingerprint for a description/file pair."""

    digest = hashlib.md5(usedforsecurity=False)
    digest.update(f"{description}{_FINGERPRINT_SEPARATOR}{file_name}".encode())
    return digest.hexdigest()


def _gitlab_entry(diag: Diagnostic, solution_path: str) -> dict[str, object]:
    location = diag.location
    return {
        "description": diag.description,
        "check_name": GITLAB_CHECK_NAME,
        "severity": severity_to_gitlab(diag.severity),
        "location": {
            "path": _relative_path(location.file_name, solution_path),
            "lines": {"begin": location.line if location.line is not None else 1},
        },
        "fingerprint": diagnostic_fingerprint(diag.description, location.file_name),
    }


def _pure_path(value: str) -> PurePath:
    if "\\" in value or (len(value) > 1 and value[1] == ":"):
        return PureWindowsPath(value)
    return PurePosixPath(value)


def _relative_path(file_name: str, solution_path: str) -> str:
    """Return *file_name* relative to the solution directory when it lies below it."""

    if not file_name:
        return file_name
    file_path = _pure_path(file_name)
    if not solution_path or not file_path.is_absolute():
        return file_path.as_posix()
    base = _pure_path(solution_path).parent
    if type(base) is not type(file_path):
        return file_path.as_posix()
    try:
        return file_path.relative_to(base).as_posix()
    except ValueError:
        return file_path.as_posix()


REPORT_RENDERERS: Final[dict[str, ReportRenderer]] = {
    "default": render_default_report,
    "gitlab": render_gitlab_report,
}
REPORT_FORMATS: Final[tuple[str, ...]] = tuple(REPORT_RENDERERS)


def normalize_format(fmt: str) -> str:
    """Return the canonical (lower-case, stripped) spelling of *fmt*."""

    return fmt.strip().lower()


def serialize_report(report: Report, fmt: str) -> bytes:
    """Serialize *report* in the format named *fmt* (case-insensitive).

    Raises:
        UnsupportedFormatError: If *fmt* names no known format.
    """

    renderer = REPORT_RENDERERS.get(normalize_format(fmt))
    if renderer is None:
        raise UnsupportedFormatError(fmt)
    return renderer(report)


def write_report(report: Report, path: Path, fmt: str) -> None:
    """Write *report* to *path* in the format named *fmt*."""

    payload = serialize_report(report, fmt)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(payload)


__all__ = [
    "GITLAB_CHECK_NAME",
    "REPORT_FORMATS",
    "REPORT_RENDERERS",
    "diagnostic_fingerprint",
    "load_default_report",
    "normalize_format",
    "render_default_report",
    "render_gitlab_report",
    "serialize_report",
    "write_report",
]
