# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Reporting helpers: report serializers and file emitters."""

from .emitters import (
    REPORT_FORMATS,
    diagnostic_fingerprint,
    load_default_report,
    render_default_report,
    render_gitlab_report,
    serialize_report,
    write_report,
)

__all__ = [
    "REPORT_FORMATS",
    "diagnostic_fingerprint",
    "load_default_report",
    "render_default_report",
    "render_gitlab_report",
    "serialize_report",
    "write_report",
]
