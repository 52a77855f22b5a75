# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Static-analysis collaborators producing raw diagnostics."""

from .automation import AutomationAnalysisRunner, dispatch_dte, error_level_to_severity
from .base import StaticAnalysisRunner
from .message_filter import RetryingMessageFilter, register_message_filter
from .recorded import RecordedAnalysisRunner

__all__ = [
    "AutomationAnalysisRunner",
    "RecordedAnalysisRunner",
    "RetryingMessageFilter",
    "StaticAnalysisRunner",
    "dispatch_dte",
    "error_level_to_severity",
    "register_message_filter",
]
