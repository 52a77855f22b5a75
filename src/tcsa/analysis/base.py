# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Interface implemented by static-analysis collaborators."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from ..models import RawDiagnostic


@runtime_checkable
class StaticAnalysisRunner(Protocol):
    """Run static analysis and return the raw diagnostics it produced."""

    def run_static_analysis(self) -> Sequence[RawDiagnostic]:
        """Return raw diagnostics in the order the tool reported them."""
        ...


__all__ = ["StaticAnalysisRunner"]
