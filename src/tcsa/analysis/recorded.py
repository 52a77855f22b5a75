# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Replay raw diagnostics captured from an earlier analysis run."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from ..errors import AnalysisError
from ..models import RawDiagnostic

_RAW_LIST_ADAPTER: TypeAdapter[list[RawDiagnostic]] = TypeAdapter(list[RawDiagnostic])


@dataclass(slots=True)
class RecordedAnalysisRunner:
    """Load raw diagnostics from a JSON array of ``{description, severity, fileName, line?}``."""

    path: Path

    def run_static_analysis(self) -> Sequence[RawDiagnostic]:
        """Return the recorded diagnostics in file order.

        Raises:
            AnalysisError: If the file is missing, unreadable or malformed.
        """
        try:
            payload = self.path.read_bytes()
        except OSError as exc:
            raise AnalysisError(f"unable to read recorded diagnostics {self.path}: {exc}") from exc
        try:
            return _RAW_LIST_ADAPTER.validate_json(payload)
        except ValidationError as exc:
            raise AnalysisError(f"malformed recorded diagnostics in {self.path}: {exc}") from exc


__all__ = ["RecordedAnalysisRunner"]
