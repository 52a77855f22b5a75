# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Drive TE1200 static analysis through the TcXaeShell automation interface."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Final

from ..discovery import automation_prog_id
from ..errors import AnalysisError
from ..models import RawDiagnostic
from ..severity import Severity
from .message_filter import FilterRegistrar, register_message_filter

DteFactory = Callable[[str], Any]

LOGGER = logging.getLogger(__name__)

PLC_ROOT_ITEM: Final[str] = "TIPC"

# vsBuildErrorLevel values reported by the error list.
_ERROR_LEVELS: Final[dict[int, Severity]] = {
    1: Severity.LOW,
    2: Severity.MEDIUM,
    4: Severity.HIGH,
}


def dispatch_dte(prog_id: str) -> Any:
    """Create the automation root object registered under *prog_id*.

    Raises:
        AnalysisError: If pywin32 is unavailable or the ProgID is not registered.
    """

    try:
        import win32com.client
    except ImportError as exc:
        raise AnalysisError("the automation interface requires pywin32 on Windows") from exc
    try:
        return win32com.client.Dispatch(prog_id)
    except Exception as exc:  # pragma: no cover - depends on host environment
        raise AnalysisError(f"Unable to create a Visual Studio instance for {prog_id}") from exc


def error_level_to_severity(level: object) -> Severity | str:
    """Map a ``vsBuildErrorLevel`` value onto :class:`Severity`.

    Unknown levels are passed through as text and rejected during classification.
    """

    try:
        return _ERROR_LEVELS[int(level)]  # type: ignore[call-overload]
    except (KeyError, TypeError, ValueError):
        return str(level)


def _quit_shell(dte: Any) -> None:
    """Close the shell; a failing ``Quit`` is logged so the run's own error surfaces."""

    try:
        dte.Quit()
    except Exception as exc:  # COM failures surface as pywintypes.com_error
        LOGGER.warning("unable to quit the automation shell: %s", exc)


@dataclass(slots=True)
class AutomationAnalysisRunner:
    """Open a solution in TcXaeShell, run static analysis and read the error list."""

    solution_path: Path
    project_path: Path
    twincat_version: str
    visual_studio_version: str
    dte_factory: DteFactory = field(default=dispatch_dte)
    filter_registrar: FilterRegistrar = field(default=register_message_filter)

    def run_static_analysis(self) -> Sequence[RawDiagnostic]:
        """Return the error-list items produced by the analysis run.

        Raises:
            AnalysisError: If the shell, project or PLC cannot be reached.
        """
        revoke_filter = self.filter_registrar()
        try:
            dte = self.dte_factory(automation_prog_id(self.visual_studio_version))
            if dte is None:
                raise AnalysisError("Unable to create a Visual Studio instance")
            try:
                self._open_solution(dte)
                plc_project = self._find_plc_project(dte)
                plc_project.RunStaticAnalysis(False)
                return self._read_error_list(dte)
            except AnalysisError:
                raise
            except Exception as exc:  # COM failures surface as pywintypes.com_error
                raise AnalysisError(f"static analysis failed: {exc}") from exc
            finally:
                _quit_shell(dte)
        finally:
            revoke_filter()

    def _open_solution(self, dte: Any) -> None:
        dte.SuppressUI = True
        dte.MainWindow.Visible = False
        dte.Solution.Open(str(self.solution_path))
        remote_manager = dte.GetObject("TcRemoteManager")
        remote_manager.Version = self.twincat_version
        settings = dte.GetObject("TcAutomationSettings")
        settings.SilentMode = True

    def _find_plc_project(self, dte: Any) -> Any:
        project_name = self.project_path.stem
        system_manager = None
        for project in dte.Solution.Projects:
            if project.Name == project_name:
                system_manager = project.Object
                break
        if system_manager is None:
            raise AnalysisError(f"Project {project_name} not found in solution")
        plc_root = system_manager.LookupTreeItem(PLC_ROOT_ITEM)
        if plc_root.ChildCount < 1:
            raise AnalysisError(f"Project {project_name} contains no PLC project")
        name = plc_root.Child(1).Name
        return system_manager.LookupTreeItem(f"{PLC_ROOT_ITEM}^{name}^{name} Project")

    def _read_error_list(self, dte: Any) -> list[RawDiagnostic]:
        items = dte.ToolWindows.ErrorList.ErrorItems
        diagnostics: list[RawDiagnostic] = []
        for index in range(1, items.Count + 1):
            item = items.Item(index)
            line = getattr(item, "Line", None)
            diagnostics.append(
                RawDiagnostic(
                    description=str(item.Description),
                    severity=error_level_to_severity(item.ErrorLevel),
                    file_name=str(item.FileName),
                    line=int(line) if line else None,
                )
            )
        return diagnostics


__all__ = ["AutomationAnalysisRunner", "dispatch_dte", "error_level_to_severity"]
