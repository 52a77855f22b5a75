# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""COM message filter retrying calls rejected by a busy TcXaeShell."""

from __future__ import annotations

from collections.abc import Callable
from typing import Final

from ..errors import AnalysisError

# SERVERCALL / PENDINGMSG constants from objidl.h.
SERVERCALL_ISHANDLED: Final[int] = 0
SERVERCALL_RETRYLATER: Final[int] = 2
PENDINGMSG_WAITDEFPROCESS: Final[int] = 2
RETRY_IMMEDIATELY: Final[int] = 99
CANCEL_CALL: Final[int] = -1

RevokeFilter = Callable[[], None]
FilterRegistrar = Callable[[], RevokeFilter]


class RetryingMessageFilter:
    """``IMessageFilter`` server retrying calls the shell rejects as busy.

    Args:
        max_wait_ms: Give up once a call has been rejected for this long;
            ``None`` retries indefinitely.
    """

    _public_methods_ = ["HandleInComingCall", "RetryRejectedCall", "MessagePending"]

    def __init__(self, max_wait_ms: int | None = None) -> None:
        self.max_wait_ms = max_wait_ms

    def HandleInComingCall(  # noqa: N802 - IMessageFilter naming
        self,
        call_type: int,
        caller: int,
        tick_count: int,
        interface_info: object,
    ) -> int:
        return SERVERCALL_ISHANDLED

    def RetryRejectedCall(self, callee: int, tick_count: int, reject_type: int) -> int:  # noqa: N802
        """Return ``99`` (retry now) for busy rejections, ``-1`` (cancel) otherwise."""
        if reject_type != SERVERCALL_RETRYLATER:
            return CANCEL_CALL
        if self.max_wait_ms is not None and tick_count >= self.max_wait_ms:
            return CANCEL_CALL
        return RETRY_IMMEDIATELY

    def MessagePending(self, callee: int, tick_count: int, pending_type: int) -> int:  # noqa: N802
        return PENDINGMSG_WAITDEFPROCESS


def register_message_filter(message_filter: RetryingMessageFilter | None = None) -> RevokeFilter:
    """Install *message_filter* for the calling thread and return its revoker.

    Raises:
        AnalysisError: If pywin32 is unavailable.
    """

    try:
        import pythoncom
        from win32com.server.util import wrap
    except ImportError as exc:
        raise AnalysisError("the automation interface requires pywin32 on Windows") from exc

    server = wrap(message_filter or RetryingMessageFilter(), pythoncom.IID_IMessageFilter)
    pythoncom.CoRegisterMessageFilter(server)

    def revoke() -> None:
        pythoncom.CoRegisterMessageFilter(None)

    return revoke


__all__ = [
    "FilterRegistrar",
    "RetryingMessageFilter",
    "RevokeFilter",
    "register_message_filter",
]
