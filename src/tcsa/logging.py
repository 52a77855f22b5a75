# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Console helpers used by the CLI to report analysis progress and findings."""

from __future__ import annotations

import sys
from functools import lru_cache
from typing import Final

from rich.console import Console
from rich.rule import Rule
from rich.text import Text

_PREFIXES: Final[dict[str, str]] = {
    "info": "ℹ️ ",
    "ok": "✅ ",
    "warn": "⚠️ ",
    "fail": "❌ ",
}
_STYLES: Final[dict[str, str]] = {
    "info": "cyan",
    "ok": "green",
    "warn": "yellow",
    "fail": "red",
}


def detect_tty() -> bool:
    """Return ``True`` when stdout appears to be backed by a terminal.

    Returns:
        bool: ``True`` when ``sys.stdout`` reports TTY support, ``False`` otherwise.
    """

    try:
        return sys.stdout.isatty()
    except (AttributeError, ValueError):
        return False


@lru_cache(maxsize=8)
def get_console(*, color: bool, emoji: bool) -> Console:
    """Return a cached Rich console for the presentation flags.

    The console writes to whatever ``sys.stdout`` is current at print time, so
    captured output (CI logs, test runners) sees every line.

    Args:
        color: ``True`` when ANSI colour output should be enabled.
        emoji: ``True`` when Rich should render emoji glyphs.

    Returns:
        Console: Console matching the preferences.
    """

    tty = detect_tty()
    return Console(
        color_system="auto" if color and tty else None,
        force_terminal=tty,
        no_color=not (color and tty),
        emoji=emoji,
        soft_wrap=True,
        highlight=False,
    )


def emit(level: str, msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Print *msg* with the prefix and style registered for *level*.

    Args:
        level: One of ``info``, ``ok``, ``warn`` or ``fail``.
        msg: Message text to display.
        use_emoji: Flag indicating whether the emoji prefix is shown.
        use_color: Optional explicit colour flag overriding TTY detection.

    Raises:
        KeyError: If *level* is not a known message level.
    """

    color_enabled = detect_tty() if use_color is None else use_color
    prefix = _PREFIXES[level] if use_emoji else ""
    text = Text(f"{prefix}{msg}")
    if color_enabled:
        text.stylize(_STYLES[level])
    get_console(color=color_enabled, emoji=use_emoji).print(text)


def section(title: str, *, use_color: bool) -> None:
    """Render a section header separating the findings from the summary.

    Args:
        title: Section title displayed to the user.
        use_color: Flag indicating whether a Rich rule may be drawn.
    """

    console = get_console(color=use_color, emoji=True)
    if use_color:
        console.print()
        console.print(Rule(title))
    else:
        console.print(f"\n--- {title} ---")


__all__ = ["detect_tty", "emit", "get_console", "section"]
