# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Dotted-integer version parsing and the minimum-version gate."""

from __future__ import annotations

import re
from typing import Final

from packaging.version import InvalidVersion, Version

from .errors import InvalidVersionFormatError

MIN_TWINCAT_VERSION: Final[str] = "3.1.4022.0"
VERSION_COMPONENTS: Final[int] = 4

VERSION_PATTERN: Final[re.Pattern[str]] = re.compile(r"^\d+(?:\.\d+){0,3}$")


def parse_version(text: str) -> Version:
    """Return the :class:`~packaging.version.Version` for a dotted-integer string.

    Only one to four dot-separated integers are accepted; missing trailing
    components compare as 0.

    Args:
        text: Version text such as ``3.1.4022.0``.

    Returns:
        Version: Parsed version.

    Raises:
        InvalidVersionFormatError: If *text* is not a dotted-integer version.
    """

    candidate = text.strip() if isinstance(text, str) else ""
    if not VERSION_PATTERN.match(candidate):
        raise InvalidVersionFormatError(str(text))
    try:
        return Version(candidate)
    except InvalidVersion as exc:  # pragma: no cover - gated by VERSION_PATTERN
        raise InvalidVersionFormatError(candidate) from exc


def normalize_version(text: str) -> str:
    """Return *text* padded to four components, e.g. ``3.1`` -> ``3.1.0.0``."""

    release = parse_version(text).release
    padded = (*release, *([0] * (VERSION_COMPONENTS - len(release))))
    return ".".join(str(part) for part in padded)


def is_supported(detected: str, minimum: str = MIN_TWINCAT_VERSION) -> bool:
    """Return whether *detected* satisfies the *minimum* version.

    Args:
        detected: Version found in the TwinCAT project.
        minimum: Lowest version supporting static analysis.

    Returns:
        bool: ``True`` when *detected* is at or above *minimum*.

    Raises:
        InvalidVersionFormatError: If either string fails to parse.
    """

    return parse_version(detected) >= parse_version(minimum)


__all__ = ["MIN_TWINCAT_VERSION", "VERSION_PATTERN", "is_supported", "normalize_version", "parse_version"]
