# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Command-line interface for the static-analysis loader."""

from .app import app

__all__ = ["app"]
