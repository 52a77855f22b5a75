# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Module entry point for ``python -m tcsa``."""

from .cli.app import app

if __name__ == "__main__":
    app()
