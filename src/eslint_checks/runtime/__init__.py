# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Console and subprocess runtime helpers."""

from __future__ import annotations

from .console import RichConsoleManager, detect_tty, get_console_manager
from .process import CommandOptions, resolve_executable, run_command

__all__ = [
    "CommandOptions",
    "RichConsoleManager",
    "detect_tty",
    "get_console_manager",
    "resolve_executable",
    "run_command",
]
