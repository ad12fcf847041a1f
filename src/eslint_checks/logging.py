# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Job-log output helpers: styled messages and GitHub workflow commands."""

from __future__ import annotations

from rich.text import Text

from .runtime.console import detect_tty, get_console_manager


def _print_line(msg: str, *, style: str | None = None, use_color: bool | None = None) -> None:
    """Render ``msg`` verbatim, without interpreting Rich markup.

    Args:
        msg: Message text to print to the console.
        style: Rich style name to apply when colour output is active.
        use_color: Optional explicit colour flag overriding TTY detection.
    """

    color_enabled = detect_tty() if use_color is None else use_color
    console = get_console_manager().get(color=color_enabled)
    text = Text(msg)
    if style and color_enabled:
        text.stylize(style)
    console.print(text)


def info(msg: str, *, use_color: bool | None = None) -> None:
    """Emit an informational message."""

    _print_line(msg, style="cyan", use_color=use_color)


def fail(msg: str, *, use_color: bool | None = None) -> None:
    """Emit an error message."""

    _print_line(msg, style="red", use_color=use_color)


def debug(msg: str) -> None:
    """Write ``msg`` as a ``::debug::`` workflow command.

    GitHub only shows these lines when step debug logging is enabled.

    Args:
        msg: Debug message; newlines are escaped per the workflow-command format.
    """

    _print_line(f"::debug::{_escape_data(msg)}", use_color=False)


def warning_command(msg: str) -> None:
    """Write ``msg`` as a ``##[warning]`` log line."""

    _print_line(f"##[warning] {msg}", style="yellow")


def error_command(msg: str) -> None:
    """Write ``msg`` as an ``::error::`` workflow command.

    Args:
        msg: Error message shown in the job summary.
    """

    _print_line(f"::error::{_escape_data(msg)}", style="red")


def _escape_data(value: str) -> str:
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


__all__ = [
    "debug",
    "error_command",
    "fail",
    "info",
    "warning_command",
]
