# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Exception types and the degrade-on-failure helper used at host API call sites."""

from __future__ import annotations

from collections.abc import Callable
from typing import Final, TypeVar

from .logging import warning_command

ResultT = TypeVar("ResultT")

PERMISSION_WARNING: Final[str] = "Token doesn't have permission to access this resource."


class EslintChecksError(Exception):
    """Base class for errors raised by this package."""


class ConfigError(EslintChecksError):
    """Raised when the action environment is incomplete or invalid."""


class HostApiError(EslintChecksError):
    """Raised when a GitHub REST or GraphQL call fails."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class LintEngineError(EslintChecksError):
    """Raised when ESLint cannot be executed or its report cannot be read."""


def attempt(
    operation: Callable[[], ResultT],
    fallback: ResultT,
    *,
    warning: str = PERMISSION_WARNING,
) -> ResultT:
    """Run ``operation`` and degrade to ``fallback`` when the host API fails.

    Args:
        operation: Zero-argument callable performing a single host API call.
        fallback: Value returned when ``operation`` raises :class:`HostApiError`.
        warning: Message written to the job log when degrading.

    Returns:
        ResultT: The operation's result, or ``fallback`` on host API failure.
    """

    try:
        return operation()
    except HostApiError:
        warning_command(warning)
        return fallback


__all__ = [
    "ConfigError",
    "EslintChecksError",
    "HostApiError",
    "LintEngineError",
    "PERMISSION_WARNING",
    "attempt",
]
