# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Severity related types and helpers for ESLint findings."""

from __future__ import annotations

from enum import Enum, IntEnum


class LintSeverity(IntEnum):
    """Numeric severity levels reported by ESLint."""

    OFF = 0
    WARN = 1
    ERROR = 2


class AnnotationLevel(str, Enum):
    """Annotation levels accepted by the GitHub check-run API."""

    NOTICE = "notice"
    WARNING = "warning"
    FAILURE = "failure"


class ConsoleLevel(str, Enum):
    """Workflow-command levels used when echoing findings to the job log."""

    NONE = "none"
    WARNING = "warning"
    ERROR = "error"


def annotation_level_for(severity: int) -> AnnotationLevel:
    """Map an ESLint severity to a check-run annotation level.

    Args:
        severity: ESLint severity (``0``, ``1`` or ``2``).

    Returns:
        AnnotationLevel: Level rendered by GitHub for the annotation.

    Raises:
        ValueError: If ``severity`` is outside the ESLint range.
    """

    match severity:
        case LintSeverity.OFF:
            return AnnotationLevel.NOTICE
        case LintSeverity.WARN:
            return AnnotationLevel.WARNING
        case LintSeverity.ERROR:
            return AnnotationLevel.FAILURE
        case _:
            raise ValueError(f"unknown ESLint severity: {severity!r}")


def console_level_for(severity: int) -> ConsoleLevel:
    """Map an ESLint severity to a job-log level.

    Args:
        severity: ESLint severity (``0``, ``1`` or ``2``).

    Returns:
        ConsoleLevel: Level used in the ``##[level]`` log prefix.

    Raises:
        ValueError: If ``severity`` is outside the ESLint range.
    """

    match severity:
        case LintSeverity.OFF:
            return ConsoleLevel.NONE
        case LintSeverity.WARN:
            return ConsoleLevel.WARNING
        case LintSeverity.ERROR:
            return ConsoleLevel.ERROR
        case _:
            raise ValueError(f"unknown ESLint severity: {severity!r}")


__all__ = [
    "AnnotationLevel",
    "ConsoleLevel",
    "LintSeverity",
    "annotation_level_for",
    "console_level_for",
]
