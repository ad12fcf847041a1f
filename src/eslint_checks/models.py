# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Data models shared across file selection, linting, and check-run reporting."""

from __future__ import annotations

from enum import Enum
from typing import Final

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .severity import AnnotationLevel, LintSeverity

ACTION_NAME: Final[str] = "ESLint"


class ChangeStatus(str, Enum):
    """File change states reported by the GitHub commits API."""

    ADDED = "added"
    MODIFIED = "modified"
    REMOVED = "removed"
    RENAMED = "renamed"
    CHANGED = "changed"
    COPIED = "copied"
    UNCHANGED = "unchanged"
    UNKNOWN = "unknown"


class ChangedFile(BaseModel):
    """Describe a file touched by a pull request or commit."""

    model_config = ConfigDict(frozen=True)

    path: str
    status: ChangeStatus = ChangeStatus.UNKNOWN

    @field_validator("status", mode="before")
    @classmethod
    def _coerce_status(cls, value: object) -> ChangeStatus:
        """Map unrecognised status labels onto :attr:`ChangeStatus.UNKNOWN`.

        Args:
            value: Raw status value supplied by the host API.

        Returns:
            ChangeStatus: Matching status, or ``UNKNOWN`` for foreign labels.
        """

        if isinstance(value, ChangeStatus):
            return value
        try:
            return ChangeStatus(str(value).lower())
        except ValueError:
            return ChangeStatus.UNKNOWN


class LintMessage(BaseModel):
    """A single ESLint finding as emitted by ``--format json``."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    line: int = 1
    end_line: int | None = Field(default=None, alias="endLine")
    column: int = 1
    end_column: int | None = Field(default=None, alias="endColumn")
    severity: LintSeverity
    rule_id: str | None = Field(default=None, alias="ruleId")
    message: str = ""

    @field_validator("line", "column", mode="before")
    @classmethod
    def _default_position(cls, value: object) -> object:
        # File-level messages (e.g. ignored files) carry no position.
        return 1 if value is None else value


class LintFileResult(BaseModel):
    """ESLint results for one file."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    file_path: str = Field(alias="filePath")
    messages: tuple[LintMessage, ...] = ()
    error_count: int = Field(default=0, alias="errorCount")
    warning_count: int = Field(default=0, alias="warningCount")


class LintResult(BaseModel):
    """Aggregated output of one lint engine invocation."""

    model_config = ConfigDict(frozen=True)

    results: tuple[LintFileResult, ...] = ()
    error_count: int = 0
    warning_count: int = 0

    @classmethod
    def from_files(cls, results: tuple[LintFileResult, ...]) -> LintResult:
        """Build a result whose totals are the sums of the per-file counts."""

        return cls(
            results=results,
            error_count=sum(item.error_count for item in results),
            warning_count=sum(item.warning_count for item in results),
        )


class Annotation(BaseModel):
    """Inline check-run annotation using GitHub's field names."""

    model_config = ConfigDict(frozen=True)

    path: str
    start_line: int
    end_line: int
    start_column: int
    end_column: int
    annotation_level: AnnotationLevel
    title: str
    message: str


class CheckRunOutput(BaseModel):
    """The ``output`` payload of a check-run update."""

    model_config = ConfigDict(frozen=True)

    title: str = ACTION_NAME
    summary: str
    annotations: tuple[Annotation, ...] = ()


class Conclusion(str, Enum):
    """Final check-run conclusions produced by a lint run."""

    SUCCESS = "success"
    FAILURE = "failure"


class Report(BaseModel):
    """Normalised outcome of a lint run handed to the check-run updater."""

    model_config = ConfigDict(frozen=True)

    conclusion: Conclusion
    output: CheckRunOutput


class CheckRunRef(BaseModel):
    """Minimal view of an existing check run."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: int
    name: str


__all__ = [
    "ACTION_NAME",
    "Annotation",
    "ChangeStatus",
    "ChangedFile",
    "CheckRunOutput",
    "CheckRunRef",
    "Conclusion",
    "LintFileResult",
    "LintMessage",
    "LintResult",
    "Report",
]
