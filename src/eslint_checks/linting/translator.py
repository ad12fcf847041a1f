# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Translate ESLint results into a check-run report and job-log output."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Final

from ..models import ACTION_NAME, Annotation, CheckRunOutput, Conclusion, LintMessage, LintResult, Report
from ..severity import annotation_level_for, console_level_for
from .eslint import LintEngine

RULE_DOCS_URL: Final[str] = "https://eslint.org/docs/rules/{rule_id}"


@dataclass(frozen=True, slots=True)
class Translation:
    """A report plus the job-log text that accompanies it."""

    report: Report
    console_output: str


def relative_path(file_path: str, workspace: str) -> str:
    """Strip the workspace prefix (and its separator) from ``file_path``."""

    return file_path[len(workspace) + 1 :]


def build_annotation(path: str, message: LintMessage) -> Annotation:
    """Build the check-run annotation for one ESLint message.

    Args:
        path: Workspace-relative file path.
        message: ESLint finding.

    Returns:
        Annotation: Annotation spanning the message's range; a missing end
        position collapses to the start position.
    """

    text = message.message
    if message.rule_id:
        text = f"{text}\n{RULE_DOCS_URL.format(rule_id=message.rule_id)}"
    return Annotation(
        path=path,
        start_line=message.line,
        end_line=message.end_line or message.line,
        start_column=message.column,
        end_column=message.end_column or message.column,
        annotation_level=annotation_level_for(message.severity),
        title=message.rule_id or ACTION_NAME,
        message=text,
    )


def console_lines(path: str, message: LintMessage) -> str:
    """Return the job-log text for one message: its path, then a ``##[level]`` line."""

    level = console_level_for(message.severity).value
    return (
        f"{path}\n"
        f"##[{level}]  {message.line}:{message.column}  {level}  {message.message}  {message.rule_id or ''}\n\n"
    )


def summarize(error_count: int, warning_count: int) -> str:
    """Return the check-run summary line."""

    return f"{error_count} error(s), {warning_count} warning(s) found"


def translate(result: LintResult, workspace: str) -> Translation:
    """Convert an ESLint result into a :class:`Report`.

    Annotations keep ESLint's file-then-message order. The conclusion is
    ``failure`` exactly when ESLint counted at least one error.

    Args:
        result: Parsed ESLint output.
        workspace: Workspace root the result paths are prefixed with.

    Returns:
        Translation: Report and job-log text.
    """

    annotations: list[Annotation] = []
    output: list[str] = []
    for file_result in result.results:
        path = relative_path(file_result.file_path, workspace)
        for message in file_result.messages:
            annotations.append(build_annotation(path, message))
            output.append(console_lines(path, message))
    conclusion = Conclusion.FAILURE if result.error_count > 0 else Conclusion.SUCCESS
    report = Report(
        conclusion=conclusion,
        output=CheckRunOutput(
            title=ACTION_NAME,
            summary=summarize(result.error_count, result.warning_count),
            annotations=tuple(annotations),
        ),
    )
    return Translation(report=report, console_output="".join(output))


class LintTranslator:
    """Run the lint engine and translate its output.

    Args:
        engine: Lint engine invoked once per :meth:`lint` call.
        workspace: Workspace root used to relativise result paths.
    """

    def __init__(self, engine: LintEngine, workspace: str) -> None:
        self._engine = engine
        self._workspace = workspace

    def lint(self, files: Sequence[str] | None) -> Translation:
        """Lint ``files`` (or the engine's default target) and build the report.

        Raises:
            LintEngineError: Propagated from the engine; fatal to the run.
        """

        return translate(self._engine.execute_on_files(files), self._workspace)


__all__ = [
    "LintTranslator",
    "RULE_DOCS_URL",
    "Translation",
    "build_annotation",
    "console_lines",
    "relative_path",
    "summarize",
    "translate",
]
