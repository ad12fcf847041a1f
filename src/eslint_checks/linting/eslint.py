# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Run ESLint with ``--format json`` and parse its report."""

from __future__ import annotations

import json
import subprocess  # nosec B404
from collections.abc import Callable, Sequence
from pathlib import Path
from subprocess import CompletedProcess
from typing import Final, Protocol

from pydantic import ValidationError

from ..config import ActionConfig
from ..errors import LintEngineError
from ..models import LintFileResult, LintResult
from ..runtime.process import CommandOptions, run_command

ESLINT_EXECUTABLE: Final[str] = "eslint"
# 0: no errors, 1: lint errors found. Anything else is a crash or bad configuration.
_ESLINT_OK_EXIT_CODES: Final[frozenset[int]] = frozenset({0, 1})

CommandRunner = Callable[..., CompletedProcess[str]]


class LintEngine(Protocol):
    """Lint capability consumed by the translator."""

    def execute_on_files(self, files: Sequence[str] | None) -> LintResult:
        """Lint ``files``, or the default target when ``None``."""
        ...


def parse_eslint_report(stdout: str) -> LintResult:
    """Parse ESLint JSON output into a :class:`LintResult`.

    Args:
        stdout: Text produced by ``eslint --format json``.

    Returns:
        LintResult: Per-file results with totals summed across files.

    Raises:
        LintEngineError: If the output is not a JSON list of file results.
    """

    text = stdout.strip()
    if not text:
        return LintResult()
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise LintEngineError(f"ESLint produced invalid JSON: {exc}") from exc
    if not isinstance(payload, list):
        raise LintEngineError("ESLint JSON report must be a list of file results")
    try:
        results = tuple(LintFileResult.model_validate(entry) for entry in payload)
    except ValidationError as exc:
        raise LintEngineError(f"ESLint report has an unexpected shape: {exc}") from exc
    return LintResult.from_files(results)


class EslintEngine:
    """Invoke the ESLint CLI installed in the workspace.

    Args:
        workspace: Repository checkout; ESLint runs here and
            ``node_modules/.bin`` is searched before ``PATH``.
        extensions: File extensions passed through ``--ext``.
        ignore_path: Ignore file passed through ``--ignore-path``.
        default_target: Directory linted when no explicit file list is given.
        runner: Command runner, replaceable in tests.
    """

    def __init__(
        self,
        workspace: Path,
        *,
        extensions: Sequence[str],
        ignore_path: str,
        default_target: str,
        runner: CommandRunner = run_command,
    ) -> None:
        self.workspace = workspace
        self.extensions = tuple(extensions)
        self.ignore_path = ignore_path
        self.default_target = default_target
        self._runner = runner

    @classmethod
    def from_config(cls, config: ActionConfig) -> EslintEngine:
        """Build an engine from the action configuration."""

        return cls(
            Path(config.workspace),
            extensions=config.extensions,
            ignore_path=config.ignore_path,
            default_target=config.default_target,
        )

    def build_command(self, files: Sequence[str] | None) -> list[str]:
        """Return the ESLint command line for ``files``."""

        targets = list(files) if files is not None else [self.default_target]
        return [
            ESLINT_EXECUTABLE,
            "--format",
            "json",
            "--ext",
            ",".join(self.extensions),
            "--ignore-path",
            self.ignore_path,
            *targets,
        ]

    def execute_on_files(self, files: Sequence[str] | None) -> LintResult:
        """Run ESLint over ``files`` (or the default target) and parse the report.

        Args:
            files: Workspace-relative paths, or ``None`` for the default target.

        Returns:
            LintResult: Parsed ESLint report.

        Raises:
            LintEngineError: If ESLint is missing, crashes, or emits an unreadable report.
        """

        if files is not None and not files:
            return LintResult()
        command = self.build_command(files)
        try:
            completed = self._runner(
                command,
                options=CommandOptions(cwd=self.workspace, check=False, capture_output=True),
                search=(self.workspace / "node_modules" / ".bin",),
            )
        except (FileNotFoundError, subprocess.SubprocessError, OSError) as exc:
            raise LintEngineError(f"unable to run ESLint: {exc}") from exc
        if completed.returncode not in _ESLINT_OK_EXIT_CODES:
            detail = (completed.stderr or completed.stdout or "").strip()
            raise LintEngineError(detail or f"ESLint exited with code {completed.returncode}")
        return parse_eslint_report(completed.stdout or "")


__all__ = ["ESLINT_EXECUTABLE", "EslintEngine", "LintEngine", "parse_eslint_report"]
