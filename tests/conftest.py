# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

import pytest

from eslint_checks.config import ActionConfig
from eslint_checks.errors import HostApiError
from eslint_checks.models import ChangedFile, CheckRunOutput, CheckRunRef, Conclusion, LintResult

WORKSPACE = "/home/runner/work/app/app"
FIXED_NOW = datetime(2025, 3, 1, 12, 30, 0, tzinfo=UTC)


@dataclass
class FakeHostApi:
    """In-memory stand-in for :class:`~eslint_checks.hosting.github.GitHubClient`."""

    pr_files: list[ChangedFile] = field(default_factory=list)
    pr_head_sha: str = "pr-head"
    push_files: list[ChangedFile] = field(default_factory=list)
    check_runs: list[CheckRunRef] = field(default_factory=list)
    created_id: int = 99
    failing: set[str] = field(default_factory=set)
    calls: list[tuple[str, dict[str, Any]]] = field(default_factory=list)

    def _record(self, call: str, **kwargs: Any) -> None:
        self.calls.append((call, kwargs))
        if call in self.failing:
            raise HostApiError(f"{call} forbidden", status_code=403)

    def called(self, name: str) -> list[dict[str, Any]]:
        return [kwargs for call, kwargs in self.calls if call == name]

    def pull_request_files(self, owner: str, repo: str, number: int) -> tuple[list[ChangedFile], str]:
        self._record("pull_request_files", owner=owner, repo=repo, number=number)
        return list(self.pr_files), self.pr_head_sha

    def commit_files(self, owner: str, repo: str, ref: str) -> list[ChangedFile]:
        self._record("commit_files", owner=owner, repo=repo, ref=ref)
        return list(self.push_files)

    def in_progress_check_runs(self, owner: str, repo: str, ref: str) -> list[CheckRunRef]:
        self._record("in_progress_check_runs", owner=owner, repo=repo, ref=ref)
        return list(self.check_runs)

    def create_check_run(self, owner: str, repo: str, *, name: str, head_sha: str, started_at: str) -> int:
        self._record("create_check_run", name=name, head_sha=head_sha, started_at=started_at)
        return self.created_id

    def update_check_run(
        self,
        owner: str,
        repo: str,
        check_run_id: int,
        *,
        completed_at: str,
        conclusion: Conclusion,
        output: CheckRunOutput | None = None,
    ) -> None:
        self._record(
            "update_check_run",
            check_run_id=check_run_id,
            completed_at=completed_at,
            conclusion=conclusion,
            output=output,
        )


@dataclass
class FakeEngine:
    """Lint engine returning a canned result, or raising when ``error`` is set."""

    result: LintResult = field(default_factory=LintResult)
    error: Exception | None = None
    received: list[Sequence[str] | None] = field(default_factory=list)

    def execute_on_files(self, files: Sequence[str] | None) -> LintResult:
        self.received.append(None if files is None else list(files))
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture
def action_config() -> ActionConfig:
    """Return a configuration resembling a hosted runner checkout."""
    return ActionConfig(
        token="ghs_test",
        sha="push-sha",
        workspace=WORKSPACE,
        repository="octo/app",
    )


@pytest.fixture
def host_api() -> FakeHostApi:
    return FakeHostApi()


@pytest.fixture
def event_file(tmp_path: Path):
    """Return a helper writing an event payload and returning its path."""

    def _write(payload: str) -> Path:
        path = tmp_path / "event.json"
        path.write_text(payload, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def engine() -> FakeEngine:
    return FakeEngine()


@pytest.fixture
def clock():
    """Return a clock frozen at 2025-03-01T12:30:00Z."""
    return lambda: FIXED_NOW
