# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Check-run lifecycle: reuse or create a run, then complete it."""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime
from typing import Protocol

from ..errors import attempt
from ..models import ACTION_NAME, ChangedFile, CheckRunOutput, CheckRunRef, Conclusion

Clock = Callable[[], datetime]


class CheckRunApi(Protocol):
    """Host operations consumed by file selection and the check-run lifecycle."""

    def pull_request_files(self, owner: str, repo: str, number: int) -> tuple[list[ChangedFile], str]: ...

    def commit_files(self, owner: str, repo: str, ref: str) -> list[ChangedFile]: ...

    def in_progress_check_runs(self, owner: str, repo: str, ref: str) -> list[CheckRunRef]: ...

    def create_check_run(self, owner: str, repo: str, *, name: str, head_sha: str, started_at: str) -> int: ...

    def update_check_run(
        self,
        owner: str,
        repo: str,
        check_run_id: int,
        *,
        completed_at: str,
        conclusion: Conclusion,
        output: CheckRunOutput | None = None,
    ) -> None: ...


def utc_now() -> datetime:
    """Return the current time as an aware UTC datetime."""

    return datetime.now(UTC)


def iso_timestamp(moment: datetime) -> str:
    """Format ``moment`` the way the check-run API expects (``...Z``)."""

    return moment.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class CheckRunReporter:
    """Track the check run a lint result is reported to.

    Every host call degrades to a logged warning on failure, so a token
    without ``checks: write`` still lets the lint itself run.

    Args:
        api: Host API client.
        owner: Repository owner.
        repo: Repository name.
        clock: Source of the current time; injectable for tests.
    """

    def __init__(self, api: CheckRunApi, owner: str, repo: str, *, clock: Clock = utc_now) -> None:
        self._api = api
        self._owner = owner
        self._repo = repo
        self._clock = clock
        self.check_run_id: int | None = None

    def find_in_progress(self, job_name: str, head_sha: str) -> int | None:
        """Return the id of the in-progress check run named ``job_name`` (case-insensitive)."""

        runs = attempt(lambda: self._api.in_progress_check_runs(self._owner, self._repo, head_sha), [])
        wanted = job_name.lower()
        return next((run.id for run in runs if run.name.lower() == wanted), None)

    def start(self, head_sha: str, *, job_name: str | None = None) -> int | None:
        """Reuse the named in-progress check run or create a new one.

        Args:
            head_sha: Commit the check run belongs to.
            job_name: Name of an existing in-progress run to reuse.

        Returns:
            int | None: Check run id, or ``None`` when none could be obtained.
        """

        check_run_id = self.find_in_progress(job_name, head_sha) if job_name else None
        if check_run_id is None:
            started_at = iso_timestamp(self._clock())
            check_run_id = attempt(
                lambda: self._api.create_check_run(
                    self._owner,
                    self._repo,
                    name=ACTION_NAME,
                    head_sha=head_sha,
                    started_at=started_at,
                ),
                None,
            )
        self.check_run_id = check_run_id
        return check_run_id

    def complete(self, conclusion: Conclusion, output: CheckRunOutput | None = None) -> bool:
        """Complete the tracked check run.

        Args:
            conclusion: Final conclusion to record.
            output: Title, summary and annotations; omitted when ``None``.

        Returns:
            bool: ``True`` when the update was sent successfully.
        """

        check_run_id = self.check_run_id
        if check_run_id is None:
            return False
        completed_at = iso_timestamp(self._clock())

        def _update() -> bool:
            self._api.update_check_run(
                self._owner,
                self._repo,
                check_run_id,
                completed_at=completed_at,
                conclusion=conclusion,
                output=output,
            )
            return True

        return attempt(_update, False)


__all__ = ["CheckRunApi", "CheckRunReporter", "Clock", "iso_timestamp", "utc_now"]
