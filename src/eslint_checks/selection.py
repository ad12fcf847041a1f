# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Select the files to lint from the pull request diff or the pushed commit."""

from __future__ import annotations

from collections.abc import Collection, Iterable
from dataclasses import dataclass
from pathlib import PurePosixPath
from typing import Final

from .config import ActionConfig
from .errors import attempt
from .events import PullRequestEvent, PushEvent, TriggerEvent
from .hosting.checks import CheckRunApi
from .logging import debug
from .models import ChangedFile, ChangeStatus

DECLARATION_MARKER: Final[str] = ".d.ts"

# Content edits are reported as "modified" and kept; "changed" entries are skipped with removals.
SKIPPED_PUSH_STATUSES: Final[frozenset[ChangeStatus]] = frozenset({ChangeStatus.REMOVED, ChangeStatus.CHANGED})


@dataclass(frozen=True, slots=True)
class FileSelection:
    """Files chosen for linting and the commit the check run belongs to.

    ``files`` is ``None`` when no file listing was available; callers then
    lint the configured default directory.
    """

    files: list[str] | None
    head_sha: str


def is_lintable(path: str, extensions: Collection[str]) -> bool:
    """Return ``True`` when ``path`` has a whitelisted extension and is not a declaration file."""

    return PurePosixPath(path).suffix in extensions and DECLARATION_MARKER not in path


def filter_lintable(
    files: Iterable[ChangedFile],
    extensions: Collection[str],
    *,
    skip_statuses: Collection[ChangeStatus] = frozenset(),
) -> list[str]:
    """Return the lintable paths among ``files``, preserving order.

    Args:
        files: Changed files reported by the host.
        extensions: Whitelisted suffixes such as ``.ts``.
        skip_statuses: Change statuses to drop.

    Returns:
        list[str]: Paths that should be linted.
    """

    return [
        changed.path
        for changed in files
        if is_lintable(changed.path, extensions) and changed.status not in skip_statuses
    ]


class FileSelector:
    """Resolve the lint file list for a trigger event.

    Args:
        api: Host API client.
        config: Action configuration supplying repository, sha and extensions.
    """

    def __init__(self, api: CheckRunApi, config: ActionConfig) -> None:
        self._api = api
        self._config = config

    def select(self, event: TriggerEvent) -> FileSelection:
        """Dispatch on ``event`` and return the resulting selection."""

        match event:
            case PullRequestEvent(number=number):
                selection = self._select_pull_request(number)
            case PushEvent(commit_ref=commit_ref):
                selection = self._select_push(commit_ref)
            case _:
                raise TypeError(f"unsupported trigger event: {event!r}")
        debug(f"Commit: {selection.head_sha}")
        return selection

    def _select_pull_request(self, number: int) -> FileSelection:
        cfg = self._config
        info = attempt(lambda: self._api.pull_request_files(cfg.owner, cfg.repo, number), None)
        if info is None:
            # Without PR metadata, lint the default directory against the triggering commit.
            return FileSelection(files=None, head_sha=cfg.sha)
        files, head_sha = info
        return FileSelection(files=filter_lintable(files, cfg.extensions), head_sha=head_sha)

    def _select_push(self, commit_ref: str) -> FileSelection:
        cfg = self._config
        files = attempt(lambda: self._api.commit_files(cfg.owner, cfg.repo, commit_ref), None)
        if files is None:
            return FileSelection(files=None, head_sha=cfg.sha)
        selected = filter_lintable(files, cfg.extensions, skip_statuses=SKIPPED_PUSH_STATUSES)
        return FileSelection(files=selected, head_sha=cfg.sha)


__all__ = [
    "DECLARATION_MARKER",
    "FileSelection",
    "FileSelector",
    "SKIPPED_PUSH_STATUSES",
    "filter_lintable",
    "is_lintable",
]
