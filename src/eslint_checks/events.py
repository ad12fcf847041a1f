# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Trigger events that decide how changed files are discovered."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import TypeAlias

from .config import ActionConfig


@dataclass(frozen=True, slots=True)
class PullRequestEvent:
    """A run triggered for a pull request (or an issue comment on one)."""

    number: int


@dataclass(frozen=True, slots=True)
class PushEvent:
    """A run triggered by a push of ``commit_ref``."""

    commit_ref: str


TriggerEvent: TypeAlias = PullRequestEvent | PushEvent


def _payload_number(payload: object) -> int | None:
    """Return the issue or pull request number carried by an event payload."""

    if not isinstance(payload, dict):
        return None
    for key in ("issue", "pull_request"):
        section = payload.get(key)
        if isinstance(section, dict) and isinstance(section.get("number"), int):
            return section["number"]
    number = payload.get("number")
    return number if isinstance(number, int) else None


def load_event_payload(event_path: Path | None) -> object:
    """Read the webhook payload the runner stores at ``GITHUB_EVENT_PATH``.

    Args:
        event_path: Location of the payload file, or ``None``.

    Returns:
        object: Decoded JSON payload, or ``None`` when missing or unreadable.
    """

    if event_path is None:
        return None
    try:
        return json.loads(event_path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return None


def resolve_trigger(config: ActionConfig) -> TriggerEvent:
    """Classify the current run as a pull request or a push event.

    Args:
        config: Action configuration carrying the event path and commit sha.

    Returns:
        TriggerEvent: ``PullRequestEvent`` when the payload names a positive
        issue or pull request number, otherwise ``PushEvent``.
    """

    number = _payload_number(load_event_payload(config.event_path))
    if number is not None and number > 0:
        return PullRequestEvent(number=number)
    return PushEvent(commit_ref=config.sha)


__all__ = [
    "PullRequestEvent",
    "PushEvent",
    "TriggerEvent",
    "load_event_payload",
    "resolve_trigger",
]
