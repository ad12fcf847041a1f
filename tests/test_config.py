# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for environment-driven configuration and trigger detection."""

from __future__ import annotations

from pathlib import Path

import pytest

from eslint_checks.config import ActionConfig, load_config, read_input
from eslint_checks.errors import ConfigError
from eslint_checks.events import PullRequestEvent, PushEvent, resolve_trigger

BASE_ENV = {
    "GITHUB_TOKEN": "ghs_token",
    "GITHUB_SHA": "abc123",
    "GITHUB_WORKSPACE": "/home/runner/work/app/app",
    "GITHUB_REPOSITORY": "octo/app",
}


def test_load_config_reads_runner_environment() -> None:
    config = load_config(BASE_ENV)

    assert config.token == "ghs_token"
    assert config.sha == "abc123"
    assert (config.owner, config.repo) == ("octo", "app")
    assert config.job_name is None
    assert config.lint_all is False
    assert config.default_target == "src"
    assert config.extensions == (".ts", ".js")
    assert config.ignore_path == ".gitignore"
    assert config.resolved_graphql_url == "https://api.github.com/graphql"


def test_load_config_reports_missing_variables() -> None:
    env = {key: value for key, value in BASE_ENV.items() if key not in {"GITHUB_TOKEN", "GITHUB_SHA"}}

    with pytest.raises(ConfigError, match="GITHUB_TOKEN, GITHUB_SHA"):
        load_config(env)


def test_load_config_rejects_malformed_repository() -> None:
    with pytest.raises(ConfigError, match="owner/repo"):
        load_config({**BASE_ENV, "GITHUB_REPOSITORY": "no-slash"})


@pytest.mark.parametrize(
    ("env", "job_name", "lint_all"),
    [
        ({"INPUT_JOB-NAME": "Lint", "INPUT_LINT-ALL": "true"}, "Lint", True),
        ({"INPUT_JOB_NAME": " lint ", "INPUT_LINT_ALL": "false"}, "lint", True),
        ({"INPUT_JOB-NAME": "", "INPUT_LINT-ALL": ""}, None, False),
    ],
)
def test_action_inputs(env: dict[str, str], job_name: str | None, lint_all: bool) -> None:
    config = load_config({**BASE_ENV, **env})

    assert config.job_name == job_name
    # Any non-empty input enables lint-all, including the string "false".
    assert config.lint_all is lint_all


def test_overrides_take_precedence_and_none_is_ignored() -> None:
    config = load_config({**BASE_ENV, "INPUT_JOB-NAME": "env"}, job_name="cli", lint_all=None)

    assert config.job_name == "cli"
    assert config.lint_all is False


def test_enterprise_urls_and_trailing_workspace_slash() -> None:
    config = load_config(
        {
            **BASE_ENV,
            "GITHUB_WORKSPACE": "/work/app/",
            "GITHUB_API_URL": "https://ghe.example.com/api/v3",
            "GITHUB_GRAPHQL_URL": "https://ghe.example.com/api/graphql",
        },
    )

    assert config.workspace == "/work/app"
    assert config.api_url == "https://ghe.example.com/api/v3"
    assert config.resolved_graphql_url == "https://ghe.example.com/api/graphql"


def test_read_input_returns_empty_string_when_unset() -> None:
    assert read_input({}, "job-name") == ""


def _config(event_path: Path | None) -> ActionConfig:
    return ActionConfig(token="t", sha="abc123", workspace="/w", repository="octo/app", event_path=event_path)


@pytest.mark.parametrize(
    "payload",
    ['{"pull_request": {"number": 8}}', '{"issue": {"number": 8}}', '{"number": 8, "action": "opened"}'],
)
def test_resolve_trigger_detects_pull_requests(event_file, payload: str) -> None:
    assert resolve_trigger(_config(event_file(payload))) == PullRequestEvent(number=8)


@pytest.mark.parametrize("payload", ['{"ref": "refs/heads/main"}', '{"number": 0}', "not json", "[]"])
def test_resolve_trigger_defaults_to_push(event_file, payload: str) -> None:
    assert resolve_trigger(_config(event_file(payload))) == PushEvent(commit_ref="abc123")


def test_resolve_trigger_without_event_file(tmp_path: Path) -> None:
    assert resolve_trigger(_config(None)) == PushEvent(commit_ref="abc123")
    assert resolve_trigger(_config(tmp_path / "missing.json")) == PushEvent(commit_ref="abc123")
