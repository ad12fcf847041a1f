# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for the ``eslint-checks`` command line."""

from __future__ import annotations

import importlib
from typing import Any

import pytest
from typer.testing import CliRunner

from eslint_checks.cli.app import app
from eslint_checks.runner import RunOutcome

ENV = {
    "GITHUB_TOKEN": "ghs_token",
    "GITHUB_SHA": "abc123",
    "GITHUB_WORKSPACE": "/home/runner/work/app/app",
    "GITHUB_REPOSITORY": "octo/app",
    "GITHUB_EVENT_PATH": "",
    "INPUT_JOB-NAME": "",
    "INPUT_LINT-ALL": "",
}


@pytest.fixture
def captured_run(monkeypatch: pytest.MonkeyPatch) -> dict[str, Any]:
    captured: dict[str, Any] = {"outcome": RunOutcome(exit_code=0)}

    def fake_run(config, client, engine) -> RunOutcome:
        captured["config"] = config
        captured["engine"] = engine
        return captured["outcome"]

    monkeypatch.setattr(importlib.import_module("eslint_checks.cli.app"), "run", fake_run)
    return captured


def test_run_succeeds(captured_run: dict[str, Any]) -> None:
    result = CliRunner().invoke(app, ["run"], env=ENV)

    assert result.exit_code == 0
    assert captured_run["config"].sha == "abc123"
    assert str(captured_run["engine"].workspace) == "/home/runner/work/app/app"


def test_run_failure_emits_error_command(captured_run: dict[str, Any]) -> None:
    captured_run["outcome"] = RunOutcome(exit_code=1, message="2 error(s), 0 warning(s) found")

    result = CliRunner().invoke(app, ["run"], env=ENV)

    assert result.exit_code == 1
    assert "::error::2 error(s), 0 warning(s) found" in result.stdout


def test_options_override_environment(captured_run: dict[str, Any]) -> None:
    result = CliRunner().invoke(app, ["run", "--job-name", "lint", "--lint-all"], env=ENV)

    assert result.exit_code == 0
    assert captured_run["config"].job_name == "lint"
    assert captured_run["config"].lint_all is True


def test_missing_environment_exits_with_config_error(captured_run: dict[str, Any]) -> None:
    result = CliRunner().invoke(app, ["run"], env={**ENV, "GITHUB_TOKEN": ""})

    assert result.exit_code == 2
    assert "GITHUB_TOKEN" in result.stdout
    assert "config" not in captured_run
