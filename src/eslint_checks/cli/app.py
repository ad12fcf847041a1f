# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Typer application wiring configuration, the GitHub client, and ESLint."""

from __future__ import annotations

import os
from typing import Annotated, Final

import typer

from ..config import load_config
from ..errors import ConfigError
from ..hosting.github import GitHubClient
from ..linting.eslint import EslintEngine
from ..logging import error_command, fail
from ..runner import run

CONFIG_ERROR_EXIT_CODE: Final[int] = 2

app = typer.Typer(
    name="eslint-checks",
    help="Lint changed files with ESLint and report them to a GitHub check run.",
    add_completion=False,
    no_args_is_help=True,
)


@app.callback()
def main() -> None:
    """Lint changed files with ESLint and report them to a GitHub check run."""


@app.command("run")
def run_lint(
    job_name: Annotated[
        str | None,
        typer.Option("--job-name", help="Reuse the in-progress check run with this name."),
    ] = None,
    lint_all: Annotated[
        bool,
        typer.Option("--lint-all", help="Lint the default directory instead of changed files."),
    ] = False,
    workspace: Annotated[
        str | None,
        typer.Option("--workspace", help="Workspace root; defaults to GITHUB_WORKSPACE."),
    ] = None,
) -> None:
    """Select files, run ESLint, and complete the check run."""

    try:
        config = load_config(os.environ, job_name=job_name, lint_all=lint_all or None, workspace=workspace)
    except ConfigError as exc:
        fail(str(exc))
        raise typer.Exit(code=CONFIG_ERROR_EXIT_CODE) from exc

    with GitHubClient(config.token, api_url=config.api_url, graphql_url=config.resolved_graphql_url) as client:
        outcome = run(config, client, EslintEngine.from_config(config))
    if outcome.failed:
        error_command(outcome.message or "ESLint run failed")
    raise typer.Exit(code=outcome.exit_code)


__all__ = ["app", "main", "run_lint"]
