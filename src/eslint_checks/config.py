# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration model loaded from the GitHub Actions environment."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Final

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import ConfigError

DEFAULT_API_URL: Final[str] = "https://api.github.com"
DEFAULT_TARGET: Final[str] = "src"
DEFAULT_EXTENSIONS: Final[tuple[str, ...]] = (".ts", ".js")
DEFAULT_IGNORE_PATH: Final[str] = ".gitignore"

_REQUIRED_ENV: Final[dict[str, str]] = {
    "token": "GITHUB_TOKEN",
    "sha": "GITHUB_SHA",
    "workspace": "GITHUB_WORKSPACE",
    "repository": "GITHUB_REPOSITORY",
}


class ActionConfig(BaseModel):
    """Settings threaded through file selection, linting, and reporting."""

    model_config = ConfigDict(frozen=True)

    token: str
    sha: str
    workspace: str
    repository: str
    event_path: Path | None = None
    api_url: str = DEFAULT_API_URL
    graphql_url: str | None = None
    job_name: str | None = None
    lint_all: bool = False
    default_target: str = DEFAULT_TARGET
    extensions: tuple[str, ...] = Field(default=DEFAULT_EXTENSIONS)
    ignore_path: str = DEFAULT_IGNORE_PATH

    @field_validator("repository")
    @classmethod
    def _check_repository(cls, value: str) -> str:
        owner, _, name = value.partition("/")
        if not owner or not name:
            raise ValueError(f"expected 'owner/repo', got {value!r}")
        return value

    @field_validator("workspace")
    @classmethod
    def _strip_trailing_separator(cls, value: str) -> str:
        # Result paths are sliced by len(workspace) + 1.
        return value.rstrip("/") or value

    @property
    def owner(self) -> str:
        """Return the repository owner."""

        return self.repository.split("/", 1)[0]

    @property
    def repo(self) -> str:
        """Return the repository name."""

        return self.repository.split("/", 1)[1]

    @property
    def resolved_graphql_url(self) -> str:
        """Return the GraphQL endpoint, derived from ``api_url`` when unset."""

        return self.graphql_url or f"{self.api_url.rstrip('/')}/graphql"


def read_input(environ: Mapping[str, str], name: str) -> str:
    """Return the action input ``name`` as GitHub Actions exposes it.

    The runner exports inputs as ``INPUT_<NAME>`` with spaces replaced by
    underscores and hyphens kept, so both spellings are checked.

    Args:
        environ: Process environment.
        name: Input name as declared in ``action.yml`` (e.g. ``job-name``).

    Returns:
        str: Trimmed input value, or an empty string when unset.
    """

    key = f"INPUT_{name.replace(' ', '_').upper()}"
    value = environ.get(key)
    if value is None:
        value = environ.get(key.replace("-", "_"), "")
    return value.strip()


def load_config(environ: Mapping[str, str], **overrides: object) -> ActionConfig:
    """Build an :class:`ActionConfig` from ``environ``.

    Args:
        environ: Process environment, typically ``os.environ``.
        **overrides: Field values taking precedence over the environment;
            ``None`` values are ignored.

    Returns:
        ActionConfig: Validated configuration.

    Raises:
        ConfigError: If required variables are missing or values are invalid.
    """

    values: dict[str, object] = {}
    for field, env_name in _REQUIRED_ENV.items():
        if environ.get(env_name):
            values[field] = environ[env_name]
    if environ.get("GITHUB_EVENT_PATH"):
        values["event_path"] = Path(environ["GITHUB_EVENT_PATH"])
    if environ.get("GITHUB_API_URL"):
        values["api_url"] = environ["GITHUB_API_URL"]
    if environ.get("GITHUB_GRAPHQL_URL"):
        values["graphql_url"] = environ["GITHUB_GRAPHQL_URL"]
    values["job_name"] = read_input(environ, "job-name") or None
    # Inputs are strings; any non-empty value enables the option.
    values["lint_all"] = bool(read_input(environ, "lint-all"))
    values.update({key: value for key, value in overrides.items() if value is not None})

    missing = [env_name for field, env_name in _REQUIRED_ENV.items() if field not in values]
    if missing:
        raise ConfigError(f"missing required environment variable(s): {', '.join(missing)}")
    try:
        return ActionConfig.model_validate(values)
    except ValidationError as exc:
        raise ConfigError(str(exc)) from exc


__all__ = [
    "ActionConfig",
    "DEFAULT_API_URL",
    "DEFAULT_EXTENSIONS",
    "DEFAULT_IGNORE_PATH",
    "DEFAULT_TARGET",
    "load_config",
    "read_input",
]
