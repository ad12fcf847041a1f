# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Run ESLint over changed files and report the findings to a GitHub check run."""

from __future__ import annotations

from .config import ActionConfig, load_config
from .errors import ConfigError, EslintChecksError, HostApiError, LintEngineError, attempt
from .models import Annotation, ChangedFile, Conclusion, LintMessage, Report
from .runner import RunOutcome, run

__all__ = [
    "ActionConfig",
    "Annotation",
    "ChangedFile",
    "Conclusion",
    "ConfigError",
    "EslintChecksError",
    "HostApiError",
    "LintEngineError",
    "LintMessage",
    "Report",
    "RunOutcome",
    "attempt",
    "load_config",
    "run",
]
