# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""GitHub host integration."""

from __future__ import annotations

from .checks import CheckRunApi, CheckRunReporter, iso_timestamp
from .github import GitHubClient

__all__ = ["CheckRunApi", "CheckRunReporter", "GitHubClient", "iso_timestamp"]
