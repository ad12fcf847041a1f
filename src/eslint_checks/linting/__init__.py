# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""ESLint invocation and result translation."""

from __future__ import annotations

from .eslint import EslintEngine, LintEngine, parse_eslint_report
from .translator import LintTranslator, Translation, translate

__all__ = [
    "EslintEngine",
    "LintEngine",
    "LintTranslator",
    "Translation",
    "parse_eslint_report",
    "translate",
]
