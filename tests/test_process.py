# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for the subprocess wrapper."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Any

import pytest

from eslint_checks.runtime.process import CommandOptions, resolve_executable, run_command


def test_resolve_prefers_search_directories(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    local = tmp_path / "node_modules" / ".bin"
    local.mkdir(parents=True)
    (local / "eslint").write_text("#!/bin/sh\n", encoding="utf-8")
    monkeypatch.setattr("eslint_checks.runtime.process.shutil.which", lambda name: f"/usr/bin/{name}")

    assert resolve_executable("eslint", search=(local,)) == str(local / "eslint")


def test_resolve_falls_back_to_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("eslint_checks.runtime.process.shutil.which", lambda name: f"/usr/bin/{name}")

    assert resolve_executable("eslint", search=(tmp_path,)) == "/usr/bin/eslint"


def test_resolve_raises_when_missing(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("eslint_checks.runtime.process.shutil.which", lambda name: None)

    with pytest.raises(FileNotFoundError, match="'eslint' was not found"):
        resolve_executable("eslint")


def test_run_command_forwards_options(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    captured: dict[str, Any] = {}

    def fake_run(args: list[str], **kwargs: Any) -> subprocess.CompletedProcess[str]:
        captured["args"] = args
        captured.update(kwargs)
        return subprocess.CompletedProcess(args, 0, "[]", "")

    monkeypatch.setattr("eslint_checks.runtime.process.shutil.which", lambda name: f"/usr/bin/{name}")
    monkeypatch.setattr("eslint_checks.runtime.process.subprocess.run", fake_run)

    completed = run_command(
        ["eslint", "--format", "json"],
        options=CommandOptions(cwd=tmp_path, check=False, capture_output=True),
    )

    assert completed.stdout == "[]"
    assert captured["args"] == ["/usr/bin/eslint", "--format", "json"]
    assert captured["cwd"] == str(tmp_path)
    assert captured["check"] is False
    assert captured["capture_output"] is True
    assert captured["text"] is True


def test_run_command_requires_arguments() -> None:
    with pytest.raises(ValueError, match="at least one argument"):
        run_command([])
