# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Safe wrappers around ``subprocess`` execution."""

from __future__ import annotations

import shutil

# Bandit: subprocess usage is intentional; arguments are normalised and ``shell=True`` is never used.
import subprocess  # nosec B404
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path
from subprocess import CompletedProcess


@dataclass(slots=True, frozen=True)
class CommandOptions:
    """Immutable command execution options."""

    cwd: Path | None = None
    env: Mapping[str, str] | None = None
    check: bool = True
    capture_output: bool = False
    timeout: float | None = None


def resolve_executable(head: str, *, search: Sequence[Path] = ()) -> str:
    """Return an absolute path for ``head``.

    Args:
        head: Executable name or path.
        search: Directories probed before ``PATH``.

    Returns:
        str: Absolute path to the executable.

    Raises:
        FileNotFoundError: If the executable cannot be located.
    """

    head_path = Path(head)
    if head_path.is_absolute():
        return str(head_path)
    for directory in search:
        candidate = directory / head
        if candidate.is_file():
            return str(candidate)
    resolved = shutil.which(head)
    if resolved is None:
        raise FileNotFoundError(f"Executable '{head}' was not found on PATH")
    return resolved


def run_command(
    args: Sequence[str],
    *,
    options: CommandOptions | None = None,
    search: Sequence[Path] = (),
) -> CompletedProcess[str]:
    """Execute ``args`` after normalising the executable path.

    Args:
        args: Command line; the first item names the executable.
        options: Execution options; defaults to :class:`CommandOptions`.
        search: Directories probed for the executable before ``PATH``.

    Returns:
        CompletedProcess[str]: Completed process with text output.

    Raises:
        ValueError: If ``args`` is empty.
        FileNotFoundError: If the executable cannot be located.
    """

    if not args:
        raise ValueError("subprocess command requires at least one argument")
    opts = options or CommandOptions()
    head, *rest = args
    normalized = [resolve_executable(head, search=search), *rest]
    return subprocess.run(  # nosec B603
        normalized,
        cwd=str(opts.cwd) if opts.cwd is not None else None,
        env=dict(opts.env) if opts.env is not None else None,
        check=opts.check,
        capture_output=opts.capture_output,
        text=True,
        timeout=opts.timeout,
    )


__all__ = ["CommandOptions", "resolve_executable", "run_command"]
