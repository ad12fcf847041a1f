# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Run one lint pass end to end: select files, lint, and report to the check run."""

from __future__ import annotations

from dataclasses import dataclass

from .config import ActionConfig
from .events import TriggerEvent, resolve_trigger
from .hosting.checks import CheckRunApi, CheckRunReporter, Clock, utc_now
from .linting.eslint import LintEngine
from .linting.translator import LintTranslator
from .logging import debug, info
from .models import Conclusion
from .selection import FileSelector


@dataclass(frozen=True, slots=True)
class RunOutcome:
    """Exit status of a run plus the failure message, if any."""

    exit_code: int
    message: str | None = None

    @property
    def failed(self) -> bool:
        """Return ``True`` when the run should fail the job."""

        return self.exit_code != 0


def run(
    config: ActionConfig,
    api: CheckRunApi,
    engine: LintEngine,
    *,
    event: TriggerEvent | None = None,
    clock: Clock = utc_now,
) -> RunOutcome:
    """Select files, lint them, and complete the check run.

    Host API failures only degrade the run. A lint engine failure marks the
    check run (if any) as failed without output and fails the run with the
    engine's message.

    Args:
        config: Action configuration.
        api: Host API client.
        engine: Lint engine.
        event: Trigger event; resolved from the event payload when ``None``.
        clock: Source of check-run timestamps.

    Returns:
        RunOutcome: Exit code ``1`` with a message on failure, ``0`` otherwise.
    """

    trigger = event if event is not None else resolve_trigger(config)
    selection = FileSelector(api, config).select(trigger)

    reporter = CheckRunReporter(api, config.owner, config.repo, clock=clock)
    reporter.start(selection.head_sha, job_name=config.job_name)

    files = None if config.lint_all else selection.files
    try:
        translation = LintTranslator(engine, config.workspace).lint(files)
    except Exception as exc:  # lint failures of any kind fail the check run
        reporter.complete(Conclusion.FAILURE)
        return RunOutcome(exit_code=1, message=str(exc))

    info(translation.console_output)
    report = translation.report
    reporter.complete(report.conclusion, report.output)
    debug(report.output.summary)
    if report.conclusion is Conclusion.FAILURE:
        return RunOutcome(exit_code=1, message=report.output.summary)
    return RunOutcome(exit_code=0)


__all__ = ["RunOutcome", "run"]
