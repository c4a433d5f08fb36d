"""Report aggregator — turn the collected reports into a RunOutcome."""

from __future__ import annotations

from typing import Iterable

from elm_docstyle.model.outcome import RunOutcome
from elm_docstyle.utils.exit_codes import ExitCode


def aggregate(reports: Iterable[str]) -> RunOutcome:
    """Drop empty reports and sort the rest lexicographically.

    Order follows report content, not the order files were discovered.
    """
    return RunOutcome(issues=tuple(sorted(r for r in reports if r)))


def exit_code_for(outcome: RunOutcome) -> ExitCode:
    return ExitCode.SUCCESS if outcome.success else ExitCode.FAILURE
