"""Runner — traverse, dispatch, wait for completion, aggregate.

This is the only entry point that wires explorer → engine → detector →
aggregator.
"""

from __future__ import annotations

import logging

from elm_docstyle.core.channel import DispatchChannel
from elm_docstyle.core.completion import CompletionDetector
from elm_docstyle.core.config import RunConfig
from elm_docstyle.core.explore import explore_all
from elm_docstyle.engine import Engine
from elm_docstyle.model.outcome import RunOutcome
from elm_docstyle.reports.aggregate import aggregate

_logger = logging.getLogger(__name__)


def run_lint(config: RunConfig, engine: Engine) -> RunOutcome:
    """Lint every Elm file under ``config.roots`` with *engine*.

    Traversal runs to completion before waiting starts, so the expected
    report count is fixed.  Any ``DocstyleError`` raised along the way
    aborts the run and discards whatever reports were collected.  The
    caller owns *engine* and is responsible for closing it.
    """
    channel = DispatchChannel(engine)

    # ── 1. traverse every root, one submission per Elm file ─────────
    for unit in explore_all(config.roots, config.exclusions):
        channel.submit(unit)
    expected = channel.submitted
    _logger.info("Dispatched %d module(s) from %d root(s)", expected, len(config.roots))

    # ── 2. wait for one report per submission ───────────────────────
    CompletionDetector(
        channel.reports,
        expected,
        poll_interval=config.poll_interval,
        timeout=config.timeout,
    ).wait()

    # ── 3. aggregate ────────────────────────────────────────────────
    reports = channel.reports.freeze()
    if len(reports) > expected:
        _logger.warning(
            "Received %d reports for %d dispatched module(s)", len(reports), expected
        )
    outcome = aggregate(reports)
    _logger.info(
        "Collected %d report(s), %d with issues", len(reports), len(outcome.issues)
    )
    return outcome
