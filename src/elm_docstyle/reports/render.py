"""Renderers — pure projections of a ``RunOutcome`` onto text.

Neither renderer influences control flow or the exit status.
"""

from __future__ import annotations

import json
from typing import Any

from elm_docstyle.model import OutputFormat
from elm_docstyle.model.outcome import RunOutcome
from elm_docstyle.utils.json_norm import stable_json_dumps

SUCCESS_MESSAGE = "No docstyle issues found! :)"


def render_human(outcome: RunOutcome) -> str:
    if outcome.success:
        return SUCCESS_MESSAGE + "\n"
    lines = [f"Docstyle errors found in {len(outcome.issues)} modules:", "", ""]
    for report in outcome.issues:
        lines.append(report + "\n")
    return "\n".join(lines) + "\n"


def _decode_report(report: str) -> Any:
    """Embed JSON-formatted engine reports as values, keep others as text."""
    try:
        return json.loads(report)
    except json.JSONDecodeError:
        return report


def render_json(outcome: RunOutcome) -> str:
    payload = outcome.to_dict()
    payload["reports"] = [_decode_report(r) for r in outcome.issues]
    return stable_json_dumps(payload)


def render(outcome: RunOutcome, fmt: OutputFormat) -> str:
    if fmt is OutputFormat.JSON:
        return render_json(outcome)
    return render_human(outcome)
