"""Tests for report aggregation and rendering."""

from __future__ import annotations

import json

from elm_docstyle.model import OutputFormat
from elm_docstyle.model.outcome import RunOutcome
from elm_docstyle.reports.aggregate import aggregate, exit_code_for
from elm_docstyle.reports.render import (
    SUCCESS_MESSAGE,
    render,
    render_human,
    render_json,
)
from elm_docstyle.utils.exit_codes import ExitCode


class TestAggregate:
    def test_filters_empty_and_sorts(self):
        outcome = aggregate(["", "b-issue", "", "a-issue"])
        assert outcome == RunOutcome(issues=("a-issue", "b-issue"))
        assert not outcome.success
        assert exit_code_for(outcome) == ExitCode.FAILURE

    def test_all_empty_is_success(self):
        outcome = aggregate(["", "", ""])
        assert outcome.success
        assert exit_code_for(outcome) == ExitCode.SUCCESS

    def test_no_reports_is_success(self):
        assert aggregate([]).success

    def test_sorting_is_by_content_not_arrival(self):
        assert aggregate(["Zeta", "alpha", "Beta"]).issues == ("Beta", "Zeta", "alpha")

    def test_duplicates_are_kept(self):
        assert aggregate(["x", "x"]).issues == ("x", "x")


class TestRenderHuman:
    def test_success_message(self):
        assert render_human(RunOutcome()) == SUCCESS_MESSAGE + "\n"
        assert "No docstyle issues found" in SUCCESS_MESSAGE

    def test_failure_lists_sorted_reports(self):
        text = render_human(aggregate(["b-issue", "a-issue"]))
        assert text.startswith("Docstyle errors found in 2 modules:\n")
        assert text.index("a-issue") < text.index("b-issue")
        assert "a-issue\n\nb-issue\n" in text


class TestRenderJson:
    def test_success_document(self):
        doc = json.loads(render_json(RunOutcome()))
        assert doc == {"success": True, "errorCount": 0, "reports": []}

    def test_json_reports_are_embedded(self):
        outcome = aggregate(['{"module": "B", "errors": ["no docstring"]}', "plain"])
        doc = json.loads(render_json(outcome))
        assert doc["success"] is False
        assert doc["errorCount"] == 2
        assert doc["reports"] == [
            "plain",
            {"module": "B", "errors": ["no docstring"]},
        ]

    def test_output_is_stable(self):
        outcome = aggregate(["b", "a"])
        assert render_json(outcome) == render_json(outcome)
        assert render_json(outcome).endswith("\n")


def test_render_dispatches_on_format():
    outcome = aggregate(["x"])
    assert render(outcome, OutputFormat.HUMAN) == render_human(outcome)
    assert render(outcome, OutputFormat.JSON) == render_json(outcome)
