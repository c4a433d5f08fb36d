"""Shared utilities for elm_docstyle."""

from elm_docstyle.utils.exit_codes import ExitCode
from elm_docstyle.utils.json_norm import stable_json_dumps

__all__ = [
    "ExitCode",
    "stable_json_dumps",
]
