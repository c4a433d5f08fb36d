"""Centralized exit-code contract for the CLI.

Code  Meaning
----  -------
  0   Success — run completed with no issues, or version requested
  1   Failure — issues found, usage/help, bad config, I/O error, timeout
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    SUCCESS = 0
    FAILURE = 1
