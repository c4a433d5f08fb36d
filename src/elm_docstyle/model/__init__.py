"""Enums shared across the driver and the engine adapters."""

from __future__ import annotations

from enum import Enum


class OutputFormat(str, Enum):
    """Report format requested from the engine and used for rendering."""

    HUMAN = "human"
    JSON = "json"

    @classmethod
    def parse(cls, value: str | None) -> "OutputFormat | None":
        """Return the matching format, or ``None`` for unknown values."""
        for member in cls:
            if member.value == value:
                return member
        return None
