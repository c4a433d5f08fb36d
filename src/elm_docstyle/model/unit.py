"""DispatchUnit — one source file's text, submitted once to the engine."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class DispatchUnit:
    path: str
    text: str
