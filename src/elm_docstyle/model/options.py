"""EngineOptions — configuration handed to the analysis engine at construction."""

from __future__ import annotations

from dataclasses import dataclass, field

from elm_docstyle.model import OutputFormat


@dataclass(frozen=True, slots=True)
class EngineOptions:
    format: OutputFormat = OutputFormat.HUMAN
    verbose: bool = False
    excluded_checks: tuple[str, ...] = field(default_factory=tuple)
    check_all_definitions: bool = False

    def to_dict(self) -> dict:
        """Wire form understood by the engine."""
        return {
            "format": self.format.value,
            "verbose": self.verbose,
            "excludedChecks": list(self.excluded_checks),
            "checkAllDefinitions": self.check_all_definitions,
        }
