"""RunOutcome — the terminal success/failure verdict of one invocation."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class RunOutcome:
    """Result of aggregating every report of a completed run.

    ``issues`` holds the non-empty reports in lexicographic order; an empty
    tuple means the run succeeded.
    """

    issues: tuple[str, ...] = field(default_factory=tuple)

    @property
    def success(self) -> bool:
        return not self.issues

    def to_dict(self) -> dict:
        return {
            "success": self.success,
            "errorCount": len(self.issues),
            "reports": list(self.issues),
        }
