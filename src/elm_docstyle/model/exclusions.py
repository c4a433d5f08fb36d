"""ExclusionConfig — the validated contents of the config artifact."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class ExclusionConfig:
    """Check identifiers and path substrings excluded from a run.

    Built once at startup and never mutated afterwards.
    """

    excluded_checks: frozenset[str] = field(default_factory=frozenset)
    excluded_paths: frozenset[str] = field(default_factory=frozenset)

    def excludes_path(self, path: str) -> bool:
        """True when any excluded substring occurs in *path*."""
        return any(sub in path for sub in self.excluded_paths)


EMPTY_EXCLUSIONS = ExclusionConfig()
