"""Fatal error taxonomy.

Every error below aborts the run: the CLI prints ``str(err)`` to standard
output and exits with ``ExitCode.FAILURE``.  Nothing is retried and no
partial report is emitted.
"""

from __future__ import annotations


class DocstyleError(Exception):
    """Base class for all fatal run errors."""


# ── config (pre-traversal) ──────────────────────────────────────────


class ConfigError(DocstyleError):
    def __init__(self, path: str, message: str):
        self.path = path
        super().__init__(message)


class ConfigReadError(ConfigError):
    """The config artifact could not be opened or read."""

    def __init__(self, path: str, cause: Exception):
        self.cause = cause
        super().__init__(path, f"failed to open the input config_path {path}: {cause}")


class ConfigParseError(ConfigError):
    """The config artifact is not valid JSON."""

    def __init__(self, path: str, cause: Exception):
        self.cause = cause
        super().__init__(path, f"failed to parse the config at {path}: {cause}")


class ConfigShapeError(ConfigError):
    """The config artifact parsed but does not have the expected shape."""

    def __init__(self, path: str, field: str | None, detail: str = ""):
        self.field = field
        where = f"field '{field}' is invalid" if field else "config must be a JSON object"
        message = (
            f"the provided config path {path} does not contain a valid "
            f"elm-docstyle configuration ({where}"
            + (f": {detail}" if detail else "")
            + "). Please refer to the README to see how a correct config file is shaped."
        )
        super().__init__(path, message)


# ── traversal ───────────────────────────────────────────────────────


class FileReadError(DocstyleError):
    """A source file was found but could not be read."""

    def __init__(self, path: str, cause: Exception):
        self.path = path
        self.cause = cause
        super().__init__(f"failed to open the input path {path}: {cause}")


class DirListError(DocstyleError):
    """A directory listing failed for a reason other than ENOTDIR."""

    def __init__(self, path: str, cause: Exception):
        self.path = path
        self.cause = cause
        super().__init__(f"Error while exploring the path {path}: {cause}")


# ── completion ──────────────────────────────────────────────────────


class CompletionTimeoutError(DocstyleError):
    """Not every dispatched unit produced a report before the deadline."""

    def __init__(self, expected: int, received: int, timeout: float):
        self.expected = expected
        self.received = received
        self.timeout = timeout
        super().__init__(
            f"timed out after {timeout:g}s waiting for the analysis engine: "
            f"received {received} of {expected} reports"
        )


class EngineError(DocstyleError):
    """The analysis engine could not be started."""


class SettingsError(DocstyleError):
    """An ``ELM_DOCSTYLE_*`` environment override has an invalid value."""
