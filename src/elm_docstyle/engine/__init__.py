"""Analysis engines turn one unit of Elm source into one report string.

The engine is opaque to the driver.  It is reached through an asynchronous
request/response channel:

* ``subscribe(callback)`` registers a receiver for reports;
* ``submit(text)`` sends one unit and returns immediately;
* the engine later calls every subscriber exactly once per submission, from
  any thread and in any order, with the report (``""`` means clean);
* ``close()`` releases the engine's resources.

Reports carry no unit identifier.  Two adapters ship with the driver:

- ``ThreadPoolEngine``: runs an in-process checker callable on worker threads.
- ``SubprocessEngine``: talks newline-delimited JSON to an external process.
"""

from __future__ import annotations

from typing import Callable, Protocol

ReportCallback = Callable[[str], None]


class Engine(Protocol):
    """Every engine must expose ``subscribe``, ``submit`` and ``close``."""

    def subscribe(self, callback: ReportCallback) -> None:
        """Register *callback* to receive every future report."""
        ...

    def submit(self, text: str) -> None:
        """Send one unit of source text for analysis."""
        ...

    def close(self) -> None:
        ...


# Lazy imports to avoid circular dependencies
def __getattr__(name: str):
    if name == "ThreadPoolEngine":
        from .threaded import ThreadPoolEngine
        return ThreadPoolEngine
    if name == "SubprocessEngine":
        from .subprocess_engine import SubprocessEngine
        return SubprocessEngine
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
