"""Dispatch/collection channel between the driver and the analysis engine."""

from __future__ import annotations

import logging
import threading

from elm_docstyle.engine import Engine
from elm_docstyle.model.unit import DispatchUnit

logger = logging.getLogger(__name__)


class ReportCollection:
    """Append-only, thread-safe sequence of reports.

    Engine threads append; the completion detector waits on the length.
    ``freeze()`` hands out the final snapshot and turns any later append
    into a logged no-op, so the sequence never changes after it is read.
    """

    def __init__(self) -> None:
        self._cond = threading.Condition()
        self._reports: list[str] = []
        self._frozen = False

    def append(self, report: str) -> None:
        with self._cond:
            if self._frozen:
                logger.warning("Dropping report delivered after the run finished")
                return
            self._reports.append(report)
            self._cond.notify_all()

    def __len__(self) -> int:
        with self._cond:
            return len(self._reports)

    def freeze(self) -> tuple[str, ...]:
        with self._cond:
            self._frozen = True
            return tuple(self._reports)

    def wait_for_length(self, expected: int, timeout: float) -> bool:
        """Block up to *timeout* seconds until ``len(self) >= expected``."""
        with self._cond:
            return self._cond.wait_for(lambda: len(self._reports) >= expected, timeout)


class DispatchChannel:
    """Owns the engine handle, the submission count and the report collection.

    The channel subscribes to the engine on construction; every report the
    engine delivers is appended to ``reports`` as it arrives.  Attribution is
    by count only: no report is tied back to the unit that produced it.
    """

    def __init__(self, engine: Engine):
        self.engine = engine
        self.reports = ReportCollection()
        self._submitted = 0
        engine.subscribe(self.reports.append)

    @property
    def submitted(self) -> int:
        return self._submitted

    def submit(self, unit: DispatchUnit) -> None:
        logger.debug("Dispatching %s", unit.path)
        self.engine.submit(unit.text)
        self._submitted += 1
