"""Completion detector — infer "every report has arrived" by count.

The engine never signals that it is done, so the detector waits until the
number of collected reports reaches the number of dispatched units.  Each
tick blocks on the collection's condition for at most ``poll_interval``
seconds (waking early when a report lands); once more than ``timeout``
seconds have elapsed the run is declared timed out.
"""

from __future__ import annotations

import enum
import logging
import time
from typing import Callable

from elm_docstyle.core.channel import ReportCollection
from elm_docstyle.core.config import DEFAULT_POLL_INTERVAL, DEFAULT_TIMEOUT
from elm_docstyle.errors import CompletionTimeoutError

logger = logging.getLogger(__name__)


class DetectorState(str, enum.Enum):
    POLLING = "polling"
    COMPLETED = "completed"
    TIMED_OUT = "timed_out"


class CompletionDetector:
    """Two-state machine: ``POLLING`` → ``COMPLETED`` | ``TIMED_OUT``.

    ``expected_count`` must be fixed before the detector starts, i.e. after
    traversal of every root has finished.
    """

    def __init__(
        self,
        reports: ReportCollection,
        expected_count: int,
        *,
        poll_interval: float = DEFAULT_POLL_INTERVAL,
        timeout: float = DEFAULT_TIMEOUT,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.reports = reports
        self.expected_count = expected_count
        self.poll_interval = poll_interval
        self.timeout = timeout
        self._clock = clock
        self.state = DetectorState.POLLING
        self.ticks = 0

    def tick(self, elapsed: float) -> DetectorState:
        """Evaluate the transition rule once, given *elapsed* seconds so far."""
        if self.state is not DetectorState.POLLING:
            return self.state
        self.ticks += 1
        if len(self.reports) >= self.expected_count:
            self.state = DetectorState.COMPLETED
        elif elapsed > self.timeout:
            self.state = DetectorState.TIMED_OUT
        return self.state

    def wait(self) -> None:
        """Block until completed; raise ``CompletionTimeoutError`` on timeout."""
        started = self._clock()
        while self.tick(self._clock() - started) is DetectorState.POLLING:
            self.reports.wait_for_length(self.expected_count, self.poll_interval)

        logger.debug(
            "Completion detector finished after %d tick(s): %s",
            self.ticks,
            self.state.value,
        )
        if self.state is DetectorState.TIMED_OUT:
            raise CompletionTimeoutError(
                self.expected_count, len(self.reports), self.timeout
            )
