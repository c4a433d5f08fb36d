"""In-process engine — run a checker callable on a thread pool."""

from __future__ import annotations

import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Callable

from elm_docstyle.engine import ReportCallback
from elm_docstyle.model.options import EngineOptions

logger = logging.getLogger(__name__)

Checker = Callable[[str, EngineOptions], str]


class ThreadPoolEngine:
    """Engine backed by a ``ThreadPoolExecutor``.

    Each submission runs ``checker(text, options)`` on a worker thread and
    the returned report is delivered to subscribers from that thread, so
    reports arrive in completion order rather than submission order.  A
    checker that raises is logged and produces no report.
    """

    def __init__(
        self,
        checker: Checker,
        options: EngineOptions | None = None,
        *,
        max_workers: int | None = None,
    ):
        self.checker = checker
        self.options = options or EngineOptions()
        self._pool = ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="elm-docstyle-engine"
        )
        self._subscribers: list[ReportCallback] = []
        self._lock = threading.Lock()

    def subscribe(self, callback: ReportCallback) -> None:
        with self._lock:
            self._subscribers.append(callback)

    def submit(self, text: str) -> None:
        self._pool.submit(self._check, text)

    def _check(self, text: str) -> None:
        try:
            report = self.checker(text, self.options)
        except Exception:
            logger.exception("Checker raised; no report will be delivered for this unit")
            return
        with self._lock:
            subscribers = list(self._subscribers)
        for callback in subscribers:
            callback(report)

    def close(self) -> None:
        self._pool.shutdown(wait=False, cancel_futures=True)
