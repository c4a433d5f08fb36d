"""External engine — newline-delimited JSON over a child process's pipes.

Wire protocol (one JSON object per line, UTF-8):

    driver → engine   {"format": ..., "verbose": ..., "excludedChecks": [...],
                       "checkAllDefinitions": ...}        (once, first line)
    driver → engine   {"id": 0, "source": "module Main exposing (..)..."}
    engine → driver   {"report": "...", "id": 0}          ("id" optional)

The engine may answer in any order.  Completion is judged by report count
alone; echoed ids only serve to flag duplicate deliveries.
"""

from __future__ import annotations

import json
import logging
import os
import subprocess
import threading
from importlib import resources
from pathlib import Path
from typing import Mapping, Sequence

from elm_docstyle.core.config import ENV_CHECKER, ENV_ENGINE, engine_command_from_env
from elm_docstyle.engine import ReportCallback
from elm_docstyle.errors import EngineError
from elm_docstyle.model.options import EngineOptions

logger = logging.getLogger(__name__)

BRIDGE_SCRIPT = "engine_bridge.js"
_CLOSE_TIMEOUT = 5.0  # seconds


def bridge_path() -> Path:
    """Location of the bundled Node.js bridge for the compiled checker."""
    local = Path(__file__).resolve().parents[1] / "data" / BRIDGE_SCRIPT
    if local.exists():
        return local
    with resources.as_file(resources.files("elm_docstyle") / "data" / BRIDGE_SCRIPT) as p:
        return p


def resolve_command(env: Mapping[str, str] | None = None) -> list[str]:
    """Pick the engine command line.

    ``ELM_DOCSTYLE_ENGINE`` wins; otherwise the bundled bridge is run under
    ``node`` against the checker named by ``ELM_DOCSTYLE_CHECKER``.
    """
    env = os.environ if env is None else env
    command = engine_command_from_env(env)
    if command:
        return command
    checker = env.get(ENV_CHECKER, "").strip()
    if not checker:
        raise EngineError(
            f"no analysis engine configured: set {ENV_ENGINE} to an engine "
            f"command or {ENV_CHECKER} to the compiled checker.js"
        )
    return ["node", str(bridge_path()), checker]


class SubprocessEngine:
    """Engine living in a child process, driven over stdin/stdout."""

    def __init__(self, command: Sequence[str], options: EngineOptions | None = None):
        self.command = list(command)
        self.options = options or EngineOptions()
        self._subscribers: list[ReportCallback] = []
        self._lock = threading.Lock()
        self._write_lock = threading.Lock()
        self._next_id = 0
        self._seen_ids: set[object] = set()

        try:
            self._proc = subprocess.Popen(
                self.command,
                stdin=subprocess.PIPE,
                stdout=subprocess.PIPE,
                text=True,
                encoding="utf-8",
                errors="replace",
                bufsize=1,
            )
        except OSError as exc:
            raise EngineError(f"failed to start the analysis engine {self.command!r}: {exc}") from exc

        self._reader = threading.Thread(
            target=self._read_reports, name="elm-docstyle-engine-reader", daemon=True
        )
        self._reader.start()
        self._write(self.options.to_dict())

    # ── channel ─────────────────────────────────────────────────────

    def subscribe(self, callback: ReportCallback) -> None:
        with self._lock:
            self._subscribers.append(callback)

    def submit(self, text: str) -> None:
        with self._write_lock:
            unit_id = self._next_id
            self._next_id += 1
        self._write({"id": unit_id, "source": text})

    def _write(self, message: dict) -> None:
        line = json.dumps(message) + "\n"
        with self._write_lock:
            try:
                self._proc.stdin.write(line)
                self._proc.stdin.flush()
            except (BrokenPipeError, ValueError) as exc:
                raise EngineError(
                    f"the analysis engine is no longer accepting input "
                    f"(exit status {self._proc.poll()}): {exc}"
                ) from exc

    def _read_reports(self) -> None:
        for line in self._proc.stdout:
            line = line.strip()
            if not line:
                continue
            try:
                message = json.loads(line)
            except json.JSONDecodeError:
                logger.warning("Ignoring malformed engine output: %.200s", line)
                continue
            if not isinstance(message, dict) or not isinstance(message.get("report"), str):
                logger.warning("Ignoring engine message without a report: %.200s", line)
                continue
            self._deliver(message)
        logger.debug("Engine output closed (exit status %s)", self._proc.poll())

    def _deliver(self, message: dict) -> None:
        with self._lock:
            unit_id = message.get("id")
            if isinstance(unit_id, (int, str)):
                if unit_id in self._seen_ids:
                    logger.warning("Engine delivered a second report for unit %r", unit_id)
                self._seen_ids.add(unit_id)
            subscribers = list(self._subscribers)
        for callback in subscribers:
            try:
                callback(message["report"])
            except Exception:
                logger.exception("Report subscriber raised; report dropped")

    # ── lifecycle ───────────────────────────────────────────────────

    def close(self) -> None:
        try:
            self._proc.stdin.close()
        except OSError as exc:
            logger.debug("Closing engine stdin failed: %s", exc)
        try:
            self._proc.wait(timeout=_CLOSE_TIMEOUT)
        except subprocess.TimeoutExpired:
            logger.warning("Analysis engine did not exit; terminating it")
            self._proc.kill()
            self._proc.wait()
        self._reader.join(timeout=_CLOSE_TIMEOUT)
        if self._proc.returncode:
            logger.warning("Analysis engine exited with status %s", self._proc.returncode)
