"""Shared fixtures: Elm source trees and in-process fake engines."""

from __future__ import annotations

import sys
import threading
from pathlib import Path

import pytest

from elm_docstyle.engine import ThreadPoolEngine
from elm_docstyle.model.options import EngineOptions

FIXTURES = Path(__file__).resolve().parent / "fixtures"
FAKE_ENGINE = FIXTURES / "fake_engine.py"

CLEAN_MODULE = "module A exposing (foo)\n\n{-| Says hello. -}\nfoo = 1\n"
DIRTY_MODULE = "module B exposing (foo)\n\nfoo = 1\n"
DIRTY_REPORT = "missing docstring on foo"


def docstring_checker(text: str, options: EngineOptions) -> str:
    """Deterministic stand-in for the Elm checker."""
    return "" if "{-|" in text else DIRTY_REPORT


class RecordingEngine(ThreadPoolEngine):
    """ThreadPoolEngine that remembers every submitted text."""

    def __init__(self, checker=docstring_checker, options=None, **kwargs):
        super().__init__(checker, options, **kwargs)
        self.submitted: list[str] = []
        self._record_lock = threading.Lock()

    def submit(self, text: str) -> None:
        with self._record_lock:
            self.submitted.append(text)
        super().submit(text)


@pytest.fixture()
def elm_project(tmp_path: Path) -> Path:
    """A project with one clean module, one dirty module and noise."""
    root = tmp_path / "project"
    (root / "src").mkdir(parents=True)
    (root / "src" / "A.elm").write_text(CLEAN_MODULE, encoding="utf-8")
    (root / "src" / "B.elm").write_text(DIRTY_MODULE, encoding="utf-8")
    (root / "README.md").write_text("# project\n", encoding="utf-8")
    (root / "elm-stuff").mkdir()
    (root / "elm-stuff" / "Cached.elm").write_text(DIRTY_MODULE, encoding="utf-8")
    return root


@pytest.fixture()
def fake_engine_command() -> list[str]:
    return [sys.executable, str(FAKE_ENGINE)]
