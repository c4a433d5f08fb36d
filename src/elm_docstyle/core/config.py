"""Run configuration dataclass and environment overrides."""

from __future__ import annotations

import logging
import os
import shlex
from dataclasses import dataclass, field
from typing import Mapping

from elm_docstyle.errors import SettingsError
from elm_docstyle.model.exclusions import EMPTY_EXCLUSIONS, ExclusionConfig
from elm_docstyle.model.options import EngineOptions

SOURCE_SUFFIX = ".elm"
BUILD_ARTIFACT_DIR = "elm-stuff"

DEFAULT_POLL_INTERVAL = 0.05  # seconds
DEFAULT_TIMEOUT = 60.0        # seconds

ENV_POLL_INTERVAL = "ELM_DOCSTYLE_POLL_INTERVAL"
ENV_TIMEOUT = "ELM_DOCSTYLE_TIMEOUT"
ENV_ENGINE = "ELM_DOCSTYLE_ENGINE"
ENV_CHECKER = "ELM_DOCSTYLE_CHECKER"
ENV_LOG_LEVEL = "ELM_DOCSTYLE_LOG_LEVEL"


@dataclass(frozen=True)
class RunConfig:
    """Immutable configuration of one lint invocation."""

    roots: tuple[str, ...]
    exclusions: ExclusionConfig = EMPTY_EXCLUSIONS
    engine_options: EngineOptions = field(default_factory=EngineOptions)
    poll_interval: float = DEFAULT_POLL_INTERVAL
    timeout: float = DEFAULT_TIMEOUT


def _positive_float(env: Mapping[str, str], name: str, default: float) -> float:
    raw = env.get(name, "").strip()
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError:
        raise SettingsError(f"{name} must be a number of seconds, got {raw!r}") from None
    if value <= 0:
        raise SettingsError(f"{name} must be positive, got {raw!r}")
    return value


def poll_interval_from_env(env: Mapping[str, str] | None = None) -> float:
    return _positive_float(os.environ if env is None else env, ENV_POLL_INTERVAL, DEFAULT_POLL_INTERVAL)


def timeout_from_env(env: Mapping[str, str] | None = None) -> float:
    return _positive_float(os.environ if env is None else env, ENV_TIMEOUT, DEFAULT_TIMEOUT)


def engine_command_from_env(env: Mapping[str, str] | None = None) -> list[str] | None:
    """Engine command line from ``ELM_DOCSTYLE_ENGINE``, or ``None`` if unset."""
    raw = (os.environ if env is None else env).get(ENV_ENGINE, "").strip()
    if not raw:
        return None
    return shlex.split(raw)


def log_level_from_env(env: Mapping[str, str] | None = None) -> int:
    raw = (os.environ if env is None else env).get(ENV_LOG_LEVEL, "").strip().upper()
    if not raw:
        return logging.WARNING
    level = logging.getLevelName(raw)
    if not isinstance(level, int):
        raise SettingsError(f"{ENV_LOG_LEVEL} must be a logging level name, got {raw!r}")
    return level
