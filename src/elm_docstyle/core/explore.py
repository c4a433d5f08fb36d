"""Path explorer — walk user-supplied roots and yield Elm source files.

Per path, in order:

1. a path containing any excluded substring contributes nothing;
2. a directory named ``elm-stuff`` (build artifacts) contributes nothing;
3. a path ending in ``.elm`` is read in full and yielded;
4. anything else is listed as a directory and each entry is explored.

A path that is neither an Elm file nor a directory is silently skipped.
Read and listing failures are fatal for the whole run.
"""

from __future__ import annotations

import enum
import logging
import os
from dataclasses import dataclass
from typing import Iterable, Iterator

from elm_docstyle.core.config import BUILD_ARTIFACT_DIR, SOURCE_SUFFIX
from elm_docstyle.errors import DirListError, FileReadError
from elm_docstyle.model.exclusions import EMPTY_EXCLUSIONS, ExclusionConfig
from elm_docstyle.model.unit import DispatchUnit

logger = logging.getLogger(__name__)

_SEPARATORS = "/" + os.sep


class ListingKind(enum.Enum):
    ENTRIES = "entries"
    NOT_A_DIRECTORY = "not_a_directory"


@dataclass(frozen=True)
class Listing:
    kind: ListingKind
    entries: tuple[str, ...] = ()


def list_directory(path: str) -> Listing:
    """List *path*, distinguishing "not a directory" from real failures.

    Raises ``DirListError`` for every failure other than ENOTDIR.
    """
    try:
        names = os.listdir(path)
    except NotADirectoryError:
        return Listing(ListingKind.NOT_A_DIRECTORY)
    except OSError as exc:
        raise DirListError(path, exc) from exc
    return Listing(ListingKind.ENTRIES, tuple(sorted(names)))


def join_path(parent: str, name: str) -> str:
    """Append *name* to *parent* with exactly one separator between them."""
    trimmed = parent.rstrip(_SEPARATORS)
    if not trimmed and parent:
        # filesystem root, e.g. "/"
        return parent[0] + name
    return trimmed + "/" + name


def read_source(path: str) -> str:
    try:
        with open(path, encoding="utf-8") as fh:
            return fh.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise FileReadError(path, exc) from exc


def _explore(
    path: str,
    config: ExclusionConfig,
    ancestors: frozenset[str],
) -> Iterator[DispatchUnit]:
    if config.excludes_path(path):
        logger.debug("Excluded by config: %s", path)
        return

    if os.path.basename(path.rstrip(_SEPARATORS)) == BUILD_ARTIFACT_DIR:
        logger.debug("Skipping build artifacts: %s", path)
        return

    if path.endswith(SOURCE_SUFFIX):
        yield DispatchUnit(path=path, text=read_source(path))
        return

    listing = list_directory(path)
    if listing.kind is ListingKind.NOT_A_DIRECTORY:
        return

    real = os.path.realpath(path)
    if real in ancestors:
        logger.warning("Skipping %s: symlink loop back to %s", path, real)
        return
    below = ancestors | {real}

    for name in listing.entries:
        yield from _explore(join_path(path, name), config, below)


def explore(root: str, config: ExclusionConfig = EMPTY_EXCLUSIONS) -> Iterator[DispatchUnit]:
    """Lazily yield one ``DispatchUnit`` per Elm file reachable from *root*.

    Raises ``FileReadError`` or ``DirListError`` from the point of failure;
    units yielded before the error have already been handed out.
    """
    return _explore(root, config, frozenset())


def explore_all(
    roots: Iterable[str],
    config: ExclusionConfig = EMPTY_EXCLUSIONS,
) -> Iterator[DispatchUnit]:
    for root in roots:
        yield from explore(root, config)
