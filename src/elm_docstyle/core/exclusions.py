"""Config validator — load the optional exclusion config artifact.

The artifact is a JSON object with two required arrays::

    {
        "excludedChecks": ["..."],
        "excludedPaths": ["elm-stuff", "tests/"]
    }

Only the first element of each array is validated.  Later elements are not
validated; non-string ones are dropped with a warning so that substring
matching and the engine only ever see strings.  Loading is all-or-nothing: any failure raises before traversal.
"""

from __future__ import annotations

import json
import logging

from elm_docstyle.contracts.load import config_validator
from elm_docstyle.errors import ConfigParseError, ConfigReadError, ConfigShapeError
from elm_docstyle.model.exclusions import EMPTY_EXCLUSIONS, ExclusionConfig

logger = logging.getLogger(__name__)

CHECKS_FIELD = "excludedChecks"
PATHS_FIELD = "excludedPaths"


def _first_shape_error(document: object, path: str) -> ConfigShapeError | None:
    errors = sorted(
        config_validator().iter_errors(document),
        key=lambda e: (list(e.absolute_path), e.validator),
    )
    if not errors:
        return None
    err = errors[0]

    if err.absolute_path:
        return ConfigShapeError(path, str(err.absolute_path[0]), err.message)
    if err.validator == "required" and isinstance(document, dict):
        missing = [f for f in err.validator_value if f not in document]
        return ConfigShapeError(path, missing[0], "field is missing")
    return ConfigShapeError(path, None, err.message)


def _strings(document: dict, field: str) -> frozenset[str]:
    values = document[field]
    kept = frozenset(v for v in values if isinstance(v, str))
    dropped = sum(1 for v in values if not isinstance(v, str))
    if dropped:
        logger.warning("Ignoring %d non-string entries in %s", dropped, field)
    return kept


def load_exclusions(path: str | None) -> ExclusionConfig:
    """Return the ``ExclusionConfig`` stored at *path*.

    With no *path*, no I/O happens and both exclusion sets are empty.

    Raises
    ------
    ConfigReadError
        The file cannot be opened or decoded.
    ConfigParseError
        The file is not valid JSON.
    ConfigShapeError
        A required field is missing, is not an array, or its first element
        is not a string.
    """
    if path is None:
        return EMPTY_EXCLUSIONS

    try:
        with open(path, encoding="utf-8") as fh:
            text = fh.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigReadError(path, exc) from exc

    try:
        document = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ConfigParseError(path, exc) from exc

    shape_error = _first_shape_error(document, path)
    if shape_error is not None:
        raise shape_error

    config = ExclusionConfig(
        excluded_checks=_strings(document, CHECKS_FIELD),
        excluded_paths=_strings(document, PATHS_FIELD),
    )
    logger.debug(
        "Loaded config %s: %d excluded check(s), %d excluded path(s)",
        path,
        len(config.excluded_checks),
        len(config.excluded_paths),
    )
    return config
