"""Tests for the exclusion config validator."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from elm_docstyle.core.exclusions import load_exclusions
from elm_docstyle.errors import ConfigParseError, ConfigReadError, ConfigShapeError
from elm_docstyle.model.exclusions import ExclusionConfig


def _write(tmp_path: Path, document) -> str:
    path = tmp_path / "docstyle.json"
    path.write_text(json.dumps(document), encoding="utf-8")
    return str(path)


class TestLoadExclusions:
    """Contract of load_exclusions()."""

    def test_no_path_gives_empty_sets(self):
        config = load_exclusions(None)
        assert config == ExclusionConfig()
        assert config.excluded_checks == frozenset()
        assert config.excluded_paths == frozenset()

    def test_valid_config(self, tmp_path: Path):
        path = _write(
            tmp_path,
            {"excludedChecks": ["NoReturnType"], "excludedPaths": ["tests/", "Generated"]},
        )
        config = load_exclusions(path)
        assert config.excluded_checks == {"NoReturnType"}
        assert config.excluded_paths == {"tests/", "Generated"}

    def test_empty_arrays_equal_no_config(self, tmp_path: Path):
        path = _write(tmp_path, {"excludedChecks": [], "excludedPaths": []})
        assert load_exclusions(path) == load_exclusions(None)

    def test_extra_fields_ignored(self, tmp_path: Path):
        path = _write(
            tmp_path, {"excludedChecks": [], "excludedPaths": [], "comment": "hi"}
        )
        assert load_exclusions(path) == ExclusionConfig()

    def test_missing_file_is_read_error(self, tmp_path: Path):
        with pytest.raises(ConfigReadError) as exc_info:
            load_exclusions(str(tmp_path / "absent.json"))
        assert "failed to open the input config_path" in str(exc_info.value)

    def test_directory_is_read_error(self, tmp_path: Path):
        with pytest.raises(ConfigReadError):
            load_exclusions(str(tmp_path))

    def test_invalid_json_is_parse_error(self, tmp_path: Path):
        path = tmp_path / "docstyle.json"
        path.write_text("{excludedChecks: [", encoding="utf-8")
        with pytest.raises(ConfigParseError):
            load_exclusions(str(path))


class TestConfigShape:
    """Shape validation names the offending field."""

    def test_missing_excluded_paths(self, tmp_path: Path):
        path = _write(tmp_path, {"excludedChecks": []})
        with pytest.raises(ConfigShapeError) as exc_info:
            load_exclusions(path)
        assert exc_info.value.field == "excludedPaths"
        assert "does not contain a valid elm-docstyle configuration" in str(exc_info.value)

    def test_missing_excluded_checks(self, tmp_path: Path):
        path = _write(tmp_path, {"excludedPaths": []})
        with pytest.raises(ConfigShapeError) as exc_info:
            load_exclusions(path)
        assert exc_info.value.field == "excludedChecks"

    def test_excluded_paths_not_a_sequence(self, tmp_path: Path):
        path = _write(tmp_path, {"excludedChecks": [], "excludedPaths": "tests/"})
        with pytest.raises(ConfigShapeError) as exc_info:
            load_exclusions(path)
        assert exc_info.value.field == "excludedPaths"

    def test_first_element_must_be_string(self, tmp_path: Path):
        path = _write(tmp_path, {"excludedChecks": [3, "x"], "excludedPaths": []})
        with pytest.raises(ConfigShapeError) as exc_info:
            load_exclusions(path)
        assert exc_info.value.field == "excludedChecks"

    def test_only_first_element_is_checked(self, tmp_path: Path, caplog):
        path = _write(tmp_path, {"excludedChecks": ["a", 3], "excludedPaths": ["b", None]})
        with caplog.at_level(logging.WARNING):
            config = load_exclusions(path)
        assert "Ignoring 1 non-string entries in excludedChecks" in caplog.text
        assert config.excluded_checks == {"a"}
        assert config.excluded_paths == {"b"}

    def test_top_level_must_be_object(self, tmp_path: Path):
        path = _write(tmp_path, ["excludedChecks", "excludedPaths"])
        with pytest.raises(ConfigShapeError) as exc_info:
            load_exclusions(path)
        assert exc_info.value.field is None
