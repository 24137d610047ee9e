"""Tests for the exception hierarchy."""

from pathlib import Path

import pytest

from code_census.exceptions import (
    AnalysisError,
    CodeCensusError,
    ConfigurationError,
    FileAccessError,
    InvalidConfigError,
    InvalidPathError,
)


class TestBaseError:
    def test_message_only(self):
        err = CodeCensusError("something broke")
        assert str(err) == "something broke"
        assert err.details == {}

    def test_details_appended(self):
        err = CodeCensusError("bad", details={"a": "1", "b": "2"})
        assert str(err) == "bad (a=1, b=2)"


class TestHierarchy:
    @pytest.mark.parametrize(
        "error, parent",
        [
            (FileAccessError(Path("x.cs"), "denied"), AnalysisError),
            (InvalidPathError(Path("/nope"), "Directory not found"), ConfigurationError),
            (InvalidConfigError("workers", "abc", "not an int"), ConfigurationError),
        ],
    )
    def test_subclasses(self, error, parent):
        assert isinstance(error, parent)
        assert isinstance(error, CodeCensusError)


class TestSpecificErrors:
    def test_file_access_error(self):
        err = FileAccessError(Path("src/a.cs"), "permission denied")
        assert err.filepath == Path("src/a.cs")
        assert err.reason == "permission denied"
        assert "Cannot access file: src/a.cs" in str(err)
        assert "reason=permission denied" in str(err)

    def test_invalid_path_error(self):
        err = InvalidPathError(Path("/missing"), "Directory not found")
        assert err.path == Path("/missing")
        assert str(err) == "Invalid path: /missing (path=/missing, reason=Directory not found)"

    def test_invalid_config_error(self):
        err = InvalidConfigError("CODE_CENSUS_WORKERS", "many", "invalid literal")
        assert err.key == "CODE_CENSUS_WORKERS"
        assert err.details["value"] == "many"


class TestDetails:
    @pytest.mark.parametrize(
        "error, keys",
        [
            (FileAccessError(Path("a.cs"), "denied"), ["filepath", "reason"]),
            (InvalidPathError(Path("/x"), "Not a directory"), ["path", "reason"]),
            (InvalidConfigError("workers", 0, "too small"), ["key", "value", "reason"]),
        ],
    )
    def test_populated_keys(self, error, keys):
        assert list(error.details) == keys

    def test_details_copied(self):
        context = {"path": "/x"}
        err = CodeCensusError("bad", details=context)
        context["path"] = "/y"
        assert str(err) == "bad (path=/x)"
