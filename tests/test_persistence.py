"""Tests for site persistence."""

import numpy as np
import pytest

from py_voronoi.core.errors import MalformedInputError, PersistedFileError, StartupArgumentError
from py_voronoi.core.persistence import load, load_file, save


class TestSave:
    """Test serialization."""

    def test_format(self):
        assert save([[120.5, 340.0], [88.0, 12.25]]) == "[[120.5,340.0],[88.0,12.25]]"

    def test_empty(self):
        assert save(np.zeros((0, 2))) == "[]"


class TestLoad:
    """Test parsing."""

    def test_example(self):
        sites = load("[[120.5,340.0],[88.0,12.25]]")
        np.testing.assert_array_equal(sites, [[120.5, 340.0], [88.0, 12.25]])

    def test_integers_and_whitespace(self):
        sites = load(" [ [1, 2] ,\n [3.5, -4] ] ")
        np.testing.assert_array_equal(sites, [[1.0, 2.0], [3.5, -4.0]])
        assert sites.dtype == float

    def test_empty(self):
        assert load("[]").shape == (0, 2)

    def test_round_trip(self):
        rng = np.random.default_rng(99)
        sites = rng.random((50, 2)) * [1280.0, 720.0]
        np.testing.assert_array_equal(load(save(sites)), sites)

    def test_round_trip_keeps_order_and_extremes(self):
        sites = np.array([[1e-300, -0.0], [1.7976931348623157e308, 0.1], [3.0, 2.0]])
        np.testing.assert_array_equal(load(save(sites)), sites)

    @pytest.mark.parametrize("text", [
        "",
        "not json",
        "{\"x\": 1}",
        "[1, 2]",
        "[[1, 2, 3]]",
        "[[1]]",
        "[[1, \"2\"]]",
        "[[1, true]]",
        "[[1, null]]",
        "[[1, 2]",
        "[[NaN, 1]]",
        "[[Infinity, 1]]",
    ])
    def test_malformed(self, text):
        with pytest.raises(MalformedInputError):
            load(text)

    def test_malformed_is_value_error(self):
        with pytest.raises(ValueError):
            load("[[1]]")


class TestLoadFile:
    """Test reading sites files."""

    def test_reads_file(self, tmp_path):
        path = tmp_path / "dots.json"
        path.write_text("[[1.0,2.0],[3.0,4.0]]", encoding="utf-8")
        np.testing.assert_array_equal(load_file(path), [[1, 2], [3, 4]])

    def test_missing_file(self, tmp_path):
        with pytest.raises(PersistedFileError):
            load_file(tmp_path / "missing.json")

    def test_invalid_utf8_file(self, tmp_path):
        path = tmp_path / "binary.json"
        path.write_bytes(b"\xff\xfe")
        with pytest.raises(PersistedFileError):
            load_file(path)

    def test_malformed_file(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("[[1.0,2.0],[3.0]]", encoding="utf-8")
        with pytest.raises(PersistedFileError) as exc_info:
            load_file(str(path))
        assert isinstance(exc_info.value, StartupArgumentError)
        assert isinstance(exc_info.value.__cause__, MalformedInputError)
