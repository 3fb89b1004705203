"""Tests for the command-line entry point."""

import numpy as np
import pytest

from py_voronoi.app import cli
from py_voronoi.config import Settings


@pytest.fixture
def base_settings():
    return Settings(random_count=50, lines_only=False, json_dots=None)


class TestArguments:
    """Test flag parsing."""

    def test_defaults_keep_settings(self, base_settings):
        args = cli.build_parser().parse_args([])
        settings = cli.settings_from_args(args, base_settings)
        assert settings.random_count == 50
        assert settings.lines_only is False
        assert settings.json_dots is None

    def test_short_flags(self, base_settings):
        args = cli.build_parser().parse_args(["-l", "-r", "7", "-j", "dots.json"])
        settings = cli.settings_from_args(args, base_settings)
        assert settings.lines_only is True
        assert settings.random_count == 7
        assert settings.json_dots == "dots.json"

    def test_long_flags(self, base_settings):
        args = cli.build_parser().parse_args(["--lines_only", "--random_count", "3"])
        settings = cli.settings_from_args(args, base_settings)
        assert settings.lines_only is True
        assert settings.random_count == 3

    @pytest.mark.parametrize("value", ["abc", "1.5", "-2"])
    def test_bad_random_count_is_usage_error(self, value, capsys):
        with pytest.raises(SystemExit) as exc_info:
            cli.build_parser().parse_args(["-r", value])
        assert exc_info.value.code == 2
        assert "random_count" in capsys.readouterr().err


class TestLoadStore:
    """Test startup loading of sites."""

    def test_no_file(self, base_settings):
        assert len(cli.load_store(base_settings)) == 0

    def test_file_sites_get_colors(self, tmp_path, base_settings):
        path = tmp_path / "dots.json"
        path.write_text("[[120.5,340.0],[88.0,12.25]]", encoding="utf-8")
        store = cli.load_store(base_settings.model_copy(update={"json_dots": str(path)}))

        np.testing.assert_array_equal(store.sites, [[120.5, 340.0], [88.0, 12.25]])
        assert store.colors.shape == (2, 4)

    def test_bad_file_aborts_before_window(self, tmp_path, monkeypatch):
        path = tmp_path / "bad.json"
        path.write_text("not json", encoding="utf-8")

        def no_window(*args, **kwargs):
            raise AssertionError("window must not open")

        monkeypatch.setattr("py_voronoi.app.window.VoronoiWindow", no_window)
        assert cli.main(["-j", str(path)]) == 1

    def test_missing_file_aborts(self, tmp_path):
        assert cli.main(["-j", str(tmp_path / "missing.json")]) == 1

    def test_invalid_utf8_file_aborts(self, tmp_path):
        path = tmp_path / "binary.json"
        path.write_bytes(b"\xff\xfe")
        assert cli.main(["-j", str(path)]) == 1


class TestEnvironmentSettings:
    """Test settings read from the environment."""

    def test_environment_overrides_defaults(self, monkeypatch):
        monkeypatch.setenv("PY_VORONOI_RANDOM_COUNT", "12")
        args = cli.build_parser().parse_args([])
        assert cli.settings_from_args(args).random_count == 12

    def test_bad_environment_value_aborts(self, monkeypatch):
        monkeypatch.setenv("PY_VORONOI_RANDOM_COUNT", "-1")
        assert cli.main([]) == 1
