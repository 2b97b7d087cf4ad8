"""Tests for configuration loading."""

from pathlib import Path

import pytest

from satcheck.domain.exceptions.configuration import ConfigurationError
from satcheck.domain.model.configuration import FilterConfig
from satcheck.infrastructure.config.loader import find_config_file, load_config


def write(path: Path, text: str) -> Path:
    """Write text file and return its path."""
    path.write_text(text, encoding="utf-8")
    return path


class TestFindConfigFile:
    """Tests for find_config_file."""

    def test_finds_in_parent(self, tmp_path: Path) -> None:
        pyproject = write(tmp_path / "pyproject.toml", "")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)

        assert find_config_file(nested) == pyproject.resolve()

    def test_prefers_nearest(self, tmp_path: Path) -> None:
        write(tmp_path / "pyproject.toml", "")
        inner = tmp_path / "inner"
        inner.mkdir()
        inner_pyproject = write(inner / "pyproject.toml", "")

        assert find_config_file(inner) == inner_pyproject.resolve()


class TestLoadConfig:
    """Tests for load_config."""

    def test_pyproject_section(self, tmp_path: Path) -> None:
        path = write(
            tmp_path / "pyproject.toml",
            '[project]\nname = "x"\n\n'
            "[tool.satcheck]\n"
            'tracked_rules = ["satcheck.markdown"]\n'
            "max_per_file = 3\n"
            "ignore_vcs = false\n",
        )

        config = load_config(path)

        assert config == FilterConfig(
            tracked_rules=frozenset({"satcheck.markdown"}), max_per_file=3, ignore_vcs=False
        )

    def test_numeric_string_limit(self, tmp_path: Path) -> None:
        path = write(tmp_path / "pyproject.toml", '[tool.satcheck]\nmax_per_file = "7"\n')

        assert load_config(path).max_per_file == 7

    def test_missing_section_gives_defaults(self, tmp_path: Path) -> None:
        path = write(tmp_path / "pyproject.toml", '[project]\nname = "x"\n')

        assert load_config(path) == FilterConfig()

    def test_flat_standalone_file(self, tmp_path: Path) -> None:
        path = write(tmp_path / "satcheck.toml", 'tracked_rules = ["a"]\nmax_per_file = 1\n')

        config = load_config(path)

        assert config.tracked_rules == frozenset({"a"})
        assert config.max_per_file == 1

    def test_standalone_file_with_tool_table(self, tmp_path: Path) -> None:
        path = write(tmp_path / "satcheck.toml", "[tool.satcheck]\nmax_per_file = 2\n")

        assert load_config(path).max_per_file == 2

    def test_invalid_toml_raises(self, tmp_path: Path) -> None:
        path = write(tmp_path / "pyproject.toml", "[tool.satcheck\nmax_per_file = ")

        with pytest.raises(ConfigurationError, match="invalid TOML"):
            load_config(path)

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigurationError):
            load_config(tmp_path / "absent.toml")

    def test_non_table_section_raises(self, tmp_path: Path) -> None:
        path = write(tmp_path / "pyproject.toml", '[tool]\nsatcheck = "on"\n')

        with pytest.raises(ConfigurationError, match="must be a table"):
            load_config(path)

    def test_unknown_rule_raises(self, tmp_path: Path) -> None:
        path = write(tmp_path / "pyproject.toml", '[tool.satcheck]\ntracked_rules = ["nope"]\n')

        with pytest.raises(ConfigurationError, match="unknown rule ids"):
            load_config(path, known_rules={"satcheck.markdown"})

    def test_negative_limit_raises(self, tmp_path: Path) -> None:
        path = write(tmp_path / "pyproject.toml", "[tool.satcheck]\nmax_per_file = -1\n")

        with pytest.raises(ConfigurationError, match="max_per_file"):
            load_config(path)

    def test_discovers_from_cwd(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        write(tmp_path / "pyproject.toml", "[tool.satcheck]\nmax_per_file = 4\n")
        monkeypatch.chdir(tmp_path)

        assert load_config().max_per_file == 4
