"""Tests for config file discovery."""

from pathlib import Path

import pytest

from credpolicy.config.discovery import CONFIG_ENV_VAR, find_config


class TestFindConfig:
    def test_not_found(self, tmp_path: Path) -> None:
        assert find_config(tmp_path) is None

    def test_found_in_parent(self, tmp_path: Path) -> None:
        toml = tmp_path / "credpolicy.toml"
        toml.write_text("")
        child = tmp_path / "child"
        child.mkdir()
        assert find_config(child) == toml

    def test_env_var_wins(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        other = tmp_path / "other.toml"
        other.write_text("")
        (tmp_path / "credpolicy.toml").write_text("")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(other))
        assert find_config(tmp_path) == other

    def test_env_var_missing_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "missing.toml"))
        assert find_config(tmp_path) is None
