"""Functional tests for configuration precedence and validation.

Tests exercise real load_config(), no mocks.
"""

import json
import pytest
from pydantic import ValidationError

from behavioral_taxonomy.config import PACKAGE_DATA_DIR, Settings, find_project_config, get_settings, load_config


def test_project_config_overrides_user(tmp_path, monkeypatch):
    """Project .behavioral-taxonomy/settings.json overrides user settings for the same key."""
    user_settings = tmp_path / "user" / "settings.json"
    user_settings.parent.mkdir(parents=True)
    user_settings.write_text(json.dumps({"theme": "light", "log_level": "DEBUG"}))

    project_dir = tmp_path / "project" / ".behavioral-taxonomy"
    project_dir.mkdir(parents=True)
    (project_dir / "settings.json").write_text(json.dumps({"theme": "dark"}))

    monkeypatch.setattr("behavioral_taxonomy.config.SETTINGS_FILE", user_settings)
    monkeypatch.chdir(tmp_path / "project")

    settings = load_config()
    assert settings.theme == "dark"
    assert settings.log_level == "DEBUG"


def test_env_overrides_project_config(tmp_path, monkeypatch):
    """Environment variables override project config."""
    project_dir = tmp_path / ".behavioral-taxonomy"
    project_dir.mkdir()
    (project_dir / "settings.json").write_text(json.dumps({"theme": "dark", "data_dir": "/from/project"}))

    monkeypatch.setenv("BEHAVIORAL_TAXONOMY_THEME", "light")
    monkeypatch.setenv("BEHAVIORAL_TAXONOMY_DATA_DIR", "/from/env")

    settings = load_config()
    assert settings.theme == "light"
    assert settings.data_dir == "/from/env"


def test_missing_project_config_uses_defaults(tmp_path):
    """No config files and no env: defaults point at the packaged data."""
    assert find_project_config() is None

    settings = load_config()
    assert settings.theme == "light"
    assert settings.log_level == "WARNING"
    assert settings.data_dir is None
    assert settings.resolved_data_dir() == PACKAGE_DATA_DIR


def test_malformed_project_config_skipped(tmp_path, capsys):
    """Malformed project settings.json is skipped gracefully."""
    project_dir = tmp_path / ".behavioral-taxonomy"
    project_dir.mkdir()
    (project_dir / "settings.json").write_text("not json{{{")

    settings = load_config()
    assert settings.theme == "light"
    assert "Error loading project config" in capsys.readouterr().out


def test_data_dir_expands_user(tmp_path, monkeypatch):
    """A ~ in data_dir resolves against the home directory."""
    monkeypatch.setenv("HOME", str(tmp_path))
    settings = Settings(data_dir="~/taxonomy-data")
    assert settings.resolved_data_dir() == tmp_path / "taxonomy-data"


def test_log_level_validation():
    """Level names are normalized to upper case; unknown names are rejected."""
    assert Settings(log_level="info").log_level == "INFO"
    with pytest.raises(ValidationError, match="log_level must be a logging level name"):
        Settings(log_level="chatty")


def test_theme_validation():
    with pytest.raises(ValidationError):
        Settings(theme="neon")


def test_get_settings_is_cached(monkeypatch):
    """get_settings() returns one instance until reset_settings() is called."""
    first = get_settings()
    monkeypatch.setenv("BEHAVIORAL_TAXONOMY_THEME", "dark")
    assert get_settings() is first
    assert first.theme == "light"
