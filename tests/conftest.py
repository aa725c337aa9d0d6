"""Shared fixtures: isolated settings and an empty data directory."""

import pytest

from behavioral_taxonomy import config
from behavioral_taxonomy._loader import clear_cache

_ENV_VARS = (
    "BEHAVIORAL_TAXONOMY_DATA_DIR",
    "BEHAVIORAL_TAXONOMY_THEME",
    "BEHAVIORAL_TAXONOMY_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """No user/project config and no env overrides leak into a test."""
    for var in _ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setattr("behavioral_taxonomy.config.SETTINGS_FILE", tmp_path / "no-user-settings.json")
    monkeypatch.chdir(tmp_path)
    config.reset_settings()
    clear_cache()
    yield
    config.reset_settings()
    clear_cache()


@pytest.fixture
def data_dir(tmp_path, monkeypatch):
    """Point the loader at an empty tmp data directory; tests write documents into it."""
    directory = tmp_path / "data"
    directory.mkdir()
    monkeypatch.setenv("BEHAVIORAL_TAXONOMY_DATA_DIR", str(directory))
    config.reset_settings()
    clear_cache()
    return directory
