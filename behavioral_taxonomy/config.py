import os
import json
import logging
from pathlib import Path
from typing import Literal, Optional
from pydantic import BaseModel, Field, field_validator, model_validator

APP_NAME = "behavioral-taxonomy"

# Documents shipped inside the package; data_dir overrides this location.
PACKAGE_DATA_DIR = Path(__file__).resolve().parent / "data"

# XDG Paths - Explicit XDG resolution so ~/.config/ is used even on macOS
CONFIG_DIR = Path(os.getenv("XDG_CONFIG_HOME", Path.home() / ".config")) / APP_NAME
SETTINGS_FILE = CONFIG_DIR / "settings.json"
PROJECT_CONFIG_DIRNAME = ".behavioral-taxonomy"


class Settings(BaseModel):
    # Empty = use the documents shipped with the package
    data_dir: Optional[str] = Field(default=None)

    # Display
    theme: Literal["light", "dark"] = Field(default="light")
    log_level: str = Field(default="WARNING")

    @field_validator("log_level", mode="before")
    @classmethod
    def _validate_log_level(cls, v: str) -> str:
        level = str(v).strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"log_level must be a logging level name (e.g. 'INFO', 'DEBUG'), got '{v}'")
        return level

    @model_validator(mode='before')
    @classmethod
    def fill_from_env(cls, data: dict) -> dict:
        """Env vars override all file-based values (highest precedence layer)."""
        env_map = {
            "data_dir": "BEHAVIORAL_TAXONOMY_DATA_DIR",
            "theme": "BEHAVIORAL_TAXONOMY_THEME",
            "log_level": "BEHAVIORAL_TAXONOMY_LOG_LEVEL",
        }

        for field, env_var in env_map.items():
            val = os.getenv(env_var)
            if val:
                data[field] = val
        return data

    def resolved_data_dir(self) -> Path:
        """Directory the dataset documents are read from."""
        if self.data_dir:
            return Path(self.data_dir).expanduser()
        return PACKAGE_DATA_DIR


def find_project_config() -> Path | None:
    """Return .behavioral-taxonomy/settings.json in cwd if it exists, else None."""
    candidate = Path.cwd() / PROJECT_CONFIG_DIRNAME / "settings.json"
    return candidate if candidate.is_file() else None


def load_config() -> Settings:
    data: dict = {}

    # Layer 1: User config (~/.config/behavioral-taxonomy/settings.json)
    if SETTINGS_FILE.exists():
        with open(SETTINGS_FILE, "r") as f:
            try:
                data = json.load(f)
            except Exception as e:
                print(f"Error loading settings.json: {e}. Using defaults.")

    # Layer 2: Project config (<cwd>/.behavioral-taxonomy/settings.json), shallow merge
    project_config = find_project_config()
    if project_config is not None:
        with open(project_config, "r") as f:
            try:
                data |= json.load(f)
            except Exception as e:
                print(f"Error loading project config {project_config}: {e}. Skipping.")

    # Layer 3: Env vars (handled by fill_from_env model_validator)
    return Settings.model_validate(data)


# Lazy settings singleton; nothing is read at import time.
_settings: Settings | None = None


def get_settings() -> Settings:
    """Return the global Settings instance, creating it on first call."""
    global _settings
    if _settings is None:
        _settings = load_config()
    return _settings


def reset_settings() -> None:
    """Drop the cached Settings so the next access re-reads files and env."""
    global _settings
    _settings = None


def __getattr__(name: str):
    """Lazy module attribute: ``from behavioral_taxonomy.config import settings`` works without import-time side effects."""
    if name == "settings":
        return get_settings()
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
