"""Configuration settings for TodoList."""
from functools import lru_cache
from pathlib import Path
from typing import List, Optional
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# Project root: src/todolist/config/settings.py -> repository root
PROJECT_ROOT = Path(__file__).parent.parent.parent.parent

# Default log directory
DEFAULT_LOG_DIR = PROJECT_ROOT / "logs"
DEFAULT_LOG_FILE = DEFAULT_LOG_DIR / "todolist.log"

# Background images picked in the UI are copied here
DEFAULT_UPLOAD_DIR = PROJECT_ROOT / "uploads"

VALID_THEME_MODES = ["light", "dark", "system"]


class TodoListSettings(BaseSettings):
    """Application settings with environment variable support."""

    # Database
    DB_URL: str = "sqlite:///todo_app.db"
    DB_ECHO: bool = False

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[Path] = DEFAULT_LOG_FILE
    LOG_FORMAT: str = "detailed"  # simple, detailed
    LOG_RETENTION_DAYS: int = 7
    LOG_ROTATION_SIZE_MB: int = 1

    # Theme defaults (pink, opaque)
    DEFAULT_THEME_COLOR: int = 0xFFE91E63
    DEFAULT_THEME_MODE: str = "system"

    # Accounts
    MIN_PASSWORD_LENGTH: int = 6
    PASSWORD_SCHEMES: List[str] = ["argon2"]

    # Uploads
    UPLOAD_DIR: Path = DEFAULT_UPLOAD_DIR

    model_config = SettingsConfigDict(
        env_prefix="TODOLIST_",
        case_sensitive=False,
        env_file=PROJECT_ROOT / ".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        # Convert relative DB path to absolute path from project root
        if self.DB_URL.startswith("sqlite:///") and self.DB_URL != "sqlite:///:memory:":
            relative_path = Path(self.DB_URL.replace("sqlite:///", ""))
            if not relative_path.is_absolute():
                self.DB_URL = f"sqlite:///{PROJECT_ROOT / relative_path}"

        # Ensure log file path is absolute and parent directory exists
        if self.LOG_FILE:
            if not self.LOG_FILE.is_absolute():
                self.LOG_FILE = PROJECT_ROOT / self.LOG_FILE
            self.LOG_FILE.parent.mkdir(parents=True, exist_ok=True)

        if not self.UPLOAD_DIR.is_absolute():
            self.UPLOAD_DIR = PROJECT_ROOT / self.UPLOAD_DIR

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        valid_levels = ["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]
        v = v.upper()
        if v not in valid_levels:
            raise ValueError(f"Log level must be one of: {', '.join(valid_levels)}")
        return v

    @field_validator("LOG_FORMAT")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        valid_formats = ["simple", "detailed"]
        v = v.lower()
        if v not in valid_formats:
            raise ValueError(f"Log format must be one of: {', '.join(valid_formats)}")
        return v

    @field_validator("DEFAULT_THEME_MODE")
    @classmethod
    def validate_theme_mode(cls, v: str) -> str:
        v = v.lower()
        if v not in VALID_THEME_MODES:
            raise ValueError(f"Theme mode must be one of: {', '.join(VALID_THEME_MODES)}")
        return v

    @field_validator("DEFAULT_THEME_COLOR")
    @classmethod
    def validate_theme_color(cls, v: int) -> int:
        if not 0 <= v <= 0xFFFFFFFF:
            raise ValueError("Theme color must be a 32-bit ARGB value")
        return v

    @field_validator("MIN_PASSWORD_LENGTH")
    @classmethod
    def validate_min_password_length(cls, v: int) -> int:
        if v < 1:
            raise ValueError("Minimum password length must be at least 1")
        return v


class StreamlitSettings(BaseSettings):
    """Streamlit-specific settings."""
    PAGE_TITLE: str = "ToDo List"
    PAGE_ICON: str = "✅"
    LAYOUT: str = "centered"

    model_config = SettingsConfigDict(
        env_prefix="STREAMLIT_",
        case_sensitive=False,
        extra="ignore"
    )

    @field_validator("LAYOUT")
    @classmethod
    def validate_layout(cls, v: str) -> str:
        valid_layouts = ["centered", "wide"]
        if v not in valid_layouts:
            raise ValueError(f"Layout must be one of: {', '.join(valid_layouts)}")
        return v


@lru_cache()
def get_settings() -> TodoListSettings:
    """Get cached settings instance."""
    return TodoListSettings()


@lru_cache()
def get_streamlit_settings() -> StreamlitSettings:
    """Get cached Streamlit settings instance."""
    return StreamlitSettings()


def clear_settings_cache() -> None:
    """Clear all settings caches to force reload from environment."""
    get_settings.cache_clear()
    get_streamlit_settings.cache_clear()
