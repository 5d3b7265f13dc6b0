"""Domain types for TodoList."""
from enum import Enum
from typing import NewType, Optional, Any
from pydantic import BaseModel, ConfigDict, Field, field_validator


# Strong types for IDs
UserId = NewType('UserId', int)
TaskId = NewType('TaskId', int)


class ThemeMode(str, Enum):
    """How the UI chooses between light and dark rendering."""
    LIGHT = "light"
    DARK = "dark"
    SYSTEM = "system"

    @classmethod
    def parse(cls, value: Any) -> 'ThemeMode':
        """Parse a stored value, falling back to SYSTEM for anything unknown."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            return cls.SYSTEM


MAX_COLOR = 0xFFFFFFFF


def validate_color(value: int) -> int:
    """
    Check that a color fits in 32-bit ARGB.

    Raises:
        ValueError: If the value is not an int in 0..0xFFFFFFFF
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"Color must be an integer, got {value!r}")
    if not 0 <= value <= MAX_COLOR:
        raise ValueError(f"Color must be a 32-bit ARGB value, got {value:#x}")
    return value


def normalize_image_path(value: Optional[str]) -> Optional[str]:
    """Map the empty-string 'no image' sentinel to None."""
    if value is None or not str(value).strip():
        return None
    return value


class UserRecord(BaseModel):
    """An authenticated user as seen by the state layer (no password)."""
    id: UserId
    name: str
    email: str

    model_config = ConfigDict(from_attributes=True, frozen=True)


class TaskRecord(BaseModel):
    """A task; id is None until the store assigns one."""
    id: Optional[TaskId] = None
    user_id: UserId
    title: str
    content: str = ""
    completed: bool = False

    model_config = ConfigDict(from_attributes=True)


class PreferencesRecord(BaseModel):
    """Display preferences persisted for one user."""
    user_id: UserId
    color: int = Field(ge=0, le=MAX_COLOR)
    background_image_path: Optional[str] = None
    theme_mode: ThemeMode = ThemeMode.SYSTEM

    model_config = ConfigDict(from_attributes=True)

    @field_validator('background_image_path', mode='before')
    @classmethod
    def empty_path_means_none(cls, v: Optional[str]) -> Optional[str]:
        """Treat an empty path as 'no background image'."""
        return normalize_image_path(v)

    @field_validator('theme_mode', mode='before')
    @classmethod
    def parse_theme_mode(cls, v: Any) -> ThemeMode:
        """Unknown stored modes follow the system setting."""
        return ThemeMode.parse(v)
