"""Preferences state: theme color, background image and theme mode."""
from typing import Any, Optional, Union

from todolist.config.settings import get_settings
from todolist.domain.colors import ColorSwatch, material_swatch
from todolist.domain.types import ThemeMode, UserRecord, normalize_image_path, validate_color
from todolist.services.task_store import TaskStore
from todolist.state.notifier import ChangeNotifier
from todolist.utils.logger import get_logger

logger = get_logger(__name__)


class _Unset:
    """Marker for an argument that was not passed."""

    def __repr__(self) -> str:
        return "UNSET"


UNSET: Any = _Unset()


class ThemeState(ChangeNotifier):
    """Display preferences of the current session."""

    def __init__(self, store: TaskStore):
        super().__init__()
        self.store = store
        self._set_defaults()

    def _set_defaults(self) -> None:
        settings = get_settings()
        self._color: int = settings.DEFAULT_THEME_COLOR
        self._background_image_path: Optional[str] = None
        self._theme_mode: ThemeMode = ThemeMode(settings.DEFAULT_THEME_MODE)

    @property
    def color(self) -> int:
        return self._color

    @property
    def background_image_path(self) -> Optional[str]:
        return self._background_image_path

    @property
    def theme_mode(self) -> ThemeMode:
        return self._theme_mode

    @property
    def swatch(self) -> ColorSwatch:
        """Shade family derived from the current color."""
        return material_swatch(self._color)

    def load_preferences(self, user: UserRecord) -> None:
        """Load the user's saved preferences, or fall back to defaults."""
        prefs = self.store.get_preferences(user.id)
        if prefs is not None:
            self._color = prefs.color
            self._background_image_path = prefs.background_image_path
            self._theme_mode = prefs.theme_mode
        else:
            self._set_defaults()

        logger.debug("Preferences loaded", user_id=user.id, found=prefs is not None)
        self.notify()

    def update_theme(
        self,
        user: UserRecord,
        *,
        color: Union[int, _Unset] = UNSET,
        background_image_path: Union[Optional[str], _Unset] = UNSET,
        theme_mode: Union[ThemeMode, str, _Unset] = UNSET,
    ) -> None:
        """
        Change some preferences and persist all of them.

        Omitted arguments keep their current value. Passing an empty string
        or None as background_image_path removes the background.

        Args:
            user: Owner of the preferences
            color: New ARGB color
            background_image_path: New background image path
            theme_mode: New theme mode

        Raises:
            ValueError: If color is out of range or theme_mode is unknown
        """
        # Validate before touching state so a bad value changes nothing
        mode = self._theme_mode if theme_mode is UNSET else ThemeMode(theme_mode)
        new_color = self._color if color is UNSET else validate_color(color)

        self._color = new_color
        if background_image_path is not UNSET:
            self._background_image_path = normalize_image_path(background_image_path)
        self._theme_mode = mode

        self.store.save_preferences(
            user.id,
            self._color,
            self._background_image_path,
            self._theme_mode,
        )
        self.notify()

    def reset(self) -> None:
        """Restore the default theme, e.g. after logout."""
        self._set_defaults()
        self.notify()
