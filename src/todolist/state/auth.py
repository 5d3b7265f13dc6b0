"""Session state: who is logged in."""
from typing import Optional

from todolist.domain.types import UserRecord
from todolist.services.task_store import TaskStore
from todolist.state.notifier import ChangeNotifier
from todolist.utils.logger import get_logger

logger = get_logger(__name__)


class AuthState(ChangeNotifier):
    """Holds the currently authenticated user, if any."""

    def __init__(self, store: TaskStore):
        super().__init__()
        self.store = store
        self._current_user: Optional[UserRecord] = None

    @property
    def current_user(self) -> Optional[UserRecord]:
        return self._current_user

    @property
    def is_authenticated(self) -> bool:
        return self._current_user is not None

    def login(self, email: str, password: str) -> bool:
        """
        Log a user in.

        Returns:
            True on success; False leaves the session unchanged
        """
        user = self.store.login_user(email, password)
        if user is None:
            logger.info("Login failed", email=email)
            return False

        self._current_user = user
        logger.info("User logged in", user_id=user.id)
        self.notify()
        return True

    def register(self, name: str, email: str, password: str) -> bool:
        """
        Register a new user and log them in.

        Returns:
            True on success; False leaves the session unchanged
        """
        user = self.store.register_user(name, email, password)
        if user is None:
            logger.info("Registration failed", email=email)
            return False

        self._current_user = user
        logger.info("User registered", user_id=user.id)
        self.notify()
        return True

    def logout(self) -> None:
        """Clear the session."""
        if self._current_user is not None:
            logger.info("User logged out", user_id=self._current_user.id)
        self._current_user = None
        self.notify()
