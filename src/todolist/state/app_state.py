"""Composition of the session, preferences and task list state."""
from typing import Optional

from sqlalchemy.engine import Engine

from todolist.db.session import create_db_engine
from todolist.services.task_store import TaskStore
from todolist.state.auth import AuthState
from todolist.state.notifier import ChangeNotifier
from todolist.state.tasks import TaskListState
from todolist.state.theme import ThemeState
from todolist.utils.logger import get_logger

logger = get_logger(__name__)


class AppState:
    """
    Owns one store and the state holders built on top of it.

    The task list is rebuilt for the new user every time the session
    changes; listeners registered through on_tasks_rebound are told about
    the replacement.
    """

    def __init__(self, store: TaskStore):
        self.store = store
        self.auth = AuthState(store)
        self.theme = ThemeState(store)
        self.tasks = TaskListState(store, None)
        self.tasks_rebound = ChangeNotifier()
        self.auth.subscribe(self._rebind_tasks)

    @classmethod
    def from_settings(cls, engine: Optional[Engine] = None) -> 'AppState':
        """Build the application state on the configured database."""
        return cls(TaskStore(engine or create_db_engine()))

    def _rebind_tasks(self, auth: AuthState) -> None:
        user = auth.current_user
        logger.debug("Rebinding task list", user_id=user.id if user else None)
        self.tasks = TaskListState(self.store, user)
        self.tasks_rebound.notify()

    def login(self, email: str, password: str) -> bool:
        """Log in and load the user's preferences."""
        if not self.auth.login(email, password):
            return False
        self.theme.load_preferences(self.auth.current_user)
        return True

    def register(self, name: str, email: str, password: str) -> bool:
        """Register, log in and load (default) preferences."""
        if not self.auth.register(name, email, password):
            return False
        self.theme.load_preferences(self.auth.current_user)
        return True

    def logout(self) -> None:
        """End the session and go back to the default theme."""
        self.auth.logout()
        self.theme.reset()
