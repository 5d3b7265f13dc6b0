"""Persistence store for users, tasks and preferences."""
from contextlib import contextmanager
from typing import Generator, List, Optional, Union

from sqlalchemy import select, update, delete
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from todolist.db.session import create_session_factory, init_db, session_scope
from todolist.domain.types import (
    PreferencesRecord,
    TaskRecord,
    ThemeMode,
    UserRecord,
    normalize_image_path,
    validate_color,
)
from todolist.models import Preferences, Task, User
from todolist.utils.logger import get_logger
from todolist.utils.security import hash_password, verify_password


class TaskStore:
    """
    Sole reader and writer of the TodoList database.

    One store is built per process around one engine and handed to every
    state holder. Tables are created on first access. Every operation runs
    in its own transaction.
    """

    def __init__(self, engine: Engine):
        """
        Initialize the store.

        Args:
            engine: Engine for the database file
        """
        self.engine = engine
        self.logger = get_logger(self.__class__.__name__)
        self._session_factory: Optional[sessionmaker] = None

    @property
    def session_factory(self) -> sessionmaker:
        """Session factory, initializing the database on first use."""
        if self._session_factory is None:
            init_db(self.engine)
            self._session_factory = create_session_factory(self.engine)
        return self._session_factory

    @contextmanager
    def _session(self) -> Generator[Session, None, None]:
        with session_scope(self.session_factory) as session:
            yield session

    def _log_action(self, action: str, status: str = "success", **kwargs) -> None:
        """Log a store action."""
        self.logger.debug(f"{action}: {status}", **kwargs)

    # Users

    def register_user(self, name: str, email: str, password: str) -> Optional[UserRecord]:
        """
        Register a new user.

        Args:
            name: Display name
            email: Email address, unique across users
            password: Plain text password, stored hashed

        Returns:
            The created user, or None if the insert failed (e.g. duplicate email)
        """
        try:
            with self._session() as session:
                user = User(name=name, email=email, password=hash_password(password))
                session.add(user)
                session.flush()  # Get ID before commit
                record = UserRecord.model_validate(user)
        except IntegrityError as e:
            self.logger.warning("Registration rejected", email=email, error=str(e.orig))
            return None
        except SQLAlchemyError:
            self.logger.exception("Failed to register user")
            return None

        self._log_action("register_user", user_id=record.id)
        return record

    def login_user(self, email: str, password: str) -> Optional[UserRecord]:
        """
        Authenticate a user.

        Args:
            email: Email address
            password: Plain text password

        Returns:
            The matching user, or None if email or password do not match
        """
        try:
            with self._session() as session:
                user = session.execute(
                    select(User).where(User.email == email)
                ).scalars().first()
                if user is None or not verify_password(password, user.password):
                    self._log_action("login_user", status="rejected", email=email)
                    return None
                record = UserRecord.model_validate(user)
        except SQLAlchemyError:
            self.logger.exception("Failed to log in user")
            return None

        self._log_action("login_user", user_id=record.id)
        return record

    # Tasks

    def add_task(self, task: TaskRecord) -> int:
        """
        Insert a task.

        Args:
            task: Task to insert; its id is ignored

        Returns:
            The id assigned to the new task
        """
        with self._session() as session:
            row = Task(
                user_id=task.user_id,
                title=task.title,
                content=task.content,
                completed=task.completed,
            )
            session.add(row)
            session.flush()
            task_id = row.id

        self._log_action("add_task", user_id=task.user_id, task_id=task_id)
        return task_id

    def get_tasks(self, user_id: int) -> List[TaskRecord]:
        """Get all tasks of a user in insertion order."""
        with self._session() as session:
            rows = session.execute(
                select(Task)
                .where(Task.user_id == user_id)
                .order_by(Task.id)
            ).scalars().all()
            return [TaskRecord.model_validate(row) for row in rows]

    def update_task(self, task: TaskRecord) -> int:
        """
        Replace all fields of a stored task.

        Args:
            task: Task carrying the id of the row to replace

        Returns:
            Number of rows updated (0 if the task was never persisted)
        """
        if task.id is None:
            return 0

        with self._session() as session:
            result = session.execute(
                update(Task)
                .where(Task.id == task.id)
                .values(
                    user_id=task.user_id,
                    title=task.title,
                    content=task.content,
                    completed=task.completed,
                )
            )
            count = result.rowcount

        self._log_action("update_task", task_id=task.id, rows=count)
        return count

    def delete_task(self, task_id: int) -> int:
        """Delete a task by id and return the number of rows deleted."""
        with self._session() as session:
            result = session.execute(delete(Task).where(Task.id == task_id))
            count = result.rowcount

        self._log_action("delete_task", task_id=task_id, rows=count)
        return count

    # Preferences

    def save_preferences(
        self,
        user_id: int,
        color: int,
        background_image_path: Optional[str],
        theme_mode: Union[ThemeMode, str],
    ) -> None:
        """
        Insert or fully replace a user's preferences.

        Args:
            user_id: Owner of the preferences
            color: ARGB color value
            background_image_path: Path of the background image; empty or None clears it
            theme_mode: One of light, dark, system

        Raises:
            ValueError: If color is out of range or theme_mode is not a known mode
        """
        values = {
            "user_id": user_id,
            "color": validate_color(color),
            "background_image_path": normalize_image_path(background_image_path),
            "theme_mode": ThemeMode(theme_mode).value,
        }
        # Single INSERT ... ON CONFLICT DO UPDATE, never half-applied
        stmt = sqlite_insert(Preferences).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=[Preferences.user_id],
            set_={
                "color": stmt.excluded.color,
                "background_image_path": stmt.excluded.background_image_path,
                "theme_mode": stmt.excluded.theme_mode,
            },
        )
        with self._session() as session:
            session.execute(stmt)

        self._log_action("save_preferences", user_id=user_id, theme_mode=values["theme_mode"])

    def get_preferences(self, user_id: int) -> Optional[PreferencesRecord]:
        """Get a user's preferences, or None if they were never saved."""
        with self._session() as session:
            row = session.get(Preferences, user_id)
            return PreferencesRecord.model_validate(row) if row else None
