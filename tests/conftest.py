"""Test configuration and fixtures for TodoList."""
from typing import List

import pytest
from sqlalchemy.orm import Session

from todolist.db.session import create_db_engine, init_db
from todolist.domain.types import UserRecord
from todolist.services.task_store import TaskStore
from todolist.state.notifier import ChangeNotifier


@pytest.fixture
def engine():
    """Create a fresh in-memory database engine per test."""
    test_engine = create_db_engine("sqlite:///:memory:", echo=False)
    yield test_engine
    test_engine.dispose()


@pytest.fixture
def session(engine):
    """Create a raw database session on initialized tables."""
    init_db(engine)
    with Session(engine) as session:
        yield session


@pytest.fixture
def store(engine) -> TaskStore:
    """Create a task store on the test engine."""
    return TaskStore(engine)


@pytest.fixture
def user(store) -> UserRecord:
    """Register a test user."""
    registered = store.register_user("Alice", "a@x.com", "secret")
    assert registered is not None
    return registered


@pytest.fixture
def other_user(store) -> UserRecord:
    """Register a second test user."""
    registered = store.register_user("Bob", "b@x.com", "hunter22")
    assert registered is not None
    return registered


class NotificationRecorder:
    """Listener that remembers every notifier that called it."""

    def __init__(self):
        self.calls: List[ChangeNotifier] = []

    def __call__(self, notifier: ChangeNotifier) -> None:
        self.calls.append(notifier)

    @property
    def count(self) -> int:
        return len(self.calls)


@pytest.fixture
def recorder() -> NotificationRecorder:
    """Create a notification recorder."""
    return NotificationRecorder()
