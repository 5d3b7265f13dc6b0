"""Tests for the persistence store."""
import pytest
from sqlalchemy import delete, event, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from todolist.domain.types import TaskRecord, ThemeMode
from todolist.models import User


def _tasks(store, user, *titles):
    return [
        store.add_task(TaskRecord(user_id=user.id, title=title, content=f"{title} content"))
        for title in titles
    ]


def test_database_initialized_lazily(store, engine):
    """Test that tables are only created on first access."""
    assert store._session_factory is None
    assert store.get_tasks(1) == []
    assert store._session_factory is not None
    # Reused afterwards
    factory = store.session_factory
    assert store.session_factory is factory


def test_register_user(store, engine):
    """Test registering a new user."""
    user = store.register_user("Alice", "a@x.com", "secret")
    assert user is not None
    assert user.id == 1
    assert user.name == "Alice"
    assert user.email == "a@x.com"

    with Session(engine) as session:
        row = session.get(User, user.id)
        assert row.password != "secret"


def test_register_duplicate_email(store, engine, user):
    """Test that a second registration with the same email fails quietly."""
    duplicate = store.register_user("Mallory", "a@x.com", "other-secret")
    assert duplicate is None

    with Session(engine) as session:
        count = session.execute(
            select(func.count()).select_from(User).where(User.email == "a@x.com")
        ).scalar_one()
        assert count == 1

    # First user is unaffected
    assert store.login_user("a@x.com", "secret") == user


def test_login_user(store, user):
    """Test login succeeds only with the exact email and password."""
    assert store.login_user("a@x.com", "secret") == user
    assert store.login_user("a@x.com", "wrong") is None
    assert store.login_user("nobody@x.com", "secret") is None
    assert store.login_user("A@x.com", "secret") is None
    assert store.login_user("a@x.com", "Secret") is None


def test_login_distinguishes_users(store, user, other_user):
    """Test each user logs in with their own password only."""
    assert store.login_user("b@x.com", "hunter22") == other_user
    assert store.login_user("b@x.com", "secret") is None
    assert store.login_user("a@x.com", "hunter22") is None


def test_add_and_get_tasks(store, user):
    """Test tasks come back with all fields in insertion order."""
    ids = _tasks(store, user, "First", "Second", "Third")
    assert len(set(ids)) == 3

    tasks = store.get_tasks(user.id)
    assert [t.id for t in tasks] == ids
    assert [t.title for t in tasks] == ["First", "Second", "Third"]
    for task in tasks:
        assert task.user_id == user.id
        assert task.content == f"{task.title} content"
        assert task.completed is False


def test_get_tasks_scoped_to_user(store, user, other_user):
    """Test users never see each other's tasks."""
    _tasks(store, user, "Mine")
    _tasks(store, other_user, "Theirs")

    assert [t.title for t in store.get_tasks(user.id)] == ["Mine"]
    assert [t.title for t in store.get_tasks(other_user.id)] == ["Theirs"]
    assert store.get_tasks(12345) == []


def test_add_task_ignores_given_id(store, user):
    """Test the store assigns ids."""
    task_id = store.add_task(TaskRecord(id=99, user_id=user.id, title="T"))
    assert task_id == 1
    assert [t.id for t in store.get_tasks(user.id)] == [1]


def test_add_task_for_unknown_user_raises(store, user):
    """Test storage errors outside register/login propagate."""
    with pytest.raises(IntegrityError):
        store.add_task(TaskRecord(user_id=999, title="Orphan"))
    assert store.get_tasks(999) == []


def test_update_task(store, user):
    """Test update replaces every field."""
    task_id, = _tasks(store, user, "Draft")
    task = store.get_tasks(user.id)[0]
    task.title = "Final"
    task.content = "Edited"
    task.completed = True

    assert store.update_task(task) == 1

    stored = store.get_tasks(user.id)
    assert len(stored) == 1
    assert stored[0].id == task_id
    assert stored[0].title == "Final"
    assert stored[0].content == "Edited"
    assert stored[0].completed is True


def test_update_missing_task(store, user):
    """Test updating nothing returns zero rows."""
    assert store.update_task(TaskRecord(user_id=user.id, title="Never saved")) == 0
    assert store.update_task(TaskRecord(id=42, user_id=user.id, title="Gone")) == 0


def test_delete_task(store, user):
    """Test deleting by id."""
    first, second = _tasks(store, user, "Keep", "Drop")

    assert store.delete_task(second) == 1
    assert [t.id for t in store.get_tasks(user.id)] == [first]
    assert store.delete_task(second) == 0


def test_preferences_absent_until_saved(store, user):
    """Test a user starts without preferences."""
    assert store.get_preferences(user.id) is None


def test_save_preferences_upserts(store, user):
    """Test saving twice replaces the row."""
    store.save_preferences(user.id, 0xFF2196F3, "/img/a.png", "dark")
    prefs = store.get_preferences(user.id)
    assert prefs.user_id == user.id
    assert prefs.color == 0xFF2196F3
    assert prefs.background_image_path == "/img/a.png"
    assert prefs.theme_mode == ThemeMode.DARK

    store.save_preferences(user.id, 0xFF4CAF50, None, ThemeMode.LIGHT)
    prefs = store.get_preferences(user.id)
    assert prefs.color == 0xFF4CAF50
    assert prefs.background_image_path is None
    assert prefs.theme_mode == ThemeMode.LIGHT


def test_save_preferences_empty_path_is_none(store, user):
    """Test the empty-string image path is stored as absent."""
    store.save_preferences(user.id, 0xFFE91E63, "", "system")
    assert store.get_preferences(user.id).background_image_path is None


def test_save_preferences_rejects_unknown_mode(store, user):
    """Test that theme modes are validated."""
    with pytest.raises(ValueError):
        store.save_preferences(user.id, 0xFFE91E63, None, "sepia")
    assert store.get_preferences(user.id) is None


def test_preferences_per_user(store, user, other_user):
    """Test preferences rows are independent."""
    store.save_preferences(user.id, 1, None, "dark")
    store.save_preferences(other_user.id, 2, "/b.png", "light")

    assert store.get_preferences(user.id).color == 1
    assert store.get_preferences(other_user.id).color == 2


def test_deleting_user_cascades(store, engine, user, other_user):
    """Test removing a user removes their tasks and preferences."""
    _tasks(store, user, "One", "Two")
    _tasks(store, other_user, "Survivor")
    store.save_preferences(user.id, 1, "/a.png", "dark")

    with Session(engine) as session:
        session.execute(delete(User).where(User.id == user.id))
        session.commit()

    assert store.get_tasks(user.id) == []
    assert store.get_preferences(user.id) is None
    assert [t.title for t in store.get_tasks(other_user.id)] == ["Survivor"]


@pytest.mark.parametrize("color", [-1, 0x1FFFFFFFF])
def test_save_preferences_rejects_out_of_range_color(store, user, color):
    """Test a bad color is refused and the stored row stays readable."""
    store.save_preferences(user.id, 0xFF2196F3, "/img/a.png", "dark")

    with pytest.raises(ValueError):
        store.save_preferences(user.id, color, None, "light")

    prefs = store.get_preferences(user.id)
    assert prefs.color == 0xFF2196F3
    assert prefs.background_image_path == "/img/a.png"
    assert prefs.theme_mode == ThemeMode.DARK


def test_save_preferences_is_one_statement(store, engine, user):
    """Test the upsert replaces an existing row with a single statement."""
    store.save_preferences(user.id, 1, None, "dark")
    statements = []

    def capture(conn, cursor, statement, parameters, context, executemany):
        statements.append(statement)

    event.listen(engine, "before_cursor_execute", capture)
    try:
        store.save_preferences(user.id, 2, "/b.png", "light")
    finally:
        event.remove(engine, "before_cursor_execute", capture)

    assert len(statements) == 1
    assert "ON CONFLICT" in statements[0].upper()
    prefs = store.get_preferences(user.id)
    assert (prefs.color, prefs.background_image_path, prefs.theme_mode) == (
        2, "/b.png", ThemeMode.LIGHT
    )
