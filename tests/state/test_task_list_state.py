"""Tests for the task list state."""
from todolist.domain.types import TaskRecord
from todolist.state.tasks import TaskListState


def test_unbound_list_stays_empty(store, recorder):
    """Test a list without a user never touches the store."""
    tasks = TaskListState(store, None)
    tasks.subscribe(recorder)

    tasks.fetch_tasks()
    tasks.add_task("Ignored", "")

    assert tasks.user is None
    assert tasks.tasks == []
    assert recorder.count == 0
    assert store._session_factory is None


def test_bound_list_fetches_on_creation(store, user):
    """Test construction loads existing tasks."""
    store.add_task(TaskRecord(user_id=user.id, title="Existing"))

    tasks = TaskListState(store, user)

    assert [t.title for t in tasks.tasks] == ["Existing"]


def test_add_task(store, user, recorder):
    """Test added tasks appear once, not completed, with submitted fields."""
    tasks = TaskListState(store, user)
    tasks.subscribe(recorder)

    tasks.add_task("Buy milk", "2%")
    tasks.add_task("Walk dog", "")

    assert recorder.count == 2
    assert [t.title for t in tasks.tasks] == ["Buy milk", "Walk dog"]
    milk = tasks.tasks[0]
    assert milk.id is not None
    assert milk.user_id == user.id
    assert milk.content == "2%"
    assert milk.completed is False
    assert tasks.tasks == store.get_tasks(user.id)


def test_update_task(store, user, recorder):
    """Test edits are persisted and refetched."""
    tasks = TaskListState(store, user)
    tasks.add_task("Draft", "")
    tasks.subscribe(recorder)

    task = tasks.tasks[0]
    task.title = "Final"
    task.content = "Done right"
    tasks.update_task(task)

    assert recorder.count == 1
    assert tasks.tasks[0].title == "Final"
    assert store.get_tasks(user.id)[0].content == "Done right"


def test_delete_task(store, user):
    tasks = TaskListState(store, user)
    tasks.add_task("Keep", "")
    tasks.add_task("Drop", "")

    tasks.delete_task(tasks.tasks[1].id)

    assert [t.title for t in tasks.tasks] == ["Keep"]
    assert [t.title for t in store.get_tasks(user.id)] == ["Keep"]


def test_toggle_task_status(store, user):
    """Test toggling flips in place, persists, and is its own inverse."""
    tasks = TaskListState(store, user)
    tasks.add_task("Buy milk", "2%")

    task = tasks.tasks[0]
    tasks.toggle_task_status(task)
    assert task.completed is True
    assert store.get_tasks(user.id)[0].completed is True
    assert tasks.tasks[0].completed is True

    tasks.toggle_task_status(tasks.tasks[0])
    assert store.get_tasks(user.id)[0].completed is False
    assert tasks.tasks[0].completed is False


def test_tasks_property_is_a_copy(user, store):
    tasks = TaskListState(store, user)
    tasks.add_task("One", "")

    tasks.tasks.clear()

    assert len(tasks.tasks) == 1


def test_lists_are_scoped_to_their_user(store, user, other_user):
    mine = TaskListState(store, user)
    theirs = TaskListState(store, other_user)

    mine.add_task("Mine", "")
    theirs.fetch_tasks()

    assert theirs.tasks == []
