"""Task list state for one user."""
from typing import List, Optional

from todolist.domain.types import TaskRecord, UserRecord
from todolist.services.task_store import TaskStore
from todolist.state.notifier import ChangeNotifier


class TaskListState(ChangeNotifier):
    """
    In-memory task list bound to a single user for its whole lifetime.

    Every mutation is written to the store and followed by a full refetch,
    so the list always carries store-assigned ids.
    """

    def __init__(self, store: TaskStore, user: Optional[UserRecord] = None):
        super().__init__()
        self.store = store
        self._user = user
        self._tasks: List[TaskRecord] = []
        if user is not None:
            self.fetch_tasks()

    @property
    def user(self) -> Optional[UserRecord]:
        return self._user

    @property
    def tasks(self) -> List[TaskRecord]:
        return list(self._tasks)

    def fetch_tasks(self) -> None:
        """Reload the list from the store."""
        if self._user is None:
            return
        self._tasks = self.store.get_tasks(self._user.id)
        self.notify()

    def add_task(self, title: str, content: str) -> None:
        """Create a new, not completed task for the bound user."""
        if self._user is None:
            return
        self.store.add_task(TaskRecord(user_id=self._user.id, title=title, content=content))
        self.fetch_tasks()

    def update_task(self, task: TaskRecord) -> None:
        """Persist the task's current fields."""
        self.store.update_task(task)
        self.fetch_tasks()

    def delete_task(self, task_id: int) -> None:
        """Delete a task by id and reload the list."""
        self.store.delete_task(task_id)
        self.fetch_tasks()

    def toggle_task_status(self, task: TaskRecord) -> None:
        """Flip completion on the given task and persist it."""
        task.completed = not task.completed
        self.update_task(task)
