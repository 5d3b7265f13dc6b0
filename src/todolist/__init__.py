"""TodoList: personal task lists with per-user display preferences."""
