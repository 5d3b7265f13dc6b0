"""UI components for TodoList."""
from .auth_forms import render_login, render_register
from .task_list import render_task_list, render_add_task
from .preferences import render_preferences, apply_theme
from .feedback import render_feedback

__all__ = [
    'render_login',
    'render_register',
    'render_task_list',
    'render_add_task',
    'render_preferences',
    'apply_theme',
    'render_feedback'
]
