"""Models package for TodoList."""
from .base import Base
from .user import User
from .task import Task
from .preferences import Preferences

__all__ = ['Base', 'User', 'Task', 'Preferences']
