"""Tasklist CLI domain models.

Pydantic models and enumerations shared by the store, the JSON adapter and
the command layer.
"""

from .config_models import AppConfig
from .task import Difficulty, Task, TaskStatus, TaskUpdate

__all__ = [
    # Task models
    "Task",
    "TaskUpdate",
    "TaskStatus",
    "Difficulty",
    # Config models
    "AppConfig",
]
