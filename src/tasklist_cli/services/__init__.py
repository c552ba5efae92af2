"""Services module for Tasklist CLI - Business logic layer."""

from .config_service import ConfigService, get_config_service
from .task_service import TaskService, get_task_service

__all__ = [
    "TaskService",
    "ConfigService",
    "get_task_service",
    "get_config_service",
]
