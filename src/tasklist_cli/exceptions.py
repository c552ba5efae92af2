"""Custom exceptions for Tasklist CLI."""

from tasklist_cli.utils.exit_codes import ERROR_GENERAL, ERROR_INVALID_ARGS, ERROR_NOT_FOUND


class TasklistError(Exception):
    """Base exception for all Tasklist errors."""

    exit_code = ERROR_GENERAL


class StorageError(TasklistError):
    """Raised when the tasks file cannot be read, parsed or written."""


class TaskNotFoundError(TasklistError, LookupError):
    """Raised when no task has the requested identifier."""

    exit_code = ERROR_NOT_FOUND

    def __init__(self, task_id: int):
        super().__init__(f"Task {task_id} not found")
        self.task_id = task_id


class ConfigError(TasklistError):
    """Raised for unknown configuration keys or invalid values."""

    exit_code = ERROR_INVALID_ARGS


class InvalidInputError(TasklistError, ValueError):
    """Raised for user input that cannot be coerced to a sensible default."""

    exit_code = ERROR_INVALID_ARGS
