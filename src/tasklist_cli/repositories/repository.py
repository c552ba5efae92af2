"""Repository abstraction layer for Tasklist CLI.

Defines the port the task store persists through, so the store stays
independent of the file format behind it.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from tasklist_cli.models import Task


class TaskRepository(ABC):
    """Abstract base class for whole-collection task persistence.

    The store never writes single records: every mutation rewrites the
    full collection through ``save_all``.
    """

    @abstractmethod
    def load_all(self) -> list[Task]:
        """Read every persisted task, in stored order.

        Returns:
            List of Task objects; empty when nothing has been stored yet

        Raises:
            StorageError: If the backing data cannot be read or parsed
        """
        raise NotImplementedError(
            "TaskRepository.load_all() must be implemented by adapter"
        )

    @abstractmethod
    def save_all(self, tasks: list[Task]) -> None:
        """Replace the persisted collection with ``tasks``.

        Raises:
            StorageError: If the backing data cannot be written
        """
        raise NotImplementedError(
            "TaskRepository.save_all() must be implemented by adapter"
        )
