"""JSON file implementation of TaskRepository."""

from __future__ import annotations

from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from tasklist_cli.exceptions import StorageError
from tasklist_cli.models import Task
from tasklist_cli.repositories import TaskRepository

_TASK_LIST = TypeAdapter(list[Task])


class JsonTaskRepository(TaskRepository):
    """Stores the whole task collection as one pretty-printed JSON array."""

    def __init__(self, path: str | Path):
        """Initialize the JSON repository.

        Args:
            path: Location of the tasks file. It does not need to exist yet.
        """
        self.path = Path(path).expanduser()

    def load_all(self) -> list[Task]:
        if not self.path.exists():
            return []

        try:
            raw = self.path.read_bytes()
        except OSError as e:
            raise StorageError(f"Cannot read {self.path}: {e}") from e

        try:
            return _TASK_LIST.validate_json(raw)
        except ValidationError as e:
            raise StorageError(
                f"Malformed tasks file {self.path}: {e.error_count()} error(s), "
                f"first: {e.errors()[0]['msg']}"
            ) from e

    def save_all(self, tasks: list[Task]) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_bytes(_TASK_LIST.dump_json(tasks, indent=2))
        except OSError as e:
            raise StorageError(f"Cannot write {self.path}: {e}") from e
