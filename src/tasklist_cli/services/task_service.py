"""Task service - the task store.

Owns the in-memory task collection, assigns identifiers, applies
create/update/delete operations and rewrites the whole backing file through
the repository after every mutation. Nothing here touches the console, so the
interactive shell and the typer commands share the same operations.
"""

from __future__ import annotations

from datetime import UTC, datetime

from tasklist_cli.exceptions import InvalidInputError, StorageError, TaskNotFoundError
from tasklist_cli.models import Difficulty, Task, TaskStatus, TaskUpdate
from tasklist_cli.repositories import TaskRepository
from tasklist_cli.utils.logger import get_logger
from tasklist_cli.utils.task_helpers import is_affirmative, parse_cost

ALL = "all"


def _now() -> datetime:
    return datetime.now(UTC)


class TaskService:
    """In-memory task collection persisted through a TaskRepository.

    Operations run one at a time and each mutating operation finishes its
    file write before returning.
    """

    def __init__(self, task_repository: TaskRepository):
        """Initialize the task service.

        The collection starts empty; call ``load()`` to read persisted tasks.

        Args:
            task_repository: TaskRepository implementation for data access
        """
        self.repository = task_repository
        self.tasks: list[Task] = []
        self.logger = get_logger()

    # ---- persistence ----

    def load(self) -> int:
        """Replace the collection with the persisted tasks.

        A missing file gives an empty collection. A file that cannot be read
        or parsed is logged and also gives an empty collection; nothing is
        recovered from it.

        Returns:
            Number of tasks loaded
        """
        try:
            self.tasks = self.repository.load_all()
        except StorageError as e:
            self.logger.error("Failed to load tasks, starting empty: %s", e)
            self.tasks = []
            return 0
        self.logger.info("Loaded %d task(s)", len(self.tasks))
        return len(self.tasks)

    def save(self) -> bool:
        """Write the full collection, overwriting the backing file.

        A failed write is logged and the in-memory collection is kept as is.

        Returns:
            True if the file was written
        """
        try:
            self.repository.save_all(self.tasks)
        except StorageError as e:
            self.logger.error("Failed to save tasks: %s", e)
            return False
        self.logger.debug("Saved %d task(s)", len(self.tasks))
        return True

    # ---- queries ----

    def next_id(self) -> int:
        """Identifier the next added task will receive."""
        return max((t.id for t in self.tasks), default=0) + 1

    def get_task(self, task_id: int) -> Task:
        """Get a specific task by ID.

        Raises:
            TaskNotFoundError: If no task has this ID
        """
        for task in self.tasks:
            if task.id == task_id:
                return task
        raise TaskNotFoundError(task_id)

    def list_tasks(self, status_filter: TaskStatus | str | None = ALL) -> list[Task]:
        """List tasks, optionally only those with one status.

        Args:
            status_filter: None or "all" for every task, otherwise a status
                (member, number or name)

        Returns:
            Matching tasks in insertion order

        Raises:
            InvalidInputError: If the filter is neither "all" nor a known status
        """
        if status_filter is None or (
            isinstance(status_filter, str) and status_filter.strip().lower() == ALL
        ):
            return list(self.tasks)
        status = TaskStatus.parse(status_filter)
        if status is None:
            raise InvalidInputError(f"Unknown status filter: {status_filter!r}")
        return [t for t in self.tasks if t.status == status]

    def search(self, keyword: str) -> list[Task]:
        """Tasks whose title contains ``keyword``, ignoring case."""
        needle = keyword.casefold()
        return [t for t in self.tasks if needle in t.title.casefold()]

    # ---- mutations ----

    def add(
        self,
        title: str,
        description: str = "",
        due_date: str = "",
        cost: str | float | None = None,
        difficulty: str | int | Difficulty | None = None,
    ) -> Task:
        """Create a new pending task and save.

        Invalid or out-of-range difficulty falls back to Easy and an
        unparsable cost falls back to 0.

        Returns:
            Created Task object
        """
        now = _now()
        task = Task(
            id=self.next_id(),
            title=title,
            description=description or "",
            status=TaskStatus.PENDING,
            difficulty=Difficulty.parse(difficulty) or Difficulty.EASY,
            created_at=now,
            due_date=due_date or "",
            edited_at=now,
            cost=parse_cost(cost) or 0.0,
        )
        self.tasks.append(task)
        self.logger.info("Task added id=%s title=%r", task.id, task.title)
        self.save()
        return task

    def edit(
        self,
        task_id: int,
        *,
        title: str = "",
        description: str = "",
        status: str | int | TaskStatus | None = "",
        due_date: str = "",
        cost: str | float | None = "",
        difficulty: str | int | Difficulty | None = "",
    ) -> Task:
        """Edit a task from raw user input.

        Empty input keeps the current value, which also means a field cannot
        be cleared through edit. Invalid status, difficulty or cost input is
        ignored. The edit timestamp is always refreshed.

        Raises:
            TaskNotFoundError: If no task has this ID
        """
        updates = TaskUpdate(
            title=title or None,
            description=description or None,
            status=TaskStatus.parse(status),
            difficulty=Difficulty.parse(difficulty),
            due_date=due_date or None,
            cost=parse_cost(cost),
        )
        return self.update(task_id, updates)

    def update(self, task_id: int, updates: TaskUpdate) -> Task:
        """Apply typed updates to a task in place and save.

        Raises:
            TaskNotFoundError: If no task has this ID
        """
        task = self.get_task(task_id)
        changes = updates.model_dump(exclude_none=True)
        for field, value in changes.items():
            setattr(task, field, value)
        task.edited_at = _now()
        self.logger.info("Task edited id=%s fields=%s", task_id, sorted(changes))
        self.save()
        return task

    def delete(self, task_id: int, confirmation: str | None) -> bool:
        """Remove a task once the caller confirmed it.

        Args:
            task_id: Task ID to delete
            confirmation: The caller's answer; only an explicit yes
                ("s", "si", "y", "yes") removes the task

        Returns:
            True if the task was removed, False if the deletion was cancelled

        Raises:
            TaskNotFoundError: If no task has this ID
        """
        task = self.get_task(task_id)
        if not is_affirmative(confirmation):
            self.logger.info("Delete cancelled id=%s", task_id)
            return False
        self.tasks = [t for t in self.tasks if t is not task]
        self.logger.info("Task deleted id=%s", task_id)
        self.save()
        return True


def get_task_service() -> TaskService:
    """Build a task store on the configured tasks file and load it."""
    from tasklist_cli.adapters import JsonTaskRepository
    from tasklist_cli.services.config_service import get_config_service

    service = TaskService(JsonTaskRepository(get_config_service().tasks_file))
    service.load()
    return service
