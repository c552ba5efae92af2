"""Interactive text menu driving the task store.

The shell only prompts and renders; every data operation goes through
TaskService. No action is fatal: errors are reported and the loop returns to
the main menu until the user picks Exit (or input ends).
"""

from __future__ import annotations

from collections.abc import Callable

import typer

from tasklist_cli.exceptions import InvalidInputError, TasklistError
from tasklist_cli.models import TaskStatus
from tasklist_cli.services.task_service import ALL, TaskService
from tasklist_cli.utils.logger import get_logger
from tasklist_cli.utils.task_helpers import parse_task_id
from tasklist_cli.utils.ui.console import get_console
from tasklist_cli.utils.ui.formatters import (
    format_error,
    format_info,
    format_success,
    format_task_detail,
    format_task_list,
)

from .prompts import ask, prompt_edits, prompt_new_task

MAIN_MENU = (
    ("1", "View tasks"),
    ("2", "Search tasks"),
    ("3", "Add task"),
    ("4", "Edit task"),
    ("5", "Delete task"),
    ("0", "Exit"),
)

# View submenu choice -> status filter; anything unknown lists all tasks
STATUS_FILTERS: dict[str, TaskStatus | str] = {
    "1": ALL,
    "2": TaskStatus.PENDING,
    "3": TaskStatus.IN_PROGRESS,
    "4": TaskStatus.DONE,
    "5": TaskStatus.CANCELLED,
}


class MenuShell:
    """Menu loop over one TaskService."""

    def __init__(
        self,
        task_service: TaskService,
        *,
        clear_screen: bool = True,
        pause: bool = True,
        timestamp_format: str = "%d/%m/%Y %H:%M:%S",
        currency_symbol: str = "$",
    ):
        self.task_service = task_service
        self.clear_screen = clear_screen
        self.pause = pause
        self.detail_options = {
            "timestamp_format": timestamp_format,
            "currency_symbol": currency_symbol,
        }
        self.console = get_console()
        self.logger = get_logger()
        self._actions: dict[str, Callable[[], None]] = {
            "1": self.view_tasks,
            "2": self.search_tasks,
            "3": self.add_task,
            "4": self.edit_task,
            "5": self.delete_task,
        }

    # ---- loop ----

    def run(self) -> None:
        """Show the main menu until the user exits."""
        self._clear()
        self.console.print(f"{len(self.task_service.tasks)} task(s) loaded.")
        try:
            while True:
                choice = self._main_menu()
                if choice == "0":
                    break
                self.dispatch(choice)
                self._wait()
                self._clear()
        except (typer.Abort, KeyboardInterrupt, EOFError):
            self.console.print()
        self.console.print("Exiting...")

    def dispatch(self, choice: str) -> None:
        """Run one main-menu action, reporting instead of raising errors."""
        action = self._actions.get(choice)
        if action is None:
            format_error("Invalid option")
            return
        try:
            action()
        except TasklistError as e:
            self.logger.info("menu action %s failed: %s", choice, e)
            format_error(str(e))

    # ---- actions ----

    def view_tasks(self) -> None:
        """List tasks by status, then optionally open one."""
        choice = ask(
            "Filter by: 1.All, 2.Pending, 3.In progress, 4.Done, 5.Cancelled (0 to go back)"
        ).strip()
        if choice == "0":
            return
        tasks = self.task_service.list_tasks(STATUS_FILTERS.get(choice, ALL))
        if not tasks:
            format_info("No tasks to show for that filter.")
            return

        format_task_list(tasks)
        raw = ask("Task ID to see details, edit or delete (0 to go back)").strip()
        if raw in ("", "0"):
            return
        self.task_detail(self._parse_id(raw))

    def task_detail(self, task_id: int) -> None:
        """Show one task and offer to edit or delete it."""
        task = self.task_service.get_task(task_id)
        self._clear()
        format_task_detail(task, **self.detail_options)
        choice = ask("E to edit, D to delete, anything else to go back").strip().lower()
        if choice == "e":
            self.edit_task(task_id)
        elif choice in ("d", "b"):
            self.delete_task(task_id)

    def search_tasks(self) -> None:
        keyword = ask("Word to search in titles")
        results = self.task_service.search(keyword)
        if not results:
            format_info("No tasks found with that word.")
            return
        self.console.print(f"{len(results)} task(s) found:")
        format_task_list(results)

    def add_task(self) -> None:
        self._clear()
        task = self.task_service.add(**prompt_new_task())
        format_success(f"Task {task.id} saved.")

    def edit_task(self, task_id: int | None = None) -> None:
        if task_id is None:
            task_id = self._parse_id(ask("ID of the task to edit"))
        fields = prompt_edits(self.task_service, task_id, **self.detail_options)
        task = self.task_service.edit(task_id, **fields)
        format_success(f"Task {task.id} updated.")

    def delete_task(self, task_id: int | None = None) -> None:
        if task_id is None:
            task_id = self._parse_id(ask("ID of the task to delete"))
        task = self.task_service.get_task(task_id)
        answer = ask(f'Delete task "{task.title}"? (y/N)')
        if self.task_service.delete(task_id, answer):
            format_success("Task deleted.")
        else:
            format_info("Operation cancelled.")

    # ---- helpers ----

    def _main_menu(self) -> str:
        self.console.print("\n[bold]--- MAIN MENU ---[/bold]")
        for key, label in MAIN_MENU:
            self.console.print(f"{key}. {label}")
        return ask("Choose an option").strip()

    @staticmethod
    def _parse_id(raw: str) -> int:
        task_id = parse_task_id(raw)
        if task_id is None:
            raise InvalidInputError(f"Invalid task ID: {raw!r}")
        return task_id

    def _wait(self) -> None:
        if self.pause:
            ask("\nPress Enter to continue")

    def _clear(self) -> None:
        if self.clear_screen:
            self.console.clear()
