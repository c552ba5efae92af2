"""Field-by-field prompts used by the interactive shell and the commands."""

from __future__ import annotations

import typer
from rich.markup import escape

from tasklist_cli.models import Difficulty, TaskStatus
from tasklist_cli.services.task_service import TaskService
from tasklist_cli.utils.ui.console import get_console
from tasklist_cli.utils.ui.formatters import format_task_detail

console = get_console()

STATUS_CHOICES = ", ".join(f"{s.value}.{s.label}" for s in TaskStatus)
DIFFICULTY_CHOICES = ", ".join(f"{d.value}.{d.label}" for d in Difficulty)


def ask(text: str) -> str:
    """Prompt for a line of text; Enter alone gives an empty string."""
    return typer.prompt(text, default="", show_default=False)


def prompt_new_task() -> dict[str, str]:
    """Ask for the fields of a new task.

    Returns the raw answers keyed by TaskService.add argument name.
    """
    return {
        "title": ask("Title"),
        "description": ask("Description (optional)"),
        "due_date": ask("Due date (dd/mm/yyyy HH:MM) or press Enter"),
        "cost": ask("Cost"),
        "difficulty": ask(f"Difficulty ({DIFFICULTY_CHOICES})"),
    }


def prompt_edits(
    task_service: TaskService, task_id: int, **detail_options: str
) -> dict[str, str]:
    """Ask for each editable field of a task, showing current values first.

    Returns the raw answers keyed by TaskService.edit argument name; an
    empty answer keeps the current value.

    Raises:
        TaskNotFoundError: If no task has this ID
    """
    task = task_service.get_task(task_id)
    console.print(f"\n[bold cyan]Editing task {task.id}:[/bold cyan] {escape(task.title)}")
    console.print("[dim](Press Enter to keep current value, type a value to change)[/dim]\n")
    format_task_detail(task, **detail_options)
    console.print()

    return {
        "title": ask(f"  Title [{task.title}]"),
        "description": ask("  Description"),
        "status": ask(f"  Status ({STATUS_CHOICES}) [{task.status.label}]"),
        "due_date": ask(f"  Due date [{task.due_date or '-'}]"),
        "cost": ask(f"  Cost [{task.cost:.2f}]"),
        "difficulty": ask(f"  Difficulty ({DIFFICULTY_CHOICES}) [{task.difficulty.label}]"),
    }
