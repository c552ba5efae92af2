"""Command 'add' of tasklist-cli - create a task from flags or prompts."""

from __future__ import annotations

import typer

from tasklist_cli.services.task_service import get_task_service
from tasklist_cli.ui.prompts import prompt_new_task
from tasklist_cli.utils.ui.formatters import format_output, format_success

from .decorators import command_wrapper
from .utils import detail_options


@command_wrapper
def add_task(
    title: str | None = typer.Argument(None, help="Task title (omit to be prompted)"),
    description: str = typer.Option("", "--description", "-D", help="Optional description"),
    due: str = typer.Option("", "--due", "-d", help="Due date, free text (e.g. '31/12/2026 18:00')"),
    cost: str = typer.Option("0", "--cost", "-c", help="Cost; unparsable values count as 0"),
    difficulty: str = typer.Option(
        "1", "--difficulty", "-l", help="1=easy, 2=medium, 3=hard (invalid means easy)"
    ),
    output: str = typer.Option("pretty", "--output", "-o", help="Output format"),
) -> None:
    """Add a new pending task.

    Without a title every field is asked for interactively.

    Examples:
      tasklist add "Buy milk" --cost 2
      tasklist add "Paint fence" --difficulty hard --due "sat 10:00"
      tasklist add            # interactive
    """
    if title is None:
        fields = prompt_new_task()
    else:
        fields = {
            "title": title,
            "description": description,
            "due_date": due,
            "cost": cost,
            "difficulty": difficulty,
        }

    task = get_task_service().add(**fields)

    if output == "pretty":
        format_success(f"Task {task.id} added: {task.title}")
    else:
        format_output(task, output, **detail_options())
