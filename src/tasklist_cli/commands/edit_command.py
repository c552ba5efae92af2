"""Command 'edit' of tasklist-cli - edit a task interactively or via flags."""

from __future__ import annotations

import typer

from tasklist_cli.services.task_service import get_task_service
from tasklist_cli.ui.prompts import prompt_edits
from tasklist_cli.utils.ui.formatters import format_output, format_success

from .decorators import command_wrapper
from .utils import detail_options


@command_wrapper
def edit_task(
    task_id: int = typer.Argument(..., min=1, help="Task ID"),
    title: str = typer.Option("", "--title", "-t", help="New title"),
    description: str = typer.Option("", "--description", "-D", help="New description"),
    status: str = typer.Option(
        "", "--status", "-s", help="New status: pending, in-progress, done, cancelled (or 1-4)"
    ),
    due: str = typer.Option("", "--due", "-d", help="New due date"),
    cost: str = typer.Option("", "--cost", "-c", help="New cost"),
    difficulty: str = typer.Option("", "--difficulty", "-l", help="New difficulty (1-3)"),
    output: str = typer.Option("pretty", "--output", "-o", help="Output format"),
) -> None:
    """Edit a task interactively or via flags.

    If no flags are given, prompts for each field in turn showing the current
    value (press Enter to keep it). Empty values never clear a field.
    Invalid status, difficulty or cost values are ignored.

    Examples:
      tasklist edit 3 --status done
      tasklist edit 3          # interactive
    """
    task_service = get_task_service()

    fields = {
        "title": title,
        "description": description,
        "status": status,
        "due_date": due,
        "cost": cost,
        "difficulty": difficulty,
    }
    if not any(fields.values()):
        fields = prompt_edits(task_service, task_id, **detail_options())

    updated = task_service.edit(task_id, **fields)

    if output == "pretty":
        format_success(f"Task {updated.id} updated: {updated.title}")
    else:
        format_output(updated, output, **detail_options())
