"""Delete command - Delete a task after confirmation."""

import typer

from tasklist_cli.services.task_service import get_task_service
from tasklist_cli.utils.ui.formatters import format_info, format_success

from .decorators import command_wrapper


@command_wrapper
def delete_task(
    task_id: int = typer.Argument(..., min=1, help="Task ID"),
    force: bool = typer.Option(False, "--force", "-f", help="Skip confirmation"),
) -> None:
    """Delete a task."""
    task_service = get_task_service()

    # get the task first so a missing ID fails before asking
    task = task_service.get_task(task_id)

    if force:
        answer = "yes"
    else:
        answer = typer.prompt(
            f"Delete task '{task.title}'? (y/N)", default="n", show_default=False
        )

    if not task_service.delete(task_id, answer):
        format_info("Cancelled")
        raise typer.Exit(0)

    format_success(f"Task {task_id} deleted")
