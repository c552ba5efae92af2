"""List and search commands - show tasks in insertion order."""

import typer

from tasklist_cli.services.task_service import get_task_service
from tasklist_cli.utils.ui.formatters import format_output

from .decorators import command_wrapper

_STATUS_HELP = "Filter by status: all, pending, in-progress, done, cancelled (or 1-4)"


@command_wrapper
def list_tasks(
    status: str = typer.Option("all", "--status", "-s", help=_STATUS_HELP),
    output: str = typer.Option("pretty", "--output", "-o", help="Output format"),
    json_opt: bool = typer.Option(
        False, "--json", help="Output as JSON (alias for --output json)"
    ),
    compact: bool = typer.Option(False, "--compact", help="Only show ID and title"),
) -> None:
    """List tasks, optionally only those with one status."""
    if json_opt:
        output = "json"

    task_service = get_task_service()
    tasks = task_service.list_tasks(status)
    format_output(tasks, output, compact=compact)


@command_wrapper
def search_tasks(
    keyword: str = typer.Argument(..., help="Text to look for in task titles"),
    output: str = typer.Option("pretty", "--output", "-o", help="Output format"),
    json_opt: bool = typer.Option(
        False, "--json", help="Output as JSON (alias for --output json)"
    ),
    compact: bool = typer.Option(False, "--compact", help="Only show ID and title"),
) -> None:
    """Search task titles (case-insensitive)."""
    if json_opt:
        output = "json"

    task_service = get_task_service()
    tasks = task_service.search(keyword)
    format_output(tasks, output, compact=compact)
