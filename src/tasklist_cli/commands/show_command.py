"""Show command - Show every field of one task."""

import typer

from tasklist_cli.services.task_service import get_task_service
from tasklist_cli.utils.ui.formatters import format_output

from .decorators import command_wrapper
from .utils import detail_options


@command_wrapper
def show_task(
    task_id: int = typer.Argument(..., min=1, help="Task ID"),
    output: str = typer.Option("pretty", "--output", "-o", help="Output format"),
    json_opt: bool = typer.Option(
        False, "--json", help="Output as JSON (alias for --output json)"
    ),
) -> None:
    """Show task details."""
    if json_opt:
        output = "json"

    task = get_task_service().get_task(task_id)
    format_output(task, output, **detail_options())
