"""Output formatters for tasks and status messages."""

from __future__ import annotations

import json
from datetime import datetime
from typing import Any

import yaml
from rich.markup import escape
from rich.table import Table

from tasklist_cli.exceptions import InvalidInputError
from tasklist_cli.models import Task, TaskStatus

from .console import get_console

console = get_console()

OUTPUT_FORMATS = ("pretty", "table", "json", "yaml")

STATUS_COLORS = {
    TaskStatus.PENDING: "yellow",
    TaskStatus.IN_PROGRESS: "cyan",
    TaskStatus.DONE: "green",
    TaskStatus.CANCELLED: "dim",
}

DEFAULT_TIMESTAMP_FORMAT = "%d/%m/%Y %H:%M:%S"


def format_error(message: str) -> None:
    """Format and display an error message."""
    console.print(f"[bold red]Error:[/bold red] {escape(message)}")


def format_success(message: str) -> None:
    """Format and display a success message."""
    console.print(f"[bold green]Success:[/bold green] {escape(message)}")


def format_info(message: str) -> None:
    """Format and display an info message."""
    console.print(f"[bold blue]Info:[/bold blue] {escape(message)}")


def format_timestamp(value: datetime, fmt: str = DEFAULT_TIMESTAMP_FORMAT) -> str:
    """Render a stored timestamp in local time."""
    if value.tzinfo is not None:
        value = value.astimezone()
    return value.strftime(fmt)


def format_cost(cost: float, currency_symbol: str = "$") -> str:
    """Render a cost with two decimals, e.g. ``$2.00``."""
    return f"{currency_symbol}{cost:.2f}"


def task_detail_rows(
    task: Task,
    *,
    timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT,
    currency_symbol: str = "$",
) -> list[tuple[str, str]]:
    """Label/value pairs shown in the detail view of a task."""
    return [
        ("ID", str(task.id)),
        ("Title", task.title),
        ("Description", task.description or "No description"),
        ("Status", task.status.label),
        ("Difficulty", task.difficulty.bar),
        ("Cost", format_cost(task.cost, currency_symbol)),
        ("Created", format_timestamp(task.created_at, timestamp_format)),
        ("Due", task.due_date or "No data"),
        ("Last edited", format_timestamp(task.edited_at, timestamp_format)),
    ]


def format_task_detail(
    task: Task,
    *,
    timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT,
    currency_symbol: str = "$",
) -> None:
    """Show every field of a task as key-value pairs."""
    table = Table(show_header=False, box=None)
    table.add_column("Key", style="cyan")
    table.add_column("Value", style="white")

    rows = task_detail_rows(
        task, timestamp_format=timestamp_format, currency_symbol=currency_symbol
    )
    for label, value in rows:
        table.add_row(label, escape(value))

    console.print(table)


def format_task_list(tasks: list[Task], *, detailed: bool = False) -> None:
    """Show tasks as a table, in the order given."""
    if not tasks:
        console.print("[yellow]No tasks to show[/yellow]")
        return

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("ID", justify="right", style="bold")
    table.add_column("Title")
    if detailed:
        table.add_column("Status")
        table.add_column("Difficulty")
        table.add_column("Due")

    for task in tasks:
        row = [str(task.id), escape(task.title)]
        if detailed:
            color = STATUS_COLORS.get(task.status, "white")
            row += [
                f"[{color}]{task.status.label}[/{color}]",
                task.difficulty.bar,
                escape(task.due_date) or "-",
            ]
        table.add_row(*row)

    console.print(table)


def format_output(
    data: Any,
    output_format: str = "pretty",
    compact: bool = False,
    **detail_options: str,
) -> None:
    """Format and display tasks (a list or a single Task) in the chosen format.

    ``detail_options`` (timestamp_format, currency_symbol) apply to the
    detail view of a single task.
    """
    if output_format not in OUTPUT_FORMATS:
        raise InvalidInputError(
            f"Unknown output format '{output_format}'. Use one of: {', '.join(OUTPUT_FORMATS)}"
        )
    if output_format in ("json", "yaml"):
        if isinstance(data, Task):
            payload: Any = data.model_dump(mode="json")
        elif isinstance(data, list):
            payload = [t.model_dump(mode="json") if isinstance(t, Task) else t for t in data]
        else:
            payload = data
        if output_format == "json":
            print(json.dumps(payload, indent=2, ensure_ascii=False))
        else:
            print(yaml.safe_dump(payload, default_flow_style=False, sort_keys=False, allow_unicode=True))
    elif isinstance(data, Task):
        format_task_detail(data, **detail_options)
    elif isinstance(data, list):
        format_task_list(data, detailed=not compact)
    else:
        console.print(data)
