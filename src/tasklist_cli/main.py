"""Main entry point for Tasklist CLI."""

import typer

from tasklist_cli import __version__
from tasklist_cli.commands import (
    add_command,
    config_command,
    delete_command,
    edit_command,
    list_command,
    show_command,
)
from tasklist_cli.commands.decorators import command_wrapper
from tasklist_cli.services.config_service import get_config_service
from tasklist_cli.services.task_service import get_task_service
from tasklist_cli.ui.menu import MenuShell
from tasklist_cli.utils.typer_helpers import SuggestingGroup
from tasklist_cli.utils.ui.console import get_console

app = typer.Typer(
    name="tasklist",
    cls=SuggestingGroup,
    help="A console task manager backed by a JSON file",
    invoke_without_command=True,
)

console = get_console()


@app.callback()
def main_callback(
    ctx: typer.Context,
    tasks_file: str | None = typer.Option(
        None, "--file", help="Tasks file for this run (overrides config)"
    ),
) -> None:
    """Manage tasks from the command line. Without a command, opens the menu."""
    get_config_service().override_tasks_file(tasks_file)
    if ctx.invoked_subcommand is None:
        menu(no_clear=False)


# Task commands
app.command("list")(list_command.list_tasks)
app.command("search")(list_command.search_tasks)
app.command("show")(show_command.show_task)
app.command("add")(add_command.add_task)
app.command("edit")(edit_command.edit_task)
app.command("delete")(delete_command.delete_task)

app.add_typer(config_command.app, name="config", help="Configuration management")


@app.command()
@command_wrapper
def menu(
    no_clear: bool = typer.Option(False, "--no-clear", help="Never clear the screen"),
) -> None:
    """Open the interactive menu."""
    config = get_config_service().config
    shell = MenuShell(
        get_task_service(),
        clear_screen=config.clear_screen and not no_clear,
        timestamp_format=config.timestamp_format,
        currency_symbol=config.currency_symbol,
    )
    shell.run()


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]Tasklist CLI[/bold] version [cyan]{__version__}[/cyan]")


def main():
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
