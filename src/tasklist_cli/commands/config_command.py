"""Configuration management commands."""

import json

import typer

from tasklist_cli.services.config_service import get_config_service
from tasklist_cli.utils.typer_helpers import SuggestingGroup
from tasklist_cli.utils.ui.console import get_console
from tasklist_cli.utils.ui.formatters import format_info, format_success

from .decorators import command_wrapper

app = typer.Typer(cls=SuggestingGroup, help="Configuration management commands")
console = get_console()


@app.command("show")
@command_wrapper
def show_config(
    output: str = typer.Option("pretty", "--output", "-o", help="Output format (pretty or json)"),
) -> None:
    """Show the current configuration."""
    config_service = get_config_service()
    config_dict = config_service.config.model_dump()
    if output == "json":
        print(json.dumps(config_dict, indent=2))
        return
    for key, value in config_dict.items():
        console.print(f"[cyan]{key}[/cyan] = {value}")
    console.print(f"[dim]({config_service.config_path})[/dim]")


@app.command("get")
@command_wrapper
def get_config(
    key: str = typer.Argument(..., help="Configuration key (e.g., tasks_file)"),
) -> None:
    """Get a configuration value."""
    console.print(get_config_service().get(key))


@app.command("set")
@command_wrapper
def set_config(
    key: str = typer.Argument(..., help="Configuration key (e.g., currency_symbol)"),
    value: str = typer.Argument(..., help="Configuration value"),
) -> None:
    """Set a configuration value."""
    stored = get_config_service().set(key, value)
    format_success(f"Configuration '{key}' set to '{stored}'")


@app.command("reset")
@command_wrapper
def reset_config(
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Reset configuration to defaults."""
    if not yes and not typer.confirm("Reset all configuration to defaults?"):
        format_info("Cancelled")
        raise typer.Exit(0)

    get_config_service().reset_config()
    format_success("Configuration reset to defaults")
