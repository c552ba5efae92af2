"""Typer helper utilities."""

from difflib import get_close_matches

import click
import typer
from typer.core import TyperGroup

from tasklist_cli.utils.exit_codes import ERROR_INVALID_ARGS
from tasklist_cli.utils.ui.console import get_console


def suggest_commands(attempted: str, available: list[str], limit: int = 3) -> list[str]:
    """Command names close to a mistyped one, best match first."""
    return get_close_matches(attempted, available, n=limit, cutoff=0.6)


class SuggestingGroup(TyperGroup):
    """Typer group that proposes the nearest command names on a typo."""

    def resolve_command(self, ctx, args):
        try:
            return super().resolve_command(ctx, args)
        except click.UsageError as e:
            if not args:
                raise
            suggestions = suggest_commands(args[0], sorted(self.commands))
            if not suggestions:
                raise

            console = get_console()
            console.print(f'[red]Error:[/red] no command "{args[0]}" in "{ctx.info_name}"')
            console.print("[yellow]Did you mean:[/yellow] " + ", ".join(suggestions))
            raise typer.Exit(ERROR_INVALID_ARGS) from e
