"""Shared Rich consoles for Tasklist CLI."""

from functools import lru_cache

from rich.console import Console


@lru_cache(maxsize=4)
def get_console(highlight: bool = True, stderr: bool = False) -> Console:
    """Shared console for command output.

    ``stderr=True`` gives the console log warnings are echoed to, so they never
    mix with JSON or YAML written to stdout.
    """
    return Console(highlight=highlight, stderr=stderr)
