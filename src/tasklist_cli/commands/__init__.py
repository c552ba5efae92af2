"""Typer commands of Tasklist CLI."""
