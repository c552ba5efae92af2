"""Interactive user interface for Tasklist CLI."""
