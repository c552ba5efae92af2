"""Repository interfaces for Tasklist CLI."""

from .repository import TaskRepository

__all__ = ["TaskRepository"]
