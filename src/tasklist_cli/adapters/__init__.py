"""Adapters module - Repository implementations for storage backends.

- json_file: whole-collection JSON file storage
"""

from .json_file import JsonTaskRepository

__all__ = ["JsonTaskRepository"]
