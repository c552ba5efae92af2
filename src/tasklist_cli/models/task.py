"""Task data models."""

from __future__ import annotations

import re
from datetime import datetime
from enum import IntEnum
from typing import Any

from pydantic import BaseModel, Field, field_validator

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


class _ChoiceEnum(IntEnum):
    """Integer enumeration that can be parsed from loose user input."""

    @property
    def label(self) -> str:
        """Human readable name, e.g. ``In Progress``."""
        return self.name.replace("_", " ").title()

    @classmethod
    def parse(cls, raw: Any) -> _ChoiceEnum | None:
        """Map user input to a member, or None when it matches nothing.

        Accepts a member, an int, a numeric string (leading digits are used,
        so "2." or "2 - medium" both map to 2) or a member name in any case
        and spelling of separators ("in progress", "In-Progress").
        """
        if raw is None or isinstance(raw, bool):
            return None
        if isinstance(raw, cls):
            return raw
        if isinstance(raw, int):
            value = raw
        else:
            text = str(raw).strip()
            if not text:
                return None
            match = _LEADING_INT.match(text)
            if match is None:
                key = re.sub(r"[^a-z]", "", text.lower())
                for member in cls:
                    if member.name.replace("_", "").lower() == key:
                        return member
                return None
            value = int(match.group(1))
        try:
            return cls(value)
        except ValueError:
            return None


class TaskStatus(_ChoiceEnum):
    """Lifecycle stage of a task."""

    PENDING = 1
    IN_PROGRESS = 2
    DONE = 3
    CANCELLED = 4


class Difficulty(_ChoiceEnum):
    """Three-level effort rating."""

    EASY = 1
    MEDIUM = 2
    HARD = 3

    @property
    def bar(self) -> str:
        """Visual meter: ``[*--]``, ``[**-]`` or ``[***]``."""
        return "[" + "*" * self.value + "-" * (len(Difficulty) - self.value) + "]"


class Task(BaseModel):
    """Task model representing a single persisted record.

    Attributes:
        id: Sequential identifier, unique within the collection
        title: Short title, the only field searched
        description: Optional free text
        status: Lifecycle stage
        difficulty: Effort rating
        created_at: Creation timestamp, never changed afterwards
        due_date: Optional user supplied due date, stored as typed
        edited_at: Timestamp of the last mutation
        cost: Non-negative cost
    """

    id: int = Field(ge=1)
    title: str
    description: str = ""
    status: TaskStatus = TaskStatus.PENDING
    difficulty: Difficulty = Difficulty.EASY
    created_at: datetime
    due_date: str = ""
    edited_at: datetime
    cost: float = Field(default=0.0, ge=0, allow_inf_nan=False)

    @field_validator("description", "due_date", mode="before")
    @classmethod
    def none_to_empty(cls, v: Any) -> Any:
        """Older files store missing optional text as null."""
        return "" if v is None else v


class TaskUpdate(BaseModel):
    """Fields to change on an existing task.

    All fields are optional - only provided fields will be updated.
    """

    title: str | None = None
    description: str | None = None
    status: TaskStatus | None = None
    difficulty: Difficulty | None = None
    due_date: str | None = None
    cost: float | None = Field(default=None, ge=0, allow_inf_nan=False)

    def is_empty(self) -> bool:
        """True when no field would change."""
        return not self.model_dump(exclude_none=True)
