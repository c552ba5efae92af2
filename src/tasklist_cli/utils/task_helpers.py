"""Task helper utilities for turning raw user input into typed values."""

from __future__ import annotations

import math
import re

_LEADING_NUMBER = re.compile(r"^\s*([+-]?(?:\d+(?:[.,]\d*)?|[.,]\d+))")

AFFIRMATIVE_ANSWERS = frozenset({"s", "si", "sí", "y", "yes"})


def parse_cost(raw: str | float | int | None) -> float | None:
    """
    Parse a cost typed by the user.

    The leading number is used, so "12.50 USD" gives 12.5, and a comma works
    as decimal separator ("2,5" gives 2.5).

    Args:
        raw: User input or an already numeric value

    Returns:
        The cost, or None when no usable non-negative number was given
    """
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, (int, float)):
        value = float(raw)
    else:
        match = _LEADING_NUMBER.match(raw)
        if match is None:
            return None
        value = float(match.group(1).replace(",", "."))
    if not math.isfinite(value) or value < 0:
        return None
    return value


def parse_task_id(raw: str | int | None) -> int | None:
    """Parse a task identifier; None for anything that is not a positive integer."""
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw if raw >= 1 else None
    text = raw.strip()
    if not text.isdigit():
        return None
    value = int(text)
    return value if value >= 1 else None


def is_affirmative(answer: str | None) -> bool:
    """True when the answer is an explicit yes ("s", "si", "y", "yes")."""
    if not answer:
        return False
    return answer.strip().lower() in AFFIRMATIVE_ANSWERS
