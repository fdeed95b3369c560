"""Accumulation rules for builder state.

Builders keep three kinds of clause state: single slots that are overwritten,
accumulating lists that skip duplicates, and condition lists that pair each
condition with the logical operator joining it to the previous one. Raw
fragments are kept per clause and are never deduplicated.
"""

from collections.abc import Hashable, MutableMapping
from enum import Enum
from typing import TypeVar

from sqlstitch.utils.text import normalize_fragment

__all__ = (
    "Condition",
    "LogicalOperator",
    "push_condition",
    "push_raw",
    "push_unique",
    "set_single",
)

ClauseT = TypeVar("ClauseT", bound=Hashable)


class LogicalOperator(str, Enum):
    """Operator placed before a condition that is not the first in its list."""

    AND = "AND"
    OR = "OR"

    def __str__(self) -> str:
        return self.value


Condition = tuple[LogicalOperator, str]


def set_single(value: "str | None") -> str:
    """Normalize the value of a single slot; an empty result clears the slot."""
    return normalize_fragment(value)


def push_unique(items: "list[str]", value: "str | None") -> bool:
    """Append a trimmed fragment unless it is empty or already present.

    Args:
        items: The accumulating list.
        value: The fragment as passed by the caller.

    Returns:
        True when the list changed.
    """
    fragment = normalize_fragment(value)
    if not fragment or fragment in items:
        return False
    items.append(fragment)
    return True


def push_condition(conditions: "list[Condition]", operator: LogicalOperator, value: "str | None") -> bool:
    """Append a condition joined by ``operator``.

    The pair of operator and trimmed text is compared against existing entries,
    so repeating a condition with the same join method is a no-op while joining
    it with the other method adds a new entry. The operator of the first entry
    is kept but never rendered.

    Args:
        conditions: The condition list.
        operator: How the condition joins the previous one.
        value: The condition as passed by the caller.

    Returns:
        True when the list changed.
    """
    fragment = normalize_fragment(value)
    if not fragment:
        return False
    entry = (LogicalOperator(operator), fragment)
    if entry in conditions:
        return False
    conditions.append(entry)
    return True


def push_raw(mapping: "MutableMapping[ClauseT, list[str]]", clause: ClauseT, value: "str | None") -> bool:
    """Append a raw fragment for ``clause``; repeats are kept."""
    fragment = normalize_fragment(value)
    if not fragment:
        return False
    mapping.setdefault(clause, []).append(fragment)
    return True
