"""Standalone VALUES statement builder."""

from enum import Enum

from typing_extensions import Self

from sqlstitch.builder._base import StatementBuilder, requires
from sqlstitch.builder._concat import render_list
from sqlstitch.builder._state import push_unique, set_single
from sqlstitch.dialects import DialectLike, Feature
from sqlstitch.formatter import Formatter
from sqlstitch.utils.text import ensure_parenthesized

__all__ = ("Values", "ValuesClause")


class ValuesClause(str, Enum):
    VALUES = "values"


class Values(StatementBuilder):
    """Builder for a bare ``VALUES (1), (2)`` list, usable as a sub-query."""

    __slots__ = ("_values",)

    _clause_type = ValuesClause

    def __init__(self, *rows: str, dialect: DialectLike = None) -> None:
        super().__init__(dialect)
        self._values: list[str] = []
        self.values(*rows)

    def values(self, *rows: str) -> Self:
        for row in rows:
            push_unique(self._values, row)
        return self

    @requires(Feature.ROW)
    def row(self, *rows: str) -> Self:
        for row in rows:
            text = set_single(row)
            if text:
                push_unique(self._values, f"ROW{ensure_parenthesized(text)}")
        return self

    def _concat(self, fmt: Formatter) -> str:
        query = self._concat_raw("", fmt)
        return self._wrap(query, ValuesClause.VALUES, render_list("VALUES", self._values, fmt), fmt)
