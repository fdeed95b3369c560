"""UPDATE statement builder."""

from enum import Enum
from typing import Optional

from typing_extensions import Self

from sqlstitch.builder._base import StatementBuilder, requires
from sqlstitch.builder._concat import render_conditions, render_joins, render_list, render_single, render_with
from sqlstitch.builder._state import push_unique, set_single
from sqlstitch.builder.mixins import (
    CommonTableExpressionMixin,
    FromClauseMixin,
    JoinClauseMixin,
    ReturningClauseMixin,
    WhereClauseMixin,
)
from sqlstitch.dialects import DialectLike, Feature
from sqlstitch.formatter import Formatter

__all__ = ("Update", "UpdateClause")


class UpdateClause(str, Enum):
    """Clauses of an UPDATE statement, used as keys for raw text injection."""

    WITH = "with"
    UPDATE = "update"
    UPDATE_OR = "update_or"
    SET = "set"
    FROM = "from"
    JOIN = "join"
    WHERE = "where"
    RETURNING = "returning"


class Update(
    StatementBuilder,
    CommonTableExpressionMixin,
    FromClauseMixin,
    JoinClauseMixin,
    WhereClauseMixin,
    ReturningClauseMixin,
):
    """Builder for UPDATE statements.

    ``update`` and ``update_or`` share one slot, the last call wins.
    """

    __slots__ = ("_from", "_join", "_returning", "_set", "_update", "_where", "_with")

    _clause_type = UpdateClause
    _clause_features = {
        UpdateClause.WITH: Feature.WITH,
        UpdateClause.UPDATE_OR: Feature.UPDATE_OR,
        UpdateClause.FROM: Feature.UPDATE_FROM,
        UpdateClause.JOIN: Feature.UPDATE_JOIN,
        UpdateClause.RETURNING: Feature.RETURNING,
    }

    from_ = requires(Feature.UPDATE_FROM)(FromClauseMixin.from_)
    cross_join = requires(Feature.UPDATE_JOIN)(JoinClauseMixin.cross_join)
    inner_join = requires(Feature.UPDATE_JOIN)(JoinClauseMixin.inner_join)
    left_join = requires(Feature.UPDATE_JOIN)(JoinClauseMixin.left_join)
    right_join = requires(Feature.UPDATE_JOIN)(JoinClauseMixin.right_join)

    def __init__(self, table: str = "", dialect: DialectLike = None) -> None:
        super().__init__(dialect)
        self._with: list = []
        self._update: Optional[tuple[UpdateClause, str]] = None
        self._set: list[str] = []
        self._from: list[str] = []
        self._join: list[str] = []
        self._where: list = []
        self._returning: list[str] = []
        if table:
            self.update(table)

    def update(self, table: str) -> Self:
        """Set the table to update, replacing any previous one.

        Args:
            table: Table name. An empty string clears it.

        Returns:
            The current builder instance for method chaining.
        """
        text = set_single(table)
        self._update = (UpdateClause.UPDATE, text) if text else None
        return self

    @requires(Feature.UPDATE_OR)
    def update_or(self, expression: str) -> Self:
        """Set an ``UPDATE OR`` target such as ``"ABORT users"``."""
        text = set_single(expression)
        self._update = (UpdateClause.UPDATE_OR, text) if text else None
        return self

    def set(self, *assignments: str) -> Self:
        """Add assignments to the SET clause, e.g. ``"name = 'Foo'"``."""
        for assignment in assignments:
            push_unique(self._set, assignment)
        return self

    def _concat(self, fmt: Formatter) -> str:
        query = self._concat_raw("", fmt)
        query = self._wrap(query, UpdateClause.WITH, render_with(self._with, fmt), fmt)
        for clause, keyword in ((UpdateClause.UPDATE, "UPDATE"), (UpdateClause.UPDATE_OR, "UPDATE OR")):
            table = self._update[1] if self._update is not None and self._update[0] is clause else ""
            query = self._wrap(query, clause, render_single(keyword, table, fmt), fmt)
        query = self._wrap(query, UpdateClause.SET, render_list("SET", self._set, fmt), fmt)
        query = self._wrap(query, UpdateClause.FROM, render_list("FROM", self._from, fmt), fmt)
        query = self._wrap(query, UpdateClause.JOIN, render_joins(self._join, fmt), fmt)
        query = self._wrap(query, UpdateClause.WHERE, render_conditions("WHERE", self._where, fmt), fmt)
        return self._wrap(query, UpdateClause.RETURNING, render_list("RETURNING", self._returning, fmt), fmt)
