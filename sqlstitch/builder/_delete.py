"""DELETE statement builder."""

from enum import Enum
from typing import Union

from typing_extensions import Self

from sqlstitch.builder._base import StatementBuilder, requires
from sqlstitch.builder._concat import render_conditions, render_list, render_single, render_with
from sqlstitch.builder._state import push_unique, set_single
from sqlstitch.builder.mixins import (
    CommonTableExpressionMixin,
    OrderByClauseMixin,
    ReturningClauseMixin,
    WhereClauseMixin,
)
from sqlstitch.dialects import DialectLike, Feature
from sqlstitch.formatter import Formatter

__all__ = ("Delete", "DeleteClause")


class DeleteClause(str, Enum):
    """Clauses of a DELETE statement, used as keys for raw text injection."""

    WITH = "with"
    DELETE_FROM = "delete_from"
    PARTITION = "partition"
    WHERE = "where"
    ORDER_BY = "order_by"
    LIMIT = "limit"
    RETURNING = "returning"


class Delete(
    StatementBuilder,
    CommonTableExpressionMixin,
    WhereClauseMixin,
    OrderByClauseMixin,
    ReturningClauseMixin,
):
    """Builder for DELETE statements."""

    __slots__ = ("_delete_from", "_limit", "_order_by", "_partition", "_returning", "_where", "_with")

    _clause_type = DeleteClause
    _clause_features = {
        DeleteClause.WITH: Feature.WITH,
        DeleteClause.PARTITION: Feature.PARTITION,
        DeleteClause.ORDER_BY: Feature.DELETE_ORDER_LIMIT,
        DeleteClause.LIMIT: Feature.DELETE_ORDER_LIMIT,
        DeleteClause.RETURNING: Feature.RETURNING,
    }

    order_by = requires(Feature.DELETE_ORDER_LIMIT)(OrderByClauseMixin.order_by)

    def __init__(self, table: str = "", dialect: DialectLike = None) -> None:
        super().__init__(dialect)
        self._with: list = []
        self._delete_from = ""
        self._partition: list[str] = []
        self._where: list = []
        self._order_by: list[str] = []
        self._limit = ""
        self._returning: list[str] = []
        if table:
            self.delete_from(table)

    def delete_from(self, table: str) -> Self:
        """Set the table to delete from, replacing any previous one.

        Args:
            table: Table name. An empty string clears it.

        Returns:
            The current builder instance for method chaining.
        """
        self._delete_from = set_single(table)
        return self

    @requires(Feature.DELETE_ORDER_LIMIT)
    def limit(self, value: Union[int, str, None]) -> Self:
        """Set the LIMIT clause, replacing any previous value."""
        self._limit = set_single(None if value is None else str(value))
        return self

    @requires(Feature.PARTITION)
    def partition(self, *names: str) -> Self:
        """Restrict the delete to partitions, rendered as ``PARTITION (p0, p1)``."""
        for name in names:
            push_unique(self._partition, name)
        return self

    def _render_partition(self, fmt: Formatter) -> str:
        if not self._partition:
            return ""
        return f"PARTITION{fmt.space}({fmt.item_separator.join(self._partition)}){fmt.space}{fmt.line_break}"

    def _concat(self, fmt: Formatter) -> str:
        query = self._concat_raw("", fmt)
        query = self._wrap(query, DeleteClause.WITH, render_with(self._with, fmt), fmt)
        query = self._wrap(query, DeleteClause.DELETE_FROM, render_single("DELETE FROM", self._delete_from, fmt), fmt)
        query = self._wrap(query, DeleteClause.PARTITION, self._render_partition(fmt), fmt)
        query = self._wrap(query, DeleteClause.WHERE, render_conditions("WHERE", self._where, fmt), fmt)
        query = self._wrap(query, DeleteClause.ORDER_BY, render_list("ORDER BY", self._order_by, fmt), fmt)
        query = self._wrap(query, DeleteClause.LIMIT, render_single("LIMIT", self._limit, fmt), fmt)
        return self._wrap(query, DeleteClause.RETURNING, render_list("RETURNING", self._returning, fmt), fmt)
