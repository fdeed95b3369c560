"""SELECT statement builder.

Clauses render in the fixed order With, Select, From, Join, Where, GroupBy,
Having, Window, OrderBy, Limit, Offset, followed by set operations, whatever
order the methods were called in.
"""

from enum import Enum

from typing_extensions import Self

from sqlstitch.builder._base import StatementBuilder, requires
from sqlstitch.builder._concat import (
    concat_set_operations,
    render_conditions,
    render_joins,
    render_list,
    render_single,
    render_with,
)
from sqlstitch.builder._state import push_unique
from sqlstitch.builder.mixins import (
    CommonTableExpressionMixin,
    FromClauseMixin,
    HavingClauseMixin,
    JoinClauseMixin,
    LimitOffsetClauseMixin,
    OrderByClauseMixin,
    SetOperationMixin,
    WhereClauseMixin,
)
from sqlstitch.dialects import DialectLike, Feature
from sqlstitch.formatter import Formatter

__all__ = ("Select", "SelectClause")


class SelectClause(str, Enum):
    """Clauses of a SELECT statement, used as keys for raw text injection."""

    WITH = "with"
    SELECT = "select"
    FROM = "from"
    JOIN = "join"
    WHERE = "where"
    GROUP_BY = "group_by"
    HAVING = "having"
    WINDOW = "window"
    ORDER_BY = "order_by"
    LIMIT = "limit"
    OFFSET = "offset"
    UNION = "union"
    INTERSECT = "intersect"
    EXCEPT = "except"


_SET_OPERATION_KEYWORDS = {
    SelectClause.UNION: "UNION",
    SelectClause.INTERSECT: "INTERSECT",
    SelectClause.EXCEPT: "EXCEPT",
}


class Select(
    StatementBuilder,
    CommonTableExpressionMixin,
    FromClauseMixin,
    JoinClauseMixin,
    WhereClauseMixin,
    HavingClauseMixin,
    OrderByClauseMixin,
    LimitOffsetClauseMixin,
    SetOperationMixin,
):
    """Builder for SELECT statements.

    Example:
        ```python
        Select("id, login").from_("users").where_clause("id = $1").to_text()
        # SELECT id, login FROM users WHERE id = $1
        ```
    """

    __slots__ = (
        "_from",
        "_group_by",
        "_having",
        "_join",
        "_limit",
        "_offset",
        "_order_by",
        "_select",
        "_set_operations",
        "_where",
        "_window",
        "_with",
    )

    _clause_type = SelectClause
    _clause_features = {
        SelectClause.WITH: Feature.WITH,
        SelectClause.WINDOW: Feature.WINDOW,
        SelectClause.LIMIT: Feature.LIMIT,
        SelectClause.OFFSET: Feature.LIMIT,
        SelectClause.UNION: Feature.SET_OPERATIONS,
        SelectClause.INTERSECT: Feature.SET_OPERATIONS,
        SelectClause.EXCEPT: Feature.SET_OPERATIONS,
    }

    def __init__(self, *columns: str, dialect: DialectLike = None) -> None:
        super().__init__(dialect)
        self._with: list = []
        self._select: list[str] = []
        self._from: list[str] = []
        self._join: list[str] = []
        self._where: list = []
        self._group_by: list[str] = []
        self._having: list = []
        self._window: list[str] = []
        self._order_by: list[str] = []
        self._limit = ""
        self._offset = ""
        self._set_operations: list = []
        self.select(*columns)

    def select(self, *columns: str) -> Self:
        """Add projection items.

        Args:
            *columns: Columns or expressions. ``"id, login"`` and
                ``"id", "login"`` render the same.

        Returns:
            The current builder instance for method chaining.
        """
        for column in columns:
            push_unique(self._select, column)
        return self

    def group_by(self, *columns: str) -> Self:
        for column in columns:
            push_unique(self._group_by, column)
        return self

    @requires(Feature.WINDOW)
    def window(self, *definitions: str) -> Self:
        """Add named window definitions, e.g. ``"win AS (PARTITION BY department)"``."""
        for definition in definitions:
            push_unique(self._window, definition)
        return self

    def _concat(self, fmt: Formatter) -> str:
        query = self._concat_raw("", fmt)
        query = self._wrap(query, SelectClause.WITH, render_with(self._with, fmt), fmt)
        query = self._wrap(query, SelectClause.SELECT, render_list("SELECT", self._select, fmt), fmt)
        query = self._wrap(query, SelectClause.FROM, render_list("FROM", self._from, fmt), fmt)
        query = self._wrap(query, SelectClause.JOIN, render_joins(self._join, fmt), fmt)
        query = self._wrap(query, SelectClause.WHERE, render_conditions("WHERE", self._where, fmt), fmt)
        query = self._wrap(query, SelectClause.GROUP_BY, render_list("GROUP BY", self._group_by, fmt), fmt)
        query = self._wrap(query, SelectClause.HAVING, render_conditions("HAVING", self._having, fmt), fmt)
        query = self._wrap(query, SelectClause.WINDOW, render_list("WINDOW", self._window, fmt), fmt)
        query = self._wrap(query, SelectClause.ORDER_BY, render_list("ORDER BY", self._order_by, fmt), fmt)
        query = self._wrap(query, SelectClause.LIMIT, render_single("LIMIT", self._limit, fmt), fmt)
        query = self._wrap(query, SelectClause.OFFSET, render_single("OFFSET", self._offset, fmt), fmt)
        if not self.dialect.supports(Feature.SET_OPERATIONS):
            return query
        return concat_set_operations(
            query, self._set_operations, _SET_OPERATION_KEYWORDS, self._raw_before, self._raw_after, fmt
        )
