"""INSERT statement builder."""

from enum import Enum
from typing import Optional

from typing_extensions import Self

from sqlstitch.builder._base import StatementBuilder, requires
from sqlstitch.builder._concat import render_embedded, render_keyword, render_list, render_single, render_with
from sqlstitch.builder._select import Select
from sqlstitch.builder._state import push_unique, set_single
from sqlstitch.builder.mixins import CommonTableExpressionMixin, ReturningClauseMixin
from sqlstitch.dialects import DialectLike, Feature
from sqlstitch.formatter import Formatter
from sqlstitch.utils.text import ensure_parenthesized

__all__ = ("Insert", "InsertClause")


class InsertClause(str, Enum):
    """Clauses of an INSERT statement, used as keys for raw text injection."""

    WITH = "with"
    INSERT_INTO = "insert_into"
    INSERT_OR = "insert_or"
    REPLACE_INTO = "replace_into"
    OVERRIDING = "overriding"
    VALUES = "values"
    DEFAULT_VALUES = "default_values"
    SELECT = "select"
    ON_CONFLICT = "on_conflict"
    RETURNING = "returning"


_TARGET_KEYWORDS = {
    InsertClause.INSERT_INTO: "INSERT INTO",
    InsertClause.INSERT_OR: "INSERT OR",
    InsertClause.REPLACE_INTO: "REPLACE INTO",
}


class Insert(StatementBuilder, CommonTableExpressionMixin, ReturningClauseMixin):
    """Builder for INSERT statements.

    ``insert_into``, ``insert_or`` and ``replace_into`` share one slot: the
    last call decides both the keyword and the target.
    """

    __slots__ = ("_default_values", "_insert", "_on_conflict", "_overriding", "_returning", "_select", "_values", "_with")

    _clause_type = InsertClause
    _clause_features = {
        InsertClause.WITH: Feature.WITH,
        InsertClause.INSERT_OR: Feature.INSERT_OR,
        InsertClause.REPLACE_INTO: Feature.INSERT_OR,
        InsertClause.OVERRIDING: Feature.OVERRIDING,
        InsertClause.DEFAULT_VALUES: Feature.DEFAULT_VALUES,
        InsertClause.ON_CONFLICT: Feature.ON_CONFLICT,
        InsertClause.RETURNING: Feature.RETURNING,
    }

    def __init__(self, table: str = "", dialect: DialectLike = None) -> None:
        super().__init__(dialect)
        self._with: list = []
        self._insert: Optional[tuple[InsertClause, str]] = None
        self._overriding = ""
        self._values: list[str] = []
        self._default_values = False
        self._select: Optional[Select] = None
        self._on_conflict = ""
        self._returning: list[str] = []
        if table:
            self.insert_into(table)

    def _set_target(self, clause: InsertClause, expression: str) -> Self:
        text = set_single(expression)
        self._insert = (clause, text) if text else None
        return self

    def insert_into(self, table: str) -> Self:
        """Set the target, e.g. ``"users (login, name)"``, replacing any previous one.

        Args:
            table: Table name with an optional column list. An empty string clears the target.

        Returns:
            The current builder instance for method chaining.
        """
        return self._set_target(InsertClause.INSERT_INTO, table)

    @requires(Feature.INSERT_OR)
    def insert_or(self, expression: str) -> Self:
        """Set an ``INSERT OR`` target such as ``"REPLACE INTO users (login)"``."""
        return self._set_target(InsertClause.INSERT_OR, expression)

    @requires(Feature.INSERT_OR)
    def replace_into(self, table: str) -> Self:
        return self._set_target(InsertClause.REPLACE_INTO, table)

    @requires(Feature.OVERRIDING)
    def overriding(self, option: str) -> Self:
        """Set the OVERRIDING clause, e.g. ``"SYSTEM VALUE"``."""
        self._overriding = set_single(option)
        return self

    def values(self, *rows: str) -> Self:
        """Add value rows.

        Args:
            *rows: Row fragments such as ``"('foo', 'Foo')"``. Repeated rows are ignored.

        Returns:
            The current builder instance for method chaining.
        """
        for row in rows:
            push_unique(self._values, row)
        return self

    @requires(Feature.ROW)
    def row(self, *rows: str) -> Self:
        """Add rows written as ``ROW(...)`` to the VALUES clause."""
        for row in rows:
            text = set_single(row)
            if text:
                push_unique(self._values, f"ROW{ensure_parenthesized(text)}")
        return self

    @requires(Feature.DEFAULT_VALUES)
    def default_values(self) -> Self:
        """Use ``DEFAULT VALUES``. Calling it again has no further effect."""
        self._default_values = True
        return self

    def select(self, select: Select) -> Self:
        """Insert the rows produced by a SELECT, replacing any previous one.

        Args:
            select: The source query. It is copied, so later changes to it are not seen here.

        Raises:
            SQLBuilderError: If ``select`` is not a :class:`Select`.

        Returns:
            The current builder instance for method chaining.
        """
        self._select = self._embed(select, Select)
        return self

    @requires(Feature.ON_CONFLICT)
    def on_conflict(self, action: str) -> Self:
        """Set the ON CONFLICT clause, e.g. ``"DO NOTHING"``."""
        self._on_conflict = set_single(action)
        return self

    def _concat(self, fmt: Formatter) -> str:
        query = self._concat_raw("", fmt)
        query = self._wrap(query, InsertClause.WITH, render_with(self._with, fmt), fmt)
        for clause, keyword in _TARGET_KEYWORDS.items():
            target = self._insert[1] if self._insert is not None and self._insert[0] is clause else ""
            query = self._wrap(query, clause, render_single(keyword, target, fmt), fmt)
        query = self._wrap(query, InsertClause.OVERRIDING, render_single("OVERRIDING", self._overriding, fmt), fmt)
        query = self._wrap(query, InsertClause.VALUES, render_list("VALUES", self._values, fmt), fmt)
        default_values = render_keyword("DEFAULT VALUES", fmt) if self._default_values else ""
        query = self._wrap(query, InsertClause.DEFAULT_VALUES, default_values, fmt)
        query = self._wrap(query, InsertClause.SELECT, render_embedded(self._select, fmt), fmt)
        query = self._wrap(query, InsertClause.ON_CONFLICT, render_single("ON CONFLICT", self._on_conflict, fmt), fmt)
        return self._wrap(query, InsertClause.RETURNING, render_list("RETURNING", self._returning, fmt), fmt)
