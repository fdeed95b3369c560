from mypy_extensions import trait
from typing_extensions import Self

from sqlstitch.builder._state import Condition, LogicalOperator, push_condition

__all__ = ("HavingClauseMixin", "WhereClauseMixin")


@trait
class WhereClauseMixin:
    """Mixin providing WHERE clause methods for SELECT, UPDATE and DELETE builders."""

    __slots__ = ()

    _where: "list[Condition]"

    def where_clause(self, *conditions: str) -> Self:
        """Add conditions to the WHERE clause, joined with ``AND``.

        Args:
            *conditions: Condition fragments such as ``"id = $1"``. Empty and
                repeated conditions are ignored.

        Returns:
            The current builder instance for method chaining.
        """
        for condition in conditions:
            push_condition(self._where, LogicalOperator.AND, condition)
        return self

    where = where_clause
    where_and = where_clause

    def where_or(self, *conditions: str) -> Self:
        """Add conditions to the WHERE clause, joined with ``OR``.

        Args:
            *conditions: Condition fragments.

        Returns:
            The current builder instance for method chaining.
        """
        for condition in conditions:
            push_condition(self._where, LogicalOperator.OR, condition)
        return self


@trait
class HavingClauseMixin:
    """Mixin providing HAVING clause methods for SELECT builders."""

    __slots__ = ()

    _having: "list[Condition]"

    def having(self, *conditions: str) -> Self:
        for condition in conditions:
            push_condition(self._having, LogicalOperator.AND, condition)
        return self

    having_and = having

    def having_or(self, *conditions: str) -> Self:
        for condition in conditions:
            push_condition(self._having, LogicalOperator.OR, condition)
        return self
