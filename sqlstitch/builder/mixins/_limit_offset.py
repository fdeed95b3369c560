from typing import Union

from mypy_extensions import trait
from typing_extensions import Self

from sqlstitch.builder._base import requires
from sqlstitch.builder._state import set_single
from sqlstitch.dialects import Feature

__all__ = ("LimitOffsetClauseMixin",)


@trait
class LimitOffsetClauseMixin:
    """Mixin providing LIMIT and OFFSET clauses for SELECT builders."""

    __slots__ = ()

    _limit: str
    _offset: str

    @requires(Feature.LIMIT)
    def limit(self, value: Union[int, str, None]) -> Self:
        """Set the LIMIT clause, replacing any previous value.

        Args:
            value: The maximum number of rows to return. An empty string or None clears the clause.

        Returns:
            The current builder instance for method chaining.
        """
        self._limit = set_single(None if value is None else str(value))
        return self

    @requires(Feature.LIMIT)
    def offset(self, value: Union[int, str, None]) -> Self:
        """Set the OFFSET clause, replacing any previous value.

        Args:
            value: The number of rows to skip. An empty string or None clears the clause.

        Returns:
            The current builder instance for method chaining.
        """
        self._offset = set_single(None if value is None else str(value))
        return self
