from mypy_extensions import trait
from typing_extensions import Self

from sqlstitch.builder._state import push_unique

__all__ = ("FromClauseMixin",)


@trait
class FromClauseMixin:
    """Mixin providing the FROM clause for SELECT and UPDATE builders."""

    __slots__ = ()

    _from: "list[str]"

    def from_(self, *tables: str) -> Self:
        """Add tables or sub-query text to the FROM clause.

        Args:
            *tables: Table references. Empty and repeated references are ignored.

        Returns:
            The current builder instance for method chaining.
        """
        for table in tables:
            push_unique(self._from, table)
        return self
