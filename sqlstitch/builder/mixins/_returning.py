from mypy_extensions import trait
from typing_extensions import Self

from sqlstitch.builder._base import requires
from sqlstitch.builder._state import push_unique
from sqlstitch.dialects import Feature

__all__ = ("ReturningClauseMixin",)


@trait
class ReturningClauseMixin:
    """Mixin providing the RETURNING clause for INSERT, UPDATE and DELETE builders."""

    __slots__ = ()

    _returning: "list[str]"

    @requires(Feature.RETURNING)
    def returning(self, *columns: str) -> Self:
        """Add output expressions to the RETURNING clause.

        Args:
            *columns: Column names or expressions, ``"*"`` included.

        Returns:
            The current builder instance for method chaining.
        """
        for column in columns:
            push_unique(self._returning, column)
        return self
