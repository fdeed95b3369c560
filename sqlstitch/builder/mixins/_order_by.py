from mypy_extensions import trait
from typing_extensions import Self

from sqlstitch.builder._state import push_unique

__all__ = ("OrderByClauseMixin",)


@trait
class OrderByClauseMixin:
    """Mixin providing the ORDER BY clause."""

    __slots__ = ()

    _order_by: "list[str]"

    def order_by(self, *items: str) -> Self:
        """Add ORDER BY items.

        Args:
            *items: Sort expressions such as ``"created_at desc"``.

        Returns:
            The current builder instance for method chaining.
        """
        for item in items:
            push_unique(self._order_by, item)
        return self
