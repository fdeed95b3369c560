from mypy_extensions import trait
from typing_extensions import Self

from sqlstitch.builder._state import push_unique
from sqlstitch.utils.text import normalize_fragment

__all__ = ("JoinClauseMixin",)


@trait
class JoinClauseMixin:
    """Mixin providing JOIN clauses.

    Joins render in call order, one per line in the pretty layout.
    """

    __slots__ = ()

    _join: "list[str]"

    def _add_join(self, keyword: str, expression: str) -> Self:
        text = normalize_fragment(expression)
        if text:
            push_unique(self._join, f"{keyword} {text}")
        return self

    def cross_join(self, expression: str) -> Self:
        return self._add_join("CROSS JOIN", expression)

    def inner_join(self, expression: str) -> Self:
        """Add an ``INNER JOIN``, e.g. ``inner_join("orders ON orders.user_id = users.id")``."""
        return self._add_join("INNER JOIN", expression)

    def left_join(self, expression: str) -> Self:
        return self._add_join("LEFT JOIN", expression)

    def right_join(self, expression: str) -> Self:
        return self._add_join("RIGHT JOIN", expression)
