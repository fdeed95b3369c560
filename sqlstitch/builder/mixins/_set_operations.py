from typing import TYPE_CHECKING, Any

from mypy_extensions import trait
from typing_extensions import Self

from sqlstitch.builder._base import requires
from sqlstitch.dialects import Feature

if TYPE_CHECKING:
    from sqlstitch.protocols import SQLRenderable

__all__ = ("SetOperationMixin",)


@trait
class SetOperationMixin:
    """Mixin providing UNION, INTERSECT and EXCEPT for SELECT builders.

    Operations are kept in call order as ``(clause, operand)`` pairs. Each
    operand is a copy taken at call time.
    """

    __slots__ = ()

    _set_operations: "list[tuple[Any, SQLRenderable]]"

    def _add_set_operation(self, kind: str, query: "SQLRenderable") -> Self:
        clause = self._clause_type(kind)  # type: ignore[attr-defined]
        self._set_operations.append((clause, self._embed(query)))  # type: ignore[attr-defined]
        return self

    @requires(Feature.SET_OPERATIONS)
    def union(self, query: "SQLRenderable") -> Self:
        """Combine with another statement using ``UNION``.

        Args:
            query: The right-hand operand.

        Raises:
            SQLBuilderError: If ``query`` is not a statement builder.

        Returns:
            The current builder instance for method chaining.
        """
        return self._add_set_operation("union", query)

    @requires(Feature.SET_OPERATIONS)
    def intersect(self, query: "SQLRenderable") -> Self:
        return self._add_set_operation("intersect", query)

    @requires(Feature.SET_OPERATIONS)
    def except_(self, query: "SQLRenderable") -> Self:
        return self._add_set_operation("except", query)
