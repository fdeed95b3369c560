from typing import TYPE_CHECKING

from mypy_extensions import trait
from typing_extensions import Self

from sqlstitch.builder._base import requires
from sqlstitch.dialects import Feature
from sqlstitch.utils.text import normalize_fragment

if TYPE_CHECKING:
    from sqlstitch.protocols import SQLRenderable

__all__ = ("CommonTableExpressionMixin",)


@trait
class CommonTableExpressionMixin:
    """Mixin providing WITH clause (Common Table Expressions) support for SQL builders."""

    __slots__ = ()

    _with: "list[tuple[str, SQLRenderable]]"

    @requires(Feature.WITH)
    def with_(self, name: str, query: "SQLRenderable") -> Self:
        """Add a common table expression.

        Entries render in call order. The query is copied, so later changes
        to it do not affect this builder.

        Args:
            name: The name of the CTE, optionally with a column list.
            query: Any statement builder.

        Raises:
            SQLBuilderError: If ``query`` is not a statement builder.

        Returns:
            The current builder instance for method chaining.
        """
        self._with.append((normalize_fragment(name), self._embed(query)))  # type: ignore[attr-defined]
        return self
