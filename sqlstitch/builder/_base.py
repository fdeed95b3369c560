"""Base classes shared by every statement builder.

Builders mutate their own state and return themselves so calls can be
chained. Rendering never mutates state; :meth:`SQLBuilder.copy` gives an
independent builder so two chains can diverge from a shared prefix.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from copy import deepcopy
from enum import Enum
from typing import TYPE_CHECKING, Any, ClassVar, NoReturn, Optional, Union

from rich import get_console
from rich.syntax import Syntax
from typing_extensions import Self

from sqlstitch.builder._concat import concat_raw, wrap_raw
from sqlstitch.builder._state import push_raw, push_unique
from sqlstitch.dialects import Dialect, DialectLike, Feature, get_dialect
from sqlstitch.exceptions import ImproperConfigurationError, SQLBuilderError, UnsupportedDialectFeatureError
from sqlstitch.formatter import COMPACT, PRETTY, Formatter
from sqlstitch.protocols import SQLRenderable
from sqlstitch.utils.logging import get_logger

if TYPE_CHECKING:
    from rich.console import Console

__all__ = ("SQLBuilder", "StatementBuilder", "requires")

logger = get_logger("builder")


class _DialectGatedMethod:
    """Method descriptor that only exists when the builder's dialect has ``feature``."""

    def __init__(self, feature: Feature, func: "Callable[..., Any]") -> None:
        self.feature = feature
        self.name = func.__name__
        self.__wrapped__ = func
        self.__doc__ = func.__doc__

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    def __get__(self, instance: "Optional[SQLBuilder]", owner: "Optional[type]" = None) -> Any:
        if instance is None:
            return self
        if not instance.dialect.supports(self.feature):
            msg = f"{type(instance).__name__!r} object has no attribute {self.name!r} for dialect {instance.dialect_name!r}"
            raise AttributeError(msg)
        return self.__wrapped__.__get__(instance, owner)


def requires(feature: "Union[Feature, str]") -> "Callable[[Callable[..., Any]], Any]":
    """Expose the decorated builder method only for dialects supporting ``feature``.

    On other dialects the attribute does not exist: accessing it raises
    :class:`AttributeError` and ``hasattr`` returns False.

    Args:
        feature: The capability the method depends on.

    Returns:
        The decorator.
    """
    resolved = Feature(feature)

    def decorator(func: "Callable[..., Any]") -> Any:
        if isinstance(func, _DialectGatedMethod):
            func = func.__wrapped__
        return _DialectGatedMethod(resolved, func)

    return decorator


class SQLBuilder(ABC):
    """Abstract base class for SQL text builders.

    Provides dialect handling, statement-level raw text and the rendering
    entry points. Subclasses implement :meth:`_concat`, the fixed pipeline of
    clause renderers for their statement kind.
    """

    __slots__ = ("_dialect", "_raw")

    _required_feature: ClassVar[Optional[Feature]] = None

    def __init__(self, dialect: DialectLike = None) -> None:
        self._dialect = get_dialect(dialect)
        if self._required_feature is not None and not self._dialect.supports(self._required_feature):
            msg = f"{type(self).__name__} statements are not available for dialect {self._dialect.name!r}"
            raise ImproperConfigurationError(msg)
        self._raw: list[str] = []

    @property
    def dialect(self) -> Dialect:
        return self._dialect

    @property
    def dialect_name(self) -> str:
        """Returns the name of the builder's dialect."""
        return self._dialect.name

    def raw(self, *fragments: str) -> Self:
        """Add raw SQL placed before everything else the statement renders.

        Args:
            *fragments: Raw SQL text. Empty and repeated fragments are ignored.

        Returns:
            The current builder instance for method chaining.
        """
        for fragment in fragments:
            push_unique(self._raw, fragment)
        return self

    @abstractmethod
    def _concat(self, fmt: Formatter) -> str:
        """Walk the statement's clauses in their fixed order and return the text."""

    def _concat_raw(self, query: str, fmt: Formatter) -> str:
        return concat_raw(query, self._raw, fmt)

    def render(self, formatter: Formatter = COMPACT) -> str:
        """Render the statement.

        Args:
            formatter: Layout to use, :data:`~sqlstitch.formatter.COMPACT` by default.

        Returns:
            The SQL text without trailing whitespace.
        """
        text = self._concat(formatter).rstrip()
        statement = type(self).__name__
        logger.debug(
            "Rendered %s statement",
            statement,
            extra={"statement": statement, "dialect": self.dialect_name, "length": len(text)},
        )
        return text

    def to_text(self) -> str:
        return self.render(COMPACT)

    def debug(self, console: "Optional[Console]" = None) -> Self:
        """Print the statement in the pretty layout with syntax highlighting.

        Args:
            console: Console to print to. Defaults to the global rich console.

        Returns:
            The current builder instance for method chaining.
        """
        console = console or get_console()
        console.rule(style="dim")
        console.print(Syntax(self.render(PRETTY), "sql", word_wrap=True))
        console.rule(style="dim")
        return self

    def print(self, console: "Optional[Console]" = None) -> Self:
        """Print the statement on a single line."""
        console = console or get_console()
        console.print(self.to_text(), markup=False, highlight=False, soft_wrap=True)
        return self

    def copy(self) -> Self:
        """Return an independent copy of the builder.

        Returns:
            A builder whose state shares nothing mutable with this one.
        """
        return deepcopy(self)

    clone = copy

    def __copy__(self) -> Self:
        return self.copy()

    def __str__(self) -> str:
        return self.to_text()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(dialect={self.dialect_name!r}, sql={self.to_text()!r})"

    @staticmethod
    def _raise_sql_builder_error(message: str, cause: Optional[BaseException] = None) -> NoReturn:
        raise SQLBuilderError(message) from cause

    def _embed(self, statement: Any, expected: "Union[type, tuple[type, ...]]" = SQLRenderable) -> Any:
        """Copy a statement for embedding so later changes to it stay invisible here."""
        if not isinstance(statement, expected):
            self._raise_sql_builder_error(
                f"{type(self).__name__} cannot embed {type(statement).__name__!r}; a statement builder is required."
            )
        if isinstance(statement, SQLBuilder):
            return statement.copy()
        return deepcopy(statement)


class StatementBuilder(SQLBuilder):
    """Builder whose clauses accept raw text before and after their fragment.

    ``_clause_type`` is the statement's Clause Identity enum and
    ``_clause_features`` maps clauses to the dialect feature they depend on.
    """

    __slots__ = ("_raw_after", "_raw_before")

    _clause_type: ClassVar[type[Enum]]
    _clause_features: ClassVar[Mapping[Any, Feature]] = {}

    def __init__(self, dialect: DialectLike = None) -> None:
        super().__init__(dialect)
        self._raw_before: dict[Any, list[str]] = {}
        self._raw_after: dict[Any, list[str]] = {}

    def raw_before(self, clause: "Union[Enum, str]", *fragments: str) -> Self:
        """Add raw SQL placed immediately before a clause.

        Args:
            clause: The clause, as a member of the statement's clause enum or its value.
            *fragments: Raw SQL text. Repeats are kept.

        Returns:
            The current builder instance for method chaining.
        """
        resolved = self._resolve_clause(clause)
        for fragment in fragments:
            push_raw(self._raw_before, resolved, fragment)
        return self

    def raw_after(self, clause: "Union[Enum, str]", *fragments: str) -> Self:
        """Add raw SQL placed immediately after a clause.

        Args:
            clause: The clause, as a member of the statement's clause enum or its value.
            *fragments: Raw SQL text. Repeats are kept.

        Returns:
            The current builder instance for method chaining.
        """
        resolved = self._resolve_clause(clause)
        for fragment in fragments:
            push_raw(self._raw_after, resolved, fragment)
        return self

    def _resolve_clause(self, clause: "Union[Enum, str]") -> Enum:
        clause_type = self._clause_type
        if isinstance(clause, Enum) and not isinstance(clause, clause_type):
            self._raise_sql_builder_error(
                f"{type(clause).__name__}.{clause.name} is not a clause of {type(self).__name__}; "
                f"use {clause_type.__name__}."
            )
        try:
            resolved = clause_type(clause)
        except ValueError as e:
            by_name = clause_type.__members__.get(str(clause).strip().upper().replace(" ", "_"))
            if by_name is None:
                self._raise_sql_builder_error(f"Unknown {clause_type.__name__} clause: {clause!r}", e)
            resolved = by_name
        feature = self._clause_features.get(resolved)
        if feature is not None and not self.dialect.supports(feature):
            raise UnsupportedDialectFeatureError(feature.value, self.dialect_name)
        return resolved

    def _clause_enabled(self, clause: Enum) -> bool:
        feature = self._clause_features.get(clause)
        return feature is None or self.dialect.supports(feature)

    def _wrap(self, query: str, clause: Enum, fragment: str, fmt: Formatter) -> str:
        """Append a clause fragment surrounded by its raw text, skipping disabled clauses."""
        if not self._clause_enabled(clause):
            return query
        return wrap_raw(query, clause, fragment, self._raw_before, self._raw_after, fmt)
