"""Dialect capability tables.

A dialect decides which builder methods exist, which clauses take part in a
statement's render pipeline and how multi-target DROP statements are joined.
Names are resolved through sqlglot so that anything sqlglot accepts as a
dialect (a name, a ``sqlglot.Dialect`` subclass or instance) can be used.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union

from sqlglot.dialects.dialect import Dialect as SQLGlotDialect
from sqlglot.dialects.dialect import DialectType

from sqlstitch.exceptions import ImproperConfigurationError
from sqlstitch.utils.logging import get_logger

__all__ = (
    "GENERIC",
    "MYSQL",
    "POSTGRES",
    "SQLITE",
    "STANDARD",
    "Dialect",
    "DialectLike",
    "Feature",
    "get_dialect",
    "register_dialect",
)

logger = get_logger("dialects")


class Feature(str, Enum):
    """Capabilities that differ between dialects."""

    WITH = "with"
    RETURNING = "returning"
    LIMIT = "limit"
    SET_OPERATIONS = "set_operations"
    WINDOW = "window"
    BEGIN_END = "begin_end"
    START_TRANSACTION = "start_transaction"
    SET_TRANSACTION = "set_transaction"
    MULTI_TARGET_DROP = "multi_target_drop"
    DROP_INDEX = "drop_index"
    CREATE_INDEX = "create_index"
    INDEX_CONCURRENTLY = "index_concurrently"
    INDEX_INCLUDE = "index_include"
    INDEX_ONLY = "index_only"
    INDEX_USING = "index_using"
    ON_CONFLICT = "on_conflict"
    OVERRIDING = "overriding"
    DEFAULT_VALUES = "default_values"
    ROW = "row"
    INSERT_OR = "insert_or"
    UPDATE_OR = "update_or"
    UPDATE_FROM = "update_from"
    UPDATE_JOIN = "update_join"
    PARTITION = "partition"
    DELETE_ORDER_LIMIT = "delete_order_limit"
    ALTER_COLUMN = "alter_column"
    RENAME = "rename"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Dialect:
    """Immutable capability table for one SQL dialect."""

    name: str
    features: "frozenset[Feature]" = field(default_factory=frozenset)

    def supports(self, feature: "Union[Feature, str]") -> bool:
        return Feature(feature) in self.features

    def __copy__(self) -> "Dialect":
        return self

    def __deepcopy__(self, memo: "dict[int, Any]") -> "Dialect":
        return self

    def __str__(self) -> str:
        return self.name


DialectLike = Union[Dialect, DialectType]

GENERIC = Dialect("generic", frozenset(Feature))
STANDARD = Dialect(
    "standard",
    frozenset({
        Feature.WINDOW,
        Feature.START_TRANSACTION,
        Feature.SET_TRANSACTION,
        Feature.OVERRIDING,
        Feature.DEFAULT_VALUES,
    }),
)
POSTGRES = Dialect(
    "postgres",
    frozenset({
        Feature.WITH,
        Feature.RETURNING,
        Feature.LIMIT,
        Feature.SET_OPERATIONS,
        Feature.WINDOW,
        Feature.BEGIN_END,
        Feature.START_TRANSACTION,
        Feature.SET_TRANSACTION,
        Feature.MULTI_TARGET_DROP,
        Feature.DROP_INDEX,
        Feature.CREATE_INDEX,
        Feature.INDEX_CONCURRENTLY,
        Feature.INDEX_INCLUDE,
        Feature.INDEX_ONLY,
        Feature.INDEX_USING,
        Feature.ON_CONFLICT,
        Feature.OVERRIDING,
        Feature.DEFAULT_VALUES,
        Feature.UPDATE_FROM,
        Feature.ALTER_COLUMN,
        Feature.RENAME,
    }),
)
SQLITE = Dialect(
    "sqlite",
    frozenset({
        Feature.WITH,
        Feature.RETURNING,
        Feature.LIMIT,
        Feature.SET_OPERATIONS,
        Feature.WINDOW,
        Feature.BEGIN_END,
        Feature.DROP_INDEX,
        Feature.CREATE_INDEX,
        Feature.ON_CONFLICT,
        Feature.DEFAULT_VALUES,
        Feature.INSERT_OR,
        Feature.UPDATE_OR,
        Feature.UPDATE_FROM,
        Feature.UPDATE_JOIN,
        Feature.RENAME,
    }),
)
MYSQL = Dialect(
    "mysql",
    frozenset({
        Feature.LIMIT,
        Feature.SET_OPERATIONS,
        Feature.WINDOW,
        Feature.START_TRANSACTION,
        Feature.SET_TRANSACTION,
        Feature.CREATE_INDEX,
        Feature.INDEX_USING,
        Feature.ROW,
        Feature.PARTITION,
        Feature.DELETE_ORDER_LIMIT,
        Feature.ALTER_COLUMN,
    }),
)

_REGISTRY: "dict[str, Dialect]" = {
    dialect.name: dialect for dialect in (GENERIC, STANDARD, POSTGRES, SQLITE, MYSQL)
}
_ALIASES: "dict[str, str]" = {
    "": "generic",
    "ansi": "standard",
    "dialect": "generic",
    "postgresql": "postgres",
    "sql": "standard",
}


def register_dialect(dialect: Dialect, *aliases: str) -> Dialect:
    """Register a custom capability table so it can be looked up by name.

    Args:
        dialect: The capability table.
        *aliases: Extra names resolving to the same table.

    Returns:
        The registered dialect.
    """
    _REGISTRY[dialect.name.lower()] = dialect
    for alias in aliases:
        _ALIASES[alias.lower()] = dialect.name.lower()
    return dialect


def _lookup(name: str) -> "Union[Dialect, None]":
    key = name.strip().lower()
    return _REGISTRY.get(_ALIASES.get(key, key))


def get_dialect(dialect: "DialectLike" = None) -> Dialect:
    """Resolve a dialect value to its capability table.

    Args:
        dialect: ``None`` for the generic dialect, a :class:`Dialect`, a registered
            name or alias, or any value sqlglot accepts as a dialect.

    Raises:
        ImproperConfigurationError: If the value cannot be resolved.

    Returns:
        The capability table.
    """
    if dialect is None:
        return GENERIC
    if isinstance(dialect, Dialect):
        return dialect
    if isinstance(dialect, str) and (found := _lookup(dialect)) is not None:
        return found
    try:
        resolved = SQLGlotDialect.get_or_raise(dialect)
    except ValueError as e:
        msg = f"Unknown dialect {dialect!r}"
        raise ImproperConfigurationError(msg) from e
    name = type(resolved).__name__
    found = _lookup(name)
    if found is None:
        msg = f"Dialect {name!r} is known to sqlglot but has no capability table"
        raise ImproperConfigurationError(msg)
    logger.debug("Resolved dialect %r to %s", dialect, found.name, extra={"dialect": found.name})
    return found
