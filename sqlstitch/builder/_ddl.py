"""DDL builders: CREATE TABLE, DROP TABLE, CREATE INDEX, DROP INDEX and ALTER TABLE."""

from enum import Enum
from typing import ClassVar

from typing_extensions import Self

from sqlstitch.builder._base import StatementBuilder, requires
from sqlstitch.builder._concat import render_conditions, render_single
from sqlstitch.builder._state import push_unique, set_single
from sqlstitch.builder.mixins import WhereClauseMixin
from sqlstitch.dialects import DialectLike, Feature
from sqlstitch.formatter import Formatter
from sqlstitch.utils.text import ensure_parenthesized

__all__ = (
    "AlterTable",
    "AlterTableClause",
    "CreateIndex",
    "CreateIndexParams",
    "CreateTable",
    "CreateTableParams",
    "DropIndex",
    "DropIndexParams",
    "DropTable",
    "DropTableParams",
)


class CreateTableParams(str, Enum):
    """Parts of a CREATE TABLE statement, used as keys for raw text injection."""

    CREATE_TABLE = "create_table"
    COLUMN = "column"
    PRIMARY_KEY = "primary_key"
    CONSTRAINT = "constraint"
    FOREIGN_KEY = "foreign_key"


class DropTableParams(str, Enum):
    DROP_TABLE = "drop_table"


class DropIndexParams(str, Enum):
    DROP_INDEX = "drop_index"


class CreateIndexParams(str, Enum):
    """Parts of a CREATE INDEX statement, used as keys for raw text injection."""

    CREATE_INDEX = "create_index"
    ON = "on"
    USING = "using"
    COLUMN = "column"
    INCLUDE = "include"
    WHERE = "where"


class AlterTableClause(str, Enum):
    """Parts of an ALTER TABLE statement, used as keys for raw text injection."""

    ALTER_TABLE = "alter_table"
    RENAME_TO = "rename_to"
    ACTIONS = "actions"


class CreateTable(StatementBuilder):
    """Builder for CREATE TABLE statements.

    Columns, the primary key, constraints and foreign keys render inside one
    parenthesised list, in that order.

    Example:
        ```python
        CreateTable("users").column("id serial", "login varchar(100) not null").primary_key("id")
        # CREATE TABLE users (id serial, login varchar(100) not null, PRIMARY KEY(id))
        ```
    """

    __slots__ = ("_column", "_constraint", "_create_table", "_foreign_key", "_if_not_exists", "_primary_key")

    _clause_type = CreateTableParams

    def __init__(self, table: str = "", dialect: DialectLike = None) -> None:
        super().__init__(dialect)
        self._create_table = ""
        self._if_not_exists = False
        self._column: list[str] = []
        self._primary_key = ""
        self._constraint: list[str] = []
        self._foreign_key: list[str] = []
        if table:
            self.create_table(table)

    def create_table(self, table: str) -> Self:
        """Set the table name, replacing any previous one."""
        self._create_table = set_single(table)
        self._if_not_exists = False
        return self

    def create_table_if_not_exists(self, table: str) -> Self:
        self._create_table = set_single(table)
        self._if_not_exists = True
        return self

    def column(self, *definitions: str) -> Self:
        """Add column definitions such as ``"login varchar(40) not null"``."""
        for definition in definitions:
            push_unique(self._column, definition)
        return self

    def primary_key(self, columns: str) -> Self:
        """Set the primary key, replacing any previous one.

        ``"id"`` renders as ``PRIMARY KEY(id)``. A value that already contains
        ``(`` is used verbatim, so ``"(id, login)"`` renders as
        ``PRIMARY KEY(id, login)``.

        Args:
            columns: Column list. An empty string clears the primary key.

        Returns:
            The current builder instance for method chaining.
        """
        self._primary_key = set_single(columns)
        return self

    def constraint(self, *definitions: str) -> Self:
        for definition in definitions:
            push_unique(self._constraint, definition)
        return self

    def foreign_key(self, *definitions: str) -> Self:
        """Add foreign keys, e.g. ``"(address_id) references addresses(id)"``.

        The same parenthesis rule as :meth:`primary_key` applies: any ``(`` in the
        value keeps it verbatim, so ``"a references b(id)"`` is not wrapped.
        """
        for definition in definitions:
            push_unique(self._foreign_key, definition)
        return self

    def _render_param(self, clause: CreateTableParams, entries: "list[str]", fmt: Formatter) -> str:
        parts = [
            fmt.space.join(self._raw_before.get(clause, ())),
            fmt.nested().item_separator.join(entries),
            fmt.space.join(self._raw_after.get(clause, ())),
        ]
        return fmt.space.join(part for part in parts if part)

    def _render_params(self, fmt: Formatter) -> str:
        primary_key = [f"PRIMARY KEY{ensure_parenthesized(self._primary_key)}"] if self._primary_key else []
        groups = (
            (CreateTableParams.COLUMN, self._column),
            (CreateTableParams.PRIMARY_KEY, primary_key),
            (CreateTableParams.CONSTRAINT, [f"CONSTRAINT{fmt.space}{item}" for item in self._constraint]),
            (CreateTableParams.FOREIGN_KEY, [f"FOREIGN KEY{ensure_parenthesized(item)}" for item in self._foreign_key]),
        )
        rendered = (self._render_param(clause, entries, fmt) for clause, entries in groups)
        params = fmt.nested().item_separator.join(param for param in rendered if param)
        if not params:
            return ""
        return f"({fmt.line_break}{fmt.indent}{params}{fmt.line_break}){fmt.space}{fmt.line_break}"

    def _concat(self, fmt: Formatter) -> str:
        query = self._concat_raw("", fmt)
        keyword = "CREATE TABLE IF NOT EXISTS" if self._if_not_exists else "CREATE TABLE"
        query = self._wrap(
            query, CreateTableParams.CREATE_TABLE, render_single(keyword, self._create_table, fmt), fmt
        )
        return query + self._render_params(fmt)


class _DropStatement(StatementBuilder):
    """Shared state of DROP TABLE and DROP INDEX.

    When the dialect allows several targets in one statement all names are
    rendered, otherwise only the most recently added one.
    """

    __slots__ = ("_if_exists", "_names")

    _keyword: ClassVar[str]

    def __init__(self, *names: str, dialect: DialectLike = None) -> None:
        super().__init__(dialect)
        self._names: list[str] = []
        self._if_exists = False
        self._add_names(names)

    def _add_names(self, names: "tuple[str, ...]") -> None:
        for name in names:
            push_unique(self._names, name)

    def _render_drop(self, fmt: Formatter) -> str:
        if not self._names:
            return ""
        if self.dialect.supports(Feature.MULTI_TARGET_DROP):
            targets = fmt.item_separator.join(self._names)
        else:
            targets = self._names[-1]
        keyword = f"{self._keyword} IF EXISTS" if self._if_exists else self._keyword
        return render_single(keyword, targets, fmt)

    def _concat(self, fmt: Formatter) -> str:
        query = self._concat_raw("", fmt)
        clause = next(iter(self._clause_type))
        return self._wrap(query, clause, self._render_drop(fmt), fmt)


class DropTable(_DropStatement):
    """Builder for DROP TABLE statements."""

    __slots__ = ()

    _clause_type = DropTableParams
    _keyword = "DROP TABLE"

    def drop_table(self, *tables: str) -> Self:
        self._add_names(tables)
        return self

    def drop_table_if_exists(self, *tables: str) -> Self:
        """Add tables and render ``DROP TABLE IF EXISTS``."""
        self._if_exists = True
        self._add_names(tables)
        return self


class DropIndex(_DropStatement):
    """Builder for DROP INDEX statements."""

    __slots__ = ()

    _clause_type = DropIndexParams
    _keyword = "DROP INDEX"
    _required_feature = Feature.DROP_INDEX

    def drop_index(self, *indexes: str) -> Self:
        self._add_names(indexes)
        return self

    def drop_index_if_exists(self, *indexes: str) -> Self:
        self._if_exists = True
        self._add_names(indexes)
        return self


class CreateIndex(StatementBuilder, WhereClauseMixin):
    """Builder for CREATE INDEX statements.

    Renders ``CREATE [UNIQUE ]INDEX [CONCURRENTLY ][IF NOT EXISTS ]name``
    followed by ``ON``, ``USING``, the column list, ``INCLUDE`` and ``WHERE``.
    """

    __slots__ = (
        "_column",
        "_concurrently",
        "_create_index",
        "_if_not_exists",
        "_include",
        "_on",
        "_only",
        "_unique",
        "_using",
        "_where",
    )

    _clause_type = CreateIndexParams
    _clause_features = {
        CreateIndexParams.USING: Feature.INDEX_USING,
        CreateIndexParams.INCLUDE: Feature.INDEX_INCLUDE,
    }
    _required_feature = Feature.CREATE_INDEX

    def __init__(self, name: str = "", dialect: DialectLike = None) -> None:
        super().__init__(dialect)
        self._create_index = ""
        self._if_not_exists = False
        self._unique = False
        self._concurrently = False
        self._on = ""
        self._only = False
        self._using = ""
        self._column: list[str] = []
        self._include: list[str] = []
        self._where: list = []
        if name:
            self.create_index(name)

    def create_index(self, name: str) -> Self:
        """Set the index name, replacing any previous one."""
        self._create_index = set_single(name)
        self._if_not_exists = False
        return self

    def create_index_if_not_exists(self, name: str) -> Self:
        self._create_index = set_single(name)
        self._if_not_exists = True
        return self

    def unique(self) -> Self:
        self._unique = True
        return self

    @requires(Feature.INDEX_CONCURRENTLY)
    def concurrently(self) -> Self:
        self._concurrently = True
        return self

    def on(self, table: str) -> Self:
        """Set the indexed table, replacing any previous one."""
        self._on = set_single(table)
        return self

    @requires(Feature.INDEX_ONLY)
    def only(self) -> Self:
        """Render ``ON ONLY table`` so the index is not created on partitions."""
        self._only = True
        return self

    @requires(Feature.INDEX_USING)
    def using(self, method: str) -> Self:
        """Set the index method, e.g. ``"btree"``."""
        self._using = set_single(method)
        return self

    def column(self, *columns: str) -> Self:
        for column in columns:
            push_unique(self._column, column)
        return self

    @requires(Feature.INDEX_INCLUDE)
    def include(self, *columns: str) -> Self:
        for column in columns:
            push_unique(self._include, column)
        return self

    def _render_create_index(self, fmt: Formatter) -> str:
        if not (self._create_index or self._on or self._column):
            return ""
        space = fmt.space
        sql = f"CREATE{space}UNIQUE{space}INDEX" if self._unique else f"CREATE{space}INDEX"
        if self._concurrently:
            sql += f"{space}CONCURRENTLY"
        if self._if_not_exists:
            sql += f"{space}IF{space}NOT{space}EXISTS"
        if self._create_index:
            sql += f"{space}{self._create_index}"
        return f"{sql}{space}{fmt.line_break}"

    def _render_parenthesized(self, keyword: str, items: "list[str]", fmt: Formatter) -> str:
        if not items:
            return ""
        prefix = f"{keyword}{fmt.space}" if keyword else ""
        return f"{prefix}({fmt.item_separator.join(items)}){fmt.space}{fmt.line_break}"

    def _concat(self, fmt: Formatter) -> str:
        query = self._concat_raw("", fmt)
        query = self._wrap(query, CreateIndexParams.CREATE_INDEX, self._render_create_index(fmt), fmt)
        on_keyword = f"ON{fmt.space}ONLY" if self._only else "ON"
        query = self._wrap(query, CreateIndexParams.ON, render_single(on_keyword, self._on, fmt), fmt)
        query = self._wrap(query, CreateIndexParams.USING, render_single("USING", self._using, fmt), fmt)
        query = self._wrap(query, CreateIndexParams.COLUMN, self._render_parenthesized("", self._column, fmt), fmt)
        query = self._wrap(
            query, CreateIndexParams.INCLUDE, self._render_parenthesized("INCLUDE", self._include, fmt), fmt
        )
        return self._wrap(query, CreateIndexParams.WHERE, render_conditions("WHERE", self._where, fmt), fmt)


class AlterTable(StatementBuilder):
    """Builder for ALTER TABLE statements.

    ``add``, ``drop``, ``alter`` and ``rename`` actions render in call order
    after the optional ``RENAME TO``.
    """

    __slots__ = ("_actions", "_alter_table", "_rename_to")

    _clause_type = AlterTableClause
    _clause_features = {AlterTableClause.RENAME_TO: Feature.RENAME}

    def __init__(self, table: str = "", dialect: DialectLike = None) -> None:
        super().__init__(dialect)
        self._alter_table = ""
        self._rename_to = ""
        self._actions: list[tuple[str, str]] = []
        if table:
            self.alter_table(table)

    def alter_table(self, table: str) -> Self:
        """Set the table to alter, replacing any previous one."""
        self._alter_table = set_single(table)
        return self

    @requires(Feature.RENAME)
    def rename_to(self, table: str) -> Self:
        self._rename_to = set_single(table)
        return self

    def _push_action(self, keyword: str, expression: str) -> Self:
        text = set_single(expression)
        if text and (keyword, text) not in self._actions:
            self._actions.append((keyword, text))
        return self

    def add(self, expression: str) -> Self:
        """Add a column or table constraint, e.g. ``"COLUMN age int not null"``."""
        return self._push_action("ADD", expression)

    def drop(self, expression: str) -> Self:
        return self._push_action("DROP", expression)

    @requires(Feature.ALTER_COLUMN)
    def alter(self, expression: str) -> Self:
        """Alter a column, e.g. ``"COLUMN login TYPE text"``."""
        return self._push_action("ALTER", expression)

    @requires(Feature.RENAME)
    def rename(self, expression: str) -> Self:
        return self._push_action("RENAME", expression)

    def _render_actions(self, fmt: Formatter) -> str:
        if not self._actions:
            return ""
        space = fmt.space
        actions = fmt.item_separator.join(f"{fmt.indent}{keyword}{space}{text}" for keyword, text in self._actions)
        return f"{actions}{space}{fmt.line_break}"

    def _concat(self, fmt: Formatter) -> str:
        query = self._concat_raw("", fmt)
        query = self._wrap(query, AlterTableClause.ALTER_TABLE, render_single("ALTER TABLE", self._alter_table, fmt), fmt)
        query = self._wrap(query, AlterTableClause.RENAME_TO, render_single("RENAME TO", self._rename_to, fmt), fmt)
        return self._wrap(query, AlterTableClause.ACTIONS, self._render_actions(fmt), fmt)
