"""Transaction script builder.

Renders a flat script of commands, each terminated by ``;``, in the fixed order
raw text, BEGIN, START TRANSACTION, SET TRANSACTION, the ordered commands,
COMMIT and END. SAVEPOINT, RELEASE SAVEPOINT, ROLLBACK and embedded statements
keep their call order; every other command holds a single value.
"""

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Optional, Union

from typing_extensions import Self

from sqlstitch.builder._base import SQLBuilder, requires
from sqlstitch.builder._ddl import AlterTable, CreateTable, DropTable
from sqlstitch.builder._delete import Delete
from sqlstitch.builder._insert import Insert
from sqlstitch.builder._select import Select
from sqlstitch.builder._update import Update
from sqlstitch.dialects import DialectLike, Feature
from sqlstitch.utils.text import normalize_fragment

if TYPE_CHECKING:
    from sqlstitch.formatter import Formatter

__all__ = ("Transaction", "TransactionCommand", "TransactionCommandKind")


class TransactionCommandKind(str, Enum):
    """Transaction commands and their SQL keywords."""

    BEGIN = "BEGIN"
    START_TRANSACTION = "START TRANSACTION"
    SET_TRANSACTION = "SET TRANSACTION"
    SAVEPOINT = "SAVEPOINT"
    RELEASE_SAVEPOINT = "RELEASE SAVEPOINT"
    ROLLBACK = "ROLLBACK"
    COMMIT = "COMMIT"
    END = "END"


@dataclass(frozen=True)
class TransactionCommand:
    """A single command with its optional argument."""

    kind: TransactionCommandKind
    argument: str = ""

    def render(self, formatter: "Formatter") -> str:
        if not self.argument:
            return self.kind.value
        return f"{self.kind.value}{formatter.space}{self.argument}"


OrderedCommand = Union[TransactionCommand, SQLBuilder]


class Transaction(SQLBuilder):
    """Builder for transaction scripts.

    Example:
        ```python
        Transaction().start_transaction().savepoint("a").rollback("TO SAVEPOINT a").commit().to_text()
        # START TRANSACTION; SAVEPOINT a; ROLLBACK TO SAVEPOINT a; COMMIT;
        ```
    """

    __slots__ = ("_begin", "_commit", "_end", "_ordered_commands", "_set_transaction", "_start_transaction")

    def __init__(self, dialect: DialectLike = None) -> None:
        super().__init__(dialect)
        self._begin: Optional[TransactionCommand] = None
        self._start_transaction: Optional[TransactionCommand] = None
        self._set_transaction: Optional[TransactionCommand] = None
        self._ordered_commands: list[OrderedCommand] = []
        self._commit: Optional[TransactionCommand] = None
        self._end: Optional[TransactionCommand] = None

    @staticmethod
    def _command(kind: TransactionCommandKind, argument: str) -> TransactionCommand:
        return TransactionCommand(kind, normalize_fragment(argument))

    @requires(Feature.BEGIN_END)
    def begin(self, mode: str = "") -> Self:
        """Set the BEGIN command, e.g. ``begin("TRANSACTION")``, replacing any previous one."""
        self._begin = self._command(TransactionCommandKind.BEGIN, mode)
        return self

    @requires(Feature.START_TRANSACTION)
    def start_transaction(self, mode: str = "") -> Self:
        """Set the START TRANSACTION command, replacing any previous one.

        Args:
            mode: Transaction modes such as ``"isolation level serializable"``.

        Returns:
            The current builder instance for method chaining.
        """
        self._start_transaction = self._command(TransactionCommandKind.START_TRANSACTION, mode)
        return self

    @requires(Feature.SET_TRANSACTION)
    def set_transaction(self, mode: str = "") -> Self:
        self._set_transaction = self._command(TransactionCommandKind.SET_TRANSACTION, mode)
        return self

    def savepoint(self, name: str) -> Self:
        self._ordered_commands.append(self._command(TransactionCommandKind.SAVEPOINT, name))
        return self

    def release_savepoint(self, name: str) -> Self:
        self._ordered_commands.append(self._command(TransactionCommandKind.RELEASE_SAVEPOINT, name))
        return self

    def rollback(self, argument: str = "") -> Self:
        """Add a ROLLBACK command, e.g. ``rollback("TO SAVEPOINT a")``."""
        self._ordered_commands.append(self._command(TransactionCommandKind.ROLLBACK, argument))
        return self

    def commit(self, argument: str = "") -> Self:
        """Set the COMMIT command, e.g. ``commit("TRANSACTION")``, replacing any previous one."""
        self._commit = self._command(TransactionCommandKind.COMMIT, argument)
        return self

    @requires(Feature.BEGIN_END)
    def end(self, argument: str = "") -> Self:
        self._end = self._command(TransactionCommandKind.END, argument)
        return self

    def _add_statement(self, statement: SQLBuilder, expected: type) -> Self:
        self._ordered_commands.append(self._embed(statement, expected))
        return self

    def select(self, select: Select) -> Self:
        """Append a SELECT statement to the ordered commands.

        Args:
            select: The statement. It is copied, so later changes to it are not seen here.

        Raises:
            SQLBuilderError: If ``select`` is not a :class:`Select`.

        Returns:
            The current builder instance for method chaining.
        """
        return self._add_statement(select, Select)

    def insert(self, insert: Insert) -> Self:
        return self._add_statement(insert, Insert)

    def update(self, update: Update) -> Self:
        return self._add_statement(update, Update)

    def delete(self, delete: Delete) -> Self:
        return self._add_statement(delete, Delete)

    def create_table(self, create_table: CreateTable) -> Self:
        return self._add_statement(create_table, CreateTable)

    def drop_table(self, drop_table: DropTable) -> Self:
        return self._add_statement(drop_table, DropTable)

    def alter_table(self, alter_table: AlterTable) -> Self:
        return self._add_statement(alter_table, AlterTable)

    @staticmethod
    def _terminate(command: "Optional[OrderedCommand]", fmt: "Formatter") -> str:
        if command is None:
            return ""
        text = command.render(fmt).strip()
        if not text:
            return ""
        return f"{text};{fmt.space}{fmt.line_break}"

    def _concat(self, fmt: "Formatter") -> str:
        query = self._concat_raw("", fmt)
        if self.dialect.supports(Feature.BEGIN_END):
            query += self._terminate(self._begin, fmt)
        if self.dialect.supports(Feature.START_TRANSACTION):
            query += self._terminate(self._start_transaction, fmt)
        if self.dialect.supports(Feature.SET_TRANSACTION):
            query += self._terminate(self._set_transaction, fmt)
        for command in self._ordered_commands:
            if not isinstance(command, (TransactionCommand, SQLBuilder)):
                self._raise_sql_builder_error(f"Unexpected transaction command {command!r}")
            query += self._terminate(command, fmt)
        query += self._terminate(self._commit, fmt)
        if self.dialect.supports(Feature.BEGIN_END):
            query += self._terminate(self._end, fmt)
        return query
