"""Factory for creating statement builders with a shared default dialect.

This module provides the `sql` factory object:

```python
from sqlstitch import sql

sql.select("id, login").from_("users").where("active = true").to_text()
# SELECT id, login FROM users WHERE active = true
```
"""

from typing import Optional

from sqlstitch.builder import (
    AlterTable,
    CreateIndex,
    CreateTable,
    Delete,
    DropIndex,
    DropTable,
    Insert,
    Select,
    Transaction,
    Update,
    Values,
)
from sqlstitch.dialects import Dialect, DialectLike, get_dialect
from sqlstitch.utils.logging import get_logger

__all__ = ("SQLFactory",)

logger = get_logger("factory")


class SQLFactory:
    """Creates statement builders.

    Every constructor accepts ``dialect=`` which overrides the factory default.
    """

    def __init__(self, dialect: DialectLike = None) -> None:
        """Initialize the SQL factory.

        Args:
            dialect: Default SQL dialect to use for all builders.

        Raises:
            ImproperConfigurationError: If the dialect cannot be resolved.
        """
        self.dialect: Dialect = get_dialect(dialect)
        logger.debug("SQL factory created for dialect %s", self.dialect.name, extra={"dialect": self.dialect.name})

    def _dialect(self, dialect: DialectLike) -> DialectLike:
        return self.dialect if dialect is None else dialect

    # ===================
    # Statement Builders
    # ===================

    def select(self, *columns: str, dialect: DialectLike = None) -> Select:
        """Create a SELECT builder.

        Args:
            *columns: Projection items.
            dialect: SQL dialect to use (overrides factory default).

        Returns:
            Select: A new builder.
        """
        return Select(*columns, dialect=self._dialect(dialect))

    def insert(self, table: Optional[str] = None, dialect: DialectLike = None) -> Insert:
        """Create an INSERT builder, optionally targeting ``table``."""
        return Insert(table or "", dialect=self._dialect(dialect))

    def update(self, table: Optional[str] = None, dialect: DialectLike = None) -> Update:
        return Update(table or "", dialect=self._dialect(dialect))

    def delete(self, table: Optional[str] = None, dialect: DialectLike = None) -> Delete:
        return Delete(table or "", dialect=self._dialect(dialect))

    def values(self, *rows: str, dialect: DialectLike = None) -> Values:
        return Values(*rows, dialect=self._dialect(dialect))

    # ===================
    # DDL Builders
    # ===================

    def create_table(self, table: Optional[str] = None, dialect: DialectLike = None) -> CreateTable:
        return CreateTable(table or "", dialect=self._dialect(dialect))

    def drop_table(self, *tables: str, dialect: DialectLike = None) -> DropTable:
        return DropTable(*tables, dialect=self._dialect(dialect))

    def drop_index(self, *indexes: str, dialect: DialectLike = None) -> DropIndex:
        """Create a DROP INDEX builder.

        Raises:
            ImproperConfigurationError: If the dialect has no DROP INDEX.
        """
        return DropIndex(*indexes, dialect=self._dialect(dialect))

    def create_index(self, name: Optional[str] = None, dialect: DialectLike = None) -> CreateIndex:
        """Create a CREATE INDEX builder.

        Raises:
            ImproperConfigurationError: If the dialect has no CREATE INDEX.
        """
        return CreateIndex(name or "", dialect=self._dialect(dialect))

    def alter_table(self, table: Optional[str] = None, dialect: DialectLike = None) -> AlterTable:
        return AlterTable(table or "", dialect=self._dialect(dialect))

    # ===================
    # Transactions
    # ===================

    def transaction(self, dialect: DialectLike = None) -> Transaction:
        return Transaction(dialect=self._dialect(dialect))
