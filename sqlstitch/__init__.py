"""sqlstitch: clause-ordered SQL text assembly for Python."""

from sqlstitch import builder, dialects, exceptions, formatter, utils
from sqlstitch.__metadata__ import __version__
from sqlstitch._sql import SQLFactory
from sqlstitch.builder import (
    AlterTable,
    AlterTableClause,
    CreateIndex,
    CreateIndexParams,
    CreateTable,
    CreateTableParams,
    Delete,
    DeleteClause,
    DropIndex,
    DropIndexParams,
    DropTable,
    DropTableParams,
    Insert,
    InsertClause,
    Select,
    SelectClause,
    Transaction,
    Update,
    UpdateClause,
    Values,
    ValuesClause,
)
from sqlstitch.dialects import Dialect, Feature, get_dialect
from sqlstitch.exceptions import ImproperConfigurationError, SQLBuilderError, SQLStitchError
from sqlstitch.formatter import COMPACT, PRETTY, Formatter

sql = SQLFactory()

__all__ = (
    "COMPACT",
    "PRETTY",
    "AlterTable",
    "AlterTableClause",
    "CreateIndex",
    "CreateIndexParams",
    "CreateTable",
    "CreateTableParams",
    "Delete",
    "DeleteClause",
    "Dialect",
    "DropIndex",
    "DropIndexParams",
    "DropTable",
    "DropTableParams",
    "Feature",
    "Formatter",
    "ImproperConfigurationError",
    "Insert",
    "InsertClause",
    "SQLBuilderError",
    "SQLFactory",
    "SQLStitchError",
    "Select",
    "SelectClause",
    "Transaction",
    "Update",
    "UpdateClause",
    "Values",
    "ValuesClause",
    "__version__",
    "builder",
    "dialects",
    "exceptions",
    "formatter",
    "get_dialect",
    "sql",
    "utils",
)
