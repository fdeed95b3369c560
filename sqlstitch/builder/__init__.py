"""Statement builders."""

from sqlstitch.builder._base import SQLBuilder, StatementBuilder, requires
from sqlstitch.builder._ddl import (
    AlterTable,
    AlterTableClause,
    CreateIndex,
    CreateIndexParams,
    CreateTable,
    CreateTableParams,
    DropIndex,
    DropIndexParams,
    DropTable,
    DropTableParams,
)
from sqlstitch.builder._delete import Delete, DeleteClause
from sqlstitch.builder._insert import Insert, InsertClause
from sqlstitch.builder._select import Select, SelectClause
from sqlstitch.builder._state import LogicalOperator
from sqlstitch.builder._transaction import Transaction, TransactionCommand, TransactionCommandKind
from sqlstitch.builder._update import Update, UpdateClause
from sqlstitch.builder._values import Values, ValuesClause

__all__ = (
    "AlterTable",
    "AlterTableClause",
    "CreateIndex",
    "CreateIndexParams",
    "CreateTable",
    "CreateTableParams",
    "Delete",
    "DeleteClause",
    "DropIndex",
    "DropIndexParams",
    "DropTable",
    "DropTableParams",
    "Insert",
    "InsertClause",
    "LogicalOperator",
    "SQLBuilder",
    "Select",
    "SelectClause",
    "StatementBuilder",
    "Transaction",
    "TransactionCommand",
    "TransactionCommandKind",
    "Update",
    "UpdateClause",
    "Values",
    "ValuesClause",
    "requires",
)
