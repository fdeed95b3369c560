"""Unit tests for the transaction script builder."""

import pytest

from sqlstitch import PRETTY, AlterTable, CreateTable, Delete, DropTable, Insert, Select, Transaction, Update
from sqlstitch.exceptions import SQLBuilderError


def test_savepoint_and_rollback() -> None:
    query = Transaction().start_transaction("").savepoint("a").rollback("TO SAVEPOINT a").commit("")

    assert query.to_text() == "START TRANSACTION; SAVEPOINT a; ROLLBACK TO SAVEPOINT a; COMMIT;"


def test_begin_and_end() -> None:
    query = Transaction(dialect="postgres").end().select(Select("1")).begin()

    assert query.to_text() == "BEGIN; SELECT 1; END;"


def test_start_transaction_with_mode() -> None:
    query = Transaction().start_transaction("isolation level serializable")

    assert query.to_text() == "START TRANSACTION isolation level serializable;"


def test_commands_render_in_fixed_order() -> None:
    query = (
        Transaction()
        .commit()
        .savepoint("a")
        .release_savepoint("a")
        .set_transaction("read only")
        .start_transaction()
    )

    assert query.to_text() == "START TRANSACTION; SET TRANSACTION read only; SAVEPOINT a; RELEASE SAVEPOINT a; COMMIT;"


def test_commit_is_a_single_slot() -> None:
    assert Transaction().commit().commit("TRANSACTION").to_text() == "COMMIT TRANSACTION;"


def test_raw_prefix() -> None:
    assert Transaction().raw("/* c */").start_transaction().to_text() == "/* c */ START TRANSACTION;"


def test_statements_keep_call_order() -> None:
    query = (
        Transaction()
        .start_transaction()
        .insert(Insert("users").values("(1)"))
        .savepoint("s")
        .update(Update("users").set("x = 1"))
        .rollback("TO SAVEPOINT s")
        .delete(Delete("users"))
        .commit()
    )

    assert query.to_text() == (
        "START TRANSACTION; INSERT INTO users VALUES (1); SAVEPOINT s; "
        "UPDATE users SET x = 1; ROLLBACK TO SAVEPOINT s; DELETE FROM users; COMMIT;"
    )


def test_ddl_statements() -> None:
    query = (
        Transaction()
        .create_table(CreateTable("t").column("id int"))
        .drop_table(DropTable("old"))
        .alter_table(AlterTable("t").add("COLUMN x int"))
    )

    assert query.to_text() == "CREATE TABLE t (id int); DROP TABLE old; ALTER TABLE t ADD COLUMN x int;"


def test_empty_statement_is_skipped() -> None:
    assert Transaction().select(Select()).commit().to_text() == "COMMIT;"


def test_embedded_statement_is_copied() -> None:
    select = Select("1")
    query = Transaction().select(select)

    select.select("2")

    assert query.to_text() == "SELECT 1;"


def test_copy_is_independent() -> None:
    query = Transaction().start_transaction()
    other = query.copy().commit()

    assert query.to_text() == "START TRANSACTION;"
    assert other.to_text() == "START TRANSACTION; COMMIT;"


def test_wrong_statement_type() -> None:
    with pytest.raises(SQLBuilderError):
        Transaction().select(Update("users"))  # type: ignore[arg-type]


def test_dialect_gated_methods() -> None:
    assert hasattr(Transaction(dialect="postgres"), "begin")
    assert not hasattr(Transaction(dialect="mysql"), "begin")
    assert hasattr(Transaction(dialect="mysql"), "start_transaction")
    assert not hasattr(Transaction(dialect="sqlite"), "start_transaction")
    assert not hasattr(Transaction(dialect="sqlite"), "set_transaction")
    assert not hasattr(Transaction(dialect="standard"), "end")


def test_pretty() -> None:
    assert Transaction().start_transaction().commit().render(PRETTY) == "START TRANSACTION; \nCOMMIT;"
