"""Unit tests for the INSERT builder."""

import pytest

from sqlstitch import Insert, InsertClause, Select, Update
from sqlstitch.exceptions import SQLBuilderError, UnsupportedDialectFeatureError


def test_insert_values() -> None:
    query = Insert("users (login, name)").values("('foo', 'Foo')", "('bar', 'Bar')")

    assert query.to_text() == "INSERT INTO users (login, name) VALUES ('foo', 'Foo'), ('bar', 'Bar')"


def test_repeated_values_are_ignored() -> None:
    query = Insert("users").values("(1)").values("(1)", "(2)")

    assert query.to_text() == "INSERT INTO users VALUES (1), (2)"


def test_insert_into_overwrites_target() -> None:
    query = Insert("users").insert_into("accounts").values("(1)")

    assert query.to_text() == "INSERT INTO accounts VALUES (1)"


def test_insert_into_cleared_by_empty_value() -> None:
    assert Insert("users").insert_into("  ").values("(1)").to_text() == "VALUES (1)"


def test_default_values_is_idempotent() -> None:
    query = Insert("users").default_values().default_values()

    assert query.to_text() == "INSERT INTO users DEFAULT VALUES"


def test_insert_select_last_call_wins() -> None:
    query = (
        Insert("users_archive")
        .select(Select("*").from_("accounts"))
        .select(Select("*").from_("users").where("active = false"))
    )

    assert query.to_text() == "INSERT INTO users_archive SELECT * FROM users WHERE active = false"


def test_insert_select_is_copied() -> None:
    source = Select("*").from_("users")
    query = Insert("users_archive").select(source)

    source.where("active = false")

    assert query.to_text() == "INSERT INTO users_archive SELECT * FROM users"


def test_insert_select_rejects_other_statements() -> None:
    with pytest.raises(SQLBuilderError):
        Insert("users").select(Update("users"))  # type: ignore[arg-type]


def test_on_conflict_and_returning() -> None:
    query = (
        Insert("users (login)", dialect="postgres")
        .returning("id", "login")
        .on_conflict("DO NOTHING")
        .values("('foo')")
    )

    assert query.to_text() == "INSERT INTO users (login) VALUES ('foo') ON CONFLICT DO NOTHING RETURNING id, login"


def test_on_conflict_is_overwritten() -> None:
    query = Insert("users (login)").values("('foo')").on_conflict("DO NOTHING").on_conflict("(login) DO NOTHING")

    assert query.to_text() == "INSERT INTO users (login) VALUES ('foo') ON CONFLICT (login) DO NOTHING"


def test_sqlite_insert_or() -> None:
    query = Insert(dialect="sqlite").insert_or("REPLACE INTO users (login)").values("('foo')")

    assert query.to_text() == "INSERT OR REPLACE INTO users (login) VALUES ('foo')"


def test_replace_into_shares_the_target_slot() -> None:
    query = Insert("users", dialect="sqlite").replace_into("accounts")

    assert query.to_text() == "REPLACE INTO accounts"
    assert query.insert_into("users").to_text() == "INSERT INTO users"


def test_mysql_row() -> None:
    query = Insert("users", dialect="mysql").row("'foo', 'Foo'", "('bar', 'Bar')")

    assert query.to_text() == "INSERT INTO users VALUES ROW('foo', 'Foo'), ROW('bar', 'Bar')"


def test_overriding() -> None:
    query = Insert("users (id)", dialect="postgres").values("(1)").overriding("SYSTEM VALUE")

    assert query.to_text() == "INSERT INTO users (id) OVERRIDING SYSTEM VALUE VALUES (1)"


def test_raw_after_values() -> None:
    query = Insert("users").values("('baz', 'Baz')").raw_after(InsertClause.VALUES, ", ('foo', 'Foo')")

    assert query.to_text() == "INSERT INTO users VALUES ('baz', 'Baz') , ('foo', 'Foo')"


def test_insert_with_common_table_expression() -> None:
    query = (
        Insert("users_archive")
        .select(Select("*").from_("old"))
        .with_("old", Select("*").from_("users"))
    )

    assert query.to_text() == "WITH old AS (SELECT * FROM users) INSERT INTO users_archive SELECT * FROM old"


def test_dialect_gated_methods() -> None:
    mysql = Insert("users", dialect="mysql")
    postgres = Insert("users", dialect="postgres")
    sqlite = Insert("users", dialect="sqlite")

    for name in ("on_conflict", "returning", "default_values", "with_", "insert_or", "overriding"):
        assert not hasattr(mysql, name), name
    assert hasattr(mysql, "row")
    assert not hasattr(postgres, "row")
    assert not hasattr(postgres, "insert_or")
    assert hasattr(postgres, "overriding")
    assert hasattr(sqlite, "replace_into")
    assert not hasattr(sqlite, "overriding")


def test_raw_for_clause_missing_from_dialect() -> None:
    with pytest.raises(UnsupportedDialectFeatureError):
        Insert("users", dialect="mysql").raw_after(InsertClause.RETURNING, "RETURNING id")
