"""Unit tests for dialect resolution and capability tables."""

from copy import copy, deepcopy

import pytest
from sqlglot.dialects.dialect import Dialect as SQLGlotDialect
from sqlglot.dialects.postgres import Postgres

from sqlstitch import Select, dialects
from sqlstitch.dialects import (
    GENERIC,
    MYSQL,
    POSTGRES,
    SQLITE,
    STANDARD,
    Dialect,
    Feature,
    get_dialect,
    register_dialect,
)
from sqlstitch.exceptions import ImproperConfigurationError


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (None, GENERIC),
        ("", GENERIC),
        ("generic", GENERIC),
        ("postgres", POSTGRES),
        ("PostgreSQL", POSTGRES),
        ("sqlite", SQLITE),
        ("mysql", MYSQL),
        ("standard", STANDARD),
        ("ansi", STANDARD),
    ],
)
def test_get_dialect_by_name(value: "str | None", expected: Dialect) -> None:
    assert get_dialect(value) is expected


def test_get_dialect_passes_through_tables() -> None:
    assert get_dialect(SQLITE) is SQLITE


def test_get_dialect_from_sqlglot() -> None:
    assert get_dialect(Postgres) is POSTGRES
    assert get_dialect(SQLGlotDialect.get_or_raise("mysql")) is MYSQL


def test_unknown_dialect() -> None:
    with pytest.raises(ImproperConfigurationError):
        get_dialect("no_such_dialect")


def test_sqlglot_dialect_without_table() -> None:
    with pytest.raises(ImproperConfigurationError, match="capability table"):
        get_dialect("tsql")


def test_generic_supports_everything() -> None:
    assert all(GENERIC.supports(feature) for feature in Feature)


def test_supports_accepts_values() -> None:
    assert POSTGRES.supports("with")
    assert not MYSQL.supports("with")
    assert str(Feature.WITH) == "with"


def test_dialects_are_shared_by_copies() -> None:
    assert copy(POSTGRES) is POSTGRES
    assert deepcopy(POSTGRES) is POSTGRES
    assert Select(dialect="postgres").copy().dialect is POSTGRES


def test_register_dialect(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(dialects, "_REGISTRY", dict(dialects._REGISTRY))
    monkeypatch.setattr(dialects, "_ALIASES", dict(dialects._ALIASES))
    acme = register_dialect(Dialect("acme", frozenset({Feature.LIMIT})), "acme_sql")

    assert get_dialect("acme") is acme
    assert get_dialect("ACME_SQL") is acme
    query = Select("*", dialect="acme_sql").from_("t").limit(5)
    assert query.to_text() == "SELECT * FROM t LIMIT 5"
    assert not hasattr(query, "with_")
    assert query.dialect_name == "acme"


def test_disabled_clause_is_not_rendered() -> None:
    query = Select("*").from_("t").limit(5)
    query._dialect = STANDARD

    assert query.to_text() == "SELECT * FROM t"
