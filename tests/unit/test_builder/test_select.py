"""Unit tests for the SELECT builder."""

import pytest

from sqlstitch import PRETTY, Insert, InsertClause, Select, SelectClause, Update, sql
from sqlstitch.exceptions import SQLBuilderError, UnsupportedDialectFeatureError


def test_select_from() -> None:
    assert sql.select("id, login").from_("users").to_text() == "SELECT id, login FROM users"


def test_select_accepts_multiple_columns() -> None:
    query = Select("id", "login").from_("users")

    assert query.to_text() == "SELECT id, login FROM users"


def test_where_clause_joins_with_and() -> None:
    query = Select().where_clause("id = $1").where_clause("active = true")

    assert query.to_text() == "WHERE id = $1 AND active = true"


def test_where_aliases() -> None:
    query = Select("*").from_("users").where("id = $1").where_and("active = true")

    assert query.to_text() == "SELECT * FROM users WHERE id = $1 AND active = true"


def test_where_or() -> None:
    query = Select("*").from_("users").where_clause("login = 'foo'").where_or("login = 'bar'")

    assert query.to_text() == "SELECT * FROM users WHERE login = 'foo' OR login = 'bar'"


def test_repeated_condition_with_same_operator_is_ignored() -> None:
    assert Select().where_or("status = 'active'").where_or("status = 'active'").to_text() == "WHERE status = 'active'"
    assert Select().where_clause("a = 1").where_clause(" a = 1 ").to_text() == "WHERE a = 1"


def test_repeated_condition_with_other_operator_is_added() -> None:
    query = Select().where_clause("a = 1").where_or("a = 1")

    assert query.to_text() == "WHERE a = 1 OR a = 1"


def test_empty_condition_is_ignored() -> None:
    query = Select("*").from_("users").where_clause("").where_or("   ")

    assert query.to_text() == "SELECT * FROM users"


def test_group_by_duplicate_is_suppressed() -> None:
    assert Select().group_by("status").group_by("status").to_text() == "GROUP BY status"


def test_having() -> None:
    query = (
        Select("status, count(*)")
        .from_("users")
        .group_by("status")
        .having("count(*) > 1")
        .having_or("status = 'admin'")
    )

    assert query.to_text() == (
        "SELECT status, count(*) FROM users GROUP BY status HAVING count(*) > 1 OR status = 'admin'"
    )


def test_joins_render_in_call_order() -> None:
    query = (
        Select("*")
        .from_("users")
        .inner_join("orders ON orders.user_id = users.id")
        .left_join("addresses ON addresses.user_id = users.id")
        .right_join("roles ON roles.id = users.role_id")
        .cross_join("settings")
    )

    assert query.to_text() == (
        "SELECT * FROM users "
        "INNER JOIN orders ON orders.user_id = users.id "
        "LEFT JOIN addresses ON addresses.user_id = users.id "
        "RIGHT JOIN roles ON roles.id = users.role_id "
        "CROSS JOIN settings"
    )


def test_window() -> None:
    query = Select("rank() OVER win").from_("scores").window("win AS (ORDER BY points DESC)")

    assert query.to_text() == "SELECT rank() OVER win FROM scores WINDOW win AS (ORDER BY points DESC)"


def test_limit_and_offset_are_overwritten() -> None:
    query = Select("*").from_("users").limit(10).limit(20).offset("5")

    assert query.to_text() == "SELECT * FROM users LIMIT 20 OFFSET 5"


def test_limit_cleared_by_empty_value() -> None:
    query = Select("*").from_("users").limit(10).limit("")

    assert query.to_text() == "SELECT * FROM users"


def test_clauses_render_in_fixed_order() -> None:
    query = (
        Select()
        .offset(5)
        .limit(10)
        .order_by("id")
        .having("count(*) > 1")
        .group_by("status")
        .where("active = true")
        .inner_join("orders ON orders.user_id = users.id")
        .from_("users")
        .select("status, count(*)")
    )

    assert query.to_text() == (
        "SELECT status, count(*) FROM users INNER JOIN orders ON orders.user_id = users.id "
        "WHERE active = true GROUP BY status HAVING count(*) > 1 ORDER BY id LIMIT 10 OFFSET 5"
    )


def test_with_common_table_expression() -> None:
    active = Select("*").from_("users").where("active = true")
    query = Select("*").from_("active_users").with_("active_users", active)

    assert query.to_text() == (
        "WITH active_users AS (SELECT * FROM users WHERE active = true) SELECT * FROM active_users"
    )


def test_with_multiple_entries() -> None:
    query = (
        Select("*")
        .from_("a")
        .inner_join("b ON b.id = a.id")
        .with_("a", Select("id").from_("users"))
        .with_("b", Select("id").from_("orders"))
    )

    assert query.to_text() == (
        "WITH a AS (SELECT id FROM users), b AS (SELECT id FROM orders) SELECT * FROM a INNER JOIN b ON b.id = a.id"
    )


def test_with_skips_empty_queries() -> None:
    query = Select("*").from_("users").with_("nothing", Select())

    assert query.to_text() == "SELECT * FROM users"


def test_with_copies_the_embedded_query() -> None:
    cte = Select("id").from_("users")
    query = Select("*").from_("c").with_("c", cte)

    cte.where("active = true")

    assert query.to_text() == "WITH c AS (SELECT id FROM users) SELECT * FROM c"


def test_with_rejects_non_builders() -> None:
    with pytest.raises(SQLBuilderError):
        Select("*").with_("c", "SELECT 1")  # type: ignore[arg-type]


def test_union(users_select: Select, addresses_select: Select) -> None:
    query = users_select.union(addresses_select)

    assert query.to_text() == "(SELECT login FROM users) UNION (SELECT login FROM addresses)"


def test_union_copies_operand(users_select: Select, addresses_select: Select) -> None:
    query = users_select.copy().union(addresses_select)

    addresses_select.where("active = true")

    assert query.to_text() == "(SELECT login FROM users) UNION (SELECT login FROM addresses)"


def test_consecutive_set_operations_wrap_prior_result() -> None:
    query = Select("a").union(Select("b")).intersect(Select("c")).except_(Select("d"))

    assert query.to_text() == "(((SELECT a) UNION (SELECT b)) INTERSECT (SELECT c)) EXCEPT (SELECT d)"


def test_set_operation_drops_empty_operand() -> None:
    assert Select("a").union(Select()).to_text() == "SELECT a"
    assert Select().union(Select("b")).to_text() == "SELECT b"


def test_set_operation_wraps_clauses_before_it() -> None:
    query = Select().offset("10").union(Select("login").from_("addresses"))

    assert query.to_text() == "(OFFSET 10) UNION (SELECT login FROM addresses)"


def test_raw_before_set_operation_goes_into_left_operand() -> None:
    query = Select().raw_before(SelectClause.UNION, "select name from orders").union(Select("name"))

    assert query.to_text() == "(select name from orders) UNION (SELECT name)"


def test_raw_after_set_operation() -> None:
    query = Select("name").union(Select("name")).raw_after(SelectClause.UNION, "/* the name */")

    assert query.to_text() == "(SELECT name) UNION (SELECT name) /* the name */"


def test_raw_of_unused_set_operation_is_still_rendered() -> None:
    query = Select("name").from_("users").raw_after(SelectClause.EXCEPT, "EXCEPT (SELECT name FROM admins)")

    assert query.to_text() == "SELECT name FROM users EXCEPT (SELECT name FROM admins)"


def test_raw_before_and_after_clause() -> None:
    query = (
        Select("*")
        .from_("users")
        .raw_before(SelectClause.FROM, "/* before */")
        .raw_after(SelectClause.FROM, "/* after */")
    )

    assert query.to_text() == "SELECT * /* before */ FROM users /* after */"


def test_raw_fragments_may_repeat() -> None:
    query = Select("*").raw_after(SelectClause.SELECT, "/* x */").raw_after(SelectClause.SELECT, "/* x */")

    assert query.to_text() == "SELECT * /* x */ /* x */"


def test_raw_before_empty_clause() -> None:
    query = Select("id").from_("users").raw_before(SelectClause.WHERE, "WHERE id = 1")

    assert query.to_text() == "SELECT id FROM users WHERE id = 1"


def test_raw_clause_by_value_or_name() -> None:
    by_value = Select("*").raw_after("from", "users")
    by_name = Select("*").raw_after("FROM", "users")

    assert by_value.to_text() == by_name.to_text() == "SELECT * users"


def test_raw_statement_prefix_is_deduplicated() -> None:
    query = Select("id").from_("users").raw("/* start */").raw("/* start */")

    assert query.to_text() == "/* start */ SELECT id FROM users"


def test_raw_only_statement() -> None:
    assert Select().raw("SELECT 1").to_text() == "SELECT 1"


def test_raw_before_rejects_foreign_clause() -> None:
    with pytest.raises(SQLBuilderError, match="InsertClause"):
        Select().raw_before(InsertClause.VALUES, "x")


def test_raw_before_rejects_unknown_clause() -> None:
    with pytest.raises(SQLBuilderError):
        Select().raw_before("nope", "x")


def test_raw_before_rejects_clause_missing_from_dialect() -> None:
    with pytest.raises(UnsupportedDialectFeatureError):
        Select(dialect="mysql").raw_before(SelectClause.WITH, "x")


def test_union_rejects_non_builders() -> None:
    with pytest.raises(SQLBuilderError):
        Select("a").union("SELECT b")  # type: ignore[arg-type]


def test_union_accepts_other_statement_kinds() -> None:
    query = Select("id").from_("users").union(Insert("x").values("(1)"))

    assert query.to_text() == "(SELECT id FROM users) UNION (INSERT INTO x VALUES (1))"


def test_dialect_gated_methods_are_absent() -> None:
    mysql = Select(dialect="mysql")
    standard = Select(dialect="standard")

    assert not hasattr(mysql, "with_")
    assert hasattr(mysql, "limit")
    assert hasattr(mysql, "union")
    assert not hasattr(standard, "limit")
    assert not hasattr(standard, "union")
    assert hasattr(standard, "window")
    with pytest.raises(AttributeError):
        mysql.with_("c", Select("1"))


def test_update_is_not_a_select_method() -> None:
    with pytest.raises(AttributeError):
        Update("users").group_by("id")  # type: ignore[attr-defined]


def test_pretty_layout() -> None:
    query = Select("id, login").from_("users").where("id = $1").where("active = true")

    assert query.render(PRETTY) == "SELECT id, login \nFROM users \nWHERE \n  id = $1 \n  AND active = true"


def test_pretty_item_separator() -> None:
    assert Select("id", "login").render(PRETTY) == "SELECT id,\nlogin"


def test_pretty_common_table_expression() -> None:
    query = Select("*").from_("c").with_("c", Select("id").from_("users"))

    assert query.render(PRETTY) == "WITH \nc AS (\n  SELECT id \n  FROM users\n) \nSELECT * \nFROM c"


def test_str_and_repr() -> None:
    query = Select("id").from_("users")

    assert str(query) == "SELECT id FROM users"
    assert repr(query) == "Select(dialect='generic', sql='SELECT id FROM users')"


def test_limit_and_offset_cleared_by_none() -> None:
    query = Select("a").limit(10).offset(5).limit(None).offset(None)

    assert query.to_text() == "SELECT a"


def test_standalone_right_operand_is_not_parenthesized() -> None:
    query = Select().union(Select("b")).intersect(Select("c"))

    assert query.to_text() == "(SELECT b) INTERSECT (SELECT c)"
