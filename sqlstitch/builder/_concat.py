"""Clause renderers shared by every statement kind.

Each renderer returns the fragment of a single clause, terminated by
``space + line_break`` so that fragments can be appended one after another.
An empty clause renders to an empty string. :func:`wrap_raw` surrounds a
fragment with the raw text registered before and after its clause, even when
the fragment itself is empty.
"""

from collections.abc import Iterable, Mapping, Sequence
from typing import TYPE_CHECKING, TypeVar

from sqlstitch.builder._state import Condition

if TYPE_CHECKING:
    from sqlstitch.formatter import Formatter
    from sqlstitch.protocols import SQLRenderable

__all__ = (
    "concat_raw",
    "concat_set_operations",
    "render_conditions",
    "render_embedded",
    "render_joins",
    "render_keyword",
    "render_list",
    "render_single",
    "render_with",
    "wrap_raw",
)

ClauseT = TypeVar("ClauseT")


def _join_raw(fragments: "Iterable[str]", fmt: "Formatter") -> str:
    joined = (fmt.space + fmt.line_break).join(fragment for fragment in fragments if fragment)
    if not joined:
        return ""
    return f"{joined}{fmt.space}{fmt.line_break}"


def concat_raw(query: str, raw: "Sequence[str]", fmt: "Formatter") -> str:
    """Append statement-level raw fragments."""
    return f"{query}{_join_raw(raw, fmt)}"


def wrap_raw(
    query: str,
    clause: ClauseT,
    fragment: str,
    raw_before: "Mapping[ClauseT, list[str]]",
    raw_after: "Mapping[ClauseT, list[str]]",
    fmt: "Formatter",
) -> str:
    """Append ``fragment`` to ``query`` with the raw text registered for ``clause``.

    Args:
        query: Text rendered so far.
        clause: Identity of the clause being rendered.
        fragment: The clause's own fragment, possibly empty.
        raw_before: Raw fragments placed before each clause.
        raw_after: Raw fragments placed after each clause.
        fmt: Layout in use.

    Returns:
        The extended text.
    """
    before = _join_raw(raw_before.get(clause, ()), fmt)
    after = _join_raw(raw_after.get(clause, ()), fmt)
    return f"{query}{before}{fragment}{after}"


def render_keyword(keyword: str, fmt: "Formatter") -> str:
    return f"{keyword}{fmt.space}{fmt.line_break}"


def render_single(keyword: str, value: str, fmt: "Formatter") -> str:
    if not value:
        return ""
    return f"{keyword}{fmt.space}{value}{fmt.space}{fmt.line_break}"


def render_list(keyword: str, items: "Sequence[str]", fmt: "Formatter") -> str:
    values = [item for item in items if item]
    if not values:
        return ""
    return f"{keyword}{fmt.space}{fmt.item_separator.join(values)}{fmt.space}{fmt.line_break}"


def render_joins(joins: "Sequence[str]", fmt: "Formatter") -> str:
    if not joins:
        return ""
    return f"{(fmt.space + fmt.line_break).join(joins)}{fmt.space}{fmt.line_break}"


def render_conditions(keyword: str, conditions: "Sequence[Condition]", fmt: "Formatter") -> str:
    """Render a WHERE or HAVING condition list.

    The first condition is rendered without its operator, every later one on
    its own line prefixed by the operator that joins it.
    """
    if not conditions:
        return ""
    (_, first), *rest = conditions
    space, line_break, indent = fmt.space, fmt.line_break, fmt.indent
    body = f"{indent}{first}"
    for operator, condition in rest:
        body += f"{space}{line_break}{indent}{operator.value}{space}{condition}"
    return f"{keyword}{space}{line_break}{body}{space}{line_break}"


def render_embedded(statement: "SQLRenderable | None", fmt: "Formatter") -> str:
    """Render an embedded statement such as the SELECT of an INSERT ... SELECT."""
    if statement is None:
        return ""
    text = statement.render(fmt).strip()
    if not text:
        return ""
    return f"{text}{fmt.space}{fmt.line_break}"


def render_with(entries: "Sequence[tuple[str, SQLRenderable]]", fmt: "Formatter") -> str:
    """Render common table expressions as ``WITH name AS (query), ...``.

    Each query is rendered one indentation level deeper. Entries whose query
    renders to empty text are dropped.
    """
    nested = fmt.nested()
    space = fmt.space
    parts = []
    for name, query in entries:
        text = query.render(nested).strip()
        if not text:
            continue
        parts.append(f"{name}{space}AS{space}({nested.line_break}{text}{fmt.line_break})")
    if not parts:
        return ""
    return f"WITH{space}{fmt.line_break}{fmt.item_separator.join(parts)}{space}{fmt.line_break}"


def concat_set_operations(
    query: str,
    operations: "Sequence[tuple[ClauseT, SQLRenderable]]",
    keywords: "Mapping[ClauseT, str]",
    raw_before: "Mapping[ClauseT, list[str]]",
    raw_after: "Mapping[ClauseT, list[str]]",
    fmt: "Formatter",
) -> str:
    """Combine the text rendered so far with UNION, INTERSECT and EXCEPT operands.

    Operations are applied in call order. Each one wraps the whole prior result
    and its operand in parentheses, so every further operation adds one more
    pair around the left side. A side that renders to empty text is dropped
    together with the keyword, and the side left standing is not parenthesised,
    so ``Select().union(Select("b"))`` renders ``SELECT b``. Raw text registered
    before a kind is placed inside the left side of its first operation, raw
    text registered after a kind follows its last operation.

    Args:
        query: Text rendered so far, the left side of the first operation.
        operations: ``(clause, operand)`` pairs in call order.
        keywords: SQL keyword of every set-operation clause, in render order.
        raw_before: Raw fragments placed before each clause.
        raw_after: Raw fragments placed after each clause.
        fmt: Layout in use.

    Returns:
        The combined text.
    """
    space, line_break = fmt.space, fmt.line_break
    last_index = {clause: index for index, (clause, _) in enumerate(operations)}
    started: "set[ClauseT]" = set()
    result = query
    for index, (clause, operand) in enumerate(operations):
        left = result.strip()
        if clause not in started:
            started.add(clause)
            before = space.join(raw_before.get(clause, ()))
            left = f"{left}{space}{before}".strip()
        right = operand.render(fmt).strip()
        if left and right:
            result = f"({left}){space}{line_break}{keywords[clause]}{space}({right}){space}{line_break}"
        elif left or right:
            result = f"{left or right}{space}{line_break}"
        else:
            result = ""
        if index == last_index[clause]:
            result += _join_raw(raw_after.get(clause, ()), fmt)
    for clause in keywords:
        if clause not in last_index:
            result = wrap_raw(result, clause, "", raw_before, raw_after, fmt)
    return result
