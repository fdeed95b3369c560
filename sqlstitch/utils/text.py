"""Text helpers for user supplied SQL fragments."""

__all__ = ("ensure_parenthesized", "normalize_fragment")


def normalize_fragment(value: "str | None") -> str:
    """Trim a fragment so that whitespace-only input behaves like empty input.

    Args:
        value: The fragment as passed by the caller.

    Returns:
        The fragment without leading or trailing whitespace.
    """
    if value is None:
        return ""
    return str(value).strip()


def ensure_parenthesized(value: str) -> str:
    """Wrap a column list in parentheses unless the caller already did.

    Any ``(`` in the value counts as already parenthesized, so
    ``"(id)"`` and ``"(address_id) REFERENCES addresses(id)"`` are kept verbatim.
    This is a convenience check, not SQL parsing.

    Args:
        value: A trimmed fragment.

    Returns:
        The fragment, wrapped when it contains no ``(``.
    """
    if "(" in value:
        return value
    return f"({value})"
