"""Runtime-checkable protocols shared by builders and renderers."""

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from sqlstitch.formatter import Formatter

__all__ = ("SQLRenderable",)


@runtime_checkable
class SQLRenderable(Protocol):
    """Anything that can be embedded as a sub-statement."""

    def render(self, formatter: "Formatter") -> str:
        """Render to SQL text with the given layout."""
        ...
