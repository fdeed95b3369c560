"""Layout primitives shared by every statement renderer."""

from dataclasses import dataclass, replace

__all__ = ("COMPACT", "PRETTY", "Formatter")


@dataclass(frozen=True, slots=True)
class Formatter:
    """The four strings that decide how rendered clauses are laid out.

    ``COMPACT`` keeps the statement on a single line, ``PRETTY`` breaks it into
    indented lines. Instances are immutable and safe to share between threads.
    """

    item_separator: str = ", "
    """Placed between items of an accumulating clause."""
    line_break: str = ""
    """Placed after every rendered clause."""
    indent: str = ""
    """Placed before nested content such as conditions."""
    space: str = " "
    """Placed between tokens."""

    @property
    def is_multiline(self) -> bool:
        return bool(self.line_break)

    def nested(self) -> "Formatter":
        """Return the formatter used for statements embedded one level deeper.

        Returns:
            A formatter whose line breaks carry one extra indentation step.
        """
        if not self.line_break:
            return self
        return replace(
            self,
            item_separator=self.item_separator + self.indent,
            line_break=self.line_break + self.indent,
        )


COMPACT = Formatter(item_separator=", ", line_break="", indent="", space=" ")
PRETTY = Formatter(item_separator=",\n", line_break="\n", indent="  ", space=" ")
