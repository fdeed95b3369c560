from typing import Any, Optional

__all__ = ("ImproperConfigurationError", "SQLBuilderError", "SQLStitchError", "UnsupportedDialectFeatureError")


class SQLStitchError(Exception):
    """Base exception class from which all sqlstitch exceptions inherit."""

    detail: str

    def __init__(self, *args: Any, detail: str = "") -> None:
        """Initialize ``SQLStitchError``.

        Args:
            *args: args are converted to :class:`str` before passing to :class:`Exception`
            detail: detail of the exception.
        """
        str_args = [str(arg) for arg in args if arg]
        if not detail:
            if str_args:
                detail, *str_args = str_args
            elif hasattr(self, "detail"):
                detail = self.detail
        self.detail = detail
        super().__init__(*str_args)

    def __repr__(self) -> str:
        if self.detail:
            return f"{self.__class__.__name__} - {self.detail}"
        return self.__class__.__name__

    def __str__(self) -> str:
        return " ".join((*self.args, self.detail)).strip()


class ImproperConfigurationError(SQLStitchError):
    """Improper configuration error.

    Raised when a dialect cannot be resolved or does not offer a whole statement kind.
    """


class SQLBuilderError(SQLStitchError):
    """Issues assembling SQL statements."""

    def __init__(self, message: Optional[str] = None) -> None:
        if message is None:
            message = "Issues assembling SQL statement."
        super().__init__(message)


class UnsupportedDialectFeatureError(SQLBuilderError):
    """A clause was addressed that the builder's dialect does not provide."""

    def __init__(self, feature: str, dialect_name: str) -> None:
        self.feature = feature
        self.dialect_name = dialect_name
        super().__init__(f"Feature {feature!r} is not available for dialect {dialect_name!r}")
