from typing import Any, Optional

__all__ = (
    "ImproperConfigurationError",
    "QueryLogError",
    "QueryTimeoutError",
    "RenderingError",
    "SerializationError",
)


class QueryLogError(Exception):
    """Base exception class from which all querylog exceptions inherit."""

    detail: str

    def __init__(self, *args: Any, detail: str = "") -> None:
        """Initialize ``QueryLogError``.

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


class ImproperConfigurationError(QueryLogError, ValueError):
    """A configuration value was rejected.

    The previous value of the setting is left untouched when this is raised.
    """

    setting: Optional[str]

    def __init__(self, message: str, setting: Optional[str] = None) -> None:
        super().__init__(message)
        self.setting = setting


class RenderingError(QueryLogError):
    """A bound value could not be rendered as text."""

    def __init__(self, message: Optional[str] = None) -> None:
        if message is None:
            message = "Issues rendering bound value."
        super().__init__(message)


class QueryTimeoutError(QueryLogError, TimeoutError):
    """A query did not complete before the client or server deadline."""

    def __init__(self, message: Optional[str] = None) -> None:
        if message is None:
            message = "Query timed out."
        super().__init__(message)


class SerializationError(QueryLogError):
    """Encoding or decoding of an object failed."""
