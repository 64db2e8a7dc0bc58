"""Output channels for logged queries.

Each outcome has its own logger so that applications can route and filter
them independently with ordinary logging configuration::

    logging.getLogger("querylog.query.slow").setLevel(logging.DEBUG)
    logging.getLogger("querylog.query.normal").setLevel(TRACE)  # with bound values

A channel is gated twice: at its base level a line is built at all, at its
detail level bound parameter values are rendered as well.
"""

import logging
from collections.abc import Mapping
from typing import Any, Final

from querylog.observability._outcome import QueryOutcome
from querylog.utils.logging import TRACE, get_logger

__all__ = ("CHANNEL_LOGGER_PREFIX", "MESSAGE_TEMPLATES", "ChannelGate", "default_channels")

CHANNEL_LOGGER_PREFIX: Final = "querylog.query"

MESSAGE_TEMPLATES: "Final[Mapping[QueryOutcome, str]]" = {
    QueryOutcome.NORMAL: "Query completed normally on host %s, took %s ms: %s",
    QueryOutcome.SLOW: "Query too slow on host %s, took %s ms: %s",
    QueryOutcome.TIMEOUT: "Query timed out on host %s after %s ms: %s",
    QueryOutcome.ERROR: "Query error on host %s after %s ms: %s",
}


class ChannelGate:
    """A named logger plus the two levels that gate it."""

    __slots__ = ("base_level", "detail_level", "logger", "name")

    def __init__(
        self,
        name: str,
        logger: "logging.Logger | None" = None,
        base_level: int = logging.DEBUG,
        detail_level: int = TRACE,
    ) -> None:
        self.name = name
        self.logger = logger if logger is not None else get_logger(f"{CHANNEL_LOGGER_PREFIX}.{name}")
        self.base_level = base_level
        self.detail_level = detail_level

    def base_enabled(self) -> bool:
        return self.logger.isEnabledFor(self.base_level)

    def detail_enabled(self) -> bool:
        return self.logger.isEnabledFor(self.detail_level)

    def emit(
        self,
        message: str,
        *args: Any,
        failure: "BaseException | None" = None,
        extra: "Mapping[str, Any] | None" = None,
    ) -> None:
        """Write one line at the base level, with ``failure`` as its exception info."""
        self.logger.log(self.base_level, message, *args, exc_info=failure, extra=extra)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(name={self.name!r}, logger={self.logger.name!r}, "
            f"base_level={logging.getLevelName(self.base_level)}, "
            f"detail_level={logging.getLevelName(self.detail_level)})"
        )


def default_channels() -> "dict[QueryOutcome, ChannelGate]":
    """One channel per outcome, under ``querylog.query.<outcome>``."""
    return {outcome: ChannelGate(outcome.value) for outcome in QueryOutcome}
