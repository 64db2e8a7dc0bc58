"""Post-execution query logger.

The executor calls :meth:`QueryLogger.record` once per completed query. The
logger classifies the outcome, picks the matching channel and, only when that
channel is enabled, renders the statement text and (at the detail level) the
bound values. Nothing raised while doing so escapes to the executor.
"""

from contextlib import suppress
from typing import TYPE_CHECKING, Any

from querylog.core.statement import BoundStatement, InternalStatement
from querylog.exceptions import RenderingError
from querylog.observability._config import ObservabilityConfig
from querylog.observability._channels import MESSAGE_TEMPLATES, ChannelGate, default_channels
from querylog.observability._outcome import QueryOutcome, classify_outcome, is_timeout_failure, latency_millis
from querylog.observability._render import render_parameter, render_statement
from querylog.utils.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Mapping

    from querylog.core.statement import Statement

__all__ = ("QueryLogger",)

logger = get_logger("querylog.observability")


class QueryLogger:
    """Logs every completed query to the channel of its outcome.

    The configuration is held by reference: thresholds and limits are read
    again on every call, so changing them takes effect immediately. The logger
    keeps no per-call state and can be shared by any number of threads.
    """

    __slots__ = ("_channels", "config")

    def __init__(
        self,
        config: "ObservabilityConfig | None" = None,
        channels: "Mapping[QueryOutcome, ChannelGate] | None" = None,
    ) -> None:
        """Initialize the logger.

        Args:
            config: Shared configuration; a default one is created when omitted.
            channels: Channel overrides by outcome. Outcomes not listed use
                the ``querylog.query.<outcome>`` loggers.
        """
        self.config = config if config is not None else ObservabilityConfig()
        self._channels = default_channels()
        if channels:
            self._channels.update(channels)

    def channel(self, outcome: QueryOutcome) -> ChannelGate:
        return self._channels[outcome]

    def record(
        self,
        host: Any,
        statement: "Statement",
        failure: "BaseException | None" = None,
        is_timeout: bool = False,
        latency_nanos: int = 0,
    ) -> None:
        """Log one completed query.

        Args:
            host: Node the query ran on, printed with ``str()``.
            statement: The executed statement. Internal driver statements are ignored.
            failure: Exception the query failed with, if any.
            is_timeout: Whether ``failure`` is a client or server timeout.
            latency_nanos: Measured latency in nanoseconds.
        """
        try:
            self._record(host, statement, failure, is_timeout, latency_nanos)
        except Exception:
            with suppress(Exception):
                logger.exception("Unexpected error while logging query")

    def update(self, host: Any, statement: "Statement", failure: "BaseException | None", latency_nanos: int) -> None:
        """Latency tracker entry point; timeouts are recognized from the failure type."""
        self.record(host, statement, failure, is_timeout_failure(failure), latency_nanos)

    def _record(
        self, host: Any, statement: "Statement", failure: "BaseException | None", is_timeout: bool, latency_nanos: int
    ) -> None:
        if isinstance(statement, InternalStatement):
            return

        config = self.config
        latency_ms = latency_millis(latency_nanos)
        outcome = classify_outcome(latency_ms, failure is not None, is_timeout, config.slow_query_threshold_ms)
        channel = self._channels[outcome]
        if not channel.base_enabled():
            return

        message = MESSAGE_TEMPLATES[outcome]
        args: list[Any] = [host, latency_ms, render_statement(statement, config.max_query_string_length)]

        if isinstance(statement, BoundStatement) and statement.values and channel.detail_enabled():
            parameters = self._render_parameters(statement, config.max_parameter_value_length)
            if parameters:
                message += " [%s]"
                args.append(parameters)

        channel.emit(
            message,
            *args,
            failure=failure,
            extra={"db_host": str(host), "latency_ms": latency_ms, "query_outcome": outcome.value},
        )

    @staticmethod
    def _render_parameters(statement: BoundStatement, limit: int) -> str:
        pairs = []
        for name, value in statement.named_values():
            try:
                pairs.append(f"{name}:{render_parameter(value, limit)}")
            except RenderingError:
                logger.debug("Omitting bound value %r from query log", name, exc_info=True)
        return ", ".join(pairs)
