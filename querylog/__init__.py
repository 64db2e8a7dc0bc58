"""querylog: length-bounded query logging for database drivers."""

from querylog import core, exceptions, observability
from querylog.core import (
    INTERNAL_STATEMENT,
    BatchStatement,
    BatchType,
    BoundStatement,
    BoundValue,
    ColumnDefinition,
    DataType,
    Host,
    PreparedStatement,
    SimpleStatement,
    Statement,
)
from querylog.exceptions import ImproperConfigurationError, QueryLogError, QueryTimeoutError, RenderingError
from querylog.observability import (
    ChannelGate,
    LatencyTracker,
    LatencyTrackerRegistry,
    ObservabilityConfig,
    QueryLogger,
    QueryOutcome,
)
from querylog.utils.logging import TRACE, configure_logging, get_logger

__all__ = (
    "INTERNAL_STATEMENT",
    "TRACE",
    "BatchStatement",
    "BatchType",
    "BoundStatement",
    "BoundValue",
    "ChannelGate",
    "ColumnDefinition",
    "DataType",
    "Host",
    "ImproperConfigurationError",
    "LatencyTracker",
    "LatencyTrackerRegistry",
    "ObservabilityConfig",
    "PreparedStatement",
    "QueryLogError",
    "QueryLogger",
    "QueryOutcome",
    "QueryTimeoutError",
    "RenderingError",
    "SimpleStatement",
    "Statement",
    "configure_logging",
    "core",
    "exceptions",
    "get_logger",
    "observability",
)
