"""Public observability exports."""

from querylog.observability._budget import ELLIPSIS, RenderBudget
from querylog.observability._channels import CHANNEL_LOGGER_PREFIX, MESSAGE_TEMPLATES, ChannelGate, default_channels
from querylog.observability._config import (
    DEFAULT_MAX_PARAMETER_VALUE_LENGTH,
    DEFAULT_MAX_QUERY_STRING_LENGTH,
    DEFAULT_SLOW_QUERY_THRESHOLD_MS,
    UNLIMITED,
    ObservabilityConfig,
)
from querylog.observability._logger import QueryLogger
from querylog.observability._outcome import QueryOutcome, classify_outcome, is_timeout_failure, latency_millis
from querylog.observability._render import NULL_VALUE, UNKNOWN_STATEMENT, render_parameter, render_statement
from querylog.observability._tracker import LatencyTracker, LatencyTrackerRegistry

__all__ = (
    "CHANNEL_LOGGER_PREFIX",
    "DEFAULT_MAX_PARAMETER_VALUE_LENGTH",
    "DEFAULT_MAX_QUERY_STRING_LENGTH",
    "DEFAULT_SLOW_QUERY_THRESHOLD_MS",
    "ELLIPSIS",
    "MESSAGE_TEMPLATES",
    "NULL_VALUE",
    "UNKNOWN_STATEMENT",
    "UNLIMITED",
    "ChannelGate",
    "LatencyTracker",
    "LatencyTrackerRegistry",
    "ObservabilityConfig",
    "QueryLogger",
    "QueryOutcome",
    "RenderBudget",
    "classify_outcome",
    "default_channels",
    "is_timeout_failure",
    "latency_millis",
    "render_parameter",
    "render_statement",
)
