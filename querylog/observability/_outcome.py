"""Outcome classification for completed queries."""

from enum import Enum
from typing import Final

__all__ = ("NANOS_PER_MILLI", "QueryOutcome", "classify_outcome", "is_timeout_failure", "latency_millis")

NANOS_PER_MILLI: Final = 1_000_000


class QueryOutcome(Enum):
    """How a query completed. The value doubles as the channel name."""

    NORMAL = "normal"
    SLOW = "slow"
    TIMEOUT = "timeout"
    ERROR = "error"

    def __str__(self) -> str:
        return self.value


def latency_millis(latency_nanos: int) -> int:
    return latency_nanos // NANOS_PER_MILLI


def is_timeout_failure(failure: "BaseException | None") -> bool:
    """Whether ``failure`` reports a client or server side timeout.

    :class:`~querylog.exceptions.QueryTimeoutError` is a :class:`TimeoutError`,
    so driver timeouts and builtin ones are both recognized.
    """
    return isinstance(failure, TimeoutError)


def classify_outcome(latency_ms: int, failure_present: bool, is_timeout: bool, threshold_ms: int) -> QueryOutcome:
    """Map a completed query onto exactly one outcome.

    A failure wins over latency: timeouts are reported as ``TIMEOUT``, any
    other failure as ``ERROR``. Successful queries strictly slower than
    ``threshold_ms`` are ``SLOW``, the rest ``NORMAL``. ``is_timeout`` is only
    considered when a failure is present.
    """
    if failure_present:
        return QueryOutcome.TIMEOUT if is_timeout else QueryOutcome.ERROR
    if latency_ms > threshold_ms:
        return QueryOutcome.SLOW
    return QueryOutcome.NORMAL
