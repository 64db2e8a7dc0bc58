"""Latency tracker callbacks invoked by the executor after each query."""

import threading
from collections.abc import Iterator
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from querylog.utils.logging import get_logger

if TYPE_CHECKING:
    from querylog.core.statement import Statement

__all__ = ("LatencyTracker", "LatencyTrackerRegistry")

logger = get_logger("querylog.observability.tracker")


@runtime_checkable
class LatencyTracker(Protocol):
    """Receives every completed query with its latency."""

    def update(
        self, host: Any, statement: "Statement", failure: "BaseException | None", latency_nanos: int
    ) -> None: ...


class LatencyTrackerRegistry:
    """Set of trackers notified after every query.

    Registration copies the tracker tuple under a lock; notification iterates
    whatever tuple is current, without locking.
    """

    __slots__ = ("_lock", "_trackers")

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._trackers: tuple[LatencyTracker, ...] = ()

    def register(self, tracker: LatencyTracker) -> LatencyTracker:
        """Add ``tracker``; registering it again is a no-op."""
        with self._lock:
            if tracker not in self._trackers:
                self._trackers = (*self._trackers, tracker)
        return tracker

    def unregister(self, tracker: LatencyTracker) -> bool:
        """Remove ``tracker``. Returns whether it was registered."""
        with self._lock:
            if tracker not in self._trackers:
                return False
            self._trackers = tuple(registered for registered in self._trackers if registered is not tracker)
        return True

    def update(self, host: Any, statement: "Statement", failure: "BaseException | None", latency_nanos: int) -> None:
        """Notify every registered tracker, isolating failures between them."""
        for tracker in self._trackers:
            try:
                tracker.update(host, statement, failure, latency_nanos)
            except Exception:
                logger.exception("Latency tracker %r failed", tracker)

    def __contains__(self, tracker: object) -> bool:
        return tracker in self._trackers

    def __iter__(self) -> "Iterator[LatencyTracker]":
        return iter(self._trackers)

    def __len__(self) -> int:
        return len(self._trackers)
