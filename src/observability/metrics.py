import threading
import time
from collections import deque
from enum import Enum


class Outcome(Enum):
    ACCEPTED = "accepted"
    AUTH_FAILED = "auth_failed"
    MALFORMED = "malformed"
    HANDLER_FAILED = "handler_failed"


class MetricsCollector:
    """Counts webhook processing outcomes over a rolling window."""

    def __init__(self, window_seconds: float = 300):
        self._window_seconds = window_seconds
        self._events: dict[Outcome, deque[float]] = {outcome: deque() for outcome in Outcome}  # timestamps
        self._lock = threading.Lock()

    def record(self, outcome: Outcome) -> None:
        with self._lock:
            now = time.monotonic()
            self._prune(now)
            self._events[outcome].append(now)

    def _prune(self, now: float) -> None:
        """Drop expired timestamps. Caller must hold the lock."""
        cutoff = now - self._window_seconds
        for data in self._events.values():
            while data and data[0] < cutoff:
                data.popleft()

    def count_in_window(self, outcome: Outcome) -> int:
        with self._lock:
            self._prune(time.monotonic())
            return len(self._events[outcome])

    def total_in_window(self) -> int:
        with self._lock:
            self._prune(time.monotonic())
            return sum(len(data) for data in self._events.values())

    def rejection_rate(self) -> float:
        """Share of requests in the window that failed authentication (0.0 to 1.0)."""
        with self._lock:
            self._prune(time.monotonic())
            total = sum(len(data) for data in self._events.values())
            if total == 0:
                return 0.0
            return len(self._events[Outcome.AUTH_FAILED]) / total

    def reset(self) -> None:
        with self._lock:
            for data in self._events.values():
                data.clear()
