"""Shared, lock-guarded record of per-call latencies."""
import threading
from typing import List


class LatencyLog:
    """Append-only list of round-trip times in milliseconds.

    Every worker appends to the same instance; the lock keeps concurrent
    appends from being lost. Entry order carries no meaning.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._latencies: List[float] = []

    def append(self, latency_ms: float) -> None:
        with self._lock:
            self._latencies.append(latency_ms)

    def snapshot(self) -> List[float]:
        """Return a copy of every recorded latency."""
        with self._lock:
            return list(self._latencies)

    def __len__(self) -> int:
        with self._lock:
            return len(self._latencies)
