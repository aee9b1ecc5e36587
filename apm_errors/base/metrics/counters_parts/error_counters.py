"""Thread-safe in-memory counters for noticed and dropped errors."""

from __future__ import annotations

import time
from threading import RLock
from typing import Any, Dict

from .error_counters_snapshot import ErrorCountersSnapshot


class ErrorCounters:
    """Aggregates reporter outcomes by error class and drop reason."""

    __slots__ = (
        "_lock",
        "_noticed",
        "_dropped",
        "_noticed_by_class",
        "_dropped_by_reason",
    )

    def __init__(self) -> None:
        self._lock = RLock()
        self._noticed = 0
        self._dropped = 0
        self._noticed_by_class: Dict[str, int] = {}
        self._dropped_by_reason: Dict[str, int] = {}

    @staticmethod
    def monotonic_ms() -> int:
        """Return current monotonic time in milliseconds."""
        return int(time.monotonic() * 1000)

    def record_noticed(self, error_class: str) -> None:
        """Record an error accepted by the collector."""
        with self._lock:
            self._noticed += 1
            self._noticed_by_class[error_class] = self._noticed_by_class.get(error_class, 0) + 1

    def record_dropped(self, reason: str) -> None:
        """Record an error the reporter refused, keyed by reason code."""
        with self._lock:
            self._dropped += 1
            self._dropped_by_reason[reason] = self._dropped_by_reason.get(reason, 0) + 1

    def snapshot(self, reset: bool = False) -> ErrorCountersSnapshot:
        """Return an immutable snapshot, zeroing all counters when ``reset``."""
        with self._lock:
            snap = ErrorCountersSnapshot(
                noticed=self._noticed,
                dropped=self._dropped,
                noticed_by_class=dict(self._noticed_by_class),
                dropped_by_reason=dict(self._dropped_by_reason),
                generated_at_ms=self.monotonic_ms(),
            )
            if reset:
                self._noticed = 0
                self._dropped = 0
                self._noticed_by_class.clear()
                self._dropped_by_reason.clear()
            return snap

    def as_dict(self, reset: bool = False) -> Dict[str, Any]:
        """Convenience wrapper returning the snapshot as a dictionary."""
        return self.snapshot(reset=reset).to_dict()


__all__ = ["ErrorCounters"]
