"""Thread-safe bounded buffer of noticed errors awaiting harvest."""

from __future__ import annotations

from threading import RLock
from typing import List

from ..dto import ErrorData


class ErrorCollector:
    """Holds at most ``max_errors`` records between harvests.

    ``add`` never blocks and never evicts: once full, new records are
    refused until :meth:`harvest` drains the buffer.
    """

    __slots__ = ("_lock", "_items", "_max_errors")

    def __init__(self, max_errors: int) -> None:
        if max_errors < 0:
            raise ValueError("max_errors must be >= 0")
        self._lock = RLock()
        self._items: List[ErrorData] = []
        self._max_errors = max_errors

    @property
    def max_errors(self) -> int:
        return self._max_errors

    def add(self, data: ErrorData) -> bool:
        """Append ``data``; return False when the collector is full."""
        with self._lock:
            if len(self._items) >= self._max_errors:
                return False
            self._items.append(data)
            return True

    def harvest(self) -> List[ErrorData]:
        """Drain and return all records in the order they were added."""
        with self._lock:
            items, self._items = self._items, []
            return items

    def is_full(self) -> bool:
        with self._lock:
            return len(self._items) >= self._max_errors

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)


__all__ = ["ErrorCollector"]
