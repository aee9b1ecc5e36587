"""Error counters snapshot dataclass.

Immutable snapshot of error reporter counters, designed for serialization
and logging.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class ErrorCountersSnapshot:
    """Point-in-time view of noticed and dropped error counts."""

    noticed: int
    dropped: int
    noticed_by_class: Dict[str, int]
    dropped_by_reason: Dict[str, int]
    generated_at_ms: int

    def to_dict(self) -> Dict[str, Any]:
        """Return a dictionary representation suitable for JSON serialization."""
        return asdict(self)


__all__ = ["ErrorCountersSnapshot"]
