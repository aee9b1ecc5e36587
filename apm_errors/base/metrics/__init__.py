"""Error reporter metrics package."""

from .counters import ErrorCounters, ErrorCountersSnapshot

__all__ = ["ErrorCounters", "ErrorCountersSnapshot"]
