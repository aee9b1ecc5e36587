"""One-class-per-file parts for error reporter counters."""

from .error_counters import ErrorCounters
from .error_counters_snapshot import ErrorCountersSnapshot

__all__ = ["ErrorCounters", "ErrorCountersSnapshot"]
