"""Error reporter counters.

Re-exports the one-class-per-file implementations from
``metrics/counters_parts``.
"""

from .counters_parts import ErrorCounters, ErrorCountersSnapshot

__all__ = ["ErrorCounters", "ErrorCountersSnapshot"]
