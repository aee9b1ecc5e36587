"""StackTracer Protocol (single-class module).

Capability for errors that carry the call stack captured when they were
constructed.
"""

from __future__ import annotations

from traceback import FrameSummary
from typing import Protocol, Sequence, runtime_checkable


@runtime_checkable
class StackTracer(Protocol):
    """Errors implementing this provide their own stack trace when noticed.

    Frames are ordered oldest first, matching ``traceback.extract_stack``.
    """

    def stack_trace(self) -> Sequence[FrameSummary]:  # pragma: no cover - interface
        """Return the frames captured at error-construction time."""
        ...


__all__ = ["StackTracer"]
