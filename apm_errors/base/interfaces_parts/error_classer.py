"""ErrorClasser Protocol (single-class module).

Capability for errors that choose the class they are aggregated under.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ErrorClasser(Protocol):
    """Errors implementing this control their aggregation class.

    Returning an empty string means "no custom classification"; the reporting
    pipeline then falls back to a class derived from the runtime type.
    """

    def error_class(self) -> str:  # pragma: no cover - interface
        """Return the aggregation class label."""
        ...


__all__ = ["ErrorClasser"]
