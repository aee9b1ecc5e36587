"""
Structured exception raised by the error reporter itself.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .error_code import ReportErrorCode


@dataclass(eq=False)
class ReportingError(Exception):
    """Raised when :meth:`ErrorReporter.notice_error` drops an error.

    Attributes:
        code: Why the error was dropped.
        message: Human-readable explanation suitable for logging.
        error_class: Resolved aggregation class, when probing got that far.
    """

    code: ReportErrorCode
    message: str
    error_class: Optional[str] = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"{self.code.value}: {self.message}"


__all__ = ["ReportingError"]
