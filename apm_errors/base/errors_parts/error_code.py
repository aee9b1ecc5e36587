"""
Reasons the error reporter refuses to record an error.

Values are lowercase snake_case and double as the ``reason`` field of
``error.dropped`` log events and the keys of dropped-error counters.
"""
from __future__ import annotations

from enum import Enum


class ReportErrorCode(str, Enum):
    """Normalized codes for errors that were not recorded."""

    NIL_ERROR = "nil_error"
    DISABLED = "disabled"
    IGNORED = "ignored"
    LIMIT_REACHED = "limit_reached"
    INVALID_ATTRIBUTES = "invalid_attributes"


__all__ = ["ReportErrorCode"]
