"""
Optional error capability interfaces.

An error handed to :meth:`ErrorReporter.notice_error` only has to render a
message via ``str()``. Each Protocol below is an independent opt-in: the
reporter checks for them structurally with ``isinstance`` and substitutes a
default for any capability that is missing.
"""

from __future__ import annotations

from .interfaces_parts import (
    AttributeMap,
    AttributeValue,
    ErrorAttributer,
    ErrorClasser,
    StackTracer,
)

__all__ = [
    "StackTracer",
    "ErrorClasser",
    "ErrorAttributer",
    "AttributeValue",
    "AttributeMap",
]
