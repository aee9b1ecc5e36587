"""
Error contract base package

Exports the capability interfaces, the ready-made ``StandardError``, the
capability probe and the reporter built on top of them:

- Interfaces: optional ``StackTracer`` / ``ErrorClasser`` / ``ErrorAttributer``
- Errors: ``StandardError`` and the reporter's own ``ReportingError``
- Probing: ``probe_error`` with pluggable ``ProbePolicies``
- Reporting: ``ErrorReporter`` and ``ErrorCollector``
"""

from .dto import ErrorData, StackFrame
from .errors import ReportErrorCode, ReportingError, StandardError
from .interfaces import (
    AttributeMap,
    AttributeValue,
    ErrorAttributer,
    ErrorClasser,
    StackTracer,
)
from .metrics import ErrorCounters, ErrorCountersSnapshot
from .probing import (
    ErrorDetails,
    ProbePolicies,
    capture_stack,
    default_error_class,
    probe_error,
)
from .reporting import ErrorCollector, ErrorReporter

__all__ = [
    # Interfaces
    "StackTracer",
    "ErrorClasser",
    "ErrorAttributer",
    "AttributeValue",
    "AttributeMap",
    # Errors
    "StandardError",
    "ReportingError",
    "ReportErrorCode",
    # Probing
    "ErrorDetails",
    "ProbePolicies",
    "probe_error",
    "default_error_class",
    "capture_stack",
    # DTOs
    "ErrorData",
    "StackFrame",
    # Metrics
    "ErrorCounters",
    "ErrorCountersSnapshot",
    # Reporting
    "ErrorCollector",
    "ErrorReporter",
]
