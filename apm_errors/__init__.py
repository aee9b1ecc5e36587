"""apm_errors package

Error-reporting contract for an application-performance-monitoring client.

Purpose:
    Let application code enrich the errors it reports (stack trace,
    aggregation class, extra attributes) without a mandatory base class.
    Any value works; each capability is an independent opt-in.

Public API (re-exported):
    - Version: ``__version__``
    - Interfaces: :class:`StackTracer`, :class:`ErrorClasser`,
      :class:`ErrorAttributer`
    - Errors: :class:`StandardError`, :class:`ReportingError`,
      :class:`ReportErrorCode`
    - Probing: :func:`probe_error`, :class:`ProbePolicies`,
      :func:`capture_stack`
    - Reporting: :class:`ErrorReporter`, :class:`ErrorData`
    - Config: :func:`get_collector_config`, :class:`ErrorCollectorConfig`

Example::

    from apm_errors import ErrorReporter, StandardError

    reporter = ErrorReporter()
    reporter.notice_error(
        StandardError("payment declined", klass="PaymentDeclined", attributes={"amount": 42})
    )
"""

from .base import (
    AttributeMap,
    AttributeValue,
    ErrorAttributer,
    ErrorClasser,
    ErrorCollector,
    ErrorData,
    ErrorDetails,
    ErrorReporter,
    ProbePolicies,
    ReportErrorCode,
    ReportingError,
    StackFrame,
    StackTracer,
    StandardError,
    capture_stack,
    default_error_class,
    probe_error,
)
from .config import ErrorCollectorConfig, get_collector_config

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "StackTracer",
    "ErrorClasser",
    "ErrorAttributer",
    "AttributeValue",
    "AttributeMap",
    "StandardError",
    "ReportingError",
    "ReportErrorCode",
    "ErrorDetails",
    "ProbePolicies",
    "probe_error",
    "default_error_class",
    "capture_stack",
    "ErrorData",
    "StackFrame",
    "ErrorCollector",
    "ErrorReporter",
    "ErrorCollectorConfig",
    "get_collector_config",
]
