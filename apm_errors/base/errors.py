"""Error types public surface.

Re-exports the one-class-per-file implementations under
``apm_errors.base.errors_parts``.
"""

from .errors_parts.error_code import ReportErrorCode
from .errors_parts.reporting_error import ReportingError
from .errors_parts.standard_error import StandardError

__all__ = ["ReportErrorCode", "ReportingError", "StandardError"]
