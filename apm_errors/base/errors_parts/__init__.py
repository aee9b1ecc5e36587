"""Errors parts package public surface.

Prefer importing from ``apm_errors.base.errors`` for the stable surface.
"""

from .error_code import ReportErrorCode
from .reporting_error import ReportingError
from .standard_error import StandardError

__all__ = ["ReportErrorCode", "ReportingError", "StandardError"]
