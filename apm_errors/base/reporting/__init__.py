"""Error reporting: the ``notice_error`` entry point and its collector."""

from .collector import ErrorCollector
from .reporter import ErrorReporter

__all__ = ["ErrorCollector", "ErrorReporter"]
