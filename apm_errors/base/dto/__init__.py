"""DTOs describing noticed errors."""

from .error_data import ErrorData
from .stack_frame import StackFrame

__all__ = ["ErrorData", "StackFrame"]
