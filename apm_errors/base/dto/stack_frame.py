"""Serializable stack frame DTO."""

from __future__ import annotations

from traceback import FrameSummary
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict


class StackFrame(BaseModel):
    """One frame of a noticed error's stack trace.

    Attributes:
        filename: Source file of the frame (or ``"<unknown>"``).
        lineno: Line number when known.
        function: Function name, or the ``repr`` of an opaque frame value.
        line: Source line text when available.
    """

    model_config = ConfigDict(frozen=True)

    filename: str = "<unknown>"
    lineno: Optional[int] = None
    function: str = "<unknown>"
    line: Optional[str] = None

    @classmethod
    def from_frame(cls, frame: Any) -> "StackFrame":
        """Convert a ``FrameSummary`` (or an already built frame) to a DTO.

        Frame values of any other shape are kept as their ``repr`` so a
        custom ``stack_trace()`` never breaks conversion.
        """
        if isinstance(frame, StackFrame):
            return frame
        if isinstance(frame, FrameSummary):
            return cls(
                filename=frame.filename,
                lineno=frame.lineno,
                function=frame.name,
                line=frame.line or None,
            )
        return cls(function=repr(frame))


__all__ = ["StackFrame"]
