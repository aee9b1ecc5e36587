"""Resolved view of an error after capability probing."""
from __future__ import annotations

from dataclasses import dataclass
from traceback import FrameSummary
from typing import Mapping, Tuple

from ..interfaces_parts.error_attributer import AttributeValue


@dataclass(frozen=True)
class ErrorDetails:
    """Message, class, attributes and stack resolved for one error.

    The ``has_*`` flags record whether a value came from the error itself
    (True) or from a default substituted by the probe (False).
    """

    message: str
    error_class: str
    attributes: Mapping[str, AttributeValue]
    stack: Tuple[FrameSummary, ...]
    has_stack_trace: bool = False
    has_custom_class: bool = False
    has_attributes: bool = False


__all__ = ["ErrorDetails"]
