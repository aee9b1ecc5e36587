"""Capability interfaces (Protocols) split into single-class modules.

``apm_errors.base.interfaces`` re-exports these as the stable import path.
"""

from .stack_tracer import StackTracer
from .error_classer import ErrorClasser
from .error_attributer import AttributeMap, AttributeValue, ErrorAttributer

__all__ = [
    "StackTracer",
    "ErrorClasser",
    "ErrorAttributer",
    "AttributeValue",
    "AttributeMap",
]
