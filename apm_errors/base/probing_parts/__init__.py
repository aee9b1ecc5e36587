"""Probing parts: policies, resolved details, stack helpers and the probe."""

from .error_details import ErrorDetails
from .policies import (
    DEFAULT_POLICIES,
    EMPTY_ATTRIBUTES,
    AttributeFilter,
    ClassNamer,
    ProbePolicies,
    default_error_class,
    passthrough_attributes,
)
from .probe import (
    apply_attribute_filter,
    probe_error,
    resolve_error_attributes,
    resolve_error_class,
    resolve_stack_trace,
)
from .stack import capture_stack, traceback_frames

__all__ = [
    "ErrorDetails",
    "ProbePolicies",
    "DEFAULT_POLICIES",
    "EMPTY_ATTRIBUTES",
    "ClassNamer",
    "AttributeFilter",
    "default_error_class",
    "passthrough_attributes",
    "probe_error",
    "apply_attribute_filter",
    "resolve_stack_trace",
    "resolve_error_class",
    "resolve_error_attributes",
    "capture_stack",
    "traceback_frames",
]
