"""Capability probing public surface.

Re-exports ``apm_errors.base.probing_parts`` under a stable import path.
"""

from .probing_parts import (
    DEFAULT_POLICIES,
    EMPTY_ATTRIBUTES,
    AttributeFilter,
    ClassNamer,
    ErrorDetails,
    ProbePolicies,
    capture_stack,
    default_error_class,
    passthrough_attributes,
    apply_attribute_filter,
    probe_error,
    resolve_error_attributes,
    resolve_error_class,
    resolve_stack_trace,
    traceback_frames,
)

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
