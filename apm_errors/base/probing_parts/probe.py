"""
Capability probing for arbitrary error values.

Each capability is checked on its own with a structural ``isinstance`` test
against the runtime-checkable Protocols, so an error may supply any subset of
stack trace, class and attributes. A capability that is missing, returns an
empty value, or raises while being read counts as absent and the configured
default is used instead. Probing never mutates the error and never raises.
"""
from __future__ import annotations

import logging
from collections.abc import Mapping as MappingABC
from typing import Any, Mapping, Optional, Tuple

from ..interfaces_parts import ErrorAttributer, ErrorClasser, StackTracer
from .error_details import ErrorDetails
from .policies import DEFAULT_POLICIES, EMPTY_ATTRIBUTES, ProbePolicies, default_error_class

_logger = logging.getLogger("apm_errors.probing")


def _message_of(err: object) -> str:
    try:
        return str(err)
    except Exception:  # noqa: BLE001 - a broken __str__ must not break reporting
        _logger.debug("error __str__ raised; using repr", exc_info=True)
        return object.__repr__(err)


def apply_attribute_filter(attributes: Mapping[str, Any], policies: Optional[ProbePolicies] = None) -> Mapping[str, Any]:
    """Run the attribute filter policy; a filter that raises keeps nothing."""
    policies = policies or DEFAULT_POLICIES
    try:
        return policies.attribute_filter(attributes) or EMPTY_ATTRIBUTES
    except Exception:  # noqa: BLE001
        _logger.debug("attribute_filter raised; dropping attributes", exc_info=True)
        return EMPTY_ATTRIBUTES


def _default_class(err: object, policies: ProbePolicies) -> str:
    try:
        return str(policies.class_namer(err))
    except Exception:  # noqa: BLE001
        _logger.debug("class_namer raised on %s", type(err).__name__, exc_info=True)
        return default_error_class(err)


def resolve_stack_trace(err: object) -> Optional[Tuple[Any, ...]]:
    """Return the error's own stack frames, or ``None`` when it provides none."""
    if not isinstance(err, StackTracer):
        return None
    try:
        frames = err.stack_trace()
    except Exception:  # noqa: BLE001
        _logger.debug("stack_trace() raised on %s", type(err).__name__, exc_info=True)
        return None
    if frames is None or isinstance(frames, (str, bytes)):
        return None
    try:
        stack = tuple(frames)
    except TypeError:
        return None
    return stack or None


def resolve_error_class(err: object) -> Optional[str]:
    """Return the error's custom class, or ``None`` when absent or empty."""
    if not isinstance(err, ErrorClasser):
        return None
    try:
        klass = err.error_class()
    except Exception:  # noqa: BLE001
        _logger.debug("error_class() raised on %s", type(err).__name__, exc_info=True)
        return None
    if not klass:
        return None
    return str(klass)


def resolve_error_attributes(err: object) -> Optional[Mapping[str, Any]]:
    """Return the error's attribute mapping, or ``None`` when absent or empty."""
    if not isinstance(err, ErrorAttributer):
        return None
    try:
        attributes = err.error_attributes()
    except Exception:  # noqa: BLE001
        _logger.debug("error_attributes() raised on %s", type(err).__name__, exc_info=True)
        return None
    if not isinstance(attributes, MappingABC) or not attributes:
        return None
    return attributes


def probe_error(err: object, *, policies: Optional[ProbePolicies] = None) -> ErrorDetails:
    """Resolve message, class, attributes and stack trace for ``err``.

    Args:
        err: Any value; only ``str(err)`` is required.
        policies: Replacement defaults. ``DEFAULT_POLICIES`` when omitted.

    Returns:
        ErrorDetails with defaults substituted for every missing capability:
        an empty stack, ``policies.class_namer(err)`` and empty attributes.
        A policy that raises falls back to ``default_error_class`` or to no
        attributes.
    """
    policies = policies or DEFAULT_POLICIES

    stack = resolve_stack_trace(err)
    klass = resolve_error_class(err)
    attributes = resolve_error_attributes(err)

    kept: Mapping[str, Any] = EMPTY_ATTRIBUTES
    if attributes is not None:
        kept = apply_attribute_filter(attributes, policies)

    return ErrorDetails(
        message=_message_of(err),
        error_class=klass if klass is not None else _default_class(err, policies),
        attributes=kept,
        stack=stack if stack is not None else (),
        has_stack_trace=stack is not None,
        has_custom_class=klass is not None,
        has_attributes=attributes is not None,
    )


__all__ = [
    "probe_error",
    "apply_attribute_filter",
    "resolve_stack_trace",
    "resolve_error_class",
    "resolve_error_attributes",
]
