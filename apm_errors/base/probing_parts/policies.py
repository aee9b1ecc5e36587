"""
Pluggable defaults applied while probing an error.

Two policies are replaceable by the host application:

- ``class_namer`` derives the aggregation class for errors that do not
  supply one. The default uses the runtime type's qualified name.
- ``attribute_filter`` receives the attributes an error supplied and returns
  what the pipeline keeps. The default copies them into a read-only mapping
  without applying any rules; size or type limits belong to whoever ingests
  the data.
"""
from __future__ import annotations

import builtins
from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Mapping

from ..interfaces_parts.error_attributer import AttributeMap

ClassNamer = Callable[[object], str]
AttributeFilter = Callable[[AttributeMap], AttributeMap]


def default_error_class(err: object) -> str:
    """Return ``module.QualName`` for ``type(err)``; builtins stay unqualified."""
    cls = type(err)
    module = getattr(cls, "__module__", None)
    if not module or module == builtins.__name__:
        return cls.__qualname__
    return f"{module}.{cls.__qualname__}"


def passthrough_attributes(attributes: AttributeMap) -> AttributeMap:
    """Return a read-only shallow copy of ``attributes``."""
    return MappingProxyType(dict(attributes))


@dataclass(frozen=True)
class ProbePolicies:
    """Defaults used when an error does not provide a capability itself."""

    class_namer: ClassNamer = default_error_class
    attribute_filter: AttributeFilter = passthrough_attributes


DEFAULT_POLICIES = ProbePolicies()

EMPTY_ATTRIBUTES: Mapping[str, object] = MappingProxyType({})


__all__ = [
    "ClassNamer",
    "AttributeFilter",
    "ProbePolicies",
    "DEFAULT_POLICIES",
    "EMPTY_ATTRIBUTES",
    "default_error_class",
    "passthrough_attributes",
]
