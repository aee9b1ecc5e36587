"""ErrorAttributer Protocol and the attribute value variant.

Attribute values are restricted to a closed set of JSON-friendly types so that
validation rules applied downstream can be written against a finite set of
shapes.
"""

from __future__ import annotations

from typing import Mapping, Optional, Protocol, Union, runtime_checkable

AttributeValue = Union[str, int, float, bool, None, Mapping[str, "AttributeValue"]]
AttributeMap = Mapping[str, AttributeValue]


@runtime_checkable
class ErrorAttributer(Protocol):
    """Errors implementing this attach extra context when noticed.

    Keys and values are not validated here; the collaborator ingesting them
    applies its own rules.
    """

    def error_attributes(self) -> Optional[AttributeMap]:  # pragma: no cover - interface
        """Return string-keyed diagnostic attributes (may be empty or ``None``)."""
        ...


__all__ = ["AttributeValue", "AttributeMap", "ErrorAttributer"]
