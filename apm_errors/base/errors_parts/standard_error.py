"""
Ready-made error type that controls exactly how it is recorded.

Example::

    reporter.notice_error(
        StandardError(
            message="error message: something went very wrong",
            klass="errors are aggregated by class",
            attributes={"important_number": 97232, "relevant_string": "zap"},
        )
    )
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..interfaces_parts.error_attributer import AttributeMap


@dataclass(eq=False)
class StandardError(Exception):
    """Exception implementing ``ErrorClasser`` and ``ErrorAttributer``.

    Attributes:
        message: Text returned by ``str()``. Empty is accepted.
        klass: Aggregation class. Empty means the reporter derives one from
            the runtime type.
        attributes: Extra context attached to the noticed error. Validated
            downstream just like any other custom attribute.
    """

    message: str = ""
    klass: str = ""
    attributes: Optional[AttributeMap] = None

    def __str__(self) -> str:
        return self.message

    def error_class(self) -> str:
        """Implements :class:`ErrorClasser`."""
        return self.klass

    def error_attributes(self) -> Optional[AttributeMap]:
        """Implements :class:`ErrorAttributer`."""
        return self.attributes


# aggregated under its public import path
StandardError.__module__ = "apm_errors"


__all__ = ["StandardError"]
