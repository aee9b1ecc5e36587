"""Validated error collector configuration.

External dependencies
---------------------
- Pydantic v2 ``BaseModel``; string values from the environment such as
  ``"false"`` or ``"5"`` are coerced by the model.

Failure modes
-------------
Invalid values raise ``pydantic.ValidationError`` at construction.
"""
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .defaults import (
    DEFAULT_ALLOW_RAW_EXCEPTION_MESSAGES,
    DEFAULT_ENABLED,
    DEFAULT_HIGH_SECURITY,
    DEFAULT_MAX_ERRORS,
)
from .env import split_csv


class ErrorCollectorConfig(BaseModel):
    """Settings consulted by ``ErrorReporter`` for every noticed error.

    Attributes
    ----------
    enabled:
        When False, every ``notice_error`` call is refused.
    high_security:
        Replace messages with a fixed text and drop all custom attributes.
    allow_raw_exception_messages:
        When False, replace messages with the security policy text.
    max_errors:
        Capacity of the collector between harvests.
    ignore_classes:
        Aggregation classes that are never recorded.
    app_name:
        Optional application name stamped on every recorded error.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    enabled: bool = DEFAULT_ENABLED
    high_security: bool = DEFAULT_HIGH_SECURITY
    allow_raw_exception_messages: bool = DEFAULT_ALLOW_RAW_EXCEPTION_MESSAGES
    max_errors: int = Field(default=DEFAULT_MAX_ERRORS, ge=0)
    ignore_classes: List[str] = Field(default_factory=list)
    app_name: Optional[str] = None

    @field_validator("ignore_classes", mode="before")
    @classmethod
    def _split_ignore_classes(cls, value):
        if isinstance(value, str):
            return split_csv(value)
        return value


__all__ = ["ErrorCollectorConfig"]
