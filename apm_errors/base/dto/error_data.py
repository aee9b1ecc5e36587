"""Noticed error DTO handed from the reporter to the collector.

External dependencies
---------------------
- Pydantic v2 ``BaseModel`` for validation and ``model_dump`` serialization.

Notes
-----
``to_payload`` produces plain JSON-friendly data; shipping it anywhere is the
host application's business.
"""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, JsonValue

from .stack_frame import StackFrame


class ErrorData(BaseModel):
    """A single error as recorded by the reporter.

    Attributes:
        when: UTC time the error was noticed.
        message: Message after security settings were applied.
        error_class: Aggregation class (custom or derived from the type).
        stack: Frames oldest first; empty when none were available.
        attributes: Error-provided attributes merged with caller extras.
            Keys must be strings and values JSON-compatible.
        app_name: Application name from configuration, if set.
    """

    model_config = ConfigDict(frozen=True)

    when: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    message: str
    error_class: str
    stack: List[StackFrame] = Field(default_factory=list)
    attributes: Dict[str, JsonValue] = Field(default_factory=dict)
    app_name: Optional[str] = None

    def to_payload(self) -> Dict[str, Any]:
        """Return a JSON-compatible dictionary."""
        return self.model_dump(mode="json")


__all__ = ["ErrorData"]
