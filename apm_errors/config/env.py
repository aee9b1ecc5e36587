"""apm_errors.config.env
=====================

Environment variable names and readers for the error collector.

Failure Modes
-------------
Readers never raise. Unset variables are simply absent from the returned
mapping; type coercion and validation happen in ``ErrorCollectorConfig``.
"""

from __future__ import annotations

import os
from typing import Any, Dict, List

CONFIG_FILE_ENV = "APM_ERRORS_CONFIG_FILE"

# config field -> environment variable
ENV_FIELD_MAP: Dict[str, str] = {
    "enabled": "APM_ERROR_COLLECTOR_ENABLED",
    "high_security": "APM_HIGH_SECURITY",
    "allow_raw_exception_messages": "APM_ALLOW_RAW_EXCEPTION_MESSAGES",
    "max_errors": "APM_ERROR_COLLECTOR_MAX_ERRORS",
    "ignore_classes": "APM_ERROR_COLLECTOR_IGNORE_CLASSES",
    "app_name": "APM_APP_NAME",
}

_LIST_FIELDS = frozenset({"ignore_classes"})


def split_csv(value: str) -> List[str]:
    """Split a comma separated value, dropping blanks and surrounding spaces."""
    return [part.strip() for part in value.split(",") if part.strip()]


def env_overrides() -> Dict[str, Any]:
    """Return config fields present in the environment.

    List fields are split on commas; everything else is passed through as the
    raw string.
    """
    out: Dict[str, Any] = {}
    for field, var in ENV_FIELD_MAP.items():
        val = os.getenv(var)
        if val is None:
            continue
        out[field] = split_csv(val) if field in _LIST_FIELDS else val.strip()
    return out


__all__ = ["CONFIG_FILE_ENV", "ENV_FIELD_MAP", "split_csv", "env_overrides"]
