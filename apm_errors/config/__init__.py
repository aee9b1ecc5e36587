"""Unified configuration layer for the error collector.

Goals
-----
* Centralize defaults (see ``defaults.py``).
* Merge sources in a predictable order (later wins):
    1. Built-in defaults
    2. The ``error_collector`` section of an external JSON or YAML file
       pointed to by ``APM_ERRORS_CONFIG_FILE``
    3. Environment variables (``APM_ERROR_COLLECTOR_ENABLED``, ...)
    4. In-code overrides passed to the helper
* Provide a single call site: ``get_collector_config(overrides)``.

External Config File (Optional)
-------------------------------
JSON is tried first, then YAML. Structure example:

```
error_collector:
  enabled: true
  max_errors: 50
  ignore_classes:
    - myapp.errors.ExpectedError
app_name: checkout-service
```

A top-level ``app_name`` is used when the section does not set one.

Public API
----------
* get_collector_config(overrides: dict | None = None) -> ErrorCollectorConfig
* reset_config_cache() -> None
"""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .collector_config import ErrorCollectorConfig
from .defaults import CONFIG_SECTION
from .env import CONFIG_FILE_ENV, env_overrides

_FILE_CACHE: Optional[Dict[str, Any]] = None


def _parse_config_text(text: str) -> Dict[str, Any]:
    try:
        data = json.loads(text)
    except ValueError:
        try:
            data = yaml.safe_load(text) or {}
        except yaml.YAMLError:
            data = {}
    return data if isinstance(data, dict) else {}


def _load_external_config() -> Dict[str, Any]:
    global _FILE_CACHE
    if _FILE_CACHE is not None:
        return _FILE_CACHE
    path = os.getenv(CONFIG_FILE_ENV)
    if not path:
        _FILE_CACHE = {}
        return _FILE_CACHE
    p = Path(path).expanduser()
    if not p.is_file():
        _FILE_CACHE = {}
        return _FILE_CACHE
    _FILE_CACHE = _parse_config_text(p.read_text(encoding="utf-8"))
    return _FILE_CACHE


def _file_section() -> Dict[str, Any]:
    data = _load_external_config()
    section = data.get(CONFIG_SECTION)
    out: Dict[str, Any] = dict(section) if isinstance(section, dict) else {}
    if "app_name" not in out and isinstance(data.get("app_name"), str):
        out["app_name"] = data["app_name"]
    return out


def reset_config_cache() -> None:
    """Forget the parsed config file so the next lookup re-reads it."""
    global _FILE_CACHE
    _FILE_CACHE = None


def get_collector_config(overrides: Optional[Dict[str, Any]] = None) -> ErrorCollectorConfig:
    """Return the merged, validated error collector configuration.

    Merge order (later wins): defaults -> external config -> env vars -> overrides

    Raises:
        pydantic.ValidationError: When a merged value is invalid.
    """
    cfg: Dict[str, Any] = {}
    cfg |= _file_section()
    cfg |= env_overrides()
    if overrides:
        cfg |= {k: v for k, v in overrides.items() if v is not None}
    return ErrorCollectorConfig.model_validate(cfg)


__all__ = [
    "ErrorCollectorConfig",
    "get_collector_config",
    "reset_config_cache",
]
