"""Pytest configuration for the apm_errors test suite.

Every test runs with the ``APM_*`` environment variables cleared and the
config file cache reset so host settings never leak into assertions.
"""

from __future__ import annotations

import logging
from typing import Iterator

import pytest

from apm_errors.config import reset_config_cache
from apm_errors.config.env import CONFIG_FILE_ENV, ENV_FIELD_MAP


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Clear collector env vars and the parsed config file for each test."""

    for var in (*ENV_FIELD_MAP.values(), CONFIG_FILE_ENV):
        monkeypatch.delenv(var, raising=False)
    reset_config_cache()
    yield
    reset_config_cache()


@pytest.fixture()
def reporter_logger(caplog: pytest.LogCaptureFixture) -> logging.Logger:
    """A propagating logger whose events land in ``caplog``."""

    caplog.set_level(logging.DEBUG)
    logger = logging.getLogger("apm_errors_tests.reporter")
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    return logger
