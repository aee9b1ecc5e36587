"""Unit coverage for structured logging utilities."""

from __future__ import annotations

import io
import json
import logging

from apm_errors.base.log_support import JsonFormatter
from apm_errors.base.logging import LogContext, configure_logger, get_logger, log_event


def _capture_base_handler() -> io.StringIO:
    base_logger = logging.getLogger("apm_errors")
    stream = io.StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter("%(message)s"))
    setattr(handler, "_apm_errors_console_handler", True)
    handler.setLevel(base_logger.level)
    base_logger.handlers[:] = [handler]
    return stream


def _reset_base_logger() -> None:
    base = logging.getLogger("apm_errors")
    base.handlers[:] = []
    setattr(base, "_apm_errors_logger_initialized", False)


def test_get_logger_env_overrides_level(monkeypatch, capsys):
    monkeypatch.setenv("APM_ERRORS_LOG_LEVEL", "ERROR")
    _reset_base_logger()
    try:
        logger = get_logger(name="apm_errors.test", json_mode=True, level=logging.DEBUG)

        logger.info("hello")
        assert capsys.readouterr().err == ""
        logger.error("fail")
        data = json.loads(capsys.readouterr().err.strip())
        assert data["level"] == "ERROR"  # nosec B101 - asserts are appropriate in unit tests
        assert data["msg"] == "fail"
    finally:
        _reset_base_logger()


def test_log_event_payload_merges_context_and_drops_none():
    logger = get_logger(name="apm_errors.test.events", json_mode=False)
    configure_logger(level=logging.INFO, json_mode=False)
    stream = _capture_base_handler()

    log_event(logger, "error.noticed", LogContext(app_name="svc", error_class="E"), count=2, missing=None)
    payload = json.loads(stream.getvalue().strip())
    assert payload == {"event": "error.noticed", "app_name": "svc", "error_class": "E", "count": 2}


def test_log_event_keep_none():
    logger = get_logger(name="apm_errors.test.none", json_mode=False)
    configure_logger(level=logging.INFO, json_mode=False)
    stream = _capture_base_handler()

    log_event(logger, "error.harvest", keep_none=True, count=None)
    payload = json.loads(stream.getvalue().strip())
    assert payload == {"event": "error.harvest", "count": None}


def test_log_context_flattens_extra():
    ctx = LogContext(app_name="a", extra={"region": "eu", "skip": None})
    assert ctx.to_dict() == {"app_name": "a", "region": "eu"}


def test_json_formatter_hoists_event_payload():
    formatter = JsonFormatter()
    record = logging.LogRecord(
        name="apm_errors.test.json",
        level=logging.INFO,
        pathname=__file__,
        lineno=0,
        msg=json.dumps({"event": "error.dropped", "reason": "ignored"}),
        args=(),
        exc_info=None,
    )
    payload = json.loads(formatter.format(record))
    assert payload["reason"] == "ignored"
    assert payload["logger"] == "apm_errors.test.json"
    assert "msg" not in payload


def test_child_logger_respects_warning_level():
    logger = get_logger(name="apm_errors.test.levels", json_mode=False)
    stream = _capture_base_handler()

    configure_logger(level=logging.WARNING, json_mode=False)
    logger.info("hidden")
    assert stream.getvalue() == ""

    logger.error("visible")
    lines = [ln for ln in stream.getvalue().splitlines() if ln]
    assert lines == ["visible"]


def test_configure_logger_file_handler(tmp_path):
    log_path = tmp_path / "logs" / "apm.log"
    logger = configure_logger(level="INFO", file_path=str(log_path))
    try:
        log_event(logger, "error.harvest", count=1)
        for h in logger.handlers:
            h.flush()
        line = log_path.read_text(encoding="utf-8").strip().splitlines()[-1]
        assert json.loads(line)["event"] == "error.harvest"
    finally:
        configure_logger(file_path=None)
    assert not any(getattr(h, "_apm_errors_file_handler", False) for h in logger.handlers)
