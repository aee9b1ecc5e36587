"""Layered collector configuration: defaults, file, env, overrides."""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from apm_errors.config import ErrorCollectorConfig, get_collector_config, reset_config_cache
from apm_errors.config.env import env_overrides, split_csv


def test_defaults():
    cfg = get_collector_config()
    assert cfg.enabled is True
    assert cfg.high_security is False
    assert cfg.allow_raw_exception_messages is True
    assert cfg.max_errors == 20
    assert cfg.ignore_classes == []
    assert cfg.app_name is None


def test_env_vars_are_coerced(monkeypatch):
    monkeypatch.setenv("APM_ERROR_COLLECTOR_ENABLED", "false")
    monkeypatch.setenv("APM_HIGH_SECURITY", "1")
    monkeypatch.setenv("APM_ERROR_COLLECTOR_MAX_ERRORS", " 5 ")
    monkeypatch.setenv("APM_ERROR_COLLECTOR_IGNORE_CLASSES", "KeyError, myapp.Expected ,,")
    monkeypatch.setenv("APM_APP_NAME", "svc")

    cfg = get_collector_config()
    assert cfg.enabled is False
    assert cfg.high_security is True
    assert cfg.max_errors == 5
    assert cfg.ignore_classes == ["KeyError", "myapp.Expected"]
    assert cfg.app_name == "svc"


def test_env_overrides_only_reports_set_variables(monkeypatch):
    assert env_overrides() == {}
    monkeypatch.setenv("APM_APP_NAME", "svc")
    assert env_overrides() == {"app_name": "svc"}


def test_json_file_section(tmp_path, monkeypatch):
    path = tmp_path / "apm.json"
    path.write_text(
        json.dumps({"app_name": "from-file", "error_collector": {"max_errors": 7, "ignore_classes": ["A"]}}),
        encoding="utf-8",
    )
    monkeypatch.setenv("APM_ERRORS_CONFIG_FILE", str(path))

    cfg = get_collector_config()
    assert cfg.max_errors == 7
    assert cfg.ignore_classes == ["A"]
    assert cfg.app_name == "from-file"


def test_yaml_file_section(tmp_path, monkeypatch):
    path = tmp_path / "apm.yaml"
    path.write_text(
        "error_collector:\n"
        "  high_security: true\n"
        "  ignore_classes:\n"
        "    - myapp.errors.Expected\n"
        "  app_name: yaml-app\n",
        encoding="utf-8",
    )
    monkeypatch.setenv("APM_ERRORS_CONFIG_FILE", str(path))

    cfg = get_collector_config()
    assert cfg.high_security is True
    assert cfg.ignore_classes == ["myapp.errors.Expected"]
    assert cfg.app_name == "yaml-app"


def test_precedence_file_then_env_then_overrides(tmp_path, monkeypatch):
    path = tmp_path / "apm.json"
    path.write_text(json.dumps({"error_collector": {"max_errors": 7, "app_name": "file"}}), encoding="utf-8")
    monkeypatch.setenv("APM_ERRORS_CONFIG_FILE", str(path))
    monkeypatch.setenv("APM_ERROR_COLLECTOR_MAX_ERRORS", "9")

    cfg = get_collector_config()
    assert cfg.max_errors == 9
    assert cfg.app_name == "file"

    cfg = get_collector_config({"max_errors": 11, "app_name": None})
    assert cfg.max_errors == 11
    assert cfg.app_name == "file"


def test_file_is_cached_until_reset(tmp_path, monkeypatch):
    path = tmp_path / "apm.json"
    path.write_text(json.dumps({"error_collector": {"max_errors": 3}}), encoding="utf-8")
    monkeypatch.setenv("APM_ERRORS_CONFIG_FILE", str(path))
    assert get_collector_config().max_errors == 3

    path.write_text(json.dumps({"error_collector": {"max_errors": 4}}), encoding="utf-8")
    assert get_collector_config().max_errors == 3
    reset_config_cache()
    assert get_collector_config().max_errors == 4


def test_missing_or_garbage_file_is_ignored(tmp_path, monkeypatch):
    monkeypatch.setenv("APM_ERRORS_CONFIG_FILE", str(tmp_path / "absent.json"))
    assert get_collector_config().max_errors == 20

    reset_config_cache()
    garbage = tmp_path / "garbage.yaml"
    garbage.write_text("- just\n- a list\n", encoding="utf-8")
    monkeypatch.setenv("APM_ERRORS_CONFIG_FILE", str(garbage))
    assert get_collector_config().max_errors == 20


def test_invalid_values_raise_validation_error(monkeypatch):
    with pytest.raises(ValidationError):
        get_collector_config({"max_errors": -1})
    monkeypatch.setenv("APM_ERROR_COLLECTOR_ENABLED", "not-a-bool")
    with pytest.raises(ValidationError):
        get_collector_config()


def test_ignore_classes_accepts_csv_string():
    cfg = ErrorCollectorConfig(ignore_classes="A, B")
    assert cfg.ignore_classes == ["A", "B"]
    assert split_csv(" , ") == []
