"""Unit coverage for the ready-made StandardError type."""

from __future__ import annotations

import pytest

from apm_errors.base.errors import StandardError
from apm_errors.base.interfaces import ErrorAttributer, ErrorClasser, StackTracer
from apm_errors.base.probing import default_error_class


def test_accessors_return_constructor_inputs_verbatim():
    attrs = {"important_number": 97232, "relevant_string": "zap"}
    err = StandardError(message="m", klass="c", attributes=attrs)

    assert str(err) == "m"
    assert err.message == "m"
    assert err.error_class() == "c"
    assert err.error_attributes() is attrs


def test_empty_message_is_accepted():
    err = StandardError(message="")
    assert str(err) == ""  # nosec B101 - assert is appropriate in unit tests


def test_all_defaults():
    err = StandardError()
    assert str(err) == ""
    assert err.error_class() == ""
    assert not err.error_attributes()


def test_satisfies_classer_and_attributer_but_not_stack_tracer():
    err = StandardError("boom", "Boom")
    assert isinstance(err, ErrorClasser)
    assert isinstance(err, ErrorAttributer)
    assert not isinstance(err, StackTracer)


def test_can_be_raised_and_caught_as_exception():
    with pytest.raises(StandardError) as info:
        raise StandardError("went wrong", klass="Payment")
    assert str(info.value) == "went wrong"
    assert info.value.error_class() == "Payment"


def test_accessors_do_not_mutate_state():
    err = StandardError("m", "c", {"k": 1})
    for _ in range(3):
        assert err.error_attributes() == {"k": 1}
        assert err.error_class() == "c"
    assert err.attributes == {"k": 1}


def test_default_class_name_uses_public_import_path():
    import apm_errors

    assert StandardError.__module__ == "apm_errors"
    assert apm_errors.StandardError is StandardError
    assert default_error_class(StandardError()) == "apm_errors.StandardError"
