from __future__ import annotations

import logging

import pytest

import precheck.guards
from precheck import (
    InvalidArgument,
    require_expression,
    require_named_non_null,
    require_named_non_null_or_empty,
    require_non_null,
    require_non_null_or_empty,
)

PARAMETER = "parameter"
ERROR_MESSAGE = "This is the error message!"
PARAMETER_NAME = "parameterName"
TEMPLATE = "the value of %s is %d"


def test_guards_module_is_not_instantiable() -> None:
    assert not callable(precheck.guards)
    assert not hasattr(precheck.guards, "__call__")


def test_require_non_null_returns_same_instance() -> None:
    para = ["value"]
    assert require_non_null(para) is para
    assert require_non_null(para, ERROR_MESSAGE) is para
    assert require_non_null(para, TEMPLATE, PARAMETER, 1.0) is para


def test_require_non_null_accepts_falsy_values() -> None:
    assert require_non_null(0) == 0
    assert require_non_null("") == ""
    assert require_non_null(False) is False


def test_require_non_null_default_message() -> None:
    with pytest.raises(InvalidArgument) as excinfo:
        require_non_null(None)
    assert str(excinfo.value) == "must not be null!"


def test_require_non_null_literal_message() -> None:
    with pytest.raises(InvalidArgument) as excinfo:
        require_non_null(None, ERROR_MESSAGE)
    assert excinfo.value.message == ERROR_MESSAGE


def test_require_non_null_template_message() -> None:
    with pytest.raises(InvalidArgument) as excinfo:
        require_non_null(None, TEMPLATE, PARAMETER, 1)
    assert str(excinfo.value) == "the value of parameter is 1"


def test_require_non_null_blank_message_falls_back() -> None:
    with pytest.raises(InvalidArgument, match="^error message is empty!$"):
        require_non_null(None, "   ")


def test_invalid_argument_is_value_error() -> None:
    with pytest.raises(ValueError):
        require_non_null(None)


def test_require_non_null_or_empty_returns_same_instance() -> None:
    para = PARAMETER
    assert require_non_null_or_empty(para) is para
    assert require_non_null_or_empty(para, ERROR_MESSAGE) is para
    assert require_non_null_or_empty(para, TEMPLATE, PARAMETER, 1.0) is para


@pytest.mark.parametrize("value", [None, "", [], {}, (), set()])
def test_require_non_null_or_empty_default_message(value: object) -> None:
    with pytest.raises(InvalidArgument) as excinfo:
        require_non_null_or_empty(value)
    assert str(excinfo.value) == "must not be null or empty!"


def test_require_non_null_or_empty_custom_messages() -> None:
    with pytest.raises(InvalidArgument, match=f"^{ERROR_MESSAGE}$"):
        require_non_null_or_empty(None, ERROR_MESSAGE)
    with pytest.raises(InvalidArgument, match="^the value of parameter is 1$"):
        require_non_null_or_empty("", TEMPLATE, PARAMETER, 1)


def test_require_non_null_or_empty_refuses_uncheckable_value() -> None:
    with pytest.raises(InvalidArgument, match="^parameter must be type Object$"):
        require_non_null_or_empty(42)


def test_require_named_non_null() -> None:
    para = PARAMETER
    assert require_named_non_null(para, PARAMETER_NAME) is para
    with pytest.raises(InvalidArgument) as excinfo:
        require_named_non_null(None, PARAMETER_NAME)
    assert str(excinfo.value) == "parameter 'parameterName' must not be null!"


@pytest.mark.parametrize("value", [None, ""])
def test_require_named_non_null_or_empty(value: object) -> None:
    with pytest.raises(InvalidArgument) as excinfo:
        require_named_non_null_or_empty(value, PARAMETER_NAME)
    assert str(excinfo.value) == "parameter 'parameterName' must not be null or empty"


def test_require_named_non_null_or_empty_returns_same_instance() -> None:
    para = {"k": "v"}
    assert require_named_non_null_or_empty(para, PARAMETER_NAME) is para


def test_require_expression_true_is_noop() -> None:
    require_expression(True)
    require_expression(True, ERROR_MESSAGE)
    require_expression(1 < 2, TEMPLATE, PARAMETER, 1)


def test_require_expression_false_messages() -> None:
    with pytest.raises(InvalidArgument, match="^expression not valid!$"):
        require_expression(False)
    with pytest.raises(InvalidArgument, match=f"^{ERROR_MESSAGE}$"):
        require_expression(False, ERROR_MESSAGE)
    with pytest.raises(InvalidArgument, match="^the value of parameter is 1$"):
        require_expression(False, TEMPLATE, PARAMETER, 1)


def test_require_expression_converts_non_string_message() -> None:
    with pytest.raises(InvalidArgument, match="^42$"):
        require_expression(False, 42)
    with pytest.raises(InvalidArgument, match="^error message is empty!$"):
        require_expression(False, "")


def test_literal_message_percent_is_not_formatted() -> None:
    with pytest.raises(InvalidArgument) as excinfo:
        require_expression(False, "100% wrong")
    assert str(excinfo.value) == "100% wrong"


def test_failure_is_logged_with_check_name(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="precheck.guards"):
        with pytest.raises(InvalidArgument):
            require_named_non_null(None, PARAMETER_NAME)
    records = [r for r in caplog.records if r.name == "precheck.guards"]
    assert len(records) == 1
    assert records[0].getMessage() == "parameter 'parameterName' must not be null!"
    assert getattr(records[0], "check", None) == "require_named_non_null"


def test_refused_value_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="precheck.guards"):
        with pytest.raises(InvalidArgument, match="^parameter must be type Object$"):
            require_non_null_or_empty(42)
        with pytest.raises(InvalidArgument):
            require_named_non_null_or_empty(3.5, PARAMETER_NAME)
    checks = [getattr(r, "check", None) for r in caplog.records if r.name == "precheck.guards"]
    assert checks == ["require_non_null_or_empty", "require_named_non_null_or_empty"]


def test_template_error_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="precheck.guards"):
        with pytest.raises(InvalidArgument, match="invalid error message template"):
            require_non_null(None, "%s %s", "a")
    records = [r for r in caplog.records if r.name == "precheck.guards"]
    assert len(records) == 1
    assert getattr(records[0], "check", None) == "require_non_null"


def test_surplus_template_arguments_keep_caller_message() -> None:
    with pytest.raises(InvalidArgument, match="^value a$"):
        require_non_null(None, "value %s", "a", "b")


def test_success_logs_nothing(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="precheck.guards"):
        require_non_null_or_empty([1])
        require_expression(True)
    assert [r for r in caplog.records if r.name == "precheck.guards"] == []
