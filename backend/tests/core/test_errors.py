"""Error Hierarchy: codes, categories, built-in bases, and REST envelope."""

from primer.core.errors import (
    DivisionByZeroError,
    ErrorCategory,
    ErrorContext,
    ErrorSeverity,
    InvalidArgumentError,
    NonFiniteResultError,
    PrimerError,
    ResourceNotFoundError,
)


def test_invalid_argument_is_primer_and_type_error():
    err = InvalidArgumentError("bad", "text", operation="capitalize")
    assert isinstance(err, PrimerError)
    assert isinstance(err, TypeError)
    assert err.code == "INVALID_ARGUMENT"
    assert err.category == ErrorCategory.VALIDATION
    assert err.http_status == 400
    assert err.context.operation == "capitalize"
    assert err.context.argument == "text"


def test_invalid_argument_keeps_operation_from_given_context():
    ctx = ErrorContext(operation="outer")
    err = InvalidArgumentError("bad", "a", operation="inner", context=ctx)
    assert err.context.operation == "outer"


def test_division_by_zero_is_zero_division_error():
    err = DivisionByZeroError()
    assert isinstance(err, ZeroDivisionError)
    assert err.code == "DIVISION_BY_ZERO"
    assert err.category == ErrorCategory.ARITHMETIC
    assert str(err) == "cannot divide by zero"


def test_resource_not_found_is_404():
    err = ResourceNotFoundError("Model", "abc")
    assert err.http_status == 404
    assert err.message == "Model 'abc' not found"


def test_to_response_envelope():
    body = InvalidArgumentError("bad", "b", operation="add").to_response()
    error = body["error"]
    assert error["code"] == "INVALID_ARGUMENT"
    assert error["message"] == "bad"
    assert error["category"] == "validation"
    assert error["severity"] == ErrorSeverity.ERROR.value
    assert error["context"] == {"operation": "add", "argument": "b"}
    assert "timestamp" in error


def test_resource_not_found_carries_resource_ids_in_context():
    err = ResourceNotFoundError("Item", "i-1", model_id="m-1", item_id="i-1")
    assert err.severity == ErrorSeverity.WARNING
    assert err.to_response()["error"]["context"] == {
        "model_id": "m-1", "item_id": "i-1",
    }


def test_to_response_omits_unset_context_fields():
    body = ResourceNotFoundError("Model", "abc").to_response()
    assert body["error"]["context"] == {}


def test_log_extra_has_code_severity_and_identifiers():
    err = DivisionByZeroError()
    assert err.log_extra() == {
        "error_code": "DIVISION_BY_ZERO",
        "severity": "error",
        "operation": "divide",
        "argument": "b",
    }


def test_non_finite_result_is_arithmetic_400():
    err = NonFiniteResultError("multiply")
    assert err.code == "NON_FINITE_RESULT"
    assert err.category == ErrorCategory.ARITHMETIC
    assert err.http_status == 400
    assert err.context.operation == "multiply"
    assert "multiply" in err.message
