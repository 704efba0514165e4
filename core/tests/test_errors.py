import pytest

from opresult.contracts import (
    ErrorLike,
    InternalServerError,
    NotFoundError,
    OperationError,
    Result,
    UnexpectedError,
    ValidationFailedError,
)
from opresult.testkit.fakes import FakeError


def test_unexpected_error_converts_to_failure_result():
    error = UnexpectedError(details={"context": "Example"})

    result = Result.from_error(error)

    assert result.status_code == 1
    assert result.stderr == "Unexpected error"
    assert result.stdout is None
    assert result.extra == {"context": "Example"}
    assert result.is_error is True


def test_error_without_details_converts_to_empty_extra():
    result = Result.from_error(FakeError(code=503, message="Service unavailable"))

    assert result.status_code == 503
    assert result.stderr == "Service unavailable"
    assert result.extra == {}


def test_conversion_assigns_fresh_ids():
    error = FakeError(code=1, message="boom")

    assert Result.from_error(error).id != Result.from_error(error).id


@pytest.mark.parametrize(
    ("error_cls", "code", "message"),
    [
        (OperationError, 1, "Unexpected error"),
        (UnexpectedError, 1, "Unexpected error"),
        (ValidationFailedError, 400, "Validation error"),
        (NotFoundError, 404, "Not found"),
        (InternalServerError, 500, "Internal server error"),
    ],
)
def test_error_family_defaults(error_cls, code, message):
    error = error_cls()

    assert error.code == code
    assert error.message == message
    assert error.details is None
    assert str(error) == message


def test_operation_error_overrides():
    error = NotFoundError("No such job", code=410, details={"job": "abc"})

    result = error.to_result()

    assert result.status_code == 410
    assert result.stderr == "No such job"
    assert result.extra == {"job": "abc"}


def test_operation_error_is_raisable_and_convertible():
    with pytest.raises(OperationError) as excinfo:
        raise ValidationFailedError("params.depth must be positive")

    assert excinfo.value.to_result().is_error is True


def test_error_like_protocol_is_structural():
    assert isinstance(UnexpectedError(), ErrorLike)
    assert isinstance(FakeError(code=1, message="x"), ErrorLike)
    assert not isinstance(object(), ErrorLike)
