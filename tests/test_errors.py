"""Unit tests for classified error kinds."""

import pytest

from core.errors import (
    AppError,
    BadRequestError,
    ErrorCode,
    InternalError,
    NotFoundError,
    UnexpectedError,
)


@pytest.mark.parametrize(
    "error_cls, status_code, error_code, message",
    [
        (BadRequestError, 400, ErrorCode.BAD_REQUEST, "something is wrong within your request"),
        (NotFoundError, 404, ErrorCode.RESOURCE_NOT_FOUND, "resource not found"),
        (InternalError, 500, ErrorCode.APPLICATION_ERROR, "application internal error"),
        (UnexpectedError, 500, ErrorCode.UNEXPECTED_ERROR, "unexpected error"),
    ],
)
def test_error_kinds_carry_status_code_and_message(error_cls, status_code, error_code, message):
    err = error_cls()

    assert isinstance(err, AppError)
    assert err.status_code == status_code
    assert err.error_code is error_code
    assert str(err) == message
    assert err.to_body() == {
        "StatusCode": status_code,
        "ErrorCode": error_code.value,
        "Message": message,
    }


def test_message_can_be_overridden_per_instance():
    err = NotFoundError("listing 9 not found")

    assert err.to_body()["Message"] == "listing 9 not found"
    assert NotFoundError().message == "resource not found"


def test_plain_exceptions_are_not_classified():
    assert not isinstance(RuntimeError("some error occurred"), AppError)


def test_internal_and_unexpected_are_distinct():
    assert InternalError().to_body() != UnexpectedError().to_body()
    assert not isinstance(InternalError(), UnexpectedError)
