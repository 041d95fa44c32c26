from http import HTTPStatus

import pytest

from solkit.errors import AppError, ErrorKind


def test_missing_fields_body():
    error = AppError(ErrorKind.MISSING_FIELDS)
    assert error.to_body() == {"success": False, "error": "Missing required fields"}
    assert error.status == HTTPStatus.BAD_REQUEST


def test_signing_error_is_server_error():
    error = AppError(ErrorKind.SIGNING_ERROR)
    assert error.status == HTTPStatus.INTERNAL_SERVER_ERROR
    assert error.to_body()["error"] == "Failed to sign message"


def test_verification_failed_is_ok_status():
    assert AppError(ErrorKind.VERIFICATION_FAILED).status == HTTPStatus.OK


@pytest.mark.parametrize(
    "kind, message",
    [
        (ErrorKind.INVALID_PUBLIC_KEY, "Invalid public key provided"),
        (ErrorKind.INVALID_SECRET_KEY, "Invalid secret key provided"),
        (ErrorKind.INVALID_SIGNATURE, "Invalid signature provided"),
        (ErrorKind.INVALID_AMOUNT, "Invalid amount provided"),
    ],
)
def test_bad_request_kinds(kind, message):
    error = AppError(kind)
    assert error.status == HTTPStatus.BAD_REQUEST
    assert str(error) == message
    assert error.to_body() == {"success": False, "error": message}


def test_is_raisable():
    error = AppError(ErrorKind.INVALID_AMOUNT)
    assert error.kind is ErrorKind.INVALID_AMOUNT
    assert error.to_body() == {"success": False, "error": "Invalid amount provided"}
    with pytest.raises(AppError, match="Invalid amount provided") as info:
        raise error
    assert info.value.kind is ErrorKind.INVALID_AMOUNT
    assert info.value.status == HTTPStatus.BAD_REQUEST