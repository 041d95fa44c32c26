"""Errors reported to API clients, each with its HTTP status and message."""

from __future__ import annotations

from enum import Enum
from http import HTTPStatus


class ErrorKind(Enum):
    """Every error the API reports, with its status and message."""

    MISSING_FIELDS = (HTTPStatus.BAD_REQUEST, "Missing required fields")
    INVALID_PUBLIC_KEY = (HTTPStatus.BAD_REQUEST, "Invalid public key provided")
    INVALID_KEYPAIR = (HTTPStatus.BAD_REQUEST, "Invalid secret key provided")
    INVALID_SIGNATURE = (HTTPStatus.BAD_REQUEST, "Invalid signature provided")
    SIGNING_ERROR = (HTTPStatus.INTERNAL_SERVER_ERROR, "Failed to sign message")
    VERIFICATION_FAILED = (HTTPStatus.OK, "Signature verification failed")
    INVALID_AMOUNT = (HTTPStatus.BAD_REQUEST, "Invalid amount provided")

    def __init__(self, status: HTTPStatus, message: str) -> None:
        self.status = status
        self.message = message


class AppError(Exception):
    """An error that becomes an unsuccessful API response."""

    def __init__(self, kind: ErrorKind) -> None:
        super().__init__(kind.message)
        self.kind = kind

    @property
    def status(self) -> int:
        return int(self.kind.status)

    def to_body(self) -> dict:
        """The JSON body sent to the client for this error."""
        return {"success": False, "error": self.kind.message}