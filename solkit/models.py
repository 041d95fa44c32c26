"""Response bodies, instruction descriptions and request field validation."""

from __future__ import annotations

import base64
from dataclasses import dataclass
from typing import Any

from .errors import AppError, ErrorKind
from .keys import encode_pubkey


@dataclass(frozen=True)
class AccountMeta:
    """An account an instruction touches, with its signer and writable flags."""

    pubkey: bytes
    is_signer: bool
    is_writable: bool

    @classmethod
    def writable(cls, pubkey: bytes, is_signer: bool) -> "AccountMeta":
        return cls(pubkey, is_signer, True)

    @classmethod
    def readonly(cls, pubkey: bytes, is_signer: bool) -> "AccountMeta":
        return cls(pubkey, is_signer, False)

    def to_dict(self) -> dict:
        return {
            "pubkey": encode_pubkey(self.pubkey),
            "is_signer": self.is_signer,
            "is_writable": self.is_writable,
        }


@dataclass(frozen=True)
class Instruction:
    """A program instruction: program id, accounts and raw data."""

    program_id: bytes
    accounts: tuple
    data: bytes

    def to_dict(self) -> dict:
        return {
            "program_id": encode_pubkey(self.program_id),
            "accounts": [meta.to_dict() for meta in self.accounts],
            "instruction_data": base64.b64encode(self.data).decode("ascii"),
        }


def success_body(data: Any) -> dict:
    """The JSON body of a successful response."""
    return {"success": True, "data": data}


def error_body(message: str) -> dict:
    """The JSON body of a failed response."""
    return {"success": False, "error": message}


def require_str(payload: Any, name: str) -> str:
    """Return a string field of a request, or raise a missing-fields error."""
    if not isinstance(payload, dict):
        raise AppError(ErrorKind.MISSING_FIELDS)
    value = payload.get(name)
    if not isinstance(value, str):
        raise AppError(ErrorKind.MISSING_FIELDS)
    return value


def require_int(payload: Any, name: str, bits: int) -> int:
    """Return an unsigned integer field that fits in the given number of bits."""
    if not isinstance(payload, dict):
        raise AppError(ErrorKind.MISSING_FIELDS)
    value = payload.get(name)
    if not isinstance(value, int) or isinstance(value, bool):
        raise AppError(ErrorKind.MISSING_FIELDS)
    if not 0 <= value < 1 << bits:
        raise AppError(ErrorKind.INVALID_AMOUNT)
    return value