"""The API operations: key generation, signing, and instruction building."""

from __future__ import annotations

import base64
import binascii
from typing import Any

import nacl.bindings
import nacl.exceptions
from nacl.signing import SigningKey, VerifyKey

from .base58 import b58decode, b58encode
from .errors import AppError, ErrorKind
from .keys import (
    RENT_SYSVAR_ID,
    SYSTEM_PROGRAM_ID,
    TOKEN_PROGRAM_ID,
    decode_pubkey,
)
from .models import AccountMeta, Instruction, require_int, require_str

_INITIALIZE_MINT = 0
_TRANSFER = 3
_MINT_TO = 7
_SYSTEM_TRANSFER = 2


def _pubkey_field(value: str) -> bytes:
    try:
        return decode_pubkey(value)
    except ValueError:
        raise AppError(ErrorKind.INVALID_PUBLIC_KEY) from None


def _is_valid_point(raw: bytes) -> bool:
    return len(raw) == 32 and nacl.bindings.crypto_core_ed25519_is_valid_point(raw)


def generate_keypair() -> dict:
    """Create a fresh ed25519 keypair; the secret is seed followed by public key."""
    signing_key = SigningKey.generate()
    public = bytes(signing_key.verify_key)
    return {
        "pubkey": b58encode(public),
        "secret": b58encode(bytes(signing_key) + public),
    }


def create_token(payload: Any) -> dict:
    """Build an SPL token InitializeMint instruction."""
    mint_authority = require_str(payload, "mintAuthority")
    mint = require_str(payload, "mint")
    decimals = require_int(payload, "decimals", 8)
    authority_key = _pubkey_field(mint_authority)
    mint_key = _pubkey_field(mint)

    data = bytes([_INITIALIZE_MINT, decimals]) + authority_key + b"\x00"
    accounts = (
        AccountMeta.writable(mint_key, False),
        AccountMeta.readonly(RENT_SYSVAR_ID, False),
    )
    return Instruction(TOKEN_PROGRAM_ID, accounts, data).to_dict()


def mint_token(payload: Any) -> dict:
    """Build an SPL token MintTo instruction."""
    mint = require_str(payload, "mint")
    destination = require_str(payload, "destination")
    authority = require_str(payload, "authority")
    amount = require_int(payload, "amount", 64)
    mint_key = _pubkey_field(mint)
    destination_key = _pubkey_field(destination)
    authority_key = _pubkey_field(authority)

    data = bytes([_MINT_TO]) + amount.to_bytes(8, "little")
    accounts = (
        AccountMeta.writable(mint_key, False),
        AccountMeta.writable(destination_key, False),
        AccountMeta.readonly(authority_key, True),
    )
    return Instruction(TOKEN_PROGRAM_ID, accounts, data).to_dict()


def sign_message(payload: Any) -> dict:
    """Sign a message with a 64-byte base58 secret (seed then public key)."""
    message = require_str(payload, "message")
    secret = require_str(payload, "secret")
    try:
        keypair_bytes = b58decode(secret)
    except ValueError:
        raise AppError(ErrorKind.INVALID_SECRET_KEY) from None
    if len(keypair_bytes) != 64 or not _is_valid_point(keypair_bytes[32:]):
        raise AppError(ErrorKind.INVALID_SECRET_KEY)

    try:
        signed = nacl.bindings.crypto_sign(message.encode("utf-8"), keypair_bytes)
    except nacl.exceptions.CryptoError:
        raise AppError(ErrorKind.SIGNING_ERROR) from None
    signature = signed[: nacl.bindings.crypto_sign_BYTES]

    return {
        "signature": base64.b64encode(signature).decode("ascii"),
        "public_key": b58encode(keypair_bytes[32:]),
        "message": message,
    }


def verify_message(payload: Any) -> dict:
    """Check an ed25519 signature over a message."""
    message = require_str(payload, "message")
    signature_text = require_str(payload, "signature")
    pubkey = require_str(payload, "pubkey")

    try:
        pubkey_bytes = b58decode(pubkey)
    except ValueError:
        raise AppError(ErrorKind.INVALID_PUBLIC_KEY) from None
    if not _is_valid_point(pubkey_bytes):
        raise AppError(ErrorKind.INVALID_PUBLIC_KEY)

    try:
        signature = base64.b64decode(signature_text, validate=True)
    except (binascii.Error, ValueError):
        raise AppError(ErrorKind.INVALID_SIGNATURE) from None
    if len(signature) != 64:
        raise AppError(ErrorKind.INVALID_SIGNATURE)

    try:
        VerifyKey(pubkey_bytes).verify(message.encode("utf-8"), signature)
        valid = True
    except nacl.exceptions.CryptoError:
        valid = False

    return {"valid": valid, "message": message, "pubkey": pubkey}


def send_sol(payload: Any) -> dict:
    """Build a system program transfer of lamports."""
    sender = require_str(payload, "from")
    recipient = require_str(payload, "to")
    lamports = require_int(payload, "lamports", 64)
    from_key = _pubkey_field(sender)
    to_key = _pubkey_field(recipient)

    data = _SYSTEM_TRANSFER.to_bytes(4, "little") + lamports.to_bytes(8, "little")
    accounts = (
        AccountMeta.writable(from_key, True),
        AccountMeta.writable(to_key, False),
    )
    return Instruction(SYSTEM_PROGRAM_ID, accounts, data).to_dict()


def send_token(payload: Any) -> dict:
    """Build an SPL token Transfer instruction."""
    source = require_str(payload, "source")
    destination = require_str(payload, "destination")
    owner = require_str(payload, "owner")
    amount = require_int(payload, "amount", 64)
    source_key = _pubkey_field(source)
    destination_key = _pubkey_field(destination)
    owner_key = _pubkey_field(owner)

    data = bytes([_TRANSFER]) + amount.to_bytes(8, "little")
    accounts = (
        AccountMeta.writable(source_key, False),
        AccountMeta.writable(destination_key, False),
        AccountMeta.readonly(owner_key, True),
    )
    return Instruction(TOKEN_PROGRAM_ID, accounts, data).to_dict()