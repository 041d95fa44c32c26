"""Public keys as 32-byte values and the well-known program addresses."""

from __future__ import annotations

from .base58 import b58decode, b58encode

PUBKEY_LENGTH = 32


def decode_pubkey(text: str) -> bytes:
    """Decode a base58 address into its 32 raw bytes."""
    raw = b58decode(text)
    if len(raw) != PUBKEY_LENGTH:
        raise ValueError(f"public key must be {PUBKEY_LENGTH} bytes, got {len(raw)}")
    return raw


def encode_pubkey(raw: bytes) -> str:
    """Encode 32 raw bytes as a base58 address."""
    raw = bytes(raw)
    if len(raw) != PUBKEY_LENGTH:
        raise ValueError(f"public key must be {PUBKEY_LENGTH} bytes, got {len(raw)}")
    return b58encode(raw)


TOKEN_PROGRAM_ID = decode_pubkey("TokenkegQfeZyiNwAJbNbGKPFXCWuBvf9Ss623VQ5DA")
SYSTEM_PROGRAM_ID = bytes(PUBKEY_LENGTH)
RENT_SYSVAR_ID = decode_pubkey("SysvarRent" + "1" * 33)