import base64

import pytest

from solkit.errors import AppError, ErrorKind
from solkit.keys import decode_pubkey
from solkit.models import (
    AccountMeta,
    Instruction,
    error_body,
    require_int,
    require_str,
    success_body,
)

KEY_A = bytes([1]) * 32
KEY_B = bytes([2]) * 32


def test_account_meta_to_dict():
    result = AccountMeta(KEY_A, True, False).to_dict()
    assert decode_pubkey(result["pubkey"]) == KEY_A
    assert result["is_signer"] is True
    assert result["is_writable"] is False


def test_account_meta_constructors():
    assert AccountMeta.writable(KEY_A, False) == AccountMeta(KEY_A, False, True)
    assert AccountMeta.readonly(KEY_B, True) == AccountMeta(KEY_B, True, False)


def test_instruction_to_dict():
    data = b"\x07\x01\x02\x03"
    instruction = Instruction(
        KEY_A, (AccountMeta.writable(KEY_B, False),), data
    )
    result = instruction.to_dict()
    assert list(result) == ["program_id", "accounts", "instruction_data"]
    assert decode_pubkey(result["program_id"]) == KEY_A
    assert result["accounts"] == [AccountMeta.writable(KEY_B, False).to_dict()]
    assert base64.b64decode(result["instruction_data"]) == data


def test_success_and_error_bodies():
    assert success_body({"x": 1}) == {"success": True, "data": {"x": 1}}
    assert error_body("Missing required fields") == {
        "success": False,
        "error": "Missing required fields",
    }


def test_require_str():
    assert require_str({"mint": "abc"}, "mint") == "abc"


@pytest.mark.parametrize("payload", [{}, {"mint": 5}, {"mint": None}, ["mint"], None])
def test_require_str_missing(payload):
    with pytest.raises(AppError) as info:
        require_str(payload, "mint")
    assert info.value.kind is ErrorKind.MISSING_FIELDS


def test_require_int_limits():
    assert require_int({"decimals": 255}, "decimals", 8) == 255
    assert require_int({"amount": 0}, "amount", 64) == 0
    assert require_int({"amount": 2**64 - 1}, "amount", 64) == 2**64 - 1


@pytest.mark.parametrize("value", [256, -1])
def test_require_int_out_of_range(value):
    with pytest.raises(AppError) as info:
        require_int({"decimals": value}, "decimals", 8)
    assert info.value.kind is ErrorKind.INVALID_AMOUNT


@pytest.mark.parametrize("payload", [{}, {"amount": "5"}, {"amount": True}, {"amount": 1.5}, "x"])
def test_require_int_missing(payload):
    with pytest.raises(AppError) as info:
        require_int(payload, "amount", 64)
    assert info.value.kind is ErrorKind.MISSING_FIELDS