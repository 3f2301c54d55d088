"""
Unit tests for the uint256 payload codec.
"""

import pytest

from basefee_sentinel.core.exceptions import DataValidationError, PayloadDecodeError
from basefee_sentinel.data.codec import (
    UINT256_MAX,
    decode_uint256,
    encode_uint256,
    from_hex,
    to_hex,
)


def test_encode_is_32_byte_big_endian():
    payload = encode_uint256(0x64)
    assert len(payload) == 32
    assert payload[-1] == 0x64
    assert payload[:31] == b"\x00" * 31


def test_decode_accepts_full_range():
    assert decode_uint256(b"\x00" * 32) == 0
    assert decode_uint256(b"\xff" * 32) == UINT256_MAX


@pytest.mark.parametrize("value", [-1, UINT256_MAX + 1, 1.5, "100", True])
def test_encode_rejects_non_uint256(value):
    with pytest.raises(DataValidationError):
        encode_uint256(value)


@pytest.mark.parametrize("payload", [b"", b"\x01" * 31, b"\x01" * 33])
def test_decode_rejects_wrong_width(payload):
    with pytest.raises(PayloadDecodeError):
        decode_uint256(payload)


def test_decode_rejects_non_bytes():
    with pytest.raises(PayloadDecodeError):
        decode_uint256("0x" + "00" * 32)


def test_payload_decode_error_is_validation_error():
    assert issubclass(PayloadDecodeError, DataValidationError)


def test_hex_helpers():
    assert to_hex(b"\x01\xab") == "0x01ab"
    assert from_hex("0x01AB") == b"\x01\xab"
    assert from_hex("01ab") == b"\x01\xab"
    assert from_hex("0x") == b""

    with pytest.raises(DataValidationError):
        from_hex("0xzz")
