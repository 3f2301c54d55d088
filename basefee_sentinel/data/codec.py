"""
ABI codec for single-word sample payloads.

A sample travels between collector, host and decision engine as the ABI
encoding of one ``uint256``: exactly 32 bytes, big-endian, left-padded with
zeros. Hex helpers are used by the HTTP relay transport.
"""

from __future__ import annotations

from basefee_sentinel.core.exceptions import DataValidationError, PayloadDecodeError

WORD_SIZE = 32
UINT256_MAX = 2**256 - 1


def encode_uint256(value: int) -> bytes:
    """
    Encode an unsigned integer as a 32-byte ABI word.

    Raises:
        DataValidationError: If value is not an int in [0, 2**256 - 1]
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise DataValidationError(f"uint256 must be an int, got {type(value).__name__}")
    if value < 0 or value > UINT256_MAX:
        raise DataValidationError(f"Value out of uint256 range: {value}")
    return value.to_bytes(WORD_SIZE, "big")


def decode_uint256(payload: bytes) -> int:
    """
    Decode a 32-byte ABI word back to an integer.

    Raises:
        PayloadDecodeError: If payload is not bytes-like or not exactly 32 bytes
    """
    if not isinstance(payload, (bytes, bytearray, memoryview)):
        raise PayloadDecodeError(f"Payload must be bytes, got {type(payload).__name__}")
    raw = bytes(payload)
    if len(raw) != WORD_SIZE:
        raise PayloadDecodeError(f"Expected {WORD_SIZE}-byte uint256 payload, got {len(raw)} bytes")
    return int.from_bytes(raw, "big")


def to_hex(payload: bytes) -> str:
    return "0x" + bytes(payload).hex()


def from_hex(value: str) -> bytes:
    """Parse a 0x-prefixed (or bare) hex string into bytes."""
    text = value.strip()
    if text[:2].lower() == "0x":
        text = text[2:]
    try:
        return bytes.fromhex(text)
    except ValueError as e:
        raise DataValidationError(f"Invalid hex payload: {value[:80]}") from e
