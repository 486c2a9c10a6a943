"""
Variable-length prefix codec.

Length-prefixed fields (Blob, AccountID, Vector256) carry a 1-3 byte
prefix whose size depends on the payload length:

- 0 to 192 bytes: 1 byte, the length itself
- 193 to 12480 bytes: 2 bytes
- 12481 to 918744 bytes: 3 bytes

The thresholds are protocol constants.
"""

from typing import Tuple

from ..runtime.errors import VariableLengthOverflowError, MalformedInputError

MAX_SINGLE_BYTE_LENGTH = 192
MAX_DOUBLE_BYTE_LENGTH = 12480
MAX_LENGTH_VALUE = 918744


def encode_length(length: int) -> bytes:
    """
    Encode a payload length as a variable-length prefix.

    Args:
        length: Payload length in bytes

    Returns:
        1, 2 or 3 prefix bytes

    Raises:
        VariableLengthOverflowError: If length is negative or above 918744
    """
    if length < 0 or length > MAX_LENGTH_VALUE:
        raise VariableLengthOverflowError(
            f"Length {length} cannot be encoded (max {MAX_LENGTH_VALUE})",
            details={"length": length}
        )

    if length <= MAX_SINGLE_BYTE_LENGTH:
        return bytes([length])

    if length <= MAX_DOUBLE_BYTE_LENGTH:
        length -= MAX_SINGLE_BYTE_LENGTH + 1
        return bytes([193 + (length >> 8), length & 0xFF])

    length -= MAX_DOUBLE_BYTE_LENGTH + 1
    return bytes([241 + (length >> 16), (length >> 8) & 0xFF, length & 0xFF])


def decode_length(data: bytes, offset: int = 0) -> Tuple[int, int]:
    """
    Decode a variable-length prefix.

    Args:
        data: Bytes to read from
        offset: Position of the first prefix byte

    Returns:
        Tuple of (length, bytes_consumed)

    Raises:
        MalformedInputError: If the prefix is truncated or starts with 0xFF
    """
    if offset >= len(data):
        raise MalformedInputError("unexpected end of length prefix")

    b1 = data[offset]
    if b1 <= 192:
        return b1, 1

    if b1 <= 240:
        if offset + 1 >= len(data):
            raise MalformedInputError("unexpected end of length prefix")
        b2 = data[offset + 1]
        return 193 + (b1 - 193) * 256 + b2, 2

    if b1 <= 254:
        if offset + 2 >= len(data):
            raise MalformedInputError("unexpected end of length prefix")
        b2 = data[offset + 1]
        b3 = data[offset + 2]
        return 12481 + (b1 - 241) * 65536 + b2 * 256 + b3, 3

    raise MalformedInputError(f"invalid length prefix byte 0x{b1:02x}")


__all__ = [
    "MAX_SINGLE_BYTE_LENGTH",
    "MAX_DOUBLE_BYTE_LENGTH",
    "MAX_LENGTH_VALUE",
    "encode_length",
    "decode_length",
]
