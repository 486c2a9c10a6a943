"""
Strict hex string conversion.

bytes.fromhex tolerates whitespace between byte pairs; hex coming from a
transaction must not, so the alphabet is checked before decoding.
"""

import re

from ..runtime.errors import OddLengthError, InvalidDigitError, TypeMismatchError

_HEX_RE = re.compile(r"[0-9A-Fa-f]*")


def decode_hex(value: str) -> bytes:
    """
    Decode a hex string to bytes.

    Args:
        value: Hex string, either case, no prefix or separators

    Returns:
        Decoded bytes

    Raises:
        TypeMismatchError: If value is not a string
        InvalidDigitError: If value contains a non-hex character
        OddLengthError: If value has an odd number of digits
    """
    if not isinstance(value, str):
        raise TypeMismatchError(f"Expected hex string, got {type(value).__name__}")
    if not _HEX_RE.fullmatch(value):
        bad = next(c for c in value if c not in "0123456789abcdefABCDEF")
        raise InvalidDigitError(f"Invalid hex digit {bad!r}", details={"value": value})
    if len(value) % 2:
        raise OddLengthError(f"Hex string has odd length {len(value)}", details={"value": value})
    return bytes.fromhex(value)


def encode_hex(data: bytes) -> str:
    """Encode bytes as an upper-case hex string."""
    return data.hex().upper()


__all__ = ["decode_hex", "encode_hex"]
