"""
Classic address codec.

Classic addresses are base58check strings over the ledger's own alphabet:
a version byte, the 20-byte account ID and a 4-byte checksum taken from
the double SHA-256 of the first 21 bytes.
"""

import logging

import base58

from ..codec.hashes import checksum4
from ..runtime.errors import (
    InvalidAccountIdError, InvalidAlphabetError, InvalidChecksumError, TypeMismatchError
)

logger = logging.getLogger(__name__)

ALPHABET = base58.XRP_ALPHABET
ACCOUNT_ID_PREFIX = b"\x00"
ACCOUNT_ID_LENGTH = 20
CHECKSUM_LENGTH = 4

_ALPHABET_CHARS = frozenset(ALPHABET.decode("ascii"))


def encode_base58_check(payload: bytes, prefix: bytes) -> str:
    """
    Encode prefix + payload with a trailing 4-byte checksum.

    Args:
        payload: Body bytes
        prefix: Version bytes placed before the payload

    Returns:
        Base58 string in the ledger alphabet
    """
    body = prefix + payload
    return base58.b58encode(body + checksum4(body), alphabet=ALPHABET).decode("ascii")


def decode_base58_check(value: str, prefix: bytes, payload_length: int) -> bytes:
    """
    Decode a base58check string and verify its prefix and checksum.

    Args:
        value: Base58 string in the ledger alphabet
        prefix: Expected version bytes
        payload_length: Expected length of the body after the prefix

    Returns:
        The payload with prefix and checksum removed

    Raises:
        TypeMismatchError: If value is not a string
        InvalidAlphabetError: If value has characters outside the alphabet
        InvalidAccountIdError: If the decoded length or prefix is wrong
        InvalidChecksumError: If the checksum does not match
    """
    if not isinstance(value, str):
        raise TypeMismatchError(f"Expected address string, got {type(value).__name__}")

    for ch in value:
        if ch not in _ALPHABET_CHARS:
            raise InvalidAlphabetError(
                f"Character {ch!r} is not in the base58 alphabet",
                details={"value": value}
            )

    raw = base58.b58decode(value, alphabet=ALPHABET)
    expected = len(prefix) + payload_length + CHECKSUM_LENGTH
    if len(raw) != expected:
        raise InvalidAccountIdError(
            f"Decoded address is {len(raw)} bytes, expected {expected}",
            details={"value": value}
        )
    if not raw.startswith(prefix):
        raise InvalidAccountIdError(
            f"Unexpected version prefix {raw[:len(prefix)].hex()}",
            details={"value": value}
        )

    body, checksum = raw[:-CHECKSUM_LENGTH], raw[-CHECKSUM_LENGTH:]
    if checksum4(body) != checksum:
        logger.debug(f"Checksum mismatch for address {value}")
        raise InvalidChecksumError(f"Checksum mismatch for {value}", details={"value": value})

    return body[len(prefix):]


def decode_account_id(address: str) -> bytes:
    """
    Decode a classic address to its 20-byte account ID.

    Args:
        address: Classic address such as "rMBzp8CgpE441cp5PVyA9rpVV7oT8hP3ys"

    Returns:
        20 raw bytes
    """
    return decode_base58_check(address, ACCOUNT_ID_PREFIX, ACCOUNT_ID_LENGTH)


def encode_account_id(account_id: bytes) -> str:
    """
    Encode a 20-byte account ID as a classic address.

    Raises:
        InvalidAccountIdError: If account_id is not 20 bytes
    """
    if len(account_id) != ACCOUNT_ID_LENGTH:
        raise InvalidAccountIdError(
            f"Account ID must be {ACCOUNT_ID_LENGTH} bytes, got {len(account_id)}"
        )
    return encode_base58_check(bytes(account_id), ACCOUNT_ID_PREFIX)


def is_valid_classic_address(address: str) -> bool:
    """Check whether address decodes to an account ID."""
    try:
        decode_account_id(address)
        return True
    except (TypeMismatchError, InvalidAlphabetError, InvalidAccountIdError, InvalidChecksumError):
        return False


__all__ = [
    "ALPHABET",
    "decode_account_id",
    "decode_base58_check",
    "encode_account_id",
    "encode_base58_check",
    "is_valid_classic_address",
]
