"""
Hash Functions

SHA-256 helpers used for base58check checksums on account identifiers.
"""

import hashlib


def sha256_bytes(input_bytes: bytes) -> bytes:
    """
    Compute SHA-256 hash of input bytes.

    Args:
        input_bytes: Input bytes to hash

    Returns:
        SHA-256 hash as bytes (32 bytes)
    """
    return hashlib.sha256(input_bytes).digest()


def double_sha256(data: bytes) -> bytes:
    """
    Calculate double SHA256 hash.

    Args:
        data: Data to hash

    Returns:
        SHA256(SHA256(data))
    """
    if not isinstance(data, (bytes, bytearray)):
        raise ValueError("data must be bytes")

    return sha256_bytes(sha256_bytes(bytes(data)))


def checksum4(data: bytes) -> bytes:
    """First four bytes of the double SHA-256 of data."""
    return double_sha256(data)[:4]


__all__ = ["sha256_bytes", "double_sha256", "checksum4"]
