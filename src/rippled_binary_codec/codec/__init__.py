"""
Binary Codec Primitives

Byte-level building blocks of the canonical transaction format.

Key components:
- writer.py: Append-only buffer with big-endian integer writes
- reader.py: Cursor used to walk serialized output field by field
- length.py: Variable-length prefix encode/decode
- field_id.py: Field ID tag encode/decode
- hexcodec.py: Strict hex decoding
- hashes.py: SHA-256 helpers for base58check checksums
"""

from .field_id import encode_field_id, decode_field_id
from .hashes import sha256_bytes, double_sha256
from .hexcodec import decode_hex, encode_hex
from .length import encode_length, decode_length
from .reader import BinaryReader, read_field_ids
from .writer import BinaryWriter

__all__ = [
    "BinaryReader",
    "BinaryWriter",
    "decode_field_id",
    "decode_hex",
    "decode_length",
    "double_sha256",
    "encode_field_id",
    "encode_hex",
    "encode_length",
    "read_field_ids",
    "sha256_bytes",
]
