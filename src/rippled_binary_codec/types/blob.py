"""Blob: arbitrary bytes given as hex."""

from .base import SerializedType
from ..codec.hexcodec import decode_hex


class BlobType(SerializedType):
    type_name = "Blob"

    def to_bytes(self, value, ctx=None, depth=0) -> bytes:
        return decode_hex(value)


BLOB = BlobType()

__all__ = ["BlobType", "BLOB"]
