"""Vector256: a list of 256-bit hashes written back to back."""

from .base import SerializedType, expect_type
from .hash import HASH256
from ..runtime.errors import BinaryCodecError


class Vector256Type(SerializedType):
    type_name = "Vector256"

    def to_bytes(self, value, ctx=None, depth=0) -> bytes:
        expect_type(value, list, self.type_name)
        out = bytearray()
        for i, item in enumerate(value):
            try:
                out += HASH256.to_bytes(item)
            except BinaryCodecError as exc:
                exc.add_path(str(i))
                raise
        return bytes(out)


VECTOR256 = Vector256Type()

__all__ = ["Vector256Type", "VECTOR256"]
