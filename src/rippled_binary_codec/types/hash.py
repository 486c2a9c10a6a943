"""Fixed-width hash types: Hash128, Hash160, Hash256."""

from .base import SerializedType
from ..codec.hexcodec import decode_hex
from ..runtime.errors import InvalidHashLengthError


class HashType(SerializedType):
    """Hex string of an exact byte width."""

    def __init__(self, width: int, type_name: str):
        self.width = width
        self.type_name = type_name

    def to_bytes(self, value, ctx=None, depth=0) -> bytes:
        raw = decode_hex(value)
        if len(raw) != self.width:
            raise InvalidHashLengthError(
                f"{self.type_name} must be {self.width} bytes, got {len(raw)}",
                details={"value": value}
            )
        return raw


HASH128 = HashType(16, "Hash128")
HASH160 = HashType(20, "Hash160")
HASH256 = HashType(32, "Hash256")

__all__ = ["HashType", "HASH128", "HASH160", "HASH256"]
