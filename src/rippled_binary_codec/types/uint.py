"""
Unsigned integer types: UInt8, UInt16, UInt32, UInt64.

UInt8-32 take JSON integers. UInt64 values exceed what JSON numbers carry
safely, so they are normally written as hex strings of up to 16 digits;
integers are accepted too.
"""

import re
from typing import Any

from .base import SerializedType, expect_type
from ..codec.writer import BinaryWriter
from ..runtime.errors import IntegerOutOfRangeError, TypeMismatchError

_UINT64_HEX_RE = re.compile(r"[0-9A-Fa-f]{1,16}")


class UIntType(SerializedType):
    """Fixed-width big-endian unsigned integer."""

    _WRITES = {1: BinaryWriter.u8, 2: BinaryWriter.u16, 4: BinaryWriter.u32, 8: BinaryWriter.u64}

    def __init__(self, width: int, type_name: str):
        self.width = width
        self.type_name = type_name
        self.max_value = (1 << (8 * width)) - 1
        self._write = self._WRITES[width]

    def coerce(self, value: Any) -> int:
        expect_type(value, int, self.type_name)
        return value

    def to_bytes(self, value, ctx=None, depth=0) -> bytes:
        number = self.coerce(value)
        if number < 0 or number > self.max_value:
            raise IntegerOutOfRangeError(
                f"{number} does not fit in {self.type_name}",
                details={"value": number, "max": self.max_value}
            )
        writer = BinaryWriter()
        self._write(writer, number)
        return writer.to_bytes()


class UInt64Type(UIntType):
    """UInt64, from an int or a hex string."""

    def __init__(self):
        super().__init__(8, "UInt64")

    def coerce(self, value: Any) -> int:
        if isinstance(value, str):
            if not _UINT64_HEX_RE.fullmatch(value):
                raise TypeMismatchError(
                    "UInt64 string must be 1 to 16 hex digits",
                    details={"value": value}
                )
            return int(value, 16)
        return super().coerce(value)


UINT8 = UIntType(1, "UInt8")
UINT16 = UIntType(2, "UInt16")
UINT32 = UIntType(4, "UInt32")
UINT64 = UInt64Type()

__all__ = ["UIntType", "UInt64Type", "UINT8", "UINT16", "UINT32", "UINT64"]
