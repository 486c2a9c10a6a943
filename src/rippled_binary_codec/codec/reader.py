"""
Binary Reader

Cursor over serialized bytes. The codec only produces bytes, but a reader
is needed to inspect output: read_field_ids walks a serialized object and
reports the Field ID sequence without decoding values, which is how field
ordering is checked against the wire.
"""

import builtins
from typing import List, Optional, Tuple, TYPE_CHECKING

from .field_id import decode_field_id
from .length import decode_length
from ..runtime.errors import MalformedInputError

if TYPE_CHECKING:
    from ..definitions.registry import DefinitionsRegistry

OBJECT_END_MARKER = 0xE1
ARRAY_END_MARKER = 0xF1
PATHSET_END = 0x00
PATH_SEPARATOR = 0xFF

# Payload widths of the fixed-size wire types, keyed by type code
_FIXED_WIDTHS = {
    16: 1,   # UInt8
    1: 2,    # UInt16
    2: 4,    # UInt32
    3: 8,    # UInt64
    4: 16,   # Hash128
    17: 20,  # Hash160
    5: 32,   # Hash256
}


class BinaryReader:
    """
    Forward-only reader over a byte buffer.
    """

    def __init__(self, buf: builtins.bytes, registry: Optional["DefinitionsRegistry"] = None):
        """
        Initialize reader with byte buffer.

        Args:
            buf: Byte buffer to read from
            registry: Definitions used to skip nested objects and arrays
        """
        self._buf = buf
        self._off = 0
        self._registry = registry

    @property
    def eof(self) -> bool:
        """True if the whole buffer has been consumed."""
        return self._off >= len(self._buf)

    @property
    def offset(self) -> int:
        return self._off

    def peek(self) -> int:
        if self._off >= len(self._buf):
            raise MalformedInputError("unexpected end of data")
        return self._buf[self._off]

    def u8(self) -> int:
        """
        Read unsigned 8-bit integer.

        Returns:
            Unsigned 8-bit integer value
        """
        val = self.peek()
        self._off += 1
        return val

    def read(self, n: int) -> builtins.bytes:
        """
        Read n bytes from buffer.

        Args:
            n: Number of bytes to read

        Returns:
            The bytes read

        Raises:
            MalformedInputError: If fewer than n bytes remain
        """
        if self._off + n > len(self._buf):
            raise MalformedInputError(
                f"unexpected end of data: need {n} bytes at offset {self._off}"
            )
        val = self._buf[self._off:self._off + n]
        self._off += n
        return builtins.bytes(val)

    def read_field_id(self) -> Tuple[int, int]:
        """Read a Field ID tag, returning (type_code, field_code)."""
        type_code, field_code, consumed = decode_field_id(self._buf, self._off)
        self._off += consumed
        return type_code, field_code

    def read_length_prefix(self) -> int:
        """Read a variable-length prefix, returning the payload length."""
        length, consumed = decode_length(self._buf, self._off)
        self._off += consumed
        return length

    def skip_value(self, type_code: int, is_variable_length: bool) -> None:
        """
        Advance past one field payload.

        Args:
            type_code: Wire type of the field
            is_variable_length: Whether the payload carries a length prefix
        """
        if is_variable_length:
            self.read(self.read_length_prefix())
        elif type_code in _FIXED_WIDTHS:
            self.read(_FIXED_WIDTHS[type_code])
        elif type_code == 6:
            # Issued amounts set the top bit and are 48 bytes long
            self.read(48 if self.peek() & 0x80 else 8)
        elif type_code == 14:
            self._skip_until(OBJECT_END_MARKER)
        elif type_code == 15:
            self._skip_until(ARRAY_END_MARKER)
        elif type_code == 18:
            self._skip_path_set()
        else:
            raise MalformedInputError(f"cannot skip value of type code {type_code}")

    def _skip_until(self, marker: int) -> None:
        if self._registry is None:
            raise MalformedInputError("nested values need a registry to skip")
        while self.peek() != marker:
            type_code, field_code = self.read_field_id()
            definition = self._registry.field_by_id(type_code, field_code)
            self.skip_value(definition.type_code, definition.is_variable_length)
        self.u8()

    def _skip_path_set(self) -> None:
        while True:
            kind = self.u8()
            if kind == PATHSET_END:
                return
            if kind == PATH_SEPARATOR:
                continue
            for flag in (0x01, 0x10, 0x20):
                if kind & flag:
                    self.read(20)


def read_field_ids(data: builtins.bytes, registry: "DefinitionsRegistry") -> List[Tuple[int, int]]:
    """
    List the (type_code, field_code) pairs of the top-level fields in data.

    Args:
        data: Serialized object, without a trailing end marker
        registry: Definitions used to find each field's payload size

    Returns:
        Field IDs in wire order

    Raises:
        MalformedInputError: If the data is truncated
        UnknownFieldNameError: If a Field ID has no definition
    """
    reader = BinaryReader(data, registry)
    ids = []
    while not reader.eof:
        type_code, field_code = reader.read_field_id()
        definition = registry.field_by_id(type_code, field_code)
        reader.skip_value(definition.type_code, definition.is_variable_length)
        ids.append((type_code, field_code))
    return ids


__all__ = ["BinaryReader", "read_field_ids", "OBJECT_END_MARKER", "ARRAY_END_MARKER"]
