"""
Binary Writer

Append-only byte buffer for the canonical transaction format. All
fixed-width integers are written big-endian.
"""

import builtins
import struct

from .field_id import encode_field_id
from .length import encode_length


class BinaryWriter:
    """
    Byte buffer with the primitive writes the serializer needs.
    """

    def __init__(self):
        """Initialize writer with empty byte buffer."""
        self._bb = bytearray()

    def __len__(self) -> int:
        return len(self._bb)

    def u8(self, v: int) -> None:
        """
        Write unsigned 8-bit integer.

        Args:
            v: Integer value to write (0-255)
        """
        self._bb.append(v & 0xFF)

    def u16(self, v: int) -> None:
        """Write unsigned 16-bit integer, big-endian."""
        self._bb.extend(struct.pack(">H", v & 0xFFFF))

    def u32(self, v: int) -> None:
        """Write unsigned 32-bit integer, big-endian."""
        self._bb.extend(struct.pack(">I", v & 0xFFFFFFFF))

    def u64(self, v: int) -> None:
        """Write unsigned 64-bit integer, big-endian."""
        self._bb.extend(struct.pack(">Q", v & 0xFFFFFFFFFFFFFFFF))

    def bytes(self, v: builtins.bytes) -> None:
        """
        Write raw bytes without length prefix.

        Args:
            v: Bytes to write directly
        """
        self._bb.extend(v)

    def vl_bytes(self, v: builtins.bytes) -> None:
        """
        Write bytes preceded by their variable-length prefix.

        Args:
            v: Payload bytes
        """
        self._bb.extend(encode_length(len(v)))
        self._bb.extend(v)

    def field_id(self, type_code: int, field_code: int) -> None:
        """Write the Field ID tag for a field."""
        self._bb.extend(encode_field_id(type_code, field_code))

    def to_bytes(self) -> builtins.bytes:
        """
        Return accumulated bytes as immutable bytes object.

        Returns:
            Bytes containing all written data
        """
        return builtins.bytes(self._bb)
