"""
Field ID tag encoding.

Every serialized field starts with a 1-3 byte tag packing its type code and
field code. Codes below 16 are "common" and share a nibble; larger codes
get a byte of their own.
"""

from typing import Tuple

from ..runtime.errors import DefinitionsError, MalformedInputError


def encode_field_id(type_code: int, field_code: int) -> bytes:
    """
    Build the Field ID tag for a (type_code, field_code) pair.

    Args:
        type_code: Wire type code (1-255)
        field_code: Field code within the type (1-255)

    Returns:
        Tag bytes (1 to 3 bytes)

    Raises:
        DefinitionsError: If either code is outside 1-255
    """
    if not 1 <= type_code <= 255:
        raise DefinitionsError(f"Type code {type_code} cannot be tagged", details={"type_code": type_code})
    if not 1 <= field_code <= 255:
        raise DefinitionsError(f"Field code {field_code} cannot be tagged", details={"field_code": field_code})

    if type_code < 16:
        if field_code < 16:
            return bytes([(type_code << 4) | field_code])
        return bytes([type_code << 4, field_code])
    if field_code < 16:
        return bytes([field_code, type_code])
    return bytes([0, type_code, field_code])


def decode_field_id(data: bytes, offset: int = 0) -> Tuple[int, int, int]:
    """
    Read a Field ID tag.

    Args:
        data: Bytes to read from
        offset: Position of the first tag byte

    Returns:
        Tuple of (type_code, field_code, bytes_consumed)

    Raises:
        MalformedInputError: If the tag is truncated or non-canonical
    """
    def byte_at(i: int) -> int:
        if i >= len(data):
            raise MalformedInputError("unexpected end of field id")
        return data[i]

    first = byte_at(offset)
    type_code = first >> 4
    field_code = first & 0x0F

    if type_code and field_code:
        return type_code, field_code, 1

    if type_code:
        field_code = byte_at(offset + 1)
        if field_code < 16:
            raise MalformedInputError("non-canonical field id: field code below 16 in long form")
        return type_code, field_code, 2

    if field_code:
        type_code = byte_at(offset + 1)
        if type_code < 16:
            raise MalformedInputError("non-canonical field id: type code below 16 in long form")
        return type_code, field_code, 2

    type_code = byte_at(offset + 1)
    field_code = byte_at(offset + 2)
    if type_code < 16 or field_code < 16:
        raise MalformedInputError("non-canonical field id in three-byte form")
    return type_code, field_code, 3


__all__ = ["encode_field_id", "decode_field_id"]
