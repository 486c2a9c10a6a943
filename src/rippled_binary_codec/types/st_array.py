"""
STArray: a list of wrapped objects, closed by the ArrayEndMarker field.

Each element is a single-key object such as {"Memo": {...}} whose key names
an STObject field. The element is written as that field's ID followed by
the inner object.
"""

from collections.abc import Mapping

from .base import SerializedType, check_depth, expect_type
from ..definitions.models import TypeCode
from ..runtime.errors import BinaryCodecError, MalformedInputError, TypeMismatchError

ARRAY_END_MARKER = b"\xf1"


class STArrayType(SerializedType):
    type_name = "STArray"

    def to_bytes(self, value, ctx=None, depth=0) -> bytes:
        expect_type(value, list, self.type_name)
        nested = depth + 1
        check_depth(ctx, nested)

        out = bytearray()
        for i, element in enumerate(value):
            try:
                out += self._encode_element(element, ctx, nested)
            except BinaryCodecError as exc:
                exc.add_path(str(i))
                raise
        out += ARRAY_END_MARKER
        return bytes(out)

    @staticmethod
    def _encode_element(element, ctx, depth: int) -> bytes:
        if not isinstance(element, Mapping) or len(element) != 1:
            raise MalformedInputError(
                "STArray elements must be objects with exactly one key",
                details={"value": repr(element)}
            )
        (name, inner), = element.items()
        definition = ctx.registry.lookup_field(name)
        if definition.type_code != TypeCode.STOBJECT:
            raise TypeMismatchError(
                f"STArray element {name} is a {definition.type_name}, not an STObject",
                details={"field": name}
            )
        return ctx.encode_field(definition, inner, depth)


ST_ARRAY = STArrayType()

__all__ = ["STArrayType", "ST_ARRAY", "ARRAY_END_MARKER"]
