"""STObject: a nested object, closed by the ObjectEndMarker field."""

from collections.abc import Mapping

from .base import SerializedType, check_depth, expect_type

OBJECT_END_MARKER = b"\xe1"


class STObjectType(SerializedType):
    type_name = "STObject"

    def to_bytes(self, value, ctx=None, depth=0) -> bytes:
        expect_type(value, Mapping, self.type_name)
        check_depth(ctx, depth + 1)
        # Signing-only filtering never applies below the transaction itself
        return ctx.serialize_object(value, signing_only=False, depth=depth + 1) + OBJECT_END_MARKER


ST_OBJECT = STObjectType()

__all__ = ["STObjectType", "ST_OBJECT", "OBJECT_END_MARKER"]
