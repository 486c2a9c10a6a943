"""
PathSet type.

A path set is a list of paths, each a list of steps. Every step starts with
a type byte flagging which of account, currency and issuer follow, each
20 bytes. Paths are separated by 0xFF and the set is closed with 0x00.
"""

from collections.abc import Mapping

from .base import SerializedType, expect_type
from .currency import encode_currency
from ..address.codec import decode_account_id
from ..runtime.errors import BinaryCodecError, MalformedInputError

TYPE_ACCOUNT = 0x01
TYPE_CURRENCY = 0x10
TYPE_ISSUER = 0x20

PATH_SEPARATOR = 0xFF
PATHSET_END = 0x00

# Informational keys emitted by rippled alongside each step
_IGNORED_STEP_KEYS = frozenset(("type", "type_hex"))
_STEP_KEYS = frozenset(("account", "currency", "issuer"))


def encode_path_step(step: Mapping) -> bytes:
    """
    Encode one path step.

    Raises:
        MalformedInputError: If the step has no account, currency or issuer,
            or has any key other than those and type/type_hex
    """
    unexpected = set(step) - _STEP_KEYS - _IGNORED_STEP_KEYS
    if unexpected:
        raise MalformedInputError(
            f"Unexpected path step keys: {sorted(unexpected)}",
            details={"keys": sorted(unexpected)}
        )

    kind = 0
    body = b""
    if "account" in step:
        kind |= TYPE_ACCOUNT
        body += decode_account_id(step["account"])
    if "currency" in step:
        kind |= TYPE_CURRENCY
        body += encode_currency(step["currency"], allow_native=True)
    if "issuer" in step:
        kind |= TYPE_ISSUER
        body += decode_account_id(step["issuer"])

    if not kind:
        raise MalformedInputError("Path step needs an account, currency or issuer")
    return bytes([kind]) + body


class PathSetType(SerializedType):
    type_name = "PathSet"

    def to_bytes(self, value, ctx=None, depth=0) -> bytes:
        expect_type(value, list, self.type_name)
        if not value:
            raise MalformedInputError("PathSet must contain at least one path")

        out = bytearray()
        for i, path in enumerate(value):
            if i:
                out.append(PATH_SEPARATOR)
            try:
                expect_type(path, list, "Path")
                if not path:
                    raise MalformedInputError("Path must contain at least one step")
                for j, step in enumerate(path):
                    try:
                        expect_type(step, Mapping, "PathStep")
                        out += encode_path_step(step)
                    except BinaryCodecError as exc:
                        exc.add_path(str(j))
                        raise
            except BinaryCodecError as exc:
                exc.add_path(str(i))
                raise
        out.append(PATHSET_END)
        return bytes(out)


PATH_SET = PathSetType()

__all__ = ["PathSetType", "PATH_SET", "encode_path_step"]
