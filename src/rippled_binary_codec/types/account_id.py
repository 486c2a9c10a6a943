"""AccountID: classic address decoded to its 20 raw bytes."""

from .base import SerializedType
from ..address.codec import decode_account_id


class AccountIDType(SerializedType):
    type_name = "AccountID"

    def to_bytes(self, value, ctx=None, depth=0) -> bytes:
        return decode_account_id(value)


ACCOUNT_ID = AccountIDType()

__all__ = ["AccountIDType", "ACCOUNT_ID"]
