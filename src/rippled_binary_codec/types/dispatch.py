"""
Type encoder dispatch.

Maps each wire type code to the encoder for its values. Pseudo-types such
as Transaction or Unknown have no encoder.
"""

from typing import Dict

from .account_id import ACCOUNT_ID
from .amount import AMOUNT
from .base import SerializedType
from .blob import BLOB
from .hash import HASH128, HASH160, HASH256
from .path_set import PATH_SET
from .st_array import ST_ARRAY
from .st_object import ST_OBJECT
from .uint import UINT8, UINT16, UINT32, UINT64
from .vector256 import VECTOR256
from ..definitions.models import TypeCode
from ..runtime.errors import UnsupportedTypeError

TYPE_ENCODERS: Dict[TypeCode, SerializedType] = {
    TypeCode.UINT8: UINT8,
    TypeCode.UINT16: UINT16,
    TypeCode.UINT32: UINT32,
    TypeCode.UINT64: UINT64,
    TypeCode.HASH128: HASH128,
    TypeCode.HASH160: HASH160,
    TypeCode.HASH256: HASH256,
    TypeCode.BLOB: BLOB,
    TypeCode.ACCOUNT_ID: ACCOUNT_ID,
    TypeCode.AMOUNT: AMOUNT,
    TypeCode.STOBJECT: ST_OBJECT,
    TypeCode.STARRAY: ST_ARRAY,
    TypeCode.PATHSET: PATH_SET,
    TypeCode.VECTOR256: VECTOR256,
}


def get_encoder(type_code: int) -> SerializedType:
    """
    Get the encoder for a type code.

    Raises:
        UnsupportedTypeError: If the type code has no encoder
    """
    encoder = TYPE_ENCODERS.get(type_code)
    if encoder is None:
        raise UnsupportedTypeError(
            f"No encoder for type code {type_code}",
            details={"type_code": type_code}
        )
    return encoder


__all__ = ["TYPE_ENCODERS", "get_encoder"]
