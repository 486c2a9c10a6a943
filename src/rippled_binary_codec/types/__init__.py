"""Wire type encoders"""

from .amount import encode_issued, encode_native
from .base import SerializedType
from .currency import encode_currency
from .dispatch import TYPE_ENCODERS, get_encoder

__all__ = [
    "SerializedType",
    "TYPE_ENCODERS",
    "encode_currency",
    "encode_issued",
    "encode_native",
    "get_encoder",
]
