"""Classic address (base58check) encoding"""

from .codec import (
    ALPHABET,
    decode_account_id,
    decode_base58_check,
    encode_account_id,
    encode_base58_check,
    is_valid_classic_address,
)

__all__ = [
    "ALPHABET",
    "decode_account_id",
    "decode_base58_check",
    "encode_account_id",
    "encode_base58_check",
    "is_valid_classic_address",
]
