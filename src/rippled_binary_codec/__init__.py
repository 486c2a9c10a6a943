"""
rippled-binary-codec

Canonical binary serialization of XRP Ledger transactions. Converts a
transaction from its JSON form to the exact bytes that are hashed and
signed.
"""

# Serialization entry points
from .serializer import (
    FieldSlot, TransactionSerializer, encode_transaction, serialize_tx, serialize_tx_hex
)
from .options import SerializerOptions

# Definitions
from .definitions import DefinitionsRegistry, FieldDefinition, TypeCode, get_default_registry

# Addresses
from .address import decode_account_id, encode_account_id, is_valid_classic_address

# Errors
from .runtime.errors import *

__version__ = "0.1.0"
__all__ = [
    "__version__",
    # Serialization
    "FieldSlot",
    "SerializerOptions",
    "TransactionSerializer",
    "encode_transaction",
    "serialize_tx",
    "serialize_tx_hex",
    # Definitions
    "DefinitionsRegistry",
    "FieldDefinition",
    "TypeCode",
    "get_default_registry",
    # Addresses
    "decode_account_id",
    "encode_account_id",
    "is_valid_classic_address",
    # Errors
    "ErrorCode",
    "BinaryCodecError",
    "MalformedInputError",
    "ParseError",
    "UnknownFieldNameError",
    "UnknownTypeError",
    "UnsupportedTypeError",
    "DefinitionsError",
    "TypeMismatchError",
    "IntegerOutOfRangeError",
    "UnknownEnumValueError",
    "NestingTooDeepError",
    "InvalidHashLengthError",
    "HexError",
    "OddLengthError",
    "InvalidDigitError",
    "VariableLengthOverflowError",
    "AccountIdError",
    "InvalidChecksumError",
    "InvalidAlphabetError",
    "InvalidAccountIdError",
    "AmountError",
    "AmountOutOfRangeError",
    "InvalidAmountFormatError",
    "AmountPrecisionLossError",
    "InvalidCurrencyError",
]
