"""
Amount type.

Native amounts are a count of drops given as a string (or int) and take 8
bytes. Issued amounts are a {currency, issuer, value} object and take 48
bytes: an 8-byte decimal floating point header, the currency and the
issuer's account ID.
"""

import re
from collections.abc import Mapping
from decimal import Decimal, InvalidOperation

from .base import SerializedType
from .currency import encode_currency
from ..codec.writer import BinaryWriter
from ..address.codec import decode_account_id
from ..runtime.errors import (
    AmountOutOfRangeError, AmountPrecisionLossError, InvalidAmountFormatError,
    MalformedInputError, TypeMismatchError
)

MAX_DROPS = 10 ** 17 - 1
MIN_MANTISSA = 10 ** 15
MIN_EXPONENT = -96
MAX_EXPONENT = 80
MAX_PRECISION = 15

NOT_NATIVE_BIT = 0x8000000000000000
POSITIVE_BIT = 0x4000000000000000
ZERO_ISSUED = NOT_NATIVE_BIT

ISSUED_KEYS = frozenset(("currency", "issuer", "value"))

_NATIVE_RE = re.compile(r"-?[0-9]+")
_DECIMAL_RE = re.compile(r"[+-]?([0-9]+(\.[0-9]*)?|\.[0-9]+)([eE][+-]?[0-9]+)?")


def _u64(value: int) -> bytes:
    writer = BinaryWriter()
    writer.u64(value)
    return writer.to_bytes()


def encode_native(value) -> bytes:
    """
    Encode a drop count.

    Raises:
        InvalidAmountFormatError: If value is not an integer or digit string
        AmountOutOfRangeError: If value is negative or above MAX_DROPS
    """
    if isinstance(value, int) and not isinstance(value, bool):
        drops = value
    elif isinstance(value, str) and _NATIVE_RE.fullmatch(value):
        # int() refuses very long digit strings, so range-check by length first
        if len(value.lstrip("-").lstrip("0")) > len(str(MAX_DROPS)):
            raise AmountOutOfRangeError(
                f"Native amount of {len(value)} digits outside 0..{MAX_DROPS}",
                details={"digits": len(value)}
            )
        drops = int(value)
    else:
        raise InvalidAmountFormatError(
            f"Native amount must be a string of digits, got {value!r}",
            details={"value": repr(value)}
        )

    if drops < 0 or drops > MAX_DROPS:
        raise AmountOutOfRangeError(
            f"Native amount {drops} outside 0..{MAX_DROPS}",
            details={"value": str(drops)}
        )
    return _u64(POSITIVE_BIT | drops)


def encode_issued_value(value: str) -> bytes:
    """
    Encode the 8-byte header of an issued amount.

    Raises:
        InvalidAmountFormatError: If value is not a decimal string
        AmountPrecisionLossError: If value needs more than 15 significant
            digits or an exponent outside -96..80
    """
    if not isinstance(value, str) or not _DECIMAL_RE.fullmatch(value):
        raise InvalidAmountFormatError(
            f"Issued amount value must be a decimal string, got {value!r}",
            details={"value": repr(value)}
        )
    try:
        number = Decimal(value)
    except InvalidOperation as e:
        raise InvalidAmountFormatError(f"Cannot parse amount {value!r}", cause=e)

    if number.is_zero():
        return _u64(ZERO_ISSUED)

    sign, digits, exponent = number.as_tuple()
    digits = list(digits)
    while digits[-1] == 0:
        digits.pop()
        exponent += 1

    if len(digits) > MAX_PRECISION:
        raise AmountPrecisionLossError(
            f"{value} has more than {MAX_PRECISION} significant digits",
            details={"value": value}
        )

    mantissa = int("".join(str(d) for d in digits))
    while mantissa < MIN_MANTISSA:
        mantissa *= 10
        exponent -= 1

    if exponent < MIN_EXPONENT or exponent > MAX_EXPONENT:
        raise AmountPrecisionLossError(
            f"{value} is outside the representable exponent range",
            details={"value": value, "exponent": exponent}
        )

    header = NOT_NATIVE_BIT | ((exponent + 97) << 54) | mantissa
    if not sign:
        header |= POSITIVE_BIT
    return _u64(header)


def encode_issued(value: Mapping) -> bytes:
    """
    Encode a {currency, issuer, value} object.

    Raises:
        MalformedInputError: If the object does not have exactly those keys
    """
    keys = set(value.keys())
    if keys != ISSUED_KEYS:
        raise MalformedInputError(
            "Issued amount needs exactly currency, issuer and value",
            details={"keys": sorted(str(k) for k in keys)}
        )
    return (
        encode_issued_value(value["value"])
        + encode_currency(value["currency"])
        + decode_account_id(value["issuer"])
    )


class AmountType(SerializedType):
    type_name = "Amount"

    def to_bytes(self, value, ctx=None, depth=0) -> bytes:
        if isinstance(value, Mapping):
            return encode_issued(value)
        if isinstance(value, (str, int)) and not isinstance(value, bool):
            return encode_native(value)
        raise TypeMismatchError(
            f"Amount expects a string, integer or object, got {type(value).__name__}",
            details={"value": repr(value)}
        )


AMOUNT = AmountType()

__all__ = [
    "AMOUNT",
    "AmountType",
    "MAX_DROPS",
    "encode_issued",
    "encode_issued_value",
    "encode_native",
]
