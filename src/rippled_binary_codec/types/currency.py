"""
Currency codes.

A currency is 20 bytes on the wire. Standard three-character codes sit at
bytes 12-14 with every other byte zero; non-standard codes are given as
40 hex digits and copied through.
"""

import re

from ..runtime.errors import InvalidCurrencyError

CURRENCY_LENGTH = 20
NATIVE_CURRENCY = "XRP"

_ISO_CODE_RE = re.compile(r"[A-Za-z0-9?!@#$%^&*<>(){}\[\]|]{3}")
_HEX_CODE_RE = re.compile(r"[0-9A-Fa-f]{40}")


def encode_currency(code: str, allow_native: bool = False) -> bytes:
    """
    Encode a currency code to its 20-byte form.

    Args:
        code: Three-character code or 40 hex digits
        allow_native: Accept "XRP", encoded as all zeros (path steps only)

    Returns:
        20 bytes

    Raises:
        InvalidCurrencyError: If the code has neither form, or is "XRP"
            where the native currency is not allowed
    """
    if not isinstance(code, str):
        raise InvalidCurrencyError(
            f"Currency must be a string, got {type(code).__name__}",
            details={"value": repr(code)}
        )

    if _HEX_CODE_RE.fullmatch(code):
        return bytes.fromhex(code)

    if _ISO_CODE_RE.fullmatch(code):
        if code == NATIVE_CURRENCY:
            if allow_native:
                return bytes(CURRENCY_LENGTH)
            raise InvalidCurrencyError(
                "XRP cannot be used as an issued currency",
                details={"value": code}
            )
        return bytes(12) + code.encode("ascii") + bytes(5)

    raise InvalidCurrencyError(f"Invalid currency code {code!r}", details={"value": code})


__all__ = ["CURRENCY_LENGTH", "NATIVE_CURRENCY", "encode_currency"]
