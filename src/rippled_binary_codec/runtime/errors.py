"""
Binary Codec Error Model

This module provides the error handling framework for the binary codec.
Every failure raised while serializing a transaction is a BinaryCodecError
carrying a stable ErrorCode, so callers can branch on the kind of failure
without parsing messages.
"""

from __future__ import annotations
from typing import Optional, Dict, Any
from enum import IntEnum


class ErrorCode(IntEnum):
    """Codec error codes."""

    UNKNOWN = 1

    # Input shape errors (100-199)
    MALFORMED_INPUT = 100
    PARSE_ERROR = 101
    UNKNOWN_FIELD_NAME = 102
    TYPE_MISMATCH = 103
    INTEGER_OUT_OF_RANGE = 104
    UNKNOWN_ENUM_VALUE = 105
    NESTING_TOO_DEEP = 106

    # Type registry errors (200-299)
    UNKNOWN_TYPE = 200
    UNSUPPORTED_TYPE = 201
    DEFINITIONS_ERROR = 202

    # Byte-level errors (300-399)
    INVALID_HASH_LENGTH = 300
    ODD_LENGTH = 301
    INVALID_DIGIT = 302
    VARIABLE_LENGTH_OVERFLOW = 303

    # Account identifier errors (400-499)
    INVALID_CHECKSUM = 400
    INVALID_ALPHABET = 401
    INVALID_ACCOUNT_ID = 402

    # Amount errors (500-599)
    AMOUNT_OUT_OF_RANGE = 500
    INVALID_AMOUNT_FORMAT = 501
    AMOUNT_PRECISION_LOSS = 502
    INVALID_CURRENCY = 503


class BinaryCodecError(Exception):
    """
    Base class for all codec errors.

    Provides structured error information: a code, a message, optional
    details (the offending field path lives under ``details["path"]``)
    and the underlying cause.
    """

    def __init__(self, message: str, code: ErrorCode = ErrorCode.UNKNOWN,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        """
        Initialize a codec error.

        Args:
            message: Error message
            code: Error code
            details: Additional error details
            cause: Underlying exception that caused this error
        """
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}
        self.cause = cause

    def __str__(self) -> str:
        """String representation of the error."""
        parts = [f"[{self.code.name}] {self.message}"]
        if self.details:
            parts.append(f"Details: {self.details}")
        if self.cause:
            parts.append(f"Caused by: {self.cause}")
        return " | ".join(parts)

    @property
    def path(self) -> Optional[str]:
        """Dotted path of the field being encoded when the error was raised."""
        return self.details.get("path")

    def add_path(self, segment: str) -> None:
        """Prepend a field name or array index to the error path."""
        current = self.details.get("path")
        self.details["path"] = segment if current is None else f"{segment}.{current}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary representation."""
        result = {
            "code": self.code.value,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        if self.cause:
            result["cause"] = str(self.cause)
        return result

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'BinaryCodecError':
        """Create error from dictionary representation."""
        code = ErrorCode(data.get("code", ErrorCode.UNKNOWN))
        message = data.get("message", "Unknown error")
        details = data.get("details")
        return cls(message, code, details)


class MalformedInputError(BinaryCodecError):
    """Input does not have the structure a transaction requires."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.MALFORMED_INPUT,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, code, details, cause)


class ParseError(MalformedInputError):
    """Input text is not valid JSON."""

    def __init__(self, message: str = "Invalid JSON",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.PARSE_ERROR, details, cause)


class UnknownFieldNameError(BinaryCodecError):
    """Field name has no entry in the definitions registry."""

    def __init__(self, message: str = "Unknown field name",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.UNKNOWN_FIELD_NAME, details, cause)


class UnknownTypeError(BinaryCodecError):
    """Type name has no entry in the definitions registry."""

    def __init__(self, message: str = "Unknown type",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.UNKNOWN_TYPE, details, cause)


class UnsupportedTypeError(BinaryCodecError):
    """Type code is known but has no encoder."""

    def __init__(self, message: str = "Unsupported type",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.UNSUPPORTED_TYPE, details, cause)


class DefinitionsError(BinaryCodecError):
    """Definitions data is inconsistent or cannot be loaded."""

    def __init__(self, message: str = "Invalid definitions",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.DEFINITIONS_ERROR, details, cause)


class TypeMismatchError(BinaryCodecError):
    """Value shape does not match the field's declared type."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.TYPE_MISMATCH,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, code, details, cause)


class IntegerOutOfRangeError(TypeMismatchError):
    """Integer does not fit the width of its field."""

    def __init__(self, message: str = "Integer out of range",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.INTEGER_OUT_OF_RANGE, details, cause)


class UnknownEnumValueError(TypeMismatchError):
    """Symbolic value (transaction type, ledger entry type, result) is unknown."""

    def __init__(self, message: str = "Unknown enumeration value",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.UNKNOWN_ENUM_VALUE, details, cause)


class NestingTooDeepError(BinaryCodecError):
    """Nested objects/arrays exceed the configured maximum depth."""

    def __init__(self, message: str = "Nesting too deep",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.NESTING_TOO_DEEP, details, cause)


class InvalidHashLengthError(BinaryCodecError):
    """Fixed-width hash has the wrong number of bytes."""

    def __init__(self, message: str = "Invalid hash length",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.INVALID_HASH_LENGTH, details, cause)


class HexError(BinaryCodecError):
    """Hex string decoding errors."""


class OddLengthError(HexError):
    """Hex string has an odd number of digits."""

    def __init__(self, message: str = "Odd-length hex string",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.ODD_LENGTH, details, cause)


class InvalidDigitError(HexError):
    """Hex string contains a non-hex character."""

    def __init__(self, message: str = "Invalid hex digit",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.INVALID_DIGIT, details, cause)


class VariableLengthOverflowError(BinaryCodecError):
    """Payload is longer than the length prefix can represent."""

    def __init__(self, message: str = "Variable length overflow",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.VARIABLE_LENGTH_OVERFLOW, details, cause)


class AccountIdError(BinaryCodecError):
    """Account identifier encoding/decoding errors."""


class InvalidChecksumError(AccountIdError):
    """Base58 checksum does not match the payload."""

    def __init__(self, message: str = "Invalid checksum",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.INVALID_CHECKSUM, details, cause)


class InvalidAlphabetError(AccountIdError):
    """String contains characters outside the base58 alphabet."""

    def __init__(self, message: str = "Invalid character in address",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.INVALID_ALPHABET, details, cause)


class InvalidAccountIdError(AccountIdError):
    """Decoded address has the wrong length or version prefix."""

    def __init__(self, message: str = "Invalid account id",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.INVALID_ACCOUNT_ID, details, cause)


class AmountError(BinaryCodecError):
    """Amount encoding errors."""


class AmountOutOfRangeError(AmountError):
    """Native amount is negative or above the drops ceiling."""

    def __init__(self, message: str = "Amount out of range",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.AMOUNT_OUT_OF_RANGE, details, cause)


class InvalidAmountFormatError(AmountError):
    """Amount string cannot be parsed."""

    def __init__(self, message: str = "Invalid amount format",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.INVALID_AMOUNT_FORMAT, details, cause)


class AmountPrecisionLossError(AmountError):
    """Issued amount needs more precision or exponent range than the format has."""

    def __init__(self, message: str = "Amount precision loss",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.AMOUNT_PRECISION_LOSS, details, cause)


class InvalidCurrencyError(AmountError):
    """Currency code is neither an ISO-style code nor 40 hex digits."""

    def __init__(self, message: str = "Invalid currency code",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.INVALID_CURRENCY, details, cause)


__all__ = [
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
