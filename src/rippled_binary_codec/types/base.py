"""
Base class for wire type encoders.

Each encoder turns the JSON value of one field into its payload bytes.
The Field ID and any length prefix are added by the serializer, which is
passed in as ``ctx`` so container types can recurse into it.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any, TYPE_CHECKING

from ..runtime.errors import NestingTooDeepError, TypeMismatchError

if TYPE_CHECKING:
    from ..serializer import TransactionSerializer


class SerializedType(ABC):
    """
    Encoder for one wire type.
    """

    type_name: str = ""

    @abstractmethod
    def to_bytes(self, value: Any, ctx: "TransactionSerializer", depth: int = 0) -> bytes:
        """
        Encode a field value.

        Args:
            value: Parsed JSON value of the field
            ctx: Serializer handling the enclosing object
            depth: Nesting level of the enclosing object (0 for the transaction)

        Returns:
            Payload bytes, without Field ID or length prefix
        """
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.type_name})"


def expect_type(value: Any, expected: type, type_name: str) -> None:
    """Raise TypeMismatchError unless value is an instance of expected (bool is never an int)."""
    if isinstance(value, bool) and expected is not bool:
        raise TypeMismatchError(
            f"{type_name} expects {expected.__name__}, got bool",
            details={"value": value}
        )
    if not isinstance(value, expected):
        raise TypeMismatchError(
            f"{type_name} expects {expected.__name__}, got {type(value).__name__}",
            details={"value": repr(value)}
        )


def check_depth(ctx: "TransactionSerializer", depth: int) -> None:
    """Raise NestingTooDeepError if depth exceeds the configured maximum."""
    if depth > ctx.options.max_depth:
        raise NestingTooDeepError(
            f"Nesting depth {depth} exceeds maximum {ctx.options.max_depth}",
            details={"max_depth": ctx.options.max_depth}
        )


__all__ = ["SerializedType", "expect_type", "check_depth"]
