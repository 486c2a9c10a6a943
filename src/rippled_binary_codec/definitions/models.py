"""
Definitions data models.

Pydantic models for the definitions file: the table of type codes, field
metadata and the symbolic enumerations (transaction types, ledger entry
types, transaction results) used to serialize transactions.
"""

from __future__ import annotations
from enum import IntEnum
from typing import Any, Dict, List, Tuple

from pydantic import BaseModel, Field, field_validator


class TypeCode(IntEnum):
    """Wire type codes."""

    NOT_PRESENT = 0
    UINT16 = 1
    UINT32 = 2
    UINT64 = 3
    HASH128 = 4
    HASH256 = 5
    AMOUNT = 6
    BLOB = 7
    ACCOUNT_ID = 8
    STOBJECT = 14
    STARRAY = 15
    UINT8 = 16
    HASH160 = 17
    PATHSET = 18
    VECTOR256 = 19

    # Pseudo-types that never appear on the wire
    DONE = -1
    UNKNOWN = -2
    TRANSACTION = 10001
    LEDGER_ENTRY = 10002
    VALIDATION = 10003
    METADATA = 10004


class FieldInfo(BaseModel):
    """Per-field metadata as stored in the definitions file."""
    nth: int = Field(description="Field code within its type")
    is_vl_encoded: bool = Field(alias="isVLEncoded")
    is_serialized: bool = Field(alias="isSerialized")
    is_signing_field: bool = Field(alias="isSigningField")
    type: str = Field(description="Type name, a key of TYPES")

    model_config = {"populate_by_name": True, "frozen": True}


class FieldDefinition(BaseModel):
    """
    Resolved field metadata.

    Combines a field's FieldInfo with its name and numeric type code so the
    serializer never has to consult the type table again.
    """
    name: str
    type_name: str
    type_code: int
    field_code: int
    is_variable_length: bool = False
    is_serialized: bool = True
    is_signing_field: bool = True

    model_config = {"frozen": True}

    @property
    def sort_key(self) -> Tuple[int, int]:
        """Canonical ordering key: type code first, then field code."""
        return (self.type_code, self.field_code)


class DefinitionsFile(BaseModel):
    """Top-level layout of definitions.json."""
    types: Dict[str, int] = Field(alias="TYPES")
    fields: List[Tuple[str, FieldInfo]] = Field(alias="FIELDS")
    transaction_types: Dict[str, int] = Field(default_factory=dict, alias="TRANSACTION_TYPES")
    ledger_entry_types: Dict[str, int] = Field(default_factory=dict, alias="LEDGER_ENTRY_TYPES")
    transaction_results: Dict[str, int] = Field(default_factory=dict, alias="TRANSACTION_RESULTS")

    model_config = {"populate_by_name": True}

    @field_validator("fields", mode="before")
    @classmethod
    def validate_fields(cls, v: Any) -> Any:
        """Each entry must be a [name, info] pair."""
        if not isinstance(v, list):
            raise ValueError("FIELDS must be a list")
        for entry in v:
            if not isinstance(entry, (list, tuple)) or len(entry) != 2:
                raise ValueError(f"FIELDS entry must be a [name, info] pair, got {entry!r}")
        return v


__all__ = ["TypeCode", "FieldInfo", "FieldDefinition", "DefinitionsFile"]
