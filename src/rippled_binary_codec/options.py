"""
Serializer options.

Typed knobs for TransactionSerializer. Defaults match what a signing path
needs; loosen them only for inspecting data from trusted sources.
"""

from __future__ import annotations
from pydantic import BaseModel, Field


class SerializerOptions(BaseModel):
    """
    Options controlling how transactions are parsed and serialized.
    """
    max_depth: int = Field(
        default=32,
        ge=1,
        alias="maxDepth",
        description="Maximum nesting of objects and arrays below the transaction"
    )
    reject_duplicate_keys: bool = Field(
        default=True,
        alias="rejectDuplicateKeys",
        description="Fail when a JSON object repeats a key"
    )

    model_config = {"populate_by_name": True, "frozen": True}


DEFAULT_OPTIONS = SerializerOptions()

__all__ = ["SerializerOptions", "DEFAULT_OPTIONS"]
