"""
Definitions registry.

Resolves field names to their wire metadata and symbolic enumeration
values to their numeric codes. A registry is immutable once built and is
safe to share between threads.
"""

from __future__ import annotations
import json
import logging
import threading
from importlib import resources
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple, Union

from pydantic import ValidationError

from ..codec.field_id import encode_field_id
from ..runtime.errors import (
    DefinitionsError, UnknownEnumValueError, UnknownFieldNameError, UnknownTypeError
)
from .models import DefinitionsFile, FieldDefinition

logger = logging.getLogger(__name__)

DEFAULT_DEFINITIONS = "definitions.json"


class DefinitionsRegistry:
    """
    Lookup tables built from a definitions file.
    """

    def __init__(self, definitions: DefinitionsFile):
        """
        Build lookup tables.

        Args:
            definitions: Parsed definitions file

        Raises:
            DefinitionsError: If a field references an unknown type or two
                serialized fields share a Field ID
        """
        self._types: Dict[str, int] = dict(definitions.types)
        self._transaction_types = dict(definitions.transaction_types)
        self._ledger_entry_types = dict(definitions.ledger_entry_types)
        self._transaction_results = dict(definitions.transaction_results)

        fields: Dict[str, FieldDefinition] = {}
        by_id: Dict[Tuple[int, int], FieldDefinition] = {}
        for name, info in definitions.fields:
            if info.type not in self._types:
                raise DefinitionsError(
                    f"Field {name} has unknown type {info.type}",
                    details={"field": name, "type": info.type}
                )
            if name in fields:
                raise DefinitionsError(f"Field {name} is defined twice", details={"field": name})

            definition = FieldDefinition(
                name=name,
                type_name=info.type,
                type_code=self._types[info.type],
                field_code=info.nth,
                is_variable_length=info.is_vl_encoded,
                is_serialized=info.is_serialized,
                is_signing_field=info.is_signing_field,
            )
            fields[name] = definition

            if definition.is_serialized:
                key = definition.sort_key
                if key in by_id:
                    raise DefinitionsError(
                        f"Fields {by_id[key].name} and {name} share field id {key}",
                        details={"field": name, "field_id": list(key)}
                    )
                by_id[key] = definition

        self._fields = MappingProxyType(fields)
        self._by_id = MappingProxyType(by_id)

        logger.info(
            f"Loaded definitions: {len(self._types)} types, {len(fields)} fields, "
            f"{len(self._transaction_types)} transaction types"
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "DefinitionsRegistry":
        """
        Build a registry from already-parsed definitions data.

        Raises:
            DefinitionsError: If the data does not match the definitions layout
        """
        try:
            definitions = DefinitionsFile.model_validate(data)
        except ValidationError as e:
            raise DefinitionsError(f"Invalid definitions data: {e.error_count()} errors", cause=e)
        return cls(definitions)

    @classmethod
    def from_json(cls, text: Union[str, bytes]) -> "DefinitionsRegistry":
        """
        Build a registry from definitions JSON text.

        Raises:
            DefinitionsError: If the text is not valid definitions JSON
        """
        try:
            data = json.loads(text)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise DefinitionsError(f"Definitions are not valid JSON: {e}", cause=e)
        return cls.from_dict(data)

    @classmethod
    def load_default(cls) -> "DefinitionsRegistry":
        """Build a registry from the definitions file shipped with the package."""
        text = resources.files(__package__).joinpath(DEFAULT_DEFINITIONS).read_text(encoding="utf-8")
        return cls.from_json(text)

    @property
    def fields(self) -> Mapping[str, FieldDefinition]:
        """Read-only view of all field definitions by name."""
        return self._fields

    @property
    def types(self) -> Mapping[str, int]:
        return MappingProxyType(self._types)

    def __contains__(self, name: object) -> bool:
        return name in self._fields

    def get_field(self, name: str) -> Optional[FieldDefinition]:
        """Get a field definition by name, or None if it is not defined."""
        return self._fields.get(name)

    def lookup_field(self, name: str) -> FieldDefinition:
        """
        Get a field definition by name.

        Raises:
            UnknownFieldNameError: If the field is not defined
        """
        definition = self._fields.get(name)
        if definition is None:
            raise UnknownFieldNameError(f"Unknown field name: {name}", details={"field": name})
        return definition

    def lookup_type_code(self, type_name: str) -> int:
        """
        Get the numeric code of a type name.

        Raises:
            UnknownTypeError: If the type is not defined
        """
        try:
            return self._types[type_name]
        except KeyError:
            raise UnknownTypeError(f"Unknown type name: {type_name}", details={"type": type_name})

    def field_header_bytes(self, type_code: int, field_code: int) -> bytes:
        """
        Field ID tag for a (type_code, field_code) pair.

        Raises:
            DefinitionsError: If either code is outside 1-255
        """
        return encode_field_id(type_code, field_code)

    def field_by_id(self, type_code: int, field_code: int) -> FieldDefinition:
        """
        Get the serialized field with the given Field ID.

        Raises:
            UnknownFieldNameError: If no serialized field has that ID
        """
        definition = self._by_id.get((type_code, field_code))
        if definition is None:
            raise UnknownFieldNameError(
                f"No field with id ({type_code}, {field_code})",
                details={"field_id": [type_code, field_code]}
            )
        return definition

    def transaction_type_code(self, name: str) -> int:
        return self._enum_code(self._transaction_types, name, "transaction type")

    def ledger_entry_type_code(self, name: str) -> int:
        return self._enum_code(self._ledger_entry_types, name, "ledger entry type")

    def transaction_result_code(self, name: str) -> int:
        return self._enum_code(self._transaction_results, name, "transaction result")

    @staticmethod
    def _enum_code(table: Mapping[str, int], name: str, kind: str) -> int:
        try:
            return table[name]
        except KeyError:
            raise UnknownEnumValueError(f"Unknown {kind}: {name}", details={"value": name})


_default_registry: Optional[DefinitionsRegistry] = None
_default_lock = threading.Lock()


def get_default_registry() -> DefinitionsRegistry:
    """Get the shared registry built from the bundled definitions file."""
    global _default_registry
    if _default_registry is None:
        with _default_lock:
            if _default_registry is None:
                _default_registry = DefinitionsRegistry.load_default()
    return _default_registry


__all__ = ["DefinitionsRegistry", "get_default_registry"]
