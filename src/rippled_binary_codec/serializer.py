"""
Transaction serializer.

Turns a transaction in its JSON form into the canonical binary encoding
that is hashed and signed. For each field present the output holds its
Field ID, an optional length prefix and the encoded value, with fields in
canonical order.

Example:
    >>> serialize_tx_hex('{"TransactionType": "Payment", "Flags": 0}')
    '1200002200000000'
"""

from __future__ import annotations
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, List, Optional, Union

from .codec.writer import BinaryWriter
from .codec.hexcodec import encode_hex
from .definitions.models import FieldDefinition
from .definitions.registry import DefinitionsRegistry, get_default_registry
from .options import DEFAULT_OPTIONS, SerializerOptions
from .ordering import order_fields
from .runtime.errors import BinaryCodecError, MalformedInputError
from .runtime.jsonio import parse_json
from .types.dispatch import get_encoder

logger = logging.getLogger(__name__)

# Fields whose values may be given by name instead of numeric code
_SYMBOLIC_FIELDS = {
    "TransactionType": DefinitionsRegistry.transaction_type_code,
    "LedgerEntryType": DefinitionsRegistry.ledger_entry_type_code,
    "TransactionResult": DefinitionsRegistry.transaction_result_code,
}


@dataclass(frozen=True)
class FieldSlot:
    """A field definition paired with the value being written for it."""
    definition: FieldDefinition
    value: Any


class TransactionSerializer:
    """
    Serializer bound to a definitions registry and options.

    Instances hold no per-call state and can be shared between threads.
    """

    def __init__(self, registry: Optional[DefinitionsRegistry] = None,
                 options: Optional[SerializerOptions] = None):
        """
        Initialize serializer.

        Args:
            registry: Definitions to use (default: bundled definitions)
            options: Serializer options (default: SerializerOptions())
        """
        self.registry = registry if registry is not None else get_default_registry()
        self.options = options if options is not None else DEFAULT_OPTIONS

    def serialize_json(self, text: Union[str, bytes], for_signing: bool = False) -> bytes:
        """
        Serialize a transaction given as JSON text.

        Raises:
            ParseError: If the text is not valid JSON
            BinaryCodecError: If the transaction cannot be encoded
        """
        value = parse_json(text, reject_duplicate_keys=self.options.reject_duplicate_keys)
        return self.serialize(value, for_signing)

    def serialize(self, tx: Any, for_signing: bool = False) -> bytes:
        """
        Serialize a parsed transaction.

        Args:
            tx: Transaction as a mapping of field names to JSON values
            for_signing: Leave out fields that are not covered by signatures

        Returns:
            Canonical binary encoding

        Raises:
            MalformedInputError: If tx is not a mapping
            BinaryCodecError: If any field cannot be encoded
        """
        if not isinstance(tx, Mapping):
            raise MalformedInputError(
                f"Transaction must be a JSON object, got {type(tx).__name__}"
            )
        data = self.serialize_object(tx, signing_only=for_signing, depth=0)
        logger.debug(f"Serialized {len(tx)} fields to {len(data)} bytes (for_signing={for_signing})")
        return data

    def field_slots(self, obj: Mapping, signing_only: bool = False) -> List[FieldSlot]:
        """Fields of obj to write, in canonical order."""
        return [
            FieldSlot(definition, obj[definition.name])
            for definition in order_fields(self.registry, obj.keys(), signing_only)
        ]

    def serialize_object(self, obj: Mapping, signing_only: bool = False, depth: int = 0) -> bytes:
        """
        Serialize the fields of an object, without an end marker.

        Args:
            obj: Mapping of field names to values
            signing_only: Keep only signing fields
            depth: Nesting level of obj (0 for the transaction)
        """
        writer = BinaryWriter()
        for slot in self.field_slots(obj, signing_only):
            writer.bytes(self.encode_field(slot.definition, slot.value, depth))
        return writer.to_bytes()

    def encode_field(self, definition: FieldDefinition, value: Any, depth: int = 0) -> bytes:
        """
        Encode one field: Field ID, length prefix if needed, then value.

        Errors raised while encoding get the field name prepended to their path.
        """
        try:
            value = self._resolve_symbolic(definition, value)
            payload = get_encoder(definition.type_code).to_bytes(value, self, depth)

            writer = BinaryWriter()
            writer.field_id(definition.type_code, definition.field_code)
            if definition.is_variable_length:
                writer.vl_bytes(payload)
            else:
                writer.bytes(payload)
            return writer.to_bytes()
        except BinaryCodecError as exc:
            exc.add_path(definition.name)
            raise

    def _resolve_symbolic(self, definition: FieldDefinition, value: Any) -> Any:
        lookup = _SYMBOLIC_FIELDS.get(definition.name)
        if lookup is not None and isinstance(value, str):
            return lookup(self.registry, value)
        return value


def encode_transaction(tx: Mapping, for_signing: bool = False, *,
                       registry: Optional[DefinitionsRegistry] = None,
                       options: Optional[SerializerOptions] = None) -> bytes:
    """
    Serialize an already-parsed transaction.

    Args:
        tx: Transaction as a mapping of field names to JSON values
        for_signing: Leave out fields that are not covered by signatures
        registry: Definitions to use (default: bundled definitions)
        options: Serializer options

    Returns:
        Canonical binary encoding
    """
    return TransactionSerializer(registry, options).serialize(tx, for_signing)


def serialize_tx(json_text: Union[str, bytes], for_signing: bool = False, *,
                 registry: Optional[DefinitionsRegistry] = None,
                 options: Optional[SerializerOptions] = None) -> bytes:
    """
    Serialize a transaction given as JSON text.

    Args:
        json_text: Transaction JSON
        for_signing: Leave out fields that are not covered by signatures
        registry: Definitions to use (default: bundled definitions)
        options: Serializer options

    Returns:
        Canonical binary encoding

    Raises:
        ParseError: If the text is not valid JSON
        MalformedInputError: If the JSON is not an object
        BinaryCodecError: If any field cannot be encoded
    """
    return TransactionSerializer(registry, options).serialize_json(json_text, for_signing)


def serialize_tx_hex(json_text: Union[str, bytes], for_signing: bool = False, *,
                     registry: Optional[DefinitionsRegistry] = None,
                     options: Optional[SerializerOptions] = None) -> str:
    """Same as serialize_tx, returning upper-case hex."""
    return encode_hex(serialize_tx(json_text, for_signing, registry=registry, options=options))


__all__ = [
    "FieldSlot",
    "TransactionSerializer",
    "encode_transaction",
    "serialize_tx",
    "serialize_tx_hex",
]
