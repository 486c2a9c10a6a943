"""
Canonical field ordering.

Fields are written in ascending (type_code, field_code) order. Fields that
are not serialized (hash, index and similar metadata) are dropped, and when
preparing bytes to sign, so are fields outside the signature such as
TxnSignature.
"""

from typing import Iterable, List

from .definitions.models import FieldDefinition
from .definitions.registry import DefinitionsRegistry


def order_fields(registry: DefinitionsRegistry, names: Iterable[str],
                 signing_only: bool = False) -> List[FieldDefinition]:
    """
    Resolve, filter and sort field names.

    Args:
        registry: Definitions to resolve names against
        names: Field names present in an object
        signing_only: Keep only fields covered by a signature

    Returns:
        Definitions of the fields to write, in canonical order

    Raises:
        UnknownFieldNameError: If any name is not defined
    """
    definitions = [registry.lookup_field(name) for name in names]
    kept = [
        d for d in definitions
        if d.is_serialized and (d.is_signing_field or not signing_only)
    ]
    return sorted(kept, key=lambda d: d.sort_key)


__all__ = ["order_fields"]
