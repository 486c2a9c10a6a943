"""Field definitions and type codes"""

from .models import DefinitionsFile, FieldDefinition, FieldInfo, TypeCode
from .registry import DefinitionsRegistry, get_default_registry

__all__ = [
    "DefinitionsFile",
    "DefinitionsRegistry",
    "FieldDefinition",
    "FieldInfo",
    "TypeCode",
    "get_default_registry",
]
