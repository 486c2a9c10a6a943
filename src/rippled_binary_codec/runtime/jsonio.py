"""
JSON input handling.

Thin wrapper over json.loads that produces the generic structured value
the serializer consumes, with the strictness a signing path needs:
duplicate object keys and non-finite number literals are rejected
instead of being silently resolved.
"""

from __future__ import annotations
import json
from typing import Any, Dict, List, Tuple, Union

from .errors import ParseError


def _reject_constant(token: str) -> Any:
    raise ParseError(f"Non-finite number literal {token!r} is not allowed")


def _unique_object(pairs: List[Tuple[str, Any]]) -> Dict[str, Any]:
    obj: Dict[str, Any] = {}
    for key, value in pairs:
        if key in obj:
            raise ParseError(f"Duplicate key {key!r}", details={"key": key})
        obj[key] = value
    return obj


def parse_json(text: Union[str, bytes], reject_duplicate_keys: bool = True) -> Any:
    """
    Parse JSON text into plain Python values.

    Args:
        text: JSON document as str or UTF-8 bytes
        reject_duplicate_keys: Fail when an object repeats a key

    Returns:
        Parsed value (dict, list, str, int, float, bool or None)

    Raises:
        ParseError: If the text is not valid JSON, or nests or spells
            numbers beyond what the decoder accepts
    """
    hook = _unique_object if reject_duplicate_keys else None
    try:
        return json.loads(text, object_pairs_hook=hook, parse_constant=_reject_constant)
    except ParseError:
        raise
    except (ValueError, TypeError, RecursionError) as e:
        raise ParseError(f"Invalid JSON: {e}", cause=e)


__all__ = ["parse_json"]
