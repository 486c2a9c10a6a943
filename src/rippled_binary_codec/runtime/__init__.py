"""Runtime helpers for the binary codec"""

from .errors import BinaryCodecError, ErrorCode
from .jsonio import parse_json

__all__ = [
    "BinaryCodecError",
    "ErrorCode",
    "parse_json",
]
