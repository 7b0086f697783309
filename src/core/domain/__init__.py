"""
Domain models and value objects.

Contains CoercedInteger, its CoercionSnapshot and the input type errors.
"""

from src.core.domain.coerced_integer import CoercedInteger
from src.core.domain.errors import InvalidTypeError, ensure_int, ensure_text
from src.core.domain.snapshot import EXACT_STRING_FIELDS, CoercionSnapshot

__all__ = [
    # Coercion engine
    "CoercedInteger",
    # Snapshot model
    "CoercionSnapshot",
    "EXACT_STRING_FIELDS",
    # Errors
    "InvalidTypeError",
    "ensure_int",
    "ensure_text",
]
