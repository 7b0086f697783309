"""
Contract Validation Module

Модуль для валидации JSON контрактов (сериализованный CoercionSnapshot).
"""

from .validators import (
    CoercionSnapshotValidator,
    ContractValidator,
    SchemaLoader,
    validate_coercion_snapshot,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "CoercionSnapshotValidator",
    # Functions
    "validate_coercion_snapshot",
]
