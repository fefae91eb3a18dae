"""
Contract Validation Module

Модуль для валидации JSON контрактов сохранённых сигнатур размерности.
"""

from .validators import (
    ContractValidator,
    DimensionSignatureValidator,
    SchemaLoader,
    signature_from_payload,
    signature_to_payload,
    validate_dimension_signature,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "DimensionSignatureValidator",
    # Functions
    "validate_dimension_signature",
    "signature_to_payload",
    "signature_from_payload",
]
