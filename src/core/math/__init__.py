"""
Core math modules для dimensional algebra

Целочисленные показатели размерности и их упаковка в машинное слово.
"""

# Exponent Safeguards
from src.core.math.exponent_safeguards import (
    # Range constants
    EPS_EXPONENT,
    EXPONENT_BIAS,
    EXPONENT_MAX,
    EXPONENT_MIN,
    FIELD_BITS,
    # Exceptions
    ExponentOverflow,
    NonIntegralRoot,
    UnitError,
    # Checks
    is_exponent_in_range,
    is_valid_float,
    normalize_power,
    scale_exponent,
    validate_exponent,
)

# Signature Codec
from src.core.math.signature_codec import (
    DIMENSIONLESS_WORD,
    DIMENSIONS,
    FIELD_COUNT,
    FIELD_MASK,
    WORD_BITS,
    WORD_MAX,
    InvalidIndex,
    decode_exponents,
    decode_field,
    encode_exponents,
    validate_index,
    validate_word,
)

__all__ = [
    # Exponent Safeguards — Constants
    "EPS_EXPONENT",
    "EXPONENT_BIAS",
    "EXPONENT_MAX",
    "EXPONENT_MIN",
    "FIELD_BITS",
    # Exponent Safeguards — Exceptions
    "ExponentOverflow",
    "NonIntegralRoot",
    "UnitError",
    # Exponent Safeguards — Functions
    "is_exponent_in_range",
    "is_valid_float",
    "normalize_power",
    "scale_exponent",
    "validate_exponent",
    # Signature Codec — Constants
    "DIMENSIONLESS_WORD",
    "DIMENSIONS",
    "FIELD_COUNT",
    "FIELD_MASK",
    "WORD_BITS",
    "WORD_MAX",
    # Signature Codec — Exceptions
    "InvalidIndex",
    # Signature Codec — Functions
    "decode_exponents",
    "decode_field",
    "encode_exponents",
    "validate_index",
    "validate_word",
]
