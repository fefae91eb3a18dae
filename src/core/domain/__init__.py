"""
Domain models and value objects.

Contains the dimensional-unit algebra: DimensionSignature, the named unit
catalog, the expression parser and the type classifier.
"""

from src.core.domain import catalog
from src.core.domain.catalog import (
    ATOMIC_UNITS,
    CATALOG,
    NamedUnit,
    catalog_names,
    get_named_unit,
)
from src.core.domain.classifier import classify, find_named_unit, matching_names
from src.core.domain.parser import (
    DEFAULT_PARSER_CONFIG,
    InvalidExpression,
    ParserConfig,
    parse_signature,
    resolve_symbol,
    tokenize,
)
from src.core.domain.rendering import (
    BASE_SYMBOLS,
    STYLE_CARET,
    STYLE_UNICODE,
    format_exponents,
    format_signature,
)
from src.core.domain.signature import DIMENSIONLESS, DimensionSignature
from src.core.math.exponent_safeguards import (
    ExponentOverflow,
    NonIntegralRoot,
    UnitError,
)
from src.core.math.signature_codec import InvalidIndex

__all__ = [
    # Signature
    "DimensionSignature",
    "DIMENSIONLESS",
    # Exceptions
    "UnitError",
    "ExponentOverflow",
    "NonIntegralRoot",
    "InvalidIndex",
    "InvalidExpression",
    # Catalog
    "catalog",
    "NamedUnit",
    "CATALOG",
    "ATOMIC_UNITS",
    "get_named_unit",
    "catalog_names",
    # Parser
    "ParserConfig",
    "DEFAULT_PARSER_CONFIG",
    "parse_signature",
    "resolve_symbol",
    "tokenize",
    # Classifier
    "classify",
    "find_named_unit",
    "matching_names",
    # Rendering
    "BASE_SYMBOLS",
    "STYLE_CARET",
    "STYLE_UNICODE",
    "format_exponents",
    "format_signature",
]
