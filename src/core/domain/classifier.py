"""
Type Classifier — сигнатура → имя физической величины

Правило: первое точное совпадение в порядке CATALOG. Если совпадений нет,
возвращается каноническая символьная запись ("m^2/kg"), без исключения.

Индекс первого совпадения строится один раз при импорте и эквивалентен
последовательному просмотру каталога.
"""

import logging
from typing import Final, Optional

from src.core.domain.catalog import CATALOG, NamedUnit
from src.core.domain.rendering import STYLE_CARET, format_signature
from src.core.domain.signature import DimensionSignature

logger = logging.getLogger(__name__)


def _build_first_match_index() -> dict[DimensionSignature, NamedUnit]:
    index: dict[DimensionSignature, NamedUnit] = {}
    for unit in CATALOG:
        index.setdefault(unit.signature, unit)
    return index


_FIRST_MATCH: Final[dict[DimensionSignature, NamedUnit]] = _build_first_match_index()


def find_named_unit(signature: DimensionSignature) -> Optional[NamedUnit]:
    """Первая запись каталога с такой же сигнатурой или None."""
    return _FIRST_MATCH.get(signature)


def matching_names(signature: DimensionSignature) -> tuple[str, ...]:
    """
    Все имена каталога с такой же сигнатурой, в порядке приоритета.

    Например, для сигнатуры давления:
    ("Pressure", "CompressiveStrength", "ShearModulus", "Stress", ...)
    """
    return tuple(unit.name for unit in CATALOG if unit.signature == signature)


def classify(signature: DimensionSignature, style: str = STYLE_CARET) -> str:
    """
    Имя физической величины для отображения.

    Args:
        signature: Сигнатура размерности
        style: Стиль fallback-записи ("caret" или "unicode")

    Returns:
        Имя из каталога ("Pressure", "Velocity", ...) или символьная запись
    """
    unit = find_named_unit(signature)
    if unit is not None:
        return unit.name

    fallback = format_signature(signature, style=style)
    logger.debug("No catalog match for %s, using %r", signature.exponents, fallback)
    return fallback
