"""
Rendering — символьная запись сигнатуры размерности

Два стиля:
- caret (канонический): "m^2*kg/(s^3*A)". Разбирается парсером обратно,
  поэтому используется для сериализации и как fallback классификатора.
- unicode: "m²·kg·s⁻³·A⁻¹". Только для отображения (парсер тоже понимает).

Правила (оба стиля):
- Порядок множителей — порядок измерений (Length, Mass, Time, ...)
- Нулевые показатели опускаются, показатель 1 не пишется
- Безразмерная сигнатура → ""
"""

from typing import TYPE_CHECKING, Final, Sequence

if TYPE_CHECKING:
    from src.core.domain.signature import DimensionSignature

# Символы базовых единиц в порядке измерений
BASE_SYMBOLS: Final[tuple[str, ...]] = ("m", "kg", "s", "A", "K", "mol", "cd", "rad")

SUPERSCRIPT_DIGITS: Final[str] = "⁰¹²³⁴⁵⁶⁷⁸⁹"
SUPERSCRIPT_MINUS: Final[str] = "⁻"
SUPERSCRIPT_PLUS: Final[str] = "⁺"

STYLE_CARET: Final[str] = "caret"
STYLE_UNICODE: Final[str] = "unicode"

_TO_SUPERSCRIPT = str.maketrans("-0123456789", SUPERSCRIPT_MINUS + SUPERSCRIPT_DIGITS)


def to_superscript(value: int) -> str:
    """-2 → "⁻²" """
    return str(value).translate(_TO_SUPERSCRIPT)


def _caret_factor(symbol: str, exponent: int) -> str:
    return symbol if exponent == 1 else f"{symbol}^{exponent}"


def _format_caret(exponents: Sequence[int]) -> str:
    numerator = [
        _caret_factor(sym, e) for sym, e in zip(BASE_SYMBOLS, exponents) if e > 0
    ]
    denominator = [
        _caret_factor(sym, -e) for sym, e in zip(BASE_SYMBOLS, exponents) if e < 0
    ]

    if not numerator and not denominator:
        return ""

    text = "*".join(numerator) if numerator else "1"
    if len(denominator) == 1:
        text += "/" + denominator[0]
    elif denominator:
        text += "/(" + "*".join(denominator) + ")"
    return text


def _format_unicode(exponents: Sequence[int]) -> str:
    factors = [
        sym if e == 1 else sym + to_superscript(e)
        for sym, e in zip(BASE_SYMBOLS, exponents)
        if e != 0
    ]
    return "·".join(factors)


def format_exponents(exponents: Sequence[int], style: str = STYLE_CARET) -> str:
    """
    Символьная запись 8 показателей.

    Args:
        exponents: 8 показателей в порядке измерений
        style: "caret" или "unicode"

    Returns:
        Строка, например "m*kg/s^2" или "m·kg·s⁻²"

    Raises:
        ValueError: Если стиль неизвестен или показателей не 8
    """
    if len(exponents) != len(BASE_SYMBOLS):
        raise ValueError(
            f"Expected {len(BASE_SYMBOLS)} exponents, got {len(exponents)}"
        )

    if style == STYLE_CARET:
        return _format_caret(exponents)
    if style == STYLE_UNICODE:
        return _format_unicode(exponents)

    raise ValueError(f"Unknown rendering style: {style!r}")


def format_signature(signature: "DimensionSignature", style: str = STYLE_CARET) -> str:
    """Символьная запись DimensionSignature (см. format_exponents)."""
    return format_exponents(signature.exponents, style=style)
