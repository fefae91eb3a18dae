"""
Signature Codec — упаковка 8 показателей размерности в одно 32-битное слово

Схема упаковки:
- 8 полей по FIELD_BITS (4) бита, поле i занимает биты [4*i, 4*i + 4)
- Каждый показатель хранится со смещением EXPONENT_BIAS (8), чтобы
  хранимый полубайт был неотрицательным: stored = exponent + 8 ∈ [0, 15]
- Фиксированный порядок полей: Length, Mass, Time, ElectricCurrent,
  ThermodynamicTemperature, AmountOfSubstance, LuminousIntensity, Angle

Безразмерная сигнатура кодируется как 0x88888888, а НЕ как 0.

Упакованное слово — внутреннее представление, не формат хранения.
Для персистентности используются 8 показателей (см. src.core.contracts).
"""

from typing import Final, Sequence

from src.core.math.exponent_safeguards import (
    EXPONENT_BIAS,
    FIELD_BITS,
    UnitError,
    validate_exponent,
)

# =============================================================================
# РАЗМЕТКА СЛОВА
# =============================================================================

FIELD_COUNT: Final[int] = 8

WORD_BITS: Final[int] = FIELD_BITS * FIELD_COUNT

FIELD_MASK: Final[int] = (1 << FIELD_BITS) - 1

WORD_MAX: Final[int] = (1 << WORD_BITS) - 1

# Порядок полей (индекс i → имя измерения)
DIMENSIONS: Final[tuple[str, ...]] = (
    "length",
    "mass",
    "time",
    "electric_current",
    "thermodynamic_temperature",
    "amount_of_substance",
    "luminous_intensity",
    "angle",
)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidIndex(UnitError, IndexError):
    """Индекс измерения вне 0..7 — ошибка программиста, не восстанавливаемая."""

    def __init__(self, index: object):
        self.index = index
        super().__init__(
            f"Dimension index must be an int in [0, {FIELD_COUNT - 1}], got {index!r}"
        )


# =============================================================================
# ENCODE / DECODE
# =============================================================================


def validate_index(index: object) -> int:
    """
    Проверка индекса измерения.

    Отрицательные индексы НЕ интерпретируются как отсчёт с конца.

    Raises:
        InvalidIndex: Если index не int или вне [0, FIELD_COUNT)
    """
    if isinstance(index, bool) or not isinstance(index, int):
        raise InvalidIndex(index)
    if not 0 <= index < FIELD_COUNT:
        raise InvalidIndex(index)
    return index


def encode_exponents(exponents: Sequence[int]) -> int:
    """
    Упаковка 8 показателей в слово.

    Args:
        exponents: Ровно 8 показателей в порядке DIMENSIONS

    Returns:
        Упакованное слово в [0, 2^32 - 1]

    Raises:
        ValueError: Если показателей не 8
        TypeError: Если показатель не int
        ExponentOverflow: Если показатель вне [-8, 7]

    Examples:
        >>> hex(encode_exponents((0, 0, 0, 0, 0, 0, 0, 0)))
        '0x88888888'
        >>> hex(encode_exponents((1, 0, 0, 0, 0, 0, 0, 0)))
        '0x88888889'
    """
    if len(exponents) != FIELD_COUNT:
        raise ValueError(
            f"Expected {FIELD_COUNT} exponents, got {len(exponents)}"
        )

    word = 0
    for i, (name, value) in enumerate(zip(DIMENSIONS, exponents)):
        validate_exponent(value, name)
        stored = (value + EXPONENT_BIAS) & FIELD_MASK
        word |= stored << (i * FIELD_BITS)

    return word


def validate_word(word: int) -> int:
    """
    Проверка, что слово помещается в WORD_BITS бит.

    Raises:
        ValueError: Если word не int или вне [0, WORD_MAX]
    """
    if isinstance(word, bool) or not isinstance(word, int):
        raise ValueError(f"Packed word must be int, got {type(word).__name__}")
    if not 0 <= word <= WORD_MAX:
        raise ValueError(f"Packed word must be in [0, {WORD_MAX:#x}], got {word:#x}")
    return word


def decode_field(word: int, index: int) -> int:
    """
    Извлечение i-го показателя: маска, сдвиг, вычитание смещения.

    Raises:
        InvalidIndex: Если index вне 0..7
        ValueError: Если word вне [0, WORD_MAX]
    """
    validate_index(index)
    validate_word(word)
    stored = (word >> (index * FIELD_BITS)) & FIELD_MASK
    return stored - EXPONENT_BIAS


def decode_exponents(word: int) -> tuple[int, ...]:
    """Распаковка всех 8 показателей в порядке DIMENSIONS."""
    validate_word(word)
    return tuple(decode_field(word, i) for i in range(FIELD_COUNT))


# Кодировка безразмерной сигнатуры — вычисляется один раз при импорте
DIMENSIONLESS_WORD: Final[int] = encode_exponents((0,) * FIELD_COUNT)
