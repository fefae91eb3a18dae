"""
Exponent Safeguards — проверки целочисленных показателей размерности

Модуль обеспечивает корректность всех операций над показателями размерности:
- Проверка диапазона показателя (переполнение 4-битного поля)
- Проверка целочисленности результата pow/sqrt/cbrt
- Приведение показателя степени (int / Fraction / float) к точному виду
- NaN/Inf защита для float показателей

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Показатель вне [EXPONENT_MIN, EXPONENT_MAX] никогда не кодируется (ExponentOverflow)
2. Нецелый показатель никогда не округляется молча (NonIntegralRoot)
3. Все операции детерминированы и воспроизводимы
"""

import math
from fractions import Fraction
from numbers import Rational
from typing import Final, Union

# =============================================================================
# ДИАПАЗОН ПОКАЗАТЕЛЕЙ
# =============================================================================

# Ширина поля одного показателя в упакованном слове (бит)
FIELD_BITS: Final[int] = 4

# Смещение, добавляемое к показателю перед упаковкой
EXPONENT_BIAS: Final[int] = 1 << (FIELD_BITS - 1)

# Представимый диапазон показателя: [-8, +7]
EXPONENT_MIN: Final[int] = -EXPONENT_BIAS
EXPONENT_MAX: Final[int] = EXPONENT_BIAS - 1

# Абсолютная толерантность для проверки целочисленности float-результатов pow
EPS_EXPONENT: Final[float] = 1e-9


ExponentLike = Union[int, Fraction, float]


# =============================================================================
# EXCEPTIONS
# =============================================================================


class UnitError(Exception):
    """Базовое исключение для всех ошибок алгебры размерностей."""


class ExponentOverflow(UnitError, ArithmeticError):
    """
    Показатель размерности вне представимого диапазона.

    Возникает при *, /, pow, sqrt, cbrt или при прямом конструировании.
    Результат не клампится и не возвращается частично.
    """

    def __init__(self, dimension: str, value: Union[int, float]):
        self.dimension = dimension
        self.value = value
        kind = "overflow" if value > EXPONENT_MAX else "underflow"
        super().__init__(
            f"Exponent {kind} for {dimension}: {value} outside "
            f"[{EXPONENT_MIN}, {EXPONENT_MAX}]"
        )


class NonIntegralRoot(UnitError, ArithmeticError):
    """
    Результат pow/sqrt/cbrt требует нецелого показателя.

    Отдельное условие от ExponentOverflow: "не извлекается нацело",
    а не "слишком большой".
    """

    def __init__(self, dimension: str, base: int, exp: ExponentLike):
        self.dimension = dimension
        self.base = base
        self.exp = exp
        super().__init__(
            f"Non-integral exponent for {dimension}: {base} * {exp} "
            f"is not a whole number"
        )


# =============================================================================
# ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """True если значение конечное (не NaN, не Inf)."""
    return math.isfinite(value)


def is_exponent_in_range(value: int) -> bool:
    """True если показатель помещается в 4-битное поле со смещением."""
    return EXPONENT_MIN <= value <= EXPONENT_MAX


def validate_exponent(value: int, dimension: str) -> int:
    """
    Валидация показателя размерности.

    Args:
        value: Показатель
        dimension: Имя измерения (для сообщения об ошибке)

    Returns:
        value без изменений

    Raises:
        TypeError: Если value не int (bool тоже отклоняется)
        ExponentOverflow: Если value вне [EXPONENT_MIN, EXPONENT_MAX]
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(
            f"{dimension} exponent must be int, got {type(value).__name__}"
        )

    if not is_exponent_in_range(value):
        raise ExponentOverflow(dimension, value)

    return value


# =============================================================================
# ПОКАЗАТЕЛИ СТЕПЕНИ
# =============================================================================


def normalize_power(exp: ExponentLike) -> ExponentLike:
    """
    Приведение показателя степени к рабочему виду.

    int и Fraction остаются точными, float проверяется на конечность.

    Raises:
        TypeError: Если exp не число
        ValueError: Если exp — NaN/Inf
    """
    if isinstance(exp, bool):
        raise TypeError("Power exponent must be a number, got bool")

    if isinstance(exp, (int, Fraction)):
        return exp

    if isinstance(exp, Rational):
        return Fraction(exp.numerator, exp.denominator)

    if isinstance(exp, float):
        if not is_valid_float(exp):
            raise ValueError(
                f"Power exponent must be a valid float (not NaN/Inf), got {exp}"
            )
        return exp

    raise TypeError(f"Power exponent must be a number, got {type(exp).__name__}")


def scale_exponent(
    base: int,
    exp: ExponentLike,
    dimension: str,
    eps: float = EPS_EXPONENT,
) -> int:
    """
    Умножение показателя на степень с проверкой целочисленности.

    Для int/Fraction проверка точная, для float — с толерантностью eps:
        abs(round(base * exp) - base * exp) <= eps

    Args:
        base: Исходный показатель
        exp: Показатель степени (после normalize_power)
        dimension: Имя измерения (для сообщения об ошибке)
        eps: Толерантность для float

    Returns:
        Целый результат base * exp (диапазон НЕ проверяется)

    Raises:
        NonIntegralRoot: Если результат нецелый
        ExponentOverflow: Если float-произведение переполняется до Inf

    Examples:
        >>> scale_exponent(2, Fraction(1, 2), "length")
        1
        >>> scale_exponent(3, 1.0 / 3.0, "length")
        1
    """
    if eps <= 0:
        raise ValueError(f"eps must be positive, got {eps}")

    if isinstance(exp, int):
        return base * exp

    if isinstance(exp, Fraction):
        product = base * exp
        if product.denominator != 1:
            raise NonIntegralRoot(dimension, base, exp)
        return int(product)

    product_f = base * exp
    if not is_valid_float(product_f):
        raise ExponentOverflow(dimension, product_f)
    nearest = round(product_f)
    if abs(nearest - product_f) > eps:
        raise NonIntegralRoot(dimension, base, exp)
    return int(nearest)
