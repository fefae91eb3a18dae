"""
DimensionSignature — сигнатура размерности физической величины

Immutable Pydantic модель из 8 целочисленных показателей:
Length, Mass, Time, ElectricCurrent, ThermodynamicTemperature,
AmountOfSubstance, LuminousIntensity, Angle.

Сигнатура не несёт ни величины, ни системы единиц: только КАКОЙ
размерности принадлежит величина. Все операции возвращают новый экземпляр.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Каждый показатель в [-8, +7] (ExponentOverflow при нарушении)
2. Равенство сигнатур ⇔ равенство всех 8 показателей (без epsilon)
3. pow/sqrt/cbrt с нецелым результатом → NonIntegralRoot, без округления
"""

from fractions import Fraction
from typing import Any, Mapping, Optional

from pydantic import BaseModel, Field, model_validator

from src.core.domain.rendering import format_exponents
from src.core.math.exponent_safeguards import (
    ExponentLike,
    ExponentOverflow,
    is_exponent_in_range,
    normalize_power,
    scale_exponent,
)
from src.core.math.signature_codec import (
    DIMENSIONLESS_WORD,
    DIMENSIONS,
    decode_exponents,
    encode_exponents,
    validate_index,
)


# =============================================================================
# SIGNATURE MODEL
# =============================================================================


class DimensionSignature(BaseModel):
    """
    Сигнатура размерности (8 показателей).

    Конструирование:
    - DimensionSignature() — безразмерная
    - DimensionSignature(1, 1, -2) — позиционно, в порядке DIMENSIONS
    - DimensionSignature(mass=1) — по именам
    - DimensionSignature.parse("kg*m/s^2") — из текстового выражения
    - a * b, a / b, a.pow(n) — алгебра
    """

    length: int = Field(0, description="Показатель длины")
    mass: int = Field(0, description="Показатель массы")
    time: int = Field(0, description="Показатель времени")
    electric_current: int = Field(0, description="Показатель силы тока")
    thermodynamic_temperature: int = Field(0, description="Показатель температуры")
    amount_of_substance: int = Field(0, description="Показатель количества вещества")
    luminous_intensity: int = Field(0, description="Показатель силы света")
    angle: int = Field(0, description="Показатель плоского угла")

    model_config = {"frozen": True, "strict": True, "extra": "forbid"}

    def __init__(
        self,
        length: int = 0,
        mass: int = 0,
        time: int = 0,
        electric_current: int = 0,
        thermodynamic_temperature: int = 0,
        amount_of_substance: int = 0,
        luminous_intensity: int = 0,
        angle: int = 0,
    ) -> None:
        super().__init__(
            length=length,
            mass=mass,
            time=time,
            electric_current=electric_current,
            thermodynamic_temperature=thermodynamic_temperature,
            amount_of_substance=amount_of_substance,
            luminous_intensity=luminous_intensity,
            angle=angle,
        )

    @model_validator(mode="after")
    def validate_exponent_range(self) -> "DimensionSignature":
        """Диапазон проверяется явно, а не переполнением битового поля."""
        for name in DIMENSIONS:
            value = getattr(self, name)
            if not is_exponent_in_range(value):
                raise ExponentOverflow(name, value)
        return self

    def model_copy(
        self, *, update: Optional[Mapping[str, Any]] = None, deep: bool = False
    ) -> "DimensionSignature":
        """
        Копия с изменёнными показателями.

        pydantic не валидирует update, поэтому при update сигнатура
        собирается заново через model_validate.

        Raises:
            ExponentOverflow: Если новый показатель вне [-8, 7]
            ValidationError: Неизвестное поле или не-int значение
        """
        if not update:
            return super().model_copy(deep=deep)
        return type(self).model_validate({**self.model_dump(), **update})

    # -------------------------------------------------------------------------
    # Альтернативные конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def from_exponents(cls, exponents: Any) -> "DimensionSignature":
        """
        Сигнатура из последовательности 8 показателей.

        Raises:
            ValueError: Если показателей не 8
        """
        values = tuple(exponents)
        if len(values) != len(DIMENSIONS):
            raise ValueError(
                f"Expected {len(DIMENSIONS)} exponents, got {len(values)}"
            )
        return cls(*values)

    @classmethod
    def decode(cls, word: int) -> "DimensionSignature":
        """Сигнатура из упакованного слова (см. signature_codec)."""
        return cls(*decode_exponents(word))

    @classmethod
    def parse(cls, expression: str) -> "DimensionSignature":
        """Сигнатура из текстового выражения, например "kg*m/s^2"."""
        from src.core.domain.parser import parse_signature

        return parse_signature(expression)

    # -------------------------------------------------------------------------
    # Доступ к показателям
    # -------------------------------------------------------------------------

    @property
    def exponents(self) -> tuple[int, ...]:
        """Все 8 показателей в порядке DIMENSIONS."""
        return tuple(getattr(self, name) for name in DIMENSIONS)

    @property
    def packed(self) -> int:
        """Упакованное 32-битное слово (внутреннее представление)."""
        return encode_exponents(self.exponents)

    def encode(self) -> int:
        return self.packed

    def index(self, i: int) -> int:
        """
        Показатель по индексу 0..7.

        Raises:
            InvalidIndex: Если i вне 0..7 (отрицательные тоже отклоняются)
        """
        return getattr(self, DIMENSIONS[validate_index(i)])

    def __getitem__(self, i: int) -> int:
        return self.index(i)

    def is_empty(self) -> bool:
        """True для безразмерной сигнатуры."""
        return self.packed == DIMENSIONLESS_WORD

    # -------------------------------------------------------------------------
    # Алгебра
    # -------------------------------------------------------------------------

    def _combine(self, other: "DimensionSignature", sign: int) -> "DimensionSignature":
        result = []
        for name, a, b in zip(DIMENSIONS, self.exponents, other.exponents):
            value = a + sign * b
            if not is_exponent_in_range(value):
                raise ExponentOverflow(name, value)
            result.append(value)
        return DimensionSignature(*result)

    def __mul__(self, other: object) -> "DimensionSignature":
        if not isinstance(other, DimensionSignature):
            return NotImplemented
        return self._combine(other, 1)

    def __truediv__(self, other: object) -> "DimensionSignature":
        if not isinstance(other, DimensionSignature):
            return NotImplemented
        return self._combine(other, -1)

    def pow(self, exp: ExponentLike) -> "DimensionSignature":
        """
        Возведение в степень: каждый показатель умножается на exp.

        Политика: только целые результаты. Сначала проверяется
        целочисленность всех полей, затем диапазон.

        Args:
            exp: int, Fraction или конечный float

        Raises:
            NonIntegralRoot: Если хотя бы один показатель становится нецелым
            ExponentOverflow: Если результат вне [-8, 7]
            ValueError: Если exp — NaN/Inf
            TypeError: Если exp не число
        """
        exp = normalize_power(exp)
        scaled = [
            scale_exponent(value, exp, name)
            for name, value in zip(DIMENSIONS, self.exponents)
        ]
        for name, value in zip(DIMENSIONS, scaled):
            if not is_exponent_in_range(value):
                raise ExponentOverflow(name, value)
        return DimensionSignature(*scaled)

    def __pow__(self, exp: ExponentLike) -> "DimensionSignature":
        return self.pow(exp)

    def sqrt(self) -> "DimensionSignature":
        return self.pow(Fraction(1, 2))

    def cbrt(self) -> "DimensionSignature":
        return self.pow(Fraction(1, 3))

    def inverse(self) -> "DimensionSignature":
        return self.pow(-1)

    # -------------------------------------------------------------------------
    # Представление
    # -------------------------------------------------------------------------

    def to_string(self, style: str = "caret") -> str:
        """
        Символьная запись сигнатуры.

        style="caret" — каноническая, разбирается парсером обратно ("m*kg/s^2")
        style="unicode" — для отображения ("m·kg·s⁻²")
        """
        return format_exponents(self.exponents, style=style)

    def type_name(self) -> str:
        """Имя физической величины ("Pressure", "Velocity", ...) или символьная запись."""
        from src.core.domain.classifier import classify

        return classify(self)

    def __str__(self) -> str:
        return self.to_string()


# Безразмерная сигнатура (мультипликативная единица)
DIMENSIONLESS = DimensionSignature()
