"""
Тесты для Expression Parser

Проверяет:
1. Базовые символы и производные единицы SI
2. Операторы *, /, ^, juxtaposition, скобки, приоритеты
3. Unicode-запись (·, надстрочные показатели)
4. Рациональные показатели и NonIntegralRoot
5. Ошибки: неизвестные символы, висячие операторы, скобки
6. ParserConfig
7. Round-trip: каноническая запись → parse → та же сигнатура
"""

import pytest

from src.core.domain import (
    CATALOG,
    DIMENSIONLESS,
    DimensionSignature,
    ExponentOverflow,
    InvalidExpression,
    NonIntegralRoot,
    ParserConfig,
    UnitError,
    catalog,
    parse_signature,
    resolve_symbol,
    tokenize,
)


# =============================================================================
# БАЗОВЫЙ РАЗБОР
# =============================================================================


class TestBasicExpressions:
    """Представительный набор выражений"""

    @pytest.mark.parametrize(
        "expression, expected",
        [
            ("m", catalog.LENGTH),
            ("kg", catalog.MASS),
            ("s", catalog.TIME_SPAN),
            ("A", catalog.ELECTRIC_CURRENT),
            ("K", catalog.TEMPERATURE),
            ("mol", catalog.AMOUNT_OF_SUBSTANCE),
            ("cd", catalog.LUMINOUS_INTENSITY),
            ("rad", catalog.ANGLE),
            ("deg", catalog.ANGLE),
            ("°", catalog.ANGLE),
            ("m^2", catalog.AREA),
            ("m^3", catalog.VOLUME),
            ("m/s", catalog.VELOCITY),
            ("m/s^2", catalog.ACCELERATION),
            ("kg*m/s^2", catalog.FORCE),
            ("kg/(m*s^2)", catalog.PRESSURE),
            ("kg/m/s^2", catalog.PRESSURE),
            ("kg*m^-1*s^-2", catalog.PRESSURE),
            ("1/s", catalog.FREQUENCY),
            ("kg/m^3", catalog.DENSITY),
            ("W/(m*K)", catalog.THERMAL_CONDUCTIVITY),
        ],
    )
    def test_expression(self, expression: str, expected: DimensionSignature) -> None:
        assert parse_signature(expression) == expected

    @pytest.mark.parametrize("expression", ["", "   ", "\t\n"])
    def test_empty_is_dimensionless(self, expression: str) -> None:
        assert parse_signature(expression) == DIMENSIONLESS

    def test_whitespace_around_operators(self) -> None:
        assert parse_signature("  kg * m / s ^ 2 ") == catalog.FORCE

    def test_type_error_for_non_str(self) -> None:
        with pytest.raises(TypeError):
            parse_signature(None)  # type: ignore[arg-type]


class TestPrecedence:
    """Приоритеты и ассоциативность"""

    def test_division_binds_next_term_only(self) -> None:
        """kg/m*s == (kg/m)*s"""
        assert parse_signature("kg/m*s") == parse_signature("kg*s/m")
        assert parse_signature("kg/m*s") == DimensionSignature(-1, 1, 1)

    def test_parentheses_group_denominator(self) -> None:
        assert parse_signature("kg/(m*s)") == DimensionSignature(-1, 1, -1)

    def test_power_binds_tighter(self) -> None:
        assert parse_signature("kg*m^2") == DimensionSignature(2, 1)

    def test_power_of_group(self) -> None:
        assert parse_signature("(m/s)^2") == DimensionSignature(2, 0, -2)

    def test_nested_parentheses(self) -> None:
        assert parse_signature("((kg))/((m)*(s^2))") == catalog.PRESSURE

    def test_python_style_power(self) -> None:
        assert parse_signature("m**2") == catalog.AREA

    def test_signed_exponents(self) -> None:
        assert parse_signature("s^-1") == catalog.FREQUENCY
        assert parse_signature("m^+2") == catalog.AREA
        assert parse_signature("s^(-2)") == DimensionSignature(time=-2)


class TestImplicitMultiplication:
    """Juxtaposition"""

    def test_space_separated(self) -> None:
        assert parse_signature("kg m / s^2") == catalog.FORCE

    def test_adjacent_group(self) -> None:
        assert parse_signature("kg(m/s^2)") == catalog.FORCE

    def test_disabled(self) -> None:
        config = ParserConfig(allow_implicit_multiplication=False)
        with pytest.raises(InvalidExpression, match="Implicit multiplication"):
            parse_signature("kg m", config)
        assert parse_signature("kg*m", config) == DimensionSignature(1, 1)


class TestUnicode:
    """Unicode-запись"""

    def test_middle_dot_and_superscripts(self) -> None:
        assert parse_signature("kg·m·s⁻²") == catalog.FORCE

    def test_superscript_positive(self) -> None:
        assert parse_signature("m²") == catalog.AREA
        assert parse_signature("m³") == catalog.VOLUME

    def test_ohm_symbol(self) -> None:
        assert parse_signature("Ω") == catalog.ELECTRICAL_RESISTANCE


class TestDerivedSymbols:
    """Производные единицы SI"""

    @pytest.mark.parametrize(
        "symbol, expected",
        [
            ("N", catalog.FORCE),
            ("Pa", catalog.PRESSURE),
            ("J", catalog.WORK),
            ("W", catalog.POWER),
            ("C", catalog.ELECTRIC_CHARGE),
            ("V", catalog.ELECTRIC_POTENTIAL),
            ("F", catalog.ELECTRICAL_CAPACITANCE),
            ("Ohm", catalog.ELECTRICAL_RESISTANCE),
            ("S", catalog.ELECTRICAL_CONDUCTANCE),
            ("Wb", catalog.MAGNETIC_FLUX),
            ("T", catalog.MAGNETIC_FLUX_DENSITY),
            ("H", catalog.ELECTRICAL_INDUCTANCE),
            ("Hz", catalog.FREQUENCY),
        ],
    )
    def test_derived(self, symbol: str, expected: DimensionSignature) -> None:
        assert parse_signature(symbol) == expected

    def test_combined_with_base(self) -> None:
        assert parse_signature("N*m") == catalog.WORK
        assert parse_signature("J/(kg*K)") == catalog.SPECIFIC_HEAT

    def test_case_sensitive(self) -> None:
        """s — секунда, S — сименс; h — час, H — генри"""
        assert parse_signature("s") != parse_signature("S")
        assert parse_signature("h") == catalog.TIME_SPAN

    def test_disabled(self) -> None:
        config = ParserConfig(allow_derived_symbols=False)
        with pytest.raises(InvalidExpression, match="Unknown unit symbol 'N'"):
            parse_signature("N", config)

    def test_aliases_disabled(self) -> None:
        config = ParserConfig(allow_aliases=False)
        with pytest.raises(InvalidExpression, match="'mm'"):
            parse_signature("mm", config)
        assert resolve_symbol("deg", config) is None
        assert resolve_symbol("rad", config) == catalog.ANGLE

    def test_scale_ignored(self) -> None:
        assert parse_signature("mm") == parse_signature("km") == catalog.LENGTH


class TestRationalExponents:
    """Рациональные показатели через pow"""

    def test_integral_root(self) -> None:
        assert parse_signature("(m^2)^(1/2)") == catalog.LENGTH
        assert parse_signature("(m^3*s^-3)^(1/3)") == catalog.VELOCITY

    def test_non_integral_root(self) -> None:
        with pytest.raises(NonIntegralRoot):
            parse_signature("m^(1/2)")

    def test_zero_denominator(self) -> None:
        with pytest.raises(InvalidExpression, match="Zero exponent denominator"):
            parse_signature("m^(1/0)")


# =============================================================================
# ОШИБКИ
# =============================================================================


class TestErrors:
    """Некорректные выражения отклоняются целиком"""

    @pytest.mark.parametrize(
        "expression, message",
        [
            ("furlong", "Unknown unit symbol 'furlong'"),
            ("kgm", "Unknown unit symbol 'kgm'"),
            ("kg/", "Expected unit symbol"),
            ("*m", "Expected unit symbol"),
            ("m^", "Expected integer exponent"),
            ("m^x", "Expected integer exponent"),
            ("(m*s", "Expected '\\)'"),
            ("m)", "Unexpected '\\)'"),
            ("()", "Expected unit symbol"),
            ("2*m", "Numeric factor '2'"),
            ("m$", "Unexpected character '\\$'"),
            ("m//s", "Expected unit symbol"),
        ],
    )
    def test_invalid(self, expression: str, message: str) -> None:
        with pytest.raises(InvalidExpression, match=message):
            parse_signature(expression)

    def test_position_reported(self) -> None:
        with pytest.raises(InvalidExpression) as exc_info:
            parse_signature("kg*foo")
        assert exc_info.value.position == 3
        assert exc_info.value.expression == "kg*foo"

    def test_error_at_end_reports_length(self) -> None:
        with pytest.raises(InvalidExpression) as exc_info:
            parse_signature("kg/")
        assert exc_info.value.position == 3

    def test_invalid_expression_hierarchy(self) -> None:
        """InvalidExpression — ValueError и UnitError"""
        with pytest.raises(ValueError):
            parse_signature("?")
        with pytest.raises(UnitError):
            parse_signature("?")

    def test_oversized_exponent_is_invalid_expression(self) -> None:
        """Показатель длиннее лимита int() даёт InvalidExpression, а не ValueError"""
        with pytest.raises(InvalidExpression, match="Exponent too large") as exc_info:
            parse_signature("m^" + "9" * 5000)
        assert exc_info.value.position == 2

    def test_oversized_denominator_is_invalid_expression(self) -> None:
        with pytest.raises(InvalidExpression, match="Exponent too large"):
            parse_signature("m^(1/" + "9" * 5000 + ")")

    def test_oversized_superscript_is_invalid_expression(self) -> None:
        with pytest.raises(InvalidExpression, match="Exponent too large"):
            parse_signature("m" + "²" * 5000)

    @pytest.mark.parametrize("expression", ["m^٢", "m^(1/٣)", "m^２"])
    def test_non_ascii_digits_rejected(self, expression: str) -> None:
        """Показатель — только ASCII-цифры"""
        with pytest.raises(InvalidExpression, match="Unexpected character"):
            parse_signature(expression)

    def test_overflow_during_accumulation(self) -> None:
        with pytest.raises(ExponentOverflow):
            parse_signature("m^4*m^4")

    def test_overflow_at_boundary_succeeds(self) -> None:
        assert parse_signature("m^4*m^3").length == 7


class TestTokenize:
    """Тесты токенизатора"""

    def test_kinds(self) -> None:
        kinds = [t.kind for t in tokenize("kg·m/s⁻² ^ (1)")]
        assert kinds == [
            "symbol",
            "mul",
            "symbol",
            "div",
            "symbol",
            "superscript",
            "pow",
            "lparen",
            "int",
            "rparen",
        ]

    def test_positions(self) -> None:
        assert [t.pos for t in tokenize("kg * m")] == [0, 3, 5]


# =============================================================================
# ROUND-TRIP
# =============================================================================


class TestCanonicalRoundTrip:
    """Каноническая запись каждой величины каталога разбирается обратно"""

    @pytest.mark.parametrize("unit", CATALOG, ids=lambda unit: unit.name)
    def test_caret_roundtrip(self, unit) -> None:
        assert parse_signature(unit.signature.to_string()) == unit.signature

    @pytest.mark.parametrize("unit", CATALOG, ids=lambda unit: unit.name)
    def test_unicode_roundtrip(self, unit) -> None:
        text = unit.signature.to_string(style="unicode")
        assert parse_signature(text) == unit.signature
