"""
Expression Parser — текстовое выражение единицы → DimensionSignature

Грамматика:

    expression := term ( ( '*' | '·' | <juxtaposition> | '/' ) term )*
    term       := factor ( ('^' | '**') exponent | superscript )?
    factor     := SYMBOL | '1' | '(' expression ')'
    exponent   := ['+' | '-'] INT | '(' ['+' | '-'] INT [ '/' INT ] ')'

Приоритеты:
- '^' связывает сильнее, чем '*' и '/'
- '*', '/' и juxtaposition ("kg m") — один уровень, левая ассоциативность:
  '/' делит только на следующий term ("kg/m*s" == "kg*s/m");
  для деления на произведение нужны скобки ("kg/(m*s^2)")
- Рациональный показатель "(1/2)" применяется через pow, поэтому нецелый
  результат даёт NonIntegralRoot

Пустое выражение (или только пробелы) → безразмерная сигнатура.
Выражение отклоняется целиком: частичный результат не возвращается.

Символы отслеживают только размерность: "mm" и "km" дают Length,
масштаб (префикс) не учитывается.
"""

import logging
import re
from dataclasses import dataclass
from fractions import Fraction
from typing import Final, NamedTuple, Optional, Union

from src.core.domain import catalog
from src.core.domain.rendering import (
    BASE_SYMBOLS,
    SUPERSCRIPT_DIGITS,
    SUPERSCRIPT_MINUS,
    SUPERSCRIPT_PLUS,
)
from src.core.domain.signature import DIMENSIONLESS, DimensionSignature
from src.core.math.exponent_safeguards import UnitError

logger = logging.getLogger(__name__)


# =============================================================================
# SYMBOL TABLES
# =============================================================================

# 7 базовых единиц SI + радиан, в порядке измерений
BASE_ATOMS: Final[dict[str, DimensionSignature]] = dict(
    zip(BASE_SYMBOLS, catalog.ATOMIC_UNITS)
)

# Синонимы базовых символов (масштаб игнорируется)
SYMBOL_ALIASES: Final[dict[str, str]] = {
    "deg": "rad",
    "°": "rad",
    "mm": "m",
    "cm": "m",
    "km": "m",
    "g": "kg",
    "ms": "s",
    "min": "s",
    "h": "s",
}

# Производные единицы SI
DERIVED_SYMBOLS: Final[dict[str, DimensionSignature]] = {
    "N": catalog.FORCE,
    "Pa": catalog.PRESSURE,
    "J": catalog.WORK,
    "W": catalog.POWER,
    "C": catalog.ELECTRIC_CHARGE,
    "V": catalog.ELECTRIC_POTENTIAL,
    "F": catalog.ELECTRICAL_CAPACITANCE,
    "Ohm": catalog.ELECTRICAL_RESISTANCE,
    "Ω": catalog.ELECTRICAL_RESISTANCE,
    "S": catalog.ELECTRICAL_CONDUCTANCE,
    "Wb": catalog.MAGNETIC_FLUX,
    "T": catalog.MAGNETIC_FLUX_DENSITY,
    "H": catalog.ELECTRICAL_INDUCTANCE,
    "Hz": catalog.FREQUENCY,
}


# =============================================================================
# CONFIG & EXCEPTIONS
# =============================================================================


@dataclass(frozen=True)
class ParserConfig:
    """Конфигурация парсера.

    - allow_implicit_multiplication: "kg m" == "kg*m"
    - allow_aliases: deg/°, mm/cm/km, g, ms/min/h
    - allow_derived_symbols: N, Pa, J, W, C, V, F, Ohm/Ω, S, Wb, T, H, Hz
    """

    allow_implicit_multiplication: bool = True
    allow_aliases: bool = True
    allow_derived_symbols: bool = True


DEFAULT_PARSER_CONFIG: Final[ParserConfig] = ParserConfig()


class InvalidExpression(UnitError, ValueError):
    """Неизвестный символ или некорректная последовательность операторов."""

    def __init__(self, message: str, expression: str, position: int):
        self.message = message
        self.expression = expression
        self.position = position
        super().__init__(f"{message} at position {position} in {expression!r}")


# =============================================================================
# TOKENIZER
# =============================================================================


class Token(NamedTuple):
    kind: str
    text: str
    pos: int


_SUPERSCRIPT_CHARS = SUPERSCRIPT_DIGITS + SUPERSCRIPT_MINUS + SUPERSCRIPT_PLUS

_TOKEN_RE = re.compile(
    rf"""
      (?P<ws>\s+)
    | (?P<superscript>[{SUPERSCRIPT_PLUS}{SUPERSCRIPT_MINUS}]?[{SUPERSCRIPT_DIGITS}]+)
    | (?P<symbol>(?:(?![{_SUPERSCRIPT_CHARS}])[^\W\d_]|°)+)
    | (?P<int>[0-9]+)
    | (?P<pow>\*\*|\^)
    | (?P<mul>[*·⋅])
    | (?P<div>/)
    | (?P<lparen>\()
    | (?P<rparen>\))
    | (?P<sign>[+\-])
    """,
    re.VERBOSE,
)

_FROM_SUPERSCRIPT = str.maketrans(
    SUPERSCRIPT_DIGITS + SUPERSCRIPT_MINUS + SUPERSCRIPT_PLUS, "0123456789-+"
)


def tokenize(expression: str) -> list[Token]:
    """
    Разбиение выражения на токены (пробелы отбрасываются).

    Raises:
        InvalidExpression: На неизвестном символе
    """
    tokens: list[Token] = []
    pos = 0
    while pos < len(expression):
        match = _TOKEN_RE.match(expression, pos)
        if match is None:
            raise InvalidExpression(
                f"Unexpected character {expression[pos]!r}", expression, pos
            )
        kind = match.lastgroup
        if kind != "ws":
            tokens.append(Token(kind, match.group(), pos))
        pos = match.end()
    return tokens


# =============================================================================
# SYMBOL LOOKUP
# =============================================================================


def resolve_symbol(
    symbol: str, config: ParserConfig = DEFAULT_PARSER_CONFIG
) -> Optional[DimensionSignature]:
    """Сигнатура символа единицы или None, если символ неизвестен."""
    if symbol in BASE_ATOMS:
        return BASE_ATOMS[symbol]
    if config.allow_aliases and symbol in SYMBOL_ALIASES:
        return BASE_ATOMS[SYMBOL_ALIASES[symbol]]
    if config.allow_derived_symbols and symbol in DERIVED_SYMBOLS:
        return DERIVED_SYMBOLS[symbol]
    return None


# =============================================================================
# RECURSIVE DESCENT
# =============================================================================


_FACTOR_START: Final[frozenset[str]] = frozenset({"symbol", "int", "lparen"})


class _Parser:
    def __init__(self, expression: str, config: ParserConfig):
        self.expression = expression
        self.config = config
        self.tokens = tokenize(expression)
        self.index = 0

    def error(self, message: str, token: Optional[Token] = None) -> InvalidExpression:
        position = token.pos if token is not None else len(self.expression)
        return InvalidExpression(message, self.expression, position)

    def peek(self) -> Optional[Token]:
        if self.index < len(self.tokens):
            return self.tokens[self.index]
        return None

    def advance(self) -> Token:
        token = self.peek()
        if token is None:
            raise self.error("Unexpected end of expression")
        self.index += 1
        return token

    def expect(self, kind: str, what: str) -> Token:
        token = self.peek()
        if token is None or token.kind != kind:
            raise self.error(f"Expected {what}", token)
        return self.advance()

    def parse(self) -> DimensionSignature:
        if not self.tokens:
            return DIMENSIONLESS
        result = self.parse_expression()
        token = self.peek()
        if token is not None:
            raise self.error(f"Unexpected {token.text!r}", token)
        return result

    def parse_expression(self) -> DimensionSignature:
        value = self.parse_term()
        while True:
            token = self.peek()
            if token is None:
                return value
            if token.kind == "mul":
                self.advance()
                value = value * self.parse_term()
            elif token.kind == "div":
                self.advance()
                value = value / self.parse_term()
            elif token.kind in _FACTOR_START:
                if not self.config.allow_implicit_multiplication:
                    raise self.error("Implicit multiplication is disabled", token)
                value = value * self.parse_term()
            else:
                return value

    def parse_term(self) -> DimensionSignature:
        base = self.parse_factor()
        token = self.peek()
        if token is None:
            return base
        if token.kind == "pow":
            self.advance()
            return base.pow(self.parse_exponent())
        if token.kind == "superscript":
            self.advance()
            digits = token.text.translate(_FROM_SUPERSCRIPT)
            return base.pow(self.to_int(token, digits))
        return base

    def to_int(self, token: Token, text: Optional[str] = None) -> int:
        # int() отказывает на строках длиннее sys.get_int_max_str_digits()
        try:
            return int(token.text if text is None else text)
        except ValueError:
            raise self.error("Exponent too large", token) from None

    def parse_factor(self) -> DimensionSignature:
        token = self.peek()
        if token is None:
            raise self.error("Expected unit symbol")

        if token.kind == "symbol":
            self.advance()
            signature = resolve_symbol(token.text, self.config)
            if signature is None:
                raise self.error(f"Unknown unit symbol {token.text!r}", token)
            return signature

        if token.kind == "int":
            self.advance()
            if token.text != "1":
                raise self.error(
                    f"Numeric factor {token.text!r} is not allowed (only '1')", token
                )
            return DIMENSIONLESS

        if token.kind == "lparen":
            self.advance()
            inner = self.parse_expression()
            self.expect("rparen", "')'")
            return inner

        raise self.error(f"Expected unit symbol, got {token.text!r}", token)

    def parse_signed_int(self) -> int:
        negative = False
        token = self.peek()
        if token is not None and token.kind == "sign":
            self.advance()
            negative = token.text == "-"
        digits = self.expect("int", "integer exponent")
        value = self.to_int(digits)
        return -value if negative else value

    def parse_exponent(self) -> Union[int, Fraction]:
        token = self.peek()
        if token is None or token.kind != "lparen":
            return self.parse_signed_int()

        self.advance()
        numerator = self.parse_signed_int()
        exponent: Union[int, Fraction] = numerator
        token = self.peek()
        if token is not None and token.kind == "div":
            self.advance()
            denominator_token = self.expect("int", "exponent denominator")
            denominator = self.to_int(denominator_token)
            if denominator == 0:
                raise self.error("Zero exponent denominator", denominator_token)
            exponent = Fraction(numerator, denominator)
        self.expect("rparen", "')'")
        return exponent


# =============================================================================
# PUBLIC API
# =============================================================================


def parse_signature(
    expression: str, config: Optional[ParserConfig] = None
) -> DimensionSignature:
    """
    Разбор текстового выражения единицы.

    Args:
        expression: Выражение, например "kg*m/s^2", "kg/(m*s^2)", "m²·kg"
        config: Конфигурация парсера (default: DEFAULT_PARSER_CONFIG)

    Returns:
        DimensionSignature

    Raises:
        TypeError: Если expression не str
        InvalidExpression: Неизвестный символ / некорректный синтаксис
        ExponentOverflow: Показатель вне [-8, 7] в процессе накопления
        NonIntegralRoot: Рациональный показатель даёт нецелый результат

    Examples:
        >>> parse_signature("kg*m/s^2") == catalog.FORCE
        True
        >>> parse_signature("   ").is_empty()
        True
    """
    if not isinstance(expression, str):
        raise TypeError(f"Expression must be str, got {type(expression).__name__}")

    result = _Parser(expression, config or DEFAULT_PARSER_CONFIG).parse()
    logger.debug("Parsed unit expression %r -> %s", expression, result.exponents)
    return result
