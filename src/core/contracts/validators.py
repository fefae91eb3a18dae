"""
JSON Schema Contract Validators

Модуль для валидации сохранённых сигнатур размерности согласно формальному
JSON Schema контракту. Использует библиотеку jsonschema.

Схемы:
- dimension_signature.json — 8 показателей + необязательная каноническая запись

Упакованное слово (signature_codec) НЕ является форматом хранения:
сохраняются только 8 показателей.
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional

import jsonschema
from jsonschema import Draft202012Validator

from src.core.domain.parser import parse_signature
from src.core.domain.signature import DimensionSignature
from src.core.math.signature_codec import DIMENSIONS


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы лежат в каталоге schema/ рядом с этим модулем.
    """

    def __init__(self, schema_dir: Optional[Path] = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'dimension_signature')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если схема не проходит meta-validation
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str, loader: Optional[SchemaLoader] = None):
        self.schema_name = schema_name
        self.schema = (loader or _SCHEMA_LOADER).load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        return self.validator.iter_errors(data)


class DimensionSignatureValidator(ContractValidator):
    """Валидатор для dimension_signature контракта."""

    def __init__(self, loader: Optional[SchemaLoader] = None):
        super().__init__("dimension_signature", loader)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_dimension_signature(data: Dict[str, Any]) -> None:
    """
    Валидация сохранённой сигнатуры.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    DimensionSignatureValidator().validate(data)


def signature_to_payload(
    signature: DimensionSignature, include_expression: bool = True
) -> Dict[str, Any]:
    """
    Сериализация сигнатуры в контрактный dict.

    Returns:
        {"exponents": {...8 полей...}, "expression": "m*kg/s^2"}
    """
    payload: Dict[str, Any] = {"exponents": signature.model_dump()}
    if include_expression:
        payload["expression"] = signature.to_string()
    return payload


def signature_from_payload(data: Dict[str, Any]) -> DimensionSignature:
    """
    Десериализация сигнатуры из контрактного dict.

    Сигнатура строится из 8 показателей. Если присутствует expression,
    она должна разбираться в ту же сигнатуру.

    Raises:
        ValidationError: Если данные не соответствуют схеме
        ValueError: Если expression противоречит показателям
    """
    validate_dimension_signature(data)

    exponents = data["exponents"]
    signature = DimensionSignature.from_exponents(
        int(exponents[name]) for name in DIMENSIONS
    )

    expression = data.get("expression")
    if expression is not None:
        parsed = parse_signature(expression)
        if parsed != signature:
            raise ValueError(
                f"Expression {expression!r} does not match exponents "
                f"{signature.exponents} (parsed {parsed.exponents})"
            )

    return signature
