"""
JSON Schema Contract Validators

Модуль для валидации JSON представления величин согласно формальным
JSON Schema контрактам. Использует библиотеку jsonschema.

Схемы (поставляются вместе с пакетом, contracts/schema/):
- quantity.json: величина с единицей (magnitude, unit, флаги)
"""

import json
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator

from eelevels.core.domain.quantity import Quantity
from eelevels.core.domain.result import Result
from eelevels.core.domain.unit import parse_unit


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы ищутся в каталоге schema/ рядом с этим модулем.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'quantity')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если файл не является валидной JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Валидируем саму схему (meta-validation)
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

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)


class QuantityValidator(ContractValidator):
    """Валидатор для quantity контракта."""

    def __init__(self):
        super().__init__("quantity")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_quantity(data: Dict[str, Any]) -> None:
    """
    Валидация quantity данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    QuantityValidator().validate(data)


def quantity_from_contract(data: Dict[str, Any]) -> Result[Quantity]:
    """
    Восстановление Quantity из контракта.

    Поля kind / domain / rms_kind информационные: единица полностью
    определяется строкой unit ('Vrms', 'dBu', ...).

    Args:
        data: Данные контракта quantity

    Returns:
        Result[Quantity]; UNKNOWN_UNIT если unit не из каталога

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    validate_quantity(data)

    parsed = parse_unit(data["unit"])
    if not parsed.ok:
        return Result.failure(parsed.failure_reason, parsed.details)

    return Result.success(
        Quantity(
            magnitude=data["magnitude"],
            unit=parsed.unwrap(),
            clamp_to_non_negative=data["clamp_to_non_negative"],
            absolute_only=data["absolute_only"],
        )
    )
