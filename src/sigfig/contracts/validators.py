"""
JSON Schema Contract Validators

Валидация запросов и результатов Calculator согласно формальным JSON Schema
контрактам (jsonschema, Draft 2020-12).

Схемы поставляются вместе с пакетом (src/sigfig/contracts/schema/):
- calculation_request.json: операция, операнды и управляющие параметры
- calculation_result.json: значение или вид ошибки
"""

import json
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Iterator, List, Mapping, Optional, Union

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

SCHEMA_DIR = Path(__file__).parent / "schema"


class SchemaName(str, Enum):
    """Контракты Calculator"""

    CALCULATION_REQUEST = "calculation_request"
    CALCULATION_RESULT = "calculation_result"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов из каталога схем.

    Схема читается один раз и проходит meta-validation; повторные
    запросы возвращают тот же dict.
    """

    def __init__(self, schema_dir: Optional[Path] = None):
        self._schema_dir = SCHEMA_DIR if schema_dir is None else schema_dir
        if not self._schema_dir.is_dir():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")
        self._cache: Dict[str, Dict[str, Any]] = {}

    @property
    def schema_dir(self) -> Path:
        return self._schema_dir

    def available_schemas(self) -> List[str]:
        """Имена схем в каталоге (без расширения)."""
        return sorted(path.stem for path in self._schema_dir.glob("*.json"))

    def load_schema(self, schema_name: Union[SchemaName, str]) -> Dict[str, Any]:
        """
        Загрузка схемы по имени.

        Args:
            schema_name: SchemaName или имя файла без расширения

        Raises:
            FileNotFoundError: Файл схемы не найден
            json.JSONDecodeError: Файл не является валидным JSON
            ValueError: Файл не является валидной JSON Schema
        """
        name = schema_name.value if isinstance(schema_name, SchemaName) else schema_name
        cached = self._cache.get(name)
        if cached is not None:
            return cached

        schema_path = self._schema_dir / f"{name}.json"
        if not schema_path.is_file():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        schema = json.loads(schema_path.read_text(encoding="utf-8"))
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {name}.json: {e.message}") from e

        self._cache[name] = schema
        return schema


_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """Проверка данных против одной схемы."""

    def __init__(self, schema_name: Union[SchemaName, str], loader: Optional[SchemaLoader] = None):
        self.schema = (loader or _SCHEMA_LOADER).load_schema(schema_name)
        self.schema_name = self.schema.get("title", str(schema_name))
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: Данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        return self.validator.iter_errors(data)

    def describe_errors(self, data: Dict[str, Any]) -> List[str]:
        """
        Все нарушения в виде "json_path: message", упорядоченные по пути.

        Examples:
            >>> CalculationRequestValidator().describe_errors({"operation": "add"})
            ["$: 'operands' is a required property"]
        """
        errors = sorted(self.validator.iter_errors(data), key=lambda e: e.json_path)
        return [f"{error.json_path}: {error.message}" for error in errors]


class CalculationRequestValidator(ContractValidator):
    def __init__(self, loader: Optional[SchemaLoader] = None):
        super().__init__(SchemaName.CALCULATION_REQUEST, loader)


class CalculationResultValidator(ContractValidator):
    def __init__(self, loader: Optional[SchemaLoader] = None):
        super().__init__(SchemaName.CALCULATION_RESULT, loader)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================

_VALIDATORS: Mapping[SchemaName, ContractValidator] = MappingProxyType(
    {name: ContractValidator(name) for name in SchemaName}
)


def validate_calculation_request(data: Dict[str, Any]) -> None:
    """
    Raises:
        ValidationError: Данные не соответствуют calculation_request
    """
    _VALIDATORS[SchemaName.CALCULATION_REQUEST].validate(data)


def validate_calculation_result(data: Dict[str, Any]) -> None:
    """
    Raises:
        ValidationError: Данные не соответствуют calculation_result
    """
    _VALIDATORS[SchemaName.CALCULATION_RESULT].validate(data)
