"""
Contract Validation Module

Валидация JSON контрактов Calculator (запрос и результат).
"""

from .validators import (
    SCHEMA_DIR,
    CalculationRequestValidator,
    CalculationResultValidator,
    ContractValidator,
    SchemaLoader,
    SchemaName,
    validate_calculation_request,
    validate_calculation_result,
)

__all__ = [
    # Constants
    "SCHEMA_DIR",
    # Classes
    "SchemaName",
    "SchemaLoader",
    "ContractValidator",
    "CalculationRequestValidator",
    "CalculationResultValidator",
    # Functions
    "validate_calculation_request",
    "validate_calculation_result",
]
