"""
Domain models and value objects.

Операнды (DecimalInput → Operand), спецификации точности и модели
запроса/результата Calculator.
"""

from src.sigfig.domain.calculation import (
    CalculationOperation,
    CalculationRequest,
    CalculationResult,
    RequestOperand,
)
from src.sigfig.domain.decimal_text import (
    DECIMAL_TEXT_RE,
    DecimalInput,
    InputSource,
    Operand,
    layout_digits,
    native_to_text,
    parse_operand,
    try_parse_operand,
)
from src.sigfig.domain.precision import (
    DecimalPlaces,
    PercentageOptions,
    PrecisionKind,
    PrecisionSpec,
    Sigfigs,
)

__all__ = [
    # Decimal text
    "DECIMAL_TEXT_RE",
    "DecimalInput",
    "InputSource",
    "Operand",
    "layout_digits",
    "native_to_text",
    "parse_operand",
    "try_parse_operand",
    # Precision
    "DecimalPlaces",
    "PercentageOptions",
    "PrecisionKind",
    "PrecisionSpec",
    "Sigfigs",
    # Calculation
    "CalculationOperation",
    "CalculationRequest",
    "CalculationResult",
    "RequestOperand",
]
