"""
Calculation — Модели запроса и результата вычисления

Соответствуют схемам calculation_request.json и calculation_result.json.
Запрос описывает одну операцию движка над списком операндов; результат
содержит либо отформатированное значение, либо вид ошибки.
"""

from enum import Enum
from typing import List, Optional, Union

from pydantic import BaseModel, Field, field_validator

from src.sigfig.errors import SigfigErrorKind

# Операнд в JSON: строка или число; null допускается только для max/min
RequestOperand = Optional[Union[str, int, float]]


# =============================================================================
# ENUMS
# =============================================================================


class CalculationOperation(str, Enum):
    """Операции, доступные через Calculator"""

    # Арифметика
    ADD = "add"
    SUB = "sub"
    MUL = "mul"
    DIV = "div"
    MOD = "mod"
    IDIV = "idiv"
    POW = "pow"
    SQRT = "sqrt"
    ABS = "abs"
    MAX = "max"
    MIN = "min"

    # Форматирование
    ROUND = "round"
    TRUNCATE = "truncate"
    TO_SIGFIG = "to_sigfig"
    TO_SCIENTIFIC = "to_scientific"
    TO_ENGINEERING = "to_engineering"
    TO_FIXED = "to_fixed"
    PERCENTAGE = "percentage"

    # Анализ
    SIGFIG_OF = "sigfig_of"
    DIGITS_AFTER_DECIMAL = "digits_after_decimal"


# =============================================================================
# MODELS
# =============================================================================


class CalculationRequest(BaseModel):
    """
    Запрос на вычисление.

    Параметры, не относящиеся к операции, игнорируются диспетчером;
    обязательность параметра (places для to_fixed, sigfigs для round)
    проверяет Calculator.
    """

    operation: CalculationOperation = Field(..., description="Имя операции")
    operands: List[RequestOperand] = Field(..., min_length=1, description="Операнды")
    sigfigs: Optional[int] = Field(None, ge=1, description="Число значащих цифр")
    threshold: Optional[int] = Field(None, ge=0, le=9, description="Порог округления")
    places: Optional[int] = Field(None, ge=0, description="Цифр после точки")
    append_percent: bool = Field(True, description="Добавлять '%' (percentage)")

    model_config = {"frozen": True, "extra": "forbid"}


class CalculationResult(BaseModel):
    """
    Результат вычисления.

    ok=True: result заполнен, error_* пусты.
    ok=False: result пуст, error_kind и error_message заполнены.
    """

    operation: CalculationOperation = Field(..., description="Имя операции")
    ok: bool = Field(..., description="Успешность вычисления")
    result: Optional[Union[str, int]] = Field(None, description="Отформатированное значение")
    error_kind: Optional[SigfigErrorKind] = Field(None, description="Вид ошибки")
    error_message: Optional[str] = Field(
        None, validate_default=True, description="Сообщение ошибки"
    )

    model_config = {"frozen": True}

    @field_validator("error_message")
    @classmethod
    def validate_outcome(cls, v: Optional[str], info) -> Optional[str]:
        """Проверка согласованности ok/result/error_*"""
        ok = info.data.get("ok")
        if ok and (v is not None or info.data.get("error_kind") is not None):
            raise ValueError("Successful result must not carry an error")
        if ok and info.data.get("result") is None:
            raise ValueError("Successful result must carry a value")
        if ok is False and (v is None or info.data.get("error_kind") is None):
            raise ValueError("Failed result must carry error_kind and error_message")
        return v

    @classmethod
    def success(cls, operation: CalculationOperation, value: Union[str, int]) -> "CalculationResult":
        return cls(operation=operation, ok=True, result=value)

    @classmethod
    def failure(
        cls, operation: CalculationOperation, kind: SigfigErrorKind, message: str
    ) -> "CalculationResult":
        return cls(operation=operation, ok=False, error_kind=kind, error_message=message)
