"""
Precision models — Спецификация точности результата и опции percentage

PrecisionSpec — sum type:
- DecimalPlaces(places >= 0): add/sub по умолчанию (цифры после точки)
- Sigfigs(count >= 1): mul/div/mod/idiv/pow/sqrt/abs/max/min/percentage

Все модели immutable (frozen=True) и создаются на каждый вызов.
"""

from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, Field


# =============================================================================
# ENUMS
# =============================================================================


class PrecisionKind(str, Enum):
    """Правило вывода точности для операции"""

    ADD_SUB = "add_sub"  # Десятичные разряды наименее точного операнда
    MUL_DIV = "mul_div"  # Минимум значащих цифр операндов


# =============================================================================
# PRECISION SPEC
# =============================================================================


class DecimalPlaces(BaseModel):
    """Точность как число цифр после десятичной точки."""

    places: int = Field(..., ge=0, strict=True, description="Цифры после точки")

    model_config = {"frozen": True}


class Sigfigs(BaseModel):
    """Точность как число значащих цифр."""

    count: int = Field(..., ge=1, strict=True, description="Значащие цифры")

    model_config = {"frozen": True}


PrecisionSpec = Union[DecimalPlaces, Sigfigs]


# =============================================================================
# PERCENTAGE OPTIONS
# =============================================================================


class PercentageOptions(BaseModel):
    """
    Опции percentage().

    sigfigs=None означает min(sigfig_of(part), sigfig_of(whole)).
    """

    sigfigs: Optional[int] = Field(
        None, ge=1, strict=True, description="Значащие цифры результата"
    )
    append_percent: bool = Field(True, strict=True, description="Добавлять знак '%'")

    model_config = {"frozen": True, "extra": "forbid"}
