"""
DecimalText — Нормализация входных значений на границе API

Входное значение — sum type DecimalInput:
- Text (str): единственный путь, сохраняющий trailing zeros ("1.0" → 2 sigfigs)
- Native (int | float): float теряет trailing zeros на источнике (1.0 → "1")
- Exact (Decimal): сохраняет показатель, trailing zeros не теряются

Любое значение приводится к неизменяемому Operand:
- text: каноническая десятичная строка (источник истины для подсчёта sigfigs)
- value: точное Decimal-значение (источник истины для арифметики)

Рендеринг float повторяет кратчайшую round-trip запись (repr) с фиксированной
записью для показателей в (-7, 21) и экспоненциальной вне этой полосы.
"""

import re
from decimal import Decimal
from enum import Enum
from typing import Final, Optional, Union

from pydantic import BaseModel, Field

from src.sigfig.config import EXPONENTIAL_LOWER_EXPONENT, EXPONENTIAL_UPPER_EXPONENT
from src.sigfig.errors import InvalidInput

# Только ASCII: знак, цифры, точка, показатель e/E
DECIMAL_TEXT_RE: Final[re.Pattern[str]] = re.compile(
    r"^[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?$"
)

DecimalInput = Union[str, int, float, Decimal]


# =============================================================================
# ENUMS
# =============================================================================


class InputSource(str, Enum):
    """Происхождение операнда"""

    TEXT = "text"
    NATIVE = "native"
    DECIMAL = "decimal"


# =============================================================================
# LAYOUT
# =============================================================================


def layout_digits(digits: str, exponent: int, exponential: bool, negative: bool = False) -> str:
    """
    Раскладка последовательности цифр в десятичную строку.

    Args:
        digits: Значащие цифры без ведущих нулей (например, "1230")
        exponent: Показатель старшей цифры (1230 → 3)
        exponential: Экспоненциальная запись D.DDDe±N
        negative: Добавить знак минус

    Returns:
        Строка в фиксированной или экспоненциальной записи

    Examples:
        >>> layout_digits("123", 2, False)
        '123'
        >>> layout_digits("12", 3, True)
        '1.2e+3'
        >>> layout_digits("12", -3, False)
        '0.0012'
    """
    if exponential:
        body = digits[0]
        if len(digits) > 1:
            body += "." + digits[1:]
        body += f"e{exponent:+d}"
    elif exponent < 0:
        body = "0." + "0" * (-exponent - 1) + digits
    elif exponent + 1 >= len(digits):
        body = digits + "0" * (exponent + 1 - len(digits))
    else:
        body = digits[: exponent + 1] + "." + digits[exponent + 1 :]

    return "-" + body if negative else body


def native_to_text(value: Union[int, float]) -> str:
    """
    Кратчайшая десятичная запись нативного числа.

    int рендерится точно. float — через repr (кратчайшие round-trip цифры),
    без дробной части для целых значений и в экспоненциальной записи вне
    полосы (-7, 21).

    Raises:
        InvalidInput: Если float равен NaN/Inf
    """
    if isinstance(value, int):
        return str(value)

    if value != value or value in (float("inf"), float("-inf")):
        raise InvalidInput(f"Invalid input: value must be a valid number, got {value!r}")

    if value == 0:
        # -0.0 → "0"
        return "0"

    shortest = Decimal(repr(value))
    sign, digit_tuple, _ = shortest.as_tuple()
    digits = "".join(str(d) for d in digit_tuple).rstrip("0")
    exponent = shortest.adjusted()
    exponential = (
        exponent <= EXPONENTIAL_LOWER_EXPONENT or exponent >= EXPONENTIAL_UPPER_EXPONENT
    )
    return layout_digits(digits, exponent, exponential, negative=bool(sign))


# =============================================================================
# OPERAND MODEL
# =============================================================================


class Operand(BaseModel):
    """
    Нормализованный операнд.

    Immutable модель (frozen=True). text хранит запись, по которой считаются
    значащие цифры и цифры после точки; value — точное значение.
    """

    text: str = Field(..., min_length=1, description="Каноническая десятичная запись")
    source: InputSource = Field(..., description="Происхождение значения")
    value: Decimal = Field(..., description="Точное десятичное значение")

    model_config = {"frozen": True}

    @property
    def is_zero(self) -> bool:
        return self.value.is_zero()

    @property
    def preserves_trailing_zeros(self) -> bool:
        """False для float: trailing zeros потеряны на источнике."""
        return self.source is not InputSource.NATIVE


def parse_operand(raw: Union[DecimalInput, Operand]) -> Operand:
    """
    Приведение входного значения к Operand.

    Args:
        raw: str, int, float, Decimal или уже готовый Operand

    Returns:
        Operand

    Raises:
        InvalidInput: Если значение не является конечным десятичным числом
            (None, bool, NaN, Inf, нечисловой текст, прочие типы)
    """
    if isinstance(raw, Operand):
        return raw

    # bool является подклассом int, но числом не считается
    if isinstance(raw, bool):
        raise InvalidInput(f"Invalid input: value must be a valid number, got {raw!r}")

    if isinstance(raw, str):
        text = raw.strip()
        if not DECIMAL_TEXT_RE.match(text):
            raise InvalidInput(f"Invalid input: value must be a valid number, got {raw!r}")
        source = InputSource.TEXT
    elif isinstance(raw, Decimal):
        if not raw.is_finite():
            raise InvalidInput(f"Invalid input: value must be a valid number, got {raw!r}")
        text = str(raw)
        source = InputSource.DECIMAL
    elif isinstance(raw, (int, float)):
        text = native_to_text(raw)
        source = InputSource.NATIVE
    else:
        raise InvalidInput(
            f"Invalid input: value must be a valid number, got {type(raw).__name__}"
        )

    return Operand(text=text, source=source, value=Decimal(text))


def try_parse_operand(raw: object) -> Optional[Operand]:
    """Как parse_operand, но None вместо InvalidInput."""
    try:
        return parse_operand(raw)
    except InvalidInput:
        return None
