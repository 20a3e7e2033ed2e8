"""
Significant Figures — Подсчёт значащих цифр по десятичной записи

Правила (физическая конвенция):
1. Ноль → 1 значащая цифра
2. Экспоненциальная запись: считаются только цифры коэффициента
3. С десятичной точкой: ведущие нули не значимы, trailing zeros после
   точки значимы ("1.230" → 4, "100." → 3)
4. Без десятичной точки: ведущие и trailing zeros не значимы ("100" → 1)

Подсчёт идёт по тексту операнда, поэтому только строковый ввод сохраняет
trailing zeros: float 1.0 рендерится как "1".
"""

import re
from typing import Final, Union

from src.sigfig.domain.decimal_text import DecimalInput, Operand, parse_operand

_EXPONENT_SPLIT_RE: Final[re.Pattern[str]] = re.compile(r"[eE]")


def count_significant_figures(text: str) -> int:
    """
    Подсчёт значащих цифр в проверенной десятичной записи.

    Args:
        text: DecimalText (уже прошедший валидацию)

    Returns:
        Число значащих цифр (>= 1)
    """
    body = text.lstrip("+-")
    mantissa = _EXPONENT_SPLIT_RE.split(body, maxsplit=1)[0]

    if "." in mantissa:
        integer_part, fraction_part = mantissa.split(".", 1)
        integer_part = integer_part.lstrip("0")
        if not integer_part:
            # "0.00123" → 3, "0.0" → 1
            return len(fraction_part.lstrip("0")) or 1
        return len(integer_part) + len(fraction_part)

    return len(mantissa.strip("0")) or 1


def sigfig_of(value: Union[DecimalInput, Operand]) -> int:
    """
    Число значащих цифр значения.

    Args:
        value: str, int, float или Decimal

    Returns:
        Число значащих цифр (>= 1, ноль → 1)

    Raises:
        InvalidInput: Если значение не является конечным десятичным числом

    Examples:
        >>> sigfig_of("1.230")
        4
        >>> sigfig_of(100)
        1
        >>> sigfig_of("100.")
        3
        >>> sigfig_of("1.23e-4")
        3
    """
    operand = parse_operand(value)
    if operand.is_zero:
        return 1
    return count_significant_figures(operand.text)


def digits_after_decimal(value: Union[DecimalInput, Operand]) -> int:
    """
    Число цифр после десятичной точки.

    Для экспоненциальной записи: цифры дробной части коэффициента минус
    показатель, не меньше нуля ("1.23e-4" → 6). Для float считается по
    отрендеренной записи (1.230 → 2).

    Raises:
        InvalidInput: Если значение не является конечным десятичным числом
    """
    operand = parse_operand(value)
    mantissa, _, exponent = operand.text.lower().partition("e")
    fraction = mantissa.partition(".")[2]

    if exponent:
        return max(0, len(fraction) - int(exponent))
    return len(fraction)
