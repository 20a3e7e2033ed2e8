"""
Errors — Таксономия ошибок sigfig engine

Все ошибки движка наследуются от SigfigError и несут тег kind
(SigfigErrorKind), чтобы вызывающий код ветвился по виду ошибки,
а не по тексту сообщения.

ПРИОРИТЕТ:
1. Доменные ошибки (DivisionByZero, InvalidDomain, InvalidResult) важнее
   общей InvalidInput
2. InvalidArgument (sigfigs/places/threshold) проверяется до разбора операндов
3. NoValidInput возникает только в max/min после фильтрации
"""

from enum import Enum


class SigfigErrorKind(str, Enum):
    """Вид ошибки"""

    INVALID_INPUT = "invalid_input"
    INVALID_ARGUMENT = "invalid_argument"
    DIVISION_BY_ZERO = "division_by_zero"
    INVALID_DOMAIN = "invalid_domain"
    INVALID_RESULT = "invalid_result"
    NO_VALID_INPUT = "no_valid_input"


class SigfigError(Exception):
    """Базовая ошибка движка. Атрибут kind задаётся в подклассах."""

    kind: SigfigErrorKind


class InvalidInput(SigfigError, ValueError):
    """Операнд не является конечным десятичным числом."""

    kind = SigfigErrorKind.INVALID_INPUT


class InvalidArgument(SigfigError, ValueError):
    """Управляющий параметр (sigfigs, places, threshold) вне допустимого диапазона."""

    kind = SigfigErrorKind.INVALID_ARGUMENT


class DivisionByZero(SigfigError, ZeroDivisionError):
    """Нулевой делитель, модуль или whole в percentage."""

    kind = SigfigErrorKind.DIVISION_BY_ZERO


class InvalidDomain(SigfigError, ValueError):
    """Аргумент вне области определения (sqrt от отрицательного)."""

    kind = SigfigErrorKind.INVALID_DOMAIN


class InvalidResult(SigfigError, ArithmeticError):
    """Результат вычисления не конечен (например, 0 ** -1)."""

    kind = SigfigErrorKind.INVALID_RESULT


class NoValidInput(SigfigError, ValueError):
    """После фильтрации в max/min не осталось ни одного валидного значения."""

    kind = SigfigErrorKind.NO_VALID_INPUT


# Сообщения, общие для нескольких модулей
MSG_SIGFIGS: str = "Number of significant figures must be a positive integer"
MSG_PLACES: str = "Digits must be a non-negative integer"
MSG_THRESHOLD: str = "Rounding threshold must be an integer between 0 and 9"
MSG_DIVISION_BY_ZERO: str = "Division by zero is not allowed"
MSG_MODULO_BY_ZERO: str = "Division by zero: modulo by zero is undefined"
MSG_PERCENT_BY_ZERO: str = "Division by zero: whole value cannot be zero"
MSG_NEGATIVE_SQRT: str = "Cannot take square root of negative number"
MSG_INVALID_POWER: str = "Power operation resulted in infinite or invalid result"
MSG_NOT_A_LIST: str = "Input must be a list or tuple"
MSG_NO_VALID_NUMBERS: str = "No valid numbers found in array"
