"""
Arithmetic — Операции с сохранением значащих цифр

Все операции выполняются точно в десятичной арифметике (DecimalBackend),
затем результат форматируется по точности операндов:
- add/sub: цифры после точки наименее точного операнда
- mul/div/mod/idiv/pow: минимум значащих цифр операндов
- sqrt/abs: значащие цифры единственного операнда
- max/min: минимум значащих цифр уцелевших после фильтрации значений

Явный sigfigs переопределяет правило и всегда даёт округление
до значащих цифр.

ПОРЯДОК ПРОВЕРОК:
1. sigfigs (InvalidArgument)
2. Разбор операндов (InvalidInput)
3. Доменные ошибки: DivisionByZero, InvalidDomain, InvalidResult

Имена abs/pow/max/min повторяют builtins (как в модуле operator);
модуль использует их только через пространство имён пакета.
"""

import logging
import math
from decimal import Decimal, DivisionByZero as DecimalDivisionByZero, InvalidOperation, Overflow
from typing import List, Optional, Sequence

from src.sigfig.domain.decimal_text import DecimalInput, Operand, parse_operand, try_parse_operand
from src.sigfig.domain.precision import PrecisionKind, Sigfigs
from src.sigfig.errors import (
    MSG_DIVISION_BY_ZERO,
    MSG_INVALID_POWER,
    MSG_MODULO_BY_ZERO,
    MSG_NEGATIVE_SQRT,
    MSG_NO_VALID_NUMBERS,
    MSG_NOT_A_LIST,
    DivisionByZero,
    InvalidArgument,
    InvalidDomain,
    InvalidResult,
    NoValidInput,
)
from src.sigfig.math.decimal_backend import DEFAULT_BACKEND, ONE
from src.sigfig.math.precision import (
    apply_precision,
    resolve_precision,
    sigfigs_for_mul_div,
)
from src.sigfig.math.rounding import round_to_sigfigs, validate_sigfigs
from src.sigfig.math.significant_figures import sigfig_of

logger = logging.getLogger(__name__)


def _prepare(sigfigs: Optional[int], *values: DecimalInput) -> List[Operand]:
    if sigfigs is not None:
        validate_sigfigs(sigfigs)
    return [parse_operand(value) for value in values]


def _finish(result: Decimal, kind: PrecisionKind, operands: Sequence[Operand], sigfigs: Optional[int]) -> str:
    return apply_precision(result, resolve_precision(kind, operands, sigfigs))


# =============================================================================
# СЛОЖЕНИЕ И ВЫЧИТАНИЕ
# =============================================================================


def add(a: DecimalInput, b: DecimalInput, sigfigs: Optional[int] = None) -> str:
    """
    Сумма с точностью наименее точного операнда по разрядам.

    Examples:
        >>> add(1.23, 4.5)
        '5.7'
        >>> add(123, 4.567)
        '128'
    """
    left, right = _prepare(sigfigs, a, b)
    result = DEFAULT_BACKEND.add(left.value, right.value)
    return _finish(result, PrecisionKind.ADD_SUB, (left, right), sigfigs)


def sub(a: DecimalInput, b: DecimalInput, sigfigs: Optional[int] = None) -> str:
    """
    Разность с точностью наименее точного операнда по разрядам.

    Examples:
        >>> sub(5.67, 1.2)
        '4.5'
        >>> sub(500, 23.4)
        '477'
    """
    left, right = _prepare(sigfigs, a, b)
    result = DEFAULT_BACKEND.sub(left.value, right.value)
    return _finish(result, PrecisionKind.ADD_SUB, (left, right), sigfigs)


# =============================================================================
# УМНОЖЕНИЕ И ДЕЛЕНИЕ
# =============================================================================


def mul(a: DecimalInput, b: DecimalInput, sigfigs: Optional[int] = None) -> str:
    """
    Произведение с минимумом значащих цифр операндов.

    Examples:
        >>> mul(100, 2.5)
        '3e+2'
        >>> mul(1.23, 4.5)
        '5.5'
    """
    left, right = _prepare(sigfigs, a, b)
    result = DEFAULT_BACKEND.mul(left.value, right.value)
    return _finish(result, PrecisionKind.MUL_DIV, (left, right), sigfigs)


def div(a: DecimalInput, b: DecimalInput, sigfigs: Optional[int] = None) -> str:
    """
    Частное с минимумом значащих цифр операндов.

    Raises:
        DivisionByZero: b == 0
    """
    left, right = _prepare(sigfigs, a, b)
    if right.is_zero:
        raise DivisionByZero(MSG_DIVISION_BY_ZERO)

    precision = resolve_precision(PrecisionKind.MUL_DIV, (left, right), sigfigs)
    result = DEFAULT_BACKEND.div(left.value, right.value, precision.count)
    return apply_precision(result, precision)


def mod(a: DecimalInput, b: DecimalInput, sigfigs: Optional[int] = None) -> str:
    """
    Остаток от деления (знак делимого).

    Examples:
        >>> mod(10, 3)
        '1'
        >>> mod(-10, 3)
        '-1'

    Raises:
        DivisionByZero: b == 0 (отдельное сообщение для модуля)
    """
    left, right = _prepare(sigfigs, a, b)
    if right.is_zero:
        raise DivisionByZero(MSG_MODULO_BY_ZERO)

    result = DEFAULT_BACKEND.mod(left.value, right.value)
    return _finish(result, PrecisionKind.MUL_DIV, (left, right), sigfigs)


def idiv(a: DecimalInput, b: DecimalInput, sigfigs: Optional[int] = None) -> str:
    """
    Целочисленное деление с округлением к минус бесконечности.

    Examples:
        >>> idiv(-10, 3)
        '-4'
        >>> idiv(22.0, 7.0, 2)
        '3.0'

    Raises:
        DivisionByZero: b == 0
    """
    left, right = _prepare(sigfigs, a, b)
    if right.is_zero:
        raise DivisionByZero(MSG_DIVISION_BY_ZERO)

    result = DEFAULT_BACKEND.floor_div(left.value, right.value)
    return _finish(result, PrecisionKind.MUL_DIV, (left, right), sigfigs)


# =============================================================================
# СТЕПЕНЬ, КОРЕНЬ, МОДУЛЬ
# =============================================================================


def _float_power(base: Operand, exponent: Operand) -> Decimal:
    # Нецелый показатель: приближение через float
    logger.debug("Float approximation for %s ** %s", base.text, exponent.text)
    try:
        approx = math.pow(float(base.value), float(exponent.value))
    except (OverflowError, ValueError) as e:
        raise InvalidResult(MSG_INVALID_POWER) from e

    if not math.isfinite(approx):
        raise InvalidResult(MSG_INVALID_POWER)
    return parse_operand(approx).value


def pow(base: DecimalInput, exponent: DecimalInput, sigfigs: Optional[int] = None) -> str:
    """
    Возведение в степень.

    Целый показатель — точная десятичная степень, нецелый — float-приближение
    с проверкой конечности.

    Examples:
        >>> pow(2, 3)
        '8'
        >>> pow(2.5, "2.0")
        '6.3'

    Raises:
        InvalidResult: 0 ** отрицательное, переполнение, комплексный результат
    """
    base_operand, exponent_operand = _prepare(sigfigs, base, exponent)
    precision = resolve_precision(
        PrecisionKind.MUL_DIV, (base_operand, exponent_operand), sigfigs
    )

    if base_operand.is_zero and exponent_operand.value.is_signed() and not exponent_operand.is_zero:
        raise InvalidResult(MSG_INVALID_POWER)

    if DEFAULT_BACKEND.is_integral(exponent_operand.value):
        integer_exponent = int(exponent_operand.value)
        try:
            if integer_exponent == 0:
                result = ONE
            else:
                result = DEFAULT_BACKEND.power(
                    base_operand.value, integer_exponent, precision.count
                )
        except (Overflow, DecimalDivisionByZero, InvalidOperation) as e:
            raise InvalidResult(MSG_INVALID_POWER) from e
    else:
        result = _float_power(base_operand, exponent_operand)

    return apply_precision(result, precision)


def sqrt(value: DecimalInput, sigfigs: Optional[int] = None) -> str:
    """
    Квадратный корень со значащими цифрами аргумента.

    Raises:
        InvalidDomain: value < 0
    """
    (operand,) = _prepare(sigfigs, value)
    if operand.value < 0:
        raise InvalidDomain(MSG_NEGATIVE_SQRT)

    precision = sigfigs if sigfigs is not None else sigfig_of(operand)
    result = DEFAULT_BACKEND.sqrt(operand.value, precision)
    return round_to_sigfigs(result, precision, 5)


def abs(value: DecimalInput, sigfigs: Optional[int] = None) -> str:
    """
    Модуль со значащими цифрами аргумента.

    Examples:
        >>> abs("-5.0")
        '5.0'
    """
    (operand,) = _prepare(sigfigs, value)
    precision = sigfigs if sigfigs is not None else sigfig_of(operand)
    return round_to_sigfigs(operand.value.copy_abs(), precision, 5)


# =============================================================================
# MAX / MIN
# =============================================================================


def _collect_valid(values: Sequence[object]) -> List[Operand]:
    survivors: List[Operand] = []
    for index, raw in enumerate(values):
        operand = try_parse_operand(raw)
        if operand is None:
            logger.debug("Skipping invalid entry at index %d: %r", index, raw)
            continue
        survivors.append(operand)
    return survivors


def _extremum(values: Sequence[object], sigfigs: Optional[int], direction: int) -> str:
    if sigfigs is not None:
        validate_sigfigs(sigfigs)
    if not isinstance(values, (list, tuple)):
        raise InvalidArgument(f"{MSG_NOT_A_LIST}, got {type(values).__name__}")

    survivors = _collect_valid(values)
    if not survivors:
        raise NoValidInput(MSG_NO_VALID_NUMBERS)

    # Сравнение по неокруглённым значениям; при равенстве остаётся первое
    best = survivors[0]
    for candidate in survivors[1:]:
        if DEFAULT_BACKEND.compare(candidate.value, best.value) == direction:
            best = candidate

    precision = Sigfigs(count=sigfigs if sigfigs is not None else sigfigs_for_mul_div(survivors))
    return apply_precision(best.value, precision)


def max(values: Sequence[object], sigfigs: Optional[int] = None) -> str:
    """
    Максимум списка; невалидные элементы пропускаются.

    Examples:
        >>> max([1, "invalid", 3])
        '3'
        >>> max([1.234, 1.235], 3)
        '1.24'

    Raises:
        InvalidArgument: values не list/tuple
        NoValidInput: Не осталось валидных значений
    """
    return _extremum(values, sigfigs, 1)


def min(values: Sequence[object], sigfigs: Optional[int] = None) -> str:
    """
    Минимум списка; невалидные элементы пропускаются.

    Examples:
        >>> min(["5.0", 3.14])
        '3.1'

    Raises:
        InvalidArgument: values не list/tuple
        NoValidInput: Не осталось валидных значений
    """
    return _extremum(values, sigfigs, -1)


# =============================================================================
# ALIASES
# =============================================================================

plus = add
minus = sub
times = mul
divide = div
modulo = mod
power = pow
