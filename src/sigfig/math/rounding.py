"""
Rounding Engine — Округление до значащих цифр и десятичных разрядов

Порог округления (threshold, 0..9): decision digit — цифра сразу после
последней сохраняемой значащей цифры. decision digit >= threshold →
округление от нуля, иначе усечение. Знак обрабатывается отдельно от модуля.

- threshold = 5: ROUND_HALF_UP средствами DecimalBackend (fast path)
- threshold != 5: направление выбирает движок (см. _round_directed)
- truncate: ветка "никогда не увеличивать"

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. sigfig_of(round_to_sigfigs(v, n)) == n (кроме переноса в фиксированной
   записи, где trailing zeros целой части не выражаются)
2. round_to_sigfigs(round_to_sigfigs(v, n), n) == round_to_sigfigs(v, n)
3. Граница порога строгая: >= вверх, < вниз
4. Ноль → "0" для функций sigfig, "0.000" для фиксированных разрядов
"""

from decimal import ROUND_DOWN, Decimal
from typing import Optional, Union

from src.sigfig.config import SigfigConfig
from src.sigfig.domain.decimal_text import DecimalInput, Operand, parse_operand
from src.sigfig.errors import MSG_PLACES, MSG_SIGFIGS, MSG_THRESHOLD, InvalidArgument
from src.sigfig.math.decimal_backend import DecimalBackend, backend_for

# =============================================================================
# ВАЛИДАЦИЯ ПАРАМЕТРОВ
# =============================================================================


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_sigfigs(sigfigs: int) -> int:
    """
    Проверка числа значащих цифр.

    Raises:
        InvalidArgument: Если sigfigs не положительное целое
    """
    if not _is_int(sigfigs) or sigfigs <= 0:
        raise InvalidArgument(f"{MSG_SIGFIGS}, got {sigfigs!r}")
    return sigfigs


def validate_places(places: int) -> int:
    """
    Проверка числа цифр после точки.

    Raises:
        InvalidArgument: Если places не неотрицательное целое
    """
    if not _is_int(places) or places < 0:
        raise InvalidArgument(f"{MSG_PLACES}, got {places!r}")
    return places


def validate_threshold(threshold: int) -> int:
    """
    Проверка порога округления.

    Raises:
        InvalidArgument: Если threshold не целое в [0, 9]
    """
    if not _is_int(threshold) or not 0 <= threshold <= 9:
        raise InvalidArgument(f"{MSG_THRESHOLD}, got {threshold!r}")
    return threshold


# =============================================================================
# НАПРАВЛЕННОЕ ОКРУГЛЕНИЕ
# =============================================================================


def _decision_digit(magnitude: Decimal, sigfigs: int, backend: DecimalBackend) -> int:
    """
    Цифра с индексом sigfigs в последовательности значащих цифр.

    Рендеринг идёт с запасом extra_precision_digits и без округления, чтобы
    backend не изменил проверяемую цифру. Отсутствующая цифра → 0.
    """
    rendered = backend.to_precision(
        magnitude, sigfigs + backend.config.extra_precision_digits, rounding=ROUND_DOWN
    )
    mantissa = rendered.lower().partition("e")[0]
    digits = mantissa.replace(".", "").lstrip("0")
    if len(digits) > sigfigs:
        return int(digits[sigfigs])
    return 0


def _round_directed(
    value: Decimal, sigfigs: int, threshold: Optional[int], backend: DecimalBackend
) -> str:
    """
    Округление модуля с выбором направления по decision digit.

    threshold=None — усечение (эквивалент threshold=10).
    """
    magnitude_value = value.copy_abs()
    decision = _decision_digit(magnitude_value, sigfigs, backend)

    # Позиция последней сохраняемой цифры
    round_position = magnitude_value.adjusted() - sigfigs + 1
    truncated = backend.round_significant(magnitude_value, sigfigs, rounding=ROUND_DOWN)

    if threshold is not None and decision >= threshold:
        unit = Decimal((0, (1,), round_position))
        result = backend.add(truncated, unit)
    else:
        result = truncated

    if value.is_signed():
        result = result.copy_negate()

    # 99 → 100: to_precision переключится на экспоненциальную запись
    return backend.to_precision(result, sigfigs)


# =============================================================================
# ПУБЛИЧНЫЕ ФУНКЦИИ ДВИЖКА
# =============================================================================


def round_to_sigfigs(
    value: Union[DecimalInput, Operand],
    sigfigs: int,
    threshold: Optional[int] = None,
    config: Optional[SigfigConfig] = None,
) -> str:
    """
    Округление до sigfigs значащих цифр с порогом threshold.

    Args:
        value: Значение
        sigfigs: Число значащих цифр (>= 1)
        threshold: Порог 0..9 (None → config.default_threshold)
        config: Конфигурация движка (None → DEFAULT_CONFIG)

    Returns:
        Строка с ровно sigfigs значащими цифрами ("0" для нуля)

    Raises:
        InvalidArgument: Невалидные sigfigs/threshold
        InvalidInput: Невалидное значение

    Examples:
        >>> round_to_sigfigs(123.456, 3, 3)
        '124'
        >>> round_to_sigfigs(123.256, 3, 3)
        '123'
        >>> round_to_sigfigs(1234.5, 2)
        '1.2e+3'
    """
    backend = backend_for(config)
    sigfigs = validate_sigfigs(sigfigs)
    if threshold is None:
        threshold = backend.config.default_threshold
    threshold = validate_threshold(threshold)
    operand = parse_operand(value)

    if operand.is_zero:
        return "0"

    if threshold == 5:
        return backend.to_precision(operand.value, sigfigs)

    return _round_directed(operand.value, sigfigs, threshold, backend)


def truncate_to_sigfigs(
    value: Union[DecimalInput, Operand],
    sigfigs: int,
    config: Optional[SigfigConfig] = None,
) -> str:
    """
    Усечение до sigfigs значащих цифр (к нулю, без округления).

    Examples:
        >>> truncate_to_sigfigs(123.999, 3)
        '123'
        >>> truncate_to_sigfigs(1999, 2)
        '1.9e+3'
    """
    backend = backend_for(config)
    sigfigs = validate_sigfigs(sigfigs)
    operand = parse_operand(value)

    if operand.is_zero:
        return "0"

    return _round_directed(operand.value, sigfigs, None, backend)


def to_fixed_decimal_places(
    value: Union[DecimalInput, Operand],
    places: int,
    config: Optional[SigfigConfig] = None,
) -> str:
    """
    Фиксированная запись с ровно places цифрами после точки (ROUND_HALF_UP).

    Examples:
        >>> to_fixed_decimal_places(3.14159, 2)
        '3.14'
        >>> to_fixed_decimal_places(5, 3)
        '5.000'
    """
    backend = backend_for(config)
    places = validate_places(places)
    operand = parse_operand(value)
    return backend.to_fixed(operand.value, places)


def to_sigfig(value: Union[DecimalInput, Operand], sigfigs: int) -> str:
    """
    Запись с sigfigs значащими цифрами (ROUND_HALF_UP).

    Examples:
        >>> to_sigfig(255.5, 5)
        '255.50'
        >>> to_sigfig(0.001234, 3)
        '0.00123'
        >>> to_sigfig(9876, 2)
        '9.9e+3'
    """
    return round_to_sigfigs(value, sigfigs, 5)


to_precision = to_sigfig
