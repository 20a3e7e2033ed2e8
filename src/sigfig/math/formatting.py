"""
Formatting — Публичные функции форматирования

round / truncate / percentage / to_digits_after_decimal поверх Rounding
Engine. Имя round совпадает с builtin; функции используются через
пространство имён пакета (как operator.abs).
"""

from collections.abc import Mapping
from typing import Optional, Union

from pydantic import ValidationError

from src.sigfig.domain.decimal_text import DecimalInput, parse_operand
from src.sigfig.domain.precision import PercentageOptions
from src.sigfig.errors import MSG_PERCENT_BY_ZERO, DivisionByZero, InvalidArgument
from src.sigfig.math.decimal_backend import DEFAULT_BACKEND
from src.sigfig.math.rounding import (
    round_to_sigfigs,
    to_fixed_decimal_places,
    truncate_to_sigfigs,
    validate_sigfigs,
)
from src.sigfig.math.significant_figures import sigfig_of

HUNDRED = DEFAULT_BACKEND.parse("100")

PercentageOptionsInput = Union[None, int, PercentageOptions, Mapping]


def round(value: DecimalInput, sigfigs: int, threshold: int = 5) -> str:
    """
    Округление до sigfigs значащих цифр с порогом threshold (0..9).

    Examples:
        >>> round(3.14159, 4)
        '3.142'
        >>> round(3.14959, 3, 9)
        '3.15'
        >>> round(123.456, 3, 3)
        '124'
    """
    return round_to_sigfigs(value, sigfigs, threshold)


def truncate(value: DecimalInput, sigfigs: int) -> str:
    """Усечение до sigfigs значащих цифр без округления."""
    return truncate_to_sigfigs(value, sigfigs)


def to_digits_after_decimal(value: DecimalInput, places: int) -> str:
    """
    Ровно places цифр после точки: округление ROUND_HALF_UP или дополнение нулями.

    Examples:
        >>> to_digits_after_decimal(3.14159, 4)
        '3.1416'
        >>> to_digits_after_decimal(255.5, 5)
        '255.50000'
    """
    return to_fixed_decimal_places(value, places)


to_fixed = to_digits_after_decimal


def _resolve_percentage_options(options: PercentageOptionsInput) -> PercentageOptions:
    if options is None:
        return PercentageOptions()
    if isinstance(options, PercentageOptions):
        return options
    if isinstance(options, Mapping):
        try:
            return PercentageOptions.model_validate(dict(options))
        except ValidationError as e:
            raise InvalidArgument(f"Invalid percentage options: {e.errors()}") from e
    if isinstance(options, int) and not isinstance(options, bool):
        return PercentageOptions(sigfigs=validate_sigfigs(options))
    raise InvalidArgument(
        f"Percentage options must be an int, a mapping or PercentageOptions, "
        f"got {type(options).__name__}"
    )


def percentage(
    part: DecimalInput,
    whole: DecimalInput,
    options: PercentageOptionsInput = None,
) -> str:
    """
    Процент part от whole с учётом значащих цифр.

    Args:
        part: Часть
        whole: Целое (не ноль)
        options: None, число значащих цифр, PercentageOptions или mapping
            {"sigfigs": ..., "append_percent": ...}

    Returns:
        part / whole * 100 с sigfigs значащими цифрами (по умолчанию
        min(sigfig_of(part), sigfig_of(whole))) и знаком '%'

    Raises:
        InvalidArgument: Невалидные опции
        InvalidInput: Невалидные part/whole
        DivisionByZero: whole == 0

    Examples:
        >>> percentage("1.0", "3.0")
        '33%'
        >>> percentage(1, 3, 4)
        '33.33%'
        >>> percentage(1, 3, {"sigfigs": 4, "append_percent": False})
        '33.33'
    """
    resolved = _resolve_percentage_options(options)
    part_operand = parse_operand(part)
    whole_operand = parse_operand(whole)

    if whole_operand.is_zero:
        raise DivisionByZero(MSG_PERCENT_BY_ZERO)

    sigfigs: Optional[int] = resolved.sigfigs
    if sigfigs is None:
        sigfigs = min(sigfig_of(part_operand), sigfig_of(whole_operand))

    ratio = DEFAULT_BACKEND.div(part_operand.value, whole_operand.value, sigfigs)
    result = DEFAULT_BACKEND.mul(ratio, HUNDRED)

    formatted = round_to_sigfigs(result, sigfigs, 5)
    return f"{formatted}%" if resolved.append_percent else formatted
