"""
Precision Resolver — Точность результата n-арной операции

- add/sub: число цифр после точки у наименее точного операнда
  (любой операнд без дробной части → 0)
- mul/div/mod/idiv/pow: минимум значащих цифр операндов

По умолчанию сложение следит за разрядами, умножение за значащими
цифрами. Явный sigfigs всегда даёт Sigfigs.
"""

from decimal import Decimal
from typing import Iterable, Optional, Union

from src.sigfig.domain.decimal_text import DecimalInput, Operand, parse_operand
from src.sigfig.domain.precision import DecimalPlaces, PrecisionKind, PrecisionSpec, Sigfigs
from src.sigfig.errors import InvalidArgument
from src.sigfig.math.rounding import round_to_sigfigs, to_fixed_decimal_places
from src.sigfig.math.significant_figures import digits_after_decimal, sigfig_of


def decimal_places_for_add_sub(values: Iterable[Union[DecimalInput, Operand]]) -> int:
    """
    Число цифр после точки для результата сложения/вычитания.

    Args:
        values: Операнды

    Returns:
        Минимум digits_after_decimal по операндам; 0, если у какого-либо
        операнда нет дробной части или операндов нет

    Examples:
        >>> decimal_places_for_add_sub([1.23, 4.5])
        1
        >>> decimal_places_for_add_sub([123, 4.5])
        0
    """
    min_places: Optional[int] = None

    for value in values:
        places = digits_after_decimal(value)
        if places == 0:
            return 0
        if min_places is None or places < min_places:
            min_places = places

    return min_places if min_places is not None else 0


def sigfigs_for_mul_div(values: Iterable[Union[DecimalInput, Operand]]) -> int:
    """
    Число значащих цифр для результата умножения/деления.

    Raises:
        InvalidArgument: Если операндов нет

    Examples:
        >>> sigfigs_for_mul_div([1.23, 4.5])
        2
        >>> sigfigs_for_mul_div(["1.0", "2.00"])
        2
    """
    counts = [sigfig_of(value) for value in values]
    if not counts:
        raise InvalidArgument("At least one value is required to resolve significant figures")
    return min(counts)


def resolve_precision(
    kind: PrecisionKind,
    operands: Iterable[Union[DecimalInput, Operand]],
    sigfigs: Optional[int] = None,
) -> PrecisionSpec:
    """
    Спецификация точности результата.

    Args:
        kind: Правило операции (ADD_SUB или MUL_DIV)
        operands: Исходные операнды (их запись определяет точность)
        sigfigs: Явное число значащих цифр (уже проверенное)
    """
    if sigfigs is not None:
        return Sigfigs(count=sigfigs)

    parsed = [parse_operand(operand) for operand in operands]
    if kind is PrecisionKind.ADD_SUB:
        return DecimalPlaces(places=decimal_places_for_add_sub(parsed))
    return Sigfigs(count=sigfigs_for_mul_div(parsed))


def apply_precision(value: Decimal, spec: PrecisionSpec) -> str:
    """Форматирование точного результата по спецификации точности."""
    if isinstance(spec, DecimalPlaces):
        return to_fixed_decimal_places(value, spec.places)
    return round_to_sigfigs(value, spec.count, 5)
