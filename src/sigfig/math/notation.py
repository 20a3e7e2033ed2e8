"""
Notation — Научная и инженерная запись

- to_scientific: D.DDDe±N, ровно sigfigs цифр коэффициента
- to_engineering: показатель кратен 3, коэффициент в [1, 1000)

Число цифр по умолчанию — sigfig_of(value). Округление — через Rounding
Engine (ROUND_HALF_UP), знак применяется отдельно от модуля.
"""

from decimal import Decimal
from typing import Optional, Union

from src.sigfig.config import SigfigConfig
from src.sigfig.domain.decimal_text import DecimalInput, Operand, layout_digits, parse_operand
from src.sigfig.math.decimal_backend import backend_for
from src.sigfig.math.rounding import round_to_sigfigs, validate_sigfigs
from src.sigfig.math.significant_figures import sigfig_of

ENGINEERING_STEP = 3
ENGINEERING_COEFFICIENT_LIMIT = Decimal(1000)


def _zero_notation(sigfigs: Optional[int]) -> str:
    # 0 → "0e+0", с sigfigs=3 → "0.00e+0"
    if sigfigs is None or sigfigs == 1:
        return "0e+0"
    return "0." + "0" * (sigfigs - 1) + "e+0"


def _shift(value: Decimal, places: int) -> Decimal:
    """value * 10**places без участия контекста (точно)."""
    sign, digits, exponent = value.as_tuple()
    return Decimal((sign, digits, exponent + places))


def to_scientific(
    value: Union[DecimalInput, Operand],
    sigfigs: Optional[int] = None,
    config: Optional[SigfigConfig] = None,
) -> str:
    """
    Научная запись с sigfigs цифрами коэффициента.

    Args:
        value: Значение
        sigfigs: Число значащих цифр (None → sigfig_of(value))
        config: Конфигурация движка

    Returns:
        Строка вида "-1.23e+4"

    Raises:
        InvalidArgument: Невалидные sigfigs
        InvalidInput: Невалидное значение

    Examples:
        >>> to_scientific(1234)
        '1.234e+3'
        >>> to_scientific(0.00123, 4)
        '1.230e-3'
        >>> to_scientific(0)
        '0e+0'
    """
    if sigfigs is not None:
        validate_sigfigs(sigfigs)
    operand = parse_operand(value)

    if operand.is_zero:
        return _zero_notation(sigfigs)

    actual_sigfigs = sigfigs if sigfigs is not None else sigfig_of(operand)
    rounded = round_to_sigfigs(operand, actual_sigfigs, 5, config)
    return backend_for(config).to_exponential(Decimal(rounded), actual_sigfigs - 1)


def to_engineering(
    value: Union[DecimalInput, Operand],
    sigfigs: Optional[int] = None,
    config: Optional[SigfigConfig] = None,
) -> str:
    """
    Инженерная запись: показатель кратен 3.

    exponent = floor(log10(|value|) / 3) * 3, коэффициент |value| / 10**exponent
    в фиксированной записи с sigfigs значащими цифрами (может быть >= 10).
    Перенос до 1000 при округлении переводит в следующую группу.

    Examples:
        >>> to_engineering(12345)
        '12.345e+3'
        >>> to_engineering(0.000123)
        '123e-6'
        >>> to_engineering(0.000123, 2)
        '120e-6'
    """
    if sigfigs is not None:
        validate_sigfigs(sigfigs)
    operand = parse_operand(value)

    if operand.is_zero:
        return _zero_notation(sigfigs)

    backend = backend_for(config)
    actual_sigfigs = sigfigs if sigfigs is not None else sigfig_of(operand)
    magnitude_value = operand.value.copy_abs()

    # adjusted() == floor(log10(|value|)), точно
    exponent = (magnitude_value.adjusted() // ENGINEERING_STEP) * ENGINEERING_STEP
    coefficient = backend.round_significant(_shift(magnitude_value, -exponent), actual_sigfigs)

    if coefficient >= ENGINEERING_COEFFICIENT_LIMIT:
        exponent += ENGINEERING_STEP
        coefficient = backend.round_significant(
            _shift(coefficient, -ENGINEERING_STEP), actual_sigfigs
        )

    digits, lead = backend.significant_digits(coefficient)
    body = layout_digits(digits, lead, exponential=False, negative=operand.value.is_signed())
    return f"{body}e{exponent:+d}"


to_exponential = to_scientific
