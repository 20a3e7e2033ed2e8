"""
sigfig — десятичная арифметика и форматирование с учётом значащих цифр.

Все операции принимают str | int | float | Decimal и возвращают str
(sigfig_of, digits_after_decimal и правила точности возвращают int).

    >>> from src import sigfig
    >>> sigfig.add(1.23, 4.5)
    '5.7'
    >>> sigfig.mul(100, 2.5)
    '3e+2'
"""

from src.sigfig.calculator import Calculator, evaluate
from src.sigfig.config import DEFAULT_CONFIG, SigfigConfig
from src.sigfig.domain.decimal_text import DecimalInput, Operand, parse_operand
from src.sigfig.domain.precision import PercentageOptions
from src.sigfig.errors import (
    DivisionByZero,
    InvalidArgument,
    InvalidDomain,
    InvalidInput,
    InvalidResult,
    NoValidInput,
    SigfigError,
    SigfigErrorKind,
)
from src.sigfig.math.arithmetic import (
    abs,
    add,
    div,
    divide,
    idiv,
    max,
    min,
    minus,
    mod,
    modulo,
    mul,
    plus,
    pow,
    power,
    sqrt,
    sub,
    times,
)
from src.sigfig.math.formatting import (
    percentage,
    round,
    to_digits_after_decimal,
    to_fixed,
    truncate,
)
from src.sigfig.math.notation import to_engineering, to_exponential, to_scientific
from src.sigfig.math.precision import decimal_places_for_add_sub, sigfigs_for_mul_div
from src.sigfig.math.rounding import to_precision, to_sigfig
from src.sigfig.math.significant_figures import digits_after_decimal, sigfig_of

__all__ = [
    # Analysis
    "sigfig_of",
    "digits_after_decimal",
    "decimal_places_for_add_sub",
    "sigfigs_for_mul_div",
    # Arithmetic
    "add",
    "plus",
    "sub",
    "minus",
    "mul",
    "times",
    "div",
    "divide",
    "mod",
    "modulo",
    "idiv",
    "pow",
    "power",
    "sqrt",
    "abs",
    "max",
    "min",
    # Formatting
    "to_sigfig",
    "to_precision",
    "to_scientific",
    "to_exponential",
    "to_engineering",
    "round",
    "truncate",
    "percentage",
    "to_digits_after_decimal",
    "to_fixed",
    # Types
    "DecimalInput",
    "Operand",
    "PercentageOptions",
    "parse_operand",
    # Config
    "DEFAULT_CONFIG",
    "SigfigConfig",
    # Errors
    "SigfigError",
    "SigfigErrorKind",
    "InvalidInput",
    "InvalidArgument",
    "DivisionByZero",
    "InvalidDomain",
    "InvalidResult",
    "NoValidInput",
    # Calculator
    "Calculator",
    "evaluate",
]
