"""
Math modules для sigfig engine

Подсчёт значащих цифр, правила точности, округление, нотации и арифметика.
"""

# Decimal Backend
from src.sigfig.math.decimal_backend import (
    DEFAULT_BACKEND,
    EXACT_POWER_DIGIT_LIMIT,
    DecimalBackend,
    backend_for,
)

# Significant Figures
from src.sigfig.math.significant_figures import (
    count_significant_figures,
    digits_after_decimal,
    sigfig_of,
)

# Rounding Engine
from src.sigfig.math.rounding import (
    round_to_sigfigs,
    to_fixed_decimal_places,
    to_precision,
    to_sigfig,
    truncate_to_sigfigs,
    validate_places,
    validate_sigfigs,
    validate_threshold,
)

# Precision Resolver
from src.sigfig.math.precision import (
    apply_precision,
    decimal_places_for_add_sub,
    resolve_precision,
    sigfigs_for_mul_div,
)

# Notation
from src.sigfig.math.notation import (
    to_engineering,
    to_exponential,
    to_scientific,
)

# Formatting
from src.sigfig.math.formatting import (
    percentage,
    round,
    to_digits_after_decimal,
    to_fixed,
    truncate,
)

# Arithmetic
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

__all__ = [
    # Decimal Backend
    "DEFAULT_BACKEND",
    "EXACT_POWER_DIGIT_LIMIT",
    "DecimalBackend",
    "backend_for",
    # Significant Figures
    "count_significant_figures",
    "digits_after_decimal",
    "sigfig_of",
    # Rounding Engine
    "round_to_sigfigs",
    "to_fixed_decimal_places",
    "to_precision",
    "to_sigfig",
    "truncate_to_sigfigs",
    "validate_places",
    "validate_sigfigs",
    "validate_threshold",
    # Precision Resolver
    "apply_precision",
    "decimal_places_for_add_sub",
    "resolve_precision",
    "sigfigs_for_mul_div",
    # Notation
    "to_engineering",
    "to_exponential",
    "to_scientific",
    # Formatting
    "percentage",
    "round",
    "to_digits_after_decimal",
    "to_fixed",
    "truncate",
    # Arithmetic
    "abs",
    "add",
    "div",
    "divide",
    "idiv",
    "max",
    "min",
    "minus",
    "mod",
    "modulo",
    "mul",
    "plus",
    "pow",
    "power",
    "sqrt",
    "sub",
    "times",
]
