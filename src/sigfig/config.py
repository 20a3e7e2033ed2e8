"""
Конфигурация sigfig engine

Параметры округления и выбора нотации. Экземпляры неизменяемы
(frozen dataclass) и передаются по значению; глобального
изменяемого состояния нет.
"""

from dataclasses import dataclass
from typing import Final

from src.sigfig.errors import InvalidArgument

# =============================================================================
# ПАРАМЕТРЫ ПО УМОЛЧАНИЮ
# =============================================================================

# Порог округления: цифра >= порога округляет от нуля (round-half-up)
DEFAULT_ROUNDING_THRESHOLD: Final[int] = 5

# Дополнительные цифры при рендеринге для custom threshold
# Меньше 10 не допускается
EXTRA_PRECISION_DIGITS: Final[int] = 10
MIN_EXTRA_PRECISION_DIGITS: Final[int] = 10

# Значащие цифры для неточных операций (div, sqrt, pow с дробным показателем)
WORKING_PRECISION: Final[int] = 64

# Граница экспоненциальной записи: показатель <= -7 или >= 21
EXPONENTIAL_LOWER_EXPONENT: Final[int] = -7
EXPONENTIAL_UPPER_EXPONENT: Final[int] = 21


@dataclass(frozen=True)
class SigfigConfig:
    """Конфигурация движка округления.

    Параметры для выбора направления округления и нотации.
    """

    # Порог по умолчанию для round() (0..9)
    default_threshold: int = DEFAULT_ROUNDING_THRESHOLD

    # K: запас цифр при поиске decision digit
    extra_precision_digits: int = EXTRA_PRECISION_DIGITS

    # Минимальная точность div/sqrt/pow (значащие цифры)
    working_precision: int = WORKING_PRECISION

    # Полоса фиксированной записи (показатель старшей цифры)
    exponential_lower_exponent: int = EXPONENTIAL_LOWER_EXPONENT
    exponential_upper_exponent: int = EXPONENTIAL_UPPER_EXPONENT

    def __post_init__(self) -> None:
        if not 0 <= self.default_threshold <= 9:
            raise InvalidArgument(
                f"default_threshold must be in [0, 9], got {self.default_threshold}"
            )
        if self.extra_precision_digits < MIN_EXTRA_PRECISION_DIGITS:
            raise InvalidArgument(
                f"extra_precision_digits must be >= {MIN_EXTRA_PRECISION_DIGITS}, "
                f"got {self.extra_precision_digits}"
            )
        if self.working_precision < 1:
            raise InvalidArgument(
                f"working_precision must be positive, got {self.working_precision}"
            )
        if self.exponential_lower_exponent >= self.exponential_upper_exponent:
            raise InvalidArgument(
                "exponential_lower_exponent must be below exponential_upper_exponent"
            )

    def uses_exponential(self, sigfigs: int, exponent: int) -> bool:
        """Нужна ли экспоненциальная запись для sigfigs цифр со старшим показателем exponent."""
        return (
            sigfigs <= exponent
            or exponent <= self.exponential_lower_exponent
            or exponent >= self.exponential_upper_exponent
        )


DEFAULT_CONFIG: Final[SigfigConfig] = SigfigConfig()
