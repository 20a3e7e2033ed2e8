"""
Decimal Backend — Узкий интерфейс к арифметике произвольной точности

Движок не работает с decimal напрямую: все точные операции и строковые
раскладки проходят через DecimalBackend.

Контракт:
- parse: точный Decimal из канонической записи
- add/sub/mul: точный результат (точность контекста подбирается по операндам)
- div/sqrt: working_precision значащих цифр, либо запрошенная точность
  плюс extra_precision_digits, если она больше
- mod/floor_div: точный остаток и частное с округлением к -inf
- power: целый показатель (отрицательный: как div)
- compare/sign
- to_fixed / to_precision / to_exponential: строковый вывод с ROUND_HALF_UP

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Глобальный decimal-контекст не изменяется: каждая операция работает
   в копии шаблона (localcontext)
2. Отрицательный ноль в выводе не появляется
3. Все операции детерминированы
"""

from contextlib import contextmanager
from decimal import (
    MAX_EMAX,
    MIN_EMIN,
    ROUND_HALF_UP,
    Context,
    Decimal,
    DivisionByZero,
    InvalidOperation,
    Overflow,
    localcontext,
)
from typing import Final, Iterator, Optional, Tuple

from src.sigfig.config import DEFAULT_CONFIG, SigfigConfig
from src.sigfig.domain.decimal_text import layout_digits

# Верхняя граница цифр для точного целочисленного возведения в степень
EXACT_POWER_DIGIT_LIMIT: Final[int] = 10_000

ONE: Final[Decimal] = Decimal(1)


def _digit_count(value: Decimal) -> int:
    return len(value.as_tuple().digits)


class DecimalBackend:
    """
    Арифметика и форматирование поверх стандартного decimal.

    Экземпляр неизменяем; шаблон контекста копируется на каждый вызов.
    """

    def __init__(self, config: SigfigConfig = DEFAULT_CONFIG):
        self._config = config
        self._template = Context(
            prec=config.working_precision,
            rounding=ROUND_HALF_UP,
            Emax=MAX_EMAX,
            Emin=MIN_EMIN,
            traps=[InvalidOperation, DivisionByZero, Overflow],
        )

    @property
    def config(self) -> SigfigConfig:
        return self._config

    @contextmanager
    def _context(self, precision: Optional[int] = None) -> Iterator[Context]:
        ctx = self._template.copy()
        if precision is not None and precision > ctx.prec:
            ctx.prec = precision
        with localcontext(ctx) as local:
            yield local

    # =========================================================================
    # АРИФМЕТИКА
    # =========================================================================

    def parse(self, text: str) -> Decimal:
        return Decimal(text)

    def add(self, a: Decimal, b: Decimal) -> Decimal:
        """Точная сумма."""
        top = max(a.adjusted(), b.adjusted()) + 2
        bottom = min(a.as_tuple().exponent, b.as_tuple().exponent)
        with self._context(top - bottom):
            return a + b

    def sub(self, a: Decimal, b: Decimal) -> Decimal:
        """Точная разность."""
        return self.add(a, b.copy_negate())

    def mul(self, a: Decimal, b: Decimal) -> Decimal:
        """Точное произведение."""
        with self._context(_digit_count(a) + _digit_count(b)):
            return a * b

    def _inexact_precision(self, sigfigs: Optional[int]) -> Optional[int]:
        # Запас цифр под последующее округление до sigfigs
        if sigfigs is None:
            return None
        return sigfigs + self._config.extra_precision_digits

    def div(self, a: Decimal, b: Decimal, sigfigs: Optional[int] = None) -> Decimal:
        """
        Частное с working_precision значащими цифрами (b != 0 проверяет вызывающий).

        Args:
            sigfigs: Точность, до которой результат будет округлён; при
                sigfigs + extra_precision_digits > working_precision
                контекст расширяется
        """
        with self._context(self._inexact_precision(sigfigs)):
            return a / b

    def mod(self, a: Decimal, b: Decimal) -> Decimal:
        """Точный остаток со знаком делимого. b != 0 проверяет вызывающий."""
        with self._context(self._quotient_precision(a, b)):
            return a % b

    def floor_div(self, a: Decimal, b: Decimal) -> Decimal:
        """Точное частное с округлением к минус бесконечности."""
        with self._context(self._quotient_precision(a, b)):
            quotient, remainder = divmod(a, b)
            # divmod усекает к нулю: при разных знаках сдвигаемся вниз
            if remainder and (remainder < 0) != (b < 0):
                quotient -= 1
            return quotient

    def power(self, base: Decimal, exponent: int, sigfigs: Optional[int] = None) -> Decimal:
        """
        Возведение в целую степень.

        Для положительных показателей точность контекста покрывает все цифры
        результата (до EXACT_POWER_DIGIT_LIMIT). Отрицательный показатель
        считается с точностью div.

        Raises:
            decimal.Overflow: Если результат вне диапазона показателей
            decimal.DivisionByZero: Для 0 ** отрицательное
        """
        digits = min(_digit_count(base) * max(exponent, 1), EXACT_POWER_DIGIT_LIMIT)
        requested = self._inexact_precision(sigfigs)
        if requested is not None:
            digits = max(digits, requested)
        with self._context(digits):
            return base**exponent

    def sqrt(self, value: Decimal, sigfigs: Optional[int] = None) -> Decimal:
        """Квадратный корень (value >= 0 проверяет вызывающий), точность как у div."""
        with self._context(self._inexact_precision(sigfigs)):
            return value.sqrt()

    def compare(self, a: Decimal, b: Decimal) -> int:
        """-1, 0 или 1. Сравнение точное."""
        return (a > b) - (a < b)

    def is_integral(self, value: Decimal) -> bool:
        return value == value.to_integral_value()

    def _quotient_precision(self, a: Decimal, b: Decimal) -> int:
        # Частное должно уместиться целиком, иначе DivisionImpossible
        span = a.adjusted() - b.adjusted() + 2
        return max(span, _digit_count(a), _digit_count(b)) + 2

    # =========================================================================
    # ОКРУГЛЕНИЕ И ВЫВОД
    # =========================================================================

    def round_significant(
        self, value: Decimal, sigfigs: int, rounding: str = ROUND_HALF_UP
    ) -> Decimal:
        """
        Округление до sigfigs значащих цифр.

        Результат всегда имеет ровно sigfigs цифр коэффициента; перенос
        (9.99 → 10.0) переводит квант на следующий разряд.
        """
        with self._context(sigfigs + 2):
            exponent = value.adjusted()
            rounded = value.quantize(ONE.scaleb(exponent - sigfigs + 1), rounding=rounding)
            if rounded.adjusted() != exponent:
                rounded = rounded.quantize(ONE.scaleb(rounded.adjusted() - sigfigs + 1))
            return rounded

    def significant_digits(self, value: Decimal) -> Tuple[str, int]:
        """Цифры коэффициента и показатель старшей цифры."""
        digits = "".join(str(d) for d in value.as_tuple().digits)
        return digits, value.adjusted()

    def to_precision(
        self, value: Decimal, sigfigs: int, rounding: str = ROUND_HALF_UP
    ) -> str:
        """
        Запись с ровно sigfigs значащими цифрами.

        Экспоненциальная запись выбирается, если sigfigs <= показателя
        старшей цифры или показатель вне полосы фиксированной записи.

        Examples:
            >>> DecimalBackend().to_precision(Decimal("123.456"), 4)
            '123.5'
            >>> DecimalBackend().to_precision(Decimal("99.9"), 2)
            '1.0e+2'
        """
        if value.is_zero():
            digits, exponent, negative = "0" * sigfigs, 0, False
        else:
            rounded = self.round_significant(value, sigfigs, rounding)
            digits, exponent = self.significant_digits(rounded)
            negative = rounded.is_signed()

        exponential = self._config.uses_exponential(sigfigs, exponent)
        return layout_digits(digits, exponent, exponential, negative)

    def to_exponential(self, value: Decimal, fraction_digits: int) -> str:
        """Экспоненциальная запись D.DDDe±N с fraction_digits цифрами после точки."""
        sigfigs = fraction_digits + 1
        if value.is_zero():
            return layout_digits("0" * sigfigs, 0, True)

        rounded = self.round_significant(value, sigfigs)
        digits, exponent = self.significant_digits(rounded)
        return layout_digits(digits, exponent, True, rounded.is_signed())

    def to_fixed(self, value: Decimal, places: int) -> str:
        """
        Фиксированная запись с ровно places цифрами после точки (ROUND_HALF_UP).

        Examples:
            >>> DecimalBackend().to_fixed(Decimal("5"), 3)
            '5.000'
            >>> DecimalBackend().to_fixed(Decimal("2.5"), 0)
            '3'
        """
        with self._context(max(value.adjusted(), 0) + places + 2):
            fixed = value.quantize(ONE.scaleb(-places), rounding=ROUND_HALF_UP)
        if fixed.is_zero():
            # -0.001 → "0.00"
            fixed = fixed.copy_abs()
        return format(fixed, "f")


DEFAULT_BACKEND: Final[DecimalBackend] = DecimalBackend()


def backend_for(config: Optional[SigfigConfig]) -> DecimalBackend:
    """Backend для конфигурации (DEFAULT_BACKEND для None/DEFAULT_CONFIG)."""
    if config is None or config == DEFAULT_CONFIG:
        return DEFAULT_BACKEND
    return DecimalBackend(config)
