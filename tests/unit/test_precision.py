"""
Тесты для Precision Resolver и моделей точности

Проверяет:
1. decimal_places_for_add_sub (минимум разрядов, короткое замыкание на 0)
2. sigfigs_for_mul_div (минимум значащих цифр, пустой вход)
3. resolve_precision / apply_precision
4. Pydantic модели DecimalPlaces, Sigfigs, PercentageOptions
"""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from src.sigfig.domain.precision import (
    DecimalPlaces,
    PercentageOptions,
    PrecisionKind,
    Sigfigs,
)
from src.sigfig.errors import InvalidArgument, InvalidInput
from src.sigfig.math.precision import (
    apply_precision,
    decimal_places_for_add_sub,
    resolve_precision,
    sigfigs_for_mul_div,
)


class TestDecimalPlacesForAddSub:
    """Разряды наименее точного операнда"""

    def test_least_precise_operand(self) -> None:
        assert decimal_places_for_add_sub([1.23, 4.5]) == 1
        assert decimal_places_for_add_sub([1.234, 2.56]) == 2

    def test_whole_number_limits_precision(self) -> None:
        assert decimal_places_for_add_sub([123, 4.5]) == 0
        assert decimal_places_for_add_sub([100, 200]) == 0
        assert decimal_places_for_add_sub([100, 200.5]) == 0

    def test_mixed_inputs(self) -> None:
        assert decimal_places_for_add_sub(["1.23", "4.5"]) == 1
        assert decimal_places_for_add_sub(["1.234", 2.56]) == 2
        assert decimal_places_for_add_sub(["1.500", Decimal("2.25")]) == 2

    def test_many_operands(self) -> None:
        assert decimal_places_for_add_sub([1.234, 2.56, 3.7]) == 1
        assert decimal_places_for_add_sub([1.2345, 2.345, 3.45, 4.5]) == 1

    def test_empty(self) -> None:
        assert decimal_places_for_add_sub([]) == 0

    def test_short_circuit_skips_later_operands(self) -> None:
        """После операнда без дробной части остальные не разбираются"""
        assert decimal_places_for_add_sub([5, "invalid"]) == 0

    def test_invalid_operand(self) -> None:
        with pytest.raises(InvalidInput):
            decimal_places_for_add_sub([1.5, "invalid"])


class TestSigfigsForMulDiv:
    """Минимум значащих цифр"""

    def test_minimum(self) -> None:
        assert sigfigs_for_mul_div([1.23, 4.5]) == 2
        assert sigfigs_for_mul_div([1.234, 2.56, 7.8]) == 2
        assert sigfigs_for_mul_div([1.234, 2.56, 7.8, 9]) == 1
        assert sigfigs_for_mul_div([123.45, 67.89, 12.3]) == 3

    def test_whole_numbers(self) -> None:
        assert sigfigs_for_mul_div([100, 200]) == 1
        assert sigfigs_for_mul_div([150, 250]) == 2

    def test_text_inputs(self) -> None:
        assert sigfigs_for_mul_div(["1.23", "4.5"]) == 2
        assert sigfigs_for_mul_div(["100", "200"]) == 1
        assert sigfigs_for_mul_div(["1.0", "2.00"]) == 2

    def test_exponential(self) -> None:
        assert sigfigs_for_mul_div(["1.23e4", "4.5"]) == 2
        assert sigfigs_for_mul_div(["1.230e-4", "2.0"]) == 2

    def test_single_value(self) -> None:
        assert sigfigs_for_mul_div(("12.50",)) == 4

    def test_empty_rejected(self) -> None:
        with pytest.raises(InvalidArgument):
            sigfigs_for_mul_div([])


class TestResolvePrecision:
    """Спецификация точности по виду операции"""

    def test_add_sub_default(self) -> None:
        spec = resolve_precision(PrecisionKind.ADD_SUB, ["1.23", "4.5"])
        assert spec == DecimalPlaces(places=1)

    def test_mul_div_default(self) -> None:
        spec = resolve_precision(PrecisionKind.MUL_DIV, ["1.23", "4.5"])
        assert spec == Sigfigs(count=2)

    def test_override_always_sigfigs(self) -> None:
        assert resolve_precision(PrecisionKind.ADD_SUB, [1, 2], 4) == Sigfigs(count=4)
        assert resolve_precision(PrecisionKind.MUL_DIV, [1, 2], 4) == Sigfigs(count=4)


class TestApplyPrecision:
    def test_decimal_places(self) -> None:
        assert apply_precision(Decimal("5.73"), DecimalPlaces(places=1)) == "5.7"
        assert apply_precision(Decimal("0"), DecimalPlaces(places=2)) == "0.00"

    def test_sigfigs(self) -> None:
        assert apply_precision(Decimal("250"), Sigfigs(count=1)) == "3e+2"
        assert apply_precision(Decimal("0"), Sigfigs(count=3)) == "0"


class TestPrecisionModels:
    """Pydantic модели точности"""

    def test_decimal_places_bounds(self) -> None:
        assert DecimalPlaces(places=0).places == 0
        with pytest.raises(ValidationError):
            DecimalPlaces(places=-1)

    def test_sigfigs_bounds(self) -> None:
        with pytest.raises(ValidationError):
            Sigfigs(count=0)

    def test_strict_int(self) -> None:
        """Строгие целые: 2.0 и '2' не принимаются"""
        with pytest.raises(ValidationError):
            Sigfigs(count=2.0)
        with pytest.raises(ValidationError):
            DecimalPlaces(places="2")

    def test_frozen(self) -> None:
        spec = Sigfigs(count=3)
        with pytest.raises(ValidationError):
            spec.count = 4

    def test_percentage_options_defaults(self) -> None:
        options = PercentageOptions()
        assert options.sigfigs is None
        assert options.append_percent is True

    def test_percentage_options_validation(self) -> None:
        with pytest.raises(ValidationError):
            PercentageOptions(sigfigs=0)
        with pytest.raises(ValidationError):
            PercentageOptions(append_percent="yes")
        with pytest.raises(ValidationError):
            PercentageOptions(unknown=True)
