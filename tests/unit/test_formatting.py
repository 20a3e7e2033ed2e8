"""
Тесты для публичных функций форматирования

Проверяет:
1. round (порог по умолчанию и пользовательский)
2. truncate
3. to_digits_after_decimal / to_fixed
4. percentage (опции, знак, деление на ноль)
"""

import pytest

from src.sigfig.domain.precision import PercentageOptions
from src.sigfig.errors import DivisionByZero, InvalidArgument, InvalidInput
from src.sigfig.math.formatting import (
    percentage,
    round,
    to_digits_after_decimal,
    to_fixed,
    truncate,
)

# =============================================================================
# ROUND / TRUNCATE
# =============================================================================


class TestRound:
    """round(value, sigfigs, threshold=5)"""

    def test_default_threshold(self) -> None:
        assert round(123.456, 3) == "123"
        assert round(123.456, 4) == "123.5"
        assert round(0.001234, 2) == "0.0012"
        assert round(1234.5, 2) == "1.2e+3"
        assert round(3.14159, 4) == "3.142"

    def test_custom_threshold(self) -> None:
        assert round(123.456, 3, 3) == "124"
        assert round(123.256, 3, 3) == "123"
        assert round(3.14959, 3, 9) == "3.15"

    def test_negative(self) -> None:
        assert round(-123.456, 3) == "-123"
        assert round(-123.456, 3, 3) == "-124"
        assert round(-0.001234, 2) == "-0.0012"

    def test_text_inputs(self) -> None:
        assert round("123.456", 3) == "123"
        assert round("123.456", 3, 3) == "124"

    def test_zero(self) -> None:
        assert round(0, 3) == "0"
        assert round("0.0", 2) == "0"

    def test_round_vs_truncate(self) -> None:
        assert round(123.999, 3) == "124"
        assert truncate(123.999, 3) == "123"
        assert round(199.9, 2) == "2.0e+2"
        assert truncate(199.9, 2) == "1.9e+2"

    def test_invalid(self) -> None:
        with pytest.raises(InvalidInput):
            round("invalid", 3)
        with pytest.raises(
            InvalidArgument, match="Number of significant figures must be a positive integer"
        ):
            round(123, 0)
        with pytest.raises(
            InvalidArgument, match="Rounding threshold must be an integer between 0 and 9"
        ):
            round(123, 3, 10)
        with pytest.raises(
            InvalidArgument, match="Rounding threshold must be an integer between 0 and 9"
        ):
            round(123, 3, 3.5)


class TestTruncate:
    def test_truncate(self) -> None:
        assert truncate(123.456, 3) == "123"
        assert truncate(0.001234, 2) == "0.0012"
        assert truncate(1999, 2) == "1.9e+3"
        assert truncate(-123.999, 3) == "-123"
        assert truncate("0", 2) == "0"

    def test_invalid(self) -> None:
        with pytest.raises(
            InvalidArgument, match="Number of significant figures must be a positive integer"
        ):
            truncate(123, -1)


# =============================================================================
# FIXED DIGITS
# =============================================================================


class TestToDigitsAfterDecimal:
    """Ровно places цифр после точки"""

    def test_rounds(self) -> None:
        assert to_digits_after_decimal(3.14159, 2) == "3.14"
        assert to_digits_after_decimal(3.14159, 4) == "3.1416"
        assert to_digits_after_decimal(19.999, 2) == "20.00"
        assert to_digits_after_decimal(66.666, 1) == "66.7"
        assert to_digits_after_decimal(33.333, 1) == "33.3"

    def test_pads(self) -> None:
        assert to_digits_after_decimal(3.5, 5) == "3.50000"
        assert to_digits_after_decimal("1.2", 4) == "1.2000"
        assert to_digits_after_decimal(255.5, 5) == "255.50000"

    def test_zero_places(self) -> None:
        assert to_digits_after_decimal(3.14159, 0) == "3"
        assert to_digits_after_decimal(5.7, 0) == "6"
        assert to_digits_after_decimal(2.5, 0) == "3"

    def test_negative(self) -> None:
        assert to_digits_after_decimal(-3.14159, 2) == "-3.14"
        assert to_digits_after_decimal(-5, 3) == "-5.000"

    def test_zero(self) -> None:
        assert to_digits_after_decimal(0, 0) == "0"
        assert to_digits_after_decimal(0, 3) == "0.000"
        assert to_digits_after_decimal("0", 2) == "0.00"

    def test_small_numbers(self) -> None:
        assert to_digits_after_decimal(0.000123, 6) == "0.000123"
        assert to_digits_after_decimal(0.000123, 4) == "0.0001"
        assert to_digits_after_decimal(0.000123, 8) == "0.00012300"

    def test_fixed_alias(self) -> None:
        assert to_fixed is to_digits_after_decimal
        assert to_fixed(1000000, 3) == "1000000.000"

    def test_invalid(self) -> None:
        with pytest.raises(InvalidInput, match="Invalid input: value must be a valid number"):
            to_digits_after_decimal("invalid", 2)
        with pytest.raises(InvalidArgument, match="Digits must be a non-negative integer"):
            to_digits_after_decimal(3.14, -1)
        with pytest.raises(InvalidArgument, match="Digits must be a non-negative integer"):
            to_digits_after_decimal(3.14, 2.5)


# =============================================================================
# PERCENTAGE
# =============================================================================


class TestPercentage:
    """part / whole * 100 со значащими цифрами"""

    def test_default_precision(self) -> None:
        assert percentage("25", "100.0") == "25%"
        assert percentage("1.0", "3.0") == "33%"
        assert percentage("2.0", "3.0") == "67%"
        assert percentage("25.0", "100.0") == "25.0%"

    def test_int_option(self) -> None:
        assert percentage(1, 3, 2) == "33%"
        assert percentage(1, 3, 4) == "33.33%"

    def test_negative(self) -> None:
        assert percentage("-25", "100.0") == "-25%"
        assert percentage("25", "-100.0") == "-25%"

    def test_without_percent_sign(self) -> None:
        assert percentage(25, 100, {"append_percent": False}) == "3e+1"
        assert percentage(1, 3, {"sigfigs": 4, "append_percent": False}) == "33.33"

    def test_model_options(self) -> None:
        options = PercentageOptions(sigfigs=3)
        assert percentage(1, 8, options) == "12.5%"

    def test_precision_beyond_working_digits(self) -> None:
        assert percentage(1, 3, 70) == "33." + "3" * 68 + "%"

    def test_division_by_zero(self) -> None:
        with pytest.raises(DivisionByZero, match="Division by zero: whole value cannot be zero"):
            percentage(25, 0)
        with pytest.raises(ZeroDivisionError):
            percentage(25, "0.0")

    def test_invalid_values(self) -> None:
        with pytest.raises(InvalidInput):
            percentage("invalid", 100)
        with pytest.raises(InvalidInput):
            percentage(25, "invalid")

    def test_invalid_options(self) -> None:
        with pytest.raises(InvalidArgument):
            percentage(1, 3, 0)
        with pytest.raises(InvalidArgument):
            percentage(1, 3, {"sigfigs": 0})
        with pytest.raises(InvalidArgument):
            percentage(1, 3, {"precision": 2})
        with pytest.raises(InvalidArgument):
            percentage(1, 3, "2")
        with pytest.raises(InvalidArgument):
            percentage(1, 3, True)

    def test_options_checked_before_values(self) -> None:
        with pytest.raises(InvalidArgument):
            percentage("invalid", 0, 0)
