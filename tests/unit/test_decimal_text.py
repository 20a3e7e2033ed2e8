"""
Тесты для нормализации входных значений (DecimalInput → Operand)

Проверяет:
1. Рендеринг нативных чисел (int точно, float кратчайшими цифрами)
2. Выбор фиксированной/экспоненциальной раскладки
3. Разбор текста, Decimal и отказ на прочих типах
4. Immutability Operand
"""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from src.sigfig.domain.decimal_text import (
    DECIMAL_TEXT_RE,
    InputSource,
    Operand,
    layout_digits,
    native_to_text,
    parse_operand,
    try_parse_operand,
)
from src.sigfig.errors import InvalidInput, SigfigErrorKind

# =============================================================================
# LAYOUT
# =============================================================================


class TestLayoutDigits:
    """Раскладка последовательности цифр"""

    def test_fixed_integer(self) -> None:
        assert layout_digits("123", 2, False) == "123"
        assert layout_digits("12", 3, False) == "1200"

    def test_fixed_fraction(self) -> None:
        assert layout_digits("12345", 2, False) == "123.45"
        assert layout_digits("10", 0, False) == "1.0"

    def test_fixed_below_one(self) -> None:
        assert layout_digits("12", -3, False) == "0.0012"
        assert layout_digits("5", -1, False) == "0.5"

    def test_exponential(self) -> None:
        assert layout_digits("12", 3, True) == "1.2e+3"
        assert layout_digits("1", -7, True) == "1e-7"
        assert layout_digits("100", 0, True) == "1.00e+0"

    def test_negative(self) -> None:
        assert layout_digits("12", -3, False, negative=True) == "-0.0012"
        assert layout_digits("99", 4, True, negative=True) == "-9.9e+4"


# =============================================================================
# NATIVE RENDERING
# =============================================================================


class TestNativeToText:
    """Кратчайшая запись нативных чисел"""

    def test_int_exact(self) -> None:
        assert native_to_text(123) == "123"
        assert native_to_text(-45) == "-45"
        assert native_to_text(10**30) == "1" + "0" * 30

    def test_integral_float_has_no_fraction(self) -> None:
        assert native_to_text(1.0) == "1"
        assert native_to_text(250.0) == "250"

    def test_shortest_round_trip_digits(self) -> None:
        assert native_to_text(0.1) == "0.1"
        assert native_to_text(3.14159) == "3.14159"
        assert native_to_text(-2.5) == "-2.5"

    def test_fixed_band(self) -> None:
        """Показатель в (-7, 21) — фиксированная запись"""
        assert native_to_text(1e20) == "100000000000000000000"
        assert native_to_text(0.000001) == "0.000001"
        assert native_to_text(1.5e-6) == "0.0000015"

    def test_exponential_outside_band(self) -> None:
        assert native_to_text(1e21) == "1e+21"
        assert native_to_text(1.5e22) == "1.5e+22"
        assert native_to_text(1e-7) == "1e-7"
        assert native_to_text(-2.5e-9) == "-2.5e-9"

    def test_zero(self) -> None:
        assert native_to_text(0.0) == "0"
        assert native_to_text(-0.0) == "0"
        assert native_to_text(0) == "0"

    def test_non_finite_rejected(self) -> None:
        for value in (float("nan"), float("inf"), float("-inf")):
            with pytest.raises(InvalidInput):
                native_to_text(value)


# =============================================================================
# PARSE OPERAND
# =============================================================================


class TestParseOperand:
    """Приведение к Operand"""

    def test_text_is_stripped_and_kept(self) -> None:
        operand = parse_operand("  1.50 ")
        assert operand.text == "1.50"
        assert operand.source is InputSource.TEXT
        assert operand.value == Decimal("1.50")
        assert operand.preserves_trailing_zeros

    def test_text_forms(self) -> None:
        assert parse_operand("+5").value == Decimal(5)
        assert parse_operand(".5").value == Decimal("0.5")
        assert parse_operand("5.").value == Decimal(5)
        assert parse_operand("1.2E-3").value == Decimal("0.0012")

    def test_native_float(self) -> None:
        operand = parse_operand(1.50)
        assert operand.text == "1.5"
        assert operand.source is InputSource.NATIVE
        assert not operand.preserves_trailing_zeros

    def test_native_int(self) -> None:
        operand = parse_operand(1200)
        assert operand.text == "1200"
        assert operand.value == Decimal(1200)

    def test_decimal_keeps_exponent(self) -> None:
        operand = parse_operand(Decimal("2.500"))
        assert operand.text == "2.500"
        assert operand.source is InputSource.DECIMAL
        assert operand.preserves_trailing_zeros

    def test_operand_passes_through(self) -> None:
        operand = parse_operand("3.0")
        assert parse_operand(operand) is operand

    def test_is_zero(self) -> None:
        assert parse_operand("0.000").is_zero
        assert parse_operand(-0.0).is_zero
        assert not parse_operand("0.001").is_zero

    def test_bool_rejected(self) -> None:
        """bool — не число, хотя и подкласс int"""
        with pytest.raises(InvalidInput):
            parse_operand(True)
        with pytest.raises(InvalidInput):
            parse_operand(False)

    def test_other_types_rejected(self) -> None:
        for value in (None, object(), [1, 2], {"value": 1}, b"12"):
            with pytest.raises(InvalidInput) as exc_info:
                parse_operand(value)
            assert exc_info.value.kind is SigfigErrorKind.INVALID_INPUT

    def test_non_finite_decimal_rejected(self) -> None:
        with pytest.raises(InvalidInput):
            parse_operand(Decimal("Infinity"))
        with pytest.raises(InvalidInput):
            parse_operand(Decimal("sNaN"))

    def test_text_pattern_is_ascii_only(self) -> None:
        """Локализованные цифры и разделители не принимаются"""
        assert DECIMAL_TEXT_RE.match("1.5e10")
        assert not DECIMAL_TEXT_RE.match("１２")
        assert not DECIMAL_TEXT_RE.match("1 000")
        assert not DECIMAL_TEXT_RE.match("Infinity")


class TestTryParseOperand:
    """None вместо исключения"""

    def test_valid(self) -> None:
        operand = try_parse_operand("2.0")
        assert operand is not None
        assert operand.text == "2.0"

    def test_invalid(self) -> None:
        assert try_parse_operand("bad") is None
        assert try_parse_operand(None) is None
        assert try_parse_operand(float("nan")) is None


class TestOperandModel:
    """Operand — immutable pydantic модель"""

    def test_frozen(self) -> None:
        operand = parse_operand("1.0")
        with pytest.raises(ValidationError):
            operand.text = "2.0"

    def test_empty_text_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Operand(text="", source=InputSource.TEXT, value=Decimal(0))
