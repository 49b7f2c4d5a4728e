"""Unit tests for display formatting."""

import pytest

from pocketcalc import Operator, format_number, operator_symbol


class TestFormatNumber:
    def test_removes_float_noise(self):
        assert format_number(0.1 + 0.2) == "0.3"

    def test_integral_float_has_no_fraction(self):
        assert format_number(8.0) == "8"

    def test_negative_zero(self):
        assert format_number(-0.0) == "0"

    def test_tiny_quotient_keeps_its_value(self):
        assert format_number(1 / 3e12) == "3.33333333333e-13"

    def test_keeps_twelve_significant_digits(self):
        assert format_number(1 / 3) == "0.333333333333"
        assert format_number(2000 / 3) == "666.666666667"

    def test_rounds_long_integers_to_twelve_digits(self):
        assert format_number(123456789012345.0) == "123456789012000"

    def test_small_fraction_is_positional(self):
        assert format_number(1 / 100000) == "0.00001"
        assert format_number(-1.5e-7) == "-0.00000015"

    def test_below_positional_range_keeps_exponent(self):
        assert format_number(1e-8) == "1e-08"

    def test_negative_fraction(self):
        assert format_number(-2.5) == "-2.5"

    def test_large_integral_value_is_positional(self):
        assert format_number(1e20) == "100000000000000000000"

    def test_above_positional_range_keeps_exponent(self):
        assert format_number(1e21) == "1e+21"

    def test_custom_digits(self):
        assert format_number(200 / 3, digits=4) == "66.67"
        assert format_number(2 / 3, digits=4) == "0.6667"

    def test_results_print_back_to_themselves(self, interesting_results):
        for value in interesting_results:
            text = format_number(value)
            assert format_number(float(text)) == text


class TestOperatorSymbol:
    @pytest.mark.parametrize(
        ("operator", "symbol"),
        [
            (Operator.ADD, "+"),
            (Operator.SUBTRACT, "−"),
            (Operator.MULTIPLY, "×"),
            (Operator.DIVIDE, "÷"),
            (Operator.POWER, "^"),
        ],
    )
    def test_symbols(self, operator, symbol):
        assert operator_symbol(operator) == symbol

    def test_subtract_is_not_a_hyphen(self):
        assert operator_symbol(Operator.SUBTRACT) != "-"
