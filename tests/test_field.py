"""
Tests for the amount-field helpers.
"""

import pytest

from exprcalc.field import (
    clean_expression,
    contains_math_operators,
    evaluate_field,
    format_result,
)


class TestContainsMathOperators:
    """Deciding whether a field value is an expression."""

    @pytest.mark.parametrize("value", ["2*3", "10/2", "50%", "(1)", "1+1", "10-2", "1 - -2", "+12"])
    def test_expressions(self, value):
        assert contains_math_operators(value)

    @pytest.mark.parametrize("value", ["", "12", "-12", "1.5", "--5"])
    def test_plain_amounts(self, value):
        assert not contains_math_operators(value)

    def test_prefix_ignored(self):
        assert not contains_math_operators("+$12", prefix="+$")
        assert contains_math_operators("$12+3", prefix="$")

    def test_suffix_ignored(self):
        assert not contains_math_operators("12 %", suffix=" %")
        assert contains_math_operators("12*2 %", suffix=" %")


class TestCleanExpression:
    """Normalizing a field value for the evaluator."""

    def test_strips_affixes(self):
        assert clean_expression("$10 + 5", prefix="$") == "10 + 5"
        assert clean_expression("10 + 5 EUR", suffix=" EUR") == "10 + 5"

    def test_removes_group_separator(self):
        assert clean_expression("1,000 * 2", group_separator=",") == "1000 * 2"

    def test_replaces_decimal_separator(self):
        assert clean_expression(
            "1.234,5 + 0,5", group_separator=".", decimal_separator=","
        ) == "1234.5 + 0.5"

    def test_trims(self):
        assert clean_expression("  1+1  ") == "1+1"

    def test_only_first_prefix_removed(self):
        assert clean_expression("$1 + $2", prefix="$") == "1 + $2"


class TestFormatResult:
    """Display formatting."""

    def test_integral(self):
        assert format_result(50.0) == "50"

    def test_fraction(self):
        assert format_result(0.5) == "0.5"

    def test_decimal_separator(self):
        assert format_result(1234.5, decimal_separator=",") == "1234,5"

    def test_negative(self):
        assert format_result(-2.25) == "-2.25"

    def test_small_value_positional(self):
        assert format_result(1e-7) == "0.0000001"

    def test_large_value_positional(self):
        assert format_result(1e21) == "1000000000000000000000"

    def test_shortest_digits(self):
        assert format_result(0.1 + 0.2) == "0.30000000000000004"

    def test_negative_zero(self):
        assert format_result(-0.0) == "0"


class TestEvaluateField:
    """End-to-end field evaluation."""

    def test_dollar_expression(self):
        assert evaluate_field("$100 * 50%", prefix="$") == "50"

    def test_grouped_expression(self):
        assert evaluate_field("$1,000 + 250", prefix="$", group_separator=",") == "1250"

    def test_european_field(self, eur_field):
        assert evaluate_field("1.000,5 * 2 €", **eur_field) == "2001"
        assert evaluate_field("10,5 + 1 €", **eur_field) == "11,5"

    def test_plain_amount_not_evaluated(self):
        assert evaluate_field("$-12", prefix="$") is None

    def test_invalid_expression_reverts(self):
        assert evaluate_field("$5 / 0", prefix="$") is None
        assert evaluate_field("(1 + 2", prefix="$") is None

    def test_small_result_is_not_an_expression(self):
        display = evaluate_field("0.0000001 * 1")
        assert display == "0.0000001"
        assert not contains_math_operators(display)
        assert evaluate_field(display) is None

    def test_unstripped_currency_symbol_is_invalid(self):
        assert evaluate_field("10 + 5 USD") is None
