"""Tests for Money value object."""
from decimal import Decimal

import pytest

from core.domain.errors import (
    CurrencyMismatchError,
    InvalidAmountError,
    InvalidFactorError,
    NegativeResultError,
)
from core.domain.value_objects import Money


class TestMoneyCreation:
    """Construction and rounding."""

    @pytest.mark.parametrize(
        "raw, expected",
        [
            (0, "0.00"),
            (10, "10.00"),
            (10.5, "10.50"),
            (999.99, "999.99"),
            ("1.005", "1.01"),
            (Decimal("2.345"), "2.35"),
            (Decimal("2.344"), "2.34"),
            (0.125, "0.13"),
        ],
    )
    def test_amount_is_rounded_to_cents(self, usd, raw, expected):
        assert Money.create(raw, usd).amount == Decimal(expected)

    def test_float_input_does_not_drift(self, usd):
        assert Money.create(0.1, usd).amount == Decimal("0.10")

    @pytest.mark.parametrize(
        "raw", [-0.01, -1, float("inf"), float("-inf"), float("nan"), "abc", None, True]
    )
    def test_invalid_amounts_are_rejected(self, usd, raw):
        with pytest.raises(InvalidAmountError):
            Money.create(raw, usd)

    def test_zero(self, usd):
        zero = Money.zero(usd)
        assert zero.is_zero()
        assert zero.currency == usd
        assert zero == Money.create(0, usd)

    def test_str(self, usd):
        assert str(Money.create(25.5, usd)) == "25.50 USD"

    @pytest.mark.parametrize("raw", [-0.0, Decimal("-0"), "-0.00"])
    def test_negative_zero_is_plain_zero(self, usd, raw):
        money = Money.create(raw, usd)

        assert not money.amount.is_signed()
        assert str(money) == "0.00 USD"

    @pytest.mark.parametrize(
        "raw, expected",
        [
            (1e26, "100000000000000000000000000.00"),
            ("123456789012345678901234567890.125", "123456789012345678901234567890.13"),
            (Decimal("1e40"), "1" + "0" * 40 + ".00"),
        ],
    )
    def test_very_large_amounts_are_valid(self, usd, raw, expected):
        assert Money.create(raw, usd).amount == Decimal(expected)


class TestMoneyArithmetic:
    """add / subtract / multiply."""

    def test_add(self, make_money):
        assert make_money(10).add(make_money(5.5)) == make_money(15.5)

    def test_add_operator(self, make_money):
        assert make_money("0.10") + make_money("0.20") == make_money("0.30")

    def test_add_different_currency_fails(self, make_money, eur):
        with pytest.raises(CurrencyMismatchError):
            make_money(10).add(make_money(1, eur))

    def test_subtract(self, make_money):
        assert make_money(10).subtract(make_money(2.5)) == make_money(7.5)

    def test_subtract_to_zero(self, make_money):
        assert make_money(10).subtract(make_money(10)).is_zero()

    def test_subtract_negative_result_fails(self, make_money):
        with pytest.raises(NegativeResultError):
            make_money(1).subtract(make_money(1.01))

    def test_subtract_different_currency_fails(self, make_money, eur):
        with pytest.raises(CurrencyMismatchError):
            make_money(10).subtract(make_money(1, eur))

    @pytest.mark.parametrize("a, b", [("10.00", "3.33"), ("0.01", "0.01"), ("1999.98", "0.99")])
    def test_add_then_subtract_is_identity(self, make_money, a, b):
        x, y = make_money(a), make_money(b)
        assert x.add(y).subtract(y) == x

    def test_multiply(self, make_money):
        assert make_money("999.99").multiply(2) == make_money("1999.98")

    def test_multiply_rounds_result(self, make_money):
        assert make_money("10.00").multiply(Decimal("0.333")).amount == Decimal("3.33")
        assert make_money("0.05").multiply(0.5).amount == Decimal("0.03")

    def test_multiply_by_zero(self, make_money):
        assert make_money(10).multiply(0).is_zero()

    @pytest.mark.parametrize("factor", [-1, float("inf"), float("nan"), "x", None])
    def test_invalid_factor_fails(self, make_money, factor):
        with pytest.raises(InvalidFactorError):
            make_money(10).multiply(factor)

    def test_large_sums_keep_every_digit(self, make_money):
        a = make_money(Decimal("6e25"))

        assert a.add(a).amount == Decimal("120000000000000000000000000.00")
        assert a.add(make_money("0.01")).amount == Decimal("60000000000000000000000000.01")

    def test_large_products_keep_every_digit(self, make_money):
        result = make_money("999999.00").multiply(Decimal("1e30"))
        assert result.amount == Decimal("999999000000000000000000000000000000.00")

    def test_large_difference_is_exact(self, make_money):
        big = make_money("100000000000000000000000000000.01")
        assert big.subtract(make_money("0.01")).amount == Decimal("100000000000000000000000000000.00")

    def test_accumulating_many_cents_is_exact(self, make_money, usd):
        total = Money.zero(usd)
        for _ in range(1000):
            total = total.add(make_money("0.10"))
        assert total.amount == Decimal("100.00")


class TestMoneyComparison:
    def test_greater_and_less(self, make_money):
        assert make_money(10).is_greater_than(make_money(5))
        assert make_money(5).is_less_than(make_money(10))
        assert not make_money(5).is_greater_than(make_money(5))

    def test_comparison_across_currencies_fails(self, make_money, eur):
        with pytest.raises(CurrencyMismatchError):
            make_money(10).is_greater_than(make_money(5, eur))
        with pytest.raises(CurrencyMismatchError):
            make_money(10).is_less_than(make_money(5, eur))

    def test_equality_compares_currency(self, make_money, eur):
        assert make_money(10) != make_money(10, eur)
        assert make_money(10) == make_money("10.00")
