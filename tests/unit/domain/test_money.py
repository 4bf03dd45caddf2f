"""Tests for the Money value object."""
from decimal import Decimal

import pytest

from core.domain.value_objects import Money, ShippingAddress


class TestMoney:
    """Fixed-point arithmetic used for order totals."""

    def test_amount_is_quantized_to_cents(self):
        assert Money(Decimal("10.005")).amount == Decimal("10.01")
        assert Money("2.5").amount == Decimal("2.50")

    def test_float_input_does_not_leak_binary_error(self):
        assert Money(0.1) + Money(0.2) == Money(Decimal("0.30"))

    def test_addition_is_order_independent(self):
        prices = [Money("10.00"), Money("5.00"), Money("0.33"), Money("19.99")]
        forward = Money.zero()
        for price in prices:
            forward = forward + price
        backward = Money.zero()
        for price in reversed(prices):
            backward = backward + price
        assert forward == backward == Money(Decimal("35.32"))

    def test_multiply_by_quantity(self):
        assert Money("10.00") * 2 == Money("20.00")

    def test_multiply_rejects_non_integers(self):
        with pytest.raises(TypeError):
            Money("10.00") * 1.5
        with pytest.raises(TypeError):
            Money("10.00") * True

    def test_add_different_currencies_fails(self):
        with pytest.raises(ValueError, match="different currencies"):
            Money("1.00", "USD") + Money("1.00", "EUR")

    def test_invalid_currency_code(self):
        with pytest.raises(ValueError):
            Money("1.00", "US")

    def test_zero(self):
        zero = Money.zero("EUR")
        assert zero.is_zero()
        assert zero.currency == "EUR"
        assert str(zero) == "0.00 EUR"


class TestShippingAddress:

    def test_address2_is_optional(self):
        address = ShippingAddress(address1="Main St 1", city="Prague", zip="11000", country="CZ")
        assert address.address2 is None

    @pytest.mark.parametrize("field", ["address1", "city", "zip", "country"])
    def test_required_fields(self, field):
        values = dict(address1="Main St 1", city="Prague", zip="11000", country="CZ")
        values[field] = "  "
        with pytest.raises(ValueError, match=field):
            ShippingAddress(**values)
