"""Tests for the Order aggregate and its status rules."""
from datetime import datetime, timedelta, timezone

import pytest

from core.domain.entities import Order, OrderItem
from core.domain.exceptions import ValidationError
from core.domain.value_objects import (
    ALLOWED_TRANSITIONS,
    Money,
    OrderStatus,
    ShippingAddress,
    can_transition,
)


def _shipping():
    return ShippingAddress(address1="Flowers Street, 45", city="Prague", zip="00000", country="CZ")


def _place(priced_items, status="Pending", **kwargs):
    return Order.place(
        user_id="u1",
        priced_items=priced_items,
        shipping=_shipping(),
        phone="+420702241333",
        status=status,
        currency="USD",
        **kwargs,
    )


class TestOrderItem:

    @pytest.mark.parametrize("quantity", [0, -1, 1.5, "2", True])
    def test_rejects_non_positive_or_non_integer_quantity(self, quantity):
        with pytest.raises(ValidationError):
            OrderItem(product_id="p1", quantity=quantity)

    def test_requires_product(self):
        with pytest.raises(ValidationError):
            OrderItem(product_id="", quantity=1)

    def test_extended_price(self):
        item = OrderItem(product_id="p1", quantity=3)
        assert item.extended_price(Money("2.50")) == Money("7.50")

    def test_ids_are_unique(self):
        assert OrderItem("p1", 1).id != OrderItem("p1", 1).id


class TestOrderPlacement:

    def test_total_is_sum_of_extended_prices(self):
        a = OrderItem(product_id="A", quantity=2)
        b = OrderItem(product_id="B", quantity=1)
        order = _place([(a, Money("10.00")), (b, Money("5.00"))])

        assert order.total_price == Money("25.00")
        assert order.item_ids == [a.id, b.id]

    def test_same_product_on_two_lines(self):
        first = OrderItem(product_id="A", quantity=1)
        second = OrderItem(product_id="A", quantity=1)
        order = _place([(first, Money("10.00")), (second, Money("10.00"))])

        assert order.total_price == Money("20.00")
        assert len(order.items) == 2

    def test_empty_order_is_rejected(self):
        with pytest.raises(ValidationError, match="at least one item"):
            _place([])

    def test_currency_mismatch_is_rejected(self):
        item = OrderItem(product_id="A", quantity=1)
        with pytest.raises(ValidationError, match="EUR"):
            _place([(item, Money("10.00", "EUR"))])

    def test_uses_given_date(self):
        when = datetime(2025, 1, 13, 10, 30, tzinfo=timezone.utc)
        order = _place([(OrderItem("A", 1), Money("1.00"))], date_ordered=when)
        assert order.date_ordered == when

    def test_offset_date_is_converted_to_utc(self):
        when = datetime(2025, 1, 13, 12, 30, tzinfo=timezone(timedelta(hours=2)))
        order = _place([(OrderItem("A", 1), Money("1.00"))], date_ordered=when)

        assert order.date_ordered.tzinfo == timezone.utc
        assert order.date_ordered.hour == 10
        assert order.date_ordered == when

    def test_blank_phone_is_rejected(self):
        with pytest.raises(ValidationError):
            Order(
                user_id="u1",
                shipping=_shipping(),
                phone=" ",
                total_price=Money("1.00"),
                items=[OrderItem("A", 1)],
            )


class TestStatusChanges:

    def _order(self, status="Pending"):
        return _place([(OrderItem("A", 1), Money("1.00"))], status=status)

    def test_permissive_accepts_any_label(self):
        order = self._order()
        previous = order.change_status("Waiting for courier")

        assert previous == "Pending"
        assert order.status == "Waiting for courier"

    def test_empty_status_is_rejected(self):
        with pytest.raises(ValidationError):
            self._order().change_status("")

    def test_strict_normalizes_label(self):
        order = self._order()
        order.change_status("shipped", strict=True)
        assert order.status == "Shipped"

    def test_strict_rejects_unknown_label(self):
        with pytest.raises(ValidationError, match="Unknown order status"):
            self._order().change_status("Teleported", strict=True)

    def test_strict_rejects_disallowed_transition(self):
        order = self._order()
        with pytest.raises(ValidationError, match="Cannot move order"):
            order.change_status("Delivered", strict=True)
        assert order.status == "Pending"

    def test_strict_rejects_unknown_current_label(self):
        order = self._order(status="Custom")
        with pytest.raises(ValidationError):
            order.change_status("Shipped", strict=True)


class TestTransitionTable:

    def test_every_status_has_an_entry(self):
        assert set(ALLOWED_TRANSITIONS) == set(OrderStatus)

    def test_terminal_statuses(self):
        assert not ALLOWED_TRANSITIONS[OrderStatus.DELIVERED]
        assert not ALLOWED_TRANSITIONS[OrderStatus.CANCELLED]

    def test_same_status_is_allowed(self):
        assert can_transition(OrderStatus.DELIVERED, OrderStatus.DELIVERED)

    def test_parse_is_case_insensitive(self):
        assert OrderStatus.parse(" cancelled ") is OrderStatus.CANCELLED
