"""Tests for the in-memory cart."""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from essence_orders.domain.cart import Cart, CartSnapshot
from essence_orders.domain.errors import InvalidQuantity, LineNotFound


def _make_cart():
    cart = Cart()
    cart.add_line("P1", "Noir Absolu", 2, Decimal("10.00"))
    return cart


class TestAddLine:
    def test_add_line_to_empty_cart(self):
        cart = _make_cart()
        assert len(cart.lines()) == 1
        assert cart.lines()[0].quantity == 2
        assert cart.total() == Decimal("20.00")

    def test_add_same_product_sums_quantity(self):
        twice = Cart()
        twice.add_line("P1", "Noir Absolu", 2, Decimal("10.00"))
        twice.add_line("P1", "Noir Absolu", 3, Decimal("10.00"))

        once = Cart()
        once.add_line("P1", "Noir Absolu", 5, Decimal("10.00"))

        assert twice.lines() == once.lines()
        assert twice.total() == once.total()

    def test_lines_keep_insertion_order(self):
        cart = _make_cart()
        cart.add_line("P3", "Ambre Royal", 1, Decimal("210.50"))
        cart.add_line("P2", "Fleur de Sel", 1, Decimal("15.00"))
        cart.add_line("P1", "Noir Absolu", 1, Decimal("10.00"))
        assert [line.product_id for line in cart.lines()] == ["P1", "P3", "P2"]

    def test_non_positive_quantity_rejected(self):
        cart = Cart()
        with pytest.raises(ValueError):
            cart.add_line("P1", "Noir Absolu", 0, Decimal("10.00"))
        assert cart.is_empty()

    def test_negative_price_rejected(self):
        with pytest.raises(ValidationError):
            Cart().add_line("P1", "Noir Absolu", 1, Decimal("-1"))


class TestSetQuantity:
    def test_set_quantity(self):
        cart = _make_cart()
        cart.set_quantity("P1", 5)
        assert cart.get_line("P1").quantity == 5
        assert cart.total() == Decimal("50.00")

    def test_set_quantity_on_missing_line(self):
        cart = _make_cart()
        with pytest.raises(LineNotFound):
            cart.set_quantity("P9", 1)

    @pytest.mark.parametrize("quantity", [0, -3])
    def test_set_non_positive_quantity_rejected(self, quantity):
        cart = _make_cart()
        with pytest.raises(InvalidQuantity):
            cart.set_quantity("P1", quantity)
        assert cart.get_line("P1").quantity == 2


class TestRemoveLine:
    def test_remove_line(self):
        cart = _make_cart()
        cart.remove_line("P1")
        assert cart.is_empty()
        assert cart.total() == 0

    def test_remove_missing_line_is_noop(self):
        cart = _make_cart()
        cart.remove_line("P9")
        assert len(cart.lines()) == 1


class TestTotal:
    def test_empty_cart_total_is_zero(self):
        assert Cart().total() == Decimal("0")

    def test_total_matches_lines_after_mixed_operations(self):
        cart = Cart()
        cart.add_line("P1", "Noir Absolu", 2, Decimal("10.00"))
        cart.add_line("P2", "Fleur de Sel", 1, Decimal("15.00"))
        cart.add_line("P3", "Ambre Royal", 1, Decimal("210.50"))
        cart.set_quantity("P2", 4)
        cart.remove_line("P3")
        cart.add_line("P1", "Noir Absolu", 1, Decimal("10.00"))

        expected = sum(line.quantity * line.unit_price for line in cart.lines())
        assert cart.total() == expected == Decimal("90.00")


class TestSnapshot:
    def test_restore_snapshot_is_identity(self):
        cart = _make_cart()
        cart.add_line("P2", "Fleur de Sel", 1, Decimal("15.00"))
        snapshot = cart.snapshot()

        restored = Cart()
        restored.restore(snapshot)
        assert restored.lines() == cart.lines()
        assert restored.snapshot() == snapshot

    def test_snapshot_not_affected_by_later_mutations(self):
        cart = _make_cart()
        snapshot = cart.snapshot()

        cart.set_quantity("P1", 7)
        cart.add_line("P2", "Fleur de Sel", 1, Decimal("15.00"))

        assert len(snapshot.lines) == 1
        assert snapshot.lines[0].quantity == 2

    def test_snapshot_is_frozen(self):
        snapshot = _make_cart().snapshot()
        with pytest.raises(ValidationError):
            snapshot.lines[0].quantity = 99

    def test_restore_replaces_lines(self):
        cart = _make_cart()
        cart.restore(CartSnapshot())
        assert cart.is_empty()
