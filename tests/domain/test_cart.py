"""Unit tests for the CartLedger aggregate.

Uses the key-value cart repository over an in-memory store, so every
test also checks what was persisted.
"""

from decimal import Decimal

import pytest

from quickbite.domain.exceptions import EntityNotFoundError
from quickbite.domain.model.cart import CartLedger
from quickbite.domain.model.catalog import default_catalog
from quickbite.domain.model.value_objects import Money
from quickbite.infrastructure.persistence.kv_cart_repository import KeyValueCartRepository
from tests.fakes import FakeKeyValueStore


def _setup() -> tuple[CartLedger, FakeKeyValueStore]:
    store = FakeKeyValueStore()
    return CartLedger(default_catalog(), KeyValueCartRepository(store)), store


def _reopen(store: FakeKeyValueStore) -> CartLedger:
    return CartLedger(default_catalog(), KeyValueCartRepository(store))


class TestAdd:

    def test_first_add_creates_line_with_quantity_one(self):
        cart, _ = _setup()
        assert cart.add(1) is True
        assert cart.quantity_of(1) == 1

    def test_add_twice_is_idempotent(self):
        cart, store = _setup()
        cart.add(1)
        stored = store.data["qb_cart"]
        assert cart.add(1) is False
        assert cart.quantity_of(1) == 1
        assert len(cart.snapshot()) == 1
        assert store.data["qb_cart"] == stored

    def test_unknown_item_rejected_without_writing(self):
        cart, store = _setup()
        with pytest.raises(EntityNotFoundError):
            cart.add(42)
        assert store.writes == 0

    def test_insertion_order_preserved(self):
        cart, _ = _setup()
        for item_id in (3, 1, 2):
            cart.add(item_id)
        assert [line.item_id for line in cart.snapshot()] == [3, 1, 2]


class TestSetQuantity:

    def test_updates_existing_line(self):
        cart, _ = _setup()
        cart.add(1)
        assert cart.set_quantity(1, 4) is True
        assert cart.quantity_of(1) == 4
        assert cart.item_count == 4

    def test_missing_line_is_noop(self):
        cart, store = _setup()
        assert cart.set_quantity(1, 3) is False
        assert cart.set_quantity(1, 0) is False
        assert cart.is_empty
        assert store.writes == 0

    def test_zero_is_same_as_remove(self):
        a, _ = _setup()
        b, _ = _setup()
        for cart in (a, b):
            cart.add(1)
            cart.add(2)
        a.set_quantity(1, 0)
        b.remove(1)
        assert a.snapshot() == b.snapshot()

    def test_negative_removes(self):
        cart, _ = _setup()
        cart.add(1)
        cart.set_quantity(1, -3)
        assert not cart.contains(1)


class TestRemove:

    def test_remove_absent_is_noop(self):
        cart, store = _setup()
        assert cart.remove(5) is False
        assert store.writes == 0


class TestPersistence:

    def test_mutations_visible_to_a_second_ledger(self):
        cart, store = _setup()
        cart.add(1)
        cart.set_quantity(1, 2)
        cart.add(2)

        other = _reopen(store)
        assert [(l.item_id, l.quantity.value) for l in other.snapshot()] == [(1, 2), (2, 1)]

    def test_clear(self):
        cart, store = _setup()
        cart.add(1)
        cart.clear()
        assert _reopen(store).is_empty


class TestSubtotal:

    def test_empty_cart(self):
        cart, _ = _setup()
        assert cart.subtotal() == Money.zero()

    def test_sum_of_price_times_quantity_is_exact(self):
        cart, _ = _setup()
        cart.add(1)
        cart.set_quantity(1, 2)
        cart.add(2)
        assert cart.subtotal().amount == Decimal("44.97")

    def test_many_units_no_drift(self):
        cart, _ = _setup()
        cart.add(6)
        cart.set_quantity(6, 1000)
        assert cart.subtotal().amount == Decimal("8990.00")
