"""Tests for slot inventory."""
from decimal import Decimal

import pytest

from vending_demo.inventory import InvalidSlot, Inventory
from vending_demo.models import Product


@pytest.fixture
def inventory(chips) -> Inventory:
    inventory = Inventory()
    inventory.add_slot(5, chips, 3)
    return inventory


def test_load_then_query_round_trip(inventory, chips):
    assert inventory.has_stock(5) is True
    assert inventory.get_quantity(5) == 3
    assert inventory.get_product(5) == chips


def test_missing_slot_reads_as_empty(inventory):
    assert inventory.has_stock(2) is False
    assert inventory.get_quantity(2) == 0
    assert inventory.consume_one(2) is False


def test_get_product_on_missing_slot_raises(inventory):
    with pytest.raises(InvalidSlot) as exc_info:
        inventory.get_product(99)
    assert exc_info.value.slot_id == 99
    assert isinstance(exc_info.value, LookupError)


def test_consume_one_decrements_until_empty(inventory):
    assert inventory.consume_one(5) is True
    assert inventory.consume_one(5) is True
    assert inventory.consume_one(5) is True
    assert inventory.get_quantity(5) == 0

    # Empty slot: no change, no exception
    assert inventory.consume_one(5) is False
    assert inventory.get_quantity(5) == 0
    assert inventory.has_stock(5) is False


def test_add_slot_overwrites_without_merging(inventory):
    coke = Product(102, "Coke", Decimal("50.00"))
    inventory.add_slot(5, coke, 1)

    assert inventory.get_product(5) == coke
    assert inventory.get_quantity(5) == 1


def test_zero_quantity_slot_exists_but_has_no_stock(inventory, chips):
    inventory.add_slot(3, chips, 0)

    assert inventory.has_stock(3) is False
    assert inventory.get_quantity(3) == 0
    assert inventory.get_product(3) == chips


def test_negative_quantity_rejected(inventory, chips):
    with pytest.raises(ValueError):
        inventory.add_slot(7, chips, -1)
    assert inventory.get_quantity(7) == 0


def test_slot_ids_are_sorted(inventory, chips):
    inventory.add_slot(42, chips, 1)
    inventory.add_slot(1, chips, 0)

    assert inventory.slot_ids() == [1, 5, 42]


def test_product_is_immutable_and_rejects_negative_price(chips):
    with pytest.raises(AttributeError):
        chips.price = Decimal("1.00")
    with pytest.raises(ValueError):
        Product(1, "Broken", Decimal("-0.01"))
