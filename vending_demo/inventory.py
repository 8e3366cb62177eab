from __future__ import annotations

from typing import Dict, List

from vending_demo.models import Product, Slot


class InvalidSlot(LookupError):
    def __init__(self, slot_id: int):
        super().__init__(f"Invalid slot {slot_id}")
        self.slot_id = slot_id


class Inventory:
    """
    Slot id -> Slot mapping.

    A missing slot reads as "no product, zero stock" everywhere except
    get_product, where asking for it is a caller bug.
    """

    def __init__(self) -> None:
        self.slots: Dict[int, Slot] = {}

    def add_slot(self, slot_id: int, product: Product, quantity: int) -> None:
        if quantity < 0:
            raise ValueError(f"Slot {slot_id} quantity must be >= 0, got {quantity}")
        self.slots[slot_id] = Slot(product=product, quantity=quantity)

    def has_stock(self, slot_id: int) -> bool:
        slot = self.slots.get(slot_id)
        return slot is not None and slot.quantity > 0

    def get_product(self, slot_id: int) -> Product:
        slot = self.slots.get(slot_id)
        if slot is None:
            raise InvalidSlot(slot_id)
        return slot.product

    def consume_one(self, slot_id: int) -> bool:
        if not self.has_stock(slot_id):
            return False
        self.slots[slot_id].quantity -= 1
        return True

    def get_quantity(self, slot_id: int) -> int:
        slot = self.slots.get(slot_id)
        if slot is None:
            return 0
        return slot.quantity

    def slot_ids(self) -> List[int]:
        return sorted(self.slots)
