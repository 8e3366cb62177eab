from __future__ import annotations

from typing import List, Optional

from vending_demo.inventory import Inventory
from vending_demo.journal import Journal
from vending_demo.models import AvailableItem, Product, Purchase, PurchaseState
from vending_demo.payments import PaymentMethod, PaymentProcessor


class InventoryInvariantError(RuntimeError):
    pass


class VendingMachine:
    """
    Facade over one Inventory and one PaymentProcessor.

    Construct it once at startup and hand it to whoever needs it. Not safe
    for concurrent callers: buy() checks stock and consumes it in two steps.
    """

    def __init__(self, journal: Optional[Journal] = None) -> None:
        self.journal = journal if journal is not None else Journal()
        self.inventory = Inventory()
        self.payments = PaymentProcessor(self.journal)

        self.state = PurchaseState.IDLE
        self.history: List[Purchase] = []

    def load_product(self, slot_id: int, product: Product, quantity: int) -> None:
        self.inventory.add_slot(slot_id, product, quantity)
        self.journal.log(f"[slot={slot_id}] loaded {product.name} qty={quantity}")

    def list_available(self) -> List[AvailableItem]:
        return [
            AvailableItem(
                slot_id=slot_id,
                product=self.inventory.get_product(slot_id),
                quantity=self.inventory.get_quantity(slot_id),
            )
            for slot_id in self.inventory.slot_ids()
            if self.inventory.has_stock(slot_id)
        ]

    def has_stock(self, slot_id: int) -> bool:
        return self.inventory.has_stock(slot_id)

    def get_quantity(self, slot_id: int) -> int:
        return self.inventory.get_quantity(slot_id)

    def get_product(self, slot_id: int) -> Product:
        return self.inventory.get_product(slot_id)

    def _transition(self, purchase: Purchase, state: PurchaseState) -> None:
        self.state = state
        purchase.state = state

    def _finish(self, purchase: Purchase, state: PurchaseState, reason: Optional[str] = None) -> bool:
        self._transition(purchase, state)
        purchase.reason = reason
        self.history.append(purchase)
        self.state = PurchaseState.IDLE
        return state is PurchaseState.FULFILLED

    def buy(self, slot_id: int, method: PaymentMethod) -> bool:
        purchase = Purchase(slot_id=slot_id, method_name=method.display_name())

        if not self.inventory.has_stock(slot_id):
            self.journal.log(f"[slot={slot_id}] item not available")
            return self._finish(purchase, PurchaseState.ABORTED, "not available")
        self._transition(purchase, PurchaseState.STOCK_CHECKED)

        product = self.inventory.get_product(slot_id)
        purchase.amount = product.price
        self.journal.log(f"[slot={slot_id}] selected {product.name} (Rs {product.price})")

        paid = self.payments.process_payment(method, product.price)
        self._transition(purchase, PurchaseState.PAYMENT_ATTEMPTED)
        if not paid:
            self.journal.log(f"[slot={slot_id}] payment failed via {method.display_name()}")
            return self._finish(purchase, PurchaseState.ABORTED, "payment declined")

        if not self.inventory.consume_one(slot_id):
            # Stock was confirmed above; only a concurrent mutation could get here.
            self.journal.log(f"[slot={slot_id}] paid but stock vanished before dispensing")
            self._finish(purchase, PurchaseState.ABORTED, "stock vanished after payment")
            raise InventoryInvariantError(f"Slot {slot_id} ran out between stock check and dispense")

        self.journal.log(f"[slot={slot_id}] dispensing {product.name} (remaining={self.inventory.get_quantity(slot_id)})")
        return self._finish(purchase, PurchaseState.FULFILLED)
