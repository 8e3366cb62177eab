from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Optional


@dataclass(frozen=True, slots=True)
class Product:
    id: int
    name: str
    price: Decimal

    def __post_init__(self) -> None:
        # Floats go through str so 30.0 becomes Decimal("30.0"), not its binary expansion
        object.__setattr__(self, "price", Decimal(str(self.price)))
        if self.price < 0:
            raise ValueError(f"Product {self.id} price must be >= 0, got {self.price}")


@dataclass(slots=True)
class Slot:
    product: Product
    quantity: int


@dataclass(frozen=True, slots=True)
class AvailableItem:
    slot_id: int
    product: Product
    quantity: int


class PurchaseState(Enum):
    IDLE = "IDLE"
    STOCK_CHECKED = "STOCK_CHECKED"
    PAYMENT_ATTEMPTED = "PAYMENT_ATTEMPTED"
    FULFILLED = "FULFILLED"
    ABORTED = "ABORTED"


@dataclass(slots=True)
class Purchase:
    """
    One buy attempt, as the machine saw it.

    ``amount`` stays ``None`` when the attempt was aborted before a price was read.
    """

    slot_id: int
    method_name: str
    state: PurchaseState = PurchaseState.IDLE
    amount: Optional[Decimal] = None
    reason: Optional[str] = None
