from __future__ import annotations

import argparse
import logging
from decimal import Decimal
from typing import List

from vending_demo.machine import VendingMachine
from vending_demo.models import AvailableItem, Product
from vending_demo.payments import available_payment_methods, payment_method


def seed(machine: VendingMachine) -> None:
    machine.load_product(1, Product(101, "Chips", Decimal("30.00")), 5)
    machine.load_product(2, Product(102, "Coke", Decimal("50.00")), 3)
    machine.load_product(3, Product(103, "Candy", Decimal("10.00")), 0)
    machine.load_product(12, Product(112, "Water", Decimal("20.00")), 4)


def format_listing(items: List[AvailableItem]) -> str:
    if not items:
        return "No items available"
    return "\n".join(
        f"Slot {item.slot_id}: {item.product.name} (Rs {item.product.price}), Qty: {item.quantity}" for item in items
    )


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(message)s")

    p = argparse.ArgumentParser(description="Buy from a seeded vending machine and print what happened.")
    p.add_argument("--slot", type=int, default=1)
    p.add_argument("--method", choices=available_payment_methods(), default="cash")
    p.add_argument("--balance", type=Decimal, default=Decimal("40.00"), help="Balance for --method prepaid")
    p.add_argument("--repeat", type=int, default=1, help="How many purchases to attempt")
    args = p.parse_args()

    machine = VendingMachine()
    seed(machine)

    print("\n=== AVAILABLE ===")
    print(format_listing(machine.list_available()))

    kwargs = {"balance": args.balance} if args.method == "prepaid" else {}
    method = payment_method(args.method, **kwargs)

    print()
    for _ in range(args.repeat):
        ok = machine.buy(args.slot, method)
        print(f"Buying slot {args.slot} with {method.display_name()}: {'dispensed' if ok else 'not dispensed'}")

    print("\n=== RESULT ===")
    print(format_listing(machine.list_available()))
    print("history:", [(purchase.slot_id, purchase.state.value, purchase.reason) for purchase in machine.history])


if __name__ == "__main__":
    main()
