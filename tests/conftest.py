"""Pytest fixtures for the vending machine demo."""

from decimal import Decimal

import pytest

from vending_demo.journal import Journal
from vending_demo.machine import VendingMachine
from vending_demo.models import Product


class DecliningPayment:
    """Payment stub that never settles."""

    def __init__(self) -> None:
        self.attempts = []

    def attempt_payment(self, amount: Decimal) -> bool:
        self.attempts.append(amount)
        return False

    def display_name(self) -> str:
        return "Declining"


@pytest.fixture
def journal() -> Journal:
    return Journal()


@pytest.fixture
def chips() -> Product:
    return Product(101, "Chips", Decimal("30.00"))


@pytest.fixture
def machine(journal, chips) -> VendingMachine:
    machine = VendingMachine(journal)

    machine.load_product(1, chips, 5)
    machine.load_product(2, Product(102, "Coke", Decimal("50.00")), 3)
    machine.load_product(3, Product(103, "Candy", Decimal("10.00")), 0)  # Defined but empty
    machine.load_product(12, Product(112, "Water", Decimal("20.00")), 1)  # Outside 1..10

    return machine


@pytest.fixture
def declining() -> DecliningPayment:
    return DecliningPayment()
