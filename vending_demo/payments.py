from __future__ import annotations

import logging
from decimal import Decimal
from typing import Callable, Dict, List, Protocol, runtime_checkable

from vending_demo.journal import Journal

logger = logging.getLogger(__name__)


@runtime_checkable
class PaymentMethod(Protocol):
    """
    Anything that can settle an amount.

    A declined payment is a normal outcome: return False, don't raise.
    """

    def attempt_payment(self, amount: Decimal) -> bool: ...

    def display_name(self) -> str: ...


_REGISTRY: Dict[str, Callable[..., PaymentMethod]] = {}


def register_payment_method(key: str) -> Callable[[Callable[..., PaymentMethod]], Callable[..., PaymentMethod]]:
    def decorator(factory: Callable[..., PaymentMethod]) -> Callable[..., PaymentMethod]:
        if key in _REGISTRY:
            raise ValueError(f"Payment method {key} already registered")
        _REGISTRY[key] = factory
        return factory

    return decorator


def payment_method(key: str, **kwargs) -> PaymentMethod:
    factory = _REGISTRY.get(key)
    if factory is None:
        raise ValueError(f"Unknown payment method {key} (known: {', '.join(available_payment_methods())})")
    return factory(**kwargs)


def available_payment_methods() -> List[str]:
    return sorted(_REGISTRY)


@register_payment_method("cash")
class CashPayment:
    def attempt_payment(self, amount: Decimal) -> bool:
        logger.info("Cash payment of %s", amount)
        return True

    def display_name(self) -> str:
        return "Cash"


@register_payment_method("card")
class CardPayment:
    def attempt_payment(self, amount: Decimal) -> bool:
        logger.info("Card payment of %s", amount)
        return True

    def display_name(self) -> str:
        return "Card"


@register_payment_method("prepaid")
class PrepaidCardPayment:
    """Card with a fixed balance; declines once the balance can't cover the amount."""

    def __init__(self, balance: Decimal = Decimal("0.00")):
        balance = Decimal(str(balance))
        if balance < 0:
            raise ValueError(f"Prepaid balance must be >= 0, got {balance}")
        self.balance = balance

    def attempt_payment(self, amount: Decimal) -> bool:
        amount = Decimal(str(amount))
        if self.balance < amount:
            logger.info("Prepaid card declined: have=%s, need=%s", self.balance, amount)
            return False
        self.balance -= amount
        logger.info("Prepaid card payment of %s (balance=%s)", amount, self.balance)
        return True

    def display_name(self) -> str:
        return "Prepaid card"


class PaymentProcessor:
    def __init__(self, journal: Journal):
        self.journal = journal

    def process_payment(self, method: PaymentMethod, amount: Decimal) -> bool:
        self.journal.log(f"Using {method.display_name()} to pay Rs {amount}")
        return method.attempt_payment(amount)
