"""Checkout with a payment method chosen at runtime."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

import structlog

from ..errors import InvalidAmountError, InvalidRequestError

logger = structlog.get_logger(__name__)


class PaymentStrategy(ABC):
    """One way of paying for a cart."""

    @abstractmethod
    def pay(self, amount: float) -> str:
        pass


class CreditCardPayment(PaymentStrategy):
    def __init__(self, card_number: str, holder: str) -> None:
        self.card_number = card_number
        self.holder = holder

    def pay(self, amount: float) -> str:
        # Only the last four digits are ever shown
        masked = "*" * max(len(self.card_number) - 4, 0) + self.card_number[-4:]
        return f"Paid {amount:.2f} using credit card {masked} ({self.holder})"


class UpiPayment(PaymentStrategy):
    def __init__(self, upi_id: str) -> None:
        self.upi_id = upi_id

    def pay(self, amount: float) -> str:
        return f"Paid {amount:.2f} using UPI {self.upi_id}"


class PayPalPayment(PaymentStrategy):
    def __init__(self, email: str) -> None:
        self.email = email

    def pay(self, amount: float) -> str:
        return f"Paid {amount:.2f} using PayPal account {self.email}"


@dataclass(frozen=True)
class CartItem:
    """A single line in the cart."""
    name: str
    price: float
    quantity: int = 1

    @property
    def subtotal(self) -> float:
        return self.price * self.quantity


class ShoppingCart:
    """Cart that hands payment off to its current strategy."""

    def __init__(self, payment_strategy: Optional[PaymentStrategy] = None) -> None:
        self.items: list[CartItem] = []
        self.payment_strategy = payment_strategy

    def add_item(self, name: str, price: float, quantity: int = 1) -> None:
        if price < 0 or quantity <= 0:
            raise InvalidAmountError(
                f"Invalid price or quantity for {name}",
                amount=price,
                context={"quantity": quantity}
            )
        self.items.append(CartItem(name=name, price=price, quantity=quantity))

    def total(self) -> float:
        return sum(item.subtotal for item in self.items)

    def set_payment_strategy(self, strategy: PaymentStrategy) -> None:
        self.payment_strategy = strategy

    def checkout(self) -> str:
        if self.payment_strategy is None:
            raise InvalidRequestError("No payment method selected")

        amount = self.total()
        if amount <= 0:
            raise InvalidAmountError("Cart total must be positive", amount=amount)

        receipt = self.payment_strategy.pay(amount)
        logger.info(
            "Cart checked out",
            strategy=type(self.payment_strategy).__name__,
            amount=amount,
            items=len(self.items)
        )
        self.items.clear()
        return receipt
