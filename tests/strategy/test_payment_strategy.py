"""Tests for cart checkout with payment strategies."""

import pytest

from lld_app.errors import InvalidAmountError, InvalidRequestError
from lld_app.strategy.payment import (
    CreditCardPayment,
    PayPalPayment,
    ShoppingCart,
    UpiPayment,
)


class TestShoppingCart:
    """Test cart totals and checkout delegation."""

    def test_total(self):
        cart = ShoppingCart()
        cart.add_item("Pen", 10.0, quantity=3)
        cart.add_item("Book", 250.0)
        assert cart.total() == 280.0

    def test_checkout_with_credit_card_masks_number(self):
        cart = ShoppingCart(CreditCardPayment("4111111111111111", "Alice"))
        cart.add_item("Book", 250.0)

        receipt = cart.checkout()

        assert receipt == "Paid 250.00 using credit card ************1111 (Alice)"
        assert "4111111111111111" not in receipt

    def test_strategy_swap_changes_receipt(self):
        cart = ShoppingCart(UpiPayment("bob@upi"))
        cart.add_item("Tea", 20.0)
        assert cart.checkout() == "Paid 20.00 using UPI bob@upi"

        cart.add_item("Tea", 20.0)
        cart.set_payment_strategy(PayPalPayment("bob@example.com"))
        assert cart.checkout() == "Paid 20.00 using PayPal account bob@example.com"

    def test_checkout_clears_cart(self):
        cart = ShoppingCart(UpiPayment("bob@upi"))
        cart.add_item("Tea", 20.0)
        cart.checkout()
        assert cart.items == []

    def test_checkout_without_strategy(self):
        cart = ShoppingCart()
        cart.add_item("Tea", 20.0)
        with pytest.raises(InvalidRequestError):
            cart.checkout()

    def test_checkout_empty_cart(self):
        cart = ShoppingCart(UpiPayment("bob@upi"))
        with pytest.raises(InvalidAmountError):
            cart.checkout()

    @pytest.mark.parametrize("price,quantity", [(-1.0, 1), (10.0, 0)])
    def test_add_item_rejects_bad_values(self, price, quantity):
        cart = ShoppingCart()
        with pytest.raises(InvalidAmountError):
            cart.add_item("Broken", price, quantity=quantity)
