"""Tests for the shopping cart and payment strategies."""

from unittest.mock import Mock

import pytest

from pattern_showcase.domain.base.exceptions import InvalidArgumentError, InvalidStateError
from pattern_showcase.domain.payment import (
    BankTransferPayment,
    CreditCardPayment,
    PaymentStrategy,
    PayPalPayment,
    ShoppingCart,
    StrategyNotSetError,
)


class TestShoppingCart:
    """Test cases for ShoppingCart."""

    def test_checkout_uses_only_the_active_strategy(self):
        """Test that checkout calls exactly the strategy set last."""
        first = Mock(spec=PaymentStrategy)
        second = Mock(spec=PaymentStrategy)
        cart = ShoppingCart()

        cart.set_strategy(first)
        cart.set_strategy(second)
        cart.checkout(75.0)

        second.pay.assert_called_once_with(75.0)
        first.pay.assert_not_called()

    def test_strategy_can_be_switched_between_checkouts(self):
        first = Mock(spec=PaymentStrategy)
        second = Mock(spec=PaymentStrategy)
        cart = ShoppingCart()

        cart.set_strategy(first)
        cart.checkout(10.0)
        cart.set_strategy(second)
        cart.checkout(20.0)

        first.pay.assert_called_once_with(10.0)
        second.pay.assert_called_once_with(20.0)

    def test_checkout_without_strategy_raises(self):
        cart = ShoppingCart()

        with pytest.raises(StrategyNotSetError) as exc_info:
            cart.checkout(10.0)

        assert isinstance(exc_info.value, InvalidStateError)
        assert exc_info.value.operation == "checkout"

    def test_set_strategy_none_is_rejected(self):
        cart = ShoppingCart()

        with pytest.raises(InvalidArgumentError):
            cart.set_strategy(None)
        assert cart.strategy is None

    def test_strategy_property_reflects_assignment(self):
        cart = ShoppingCart()
        strategy = PayPalPayment()

        cart.set_strategy(strategy)

        assert cart.strategy is strategy


class TestPaymentStrategies:
    """Test the printed payment lines."""

    @pytest.mark.parametrize(
        "strategy, method",
        [
            (CreditCardPayment(), "Credit Card"),
            (PayPalPayment(), "PayPal"),
            (BankTransferPayment(), "Bank Transfer"),
        ],
    )
    def test_pay_output(self, capsys, strategy, method):
        strategy.pay(100.0)

        assert capsys.readouterr().out == f"Paid 100.0 using {method}\n"
