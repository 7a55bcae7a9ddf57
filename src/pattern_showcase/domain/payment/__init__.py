"""Payment strategy switch - Strategy pattern example."""

from .cart import ShoppingCart, StrategyNotSetError
from .strategies import (
    BankTransferPayment,
    CreditCardPayment,
    PaymentStrategy,
    PayPalPayment,
)

__all__ = [
    "ShoppingCart",
    "StrategyNotSetError",
    "PaymentStrategy",
    "CreditCardPayment",
    "PayPalPayment",
    "BankTransferPayment",
]
