"""Payment strategies."""
from abc import ABC, abstractmethod


class PaymentStrategy(ABC):
    """Interchangeable way of paying for a cart."""

    @abstractmethod
    def pay(self, amount: float) -> None:
        """Pay the given amount."""
        pass


class CreditCardPayment(PaymentStrategy):
    def pay(self, amount: float) -> None:
        print(f"Paid {amount} using Credit Card")


class PayPalPayment(PaymentStrategy):
    def pay(self, amount: float) -> None:
        print(f"Paid {amount} using PayPal")


class BankTransferPayment(PaymentStrategy):
    def pay(self, amount: float) -> None:
        print(f"Paid {amount} using Bank Transfer")
