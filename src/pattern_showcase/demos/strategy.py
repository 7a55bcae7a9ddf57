"""Strategy demo: the same cart pays by card, then by PayPal."""
from pattern_showcase.domain.payment import CreditCardPayment, PayPalPayment, ShoppingCart


def main() -> None:
    cart = ShoppingCart()

    cart.set_strategy(CreditCardPayment())
    cart.checkout(100.0)

    cart.set_strategy(PayPalPayment())
    cart.checkout(250.0)


if __name__ == "__main__":
    main()
