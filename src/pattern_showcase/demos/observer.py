"""Observer demo: a stock broadcasts price changes to two displays."""
from pattern_showcase.domain.notification import MobileAppDisplay, Stock, WebDashboardDisplay


def main() -> None:
    stock = Stock("AAPL")
    stock.register(MobileAppDisplay())
    stock.register(WebDashboardDisplay())

    stock.set_price(150.0)
    stock.set_price(155.5)


if __name__ == "__main__":
    main()
