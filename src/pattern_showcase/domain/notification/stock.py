"""Stock subject - broadcasts price changes to registered observers."""
from typing import List, Tuple

from pattern_showcase.domain.base.exceptions import InvalidArgumentError
from pattern_showcase.infrastructure.logging.logger import get_logger

from .observers import StockObserver


class Stock:
    """
    Subject holding a symbolic name and a price.

    Observers are notified synchronously, in registration order, every time
    the price is set. Registering the same observer twice means it is
    notified twice.
    """

    def __init__(self, name: str, price: float = 0.0):
        self.name = name
        self._price = price
        self._observers: List[StockObserver] = []
        self._logger = get_logger(__name__)

    @property
    def price(self) -> float:
        return self._price

    @property
    def observers(self) -> Tuple[StockObserver, ...]:
        """Snapshot of registered observers in notification order."""
        return tuple(self._observers)

    def register(self, observer: StockObserver) -> None:
        """Append an observer to the notification list."""
        if observer is None:
            raise InvalidArgumentError("observer")
        self._observers.append(observer)
        self._logger.debug(
            "Registered observer",
            stock=self.name,
            observer=type(observer).__name__,
        )

    def set_price(self, value: float) -> None:
        """Store the new price, then notify every observer."""
        self._price = value
        self._notify()

    def _notify(self) -> None:
        self._logger.debug(
            "Notifying observers",
            stock=self.name,
            price=self._price,
            count=len(self._observers),
        )
        for observer in self._observers:
            observer.update(self.name, self._price)
