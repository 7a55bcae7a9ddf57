"""Stock price observers."""
from abc import ABC, abstractmethod


class StockObserver(ABC):
    """Interface for anything that wants to hear about price changes."""

    @abstractmethod
    def update(self, name: str, value: float) -> None:
        """Receive the subject's name and its new value."""
        pass


class MobileAppDisplay(StockObserver):
    """Pushes price changes to a mobile app."""

    def update(self, name: str, value: float) -> None:
        print(f"Mobile App: {name} price updated to {value}")


class WebDashboardDisplay(StockObserver):
    """Shows price changes on a web dashboard."""

    def update(self, name: str, value: float) -> None:
        print(f"Web Dashboard: {name} price updated to {value}")
