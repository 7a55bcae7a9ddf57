"""Coffee component interface and the undecorated base drink."""
from abc import ABC, abstractmethod


class Coffee(ABC):
    """Component interface shared by drinks and their add-ons."""

    @abstractmethod
    def get_description(self) -> str:
        pass

    @abstractmethod
    def cost(self) -> float:
        pass


class BasicCoffee(Coffee):
    """Plain coffee with a fixed description and price."""

    def get_description(self) -> str:
        return "Basic Coffee"

    def cost(self) -> float:
        return 2.0
