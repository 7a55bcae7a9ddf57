"""Add-on decorators for coffee orders."""
from pattern_showcase.domain.base.exceptions import InvalidArgumentError

from .beverages import Coffee


class CoffeeDecorator(Coffee):
    """
    Base add-on wrapping exactly one coffee.

    Subclasses set ``label`` and ``price``. Description and cost delegate to
    the wrapped coffee first and append the local contribution, so a chain is
    evaluated innermost-first in a single linear walk.
    """

    label = ""
    price = 0.0

    def __init__(self, coffee: Coffee):
        if not self.label:
            raise TypeError(f"{type(self).__name__} must define a non-empty label")
        if coffee is None:
            raise InvalidArgumentError("coffee")
        self._coffee = coffee

    @property
    def wrapped(self) -> Coffee:
        return self._coffee

    def get_description(self) -> str:
        return f"{self._coffee.get_description()} + {self.label}"

    def cost(self) -> float:
        return self._coffee.cost() + self.price


class Milk(CoffeeDecorator):
    label = "Milk"
    price = 0.5


class Sugar(CoffeeDecorator):
    label = "Sugar"
    price = 0.2


class WhippedCream(CoffeeDecorator):
    label = "Whipped Cream"
    price = 0.7
