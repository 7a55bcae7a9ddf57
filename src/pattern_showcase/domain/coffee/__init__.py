"""Order decorator chain - Decorator pattern example."""

from .beverages import BasicCoffee, Coffee
from .decorators import CoffeeDecorator, Milk, Sugar, WhippedCream

__all__ = ["Coffee", "BasicCoffee", "CoffeeDecorator", "Milk", "Sugar", "WhippedCream"]
