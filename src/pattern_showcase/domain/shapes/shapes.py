"""Drawable shapes."""
from abc import ABC, abstractmethod


class Shape(ABC):
    """Product interface of the shape factory."""

    @abstractmethod
    def draw(self) -> None:
        pass


class Circle(Shape):
    def draw(self) -> None:
        print("Drawing a Circle")


class Square(Shape):
    def draw(self) -> None:
        print("Drawing a Square")


class Rectangle(Shape):
    def draw(self) -> None:
        print("Drawing a Rectangle")
