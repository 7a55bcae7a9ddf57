"""Shape factory - Factory Method pattern example."""

from .factory import ShapeFactory, UnrecognizedShapeError
from .shapes import Circle, Rectangle, Shape, Square

__all__ = [
    "ShapeFactory",
    "UnrecognizedShapeError",
    "Shape",
    "Circle",
    "Square",
    "Rectangle",
]
