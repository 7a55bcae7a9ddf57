"""Shape factory - maps a type key to a freshly built shape."""
from typing import Any, Callable, Dict, List

from pattern_showcase.domain.base.exceptions import UnrecognizedTypeError
from pattern_showcase.infrastructure.logging.logger import get_logger

from .shapes import Circle, Rectangle, Shape, Square

logger = get_logger(__name__)


class UnrecognizedShapeError(UnrecognizedTypeError):
    """Raised when the requested shape type is not known to the factory."""

    def __init__(self, shape_type: Any, supported: List[str]):
        super().__init__("shape", shape_type, supported)


class ShapeFactory:
    """Static dispatcher from case-insensitive type keys to shape classes."""

    _SHAPES: Dict[str, Callable[[], Shape]] = {
        "circle": Circle,
        "square": Square,
        "rectangle": Rectangle,
    }

    @staticmethod
    def create_shape(shape_type: str) -> Shape:
        """
        Create a new shape for the given type key.

        Matching is case-insensitive but otherwise exact: surrounding
        whitespace is not stripped.

        Args:
            shape_type: Shape key such as "circle" or "SQUARE"

        Returns:
            A newly constructed shape

        Raises:
            UnrecognizedShapeError: If the key is not a known shape type
        """
        if not isinstance(shape_type, str):
            raise UnrecognizedShapeError(shape_type, ShapeFactory.supported_types())

        constructor = ShapeFactory._SHAPES.get(shape_type.lower())
        if constructor is None:
            logger.debug("Rejected shape type", shape_type=shape_type)
            raise UnrecognizedShapeError(shape_type, ShapeFactory.supported_types())

        logger.debug("Creating shape", shape_type=shape_type.lower())
        return constructor()

    @staticmethod
    def supported_types() -> List[str]:
        """Get the known shape type keys."""
        return list(ShapeFactory._SHAPES)
