"""Factory Method demo: shapes built from string keys."""
from pattern_showcase.domain.shapes import ShapeFactory


def main() -> None:
    ShapeFactory.create_shape("circle").draw()
    ShapeFactory.create_shape("SQUARE").draw()


if __name__ == "__main__":
    main()
