"""Simple Factory: one factory method picks a shape class by key."""

from abc import ABC, abstractmethod
from typing import Dict, List, Type

from ..core.patterns.exceptions import UnknownVariantError


class Shape(ABC):
    """A drawable shape."""

    name: str

    @abstractmethod
    def draw(self) -> str:
        """Return the line describing how the shape is drawn."""


class Circle(Shape):
    name = "circle"

    def draw(self) -> str:
        return "Drawing a circle"


class Square(Shape):
    name = "square"

    def draw(self) -> str:
        return "Drawing a square"


class Rectangle(Shape):
    name = "rectangle"

    def draw(self) -> str:
        return "Drawing a rectangle"


class ShapeFactory:
    """Creates shapes from a case-insensitive key."""

    _shapes: Dict[str, Type[Shape]] = {
        cls.name: cls for cls in (Circle, Square, Rectangle)
    }

    @classmethod
    def create(cls, kind: str) -> Shape:
        """
        Create a shape.

        Args:
            kind: Shape key, e.g. "circle"

        Raises:
            UnknownVariantError: If the key is not a known shape
        """
        shape_cls = cls._shapes.get(kind.strip().lower())
        if shape_cls is None:
            raise UnknownVariantError("shape", kind, cls._shapes)
        return shape_cls()

    @classmethod
    def available(cls) -> List[str]:
        return list(cls._shapes)


def run_demo() -> List[str]:
    return [ShapeFactory.create(kind).draw() for kind in ShapeFactory.available()]
