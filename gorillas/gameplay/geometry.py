"""
Geometry primitives shared by the collision and placement code.
NO UI DEPENDENCIES.
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class Rect:
    """
    Axis-aligned rectangle in screen coordinates.

    Coordinate system:
    - (x, y) is the top-left corner
    - x increases to the right
    - y increases downward
    """
    x: float
    y: float
    width: float
    height: float

    @property
    def left(self) -> float:
        return self.x

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def top(self) -> float:
        return self.y

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def overlaps(self, other: 'Rect') -> bool:
        """
        Strict AABB intersection.
        Rectangles that only share an edge do not overlap.
        """
        return (
            self.right > other.left
            and self.left < other.right
            and self.bottom > other.top
            and self.top < other.bottom
        )

    def contains_rect(self, other: 'Rect') -> bool:
        """Check if other lies fully inside this rectangle (edges inclusive)."""
        return (
            other.left >= self.left
            and other.right <= self.right
            and other.top >= self.top
            and other.bottom <= self.bottom
        )


def square_around(x: float, y: float, half_size: float) -> Rect:
    """Return the square of side 2 * half_size centred on (x, y)."""
    return Rect(x - half_size, y - half_size, half_size * 2, half_size * 2)
