"""
Geometry Primitives
===================
Plain value types for user-space coordinates and sizes.
"""

from dataclasses import dataclass
from typing import Iterable, Optional, Sequence, Tuple, Union

# Anything accepted where a point is expected
PointLike = Union["Point", Tuple[float, float], Sequence[float]]


@dataclass
class Point:
    """A coordinate in user space."""
    x: float = 0.0
    y: float = 0.0

    def translate(self, offset: "Point") -> None:
        """Move this point in place by the given offset."""
        self.x += offset.x
        self.y += offset.y

    def __add__(self, other: "Point") -> "Point":
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y)

    @classmethod
    def coerce(cls, value: PointLike) -> "Point":
        """
        Build a Point from a Point or an (x, y) pair.

        Args:
            value: Point instance or two-element sequence

        Returns:
            A new Point (never the same instance)

        Raises:
            ValueError: If the value cannot be unpacked into two numbers
        """
        if isinstance(value, Point):
            return cls(value.x, value.y)
        try:
            x, y = value
        except (TypeError, ValueError) as e:
            raise ValueError(f"Cannot build a point from {value!r}") from e
        return cls(x, y)


class Dimensions:
    """
    Width and height of a canvas or a region.

    A single argument sets both sides, so ``Dimensions(5)`` is a 5x5 square.
    """

    __slots__ = ('width', 'height')

    def __init__(self, width: float = 0.0, height: Optional[float] = None):
        self.width = width
        self.height = width if height is None else height

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Dimensions):
            return NotImplemented
        return self.width == other.width and self.height == other.height

    def __repr__(self) -> str:
        return f"Dimensions(width={self.width!r}, height={self.height!r})"


def get_min_point(points: Iterable[Point]) -> Optional[Point]:
    """
    Component-wise minimum of a set of points.

    Returns:
        The lowest x and lowest y found, or None for an empty input
    """
    result: Optional[Point] = None
    for pt in points:
        if result is None:
            result = Point(pt.x, pt.y)
            continue
        if pt.x < result.x:
            result.x = pt.x
        if pt.y < result.y:
            result.y = pt.y
    return result


def get_max_point(points: Iterable[Point]) -> Optional[Point]:
    """
    Component-wise maximum of a set of points.

    Returns:
        The highest x and highest y found, or None for an empty input
    """
    result: Optional[Point] = None
    for pt in points:
        if result is None:
            result = Point(pt.x, pt.y)
            continue
        if pt.x > result.x:
            result.x = pt.x
        if pt.y > result.y:
            result.y = pt.y
    return result
