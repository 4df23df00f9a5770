"""
Shape models for SVG generation.
Every shape stores user-space coordinates and only applies the layout
transform when it is serialized.
"""

import copy
from abc import ABC, abstractmethod
from enum import Enum
from typing import Iterable, Iterator, List, Optional, Union

from typing_extensions import Self

from simple_svg.models.color import Color, ColorName
from simple_svg.models.geometry import Point, PointLike
from simple_svg.models.layout import Layout, translate_x, translate_y, translate_scale
from simple_svg.models.style import Fill, Stroke, Font
from simple_svg.utils.logger import get_logger
from simple_svg.utils.markup import attribute, elem_start, elem_end, empty_elem_end, format_number

# Configure logger
logger = get_logger(__name__)

FillLike = Union[Fill, Color, ColorName, None]


class ShapeType(Enum):
    """Enum for the supported shape kinds."""
    CIRCLE = "circle"
    ELLIPSE = "ellipse"
    RECTANGLE = "rect"
    LINE = "line"
    POLYGON = "polygon"
    POLYLINE = "polyline"
    TEXT = "text"
    LINE_CHART = "line_chart"


class ShapeError(Exception):
    """Custom exception for shape-related errors."""
    pass


def _coerce_fill(fill: FillLike) -> Fill:
    """
    Process fill input.

    Args:
        fill: Fill, Color, ColorName or None for transparent

    Returns:
        Fill object

    Raises:
        ShapeError: If the value cannot be used as a fill
    """
    if isinstance(fill, Fill):
        return fill
    try:
        return Fill(fill)
    except TypeError as e:
        raise ShapeError(f"Invalid fill: {fill!r}") from e


def _coerce_point(value: PointLike) -> Point:
    try:
        return Point.coerce(value)
    except ValueError as e:
        raise ShapeError(str(e)) from e


class Shape(ABC):
    """
    Base class for all shapes.

    Holds the fill and stroke every variant serializes after its
    geometry attributes.
    """

    shape_type: ShapeType

    def __init__(self, fill: FillLike = None, stroke: Optional[Stroke] = None):
        """
        Initialize a shape.

        Args:
            fill: Fill paint (Fill, Color or ColorName); transparent if None
            stroke: Outline; omitted from output if None
        """
        self.fill = _coerce_fill(fill)
        self.stroke = stroke if stroke is not None else Stroke()

    @abstractmethod
    def serialize(self, layout: Layout) -> str:
        """
        Convert the shape to markup.

        Args:
            layout: Layout used to map coordinates into document space

        Returns:
            Markup fragment
        """

    @abstractmethod
    def translate(self, offset: Point) -> None:
        """
        Move every coordinate of the shape by offset, in place.

        Repeated calls accumulate.
        """

    def copy(self) -> Self:
        """Create a deep copy of the shape."""
        return copy.deepcopy(self)

    def _paint(self, layout: Layout) -> str:
        return self.fill.serialize(layout) + self.stroke.serialize(layout)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(fill={self.fill!r}, stroke={self.stroke!r})"


class Circle(Shape):
    """Circle defined by its center and diameter."""

    shape_type = ShapeType.CIRCLE

    def __init__(
        self,
        center: PointLike,
        diameter: float,
        fill: FillLike = None,
        stroke: Optional[Stroke] = None
    ):
        super().__init__(fill, stroke)
        self.center = _coerce_point(center)
        self.radius = diameter / 2

    def serialize(self, layout: Layout) -> str:
        return (
            elem_start("circle") +
            attribute("cx", translate_x(self.center.x, layout)) +
            attribute("cy", translate_y(self.center.y, layout)) +
            attribute("r", translate_scale(self.radius, layout)) +
            self._paint(layout) +
            empty_elem_end()
        )

    def translate(self, offset: Point) -> None:
        self.center.translate(offset)


class Ellipse(Shape):
    """Axis-aligned ellipse defined by its center and full width/height."""

    shape_type = ShapeType.ELLIPSE

    def __init__(
        self,
        center: PointLike,
        width: float,
        height: float,
        fill: FillLike = None,
        stroke: Optional[Stroke] = None
    ):
        super().__init__(fill, stroke)
        self.center = _coerce_point(center)
        self.radius_width = width / 2
        self.radius_height = height / 2

    def serialize(self, layout: Layout) -> str:
        return (
            elem_start("ellipse") +
            attribute("cx", translate_x(self.center.x, layout)) +
            attribute("cy", translate_y(self.center.y, layout)) +
            attribute("rx", translate_scale(self.radius_width, layout)) +
            attribute("ry", translate_scale(self.radius_height, layout)) +
            self._paint(layout) +
            empty_elem_end()
        )

    def translate(self, offset: Point) -> None:
        self.center.translate(offset)


class Rectangle(Shape):
    """
    Rectangle anchored at ``edge``.

    Only the edge goes through the origin flip; width and height are
    scaled, so the rectangle always extends right and down in document space.
    """

    shape_type = ShapeType.RECTANGLE

    def __init__(
        self,
        edge: PointLike,
        width: float,
        height: float,
        fill: FillLike = None,
        stroke: Optional[Stroke] = None
    ):
        super().__init__(fill, stroke)
        self.edge = _coerce_point(edge)
        self.width = width
        self.height = height

    def serialize(self, layout: Layout) -> str:
        return (
            elem_start("rect") +
            attribute("x", translate_x(self.edge.x, layout)) +
            attribute("y", translate_y(self.edge.y, layout)) +
            attribute("width", translate_scale(self.width, layout)) +
            attribute("height", translate_scale(self.height, layout)) +
            self._paint(layout) +
            empty_elem_end()
        )

    def translate(self, offset: Point) -> None:
        self.edge.translate(offset)


class Line(Shape):
    """Straight segment; a line never carries a fill."""

    shape_type = ShapeType.LINE

    def __init__(self, start: PointLike, end: PointLike, stroke: Optional[Stroke] = None):
        super().__init__(None, stroke)
        self.start = _coerce_point(start)
        self.end = _coerce_point(end)

    def serialize(self, layout: Layout) -> str:
        return (
            elem_start("line") +
            attribute("x1", translate_x(self.start.x, layout)) +
            attribute("y1", translate_y(self.start.y, layout)) +
            attribute("x2", translate_x(self.end.x, layout)) +
            attribute("y2", translate_y(self.end.y, layout)) +
            self.stroke.serialize(layout) +
            empty_elem_end()
        )

    def translate(self, offset: Point) -> None:
        self.start.translate(offset)
        self.end.translate(offset)


class _PointSequence(Shape):
    """Shared behaviour of polygons and polylines: an ordered point list."""

    def __init__(
        self,
        points: Optional[Iterable[PointLike]] = None,
        fill: FillLike = None,
        stroke: Optional[Stroke] = None
    ):
        super().__init__(fill, stroke)
        self.points: List[Point] = []
        if points is not None:
            self.extend(points)

    def append(self, point: PointLike) -> Self:
        """
        Add a vertex at the end.

        Args:
            point: Point or (x, y) pair

        Returns:
            Self for method chaining
        """
        self.points.append(_coerce_point(point))
        return self

    def extend(self, points: Iterable[PointLike]) -> Self:
        """Add several vertices in order."""
        for point in points:
            self.append(point)
        return self

    def __iadd__(self, points: Iterable[PointLike]) -> Self:
        return self.extend(points)

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

    def _points_attribute(self, layout: Layout) -> str:
        # Every pair is followed by a space, including the last one
        pairs = "".join(
            f"{format_number(translate_x(pt.x, layout))},"
            f"{format_number(translate_y(pt.y, layout))} "
            for pt in self.points
        )
        return attribute("points", pairs)

    def serialize(self, layout: Layout) -> str:
        return (
            elem_start(self.shape_type.value) +
            self._points_attribute(layout) +
            self._paint(layout) +
            empty_elem_end()
        )

    def translate(self, offset: Point) -> None:
        for pt in self.points:
            pt.translate(offset)


class Polygon(_PointSequence):
    """Closed shape through an ordered list of points."""

    shape_type = ShapeType.POLYGON


class Polyline(_PointSequence):
    """Open path through an ordered list of points."""

    shape_type = ShapeType.POLYLINE


class Text(Shape):
    """
    Text anchored at ``origin``.

    Content is written verbatim; escaping markup characters is left to
    the caller.
    """

    shape_type = ShapeType.TEXT

    def __init__(
        self,
        origin: PointLike,
        content: str,
        fill: FillLike = None,
        font: Optional[Font] = None,
        stroke: Optional[Stroke] = None
    ):
        super().__init__(fill, stroke)
        self.origin = _coerce_point(origin)
        self.content = content
        self.font = font if font is not None else Font()

    def serialize(self, layout: Layout) -> str:
        return (
            elem_start("text") +
            attribute("x", translate_x(self.origin.x, layout)) +
            attribute("y", translate_y(self.origin.y, layout)) +
            self._paint(layout) +
            self.font.serialize(layout) +
            ">" +
            self.content +
            elem_end("text")
        )

    def translate(self, offset: Point) -> None:
        self.origin.translate(offset)
