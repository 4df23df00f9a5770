"""
Line chart model.
Plots one or more polylines on a shared axis sized from their bounding box.
"""

from typing import List, Optional, Tuple, Union

from typing_extensions import Self

from simple_svg.models.color import ColorName
from simple_svg.models.geometry import Dimensions, Point, get_min_point, get_max_point
from simple_svg.models.layout import Layout
from simple_svg.models.shape import Shape, ShapeType, Polyline, Circle
from simple_svg.models.style import Stroke
from simple_svg.utils.logger import get_logger

# Configure logger
logger = get_logger(__name__)

# Constants
AXIS_PADDING = 1.1  # axis is 10% wider and taller than the data
VERTEX_MARKER_RATIO = 30.0  # marker diameter = data height / ratio

Bounds = Tuple[Point, Point]


def _default_axis_stroke() -> Stroke:
    return Stroke(0.5, ColorName.PURPLE)


class LineChart(Shape):
    """
    Composite shape drawing polylines with vertex markers and an L-shaped axis.

    Polylines are copied on append. The chart's own fill and stroke are not
    drawn; each polyline keeps its own paint.
    """

    shape_type = ShapeType.LINE_CHART

    def __init__(
        self,
        margin: Optional[Union[Dimensions, float]] = None,
        scale: float = 1,
        axis_stroke: Optional[Stroke] = None
    ):
        """
        Initialize a line chart.

        Args:
            margin: Offset of the axis corner from the user-space origin;
                a bare number gives equal horizontal and vertical margins
            scale: Chart scale factor (stored, not applied)
            axis_stroke: Stroke used for the axis (purple, 0.5 by default)
        """
        super().__init__()
        if margin is None:
            margin = Dimensions()
        elif not isinstance(margin, Dimensions):
            margin = Dimensions(margin)
        self.margin = margin
        self.scale = scale
        self.axis_stroke = axis_stroke if axis_stroke is not None else _default_axis_stroke()
        self.polylines: List[Polyline] = []

    def append(self, polyline: Polyline) -> Self:
        """
        Add a polyline to the chart.

        A polyline without points is ignored.

        Returns:
            Self for method chaining
        """
        if not polyline.points:
            logger.debug("Ignoring empty polyline appended to line chart")
            return self
        self.polylines.append(polyline.copy())
        return self

    def __len__(self) -> int:
        return len(self.polylines)

    def get_bounds(self) -> Optional[Bounds]:
        """
        Overall minimum and maximum corners of all stored polylines.

        Returns:
            (min_point, max_point), or None when the chart holds no data
        """
        if not self.polylines:
            return None

        low = get_min_point(self.polylines[0].points)
        high = get_max_point(self.polylines[0].points)
        for polyline in self.polylines[1:]:
            poly_low = get_min_point(polyline.points)
            poly_high = get_max_point(polyline.points)
            low = Point(min(low.x, poly_low.x), min(low.y, poly_low.y))
            high = Point(max(high.x, poly_high.x), max(high.y, poly_high.y))

        return low, high

    def get_dimensions(self) -> Optional[Dimensions]:
        """Width and height of the data, or None when the chart is empty."""
        bounds = self.get_bounds()
        if bounds is None:
            return None
        low, high = bounds
        return Dimensions(high.x - low.x, high.y - low.y)

    def serialize(self, layout: Layout) -> str:
        dimensions = self.get_dimensions()
        if dimensions is None:
            return ""

        fragments = [
            self._polyline_to_string(polyline, dimensions, layout)
            for polyline in self.polylines
        ]
        fragments.append(self._axis_to_string(dimensions, layout))
        return "".join(fragments)

    def translate(self, offset: Point) -> None:
        for polyline in self.polylines:
            polyline.translate(offset)

    def _margin_offset(self) -> Point:
        return Point(self.margin.width, self.margin.height)

    def _axis_to_string(self, dimensions: Dimensions, layout: Layout) -> str:
        width = dimensions.width * AXIS_PADDING
        height = dimensions.height * AXIS_PADDING

        # Vertical leg, corner, horizontal leg
        axis = Polyline(fill=ColorName.TRANSPARENT, stroke=self.axis_stroke)
        axis.append(Point(self.margin.width, self.margin.height + height))
        axis.append(Point(self.margin.width, self.margin.height))
        axis.append(Point(self.margin.width + width, self.margin.height))

        return axis.serialize(layout)

    def _polyline_to_string(self, polyline: Polyline, dimensions: Dimensions, layout: Layout) -> str:
        shifted = polyline.copy()
        shifted.translate(self._margin_offset())

        marker_diameter = dimensions.height / VERTEX_MARKER_RATIO
        vertices = [
            Circle(pt, marker_diameter, ColorName.BLACK)
            for pt in shifted.points
        ]

        return shifted.serialize(layout) + "".join(v.serialize(layout) for v in vertices)

    def __repr__(self) -> str:
        return f"LineChart(margin={self.margin!r}, polylines={len(self.polylines)})"
