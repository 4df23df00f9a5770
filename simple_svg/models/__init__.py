"""
simple_svg - Data Models
========================
Geometry, layout, styling and shape models.
"""

from simple_svg.models.geometry import (
    Point, Dimensions, get_min_point, get_max_point
)
from simple_svg.models.layout import (
    Origin, Layout, translate_x, translate_y, translate_scale
)
from simple_svg.models.color import (
    ColorName, Color, DEFAULT_COLORS
)
from simple_svg.models.style import (
    Fill, Stroke, Font
)
from simple_svg.models.shape import (
    ShapeType, ShapeError, Shape,
    Circle, Ellipse, Rectangle, Line, Polygon, Polyline, Text
)
from simple_svg.models.chart import LineChart

__all__ = [
    'Point', 'Dimensions', 'get_min_point', 'get_max_point',
    'Origin', 'Layout', 'translate_x', 'translate_y', 'translate_scale',
    'ColorName', 'Color', 'DEFAULT_COLORS',
    'Fill', 'Stroke', 'Font',
    'ShapeType', 'ShapeError', 'Shape',
    'Circle', 'Ellipse', 'Rectangle', 'Line', 'Polygon', 'Polyline', 'Text',
    'LineChart'
]
