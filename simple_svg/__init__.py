"""
simple_svg Package
==================
Compose circles, ellipses, rectangles, lines, polygons, polylines, text and
line charts in user space and write them out as an SVG 1.1 document.
"""

from simple_svg.core import CONFIG, Profiler, configure
from simple_svg.models import (
    Point, Dimensions, Origin, Layout,
    translate_x, translate_y, translate_scale,
    ColorName, Color, Fill, Stroke, Font,
    ShapeType, ShapeError, Shape,
    Circle, Ellipse, Rectangle, Line, Polygon, Polyline, Text, LineChart
)
from simple_svg.generation import Document

__version__ = "0.2.0"

__all__ = [
    'CONFIG', 'Profiler', 'configure',
    'Point', 'Dimensions', 'Origin', 'Layout',
    'translate_x', 'translate_y', 'translate_scale',
    'ColorName', 'Color', 'Fill', 'Stroke', 'Font',
    'ShapeType', 'ShapeError', 'Shape',
    'Circle', 'Ellipse', 'Rectangle', 'Line', 'Polygon', 'Polyline', 'Text',
    'LineChart', 'Document'
]
