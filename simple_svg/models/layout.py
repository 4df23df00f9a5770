"""
Layout Module
=============
Document layout (canvas size, origin corner, scale, offset) and the
functions that map user-space values into document space.
"""

from dataclasses import dataclass, field
from enum import Enum

from simple_svg.models.geometry import Dimensions, Point


class Origin(Enum):
    """Corner of the canvas that user-space (0, 0) maps to."""
    TOP_LEFT = "top_left"
    BOTTOM_LEFT = "bottom_left"
    TOP_RIGHT = "top_right"
    BOTTOM_RIGHT = "bottom_right"


_RIGHT_ORIGINS = (Origin.TOP_RIGHT, Origin.BOTTOM_RIGHT)
_BOTTOM_ORIGINS = (Origin.BOTTOM_LEFT, Origin.BOTTOM_RIGHT)


@dataclass(frozen=True)
class Layout:
    """
    Immutable transform configuration shared by every serialize call.

    Attributes:
        dimensions: Canvas size in document units
        origin: Corner used as user-space origin
        scale: Uniform multiplier applied to coordinates and lengths
        origin_offset: User-space shift applied before scaling

    The layout keeps its own copies of ``dimensions`` and ``origin_offset``,
    so later changes to the objects passed in do not affect it.
    """
    dimensions: Dimensions = field(default_factory=lambda: Dimensions(400, 300))
    origin: Origin = Origin.BOTTOM_LEFT
    scale: float = 1.0
    origin_offset: Point = field(default_factory=Point)

    def __post_init__(self):
        dims = self.dimensions
        offset = self.origin_offset
        object.__setattr__(self, "dimensions", Dimensions(dims.width, dims.height))
        object.__setattr__(self, "origin_offset", Point(offset.x, offset.y))

    def __hash__(self) -> int:
        return hash((
            self.dimensions.width, self.dimensions.height,
            self.origin, self.scale,
            self.origin_offset.x, self.origin_offset.y,
        ))


def translate_x(x: float, layout: Layout) -> float:
    """Map a user-space x coordinate into document space."""
    if layout.origin in _RIGHT_ORIGINS:
        return float(layout.dimensions.width - ((x + layout.origin_offset.x) * layout.scale))
    return float((layout.origin_offset.x + x) * layout.scale)


def translate_y(y: float, layout: Layout) -> float:
    """Map a user-space y coordinate into document space."""
    if layout.origin in _BOTTOM_ORIGINS:
        return float(layout.dimensions.height - ((y + layout.origin_offset.y) * layout.scale))
    return float((layout.origin_offset.y + y) * layout.scale)


def translate_scale(length: float, layout: Layout) -> float:
    """Scale a length; lengths do not depend on the origin corner."""
    return float(length * layout.scale)
