"""
Style Value Objects
===================
Fill, stroke and font attribute bundles. Stroke width and font size scale
with the document layout; colors never do.
"""

from typing import Optional, Union

from simple_svg.models.color import Color, ColorName
from simple_svg.models.layout import Layout, translate_scale
from simple_svg.utils.markup import attribute

ColorLike = Union[Color, ColorName, int, None]


class Fill:
    """Fill paint of a shape; transparent unless told otherwise."""

    __slots__ = ('color',)

    def __init__(self, color: ColorLike = None):
        self.color = Color.coerce(color)

    def serialize(self, layout: Layout) -> str:
        return attribute("fill", self.color.serialize(layout))

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Fill) and self.color == other.color

    def __repr__(self) -> str:
        return f"Fill({self.color!r})"


class Stroke:
    """
    Outline of a shape.

    A negative width is the "no stroke" sentinel: nothing is written for it.
    """

    __slots__ = ('width', 'color')

    def __init__(self, width: float = -1, color: ColorLike = None):
        """
        Initialize a stroke.

        Args:
            width: Stroke width in user units; negative omits the stroke
            color: Stroke color (transparent by default)
        """
        self.width = width
        self.color = Color.coerce(color)

    @property
    def is_visible(self) -> bool:
        return self.width >= 0

    def serialize(self, layout: Layout) -> str:
        if not self.is_visible:
            return ""
        return (
            attribute("stroke-width", translate_scale(self.width, layout)) +
            attribute("stroke", self.color.serialize(layout))
        )

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, Stroke) and
            self.width == other.width and
            self.color == other.color
        )

    def __repr__(self) -> str:
        return f"Stroke({self.width!r}, {self.color!r})"


class Font:
    """Font size and family for text elements."""

    __slots__ = ('size', 'family')

    def __init__(self, size: float = 12, family: Optional[str] = "Verdana"):
        self.size = size
        self.family = family if family is not None else "Verdana"

    def serialize(self, layout: Layout) -> str:
        return (
            attribute("font-size", translate_scale(self.size, layout)) +
            attribute("font-family", self.family)
        )

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, Font) and
            self.size == other.size and
            self.family == other.family
        )

    def __repr__(self) -> str:
        return f"Font({self.size!r}, {self.family!r})"
