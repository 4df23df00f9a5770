"""
Color model for SVG output.
Supports explicit RGB colors and a fixed table of named defaults.
"""

from enum import IntEnum
from typing import Dict, Optional, Tuple, Union

from simple_svg.utils.logger import get_logger

# Configure logger
logger = get_logger(__name__)

# Type definitions
RGB = Tuple[int, int, int]


class ColorName(IntEnum):
    """Named default colors; TRANSPARENT is the "no color" sentinel."""
    TRANSPARENT = -1
    AQUA = 0
    BLACK = 1
    BLUE = 2
    BROWN = 3
    CYAN = 4
    FUCHSIA = 5
    GREEN = 6
    LIME = 7
    MAGENTA = 8
    ORANGE = 9
    PURPLE = 10
    RED = 11
    SILVER = 12
    WHITE = 13
    YELLOW = 14


# Process-wide lookup table for named defaults
DEFAULT_COLORS: Dict[ColorName, RGB] = {
    ColorName.AQUA: (0, 255, 255),
    ColorName.BLACK: (0, 0, 0),
    ColorName.BLUE: (0, 0, 255),
    ColorName.BROWN: (165, 42, 42),
    ColorName.CYAN: (0, 255, 255),
    ColorName.FUCHSIA: (255, 0, 255),
    ColorName.GREEN: (0, 128, 0),
    ColorName.LIME: (0, 255, 0),
    ColorName.MAGENTA: (255, 0, 255),
    ColorName.ORANGE: (255, 165, 0),
    ColorName.PURPLE: (128, 0, 128),
    ColorName.RED: (255, 0, 0),
    ColorName.SILVER: (192, 192, 192),
    ColorName.WHITE: (255, 255, 255),
    ColorName.YELLOW: (255, 255, 0),
}


class Color:
    """
    Immutable color value, either transparent or an RGB triple.

    Component values are stored as given; nothing is clamped.
    """

    __slots__ = ('_transparent', '_r', '_g', '_b')

    def __init__(self, red: int = 0, green: int = 0, blue: int = 0, transparent: bool = False):
        """
        Initialize a color.

        Args:
            red: Red component (0-255)
            green: Green component (0-255)
            blue: Blue component (0-255)
            transparent: Whether the color is the transparent sentinel
        """
        self._transparent = transparent
        self._r = int(red)
        self._g = int(green)
        self._b = int(blue)

    @classmethod
    def from_name(cls, name: Union[ColorName, int]) -> 'Color':
        """
        Create a color from a named default.

        Unknown values, including ColorName.TRANSPARENT, give a transparent color.

        Args:
            name: ColorName member or its integer value

        Returns:
            Color instance
        """
        rgb = DEFAULT_COLORS.get(name)
        if rgb is None:
            if name != ColorName.TRANSPARENT:
                logger.debug(f"Unknown color default {name!r}, using transparent")
            return cls.transparent()
        return cls(*rgb)

    @classmethod
    def transparent(cls) -> 'Color':
        """Create the transparent color."""
        return cls(transparent=True)

    @classmethod
    def coerce(cls, value: Optional[Union['Color', ColorName, int]]) -> 'Color':
        """
        Normalize a color argument.

        Args:
            value: Color, ColorName, integer default value, or None for transparent

        Returns:
            Color instance
        """
        if value is None:
            return cls.transparent()
        if isinstance(value, Color):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            return cls.from_name(value)
        raise TypeError(f"Cannot interpret {value!r} as a color")

    @property
    def is_transparent(self) -> bool:
        return self._transparent

    @property
    def red(self) -> int:
        return self._r

    @property
    def green(self) -> int:
        return self._g

    @property
    def blue(self) -> int:
        return self._b

    @property
    def rgb(self) -> RGB:
        return (self._r, self._g, self._b)

    def serialize(self, layout=None) -> str:
        """
        Render the color as an SVG paint value.

        The layout is accepted for interface symmetry; colors do not scale.

        Returns:
            "transparent" or "rgb(r,g,b)"
        """
        if self._transparent:
            return "transparent"
        return f"rgb({self._r},{self._g},{self._b})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return False
        if self._transparent or other._transparent:
            return self._transparent == other._transparent
        return self.rgb == other.rgb

    def __hash__(self) -> int:
        return hash((self._transparent,) if self._transparent else self.rgb)

    def __str__(self) -> str:
        return self.serialize()

    def __repr__(self) -> str:
        if self._transparent:
            return "Color.transparent()"
        return f"Color({self._r}, {self._g}, {self._b})"
