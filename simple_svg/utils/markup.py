"""
String helpers shared by every serializer.
Each attribute is written as name="value" followed by a single space.
"""

from typing import Any

from simple_svg.core import CONFIG


def format_number(value: float) -> str:
    """
    Format a document-space number with the configured fixed precision.

    Digits past ``CONFIG["number_precision"]`` are rounded away. With the
    default of 2, anything under 0.005 prints as "0.00"; a line chart whose
    data is less than 0.3 units tall gets zero-radius vertex markers.
    Raise the precision (or the layout scale) for such small geometry.

    Args:
        value: Number to format

    Returns:
        Fixed-point string, e.g. "80.00"
    """
    # Avoid emitting "-0.00"
    if value == 0:
        value = 0.0
    return f"{value:.{CONFIG['number_precision']}f}"


def format_length(value: float) -> str:
    """Format a canvas length compactly ("100", "12.5")."""
    return f"{value:g}"


def attribute(name: str, value: Any, unit: str = "") -> str:
    """
    Render a single attribute.

    Args:
        name: Attribute name
        value: Attribute value; numbers go through format_number
        unit: Optional unit suffix appended to the value

    Returns:
        Attribute text with a trailing space
    """
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        value = format_number(value)
    return f'{name}="{value}{unit}" '


def elem_start(name: str) -> str:
    return f"\t<{name} "


def elem_end(name: str) -> str:
    return f"</{name}>\n"


def empty_elem_end() -> str:
    return "/>\n"
