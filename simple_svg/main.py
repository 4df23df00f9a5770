"""
Demo Entry Point
================
Builds the sample scene (border, two line charts, circle, text, polygon,
rectangle), writes it to disk and prints how long it took in milliseconds.
"""

import sys
import argparse
from typing import List, Optional

from simple_svg.core import CONFIG, Profiler
from simple_svg.generation.document import Document
from simple_svg.models.chart import LineChart
from simple_svg.models.color import Color, ColorName
from simple_svg.models.geometry import Dimensions, Point
from simple_svg.models.layout import Layout, Origin
from simple_svg.models.shape import Circle, Polygon, Polyline, Rectangle, Text
from simple_svg.models.style import Fill, Font, Stroke
from simple_svg.utils.logger import setup_logger, get_logger

logger = get_logger(__name__)


def build_demo_document(file_name: str) -> Document:
    """
    Compose the sample scene.

    Args:
        file_name: Destination path of the document

    Returns:
        Document with every sample shape appended
    """
    dimensions = Dimensions(100, 100)
    doc = Document(file_name, Layout(dimensions, Origin.BOTTOM_LEFT))

    # Red image border
    border = Polygon(stroke=Stroke(1, ColorName.RED))
    border.extend([
        Point(0, 0),
        Point(dimensions.width, 0),
        Point(dimensions.width, dimensions.height),
        Point(0, dimensions.height),
    ])
    doc.append(border)

    chart = LineChart(5.0)
    polyline_a = Polyline(stroke=Stroke(.5, ColorName.BLUE))
    polyline_b = Polyline(stroke=Stroke(.5, ColorName.AQUA))
    polyline_c = Polyline(stroke=Stroke(.5, ColorName.FUCHSIA))
    polyline_a += [(0, 0), (10, 30), (20, 40), (30, 45), (40, 44)]
    polyline_b += [(0, 10), (10, 22), (20, 30), (30, 32), (40, 30)]
    polyline_c += [(0, 12), (10, 15), (20, 14), (30, 10), (40, 2)]
    chart.append(polyline_a).append(polyline_b).append(polyline_c)
    doc.append(chart)

    doc.append(
        LineChart(Dimensions(65, 5))
        .append(Polyline([(0, 0), (10, 8), (20, 13)], stroke=Stroke(.5, ColorName.BLUE)))
        .append(Polyline([(0, 10), (10, 16), (20, 20)], stroke=Stroke(.5, ColorName.ORANGE)))
        .append(Polyline([(0, 5), (10, 13), (20, 16)], stroke=Stroke(.5, ColorName.CYAN)))
    )

    doc.append(Circle(
        Point(80, 80),
        20,
        Fill(Color(100, 200, 120)),
        Stroke(1, Color(200, 250, 150))
    ))

    doc.append(Text(
        Point(5, 77),
        "Simple SVG",
        ColorName.SILVER,
        Font(10, "Verdana")
    ))

    doc.append(
        Polygon(
            [(20, 70), (25, 72), (33, 70), (35, 60), (25, 55), (18, 63)],
            fill=Color(200, 160, 220),
            stroke=Stroke(.5, Color(150, 160, 200))
        )
    )

    doc.append(Rectangle(Point(70, 55), 20, 15, ColorName.YELLOW))

    return doc


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Write the simple_svg sample document")
    parser.add_argument("--output", "-o", default=CONFIG["default_output"],
                        help="Path of the SVG file to write")
    parser.add_argument("--log-level", default=CONFIG["log_level"],
                        help="Logging level (DEBUG, INFO, WARNING, ERROR)")
    parser.add_argument("--log-file", default=None,
                        help="Optional log file")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Run the demo; returns a process exit code."""
    args = parse_args(argv)
    setup_logger(args.log_level, args.log_file)

    with Profiler("demo") as profiler:
        doc = build_demo_document(args.output)
        saved = doc.save()

    print(f"{profiler.elapsed_ms:f}")

    if not saved:
        logger.error(f"Could not write {args.output}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
