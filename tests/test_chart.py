"""
Tests for the LineChart composite shape.
"""

import unittest

from simple_svg.core import CONFIG, configure
from simple_svg.models.chart import LineChart
from simple_svg.models.color import ColorName
from simple_svg.models.geometry import Dimensions, Point
from simple_svg.models.layout import Layout, Origin
from simple_svg.models.shape import Polyline
from simple_svg.models.style import Stroke


class TestLineChart(unittest.TestCase):
    """Tests for the LineChart class."""

    def setUp(self):
        """Set up a top-left layout so document space equals user space."""
        self.layout = Layout(Dimensions(100, 100), Origin.TOP_LEFT)

    def _polyline(self, points, color=ColorName.BLUE):
        return Polyline(points, stroke=Stroke(1, color))

    def test_empty_chart(self):
        chart = LineChart()
        self.assertEqual(chart.serialize(self.layout), "")
        self.assertIsNone(chart.get_bounds())
        self.assertIsNone(chart.get_dimensions())

    def test_empty_polyline_is_ignored(self):
        chart = LineChart()
        chart.append(Polyline())
        self.assertEqual(len(chart), 0)
        self.assertEqual(chart.serialize(self.layout), "")

        chart.append(self._polyline([(0, 0), (30, 30)]))
        before = chart.serialize(self.layout)
        chart.append(Polyline())
        self.assertEqual(chart.serialize(self.layout), before)
        self.assertEqual(len(chart), 1)

    def test_bounds_span_all_polylines(self):
        chart = LineChart()
        chart.append(self._polyline([(0, 0), (10, 30), (40, 44)]))
        chart.append(self._polyline([(-5, 10), (40, 2)]))
        low, high = chart.get_bounds()
        self.assertEqual(low, Point(-5, 0))
        self.assertEqual(high, Point(40, 44))
        self.assertEqual(chart.get_dimensions(), Dimensions(45, 44))

    def test_single_polyline_output(self):
        chart = LineChart()
        chart.append(self._polyline([(0, 0), (30, 30)]))
        self.assertEqual(
            chart.serialize(self.layout),
            '\t<polyline points="0.00,0.00 30.00,30.00 " fill="transparent" '
            'stroke-width="1.00" stroke="rgb(0,0,255)" />\n'
            '\t<circle cx="0.00" cy="0.00" r="0.50" fill="rgb(0,0,0)" />\n'
            '\t<circle cx="30.00" cy="30.00" r="0.50" fill="rgb(0,0,0)" />\n'
            '\t<polyline points="0.00,33.00 0.00,0.00 33.00,0.00 " fill="transparent" '
            'stroke-width="0.50" stroke="rgb(128,0,128)" />\n'
        )

    def test_margin_shifts_data_and_axis(self):
        chart = LineChart(5.0)
        self.assertEqual(chart.margin, Dimensions(5, 5))
        chart.append(self._polyline([(0, 0), (30, 30)]))
        markup = chart.serialize(self.layout)
        self.assertIn('points="5.00,5.00 35.00,35.00 "', markup)
        self.assertIn('<circle cx="35.00" cy="35.00"', markup)
        self.assertIn('points="5.00,38.00 5.00,5.00 38.00,5.00 "', markup)

    def test_uneven_margin(self):
        chart = LineChart(Dimensions(65, 5))
        chart.append(self._polyline([(0, 0), (20, 10)]))
        markup = chart.serialize(self.layout)
        self.assertIn('points="65.00,5.00 85.00,15.00 "', markup)
        self.assertIn('points="65.00,16.00 65.00,5.00 87.00,5.00 "', markup)

    def test_axis_is_emitted_last(self):
        chart = LineChart()
        chart.append(self._polyline([(0, 0), (10, 10)], ColorName.BLUE))
        chart.append(self._polyline([(0, 5), (10, 0)], ColorName.RED))
        markup = chart.serialize(self.layout)
        blue = markup.index("rgb(0,0,255)")
        red = markup.index("rgb(255,0,0)")
        axis = markup.index("rgb(128,0,128)")
        self.assertLess(blue, red)
        self.assertLess(red, axis)
        self.assertTrue(markup.endswith("/>\n"))
        self.assertEqual(markup.count("<polyline"), 3)
        self.assertEqual(markup.count("<circle"), 4)

    def test_custom_axis_stroke(self):
        chart = LineChart(axis_stroke=Stroke(2, ColorName.GREEN))
        chart.append(self._polyline([(0, 0), (10, 10)]))
        self.assertIn('stroke-width="2.00" stroke="rgb(0,128,0)"', chart.serialize(self.layout))

    def test_append_copies_polyline(self):
        chart = LineChart()
        polyline = self._polyline([(0, 0), (30, 30)])
        chart.append(polyline)
        before = chart.serialize(self.layout)
        polyline.append((90, 90))
        polyline.translate(Point(1, 1))
        self.assertEqual(chart.serialize(self.layout), before)

    def test_serialize_is_repeatable(self):
        chart = LineChart(5.0)
        chart.append(self._polyline([(0, 0), (30, 30)]))
        self.assertEqual(chart.serialize(self.layout), chart.serialize(self.layout))

    def test_translate_moves_data(self):
        chart = LineChart()
        chart.append(self._polyline([(0, 0), (30, 30)]))
        chart.translate(Point(10, 10))
        low, high = chart.get_bounds()
        self.assertEqual(low, Point(10, 10))
        self.assertEqual(high, Point(40, 40))

    def test_append_is_chainable(self):
        chart = (
            LineChart()
            .append(self._polyline([(0, 0), (1, 1)]))
            .append(self._polyline([(0, 1), (1, 0)]))
        )
        self.assertEqual(len(chart), 2)

    def test_small_data_needs_higher_precision(self):
        """Markers of very short data round to zero at the default precision."""
        chart = LineChart().append(self._polyline([(0, 0), (0.12, 0.12)]))
        self.assertIn('r="0.00"', chart.serialize(self.layout))

        original = CONFIG["number_precision"]
        self.addCleanup(configure, {"number_precision": original})
        configure({"number_precision": 4})
        self.assertIn('r="0.0020"', chart.serialize(self.layout))


if __name__ == "__main__":
    unittest.main()
