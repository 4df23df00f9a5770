"""
Tests for geometry primitives and the layout transform.
"""

import dataclasses
import unittest

from simple_svg.models.geometry import Point, Dimensions, get_min_point, get_max_point
from simple_svg.models.layout import (
    Origin, Layout, translate_x, translate_y, translate_scale
)


class TestGeometry(unittest.TestCase):
    """Tests for Point, Dimensions and the min/max helpers."""

    def test_square_dimensions(self):
        """A single argument sets both sides."""
        dims = Dimensions(5)
        self.assertEqual(dims.width, 5)
        self.assertEqual(dims.height, 5)
        self.assertEqual(Dimensions(), Dimensions(0, 0))

    def test_point_translate_accumulates(self):
        point = Point(1, 2)
        point.translate(Point(3, 4))
        point.translate(Point(3, 4))
        self.assertEqual(point, Point(7, 10))

    def test_point_add_returns_new_point(self):
        a = Point(1, 1)
        b = a + Point(2, 3)
        self.assertEqual(b, Point(3, 4))
        self.assertEqual(a, Point(1, 1))

    def test_point_coerce(self):
        self.assertEqual(Point.coerce((2, 3)), Point(2, 3))
        original = Point(1, 1)
        copied = Point.coerce(original)
        self.assertEqual(copied, original)
        self.assertIsNot(copied, original)
        with self.assertRaises(ValueError):
            Point.coerce((1, 2, 3))

    def test_min_max_points(self):
        points = [Point(3, 1), Point(-1, 5), Point(2, -4)]
        self.assertEqual(get_min_point(points), Point(-1, -4))
        self.assertEqual(get_max_point(points), Point(3, 5))
        # The inputs are left untouched
        self.assertEqual(points[0], Point(3, 1))

    def test_min_max_of_nothing(self):
        self.assertIsNone(get_min_point([]))
        self.assertIsNone(get_max_point([]))


class TestLayout(unittest.TestCase):
    """Tests for Layout defaults and the coordinate transform."""

    def setUp(self):
        """Set up one layout per origin corner."""
        self.dims = Dimensions(100, 100)
        self.layouts = {origin: Layout(self.dims, origin) for origin in Origin}

    def test_defaults(self):
        layout = Layout()
        self.assertEqual(layout.dimensions, Dimensions(400, 300))
        self.assertEqual(layout.origin, Origin.BOTTOM_LEFT)
        self.assertEqual(layout.scale, 1)
        self.assertEqual(layout.origin_offset, Point(0, 0))

    def test_layout_is_frozen(self):
        layout = Layout()
        with self.assertRaises(dataclasses.FrozenInstanceError):
            layout.scale = 2

    def test_bottom_left_flips_y(self):
        layout = self.layouts[Origin.BOTTOM_LEFT]
        self.assertEqual(translate_y(0, layout), 100)
        self.assertEqual(translate_y(100, layout), 0)
        self.assertEqual(translate_x(10, layout), 10)

    def test_top_left_is_identity(self):
        layout = self.layouts[Origin.TOP_LEFT]
        self.assertEqual(translate_x(10, layout), 10)
        self.assertEqual(translate_y(10, layout), 10)

    def test_top_right_flips_x(self):
        layout = self.layouts[Origin.TOP_RIGHT]
        self.assertEqual(translate_x(10, layout), 90)
        self.assertEqual(translate_y(10, layout), 10)

    def test_bottom_right_flips_both(self):
        layout = self.layouts[Origin.BOTTOM_RIGHT]
        self.assertEqual(translate_x(10, layout), 90)
        self.assertEqual(translate_y(10, layout), 90)

    def test_offset_is_applied_before_scale(self):
        layout = Layout(self.dims, Origin.TOP_LEFT, 2, Point(5, 5))
        self.assertEqual(translate_x(10, layout), 30)
        self.assertEqual(translate_y(0, layout), 10)

        flipped = Layout(self.dims, Origin.BOTTOM_LEFT, 2, Point(1, 2))
        self.assertEqual(translate_y(3, flipped), 90)

    def test_scale_ignores_origin(self):
        results = {
            translate_scale(10, Layout(self.dims, origin, 2.5, Point(7, 9)))
            for origin in Origin
        }
        self.assertEqual(results, {25.0})

    def test_results_are_floats(self):
        layout = self.layouts[Origin.TOP_LEFT]
        self.assertIsInstance(translate_x(1, layout), float)
        self.assertIsInstance(translate_y(1, layout), float)
        self.assertIsInstance(translate_scale(1, layout), float)

    def test_layout_copies_its_inputs(self):
        """Changing the objects passed in does not move the layout."""
        dims = Dimensions(100, 100)
        offset = Point(0, 0)
        layout = Layout(dims, Origin.BOTTOM_LEFT, 1, offset)
        dims.height = 500
        offset.y = 7
        self.assertEqual(translate_y(0, layout), 100.0)
        self.assertEqual(layout.dimensions.height, 100)
        self.assertEqual(layout.origin_offset.y, 0)

    def test_layout_is_hashable(self):
        layout = Layout(Dimensions(100, 100), Origin.BOTTOM_LEFT)
        same = Layout(Dimensions(100, 100), Origin.BOTTOM_LEFT)
        self.assertEqual(hash(layout), hash(same))
        self.assertEqual(len({layout, same}), 1)
        self.assertEqual({layout: "a"}[same], "a")


if __name__ == "__main__":
    unittest.main()
