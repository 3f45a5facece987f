import dataclasses

import pytest

from simpleslice.geom import Point
from simpleslice.shapes import Circle, Layer, Rectangle, Segment2D, Triangle


class TestRectangle:
    def test_create(self):
        r = Rectangle(0, 0, 8, 6)
        assert r.width == 8
        assert r.height == 6

    def test_degenerate_allowed(self):
        r = Rectangle(1, 1, 1, 1)
        assert r.width == 0 and r.height == 0

    @pytest.mark.parametrize("args", [(2, 0, 1, 1), (0, 2, 1, 1), (3, 3, 0, 0)])
    def test_inverted_rejected(self, args):
        with pytest.raises(ValueError):
            Rectangle(*args)

    def test_immutable(self):
        r = Rectangle(0, 0, 1, 1)
        with pytest.raises(dataclasses.FrozenInstanceError):
            r.max_x = 5


class TestCircle:
    def test_create(self):
        c = Circle(1, 2, 3)
        assert (c.center_x, c.center_y, c.radius) == (1, 2, 3)

    @pytest.mark.parametrize("radius", [0, -1, -0.001])
    def test_non_positive_radius_rejected(self, radius):
        with pytest.raises(ValueError):
            Circle(0, 0, radius)


class TestTriangle:
    def test_z_extent(self):
        t = Triangle(Point(0, 0, 3), Point(1, 0, -1), Point(0, 1, 2))
        assert t.vertices == (Point(0, 0, 3), Point(1, 0, -1), Point(0, 1, 2))
        assert t.min_z == -1
        assert t.max_z == 3


class TestLayer:
    def test_paths_are_frozen(self):
        paths = [[Point(0, 0), Point(1, 0)]]
        layer = Layer(0.5, paths)
        paths[0].append(Point(2, 0))
        assert layer.paths == ((Point(0, 0), Point(1, 0)),)

    def test_default_empty(self):
        assert Layer(1.0).paths == ()
        assert Layer(1.0) == Layer(1.0, [])

    def test_closed_paths(self):
        square = [Point(0, 0), Point(1, 0), Point(1, 1), Point(0, 0)]
        open_path = [Point(0, 0), Point(1, 0)]
        layer = Layer(0.0, [square, open_path])
        assert layer.closed_paths == (tuple(square),)

    def test_segment_equality(self):
        assert Segment2D(Point(0, 0), Point(1, 1)) == Segment2D(Point(0, 0), Point(1, 1))
        assert Segment2D(Point(0, 0), Point(1, 1)) != Segment2D(Point(1, 1), Point(0, 0))
