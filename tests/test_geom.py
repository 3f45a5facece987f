import dataclasses
import math

import pytest
from simpleslice.geom import *
## unit tests for simpleslice geom.py

class TestScalars:
    """unit tests for scalar helpers"""

    def test_sign(self):
        assert sign(1.0) == 1
        assert sign(-1.0) == -1
        assert sign(0.0) == 0
        assert sign(epsilon / 2) == 0
        assert sign(-epsilon / 2) == 0
        assert sign(0.05, tolerance=0.1) == 0
        assert sign(0.2, tolerance=0.1) == 1

    def test_clamp_unit(self):
        assert clamp_unit(-0.5) == 0.0
        assert clamp_unit(0.25) == 0.25
        assert clamp_unit(1.5) == 1.0
        assert clamp_unit(0.0) == 0.0
        assert clamp_unit(1.0) == 1.0

    def test_close(self):
        assert close(1.0, 1.0 + epsilon / 2)
        assert not close(1.0, 1.0 + 1e-6)
        assert close(1.0, 1.05, tol=0.1)


class TestPoint:
    """unit tests for the Point value type"""

    def test_create(self):
        a = Point(5, 0)
        b = Point(0, 5, -2)
        assert a == Point(5.0, 0.0, 0.0)
        assert (b.x, b.y, b.z) == (0, 5, -2)
        assert Point() == Point(0, 0, 0)
        assert Vector is Point

    def test_immutable(self):
        a = Point(1, 2, 3)
        with pytest.raises(dataclasses.FrozenInstanceError):
            a.x = 4

    def test_arithmetic(self):
        a = Point(1, 2, 3)
        b = Point(4, 5, 6)
        assert a + b == Point(5, 7, 9)
        assert b - a == Point(3, 3, 3)
        assert a * 2 == Point(2, 4, 6)
        assert 2 * a == Point(2, 4, 6)
        assert -a == Point(-1, -2, -3)

    def test_unpack_and_format(self):
        x, y, z = Point(1.5, -2.0, 3.0)
        assert (x, y, z) == (1.5, -2.0, 3.0)
        assert str(Point(1, 2, 3)) == '(1, 2, 3)'

    def test_to_xy(self):
        assert to_xy(Point(1, 2, 3)) == Point(1, 2, 0)


class TestOperations:
    def test_vect(self):
        a = Point(5, 0)
        b = Point(0, 5)
        c = Point(-3, -3)
        d = Point(1, 1)
        assert close(mag(a), 5.0)
        assert vclose(a + b, Point(5, 5))
        assert vclose(a - b, Point(5, -5))
        assert close(dot(a, b), 0)
        assert close(dot(d, c), -6)
        assert vclose(cross(a, b), Point(0, 0, 25))
        assert vclose(cross(b, a), Point(0, 0, -25))
        assert close(dist(a, b), math.sqrt(50))

    def test_cross_is_orthogonal(self):
        a = Point(1, 2, 3)
        b = Point(-2, 0.5, 4)
        c = cross(a, b)
        assert math.isclose(dot(c, a), 0.0, abs_tol=1e-12)
        assert math.isclose(dot(c, b), 0.0, abs_tol=1e-12)

    def test_points_close_xy(self):
        a = Point(1, 1, 0)
        assert points_close_xy(a, Point(1 + epsilon / 2, 1, 5))
        assert not points_close_xy(a, Point(1.001, 1, 0))
        assert points_close_xy(a, Point(1.001, 0.999, 0), tol=0.01)
        # per-axis test: the diagonal may exceed tol while each axis does not
        assert points_close_xy(a, Point(1.009, 1.009), tol=0.01)
