## foundational geometry primitives for simpleslice
## Copyright (c) 2026 simpleslice contributors

# Permission is hereby granted, free of charge, to any person
# obtaining a copy of this software and associated documentation files
# (the "Software"), to deal in the Software without restriction,
# including without limitation the rights to use, copy, modify, merge,
# publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so,
# subject to the following conditions:
# 
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
# 
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS
# BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN
# ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN
# CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""foundational geometry primitives for **simpleslice**

====================
OVERVIEW
====================

The simpleslice.geom module provides the scalar and vector operations
that every other part of the package is built on: a tolerance constant,
robust sign and clamp helpers, and a small immutable 3D point type with
the usual vector algebra.

constants
=========

``epsilon`` is the tolerance used for "is this zero" decisions
throughout the package.  The slicer derives its stitching tolerance
from it (see ``simpleslice.mesh_slicer``).  Redefine it at your peril.

points and vectors
==================

Points are immutable ``(x, y, z)`` triples.  The same type serves as a
direction vector, so ``Vector`` is simply an alias of ``Point``.  Points
support ``+``, ``-`` and scaling by a scalar from either side, and
unpack like tuples: ::

   p = Point(1.0, 2.0)          # z defaults to 0
   q = p + Point(0, 0, 3) * 2.0
   x, y, z = q

No rounding is ever applied to coordinates; results carry full double
precision so that downstream formatters may choose any precision.
"""

from __future__ import annotations

from dataclasses import dataclass
from math import sqrt
from typing import Iterator

## constants
epsilon = 1e-9

## operations on scalars
## -----------------------


def sign(value: float, tolerance: float = epsilon) -> int:
    """Classify ``value`` as +1, -1 or 0, treating ``|value| <= tolerance`` as zero."""
    if value > tolerance:
        return 1
    if value < -tolerance:
        return -1
    return 0


def clamp_unit(value: float) -> float:
    """Clamp ``value`` to the closed interval [0, 1]."""
    return 0.0 if value < 0.0 else (1.0 if value > 1.0 else value)


def close(a: float, b: float, tol: float = epsilon) -> bool:
    """ are two scalars the same within ``tol``
    """
    return abs(a - b) <= tol


## points and vectors
## ------------------


@dataclass(frozen=True)
class Point:
    """Immutable point (or vector) in XYZ space."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, s: float) -> Point:
        return Point(self.x * s, self.y * s, self.z * s)

    __rmul__ = __mul__

    def __neg__(self) -> Point:
        return Point(-self.x, -self.y, -self.z)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __str__(self) -> str:
        return f"({self.x}, {self.y}, {self.z})"


## vectors and points share a representation
Vector = Point


def to_xy(p: Point) -> Point:
    """Return ``p`` projected onto the z=0 plane."""
    return Point(p.x, p.y, 0.0)


## R^3 -> R^3 functions
## --------------------


def cross(a: Point, b: Point) -> Point:
    """Compute the cross product ``a x b``.

    The magnitude of the result is the area of the parallelogram spanned
    by ``a`` and ``b``; for vectors in the XY plane the z component is the
    signed area.
    """
    return Point(a.y * b.z - a.z * b.y,
                 a.z * b.x - a.x * b.z,
                 a.x * b.y - a.y * b.x)


## R^3 -> R functions
## ------------------


def dot(a: Point, b: Point) -> float:
    """ 3 vector ``a`` dot ``b`` """
    return a.x * b.x + a.y * b.y + a.z * b.z


def mag(a: Point) -> float:
    """ compute the magnitude of 3 vector ``a``"""
    return sqrt(dot(a, a))


def dist(a: Point, b: Point) -> float:
    """ compute the euclidean distance between two points ``a`` and ``b``"""
    return mag(a - b)


## R^3 -> bool functions
## ---------------------


def vclose(a: Point, b: Point, tol: float = epsilon) -> bool:
    """ determine if two vectors are the same, to within ``tol``"""
    return dist(a, b) <= tol


def points_close_xy(a: Point, b: Point, tol: float = epsilon) -> bool:
    """Are ``a`` and ``b`` within ``tol`` of each other along both x and y?

    This is a per-axis (box) test, not a euclidean one; z is ignored.
    """
    return abs(a.x - b.x) <= tol and abs(a.y - b.y) <= tol


__all__ = [
    "epsilon",
    "sign",
    "clamp_unit",
    "close",
    "Point",
    "Vector",
    "to_xy",
    "cross",
    "dot",
    "mag",
    "dist",
    "vclose",
    "points_close_xy",
]
