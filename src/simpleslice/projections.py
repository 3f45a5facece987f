## projection and intersection predicates for simpleslice
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

"""Projection, orientation and intersection predicates.

Everything here is a pure function of its arguments.  Points are
:class:`simpleslice.geom.Point` instances; the ``*_2d`` predicates look
only at x and y.
"""

from __future__ import annotations

from dataclasses import dataclass

from simpleslice.geom import Point, clamp_unit, cross, dot, epsilon, mag, sign


def project_point_on_line(p: Point, a: Point, b: Point) -> Point:
    """Return the point on the infinite line through ``a`` and ``b`` closest to ``p``.

    If ``a`` and ``b`` coincide the line degenerates to a point and ``a``
    is returned.  The result may lie outside the segment ``[a, b]``; use
    :func:`project_point_on_segment` to clamp.
    """
    direction = b - a
    length_sq = dot(direction, direction)
    if abs(length_sq) <= epsilon:
        return a
    t = dot(p - a, direction) / length_sq
    return a + direction * t


def project_point_on_segment(p: Point, a: Point, b: Point) -> Point:
    """Return the point on the closed segment ``[a, b]`` closest to ``p``."""
    direction = b - a
    length_sq = dot(direction, direction)
    if abs(length_sq) <= epsilon:
        return a
    t = clamp_unit(dot(p - a, direction) / length_sq)
    return a + direction * t


def orient2d(a: Point, b: Point, c: Point) -> float:
    """2D orientation test: z component of ``(b - a) x (c - a)``.

    Positive for a counter-clockwise turn ``a -> b -> c``, negative for
    clockwise, zero for collinear points.  The magnitude is twice the
    area of triangle ``abc``.
    """
    return (b.x - a.x) * (c.y - a.y) - (b.y - a.y) * (c.x - a.x)


signed_area_2d = orient2d


## axis-aligned bounding boxes
## ---------------------------


@dataclass(frozen=True)
class BoundingBox2D:
    """Axis-aligned bounding box in the XY plane."""

    min_x: float
    min_y: float
    max_x: float
    max_y: float


@dataclass(frozen=True)
class BoundingBox:
    """Axis-aligned bounding box in XYZ space."""

    min_x: float
    min_y: float
    min_z: float
    max_x: float
    max_y: float
    max_z: float


def bbox2d(a: Point, b: Point, pad: float = epsilon) -> BoundingBox2D:
    """XY bounding box of segment ``[a, b]`` grown by ``pad`` on every side."""
    return BoundingBox2D(min(a.x, b.x) - pad, min(a.y, b.y) - pad,
                         max(a.x, b.x) + pad, max(a.y, b.y) + pad)


def bbox3d(a: Point, b: Point, pad: float = epsilon) -> BoundingBox:
    """XYZ bounding box of segment ``[a, b]`` grown by ``pad`` on every side."""
    return BoundingBox(min(a.x, b.x) - pad, min(a.y, b.y) - pad, min(a.z, b.z) - pad,
                       max(a.x, b.x) + pad, max(a.y, b.y) + pad, max(a.z, b.z) + pad)


def contains_point_2d(box: BoundingBox2D, p: Point) -> bool:
    """ does point ``p`` lie inside (or on the boundary of) ``box``?"""
    return box.min_x <= p.x <= box.max_x and box.min_y <= p.y <= box.max_y


def contains_point_3d(box: BoundingBox, p: Point) -> bool:
    """ does point ``p`` lie inside (or on the boundary of) 3D ``box``?"""
    return (box.min_x <= p.x <= box.max_x and
            box.min_y <= p.y <= box.max_y and
            box.min_z <= p.z <= box.max_z)


## segment predicates
## ------------------


def on_segment_2d(a: Point, b: Point, p: Point) -> bool:
    """Does ``p`` lie on the closed segment ``[a, b]`` in the XY plane?"""
    if abs(orient2d(a, b, p)) > epsilon:
        return False
    return contains_point_2d(bbox2d(a, b), p)


def on_segment_3d(a: Point, b: Point, p: Point) -> bool:
    """Does ``p`` lie on the closed segment ``[a, b]`` in space?"""
    if mag(cross(b - a, p - a)) > epsilon:
        return False
    return contains_point_3d(bbox3d(a, b), p)


def segments_intersect_2d(a: Point, b: Point, c: Point, d: Point) -> bool:
    """Do the closed segments ``[a, b]`` and ``[c, d]`` intersect in XY?

    Proper crossings, touching endpoints, T-junctions and overlapping
    collinear segments all count as intersections.
    """
    ab_c = sign(orient2d(a, b, c))
    ab_d = sign(orient2d(a, b, d))
    cd_a = sign(orient2d(c, d, a))
    cd_b = sign(orient2d(c, d, b))

    if ab_c * ab_d < 0 and cd_a * cd_b < 0:
        return True

    ## collinear or touching
    if ab_c == 0 and on_segment_2d(a, b, c):
        return True
    if ab_d == 0 and on_segment_2d(a, b, d):
        return True
    if cd_a == 0 and on_segment_2d(c, d, a):
        return True
    if cd_b == 0 and on_segment_2d(c, d, b):
        return True
    return False


__all__ = [
    "project_point_on_line",
    "project_point_on_segment",
    "orient2d",
    "signed_area_2d",
    "BoundingBox2D",
    "BoundingBox",
    "bbox2d",
    "bbox3d",
    "contains_point_2d",
    "contains_point_3d",
    "on_segment_2d",
    "on_segment_3d",
    "segments_intersect_2d",
]
