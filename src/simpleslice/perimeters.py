"""Concentric perimeter loops for simple shapes and sliced layers.

These generators approximate a 3D-printer perimeter toolpath by emitting
closed loops from the outer boundary inward, one ``spacing`` (typically
the nozzle width) apart.  Layer perimeters are computed from the layer's
XY bounding box only; they do not follow the actual contour.
"""

from __future__ import annotations

import math
from typing import List

from simpleslice.geom import Point
from simpleslice.shapes import Circle, Layer, Path, Rectangle


def generate_rectangle_perimeters(rectangle: Rectangle, spacing: float) -> List[Path]:
    """Return inward-offset rectangular loops for ``rectangle``.

    Each loop has five points (bottom-left, bottom-right, top-right,
    top-left, bottom-left again).  Non-positive ``spacing`` yields no
    loops.
    """
    paths: List[Path] = []
    if spacing <= 0:
        return paths

    min_x, min_y = rectangle.min_x, rectangle.min_y
    max_x, max_y = rectangle.max_x, rectangle.max_y

    while min_x < max_x and min_y < max_y:
        paths.append([
            Point(min_x, min_y, 0.0),
            Point(max_x, min_y, 0.0),
            Point(max_x, max_y, 0.0),
            Point(min_x, max_y, 0.0),
            Point(min_x, min_y, 0.0),
        ])
        min_x += spacing
        min_y += spacing
        max_x -= spacing
        max_y -= spacing

    return paths


def generate_circle_perimeters(circle: Circle, spacing: float,
                               num_segments: int) -> List[Path]:
    """Return inward-offset polygonal loops approximating ``circle``.

    Each loop has ``num_segments + 1`` points, the last repeating the
    first.  Non-positive ``spacing`` or fewer than three segments yields
    no loops.
    """
    paths: List[Path] = []
    if spacing <= 0 or num_segments < 3:
        return paths

    radius = circle.radius
    while radius > 0:
        path = []
        for i in range(num_segments):
            theta = 2.0 * math.pi * i / num_segments
            path.append(Point(circle.center_x + radius * math.cos(theta),
                              circle.center_y + radius * math.sin(theta),
                              0.0))
        path.append(path[0])
        paths.append(path)
        radius -= spacing

    return paths


def compute_layer_bounding_box(layer: Layer) -> Rectangle:
    """XY bounding rectangle of every point in every path of ``layer``.

    A layer without points yields the zero rectangle at the origin.
    """
    xs = [p.x for path in layer.paths for p in path]
    ys = [p.y for path in layer.paths for p in path]
    if not xs:
        return Rectangle(0.0, 0.0, 0.0, 0.0)
    return Rectangle(min(xs), min(ys), max(xs), max(ys))


def generate_layer_perimeters(layer: Layer, spacing: float) -> Layer:
    """Return a new layer at the same height holding bounding-box perimeters."""
    bbox = compute_layer_bounding_box(layer)
    return Layer(layer.z, generate_rectangle_perimeters(bbox, spacing))


__all__ = [
    "generate_rectangle_perimeters",
    "generate_circle_perimeters",
    "compute_layer_bounding_box",
    "generate_layer_perimeters",
]
