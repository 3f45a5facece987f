"""Slice triangle meshes into horizontal layers of polylines.

The pipeline has three stages:

1. :func:`triangle_plane_segment` intersects one triangle with the plane
   ``Z = z`` and yields at most one XY segment.
2. :func:`stitch_segments` greedily joins the unordered segments of one
   layer into ordered polylines by matching endpoints.
3. :func:`slice_mesh` samples the mesh's Z extent at a fixed layer
   height and runs the first two stages per layer.

Degenerate input (coplanar edges or triangles, triangles that touch the
plane at a single vertex, sliver geometry) never raises; it simply
contributes no segment.
"""

from __future__ import annotations

import logging
import math
from typing import Iterable, List, Optional, Sequence, Tuple

from simpleslice.geom import Point, epsilon, points_close_xy
from simpleslice.perimeters import generate_layer_perimeters
from simpleslice.shapes import Layer, Path, Segment2D, Triangle

logger = logging.getLogger(__name__)

## endpoints are matched with a looser tolerance than the intersector
## uses, to absorb interpolation error accumulated along an edge
STITCH_TOLERANCE_FACTOR = 10.0

## padding on the layer count so that max_z is still sampled when
## (max_z - min_z) / layer_height lands just below an integer
_LAYER_COUNT_TOL = 1e-12


def add_unique_point(points: List[Point], p: Point, tol: float = epsilon) -> None:
    """Append ``p`` to ``points`` unless a point within ``tol`` (in XY) is already there."""
    for existing in points:
        if points_close_xy(existing, p, tol):
            return
    points.append(p)


def triangle_plane_segment(triangle: Triangle, z: float,
                           tol: float = epsilon) -> Optional[Segment2D]:
    """Intersect ``triangle`` with the horizontal plane at height ``z``.

    Each directed edge (a->b, b->c, c->a) is classified by the signed
    distances of its endpoints to the plane:

    * both endpoints on the plane: the edge is coplanar and is skipped
    * one endpoint on the plane: that vertex is recorded
    * endpoints on opposite sides: the crossing is linearly interpolated

    Recorded points are deduplicated in XY, so a vertex reached from two
    edges counts once.  Exactly two distinct points make a segment; any
    other count returns ``None``.
    """
    intersections: List[Point] = []
    verts = triangle.vertices

    for i in range(3):
        p0 = verts[i]
        p1 = verts[(i + 1) % 3]
        d0 = p0.z - z
        d1 = p1.z - z

        if abs(d0) <= tol and abs(d1) <= tol:
            continue
        if abs(d0) <= tol:
            add_unique_point(intersections, Point(p0.x, p0.y, 0.0), tol)
            continue
        if abs(d1) <= tol:
            add_unique_point(intersections, Point(p1.x, p1.y, 0.0), tol)
            continue
        if d0 * d1 < 0.0:
            t = d0 / (d0 - d1)
            add_unique_point(intersections,
                             Point(p0.x + t * (p1.x - p0.x),
                                   p0.y + t * (p1.y - p0.y),
                                   0.0),
                             tol)

    if len(intersections) != 2:
        return None
    return Segment2D(intersections[0], intersections[1])


def stitch_segments(segments: Iterable[Segment2D], tol: float) -> List[Path]:
    """Join unordered ``segments`` into polylines by endpoint matching.

    A path is seeded with the last remaining segment.  The remaining
    segments are then scanned in order and the first one with an endpoint
    within ``tol`` of either end of the path is attached (appending at the
    back is tried before prepending at the front, a segment's start
    before its end).  The scan restarts after every attachment and stops
    when nothing matches; there is no backtracking, so branching
    (non-manifold) input is resolved by first match.

    A finished path with more than two points whose ends meet is closed:
    its last point is replaced by an exact repeat of its first, so a loop
    of ``n`` segments becomes ``n + 1`` points.  Segments that connect to nothing
    become two-point paths.  The input iterable is not modified.
    """
    pool = list(segments)
    paths: List[Path] = []

    while pool:
        seed = pool.pop()
        path = [seed.start, seed.end]

        found = True
        while found:
            found = False
            for i, seg in enumerate(pool):
                if points_close_xy(path[-1], seg.start, tol):
                    path.append(seg.end)
                elif points_close_xy(path[-1], seg.end, tol):
                    path.append(seg.start)
                elif points_close_xy(path[0], seg.start, tol):
                    path.insert(0, seg.end)
                elif points_close_xy(path[0], seg.end, tol):
                    path.insert(0, seg.start)
                else:
                    continue
                del pool[i]
                found = True
                break

        ## a loop walked all the way round already ends on (a point within
        ## tol of) its start; make that last point an exact repeat
        if len(path) > 2 and points_close_xy(path[0], path[-1], tol):
            path[-1] = path[0]
        paths.append(path)

    return paths


def mesh_z_range(triangles: Sequence[Triangle]) -> Tuple[float, float]:
    """Return ``(min_z, max_z)`` over all vertices.  ``triangles`` must be non-empty."""
    if not triangles:
        raise ValueError('mesh_z_range needs at least one triangle')
    return (min(t.min_z for t in triangles), max(t.max_z for t in triangles))


def layer_heights(min_z: float, max_z: float, layer_height: float) -> List[float]:
    """Plane heights ``min_z + i * layer_height`` covering ``[min_z, max_z]``.

    Both extremes are sampled whenever ``max_z - min_z`` is a multiple of
    ``layer_height``, despite floating-point rounding.  Non-positive layer
    heights or an inverted range give no heights.
    """
    if layer_height <= 0 or max_z < min_z:
        return []
    count = int(math.floor((max_z - min_z) / layer_height + 1.0 + _LAYER_COUNT_TOL))
    return [min_z + i * layer_height for i in range(count)]


def slice_layer(triangles: Sequence[Triangle], z: float,
                tol: float = epsilon) -> Layer:
    """Intersect every triangle with the plane at ``z`` and stitch the result."""
    segments = []
    for tri in triangles:
        seg = triangle_plane_segment(tri, z, tol)
        if seg is not None:
            segments.append(seg)
    paths = stitch_segments(segments, tol * STITCH_TOLERANCE_FACTOR)
    logger.debug('z=%r: %d segments -> %d paths', z, len(segments), len(paths))
    return Layer(z, paths)


def slice_mesh(triangles: Sequence[Triangle], layer_height: float,
               perimeter_spacing: Optional[float] = None) -> List[Layer]:
    """Slice ``triangles`` into layers ``layer_height`` apart.

    Layers start at the lowest vertex and are returned in increasing z,
    one per sampled height, including layers where nothing was cut.  An
    empty mesh or a non-positive ``layer_height`` returns an empty list.

    If ``perimeter_spacing`` is positive, the bounding-box perimeters of
    each layer (see :func:`simpleslice.perimeters.generate_layer_perimeters`)
    are appended after that layer's contour paths.
    """
    triangles = list(triangles)
    if not triangles or layer_height <= 0:
        logger.debug('nothing to slice: %d triangles, layer height %r',
                     len(triangles), layer_height)
        return []

    min_z, max_z = mesh_z_range(triangles)
    heights = layer_heights(min_z, max_z, layer_height)
    logger.info('slicing %d triangles into %d layers (z %r .. %r, step %r)',
                len(triangles), len(heights), min_z, max_z, layer_height)

    layers = []
    for z in heights:
        layer = slice_layer(triangles, z)
        if perimeter_spacing is not None and perimeter_spacing > 0:
            perimeters = generate_layer_perimeters(layer, perimeter_spacing)
            layer = Layer(z, layer.paths + perimeters.paths)
        layers.append(layer)
    return layers


__all__ = [
    "STITCH_TOLERANCE_FACTOR",
    "add_unique_point",
    "triangle_plane_segment",
    "stitch_segments",
    "mesh_z_range",
    "layer_heights",
    "slice_layer",
    "slice_mesh",
]
