"""Value types shared by the slicer, the perimeter generators and the I/O layer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Sequence, Tuple

from simpleslice.geom import Point

## a path is an ordered polyline; closed paths repeat their first point
Path = List[Point]


@dataclass(frozen=True)
class Rectangle:
    """Axis-aligned rectangle in the XY plane.

    Raises ``ValueError`` if ``min`` exceeds ``max`` on either axis.  A
    zero-width or zero-height rectangle is allowed.
    """

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    def __post_init__(self):
        if self.min_x > self.max_x or self.min_y > self.max_y:
            raise ValueError(
                f"Rectangle: min must be <= max on all axes, got "
                f"({self.min_x}, {self.min_y}) .. ({self.max_x}, {self.max_y})"
            )

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y


@dataclass(frozen=True)
class Circle:
    """Circle in the XY plane.  Raises ``ValueError`` unless ``radius > 0``."""

    center_x: float
    center_y: float
    radius: float

    def __post_init__(self):
        if self.radius <= 0:
            raise ValueError(f"Circle: radius must be positive, got {self.radius}")


@dataclass(frozen=True)
class Triangle:
    """Triangle in XYZ space.  No winding or normal is stored."""

    a: Point
    b: Point
    c: Point

    @property
    def vertices(self) -> Tuple[Point, Point, Point]:
        return (self.a, self.b, self.c)

    @property
    def min_z(self) -> float:
        return min(self.a.z, self.b.z, self.c.z)

    @property
    def max_z(self) -> float:
        return max(self.a.z, self.b.z, self.c.z)


@dataclass(frozen=True)
class Segment2D:
    """One triangle/plane crossing: two points in the z=0 plane."""

    start: Point
    end: Point


@dataclass(frozen=True)
class Layer:
    """A slice at height ``z`` and the polylines found there.

    ``paths`` is frozen into a tuple of tuples on construction so that a
    layer cannot be modified once the slicer has produced it.
    """

    z: float
    paths: Sequence[Sequence[Point]] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, 'paths', tuple(tuple(p) for p in self.paths))

    @property
    def closed_paths(self) -> Tuple[Tuple[Point, ...], ...]:
        """Paths whose last point repeats the first."""
        return tuple(p for p in self.paths if len(p) > 2 and p[0] == p[-1])


__all__ = [
    "Path",
    "Rectangle",
    "Circle",
    "Triangle",
    "Segment2D",
    "Layer",
]
