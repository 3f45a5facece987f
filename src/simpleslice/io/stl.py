"""ASCII STL import.

Only the ``vertex`` records of an ASCII STL are read; facet normals,
``outer loop`` markers and solid names are ignored.  Binary STL is not
supported.
"""

from __future__ import annotations

import logging
from typing import Iterator, List, TextIO, Union

from simpleslice.geom import Point
from simpleslice.shapes import Triangle

logger = logging.getLogger(__name__)


def _tokens(source: Union[str, TextIO]) -> Iterator[str]:
    if isinstance(source, str):
        yield from source.split()
        return
    for line in source:
        yield from line.split()


def parse_ascii_stl(source: Union[str, TextIO]) -> List[Triangle]:
    """Parse ASCII STL text (a string or an open text stream) into triangles.

    Every ``vertex`` keyword must be followed by three numbers; each run
    of three vertices becomes a :class:`~simpleslice.shapes.Triangle`.  A
    ``vertex`` keyword that is not followed by three numbers stops the
    parse, and the triangles completed so far are returned.
    """
    triangles: List[Triangle] = []
    vertices: List[Point] = []
    tokens = _tokens(source)

    for token in tokens:
        if token != 'vertex':
            continue
        try:
            x = float(next(tokens))
            y = float(next(tokens))
            z = float(next(tokens))
        except (StopIteration, ValueError):
            break

        vertices.append(Point(x, y, z))
        if len(vertices) == 3:
            triangles.append(Triangle(*vertices))
            vertices = []

    return triangles


def read_ascii_stl(path_or_file) -> List[Triangle]:
    """Read an ASCII STL file into triangles.

    ``path_or_file`` can be a filesystem path or an open text stream.  A
    path that cannot be opened yields an empty list (and a logged
    warning) rather than an exception.
    """
    if hasattr(path_or_file, 'read'):
        return parse_ascii_stl(path_or_file)

    try:
        with open(path_or_file, 'r', encoding='utf-8', errors='replace') as stream:
            triangles = parse_ascii_stl(stream)
    except OSError as exc:
        logger.warning('could not read STL %s: %s', path_or_file, exc)
        return []

    logger.debug('read %d triangles from %s', len(triangles), path_or_file)
    return triangles


__all__ = ['parse_ascii_stl', 'read_ascii_stl']
