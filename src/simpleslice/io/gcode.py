"""Format polylines and layers as a minimal G-code-like toolpath.

The output uses only two commands: ``G0`` (rapid move) and ``G1``
(linear move).  Each path starts with a ``G0`` to its first point,
followed by one ``G1`` per remaining point.  Layers are introduced by a
``G0 Z<z>`` height change.  Coordinates are written in fixed notation
with a caller-chosen number of decimals; no extrusion, feed rate,
header or footer is emitted.
"""

from __future__ import annotations

from typing import Sequence, TextIO, Union

from simpleslice.geom import Point
from simpleslice.shapes import Layer

DEFAULT_PRECISION = 16


def _fmt(value: float, precision: int) -> str:
    return f"{value:.{precision}f}"


def format_paths(paths: Sequence[Sequence[Point]], precision: int = DEFAULT_PRECISION) -> str:
    """Format ``paths`` for a single layer.  Empty paths are skipped."""
    precision = max(0, int(precision))
    lines = []
    for path in paths:
        if not path:
            continue
        start = path[0]
        lines.append(f"G0 X{_fmt(start.x, precision)} Y{_fmt(start.y, precision)}\n")
        for p in path[1:]:
            lines.append(f"G1 X{_fmt(p.x, precision)} Y{_fmt(p.y, precision)}\n")
    return ''.join(lines)


def format_layers(layers: Sequence[Layer], precision: int = DEFAULT_PRECISION) -> str:
    """Format ``layers``, each preceded by a ``G0 Z`` height change."""
    precision = max(0, int(precision))
    out = []
    for layer in layers:
        out.append(f"G0 Z{_fmt(layer.z, precision)}\n")
        out.append(format_paths(layer.paths, precision))
    return ''.join(out)


def format_toolpath_gcode(obj: Union[Sequence[Layer], Sequence[Sequence[Point]]],
                          precision: int = DEFAULT_PRECISION) -> str:
    """Format either a list of layers or a list of paths.

    Negative ``precision`` is treated as zero.
    """
    items = list(obj)
    if items and all(isinstance(item, Layer) for item in items):
        return format_layers(items, precision)
    return format_paths(items, precision)


def write_gcode(obj, path_or_file: Union[str, TextIO],
                precision: int = DEFAULT_PRECISION) -> None:
    """Write :func:`format_toolpath_gcode` output to a path or an open text stream."""
    text = format_toolpath_gcode(obj, precision)
    if hasattr(path_or_file, 'write'):
        path_or_file.write(text)
        return
    with open(path_or_file, 'w', encoding='ascii') as stream:
        stream.write(text)


__all__ = [
    'DEFAULT_PRECISION',
    'format_paths',
    'format_layers',
    'format_toolpath_gcode',
    'write_gcode',
]
