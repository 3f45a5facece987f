"""DXF export of sliced layers using the ezdxf library.

Every slice gets its own DXF layer (named after its height, e.g.
``Z0.200000``) so that individual slices can be toggled in a CAD viewer.
Each path becomes one ``LWPOLYLINE``; paths whose last point repeats
the first are written as closed polylines without the duplicate vertex.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence, Union

import ezdxf

from simpleslice.shapes import Layer

## DXF colour index cycled over the slice layers (1=red .. 6=magenta)
_LAYER_COLORS = (1, 2, 3, 4, 5, 6)


def layer_name(z: float) -> str:
    """DXF layer name used for a slice at height ``z``."""
    return f"Z{z:.6f}"


def write_layers_dxf(layers: Sequence[Layer],
                     path: Optional[Union[str, Path]] = None):
    """Build a DXF document holding ``layers`` and optionally save it to ``path``.

    Returns the ``ezdxf`` document so callers can add to it or save it
    elsewhere.
    """
    # setup=False keeps the document free of default blocks that some
    # CAD programs reject
    doc = ezdxf.new(dxfversion='R2010', setup=False)
    doc.header['$MEASUREMENT'] = 1  # metric
    doc.header['$INSUNITS'] = 4  # millimeters
    msp = doc.modelspace()

    for i, layer in enumerate(layers):
        name = layer_name(layer.z)
        if name not in doc.layers:
            doc.layers.add(name, color=_LAYER_COLORS[i % len(_LAYER_COLORS)])

        for poly in layer.paths:
            if len(poly) < 2:
                continue
            closed = len(poly) > 2 and poly[0] == poly[-1]
            pts = poly[:-1] if closed else poly
            msp.add_lwpolyline([(p.x, p.y) for p in pts], format='xy',
                               close=closed, dxfattribs={'layer': name})

    if path is not None:
        doc.saveas(str(path))
    return doc


__all__ = ['layer_name', 'write_layers_dxf']
