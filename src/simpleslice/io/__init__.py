"""I/O utilities for simpleslice."""

from .stl import read_ascii_stl, parse_ascii_stl
from .gcode import format_toolpath_gcode, write_gcode
from .dxf import write_layers_dxf

__all__ = [
    'read_ascii_stl',
    'parse_ascii_stl',
    'format_toolpath_gcode',
    'write_gcode',
    'write_layers_dxf',
]
