#!/usr/bin/env python3
"""
Command line front end for simpleslice.

Usage:
    python -m simpleslice slice FILE.stl [-o OUT.gcode] [--layer-height H]
        [--perimeter-spacing S] [--precision N] [--dxf OUT.dxf]
    python -m simpleslice rectangle MIN_X MIN_Y MAX_X MAX_Y [--spacing S]
    python -m simpleslice circle CX CY R [--spacing S] [--segments N]

Toolpaths are written to standard output unless ``-o`` names a file.
Defaults come from the configuration file (see ``simpleslice.config``);
command line options override them.

Examples:
    # Slice a mesh at 0.2mm and keep a DXF of the contours
    python -m simpleslice slice cube.stl -o cube.gcode --dxf cube.dxf

    # Concentric perimeters of an 8x6 rectangle, 0.5mm apart
    python -m simpleslice rectangle 0 0 8 6 --spacing 0.5
"""

import argparse
import logging
import sys

from simpleslice.config import SlicerConfig, load_config
from simpleslice.io.dxf import write_layers_dxf
from simpleslice.io.gcode import format_toolpath_gcode
from simpleslice.io.stl import read_ascii_stl
from simpleslice.mesh_slicer import slice_mesh
from simpleslice.perimeters import generate_circle_perimeters, generate_rectangle_perimeters
from simpleslice.shapes import Circle, Rectangle

logger = logging.getLogger('simpleslice')


def _emit(text: str, output) -> None:
    if output:
        try:
            with open(output, 'w', encoding='ascii') as f:
                f.write(text)
        except OSError as exc:
            raise OSError(f"Failed to open {output} for writing.") from exc
    else:
        sys.stdout.write(text)


def cmd_slice(args, config: SlicerConfig) -> int:
    """Slice an ASCII STL file and write its layered toolpath."""
    config = config.merged(layer_height=args.layer_height,
                           perimeter_spacing=args.perimeter_spacing,
                           precision=args.precision)

    triangles = read_ascii_stl(args.file)
    if not triangles:
        print(f"Error: Failed to read ASCII STL from: {args.file}", file=sys.stderr)
        return 1

    layers = slice_mesh(triangles, config.layer_height, config.perimeter_spacing)
    _emit(format_toolpath_gcode(layers, config.precision), args.output)

    if args.dxf:
        write_layers_dxf(layers, args.dxf)
        logger.info('wrote %d layers to %s', len(layers), args.dxf)
    return 0


def cmd_rectangle(args, config: SlicerConfig) -> int:
    """Write concentric perimeters of an axis-aligned rectangle."""
    config = config.merged(spacing=args.spacing, precision=args.precision)
    if args.max_x <= args.min_x or args.max_y <= args.min_y:
        print("Error: Rectangle max must be greater than min.", file=sys.stderr)
        return 1

    rectangle = Rectangle(args.min_x, args.min_y, args.max_x, args.max_y)
    paths = generate_rectangle_perimeters(rectangle, config.spacing)
    _emit(format_toolpath_gcode(paths, config.precision), args.output)
    return 0


def cmd_circle(args, config: SlicerConfig) -> int:
    """Write concentric polygonal perimeters of a circle."""
    config = config.merged(spacing=args.spacing, precision=args.precision,
                           circle_segments=args.segments)
    circle = Circle(args.center_x, args.center_y, args.radius)
    paths = generate_circle_perimeters(circle, config.spacing, config.circle_segments)
    _emit(format_toolpath_gcode(paths, config.precision), args.output)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='simpleslice',
        description='Slice meshes and simple shapes into perimeter toolpaths'
    )
    parser.add_argument('--config', metavar='FILE',
                        help='YAML configuration file')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Enable debug logging')
    subparsers = parser.add_subparsers(dest='action', help='Action to perform')

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument('-o', '--output', metavar='FILE',
                        help='Output G-code file (default: stdout)')
    common.add_argument('--precision', type=int,
                        help='Decimal places for coordinates (negative values clamp to 0)')

    slice_parser = subparsers.add_parser('slice', parents=[common],
                                         help='Slice an ASCII STL mesh')
    slice_parser.add_argument('file', help='ASCII STL file')
    slice_parser.add_argument('-l', '--layer-height', type=float,
                              help='Layer height (mm)')
    slice_parser.add_argument('--perimeter-spacing', type=float,
                              help='Add bounding-box perimeters this far apart (mm)')
    slice_parser.add_argument('--dxf', metavar='FILE',
                              help='Also export the sliced layers to DXF')

    rect_parser = subparsers.add_parser('rectangle', parents=[common],
                                        help='Perimeters of a rectangle')
    rect_parser.add_argument('min_x', type=float)
    rect_parser.add_argument('min_y', type=float)
    rect_parser.add_argument('max_x', type=float)
    rect_parser.add_argument('max_y', type=float)
    rect_parser.add_argument('-s', '--spacing', type=float,
                             help='Perimeter spacing (mm)')

    circle_parser = subparsers.add_parser('circle', parents=[common],
                                          help='Perimeters of a circle')
    circle_parser.add_argument('center_x', type=float)
    circle_parser.add_argument('center_y', type=float)
    circle_parser.add_argument('radius', type=float)
    circle_parser.add_argument('-s', '--spacing', type=float,
                               help='Perimeter spacing (mm)')
    circle_parser.add_argument('-n', '--segments', type=int,
                               help='Polygon segments per perimeter')
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format='%(levelname)s %(name)s: %(message)s')

    commands = {
        'slice': cmd_slice,
        'rectangle': cmd_rectangle,
        'circle': cmd_circle,
    }
    if args.action not in commands:
        parser.print_help()
        return 1

    try:
        config = load_config(args.config)
        return commands[args.action](args, config)
    except (ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == '__main__':
    sys.exit(main())
