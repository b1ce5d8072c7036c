#
# PROJECT: matrix-transforms
# MODULE: matrix_transforms/cli.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import argparse
import logging
import math
import sys

from .errors import SingularMatrixError
from .matrix3x3 import Matrix3x3
from .matrix4x4 import Matrix4x4

logger = logging.getLogger(__name__)


def build_2d(args) -> Matrix3x3:
    """
    Compose a 2D transform the way a pixel-space renderer does: move the
    pivot to the origin, scale, rotate, translate, then project to clip space.
    """
    matrix = Matrix3x3.identity()
    matrix.translate(-args.origin[0], -args.origin[1])
    matrix.scale(args.scale[0], args.scale[1])
    matrix.rotate(math.radians(args.rotate))
    matrix.translate(args.translate[0], args.translate[1])
    if args.projection:
        matrix.mult(Matrix3x3.projection(args.projection[0], args.projection[1]))
    return matrix


def build_3d(args) -> Matrix4x4:
    """
    Compose a 3D transform starting from the projection. The helpers
    pre-multiply, so a vertex is scaled first and projected last.
    """
    if args.ortho:
        matrix = Matrix4x4.orthographic(*args.ortho)
    elif args.fov is not None:
        matrix = Matrix4x4.perspective(math.radians(args.fov), args.aspect,
                                       args.near, args.far)
    else:
        matrix = Matrix4x4.identity()
    matrix.translate(*args.translate)
    matrix.x_rotate(math.radians(args.rotate_x))
    matrix.y_rotate(math.radians(args.rotate_y))
    matrix.z_rotate(math.radians(args.rotate_z))
    matrix.scale(*args.scale)
    return matrix


def parse_args(argv=None):
    epilog = """\
examples:
  %(prog)s 2d --projection 400 300 --translate 200 100 --rotate 30
  %(prog)s 2d --origin 50 75 --scale 2 2 --flat
  %(prog)s 3d --fov 60 --aspect 1.5 --translate 0 0 -360 --rotate-y 45
  %(prog)s 3d --ortho 0 400 300 0 400 -400 --scale 1 1 1
  %(prog)s 3d --translate 1 2 3 --inverse
"""
    parser = argparse.ArgumentParser(
        prog="matrix-transforms",
        description="Compose transform matrices and print them",
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument("--inverse", action="store_true",
                        help="Print the inverse of the composed matrix")
    parser.add_argument("--flat", action="store_true",
                        help="Print the flat row-major entries on one line")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Enable debug logging")
    sub = parser.add_subparsers(dest="mode", required=True)

    p2 = sub.add_parser("2d", help="3x3 transform for 2D pixel coordinates")
    p2.add_argument("--projection", type=float, nargs=2, metavar=("W", "H"),
                    help="Finish with the pixel-to-clip-space projection")
    p2.add_argument("--origin", type=float, nargs=2, default=(0.0, 0.0),
                    metavar=("X", "Y"), help="Pivot point (default: 0 0)")
    p2.add_argument("--translate", type=float, nargs=2, default=(0.0, 0.0),
                    metavar=("X", "Y"))
    p2.add_argument("--rotate", type=float, default=0.0, metavar="DEG",
                    help="Rotation in degrees (default: 0)")
    p2.add_argument("--scale", type=float, nargs=2, default=(1.0, 1.0),
                    metavar=("SX", "SY"))

    p3 = sub.add_parser("3d", help="4x4 transform for 3D coordinates")
    p3.add_argument("--fov", type=float, metavar="DEG",
                    help="Start from a perspective projection with this vertical FOV")
    p3.add_argument("--aspect", type=float, default=1.0,
                    help="Perspective aspect ratio (default: 1.0)")
    p3.add_argument("--near", type=float, default=1.0,
                    help="Perspective near plane (default: 1.0)")
    p3.add_argument("--far", type=float, default=2000.0,
                    help="Perspective far plane (default: 2000.0)")
    p3.add_argument("--ortho", type=float, nargs=6,
                    metavar=("L", "R", "B", "T", "N", "F"),
                    help="Start from an orthographic projection instead")
    p3.add_argument("--translate", type=float, nargs=3, default=(0.0, 0.0, 0.0),
                    metavar=("X", "Y", "Z"))
    p3.add_argument("--rotate-x", type=float, default=0.0, metavar="DEG")
    p3.add_argument("--rotate-y", type=float, default=0.0, metavar="DEG")
    p3.add_argument("--rotate-z", type=float, default=0.0, metavar="DEG")
    p3.add_argument("--scale", type=float, nargs=3, default=(1.0, 1.0, 1.0),
                    metavar=("SX", "SY", "SZ"))
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s"
    )

    matrix = build_2d(args) if args.mode == "2d" else build_3d(args)
    logger.debug("Composed %s: %r", type(matrix).__name__, matrix.entries)

    if args.inverse:
        try:
            matrix = matrix.inverse()
        except SingularMatrixError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1

    if args.flat:
        print(", ".join(repr(e) for e in matrix.entries))
    else:
        matrix.pretty_print()
    return 0
