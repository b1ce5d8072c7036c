#
# PROJECT: matrix-transforms
# MODULE: matrix_transforms/matrix3x3.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import math

from .math_utils import ieee_div
from .matrix import SquareMatrix, Matrix2x2


class Matrix3x3(SquareMatrix):
    """
    3x3 matrix for 2D affine transforms in the row-vector convention
    (v' = v x M, translation in the last row).

    The composition helpers translate/scale/rotate POST-multiply:
    this = this x T. A chain built as

        Matrix3x3.identity().translate(...).scale(...).rotate(...)

    therefore applies translate, then scale, then rotate to a row vector.
    Matrix4x4's helpers pre-multiply instead; the two are not interchangeable.
    """
    __slots__ = ()

    order = 3
    cofactor_type = Matrix2x2

    @classmethod
    def translation(cls, tx: float, ty: float) -> 'Matrix3x3':
        return cls([
            1,   0, 0,
            0,   1, 0,
            tx, ty, 1
        ])

    @classmethod
    def rotation(cls, angle_in_radians: float) -> 'Matrix3x3':
        c = math.cos(angle_in_radians)
        s = math.sin(angle_in_radians)
        return cls([
            c, -s, 0,
            s,  c, 0,
            0,  0, 1
        ])

    @classmethod
    def scaling(cls, sx: float, sy: float) -> 'Matrix3x3':
        return cls([
            sx,  0, 0,
            0,  sy, 0,
            0,   0, 1
        ])

    @classmethod
    def projection(cls, width: float, height: float) -> 'Matrix3x3':
        """Pixel space (origin top-left, y down) to clip space (origin centre, y up)."""
        return cls([
            ieee_div(2, width), 0, 0,
            0, ieee_div(-2, height), 0,
            -1, 1, 1
        ])

    def translate(self, tx: float, ty: float) -> 'Matrix3x3':
        return self.mult(Matrix3x3.translation(tx, ty))

    def scale(self, sx: float, sy: float) -> 'Matrix3x3':
        return self.mult(Matrix3x3.scaling(sx, sy))

    def rotate(self, angle_in_radians: float) -> 'Matrix3x3':
        return self.mult(Matrix3x3.rotation(angle_in_radians))

    def transform_point(self, x: float, y: float):
        """Apply to the homogeneous row (x, y, 1); returns (x', y')."""
        px, py, _w = self.transform_row((x, y, 1.0))
        return px, py
