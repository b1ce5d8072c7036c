#
# PROJECT: matrix-transforms
# MODULE: matrix_transforms/matrix4x4.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import logging
import math

from .math_utils import Vector3, ieee_div
from .matrix import SquareMatrix
from .matrix3x3 import Matrix3x3

logger = logging.getLogger(__name__)


class Matrix4x4(SquareMatrix):
    """
    4x4 matrix for 3D affine and projective transforms, row-major storage,
    row-vector convention (v' = v x M, translation in the last row).

    Unlike Matrix3x3, the composition helpers translate/scale/x_rotate/
    y_rotate/z_rotate PRE-multiply: this = T x this. In the row-vector
    convention the most recently added helper is applied first, so

        Matrix4x4.perspective(...).translate(...).x_rotate(...)

    rotates, then translates, then projects a row vector.
    """
    __slots__ = ()

    order = 4
    cofactor_type = Matrix3x3

    @classmethod
    def from_translation(cls, tx: float, ty: float, tz: float) -> 'Matrix4x4':
        return cls([
             1,  0,  0, 0,
             0,  1,  0, 0,
             0,  0,  1, 0,
            tx, ty, tz, 1
        ])

    @classmethod
    def from_x_rotation(cls, angle_in_radians: float) -> 'Matrix4x4':
        c = math.cos(angle_in_radians)
        s = math.sin(angle_in_radians)
        return cls([
            1,  0, 0, 0,
            0,  c, s, 0,
            0, -s, c, 0,
            0,  0, 0, 1
        ])

    @classmethod
    def from_y_rotation(cls, angle_in_radians: float) -> 'Matrix4x4':
        c = math.cos(angle_in_radians)
        s = math.sin(angle_in_radians)
        return cls([
            c, 0, -s, 0,
            0, 1,  0, 0,
            s, 0,  c, 0,
            0, 0,  0, 1
        ])

    @classmethod
    def from_z_rotation(cls, angle_in_radians: float) -> 'Matrix4x4':
        c = math.cos(angle_in_radians)
        s = math.sin(angle_in_radians)
        return cls([
             c, s, 0, 0,
            -s, c, 0, 0,
             0, 0, 1, 0,
             0, 0, 0, 1
        ])

    @classmethod
    def from_scaling(cls, sx: float, sy: float, sz: float) -> 'Matrix4x4':
        return cls([
            sx,  0,  0, 0,
             0, sy,  0, 0,
             0,  0, sz, 0,
             0,  0,  0, 1
        ])

    @classmethod
    def orthographic(cls, left: float, right: float, bottom: float, top: float,
                     near: float, far: float) -> 'Matrix4x4':
        """Map the box [left, right] x [bottom, top] x [near, far] to clip space."""
        return cls([
            ieee_div(2, right - left), 0, 0, 0,
            0, ieee_div(2, top - bottom), 0, 0,
            0, 0, ieee_div(2, near - far), 0,

            ieee_div(left + right, left - right),
            ieee_div(bottom + top, bottom - top),
            ieee_div(near + far, near - far),
            1
        ])

    @classmethod
    def perspective(cls, field_of_view_in_radians: float, aspect: float,
                    near: float = 1.0, far: float = 2000.0) -> 'Matrix4x4':
        """
        Perspective projection with a vertical field of view.

        f = 1 / tan(fov / 2); w takes -z so the divide introduces depth.
        """
        f = math.tan(math.pi * 0.5 - 0.5 * field_of_view_in_radians)
        range_inv = ieee_div(1.0, near - far)

        return cls([
            ieee_div(f, aspect), 0, 0, 0,
            0, f, 0, 0,
            0, 0, (near + far) * range_inv, -1,
            0, 0, near * far * range_inv * 2, 0
        ])

    @classmethod
    def look_at(cls, origin: Vector3, target: Vector3, up: Vector3 = None) -> 'Matrix4x4':
        """
        Camera matrix placed at origin and facing target.

        Rows are the x, y and z axes of a right-handed basis followed by the
        origin. An up vector parallel to the view direction collapses the
        x and y axes to zero vectors.
        """
        if up is None:
            up = Vector3(0, 1, 0)
        z_axis = Vector3.subtract(origin, target).normalize()
        x_axis = Vector3.cross(up, z_axis).normalize()
        y_axis = Vector3.cross(z_axis, x_axis).normalize()

        if x_axis.length() == 0:
            logger.debug("Degenerate look_at basis: origin=%r target=%r up=%r",
                         origin, target, up)

        return cls([
            x_axis.x, x_axis.y, x_axis.z, 0,
            y_axis.x, y_axis.y, y_axis.z, 0,
            z_axis.x, z_axis.y, z_axis.z, 0,
            origin.x, origin.y, origin.z, 1,
        ])

    def translate(self, tx: float, ty: float, tz: float) -> 'Matrix4x4':
        return self.premult(Matrix4x4.from_translation(tx, ty, tz))

    def scale(self, sx: float, sy: float, sz: float) -> 'Matrix4x4':
        return self.premult(Matrix4x4.from_scaling(sx, sy, sz))

    def x_rotate(self, angle_in_radians: float) -> 'Matrix4x4':
        return self.premult(Matrix4x4.from_x_rotation(angle_in_radians))

    def y_rotate(self, angle_in_radians: float) -> 'Matrix4x4':
        return self.premult(Matrix4x4.from_y_rotation(angle_in_radians))

    def z_rotate(self, angle_in_radians: float) -> 'Matrix4x4':
        return self.premult(Matrix4x4.from_z_rotation(angle_in_radians))

    def transform_point(self, v: Vector3) -> Vector3:
        """Apply to the row (x, y, z, 1), dividing by w when it is not 0 or 1."""
        x, y, z, w = self.transform_row((v.x, v.y, v.z, 1.0))
        if w != 1.0 and w != 0.0:
            return Vector3(x / w, y / w, z / w)
        return Vector3(x, y, z)
