#
# PROJECT: matrix-transforms
# MODULE: matrix_transforms/__init__.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

from .math_utils import Vector3, ieee_div
from .errors import MatrixError, SingularMatrixError
from .matrix import SquareMatrix, Matrix2x2
from .matrix3x3 import Matrix3x3
from .matrix4x4 import Matrix4x4
from .config import CameraConfig
from .camera import Camera
