#
# PROJECT: matrix-transforms
# MODULE: matrix_transforms/camera.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import logging
import math

from .config import CameraConfig
from .math_utils import Vector3
from .matrix4x4 import Matrix4x4

logger = logging.getLogger(__name__)

PITCH_LIMIT = math.pi / 2 - 1e-3
MIN_DISTANCE = 0.5
FOV_RANGE = (10.0, 170.0)      # degrees


class Camera:
    """
    Orbital camera producing the view and projection matrices a renderer
    uploads each frame.

    The camera sits on a sphere of radius `distance` around `target`,
    positioned by yaw (around Y) and pitch (around X). All matrices follow
    the row-vector convention, so a world-space point goes through
    view_matrix() first and projection_matrix() second.
    """
    __slots__ = ('pitch', 'yaw', 'distance', 'fov', 'near', 'far', 'target', 'up')

    def __init__(self, fov: float = 60.0, distance: float = 6.0,
                 near: float = 1.0, far: float = 2000.0,
                 target: Vector3 = None, up: Vector3 = None):
        self.pitch = 0.0         # Rotation around X axis (radians)
        self.yaw = 0.0           # Rotation around Y axis (radians)
        self.distance = distance
        self.fov = fov           # Field of view (degrees)
        self.near = near
        self.far = far
        self.target = target if target is not None else Vector3(0, 0, 0)
        self.up = up if up is not None else Vector3(0, 1, 0)

    @classmethod
    def from_config(cls, config: CameraConfig) -> 'Camera':
        return cls(fov=config.fov, distance=config.distance,
                   near=config.near, far=config.far,
                   target=Vector3.from_array(config.target),
                   up=Vector3.from_array(config.up))

    def orbit(self, dyaw: float, dpitch: float):
        """
        Turn the camera around the target by yaw/pitch deltas in radians.

        Pitch stays strictly inside (-pi/2, pi/2); at the poles the up
        vector would be parallel to the view direction.
        """
        self.yaw += dyaw
        self.pitch = max(-PITCH_LIMIT, min(PITCH_LIMIT, self.pitch + dpitch))
        logger.debug("Camera orbit: yaw=%.3f pitch=%.3f", self.yaw, self.pitch)

    def zoom(self, delta: float):
        """Move along the orbit radius; the radius never drops below MIN_DISTANCE."""
        self.distance = max(MIN_DISTANCE, self.distance + delta)

    def adjust_fov(self, delta: float):
        lo, hi = FOV_RANGE
        self.fov = max(lo, min(hi, self.fov + delta))

    def position(self) -> Vector3:
        """World-space eye position on the orbit sphere."""
        cp = math.cos(self.pitch)
        offset = Vector3(
            self.distance * cp * math.sin(self.yaw),
            self.distance * math.sin(self.pitch),
            self.distance * cp * math.cos(self.yaw),
        )
        return Vector3.sum(self.target, offset)

    def camera_matrix(self) -> Matrix4x4:
        """Camera-to-world matrix."""
        return Matrix4x4.look_at(self.position(), self.target, self.up)

    def view_matrix(self) -> Matrix4x4:
        """World-to-camera matrix. Raises SingularMatrixError for a degenerate basis."""
        return self.camera_matrix().inverse()

    def projection_matrix(self, aspect: float) -> Matrix4x4:
        return Matrix4x4.perspective(math.radians(self.fov), aspect,
                                     self.near, self.far)

    def view_projection_matrix(self, aspect: float) -> Matrix4x4:
        return Matrix4x4.multiply(self.view_matrix(), self.projection_matrix(aspect))
