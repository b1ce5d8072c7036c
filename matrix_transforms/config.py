#
# PROJECT: matrix-transforms
# MODULE: matrix_transforms/config.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import logging
import os
from dataclasses import dataclass, field
from typing import Tuple

logger = logging.getLogger(__name__)

ENV_PREFIX = 'MATRIX_TRANSFORMS_'


@dataclass
class CameraConfig:
    """Default view and projection settings for a Camera."""
    fov: float = 60.0          # Vertical field of view (degrees)
    distance: float = 6.0      # Orbit radius around the target
    near: float = 1.0          # Near clip plane
    far: float = 2000.0        # Far clip plane
    target: Tuple[float, float, float] = (0.0, 0.0, 0.0)
    up: Tuple[float, float, float] = field(default=(0.0, 1.0, 0.0))

    def __post_init__(self):
        self.fov = float(self.fov)
        self.distance = float(self.distance)
        self.near = float(self.near)
        self.far = float(self.far)
        self.target = tuple(float(v) for v in self.target)
        self.up = tuple(float(v) for v in self.up)

    @classmethod
    def from_env(cls, environ=None) -> 'CameraConfig':
        """
        Build a config from MATRIX_TRANSFORMS_FOV / _DISTANCE / _NEAR / _FAR.

        Missing or unparsable variables keep the defaults.
        """
        environ = os.environ if environ is None else environ
        overrides = {}
        for name in ('fov', 'distance', 'near', 'far'):
            var = ENV_PREFIX + name.upper()
            raw = environ.get(var)
            if raw is None:
                continue
            try:
                overrides[name] = float(raw)
            except ValueError:
                logger.warning("Ignoring %s=%r: not a number", var, raw)
                continue
        return cls(**overrides)
