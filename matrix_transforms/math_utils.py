#
# PROJECT: matrix-transforms
# MODULE: matrix_transforms/math_utils.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import math
import sys

EPSILON = sys.float_info.epsilon


def ieee_div(numerator: float, denominator: float) -> float:
    """Divide with IEEE-754 semantics instead of raising ZeroDivisionError.

    x / 0 gives +-inf (sign taken from both operands, signed zeros included),
    0 / 0 and nan / 0 give nan.
    """
    if denominator != 0:
        return numerator / denominator
    if numerator == 0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


class Vector3:
    """Mutable 3-component vector.

    add/sub/divide/normalize change the vector in place, while the static
    subtract/sum/cross and the arithmetic operators return new vectors.
    """
    __slots__ = ('x', 'y', 'z')

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)

    @classmethod
    def from_array(cls, entries) -> 'Vector3':
        """Create a vector from the first three items of a sequence."""
        return cls(entries[0], entries[1], entries[2])

    def __repr__(self):
        return f"Vector3({self.x:.2f}, {self.y:.2f}, {self.z:.2f})"

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __getitem__(self, index):
        if index == 0: return self.x
        if index == 1: return self.y
        if index == 2: return self.z
        raise IndexError("Vector3 index out of range")

    def __eq__(self, other):
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    __hash__ = None

    def __neg__(self):
        return Vector3(-self.x, -self.y, -self.z)

    def __add__(self, other):
        if isinstance(other, Vector3):
            return Vector3.sum(self, other)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Vector3):
            return Vector3.subtract(self, other)
        return NotImplemented

    def __mul__(self, scalar):
        if isinstance(scalar, (int, float)):
            return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)
        return NotImplemented

    __rmul__ = __mul__

    @staticmethod
    def subtract(v1: 'Vector3', v2: 'Vector3') -> 'Vector3':
        """Return v1 - v2 as a new vector."""
        return Vector3(v1.x - v2.x, v1.y - v2.y, v1.z - v2.z)

    @staticmethod
    def sum(v1: 'Vector3', v2: 'Vector3') -> 'Vector3':
        """Return v1 + v2 as a new vector."""
        return Vector3(v1.x + v2.x, v1.y + v2.y, v1.z + v2.z)

    @staticmethod
    def cross(v1: 'Vector3', v2: 'Vector3') -> 'Vector3':
        """Right-handed cross product v1 x v2 as a new vector."""
        return Vector3(
            v1.y * v2.z - v1.z * v2.y,
            v1.z * v2.x - v1.x * v2.z,
            v1.x * v2.y - v1.y * v2.x
        )

    def dot(self, other: 'Vector3') -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def add(self, v: 'Vector3'):
        self.x += v.x
        self.y += v.y
        self.z += v.z

    def sub(self, v: 'Vector3'):
        self.x -= v.x
        self.y -= v.y
        self.z -= v.z

    def divide(self, d: float):
        """Divide every component by d in place. d == 0 yields inf/nan."""
        self.x = ieee_div(self.x, d)
        self.y = ieee_div(self.y, d)
        self.z = ieee_div(self.z, d)

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalize(self) -> 'Vector3':
        """Scale to unit length in place and return self.

        Vectors no longer than machine epsilon become the zero vector.
        """
        length = self.length()
        if length > EPSILON:
            self.divide(length)
        else:
            self.zero_values()
        return self

    def zero_values(self):
        self.x = 0.0
        self.y = 0.0
        self.z = 0.0

    def copy(self) -> 'Vector3':
        return Vector3(self.x, self.y, self.z)

    def entries(self) -> list:
        """Flat [x, y, z] list for uniform upload."""
        return [self.x, self.y, self.z]
