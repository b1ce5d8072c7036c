#
# PROJECT: matrix-transforms
# MODULE: matrix_transforms/errors.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#


class MatrixError(ArithmeticError):
    """Base class for errors raised by matrix operations."""


class SingularMatrixError(MatrixError):
    """
    Raised by inverse() when the determinant is exactly zero.

    This happens when rows and columns are linearly dependent. The matrix
    the inverse was requested on is left untouched.
    """

    def __init__(self, determinant: float = 0.0, order: int = None):
        self.determinant = determinant
        self.order = order
        size = f"{order}x{order} " if order else ""
        super().__init__(
            f"The determinant of this {size}matrix is {determinant}. "
            "This happens when rows and columns are linearly dependent"
        )
