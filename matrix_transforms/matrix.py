#
# PROJECT: matrix-transforms
# MODULE: matrix_transforms/matrix.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import logging
import math
import sys

from .errors import MatrixError, SingularMatrixError

logger = logging.getLogger(__name__)


class SquareMatrix:
    """
    Fixed-order square matrix stored as a flat row-major list.

    Element (row i, column j) lives at entries[i * order + j]. Subclasses fix
    `order` and name the one-order-smaller `cofactor_type` used by the
    recursive determinant; everything else (products, cofactors, determinant,
    inverse) is written once here for any order.

    Products come in two flavours:
      - pure: `a @ b`, `multiply(a, b)` (a x b) and `premultiply(a, b)` (b x a)
        return a new matrix
      - in place: `mult(b)` (this = this x b) and `premult(b)` (this = b x this)
        overwrite this matrix's entries and return it for chaining
    """
    __slots__ = ('entries',)

    order = 0
    cofactor_type = None

    def __init__(self, entries=None):
        size = self.order * self.order
        if entries is None:
            self.entries = [0.0] * size
            return
        values = [float(e) for e in entries]
        if len(values) != size:
            raise ValueError(
                f"{type(self).__name__} needs {size} entries, got {len(values)}")
        self.entries = values

    @classmethod
    def identity(cls):
        n = cls.order
        return cls([1.0 if i == j else 0.0 for i in range(n) for j in range(n)])

    @staticmethod
    def multiply(a, b):
        """Return a new matrix a x b of a's type."""
        return a @ b

    @staticmethod
    def premultiply(a, b):
        """Return a new matrix b x a of b's type; neither operand changes."""
        return b @ a

    def __matmul__(self, other):
        if not isinstance(other, SquareMatrix):
            return NotImplemented
        n = self.order
        if other.order != n:
            raise ValueError(
                f"Cannot multiply {n}x{n} by {other.order}x{other.order} matrix")
        a = self.entries
        b = other.entries
        res = type(self)()
        for i in range(n):
            for j in range(n):
                val = 0.0
                for k in range(n):
                    val += a[i * n + k] * b[k * n + j]
                res.entries[i * n + j] = val
        return res

    def mult(self, b):
        """Multiply this matrix by b in place (this = this x b)."""
        self.entries[:] = (self @ b).entries
        return self

    def premult(self, b):
        """Multiply b by this matrix in place (this = b x this)."""
        if not isinstance(b, SquareMatrix):
            raise TypeError(f"Cannot premultiply by {type(b).__name__}")
        self.entries[:] = (b @ self).entries
        return self

    def copy(self):
        return type(self)(self.entries)

    def __eq__(self, other):
        if not isinstance(other, SquareMatrix):
            return NotImplemented
        return self.order == other.order and self.entries == other.entries

    __hash__ = None

    def __getitem__(self, index):
        i, j = index
        n = self.order
        if not (0 <= i < n and 0 <= j < n):
            raise IndexError(f"{type(self).__name__} index {index} out of range")
        return self.entries[i * n + j]

    def row(self, i: int) -> list:
        n = self.order
        return self.entries[i * n:i * n + n]

    def column(self, j: int) -> list:
        n = self.order
        return [self.entries[i * n + j] for i in range(n)]

    def transpose(self):
        n = self.order
        return type(self)([self.entries[j * n + i] for i in range(n) for j in range(n)])

    def transform_row(self, values) -> list:
        """Apply this matrix to a row vector: v' = v x M."""
        n = self.order
        v = [float(x) for x in values]
        if len(v) != n:
            raise ValueError(f"Expected a row vector of {n} values, got {len(v)}")
        return [sum(v[k] * self.entries[k * n + j] for k in range(n))
                for j in range(n)]

    def _cofactor(self, i: int, j: int):
        """Matrix excluding the i-th row and j-th column."""
        if self.cofactor_type is None:
            raise MatrixError(f"{type(self).__name__} has no cofactor matrix type")
        n = self.order
        entries = []
        for a in range(n):
            if a == i:
                continue
            for b in range(n):
                if b == j:
                    continue
                entries.append(self.entries[a * n + b])
        return self.cofactor_type(entries)

    def determinant(self) -> float:
        """Laplace expansion along the first row."""
        total = 0.0
        for j in range(self.order):
            sign = -1.0 if j % 2 else 1.0
            total += sign * self.entries[j] * self._cofactor(0, j).determinant()
        return total

    def _adjoint_determinant(self, i: int, j: int) -> float:
        """
        Determinant of a copy whose i-th column is the j-th unit vector.

        Equals the (j, i) cofactor, i.e. entry (i, j) of the adjugate.
        """
        n = self.order
        adjoint = self.copy()
        for k in range(n):
            adjoint.entries[k * n + i] = 1.0 if k == j else 0.0
        return adjoint.determinant()

    def inverse(self):
        """
        Return a new matrix holding the inverse (adjugate / determinant).

        Raises SingularMatrixError when the determinant is exactly 0, or nan
        because an entry is nan.
        """
        det = self.determinant()
        if det == 0 or math.isnan(det):
            logger.debug("Refusing to invert singular %s: %r",
                         type(self).__name__, self.entries)
            raise SingularMatrixError(det, self.order)

        n = self.order
        entries = []
        for i in range(n):
            for j in range(n):
                entries.append(self._adjoint_determinant(i, j) / det)
        return type(self)(entries)

    def __repr__(self):
        return f"{type(self).__name__}({self.entries!r})"

    def __str__(self):
        n = self.order
        width = max(len(f"{e:.4f}") for e in self.entries)
        lines = []
        for i in range(n):
            lines.append("[" + ", ".join(f"{e:>{width}.4f}" for e in self.row(i)) + "]")
        return "\n".join(lines)

    def pretty_print(self, file=None):
        """Print one row per line."""
        print(str(self), file=file if file is not None else sys.stdout)


class Matrix2x2(SquareMatrix):
    """2x2 matrix; base case of the cofactor recursion."""
    __slots__ = ()

    order = 2

    def determinant(self) -> float:
        a, b, c, d = self.entries
        return a * d - b * c
