"""
Tests for the generic SquareMatrix algorithm

Covers:
1. Construction invariants (exactly N*N entries, independent copies)
2. Pure and in-place products, identity law for every order
3. Cofactor extraction, Laplace determinant, adjugate inverse
4. Singular matrices
"""

import math

import pytest

from matrix_transforms.errors import MatrixError, SingularMatrixError
from matrix_transforms.matrix import Matrix2x2, SquareMatrix
from matrix_transforms.matrix3x3 import Matrix3x3
from matrix_transforms.matrix4x4 import Matrix4x4

SAMPLES = {
    Matrix2x2: [4, 7, 2, 6],
    Matrix3x3: [2, 0, 1, 1, 3, 2, 1, 1, 2],
    Matrix4x4: [2, 1, 0, 3, 0, 3, 1, 1, 0, 0, 4, 2, 0, 0, 0, 5],
}
ALL_TYPES = list(SAMPLES)


def _dense4() -> Matrix4x4:
    return (Matrix4x4.from_translation(1, -2, 3)
            @ Matrix4x4.from_y_rotation(0.3)
            @ Matrix4x4.from_x_rotation(-1.1)
            @ Matrix4x4.from_scaling(2, 3, 4))


class TestConstruction:

    @pytest.mark.parametrize("cls", ALL_TYPES)
    def test_default_is_zero_matrix(self, cls) -> None:
        m = cls()
        assert m.entries == [0.0] * (cls.order * cls.order)

    @pytest.mark.parametrize("cls", ALL_TYPES)
    def test_wrong_entry_count_rejected(self, cls) -> None:
        with pytest.raises(ValueError):
            cls([1, 2, 3])

    def test_entries_coerced_to_float(self) -> None:
        assert all(isinstance(e, float) for e in Matrix2x2([1, 2, 3, 4]).entries)

    def test_constructor_does_not_alias_input(self) -> None:
        source = [1.0, 2.0, 3.0, 4.0]
        m = Matrix2x2(source)
        source[0] = 99.0
        assert m.entries[0] == 1.0

    @pytest.mark.parametrize("cls", ALL_TYPES)
    def test_copy_is_independent(self, cls) -> None:
        m = cls(SAMPLES[cls])
        c = m.copy()
        c.entries[0] = 42.0
        assert m.entries[0] == float(SAMPLES[cls][0])
        assert type(c) is cls


class TestAccessors:

    def test_getitem_row_column(self) -> None:
        m = Matrix3x3(range(1, 10))
        assert m[1, 2] == 6.0
        assert m.row(2) == [7.0, 8.0, 9.0]
        assert m.column(0) == [1.0, 4.0, 7.0]
        with pytest.raises(IndexError):
            m[3, 0]

    def test_transpose(self) -> None:
        m = Matrix2x2([1, 2, 3, 4])
        assert m.transpose().entries == [1.0, 3.0, 2.0, 4.0]

    def test_transform_row_is_row_vector_product(self) -> None:
        m = Matrix2x2([1, 2, 3, 4])
        # [1, 1] x M = [1 + 3, 2 + 4]
        assert m.transform_row([1, 1]) == [4.0, 6.0]

    def test_transform_row_wrong_length(self) -> None:
        with pytest.raises(ValueError):
            Matrix3x3.identity().transform_row([1, 2])

    def test_str_and_pretty_print(self, capsys) -> None:
        Matrix2x2.identity().pretty_print()
        out = capsys.readouterr().out
        assert out == "[1.0000, 0.0000]\n[0.0000, 1.0000]\n"
        assert str(Matrix2x2.identity()) == out.rstrip("\n")


class TestProducts:

    def test_mult_is_this_times_b(self) -> None:
        a = Matrix2x2([1, 2, 3, 4])
        a.mult(Matrix2x2([0, 1, 1, 0]))
        assert a.entries == [2.0, 1.0, 4.0, 3.0]

    def test_premult_is_b_times_this(self) -> None:
        a = Matrix2x2([1, 2, 3, 4])
        a.premult(Matrix2x2([0, 1, 1, 0]))
        assert a.entries == [3.0, 4.0, 1.0, 2.0]

    def test_in_place_products_return_self(self) -> None:
        a = Matrix2x2([1, 2, 3, 4])
        assert a.mult(Matrix2x2.identity()) is a
        assert a.premult(Matrix2x2.identity()) is a

    def test_mult_by_self(self) -> None:
        a = Matrix2x2([1, 2, 3, 4])
        a.mult(a)
        assert a.entries == [7.0, 10.0, 15.0, 22.0]

    def test_pure_product_leaves_operands_untouched(self) -> None:
        a = Matrix2x2([1, 2, 3, 4])
        b = Matrix2x2([0, 1, 1, 0])
        c = a @ b
        assert c.entries == [2.0, 1.0, 4.0, 3.0]
        assert a.entries == [1.0, 2.0, 3.0, 4.0]
        assert b.entries == [0.0, 1.0, 1.0, 0.0]

    def test_static_multiply(self) -> None:
        a = Matrix2x2([1, 2, 3, 4])
        b = Matrix2x2([0, 1, 1, 0])
        assert SquareMatrix.multiply(a, b) == a @ b
        assert Matrix2x2.multiply(b, a).entries == [3.0, 4.0, 1.0, 2.0]

    def test_static_premultiply(self) -> None:
        """premultiply(a, b) is b x a and leaves both operands alone"""
        a = Matrix2x2([1, 2, 3, 4])
        b = Matrix2x2([0, 1, 1, 0])
        result = Matrix2x2.premultiply(a, b)
        assert result == b @ a
        assert result.entries == [3.0, 4.0, 1.0, 2.0]
        assert a.entries == [1.0, 2.0, 3.0, 4.0]
        assert b.entries == [0.0, 1.0, 1.0, 0.0]

    def test_premultiply_available_on_every_order(self) -> None:
        a = Matrix3x3.translation(1, 2)
        b = Matrix3x3.scaling(2, 3)
        assert Matrix3x3.premultiply(a, b) == b @ a
        assert SquareMatrix.premultiply(a, b) == a.copy().premult(b)

    def test_mismatched_orders_rejected(self) -> None:
        with pytest.raises(ValueError):
            Matrix2x2.identity() @ Matrix3x3.identity()

    def test_matmul_with_non_matrix(self) -> None:
        with pytest.raises(TypeError):
            Matrix2x2.identity() @ [1, 0, 0, 1]

    @pytest.mark.parametrize("cls", ALL_TYPES)
    def test_identity_law(self, cls) -> None:
        m = cls(SAMPLES[cls])
        assert m.copy().mult(cls.identity()) == m
        assert m.copy().premult(cls.identity()) == m
        assert cls.identity().mult(m) == m
        assert cls.identity().premult(m) == m


class TestDeterminant:

    @pytest.mark.parametrize("cls", ALL_TYPES)
    def test_identity_determinant_is_one(self, cls) -> None:
        assert cls.identity().determinant() == 1.0

    def test_known_determinants(self) -> None:
        assert Matrix2x2(SAMPLES[Matrix2x2]).determinant() == 10.0
        assert Matrix3x3(SAMPLES[Matrix3x3]).determinant() == 6.0
        assert Matrix4x4(SAMPLES[Matrix4x4]).determinant() == 120.0

    @pytest.mark.parametrize("cls", ALL_TYPES)
    def test_zero_row_gives_zero(self, cls) -> None:
        m = cls(SAMPLES[cls])
        n = cls.order
        for j in range(n):
            m.entries[(n - 1) * n + j] = 0.0
        assert m.determinant() == 0.0

    @pytest.mark.parametrize("cls", ALL_TYPES)
    def test_zero_column_gives_zero(self, cls) -> None:
        m = cls(SAMPLES[cls])
        n = cls.order
        for i in range(n):
            m.entries[i * n + 1] = 0.0
        assert m.determinant() == 0.0

    def test_determinant_of_product(self) -> None:
        a = _dense4()
        b = Matrix4x4(SAMPLES[Matrix4x4])
        assert (a @ b).determinant() == pytest.approx(a.determinant() * b.determinant())


class TestCofactor:

    def test_cofactor_of_4x4_identity_is_3x3_identity(self) -> None:
        cof = Matrix4x4.identity()._cofactor(0, 0)
        assert isinstance(cof, Matrix3x3)
        assert cof == Matrix3x3.identity()

    def test_cofactor_keeps_remaining_order(self) -> None:
        cof = Matrix3x3(range(1, 10))._cofactor(1, 2)
        assert isinstance(cof, Matrix2x2)
        assert cof.entries == [1.0, 2.0, 7.0, 8.0]

    def test_2x2_has_no_cofactor_type(self) -> None:
        with pytest.raises(MatrixError):
            Matrix2x2.identity()._cofactor(0, 0)

    def test_adjoint_determinant_is_transposed_cofactor(self) -> None:
        m = Matrix2x2([4, 7, 2, 6])
        # adjugate of [[a, b], [c, d]] is [[d, -b], [-c, a]]
        assert m._adjoint_determinant(0, 0) == 6.0
        assert m._adjoint_determinant(0, 1) == -7.0
        assert m._adjoint_determinant(1, 0) == -2.0
        assert m._adjoint_determinant(1, 1) == 4.0


class TestInverse:

    def test_2x2_inverse_values(self) -> None:
        inv = Matrix2x2([4, 7, 2, 6]).inverse()
        assert inv.entries == pytest.approx([0.6, -0.7, -0.2, 0.4])

    @pytest.mark.parametrize("cls", ALL_TYPES)
    def test_inverse_has_same_order(self, cls) -> None:
        inv = cls(SAMPLES[cls]).inverse()
        assert type(inv) is cls
        assert len(inv.entries) == cls.order * cls.order

    @pytest.mark.parametrize("m", [
        Matrix2x2(SAMPLES[Matrix2x2]),
        Matrix3x3(SAMPLES[Matrix3x3]),
        Matrix4x4(SAMPLES[Matrix4x4]),
        _dense4(),
    ])
    def test_inverse_law(self, m) -> None:
        identity = type(m).identity().entries
        inv = m.inverse()
        assert m.copy().mult(inv).entries == pytest.approx(identity, abs=1e-12)
        assert inv.copy().mult(m).entries == pytest.approx(identity, abs=1e-12)

    def test_inverse_does_not_mutate(self) -> None:
        m = Matrix3x3(SAMPLES[Matrix3x3])
        m.inverse()
        assert m.entries == [float(e) for e in SAMPLES[Matrix3x3]]

    @pytest.mark.parametrize("cls", ALL_TYPES)
    def test_identical_rows_raise(self, cls) -> None:
        m = cls(SAMPLES[cls])
        n = cls.order
        m.entries[n:2 * n] = m.entries[0:n]
        before = list(m.entries)
        with pytest.raises(SingularMatrixError) as exc_info:
            m.inverse()
        assert exc_info.value.determinant == 0
        assert exc_info.value.order == n
        assert m.entries == before

    def test_singular_error_is_arithmetic_error(self) -> None:
        with pytest.raises(ArithmeticError):
            Matrix2x2([1, 2, 2, 4]).inverse()

    def test_nan_determinant_raises(self) -> None:
        m = Matrix2x2([math.nan, 0, 0, 1])
        with pytest.raises(SingularMatrixError) as exc_info:
            m.inverse()
        assert math.isnan(exc_info.value.determinant)
