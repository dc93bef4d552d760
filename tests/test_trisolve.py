import numpy as np
import pytest

from compsparse.matrix import CsMatrix
from compsparse.trisolve import (
    SingularMatrixError,
    lsolve_csc_dense_rhs,
    lsolve_csr_dense_rhs,
    usolve_csc_dense_rhs,
    usolve_csr_dense_rhs,
)


def test_lsolve_csr_dense_rhs():
    l = CsMatrix.csr((3, 3), [0, 1, 2, 4], [0, 1, 0, 2], [1, 2, 1, 1])
    x = np.array([3, 2, 4])
    lsolve_csr_dense_rhs(l, x)
    assert np.array_equal(x, np.array([3, 1, 1]))


def test_lsolve_csc_dense_rhs():
    l = CsMatrix.csc((3, 3), [0, 2, 3, 4], [0, 1, 1, 2], [1, 1, 2, 3])
    x = [3, 5, 3]
    lsolve_csc_dense_rhs(l, x)
    assert x == [3, 1, 1]

    y = np.array([3, 5, 3])
    lsolve_csc_dense_rhs(l, y)
    assert np.array_equal(y, np.array([3, 1, 1]))


def test_usolve_csc_dense_rhs():
    u = CsMatrix.csc((3, 3), [0, 1, 2, 4], [0, 1, 0, 2], [1, 2, 1, 3])
    x = [4, 2, 3]
    usolve_csc_dense_rhs(u, x)
    assert x == [3, 1, 1]


def test_usolve_csr_dense_rhs():
    u = CsMatrix.csr((3, 3), [0, 2, 4, 5], [0, 1, 1, 2, 2], [1, 1, 5, 3, 1])
    x = [4, 8, 1]
    usolve_csr_dense_rhs(u, x)
    assert x == [3, 1, 1]


def test_float_solve_matches_product():
    l = CsMatrix.csc((3, 3), [0, 2, 3, 4], [0, 1, 1, 2], [2.0, 1.5, 4.0, 0.5])
    b = np.array([1.0, -2.0, 3.0])
    x = b.copy()
    lsolve_csc_dense_rhs(l, x)
    assert np.allclose(l.to_dense() @ x, b)


def test_lsolve_csr_zero_diagonal():
    l = CsMatrix.csr((2, 2), [0, 1, 2], [0, 1], [1, 0])
    with pytest.raises(SingularMatrixError) as info:
        lsolve_csr_dense_rhs(l, [1, 1])
    assert info.value.index == 1
    assert info.value.reason == "diagonal element is 0"


def test_lsolve_csc_structural_zero():
    l = CsMatrix.csc((2, 2), [0, 1, 1], [0], [1])
    with pytest.raises(SingularMatrixError) as info:
        lsolve_csc_dense_rhs(l, [1, 1])
    assert info.value.index == 1
    assert info.value.reason == "diagonal element is a structural 0"


def test_usolve_csc_numeric_zero():
    u = CsMatrix.csc((2, 2), [0, 1, 2], [0, 1], [1, 0])
    with pytest.raises(SingularMatrixError) as info:
        usolve_csc_dense_rhs(u, [1, 1])
    assert info.value.index == 1
    assert info.value.reason == "diagonal element is a numeric 0"


def test_storage_mismatch():
    with pytest.raises(ValueError, match="Storage mismatch"):
        lsolve_csr_dense_rhs(CsMatrix.eye_csc(2), [1.0, 1.0])
    with pytest.raises(ValueError, match="Storage mismatch"):
        usolve_csc_dense_rhs(CsMatrix.eye(2), [1.0, 1.0])


def test_dimension_checks():
    with pytest.raises(ValueError, match="Dimension mismatch"):
        lsolve_csr_dense_rhs(CsMatrix.eye(3), [1.0, 1.0])
    non_square = CsMatrix.csr((2, 3), [0, 1, 2], [0, 1], [1.0, 1.0])
    with pytest.raises(ValueError, match="Non square"):
        usolve_csr_dense_rhs(non_square, [1.0, 1.0])