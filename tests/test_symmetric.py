from compsparse.matrix import CsMatrix
from compsparse.symmetric import is_symmetric


def test_is_symmetric_simple():
    indptr = [0, 2, 5, 6, 7, 13, 14, 17, 20, 24, 28]
    indices = [
        0, 8, 1, 4, 9, 2, 3, 1, 4, 6, 7, 8, 9, 5, 4, 6, 9, 4, 7, 8, 0, 4,
        7, 8, 1, 4, 6, 9,
    ]
    data = [
        1.7, 0.13, 1.0, 0.02, 0.01, 1.5, 1.1, 0.02, 2.6, 0.16, 0.09, 0.52,
        0.53, 1.2, 0.16, 1.3, 0.56, 0.09, 1.6, 0.11, 0.13, 0.52, 0.11, 1.4,
        0.01, 0.53, 0.56, 3.1,
    ]
    a = CsMatrix.csr((10, 10), indptr, indices, data)
    assert is_symmetric(a) is True


def test_non_square_is_not_symmetric():
    a = CsMatrix.csr((2, 3), [0, 1, 2], [0, 1], [1.0, 1.0])
    assert is_symmetric(a) is False


def test_missing_transposed_entry():
    a = CsMatrix.csr((2, 2), [0, 2, 3], [0, 1, 1], [1.0, 2.0, 1.0])
    assert is_symmetric(a) is False


def test_different_transposed_value():
    a = CsMatrix.csr((2, 2), [0, 2, 4], [0, 1, 0, 1], [1.0, 2.0, 3.0, 1.0])
    assert is_symmetric(a) is False


def test_eye_is_symmetric():
    assert is_symmetric(CsMatrix.eye(4)) is True
    assert is_symmetric(CsMatrix.eye_csc(4)) is True