import numpy as np
import pytest

from compsparse.matrix import CsMatrix
from compsparse.special import tri_mesh_graph_laplacian

TRIANGLES = [[0, 3, 4], [0, 4, 1], [1, 4, 5], [1, 5, 2]]


def expected_laplacian():
    x = -1.0
    return CsMatrix.csr(
        (6, 6),
        [0, 4, 9, 12, 15, 20, 24],
        [0, 1, 3, 4, 0, 1, 2, 4, 5, 1, 2, 5, 0, 3, 4, 0, 1, 3, 4, 5, 1, 2, 4, 5],
        [
            3.0, x, x, x,
            x, 4.0, x, x, x,
            x, 2.0, x,
            x, 2.0, x,
            x, x, x, 4.0, x,
            x, x, x, 3.0,
        ],
    )


def test_tri_mesh_graph_laplacian():
    assert tri_mesh_graph_laplacian(6, TRIANGLES) == expected_laplacian()


def test_tri_mesh_graph_laplacian_numpy_input():
    lap = tri_mesh_graph_laplacian(6, np.array(TRIANGLES))
    assert lap == expected_laplacian()


def test_laplacian_rows_sum_to_zero():
    dense = tri_mesh_graph_laplacian(6, TRIANGLES).to_dense()
    assert np.allclose(dense.sum(axis=1), 0.0)
    assert np.array_equal(dense, dense.T)


def test_bad_triangle_rejected():
    with pytest.raises(ValueError):
        tri_mesh_graph_laplacian(3, [[0, 1]])