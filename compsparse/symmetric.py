"""Functions dealing with symmetric sparse matrices."""

from __future__ import annotations

from compsparse.matrix import CsMatrix


def is_symmetric(mat: CsMatrix) -> bool:
    """Whether ``mat`` is square and equal to its transpose."""
    if mat.rows() != mat.cols():
        return False
    for outer_ind, vec in enumerate(mat.outer_iterator()):
        for inner_ind, value in vec:
            transposed = mat.get_outer_inner(inner_ind, outer_ind)
            if transposed is None or transposed != value:
                return False
    return True