"""Products of sparse matrices and vectors with sparse or dense operands."""

from __future__ import annotations

import bisect
from collections.abc import MutableSequence, Sequence
from typing import Any

import numpy as np

from compsparse.matrix import CsMatrix, SparseVector


def _dot_smaller_first(
    small: SparseVector, large: SparseVector, swapped: bool
) -> Any:
    idx2 = large.indices
    val2 = large.data
    total: Any = 0
    lo = 0
    for ind, a in small:
        pos = bisect.bisect_left(idx2, ind, lo)
        if pos < len(idx2) and idx2[pos] == ind:
            b = val2[pos]
            # Keep the operand order of the caller for non-commutative scalars.
            total = total + (b * a if swapped else a * b)
        lo = pos
    return total


def csvec_dot_by_binary_search(vec1: SparseVector, vec2: SparseVector) -> Any:
    """Dot product of two sparse vectors, binary searching the larger one.

    Runs in O(M log N), where M and N are the nonzero counts of the vectors.
    """
    if vec1.nnz() > vec2.nnz():
        return _dot_smaller_first(vec2, vec1, swapped=True)
    return _dot_smaller_first(vec1, vec2, swapped=False)


def _check_mat_vec(
    mat: CsMatrix, in_vec: Sequence[Any], res_vec: MutableSequence[Any]
) -> None:
    if mat.cols() != len(in_vec) or mat.rows() != len(res_vec):
        raise ValueError("Dimension mismatch")


def mul_acc_mat_vec_csc(
    mat: CsMatrix, in_vec: Sequence[Any], res_vec: MutableSequence[Any]
) -> None:
    """Accumulate the product of a CSC matrix and a dense vector into ``res_vec``."""
    _check_mat_vec(mat, in_vec, res_vec)
    if not mat.is_csc():
        raise ValueError("Storage mismatch")
    for col_ind, col in enumerate(mat.outer_iterator()):
        vec_elem = in_vec[col_ind]
        for row_ind, mtx_elem in col:
            res_vec[row_ind] = res_vec[row_ind] + mtx_elem * vec_elem


def mul_acc_mat_vec_csr(
    mat: CsMatrix, in_vec: Sequence[Any], res_vec: MutableSequence[Any]
) -> None:
    """Accumulate the product of a CSR matrix and a dense vector into ``res_vec``."""
    _check_mat_vec(mat, in_vec, res_vec)
    if not mat.is_csr():
        raise ValueError("Storage mismatch")
    for row_ind, row in enumerate(mat.outer_iterator()):
        acc = res_vec[row_ind]
        for col_ind, mtx_elem in row:
            acc = acc + mtx_elem * in_vec[col_ind]
        res_vec[row_ind] = acc


def csr_mul_csvec(lhs: CsMatrix, rhs: SparseVector) -> SparseVector:
    """Product of a CSR matrix and a sparse vector, as a sparse vector."""
    if rhs.dim == 0:
        return SparseVector(0, [], [])
    if lhs.cols() != rhs.dim:
        raise ValueError("Dimension mismatch")
    indices: list[int] = []
    data: list[Any] = []
    for row_ind, lvec in enumerate(lhs.outer_iterator()):
        val = csvec_dot_by_binary_search(lvec, rhs)
        if val != 0:
            indices.append(row_ind)
            data.append(val)
    return SparseVector(lhs.rows(), indices, data)


def _check_dense(lhs: CsMatrix, rhs: np.ndarray, out: np.ndarray) -> None:
    if rhs.ndim != 2 or out.ndim != 2:
        raise ValueError("Dimension mismatch")
    if lhs.cols() != rhs.shape[0]:
        raise ValueError("Dimension mismatch")
    if lhs.rows() != out.shape[0]:
        raise ValueError("Dimension mismatch")
    if rhs.shape[1] != out.shape[1]:
        raise ValueError("Dimension mismatch")


def csr_mulacc_dense_rowmaj(lhs: CsMatrix, rhs: Any, out: np.ndarray) -> None:
    """Accumulate ``lhs * rhs`` into ``out``, working along rows of ``rhs``.

    Performs better when ``rhs`` has many columns.
    """
    rhs = np.asarray(rhs)
    _check_dense(lhs, rhs, out)
    if not lhs.is_csr():
        raise ValueError("Storage mismatch")
    for orow, line in enumerate(lhs.outer_iterator()):
        for col_ind, lval in line:
            out[orow, :] += lval * rhs[col_ind, :]


def csc_mulacc_dense_rowmaj(lhs: CsMatrix, rhs: Any, out: np.ndarray) -> None:
    """Accumulate ``lhs * rhs`` into ``out``, working along rows of ``rhs``.

    Performs better when ``rhs`` has many columns.
    """
    rhs = np.asarray(rhs)
    _check_dense(lhs, rhs, out)
    if not lhs.is_csc():
        raise ValueError("Storage mismatch")
    for lcol_ind, lcol in enumerate(lhs.outer_iterator()):
        rline = rhs[lcol_ind, :]
        for orow, lval in lcol:
            out[orow, :] += lval * rline


def csc_mulacc_dense_colmaj(lhs: CsMatrix, rhs: Any, out: np.ndarray) -> None:
    """Accumulate ``lhs * rhs`` into ``out``, one column of ``rhs`` at a time.

    Performs better when ``rhs`` has few columns.
    """
    rhs = np.asarray(rhs)
    _check_dense(lhs, rhs, out)
    if not lhs.is_csc():
        raise ValueError("Storage mismatch")
    columns = list(lhs.outer_iterator())
    for k in range(rhs.shape[1]):
        for rrow, lcol in enumerate(columns):
            rval = rhs[rrow, k]
            for orow, lval in lcol:
                out[orow, k] += lval * rval


def csr_mulacc_dense_colmaj(lhs: CsMatrix, rhs: Any, out: np.ndarray) -> None:
    """Accumulate ``lhs * rhs`` into ``out``, one column of ``rhs`` at a time.

    Performs better when ``rhs`` has few columns.
    """
    rhs = np.asarray(rhs)
    _check_dense(lhs, rhs, out)
    if not lhs.is_csr():
        raise ValueError("Storage mismatch")
    rows = list(lhs.outer_iterator())
    for k in range(rhs.shape[1]):
        for orow, lrow in enumerate(rows):
            acc = out[orow, k]
            for rrow, lval in lrow:
                acc = acc + lval * rhs[rrow, k]
            out[orow, k] = acc