"""Sparse triangular solves with dense right-hand sides."""

from __future__ import annotations

from collections.abc import MutableSequence
from typing import Any

from compsparse.linalg import _scalar_div
from compsparse.matrix import CsMatrix, SparseVector


class SingularMatrixError(ArithmeticError):
    """Raised when a solve meets a zero on the diagonal."""

    def __init__(self, index: int, reason: str) -> None:
        super().__init__(f"singular matrix at index {index}: {reason}")
        self.index = index
        self.reason = reason


def _check_dimensions(mat: CsMatrix, rhs: MutableSequence[Any]) -> None:
    if mat.cols() != mat.rows():
        raise ValueError("Non square matrix passed to solver")
    if mat.cols() != len(rhs):
        raise ValueError("Dimension mismatch")


def _process_lower_col(
    col: SparseVector, col_ind: int, rhs: MutableSequence[Any]
) -> None:
    diag_val = col.get(col_ind)
    if diag_val is None:
        raise SingularMatrixError(col_ind, "diagonal element is a structural 0")
    if diag_val == 0:
        raise SingularMatrixError(col_ind, "diagonal element is a numeric 0")
    x = _scalar_div(rhs[col_ind], diag_val)
    rhs[col_ind] = x
    for row_ind, val in col:
        if row_ind > col_ind:
            rhs[row_ind] -= val * x


def lsolve_csr_dense_rhs(lower_tri_mat: CsMatrix, rhs: MutableSequence[Any]) -> None:
    """Solve ``L x = rhs`` in place for a CSR matrix, ignoring its upper part."""
    _check_dimensions(lower_tri_mat, rhs)
    if not lower_tri_mat.is_csr():
        raise ValueError("Storage mismatch")
    for row_ind, row in enumerate(lower_tri_mat.outer_iterator()):
        diag_val: Any = 0
        x = rhs[row_ind]
        for col_ind, val in row:
            if col_ind == row_ind:
                diag_val = val
            elif col_ind < row_ind:
                x -= val * rhs[col_ind]
        if diag_val == 0:
            raise SingularMatrixError(row_ind, "diagonal element is 0")
        rhs[row_ind] = _scalar_div(x, diag_val)


def lsolve_csc_dense_rhs(lower_tri_mat: CsMatrix, rhs: MutableSequence[Any]) -> None:
    """Solve ``L x = rhs`` in place for a CSC matrix, ignoring its upper part."""
    _check_dimensions(lower_tri_mat, rhs)
    if not lower_tri_mat.is_csc():
        raise ValueError("Storage mismatch")
    for col_ind, col in enumerate(lower_tri_mat.outer_iterator()):
        _process_lower_col(col, col_ind, rhs)


def usolve_csc_dense_rhs(upper_tri_mat: CsMatrix, rhs: MutableSequence[Any]) -> None:
    """Solve ``U x = rhs`` in place for a CSC matrix, ignoring its lower part."""
    _check_dimensions(upper_tri_mat, rhs)
    if not upper_tri_mat.is_csc():
        raise ValueError("Storage mismatch")
    columns = list(upper_tri_mat.outer_iterator())
    for col_ind in reversed(range(len(columns))):
        col = columns[col_ind]
        diag_val = col.get(col_ind)
        if diag_val is None:
            raise SingularMatrixError(col_ind, "diagonal element is a structural 0")
        if diag_val == 0:
            raise SingularMatrixError(col_ind, "diagonal element is a numeric 0")
        x = _scalar_div(rhs[col_ind], diag_val)
        rhs[col_ind] = x
        for row_ind, val in col:
            if row_ind < col_ind:
                rhs[row_ind] -= val * x


def usolve_csr_dense_rhs(upper_tri_mat: CsMatrix, rhs: MutableSequence[Any]) -> None:
    """Solve ``U x = rhs`` in place for a CSR matrix, ignoring its lower part."""
    _check_dimensions(upper_tri_mat, rhs)
    if not upper_tri_mat.is_csr():
        raise ValueError("Storage mismatch")
    rows = list(upper_tri_mat.outer_iterator())
    for row_ind in reversed(range(len(rows))):
        diag_val: Any = 0
        x = rhs[row_ind]
        for col_ind, val in rows[row_ind]:
            if col_ind == row_ind:
                diag_val = val
            elif col_ind > row_ind:
                x -= val * rhs[col_ind]
        if diag_val == 0:
            raise SingularMatrixError(row_ind, "diagonal element is a numeric 0")
        rhs[row_ind] = _scalar_div(x, diag_val)