"""Symbolic and numeric phases of the CSR sparse matrix product (SMMP)."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from compsparse.matrix import CsMatrix


def symbolic(a: CsMatrix, b: CsMatrix) -> tuple[list[int], list[int]]:
    """Structure of ``C = A * B`` for matrices in CSR layout.

    Returns the indptr and the sorted column indices of ``C``.
    """
    if a.cols() != b.rows():
        raise ValueError("Dimension mismatch")
    seen = [False] * b.cols()
    c_indptr = [0]
    c_indices: list[int] = []
    for a_row in a.outer_iterator():
        row_cols: list[int] = []
        for a_col in a_row.indices:
            for b_col in b.outer_view(a_col).indices:
                if not seen[b_col]:
                    seen[b_col] = True
                    row_cols.append(b_col)
        row_cols.sort()
        for col in row_cols:
            seen[col] = False
        c_indices.extend(row_cols)
        c_indptr.append(c_indptr[-1] + len(row_cols))
    return c_indptr, c_indices


def numeric(
    a: CsMatrix,
    b: CsMatrix,
    c_indptr: Sequence[int],
    c_indices: Sequence[int],
) -> list[Any]:
    """Values of ``C = A * B`` for the structure computed by :func:`symbolic`.

    ``c_indptr`` may describe a chunk of rows starting at a non-zero offset;
    ``c_indices`` then holds only the indices of that chunk.
    """
    if not a.is_csr() or not b.is_csr():
        raise ValueError("Storage mismatch")
    if len(c_indptr) != a.rows() + 1:
        raise ValueError("Dimension mismatch")
    if a.cols() != b.rows():
        raise ValueError("Dimension mismatch")
    offset = c_indptr[0]
    if len(c_indices) != c_indptr[-1] - offset:
        raise ValueError("Indices length and indptr's nnz do not match")

    tmp: list[Any] = [0] * b.cols()
    c_data: list[Any] = []
    for a_row, start, stop in zip(a.outer_iterator(), c_indptr, c_indptr[1:]):
        for a_col, a_val in a_row:
            for b_col, b_val in b.outer_view(a_col):
                tmp[b_col] = tmp[b_col] + a_val * b_val
        for c_col in c_indices[start - offset : stop - offset]:
            c_data.append(tmp[c_col])
            tmp[c_col] = 0
    return c_data