"""Sparse matrix product of CSR matrices."""

from __future__ import annotations

from compsparse.indptr import IndPtr
from compsparse.matrix import CompressedStorage, CsMatrix
from compsparse.smmp import numeric, symbolic


def mul_csr_csr(lhs: CsMatrix, rhs: CsMatrix) -> CsMatrix:
    """The product ``lhs * rhs`` of two CSR matrices, as a CSR matrix."""
    if lhs.cols() != rhs.rows():
        raise ValueError("Dimension mismatch")
    if not lhs.is_csr() or not rhs.is_csr():
        raise ValueError("Storage mismatch")
    indptr, indices = symbolic(lhs, rhs)
    data = numeric(lhs, rhs, indptr, indices)
    return CsMatrix._trusted(
        CompressedStorage.CSR,
        (lhs.rows(), rhs.cols()),
        IndPtr._trusted(indptr),
        indices,
        data,
    )