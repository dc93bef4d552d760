"""Compressed sparse matrices and vectors, with slicing and dense conversion."""

from __future__ import annotations

import bisect
import enum
import operator
from collections.abc import Iterable, Iterator, MutableSequence
from typing import Any, Optional

import numpy as np

from compsparse.indptr import IndPtr, StructureError, StructureErrorKind


class CompressedStorage(enum.Enum):
    """Whether the outer dimension of a matrix is its rows or its columns."""

    CSR = "csr"
    CSC = "csc"


def _flip(storage: CompressedStorage) -> CompressedStorage:
    if storage is CompressedStorage.CSR:
        return CompressedStorage.CSC
    return CompressedStorage.CSR


def _check_inner_segment(indices: list[int], inner_dim: int) -> None:
    if any(a >= b for a, b in zip(indices, indices[1:])):
        raise StructureError(StructureErrorKind.UNSORTED, "Indices are not sorted")
    if indices and (indices[0] < 0 or indices[-1] >= inner_dim):
        raise StructureError(
            StructureErrorKind.OUT_OF_RANGE, "Index is larger than inner dimension"
        )


def _dense_dtype(data: list[Any]) -> Any:
    return np.asarray(data).dtype if data else np.float64


class SparseVector:
    """A sparse vector: sorted nonzero indices and their values."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, dim: int, indices: Iterable[int], data: Iterable[Any]) -> None:
        dim = operator.index(dim)
        if dim < 0:
            raise ValueError("dimension must be non-negative")
        idx = [operator.index(i) for i in indices]
        values = list(data)
        if len(idx) != len(values):
            raise StructureError(
                StructureErrorKind.SIZE_MISMATCH,
                "Indices and data lengths do not match",
            )
        _check_inner_segment(idx, dim)
        self._dim = dim
        self._indices = idx
        self._data = values

    @classmethod
    def _trusted(cls, dim: int, indices: list[int], data: list[Any]) -> SparseVector:
        obj = cls.__new__(cls)
        obj._dim = dim
        obj._indices = indices
        obj._data = data
        return obj

    @property
    def dim(self) -> int:
        """The dimension of the vector."""
        return self._dim

    @property
    def indices(self) -> list[int]:
        """The sorted indices of the nonzeros."""
        return self._indices

    @property
    def data(self) -> list[Any]:
        """The values of the nonzeros."""
        return self._data

    def nnz(self) -> int:
        """The number of stored nonzeros."""
        return len(self._indices)

    def get(self, index: int) -> Optional[Any]:
        """The value stored at ``index``, or None if it is not stored."""
        pos = bisect.bisect_left(self._indices, index)
        if pos < len(self._indices) and self._indices[pos] == index:
            return self._data[pos]
        return None

    def __iter__(self) -> Iterator[tuple[int, Any]]:
        return zip(self._indices, self._data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SparseVector):
            return NotImplemented
        return (
            self._dim == other._dim
            and self._indices == other._indices
            and self._data == other._data
        )

    def __repr__(self) -> str:
        return f"SparseVector({self._dim}, {self._indices!r}, {self._data!r})"

    def to_dense(self) -> np.ndarray:
        """A dense numpy copy of this vector."""
        out = np.zeros(self._dim, dtype=_dense_dtype(self._data))
        assign_vector_to_dense(out, self)
        return out

    def scatter(self, out: MutableSequence[Any]) -> None:
        """Write the stored values into ``out`` at their indices."""
        if len(out) != self._dim:
            raise ValueError("Dimension mismatch")
        for i, v in self:
            out[i] = v

    def to_set(self) -> set[tuple[int, Any]]:
        """The set of ``(index, value)`` pairs."""
        return set(self)


class CsMatrix:
    """A sparse matrix in compressed row (CSR) or column (CSC) storage."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(
        self,
        storage: CompressedStorage,
        shape: tuple[int, int],
        indptr: Iterable[int],
        indices: Iterable[int],
        data: Iterable[Any],
    ) -> None:
        storage = CompressedStorage(storage)
        nrows, ncols = (operator.index(n) for n in shape)
        if nrows < 0 or ncols < 0:
            raise ValueError("shape must be non-negative")
        ip = IndPtr(indptr)
        outer, inner = (nrows, ncols) if storage is CompressedStorage.CSR else (ncols, nrows)
        if ip.outer_dims() != outer:
            raise StructureError(
                StructureErrorKind.SIZE_MISMATCH,
                "Indptr length does not match dimension",
            )
        idx = [operator.index(i) for i in indices]
        values = list(data)
        if len(idx) != len(values):
            raise StructureError(
                StructureErrorKind.SIZE_MISMATCH,
                "Indices and data lengths do not match",
            )
        if ip.nnz() != len(idx):
            raise StructureError(
                StructureErrorKind.SIZE_MISMATCH,
                "Indices length and indptr's nnz do not match",
            )
        for rng in ip.iter_outer():
            _check_inner_segment(idx[rng.start : rng.stop], inner)
        self._storage = storage
        self._nrows = nrows
        self._ncols = ncols
        self._indptr = ip
        self._indices = idx
        self._data = values

    @classmethod
    def _trusted(
        cls,
        storage: CompressedStorage,
        shape: tuple[int, int],
        indptr: IndPtr,
        indices: list[int],
        data: list[Any],
    ) -> CsMatrix:
        obj = cls.__new__(cls)
        obj._storage = storage
        obj._nrows, obj._ncols = shape
        obj._indptr = indptr
        obj._indices = indices
        obj._data = data
        return obj

    @classmethod
    def csr(cls, shape, indptr, indices, data) -> CsMatrix:
        """Build a CSR matrix, checking its structure."""
        return cls(CompressedStorage.CSR, shape, indptr, indices, data)

    @classmethod
    def csc(cls, shape, indptr, indices, data) -> CsMatrix:
        """Build a CSC matrix, checking its structure."""
        return cls(CompressedStorage.CSC, shape, indptr, indices, data)

    @classmethod
    def eye(cls, n: int) -> CsMatrix:
        """The ``n`` by ``n`` identity in CSR storage."""
        return cls.csr((n, n), range(n + 1), range(n), [1.0] * n)

    @classmethod
    def eye_csc(cls, n: int) -> CsMatrix:
        """The ``n`` by ``n`` identity in CSC storage."""
        return cls.csc((n, n), range(n + 1), range(n), [1.0] * n)

    @property
    def storage(self) -> CompressedStorage:
        """The storage order."""
        return self._storage

    @property
    def shape(self) -> tuple[int, int]:
        """``(rows, cols)``."""
        return (self._nrows, self._ncols)

    @property
    def indptr(self) -> IndPtr:
        """The outer pointers."""
        return self._indptr

    @property
    def indices(self) -> list[int]:
        """The inner indices of the nonzeros."""
        return self._indices

    @property
    def data(self) -> list[Any]:
        """The values of the nonzeros."""
        return self._data

    def rows(self) -> int:
        """The number of rows."""
        return self._nrows

    def cols(self) -> int:
        """The number of columns."""
        return self._ncols

    def nnz(self) -> int:
        """The number of stored nonzeros."""
        return self._indptr.nnz()

    def is_csr(self) -> bool:
        """Whether the storage is row-compressed."""
        return self._storage is CompressedStorage.CSR

    def is_csc(self) -> bool:
        """Whether the storage is column-compressed."""
        return self._storage is CompressedStorage.CSC

    def outer_dims(self) -> int:
        """The size of the outer dimension."""
        return self._nrows if self.is_csr() else self._ncols

    def _inner_dims(self) -> int:
        return self._ncols if self.is_csr() else self._nrows

    def outer_view(self, i: int) -> SparseVector:
        """The ``i``-th outer vector (a row for CSR, a column for CSC)."""
        rng = self._indptr.outer_inds(i)
        return SparseVector._trusted(
            self._inner_dims(),
            self._indices[rng.start : rng.stop],
            self._data[rng.start : rng.stop],
        )

    def outer_iterator(self) -> Iterator[SparseVector]:
        """Yield each outer vector in order."""
        inner = self._inner_dims()
        for rng in self._indptr.iter_outer():
            yield SparseVector._trusted(
                inner,
                self._indices[rng.start : rng.stop],
                self._data[rng.start : rng.stop],
            )

    def get_outer_inner(self, outer: int, inner: int) -> Optional[Any]:
        """The value at ``(outer, inner)``, or None if it is not stored."""
        if outer < 0 or outer >= self.outer_dims():
            return None
        return self.outer_view(outer).get(inner)

    def degrees(self) -> list[int]:
        """For each outer dimension, the number of off-diagonal nonzeros."""
        return [
            sum(1 for inner, _ in vec if inner != outer)
            for outer, vec in enumerate(self.outer_iterator())
        ]

    def max_outer_nnz(self) -> int:
        """The largest number of nonzeros in a single outer dimension."""
        return max((len(rng) for rng in self._indptr.iter_outer()), default=0)

    def slice_outer(self, start: int, end: Optional[int] = None) -> CsMatrix:
        """The matrix restricted to outer dimensions ``start..end``."""
        if end is None:
            end = self.outer_dims()
        if end < start:
            raise ValueError("Invalid view")
        rng = self._indptr.outer_inds_slice(start, end)
        indptr = self._indptr.middle_slice(start, end)
        if self.is_csr():
            shape = (end - start, self._ncols)
        else:
            shape = (self._nrows, end - start)
        return CsMatrix._trusted(
            self._storage,
            shape,
            indptr,
            self._indices[rng.start : rng.stop],
            self._data[rng.start : rng.stop],
        )

    def transpose(self) -> CsMatrix:
        """The transpose, sharing the same compressed arrays in the other storage."""
        return CsMatrix._trusted(
            _flip(self._storage),
            (self._ncols, self._nrows),
            IndPtr._trusted(list(self._indptr)),
            list(self._indices),
            list(self._data),
        )

    def to_other_storage(self) -> CsMatrix:
        """The same matrix in the other storage order."""
        new_outer = self._inner_dims()
        counts = [0] * new_outer
        for inner in self._indices:
            counts[inner] += 1
        indptr = [0]
        for c in counts:
            indptr.append(indptr[-1] + c)
        cursor = indptr[:-1]
        nnz = indptr[-1]
        indices: list[int] = [0] * nnz
        data: list[Any] = [None] * nnz
        for outer, vec in enumerate(self.outer_iterator()):
            for inner, value in vec:
                pos = cursor[inner]
                indices[pos] = outer
                data[pos] = value
                cursor[inner] = pos + 1
        return CsMatrix._trusted(
            _flip(self._storage), self.shape, IndPtr._trusted(indptr), indices, data
        )

    def to_dense(self) -> np.ndarray:
        """A dense numpy copy of this matrix."""
        out = np.zeros(self.shape, dtype=_dense_dtype(self._data))
        assign_to_dense(out, self)
        return out

    def __iter__(self) -> Iterator[tuple[Any, tuple[int, int]]]:
        csr = self.is_csr()
        for outer, vec in enumerate(self.outer_iterator()):
            for inner, value in vec:
                yield value, ((outer, inner) if csr else (inner, outer))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CsMatrix):
            return NotImplemented
        return (
            self._storage is other._storage
            and self.shape == other.shape
            and self._indptr.to_proper() == other._indptr.to_proper()
            and self._indices == other._indices
            and self._data == other._data
        )

    def __repr__(self) -> str:
        return (
            f"CsMatrix({self._storage.name}, {self.shape}, "
            f"{self._indptr.to_proper()!r}, {self._indices!r}, {self._data!r})"
        )


def assign_to_dense(array: np.ndarray, mat: CsMatrix) -> None:
    """Write the nonzeros of ``mat`` into the 2-d ``array``; other entries are kept."""
    if array.shape[1] != mat.cols() or array.shape[0] != mat.rows():
        raise ValueError("Dimension mismatch")
    for value, (r, c) in mat:
        array[r, c] = value


def assign_vector_to_dense(array: MutableSequence[Any], vec: SparseVector) -> None:
    """Write the nonzeros of ``vec`` into ``array``; other entries are kept."""
    if len(array) != vec.dim:
        raise ValueError("Dimension mismatch")
    for i, value in vec:
        array[i] = value