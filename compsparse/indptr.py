"""Storage of the outer-dimension pointers of a compressed sparse matrix."""

from __future__ import annotations

import enum
import operator
import sys
from collections.abc import Iterable, Iterator, Sequence

# Indptr values may not exceed half the range of an unsigned machine word.
_MAX_INDPTR = sys.maxsize


class StructureErrorKind(enum.Enum):
    """Category of a structural inconsistency."""

    UNSORTED = "unsorted"
    SIZE_MISMATCH = "size_mismatch"
    OUT_OF_RANGE = "out_of_range"


class StructureError(ValueError):
    """Raised when sparse storage does not respect its structural invariants."""

    def __init__(self, kind: StructureErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message


def check_structure(storage: Iterable[int]) -> None:
    """Validate raw indptr storage, raising StructureError if it is invalid."""
    values = list(storage)
    for value in values:
        try:
            operator.index(value)
        except TypeError:
            raise StructureError(
                StructureErrorKind.OUT_OF_RANGE,
                "Indptr value out of range of usize",
            ) from None
        if value < 0:
            raise StructureError(
                StructureErrorKind.OUT_OF_RANGE,
                "Indptr value out of range of usize",
            )
    if any(a > b for a, b in zip(values, values[1:])):
        raise StructureError(StructureErrorKind.UNSORTED, "Unsorted indptr")
    if values and values[-1] > _MAX_INDPTR:
        raise StructureError(
            StructureErrorKind.OUT_OF_RANGE,
            "An indptr value is larger than allowed",
        )
    if not values:
        raise StructureError(
            StructureErrorKind.SIZE_MISMATCH,
            "An indptr should have its len >= 1",
        )


class IndPtr:
    """Validated outer pointers of a compressed matrix.

    The storage may start at a non-zero value, in which case it describes
    a slice of a larger matrix; all positions returned are then relative
    to the first value.
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, storage: Iterable[int]) -> None:
        values = [operator.index(v) if isinstance(v, int) else v for v in storage]
        check_structure(values)
        self._storage: list[int] = [operator.index(v) for v in values]

    @classmethod
    def _trusted(cls, storage: list[int]) -> IndPtr:
        obj = cls.__new__(cls)
        obj._storage = storage
        return obj

    def __len__(self) -> int:
        return len(self._storage)

    def __iter__(self) -> Iterator[int]:
        return iter(self._storage)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, IndPtr):
            return self._storage == other._storage
        if isinstance(other, Sequence) and not isinstance(other, (str, bytes)):
            return self._storage == list(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"IndPtr({self._storage!r})"

    def _check_outer(self, i: int) -> None:
        if i < 0 or i + 1 >= len(self._storage):
            raise IndexError(f"outer index {i} out of range")

    def _at(self, i: int) -> int:
        if i < 0 or i >= len(self._storage):
            raise IndexError(f"indptr index {i} out of range")
        return self._storage[i]

    def is_empty(self) -> bool:
        """Whether this indptr describes no outer dimension."""
        return len(self._storage) <= 1

    def outer_dims(self) -> int:
        """The number of outer dimensions represented."""
        return max(len(self._storage) - 1, 0)

    def is_proper(self) -> bool:
        """Whether the storage starts at 0, i.e. describes a non-sliced matrix."""
        return bool(self._storage) and self._storage[0] == 0

    def offset(self) -> int:
        """The first stored value, which all positions are relative to."""
        return self._storage[0] if self._storage else 0

    def to_proper(self) -> list[int]:
        """The storage shifted so that it starts at 0."""
        off = self.offset()
        return [v - off for v in self._storage]

    def nnz(self) -> int:
        """The number of nonzero elements described."""
        if not self._storage:
            return 0
        return self._storage[-1] - self.offset()

    def index(self, i: int) -> int:
        """The value at position ``i``, relative to the offset."""
        return self._at(i) - self.offset()

    def outer_inds(self, i: int) -> range:
        """Range of nonzero positions for outer dimension ``i``."""
        self._check_outer(i)
        off = self.offset()
        return range(self._storage[i] - off, self._storage[i + 1] - off)

    def outer_inds_slice(self, start: int, end: int) -> range:
        """Range of nonzero positions for outer dimensions ``start..end``."""
        off = self.offset()
        return range(self._at(start) - off, self._at(end) - off)

    def nnz_in_outer(self, i: int) -> int:
        """The number of nonzeros in outer dimension ``i``."""
        self._check_outer(i)
        return self._storage[i + 1] - self._storage[i]

    def iter_outer(self) -> Iterator[range]:
        """Yield the range of nonzero positions of each outer dimension."""
        off = self.offset()
        for a, b in zip(self._storage, self._storage[1:]):
            yield range(a - off, b - off)

    def iter_outer_nnz_inds(self) -> Iterator[int]:
        """Yield, for each nonzero, the outer dimension it belongs to."""
        cur_outer = 0
        for i in range(self.nnz()):
            while i == self.outer_inds(cur_outer).stop:
                cur_outer += 1
            yield cur_outer

    def middle_slice(self, start: int, end: int | None = None) -> IndPtr:
        """Indptr restricted to outer dimensions ``start..end``."""
        if end is None:
            end = self.outer_dims()
        if start < 0 or end < start or end > self.outer_dims():
            raise IndexError(f"invalid outer slice {start}..{end}")
        return IndPtr._trusted(self._storage[start : end + 1])

    def record_new_element(self, outer_ind: int) -> None:
        """Record that an element was added to outer dimension ``outer_ind``."""
        if outer_ind < 0 or outer_ind >= len(self._storage):
            raise IndexError(f"outer index {outer_ind} out of range")
        for k in range(outer_ind + 1, len(self._storage)):
            self._storage[k] += 1