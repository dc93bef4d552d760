"""Dense helpers for sparse linear algebra."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence
from numbers import Integral
from typing import Any


def _scalar_div(a: Any, b: Any) -> Any:
    """Divide, truncating toward zero when both operands are integers."""
    if isinstance(a, Integral) and isinstance(b, Integral):
        q = abs(a) // abs(b)
        return q if (a < 0) == (b < 0) else -q
    return a / b


def diag_solve(diag: Sequence[Any], x: MutableSequence[Any]) -> None:
    """Solve the diagonal system in place: divide each ``x[i]`` by ``diag[i]``."""
    if len(diag) != len(x):
        raise ValueError("Dimension mismatch")
    for i, d in enumerate(diag):
        x[i] = _scalar_div(x[i], d)