"""Sparse triangular solve with a sparse right-hand side."""

from __future__ import annotations

from collections.abc import MutableSequence
from typing import Any

from compsparse.matrix import CsMatrix, SparseVector
from compsparse.trisolve import _process_lower_col


def lsolve_csc_sparse_rhs(
    lower_tri_mat: CsMatrix,
    rhs: SparseVector,
    x_workspace: MutableSequence[Any],
    visited: MutableSequence[bool],
) -> list[int]:
    """Solve ``L x = rhs`` for a CSC lower triangular ``L`` and a sparse ``rhs``.

    ``x_workspace`` must have one entry per row of ``L``; its input values do
    not matter. ``visited`` must be of the same length and all False.
    Returns the nonzero pattern of the solution, in the order it was solved;
    ``x_workspace`` then holds the solution values at these indices.
    """
    if not lower_tri_mat.is_csc():
        raise ValueError("Storage mismatch")
    n = lower_tri_mat.rows()
    if len(x_workspace) != n:
        raise ValueError("x should be of len n")
    if len(visited) != n:
        raise ValueError("visited should be of len n")

    # Depth first search on the matrix graph gives the nonzero pattern.
    postorder: list[int] = []
    for root_ind, _ in rhs:
        if visited[root_ind]:
            continue
        stack: list[tuple[bool, int]] = [(True, root_ind)]
        while stack:
            entering, ind = stack.pop()
            if not entering:
                postorder.append(ind)
                continue
            if visited[ind]:
                continue
            visited[ind] = True
            stack.append((False, ind))
            stack.extend((True, child) for child, _ in lower_tri_mat.outer_view(ind))

    pattern = postorder[::-1]
    for ind in pattern:
        x_workspace[ind] = 0
    rhs.scatter(x_workspace)
    for ind in pattern:
        _process_lower_col(lower_tri_mat.outer_view(ind), ind, x_workspace)
    return pattern