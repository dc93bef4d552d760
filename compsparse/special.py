"""Common sparse matrices."""

from __future__ import annotations

import bisect
import operator
from collections.abc import Iterable, Sequence

from compsparse.matrix import CsMatrix


def tri_mesh_graph_laplacian(
    nb_vertices: int, triangles: Iterable[Sequence[int]]
) -> CsMatrix:
    """The graph laplacian of a triangle mesh, as a CSR matrix of floats."""
    neighbors: list[list[int]] = [[] for _ in range(nb_vertices)]

    def insert_edge(v0: int, v1: int) -> None:
        vert_neighbs = neighbors[v0]
        pos = bisect.bisect_left(vert_neighbs, v1)
        if pos == len(vert_neighbs) or vert_neighbs[pos] != v1:
            vert_neighbs.insert(pos, v1)

    for triangle in triangles:
        if len(triangle) != 3:
            raise ValueError("triangles must have exactly 3 vertices")
        v0, v1, v2 = (operator.index(v) for v in triangle)
        insert_edge(v0, v1)
        insert_edge(v1, v0)
        insert_edge(v0, v2)
        insert_edge(v2, v0)
        insert_edge(v1, v2)
        insert_edge(v2, v1)

    indptr = [0]
    indices: list[int] = []
    data: list[float] = []
    for vert_ind, vert_neighbs in enumerate(neighbors):
        degree = len(vert_neighbs)
        indptr.append(indptr[-1] + degree + 1)
        below_diag = True
        for neighbor in vert_neighbs:
            if below_diag and neighbor > vert_ind:
                data.append(float(degree))
                indices.append(vert_ind)
                below_diag = False
            data.append(-1.0)
            indices.append(neighbor)
        if below_diag:
            data.append(float(degree))
            indices.append(vert_ind)
    return CsMatrix.csr((nb_vertices, nb_vertices), indptr, indices, data)