"""Strategies choosing the starting vertex of the Cuthill-McKee algorithm."""

from __future__ import annotations

import abc
from collections.abc import Sequence

from compsparse.matrix import CsMatrix

_NO_VERTEX_LEFT = "There should always be a unvisited vertex left to choose"


def _first_unvisited(visited: Sequence[bool]) -> int:
    for i, seen in enumerate(visited):
        if not seen:
            return i
    raise ValueError(_NO_VERTEX_LEFT)


class StartStrategy(abc.ABC):
    """Chooses a starting vertex among the vertices not yet visited.

    Subclass it to provide a custom strategy, for instance one returning
    predetermined starting vertices.
    """

    @abc.abstractmethod
    def find_start_vertex(
        self, visited: Sequence[bool], degrees: Sequence[int], mat: CsMatrix
    ) -> int:
        """Return an unvisited vertex. At least one must be left."""


class Next(StartStrategy):
    """Choose the first vertex that has not been visited."""

    def find_start_vertex(
        self, visited: Sequence[bool], degrees: Sequence[int], mat: CsMatrix
    ) -> int:
        return _first_unvisited(visited)


class MinimumDegree(StartStrategy):
    """Choose an unvisited vertex of minimum degree."""

    def find_start_vertex(
        self, visited: Sequence[bool], degrees: Sequence[int], mat: CsMatrix
    ) -> int:
        candidates = [i for i, seen in enumerate(visited) if not seen]
        if not candidates:
            raise ValueError(_NO_VERTEX_LEFT)
        return min(candidates, key=lambda i: degrees[i])


class PseudoPeripheral(StartStrategy):
    """Find a pseudoperipheral vertex with the method of George and Liu.

    The most expensive strategy, which typically gives the narrowest bandwidth.
    """

    @staticmethod
    def _rls_contender_and_height(
        root: int, degrees: Sequence[int], mat: CsMatrix
    ) -> tuple[int, int]:
        """Build the rooted level structure at ``root``.

        Returns the vertex of minimum degree in its last level, and its height.
        """
        visited = [False] * len(degrees)
        visited[root] = True
        rls = [root]
        rls_index = 0
        height = 0
        current_level_countdown = 1
        next_level_countup = 0
        last_level_len = 1

        while rls_index < len(rls):
            parent = rls[rls_index]
            current_level_countdown -= 1
            for neighbor in mat.outer_view(parent).indices:
                if not visited[neighbor]:
                    visited[neighbor] = True
                    next_level_countup += 1
                    rls.append(neighbor)
            if current_level_countdown == 0:
                if next_level_countup > 0:
                    last_level_len = next_level_countup
                current_level_countdown = next_level_countup
                next_level_countup = 0
                height += 1
            rls_index += 1

        last_level = rls[len(rls) - last_level_len :]
        contender = min(last_level, key=lambda i: degrees[i])
        return contender, height

    def find_start_vertex(
        self, visited: Sequence[bool], degrees: Sequence[int], mat: CsMatrix
    ) -> int:
        current = _first_unvisited(visited)
        # Isolated vertices are pseudoperipheral by definition.
        if degrees[current] == 0:
            return current
        contender, current_height = self._rls_contender_and_height(
            current, degrees, mat
        )
        while True:
            next_contender, contender_height = self._rls_contender_and_height(
                contender, degrees, mat
            )
            if contender_height > current_height:
                current_height = contender_height
                current = contender
                contender = next_contender
            else:
                return current