"""Elimination trees stored as the parent of each node."""

from __future__ import annotations

from typing import Optional


class Parents:
    """Parent information of an elimination tree, which may have several roots."""

    def __init__(self, nb_nodes: int) -> None:
        self._parents: list[Optional[int]] = [None] * nb_nodes

    def __len__(self) -> int:
        return len(self._parents)

    def __repr__(self) -> str:
        return f"Parents({self._parents!r})"

    def _check_node(self, node: int) -> None:
        if node < 0 or node >= len(self._parents):
            raise IndexError(f"node {node} is out of bounds")

    def get_parent(self, node: int) -> Optional[int]:
        """The parent of ``node``, or None if it is a root."""
        self._check_node(node)
        return self._parents[node]

    def is_root(self, node: int) -> bool:
        """Whether ``node`` is a root."""
        self._check_node(node)
        return self._parents[node] is None

    def set_parent(self, node: int, parent: int) -> None:
        """Set the parent of ``node``."""
        if parent < 0 or parent >= len(self._parents):
            raise IndexError("parent is out of bounds")
        self._check_node(node)
        self._parents[node] = parent

    def set_root(self, node: int) -> None:
        """Make ``node`` a root."""
        self._check_node(node)
        self._parents[node] = None

    def uproot(self, node: int, parent: int) -> None:
        """Give ``parent`` to ``node`` if it is a root; otherwise do nothing."""
        if parent < 0 or parent >= len(self._parents):
            raise IndexError("parent is out of bounds")
        if self.is_root(node):
            self.set_parent(node, parent)