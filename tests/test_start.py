import pytest

from compsparse.matrix import CsMatrix
from compsparse.start import MinimumDegree, Next, PseudoPeripheral, StartStrategy


def path_graph(n):
    indptr = [0]
    indices = []
    for i in range(n):
        row = [j for j in (i - 1, i, i + 1) if 0 <= j < n]
        indices.extend(row)
        indptr.append(len(indices))
    return CsMatrix.csr((n, n), indptr, indices, [1.0] * len(indices))


def star_graph():
    # vertex 0 linked to 1, 2, 3; vertex 3 linked to 4
    rows = [[0, 1, 2, 3], [0, 1], [0, 2], [0, 3, 4], [3, 4]]
    indptr = [0]
    indices = []
    for row in rows:
        indices.extend(row)
        indptr.append(len(indices))
    return CsMatrix.csr((5, 5), indptr, indices, [1.0] * len(indices))


def test_start_strategy_is_abstract():
    with pytest.raises(TypeError):
        StartStrategy()


def test_next_picks_first_unvisited():
    mat = path_graph(4)
    visited = [True, True, False, False]
    assert Next().find_start_vertex(visited, mat.degrees(), mat) == 2


def test_next_raises_when_all_visited():
    mat = path_graph(3)
    with pytest.raises(ValueError):
        Next().find_start_vertex([True] * 3, mat.degrees(), mat)


def test_minimum_degree_returns_unvisited_minimum():
    mat = star_graph()
    degrees = mat.degrees()
    visited = [False, False, True, False, False]
    chosen = MinimumDegree().find_start_vertex(visited, degrees, mat)
    assert not visited[chosen]
    assert degrees[chosen] == min(d for d, v in zip(degrees, visited) if not v)


def test_minimum_degree_raises_when_all_visited():
    mat = star_graph()
    with pytest.raises(ValueError):
        MinimumDegree().find_start_vertex([True] * 5, mat.degrees(), mat)


def test_pseudo_peripheral_isolated_vertex():
    mat = CsMatrix.eye(3)
    chosen = PseudoPeripheral().find_start_vertex([False] * 3, mat.degrees(), mat)
    assert chosen == 0


def test_pseudo_peripheral_finds_path_endpoint():
    mat = path_graph(5)
    visited = [True, False, False, False, False]
    chosen = PseudoPeripheral().find_start_vertex(visited, mat.degrees(), mat)
    assert chosen in {0, 4}
    assert not visited[chosen]


def test_pseudo_peripheral_endpoint_from_first_vertex():
    mat = path_graph(6)
    chosen = PseudoPeripheral().find_start_vertex([False] * 6, mat.degrees(), mat)
    assert chosen in {0, 5}


def test_pseudo_peripheral_raises_when_all_visited():
    mat = path_graph(3)
    with pytest.raises(ValueError):
        PseudoPeripheral().find_start_vertex([True] * 3, mat.degrees(), mat)