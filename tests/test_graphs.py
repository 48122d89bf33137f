import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from algorithmia.graphs import (
    NO_EDGE,
    Edge,
    dijkstra,
    floyd_warshall,
    kruskal,
    prim,
    topological_sort_dfs,
    topological_sort_source_removal,
    warshall,
)


@st.composite
def complete_graphs(draw, symmetric=False):
    n = draw(st.integers(min_value=1, max_value=6))
    matrix = [[0] * n for _ in range(n)]
    for i in range(n):
        for j in range(n):
            if i == j:
                continue
            if symmetric and j < i:
                matrix[i][j] = matrix[j][i]
            else:
                matrix[i][j] = draw(st.integers(min_value=1, max_value=50))
    return matrix


@st.composite
def digraphs(draw):
    n = draw(st.integers(min_value=1, max_value=6))
    return [
        [draw(st.integers(min_value=0, max_value=1)) for _ in range(n)]
        for _ in range(n)
    ]


@st.composite
def dags(draw):
    n = draw(st.integers(min_value=1, max_value=7))
    order = draw(st.permutations(list(range(n))))
    matrix = [[0] * n for _ in range(n)]
    for a in range(n):
        for b in range(a + 1, n):
            if draw(st.booleans()):
                matrix[order[a]][order[b]] = 1
    return matrix


def _spans(tree, n):
    reached = {0}
    changed = True
    while changed:
        changed = False
        for edge in tree.edges:
            if (edge.u in reached) != (edge.v in reached):
                reached |= {edge.u, edge.v}
                changed = True
    return reached == set(range(n))


@settings(max_examples=60)
@given(complete_graphs())
def test_dijkstra_agrees_with_floyd(matrix):
    all_pairs = floyd_warshall(matrix)
    for source in range(len(matrix)):
        assert dijkstra(matrix, source) == all_pairs[source]


def test_dijkstra_unreachable_keeps_no_edge():
    matrix = [[0, 5, NO_EDGE], [5, 0, NO_EDGE], [NO_EDGE, NO_EDGE, 0]]
    assert dijkstra(matrix, 0) == [0, 5, NO_EDGE]


def test_dijkstra_rejects_bad_input():
    with pytest.raises(ValueError):
        dijkstra([[0, 1], [1, 0]], 2)
    with pytest.raises(ValueError):
        dijkstra([[0, 1], [1]], 0)


def test_floyd_prefers_indirect_path():
    matrix = [[0, 1, 10], [1, 0, 1], [10, 1, 0]]
    assert floyd_warshall(matrix)[0][2] == 2


@settings(max_examples=60)
@given(complete_graphs())
def test_floyd_triangle_inequality(matrix):
    dist = floyd_warshall(matrix)
    n = len(matrix)
    for i in range(n):
        for j in range(n):
            assert dist[i][j] <= matrix[i][j]
            for k in range(n):
                assert dist[i][j] <= dist[i][k] + dist[k][j]


def test_floyd_leaves_input_untouched():
    matrix = [[0, 1, 10], [1, 0, 1], [10, 1, 0]]
    floyd_warshall(matrix)
    assert matrix == [[0, 1, 10], [1, 0, 1], [10, 1, 0]]


@settings(max_examples=60)
@given(digraphs())
def test_warshall_matches_reachability(adjacency):
    weights = [[1 if flag else NO_EDGE for flag in row] for row in adjacency]
    dist = floyd_warshall(weights)
    path = warshall(adjacency)
    n = len(adjacency)
    for i in range(n):
        for j in range(n):
            assert path[i][j] == (1 if dist[i][j] < NO_EDGE else 0)


def test_warshall_chain():
    assert warshall([[0, 1, 0], [0, 0, 1], [0, 0, 0]]) == [
        [0, 1, 1],
        [0, 0, 1],
        [0, 0, 0],
    ]


@settings(max_examples=60)
@given(complete_graphs(symmetric=True))
def test_kruskal_and_prim_agree(matrix):
    n = len(matrix)
    by_kruskal = kruskal(matrix)
    by_prim = prim(matrix)
    assert by_kruskal.total_cost == by_prim.total_cost
    for tree in (by_kruskal, by_prim):
        assert len(tree.edges) == n - 1
        assert tree.total_cost == sum(edge.cost for edge in tree.edges)
        assert all(edge.cost == matrix[edge.u][edge.v] for edge in tree.edges)
        assert _spans(tree, n)


def test_prim_first_edge_is_cheapest_from_start():
    matrix = [[0, 4, 2], [4, 0, 3], [2, 3, 0]]
    tree = prim(matrix)
    assert tree.edges[0] == Edge(0, 2, 2)


def test_disconnected_graph_raises():
    matrix = [[0, 3, NO_EDGE], [3, 0, NO_EDGE], [NO_EDGE, NO_EDGE, 0]]
    with pytest.raises(ValueError):
        kruskal(matrix)
    with pytest.raises(ValueError):
        prim(matrix)


def _respects_edges(order, adjacency):
    position = {vertex: index for index, vertex in enumerate(order)}
    return all(
        position[i] < position[j]
        for i, row in enumerate(adjacency)
        for j, flag in enumerate(row)
        if flag
    )


@settings(max_examples=60)
@given(dags())
def test_topological_orders_are_valid(adjacency):
    n = len(adjacency)
    for sorter in (topological_sort_dfs, topological_sort_source_removal):
        order = sorter(adjacency)
        assert sorted(order) == list(range(n))
        assert _respects_edges(order, adjacency)


def test_topological_dfs_chain():
    assert topological_sort_dfs([[0, 1, 0], [0, 0, 1], [0, 0, 0]]) == [0, 1, 2]


def test_source_removal_detects_cycle():
    with pytest.raises(ValueError):
        topological_sort_source_removal([[0, 1], [1, 0]])