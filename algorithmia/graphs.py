"""Graph algorithms on adjacency and cost matrices.

Cost matrices use ``NO_EDGE`` (999) for a missing edge, as the classic
textbook formulations of these algorithms do.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

__all__ = [
    "NO_EDGE",
    "Edge",
    "SpanningTree",
    "dijkstra",
    "floyd_warshall",
    "warshall",
    "kruskal",
    "prim",
    "topological_sort_dfs",
    "topological_sort_source_removal",
]

NO_EDGE = 999


def _square(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    rows = [list(row) for row in matrix]
    if any(len(row) != len(rows) for row in rows):
        raise ValueError("matrix must be square")
    return rows


@dataclass(frozen=True)
class Edge:
    """An undirected edge between vertices u and v with its cost."""

    u: int
    v: int
    cost: int


@dataclass(frozen=True)
class SpanningTree:
    """The edges of a spanning tree in the order chosen, and their total cost."""

    edges: tuple[Edge, ...]
    total_cost: int


def dijkstra(cost: Sequence[Sequence[int]], source: int) -> list[int]:
    """Return the shortest distance from source to every vertex.

    Vertices that cannot be reached keep a distance of at least ``NO_EDGE``.
    """
    rows = _square(cost)
    size = len(rows)
    if not 0 <= source < size:
        raise ValueError("source vertex out of range")
    distance = list(rows[source])
    distance[source] = 0
    visited = {source}
    for _ in range(size - 1):
        candidates = [
            j for j in range(size) if j not in visited and distance[j] < NO_EDGE
        ]
        if not candidates:
            break
        u = min(candidates, key=distance.__getitem__)
        visited.add(u)
        for j, weight in enumerate(rows[u]):
            if j not in visited and distance[u] + weight < distance[j]:
                distance[j] = distance[u] + weight
    return distance


def floyd_warshall(cost: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return the matrix of shortest distances between every pair of vertices."""
    dist = _square(cost)
    for k, via in enumerate(dist):
        for row in dist:
            for j, value in enumerate(row):
                row[j] = min(value, row[k] + via[j])
    return dist


def warshall(adjacency: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return the path (transitive closure) matrix of a 0/1 adjacency matrix."""
    path = _square(adjacency)
    for k, via in enumerate(path):
        for row in path:
            if row[k] == 1:
                for j, value in enumerate(via):
                    if value == 1:
                        row[j] = 1
    return path


def kruskal(cost: Sequence[Sequence[int]]) -> SpanningTree:
    """Return a minimum spanning tree, repeatedly taking the cheapest safe edge.

    Raises ValueError if the graph is not connected.
    """
    rows = _square(cost)
    size = len(rows)
    parent = list(range(size))

    def find(i: int) -> int:
        while parent[i] != i:
            i = parent[i]
        return i

    edges: list[Edge] = []
    while len(edges) < size - 1:
        best: Edge | None = None
        for i, row in enumerate(rows):
            for j, weight in enumerate(row):
                limit = best.cost if best else NO_EDGE
                if weight < limit and find(i) != find(j):
                    best = Edge(i, j, weight)
        if best is None:
            raise ValueError("graph is not connected")
        parent[find(best.u)] = find(best.v)
        edges.append(best)
        rows[best.u][best.v] = rows[best.v][best.u] = NO_EDGE
    return SpanningTree(tuple(edges), sum(edge.cost for edge in edges))


def prim(cost: Sequence[Sequence[int]]) -> SpanningTree:
    """Return a minimum spanning tree grown from vertex 0.

    Raises ValueError if the graph is not connected.
    """
    rows = _square(cost)
    size = len(rows)
    visited = {0} if size else set()
    edges: list[Edge] = []
    while len(edges) < size - 1:
        best: Edge | None = None
        for i in sorted(visited):
            for j, weight in enumerate(rows[i]):
                limit = best.cost if best else NO_EDGE
                if j not in visited and weight < limit:
                    best = Edge(i, j, weight)
        if best is None:
            raise ValueError("graph is not connected")
        visited.add(best.v)
        edges.append(best)
    return SpanningTree(tuple(edges), sum(edge.cost for edge in edges))


def topological_sort_dfs(adjacency: Sequence[Sequence[int]]) -> list[int]:
    """Order vertices by reversed depth-first finishing time."""
    rows = _square(adjacency)
    seen: set[int] = set()
    finished: list[int] = []

    def visit(vertex: int) -> None:
        seen.add(vertex)
        for nxt, flag in enumerate(rows[vertex]):
            if flag == 1 and nxt not in seen:
                visit(nxt)
        finished.append(vertex)

    for vertex in range(len(rows)):
        if vertex not in seen:
            visit(vertex)
    return finished[::-1]


def topological_sort_source_removal(adjacency: Sequence[Sequence[int]]) -> list[int]:
    """Order vertices by repeatedly removing one with no incoming edges.

    Raises ValueError if the graph has a cycle.
    """
    rows = _square(adjacency)
    indegree = [sum(column) for column in zip(*rows)]
    stack = [vertex for vertex, degree in enumerate(indegree) if degree == 0]
    order: list[int] = []
    while stack:
        vertex = stack.pop()
        order.append(vertex)
        for nxt, flag in enumerate(rows[vertex]):
            if flag != 0:
                indegree[nxt] -= 1
                if indegree[nxt] == 0:
                    stack.append(nxt)
    if len(order) < len(rows):
        raise ValueError("graph has a cycle")
    return order