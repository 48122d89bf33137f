"""Command-line front end: reads integers from standard input and prints results."""

from __future__ import annotations

import argparse
import sys
import time
from collections.abc import Callable, Iterator

from algorithmia.combinatorial import knapsack_dynamic, n_queens
from algorithmia.graphs import (
    dijkstra,
    floyd_warshall,
    kruskal,
    prim,
    topological_sort_dfs,
    topological_sort_source_removal,
    warshall,
)
from algorithmia.sorting import heap_sort

__all__ = ["main"]


class _Numbers:
    """Whitespace-separated integers consumed one at a time."""

    def __init__(self, text: str) -> None:
        self._tokens: Iterator[str] = iter(text.split())

    def take(self) -> int:
        try:
            token = next(self._tokens)
        except StopIteration:
            raise ValueError("unexpected end of input") from None
        try:
            return int(token)
        except ValueError:
            raise ValueError(f"not an integer: {token!r}") from None

    def take_many(self, count: int) -> list[int]:
        return [self.take() for _ in range(count)]

    def take_count(self) -> int:
        count = self.take()
        if count < 0:
            raise ValueError("count must not be negative")
        return count

    def take_matrix(self) -> list[list[int]]:
        size = self.take_count()
        return [self.take_many(size) for _ in range(size)]


def _matrix_lines(matrix: list[list[int]]) -> list[str]:
    return ["\t".join(str(value) for value in row) for row in matrix]


def _run_dijkstra(numbers: _Numbers, args: argparse.Namespace) -> list[str]:
    cost = numbers.take_matrix()
    source = numbers.take()
    lines = [f"Shortest distance from source {source}"]
    lines += [
        f"{source} --> {vertex} = {dist}"
        for vertex, dist in enumerate(dijkstra(cost, source))
    ]
    return lines


def _run_floyd(numbers: _Numbers, args: argparse.Namespace) -> list[str]:
    return ["Distance matrix", *_matrix_lines(floyd_warshall(numbers.take_matrix()))]


def _run_warshall(numbers: _Numbers, args: argparse.Namespace) -> list[str]:
    return ["Path matrix", *_matrix_lines(warshall(numbers.take_matrix()))]


def _run_kruskal(numbers: _Numbers, args: argparse.Namespace) -> list[str]:
    tree = kruskal(numbers.take_matrix())
    lines = ["Edges in the Minimum Spanning Tree:"]
    lines += [
        f"Edge {index}: ({edge.u} - {edge.v}) cost = {edge.cost}"
        for index, edge in enumerate(tree.edges, start=1)
    ]
    lines.append(f"Total cost of MST = {tree.total_cost}")
    return lines


def _run_prim(numbers: _Numbers, args: argparse.Namespace) -> list[str]:
    tree = prim(numbers.take_matrix())
    lines = [
        f"Edge {index} ({edge.u} - {edge.v}) Cost = {edge.cost}"
        for index, edge in enumerate(tree.edges, start=1)
    ]
    lines.append(f"Minimum cost = {tree.total_cost}")
    return lines


def _run_topo(numbers: _Numbers, args: argparse.Namespace) -> list[str]:
    sorter = (
        topological_sort_source_removal
        if args.method == "source-removal"
        else topological_sort_dfs
    )
    order = sorter(numbers.take_matrix())
    return ["Topological order:", "\t".join(str(vertex) for vertex in order)]


def _run_nqueens(numbers: _Numbers, args: argparse.Namespace) -> list[str]:
    lines: list[str] = []
    for number, solution in enumerate(n_queens(numbers.take()), start=1):
        lines.append(f"Solution {number}:")
        lines += [
            f"\t{row} row <--- {column} column"
            for row, column in enumerate(solution, start=1)
        ]
    return lines


def _run_knapsack(numbers: _Numbers, args: argparse.Namespace) -> list[str]:
    count = numbers.take_count()
    capacity = numbers.take()
    weights = numbers.take_many(count)
    values = numbers.take_many(count)
    return [f"Maximum value = {knapsack_dynamic(capacity, weights, values)}"]


def _run_heapsort(numbers: _Numbers, args: argparse.Namespace) -> list[str]:
    values = numbers.take_many(numbers.take_count())
    started = time.perf_counter()
    ordered = heap_sort(values)
    elapsed = time.perf_counter() - started
    lines = ["The sorted list of elements is:", *(str(value) for value in ordered)]
    if args.time:
        lines.append(f"Time taken is {elapsed:f} seconds")
    return lines


_Handler = Callable[[_Numbers, argparse.Namespace], list[str]]

_COMMANDS: dict[str, tuple[_Handler, str]] = {
    "dijkstra": (_run_dijkstra, "single-source shortest paths: n, matrix, source"),
    "floyd": (_run_floyd, "all-pairs shortest paths: n, matrix"),
    "warshall": (_run_warshall, "transitive closure: n, adjacency matrix"),
    "kruskal": (_run_kruskal, "minimum spanning tree by Kruskal: n, matrix"),
    "prim": (_run_prim, "minimum spanning tree by Prim: n, matrix"),
    "topo": (_run_topo, "topological order: n, adjacency matrix"),
    "nqueens": (_run_nqueens, "all N-queens placements: n"),
    "knapsack": (_run_knapsack, "0/1 knapsack: n, capacity, weights, values"),
    "heapsort": (_run_heapsort, "heap sort: n, values"),
}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="algorithmia",
        description="Run a classic algorithm on integers read from standard input.",
    )
    commands = parser.add_subparsers(dest="command", required=True)
    for name, (handler, summary) in _COMMANDS.items():
        sub = commands.add_parser(name, help=summary, description=summary)
        sub.set_defaults(handler=handler)
        if name == "topo":
            sub.add_argument(
                "--method", choices=("dfs", "source-removal"), default="dfs"
            )
        if name == "heapsort":
            sub.add_argument("--time", action="store_true", help="report time taken")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the command named in argv; return the process exit status."""
    args = _build_parser().parse_args(argv)
    try:
        lines = args.handler(_Numbers(sys.stdin.read()), args)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())