"""Exhaustive search, dynamic programming and greedy solutions to classic
combinatorial problems: assignment, knapsack, N-queens and travelling salesman.
"""

from __future__ import annotations

import math
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

__all__ = [
    "KnapsackStep",
    "FractionalKnapsackResult",
    "min_assignment_cost",
    "knapsack_bruteforce",
    "knapsack_dynamic",
    "fractional_knapsack",
    "n_queens",
    "tsp_min_cost",
]


def _square(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    rows = [list(row) for row in matrix]
    if any(len(row) != len(rows) for row in rows):
        raise ValueError("matrix must be square")
    return rows


def min_assignment_cost(cost: Sequence[Sequence[int]]) -> int:
    """Return the least total cost of assigning each row to a distinct column.

    Tries every assignment by backtracking.
    """
    rows = _square(cost)
    size = len(rows)
    used = [False] * size
    best: float = math.inf

    def solve(row: int, total: int) -> None:
        nonlocal best
        if row == size:
            best = min(best, total)
            return
        for col, value in enumerate(rows[row]):
            if not used[col]:
                used[col] = True
                solve(row + 1, total + value)
                used[col] = False

    solve(0, 0)
    return int(best)


def _check_items(capacity: int, weights: Sequence[int], values: Sequence[int]) -> None:
    if len(weights) != len(values):
        raise ValueError("weights and values must have the same length")
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    if any(w < 0 for w in weights):
        raise ValueError("weights must not be negative")


def knapsack_bruteforce(capacity: int, weights: Sequence[int], values: Sequence[int]) -> int:
    """Return the best 0/1 knapsack value by trying to take or skip each item."""
    _check_items(capacity, weights, values)
    weights, values = list(weights), list(values)

    def best(room: int, count: int) -> int:
        if count == 0 or room == 0:
            return 0
        weight, value = weights[count - 1], values[count - 1]
        skip = best(room, count - 1)
        if weight > room:
            return skip
        return max(value + best(room - weight, count - 1), skip)

    return best(capacity, len(weights))


def knapsack_dynamic(capacity: int, weights: Sequence[int], values: Sequence[int]) -> int:
    """Return the best 0/1 knapsack value using a capacity-indexed table."""
    _check_items(capacity, weights, values)
    row = [0] * (capacity + 1)
    for weight, value in zip(weights, values):
        row = [
            0 if room == 0
            else row[room] if weight > room
            else max(value + row[room - weight], row[room])
            for room in range(capacity + 1)
        ]
    return row[capacity]


@dataclass(frozen=True)
class KnapsackStep:
    """One item put into the knapsack: its 0-based index and the share taken."""

    item: int
    weight: int
    value: int
    fraction: float


@dataclass(frozen=True)
class FractionalKnapsackResult:
    """The items chosen, in the order they were taken, and their total value."""

    steps: tuple[KnapsackStep, ...]
    total_value: float


def fractional_knapsack(
    capacity: int, weights: Sequence[int], values: Sequence[int]
) -> FractionalKnapsackResult:
    """Fill the knapsack greedily by value per unit of weight.

    Items are taken whole while they fit; the first that does not fit is
    taken in part to fill the remaining room. Among equal ratios the earlier
    item wins.
    """
    if len(weights) != len(values):
        raise ValueError("weights and values must have the same length")
    if any(w <= 0 for w in weights):
        raise ValueError("weights must be positive")
    remaining = capacity
    unused = list(range(len(weights)))
    steps: list[KnapsackStep] = []
    total = 0.0
    while remaining > 0 and unused:
        best = max(unused, key=lambda i: values[i] / weights[i])
        unused.remove(best)
        weight, value = weights[best], values[best]
        if weight <= remaining:
            remaining -= weight
            fraction = 1.0
        else:
            fraction = remaining / weight
            remaining = 0
        total += fraction * value
        steps.append(KnapsackStep(best, weight, value, fraction))
    return FractionalKnapsackResult(tuple(steps), total)


def n_queens(n: int) -> Iterator[tuple[int, ...]]:
    """Yield every placement of n non-attacking queens on an n x n board.

    Each solution gives, for rows 1..n in order, the column (numbered from 1)
    of that row's queen. Solutions come in lexicographic order.
    """
    if n < 1:
        return
    columns: list[int] = []

    def safe(col: int) -> bool:
        row = len(columns)
        return all(
            placed != col and abs(placed - col) != row - r
            for r, placed in enumerate(columns)
        )

    def extend() -> Iterator[tuple[int, ...]]:
        if len(columns) == n:
            yield tuple(columns)
            return
        for col in range(1, n + 1):
            if safe(col):
                columns.append(col)
                yield from extend()
                columns.pop()

    yield from extend()


def tsp_min_cost(graph: Sequence[Sequence[int]], start: int = 0) -> int:
    """Return the cost of the cheapest tour visiting every vertex once.

    A zero entry means there is no edge. Raises ValueError if no tour exists.
    """
    rows = _square(graph)
    size = len(rows)
    if not 0 <= start < size:
        raise ValueError("start vertex out of range")
    visited = {start}
    best: float = math.inf

    def tour(pos: int, count: int, cost: int) -> None:
        nonlocal best
        if count == size and rows[pos][start]:
            best = min(best, cost + rows[pos][start])
            return
        for nxt, weight in enumerate(rows[pos]):
            if nxt not in visited and weight:
                visited.add(nxt)
                tour(nxt, count + 1, cost + weight)
                visited.discard(nxt)

    tour(start, 1, 0)
    if best == math.inf:
        raise ValueError("graph has no tour through every vertex")
    return int(best)