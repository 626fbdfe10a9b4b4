"""Travelling salesman tour by bounded backtracking."""

from __future__ import annotations

import argparse
import math
from collections.abc import Sequence

_DEMO_GRAPH = (
    (0, 10, 15, 20),
    (10, 0, 35, 25),
    (15, 35, 0, 30),
    (20, 25, 30, 0),
)


def _half(value: int) -> int:
    """Divide by two, truncating toward zero."""
    return -((-value) // 2) if value < 0 else value // 2


def solve_tsp(graph: Sequence[Sequence[int]]) -> tuple[int, list[int]] | None:
    """Find a cheap tour from city 0 through every city and back.

    A zero entry means there is no road. Branches are pruned with a
    running bound; the result is the cost and the tour (ending at 0),
    or None when no tour exists.
    """
    size = len(graph)
    if size < 2:
        raise ValueError("at least two cities are required")
    if any(len(row) != size for row in graph):
        raise ValueError("cost matrix must be square")

    initial = sum(row[0] + row[1] for row in graph)
    initial = _half(initial) + 1 if initial & 1 else _half(initial)

    best_cost: float = math.inf
    best_path: list[int] | None = None
    path = [0]
    visited = {0}

    def search(bound: int, weight: int) -> None:
        nonlocal best_cost, best_path
        level = len(path)
        last = path[-1]
        if level == size:
            back = graph[last][0]
            if back != 0 and weight + back < best_cost:
                best_cost = weight + back
                best_path = [*path, 0]
            return
        for city in range(size):
            edge = graph[last][city]
            if city in visited or edge == 0:
                continue
            if level == 1:
                step = _half(edge + graph[city][0])
            else:
                step = _half(graph[path[-2]][last] + edge)
            new_bound = bound - step
            new_weight = weight + edge
            if new_bound + new_weight < best_cost:
                path.append(city)
                visited.add(city)
                search(new_bound, new_weight)
                path.pop()
                visited.discard(city)

    search(initial, 0)
    if best_path is None:
        return None
    return int(best_cost), best_path


def main(argv: list[str] | None = None) -> int:
    """Solve the sample four-city tour and print it."""
    parser = argparse.ArgumentParser(description="Solve a sample travelling salesman tour.")
    parser.parse_args(argv)
    result = solve_tsp(_DEMO_GRAPH)
    if result is None:
        print("No tour exists")
        return 1
    cost, path = result
    print(f"Minimum cost: {cost}")
    print("Path: " + " ".join(str(city) for city in path))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())