"""Minimum spanning tree over a city distance matrix using Prim's algorithm."""

from __future__ import annotations

import argparse
import math
import sys
from collections.abc import Iterator
from dataclasses import dataclass
from typing import TextIO

MAX_CITIES = 20


@dataclass(frozen=True)
class Edge:
    """A tree edge from a city already in the tree to a newly joined one."""

    source: int
    target: int
    cost: int


@dataclass(frozen=True)
class SpanningTree:
    """Edges in the order they were added and their total cost."""

    edges: tuple[Edge, ...]
    total: int


class CityGraph:
    """Undirected weighted graph of cities, numbered from 0."""

    def __init__(self, cities: int) -> None:
        if not 1 <= cities <= MAX_CITIES:
            raise ValueError(f"number of cities must be between 1 and {MAX_CITIES}")
        self._cost: list[list[float]] = [
            [0 if i == j else math.inf for j in range(cities)] for i in range(cities)
        ]

    @property
    def cities(self) -> int:
        return len(self._cost)

    def _check(self, city: int) -> None:
        if not 0 <= city < self.cities:
            raise ValueError(f"no such city: {city}")

    def connect(self, first: int, second: int, cost: int) -> None:
        """Set the distance between two different cities in both directions."""
        self._check(first)
        self._check(second)
        if first == second:
            raise ValueError("a city cannot be connected to itself")
        self._cost[first][second] = cost
        self._cost[second][first] = cost

    def format_matrix(self) -> str:
        """Render the cost matrix, showing missing roads as '∞'."""
        return "\n".join(
            "".join("∞ " if math.isinf(cost) else f"{cost} " for cost in row)
            for row in self._cost
        )

    def prim(self, start: int) -> SpanningTree:
        """Grow a minimum spanning tree from ``start``.

        Raises ValueError when some city cannot be reached.
        """
        self._check(start)
        cost = self._cost
        nearest: list[int | None] = [
            None if city == start else start for city in range(self.cities)
        ]
        edges: list[Edge] = []
        for _ in range(self.cities - 1):
            candidates = [
                city
                for city, link in enumerate(nearest)
                if link is not None and not math.isinf(cost[city][link])
            ]
            if not candidates:
                raise ValueError("the cities are not all connected")
            joined = min(candidates, key=lambda city: cost[city][nearest[city]])
            source = nearest[joined]
            edges.append(Edge(source, joined, cost[joined][source]))
            nearest[joined] = None
            for city, link in enumerate(nearest):
                if link is not None and cost[city][joined] < cost[city][link]:
                    nearest[city] = joined
        return SpanningTree(tuple(edges), sum(edge.cost for edge in edges))


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _ask(tokens: Iterator[str], prompt: str) -> str:
    print(prompt, end="", flush=True)
    try:
        return next(tokens)
    except StopIteration:
        raise EOFError from None


def main(argv: list[str] | None = None) -> int:
    """Read city connections interactively and print their spanning tree."""
    parser = argparse.ArgumentParser(description="Minimum spanning tree of cities.")
    parser.parse_args(argv)
    tokens = _tokens(sys.stdin)
    try:
        graph = CityGraph(int(_ask(tokens, "Enter the number of cities: ")))
        for first in range(graph.cities):
            for second in range(first + 1, graph.cities):
                answer = _ask(
                    tokens,
                    f"Is there a connection between city {first + 1} "
                    f"and city {second + 1}? (y/n): ",
                )
                if answer in ("y", "Y"):
                    distance = int(
                        _ask(tokens, "Enter the distance between the two cities: ")
                    )
                    graph.connect(first, second, distance)
        print("\nAdjacency Matrix:")
        print(graph.format_matrix())
        start = int(_ask(tokens, f"\nEnter the starting city (1-{graph.cities}): "))
    except EOFError:
        print("Unexpected end of input.", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if not 1 <= start <= graph.cities:
        print("Invalid starting city!")
        return 1
    try:
        tree = graph.prim(start - 1)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    print("\nEdges in the Minimum Spanning Tree:")
    for edge in tree.edges:
        print(f"City {edge.source + 1} -> City {edge.target + 1} (Cost: {edge.cost})")
    print(f"\nTotal cost of the Minimum Spanning Tree: {tree.total}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())