"""Hamiltonian cycle search by backtracking."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

_DEMO_GRAPH = (
    (0, 1, 0, 1, 0),
    (1, 0, 1, 1, 1),
    (0, 1, 0, 0, 1),
    (1, 1, 0, 0, 1),
    (0, 1, 1, 1, 0),
)


def find_hamiltonian_cycle(graph: Sequence[Sequence[object]]) -> list[int] | None:
    """Find a Hamiltonian cycle starting at vertex 0.

    ``graph`` is a square adjacency matrix of truthy/falsy entries. The
    returned list visits every vertex once and ends back at vertex 0;
    ``None`` means no cycle exists.
    """
    size = len(graph)
    if size == 0:
        raise ValueError("graph has no vertices")
    if any(len(row) != size for row in graph):
        raise ValueError("adjacency matrix must be square")

    path = [0]
    used = {0}

    def extend() -> bool:
        last = path[-1]
        if len(path) == size:
            return bool(graph[last][0])
        for vertex in range(1, size):
            if graph[last][vertex] and vertex not in used:
                path.append(vertex)
                used.add(vertex)
                if extend():
                    return True
                path.pop()
                used.remove(vertex)
        return False

    if not extend():
        return None
    return [*path, 0]


def main(argv: list[str] | None = None) -> int:
    """Search the sample graph for a Hamiltonian cycle and print it."""
    parser = argparse.ArgumentParser(description="Find a Hamiltonian cycle.")
    parser.parse_args(argv)
    cycle = find_hamiltonian_cycle(_DEMO_GRAPH)
    if cycle is None:
        print("Solution does not exist")
        return 1
    print("Solution Exists: Following is one Hamiltonian Cycle")
    print(" ".join(str(vertex) for vertex in cycle))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())