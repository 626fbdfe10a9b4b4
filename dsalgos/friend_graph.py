"""Undirected friendship graph stored as adjacency lists."""

from __future__ import annotations

import argparse

_DEMO_FRIENDSHIPS = ((1, 2), (1, 3), (2, 4), (3, 5), (5, 6))


class FriendGraph:
    """A graph whose nodes are ids and whose edges are friendships."""

    def __init__(self) -> None:
        self._adjacency: dict[int, list[int]] = {}

    def add_node(self, node_id: int) -> None:
        """Add a node if it is not present yet."""
        self._adjacency.setdefault(node_id, [])

    def add_friendship(self, first: int, second: int) -> None:
        """Link two nodes in both directions, adding them as needed."""
        self.add_node(first)
        self.add_node(second)
        self._adjacency[first].append(second)
        self._adjacency[second].append(first)

    def friends(self, node_id: int) -> list[int]:
        """Return the friends of a node in the order they were added."""
        try:
            return list(self._adjacency[node_id])
        except KeyError:
            raise KeyError(f"unknown node: {node_id}") from None

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._adjacency

    def __len__(self) -> int:
        return len(self._adjacency)

    def format(self) -> str:
        """Render the adjacency list, one node per line."""
        return "\n".join(
            f"Friend ID: {node_id} -> Friends: "
            + "".join(f"{friend} " for friend in friends)
            for node_id, friends in self._adjacency.items()
        )


def main(argv: list[str] | None = None) -> int:
    """Build the sample friendship graph and print it."""
    parser = argparse.ArgumentParser(description="Show a sample friendship graph.")
    parser.parse_args(argv)
    graph = FriendGraph()
    for first, second in _DEMO_FRIENDSHIPS:
        graph.add_friendship(first, second)
    print("Graph representation (Adjacency List):")
    print(graph.format())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())