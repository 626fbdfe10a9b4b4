"""0/1 knapsack by exhaustive backtracking and by a greedy ratio heuristic."""

from __future__ import annotations

import argparse
import math
from collections.abc import Sequence
from dataclasses import dataclass

_DEMO_CAPACITY = 50


@dataclass(frozen=True)
class Item:
    """An item with a weight and a value."""

    weight: int
    value: int

    @property
    def ratio(self) -> float:
        """Value per unit of weight."""
        if self.weight == 0:
            return math.inf if self.value >= 0 else -math.inf
        return self.value / self.weight


@dataclass(frozen=True)
class KnapsackResult:
    """Total value and the indices of the chosen items."""

    value: int
    selected: tuple[int, ...]


_DEMO_ITEMS = (Item(10, 60), Item(20, 100), Item(30, 120))


def knapsack_backtracking(items: Sequence[Item], capacity: int) -> KnapsackResult:
    """Find the best-valued subset by exploring include/exclude branches."""
    items = list(items)
    best_value = 0
    best_selection: tuple[int, ...] = ()
    chosen: list[int] = []

    def explore(index: int, weight: int, value: int) -> None:
        nonlocal best_value, best_selection
        if index == len(items):
            if value > best_value:
                best_value = value
                best_selection = tuple(chosen)
            return
        if weight > capacity:
            return
        item = items[index]
        if weight + item.weight <= capacity:
            chosen.append(index)
            explore(index + 1, weight + item.weight, value + item.value)
            chosen.pop()
        explore(index + 1, weight, value)

    explore(0, 0, 0)
    return KnapsackResult(best_value, best_selection)


def knapsack_greedy(items: Sequence[Item], capacity: int) -> KnapsackResult:
    """Take items by descending value/weight ratio while they still fit.

    Not always optimal for 0/1 knapsack; the selection is listed in the
    order the items were taken.
    """
    items = list(items)
    order = sorted(range(len(items)), key=lambda i: items[i].ratio, reverse=True)
    weight = 0
    value = 0
    selected = []
    for index in order:
        item = items[index]
        if weight + item.weight <= capacity:
            weight += item.weight
            value += item.value
            selected.append(index)
    return KnapsackResult(value, tuple(selected))


def main(argv: list[str] | None = None) -> int:
    """Solve the sample knapsack both ways and print the results."""
    parser = argparse.ArgumentParser(description="Solve a sample 0/1 knapsack.")
    parser.add_argument("--capacity", type=int, default=_DEMO_CAPACITY)
    args = parser.parse_args(argv)

    best = knapsack_backtracking(_DEMO_ITEMS, args.capacity)
    print(f"Maximum value: {best.value}")
    print("Selected items (indices): " + " ".join(map(str, best.selected)))

    greedy = knapsack_greedy(_DEMO_ITEMS, args.capacity)
    print("Greedy approach for 0/1 Knapsack:")
    print(f"Maximum value: {greedy.value}")
    print("Selected item IDs: " + " ".join(str(i + 1) for i in greedy.selected))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())