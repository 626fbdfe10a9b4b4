"""Huffman tree construction and prefix code generation."""

from __future__ import annotations

import argparse
import heapq
from collections import Counter
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from itertools import count

_DEMO_TEXT = "this is an example for huffman encoding"


@dataclass
class HuffmanNode:
    """A node of a Huffman tree; internal nodes have no symbol."""

    freq: int
    symbol: str | None = None
    left: HuffmanNode | None = None
    right: HuffmanNode | None = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


def build_huffman_tree(frequencies: Mapping[str, int]) -> HuffmanNode:
    """Build a Huffman tree, always merging the two least frequent nodes."""
    if not frequencies:
        raise ValueError("at least one symbol is required")
    order = count()
    heap = [
        (freq, next(order), HuffmanNode(freq, symbol))
        for symbol, freq in sorted(frequencies.items())
    ]
    heapq.heapify(heap)
    while len(heap) > 1:
        _, _, left = heapq.heappop(heap)
        _, _, right = heapq.heappop(heap)
        merged = HuffmanNode(left.freq + right.freq, None, left, right)
        heapq.heappush(heap, (merged.freq, next(order), merged))
    return heap[0][2]


def _walk(node: HuffmanNode | None, prefix: str) -> Iterator[tuple[str, str]]:
    if node is None:
        return
    if node.symbol is not None:
        yield node.symbol, prefix
    yield from _walk(node.left, prefix + "0")
    yield from _walk(node.right, prefix + "1")


def huffman_codes(frequencies: Mapping[str, int]) -> dict[str, str]:
    """Map each symbol to its code, in preorder of the Huffman tree."""
    return dict(_walk(build_huffman_tree(frequencies), ""))


def main(argv: list[str] | None = None) -> int:
    """Print Huffman codes for the characters of a text."""
    parser = argparse.ArgumentParser(description="Print Huffman codes for a text.")
    parser.add_argument("text", nargs="?", default=_DEMO_TEXT)
    args = parser.parse_args(argv)
    print("Huffman Codes:")
    for symbol, code in huffman_codes(Counter(args.text)).items():
        print(f"{symbol}: {code}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())