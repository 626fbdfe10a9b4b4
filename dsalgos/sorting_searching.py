"""Sorting and searching customer bill records by mobile number."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import TextIO

MAX_USERS = 10


@dataclass(frozen=True)
class User:
    """A customer with a mobile number, a name and a bill amount."""

    number: int
    name: str
    bill_amount: float


def quicksort_descending(users: Iterable[User]) -> list[User]:
    """Quicksort by number, largest first (Lomuto partition on the last item)."""
    items = list(users)

    def partition(lo: int, hi: int) -> int:
        pivot = items[hi].number
        boundary = lo
        for j in range(lo, hi):
            if items[j].number > pivot:
                items[boundary], items[j] = items[j], items[boundary]
                boundary += 1
        items[boundary], items[hi] = items[hi], items[boundary]
        return boundary

    def sort(lo: int, hi: int) -> None:
        if lo < hi:
            pivot = partition(lo, hi)
            sort(lo, pivot - 1)
            sort(pivot + 1, hi)

    sort(0, len(items) - 1)
    return items


def mergesort(users: Iterable[User]) -> list[User]:
    """Merge sort by number, smallest first."""
    items = list(users)
    if len(items) <= 1:
        return items
    middle = (len(items) + 1) // 2
    left = mergesort(items[:middle])
    right = mergesort(items[middle:])
    merged: list[User] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i].number < right[j].number:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def heapsort(users: Iterable[User]) -> list[User]:
    """Heap sort by number, smallest first, using a max-heap."""
    items = list(users)

    def sift_down(size: int, root: int) -> None:
        while True:
            largest = root
            left, right = 2 * root + 1, 2 * root + 2
            if left < size and items[left].number > items[largest].number:
                largest = left
            if right < size and items[right].number > items[largest].number:
                largest = right
            if largest == root:
                return
            items[root], items[largest] = items[largest], items[root]
            root = largest

    for root in range(len(items) // 2 - 1, -1, -1):
        sift_down(len(items), root)
    for end in range(len(items) - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        sift_down(end, 0)
    return items


def linear_search(users: Iterable[User], number: int) -> User | None:
    """Return the first user with the given number, or None."""
    return next((user for user in users if user.number == number), None)


def binary_search(users: Sequence[User], number: int) -> User | None:
    """Search users sorted by ascending number; None if absent."""
    low, high = 0, len(users) - 1
    while low <= high:
        middle = low + (high - low) // 2
        candidate = users[middle].number
        if candidate == number:
            return users[middle]
        if candidate < number:
            low = middle + 1
        else:
            high = middle - 1
    return None


def format_users(users: Iterable[User]) -> str:
    """Render users as a tab-separated table with a header line."""
    lines = [" number \t name \t bill amount "]
    lines.extend(f"{u.number}\t{u.name}\t{u.bill_amount:g}" for u in users)
    return "\n".join(lines)


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _ask(tokens: Iterator[str], prompt: str = "") -> str:
    print(prompt, end="", flush=True)
    try:
        return next(tokens)
    except StopIteration:
        raise EOFError from None


def _show_found(user: User) -> None:
    print("User found: ")
    print(f"Mobile Number: {user.number}")
    print(f"Name: {user.name}")
    print(f"Bill Amount: {user.bill_amount:g}")


def main(argv: list[str] | None = None) -> int:
    """Read users, show them under each sort, then run both searches."""
    parser = argparse.ArgumentParser(description="Sort and search user bills.")
    parser.parse_args(argv)
    tokens = _tokens(sys.stdin)
    try:
        print(" Enter number of users:")
        count = int(_ask(tokens))
        if not 0 <= count <= MAX_USERS:
            print(f"Number of users must be between 0 and {MAX_USERS}.", file=sys.stderr)
            return 1
        print(f" Enter mobile number, name, bill amount for {count} users:")
        users = [
            User(int(_ask(tokens)), _ask(tokens), float(_ask(tokens)))
            for _ in range(count)
        ]
        print()
        print(format_users(users))
        print()

        users = quicksort_descending(users)
        print("Data sorted in descending order of mobile no.")
        print(format_users(users))
        print()

        users = mergesort(users)
        print("Data sorted in ascending order of mobile no.")
        print(format_users(users))
        print()

        print("Data sorted with Heap sort")
        users = heapsort(users)
        print(format_users(users))
        print()

        number = int(_ask(tokens, "Enter mobile number to search (Linear Search): "))
        found = linear_search(users, number)
        if found is None:
            print(f"User with mobile number: {number} not found.")
        else:
            _show_found(found)

        number = int(_ask(tokens, "Enter mobile number to search (Binary Search): "))
        found = binary_search(users, number)
        if found is None:
            print(f"User with mobile number {number} not found.")
        else:
            _show_found(found)
    except EOFError:
        print("Unexpected end of input.", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())