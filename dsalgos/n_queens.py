"""N-queens placement by column-wise backtracking."""

from __future__ import annotations

import argparse
from collections.abc import Sequence


def solve_n_queens(n: int) -> list[list[int]] | None:
    """Return an n-by-n board with 1 for each queen, or None if impossible.

    Queens are placed column by column, trying rows from the top, so the
    first solution found in that order is returned.
    """
    if n < 0:
        raise ValueError("board size must not be negative")
    queen_rows: list[int] = []
    used_rows: set[int] = set()
    used_diagonals: set[int] = set()
    used_antidiagonals: set[int] = set()

    def place(col: int) -> bool:
        if col >= n:
            return True
        for row in range(n):
            if (
                row in used_rows
                or row - col in used_diagonals
                or row + col in used_antidiagonals
            ):
                continue
            queen_rows.append(row)
            used_rows.add(row)
            used_diagonals.add(row - col)
            used_antidiagonals.add(row + col)
            if place(col + 1):
                return True
            queen_rows.pop()
            used_rows.remove(row)
            used_diagonals.remove(row - col)
            used_antidiagonals.remove(row + col)
        return False

    if not place(0):
        return None
    return [[int(queen_rows[col] == row) for col in range(n)] for row in range(n)]


def format_board(board: Sequence[Sequence[int]]) -> str:
    """Render a board with 'Q' for queens and '.' for empty squares."""
    return "\n".join(
        "".join("Q " if cell else ". " for cell in row) for row in board
    )


def main(argv: list[str] | None = None) -> int:
    """Solve the N-queens problem and print the board."""
    parser = argparse.ArgumentParser(description="Solve the N-queens problem.")
    parser.add_argument("n", nargs="?", type=int, default=8, help="board size")
    args = parser.parse_args(argv)
    print(f"Solving N-Queens problem for N = {args.n}")
    board = solve_n_queens(args.n)
    if board is None:
        print("Solution does not exist")
        return 1
    print(format_board(board))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())