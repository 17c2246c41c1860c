"""Utility helpers for the N-Queens explorer.

This module provides reusable, low-level primitives shared by the solver, the
command-line interface and the interactive page: conflict counting, solution
validation and a few textual/array renderings of a placement.

Representation
--------------
Placements are encoded as a 1D list where ``placement[row] = column``.
"""

from __future__ import annotations

from collections import Counter
from typing import List, Optional, Sequence

import numpy as np


def conflicts(placement: Sequence[int]) -> int:
    """Compute the number of conflicting queen pairs in O(N).

    Uses hash maps to count occurrences per column and diagonals instead of
    comparing every pair of queens.
    """
    column_count: Counter[int] = Counter()
    diag1: Counter[int] = Counter()
    diag2: Counter[int] = Counter()

    for row, column in enumerate(placement):
        column_count[column] += 1
        diag1[row - column] += 1
        diag2[row + column] += 1

    def _pairs(counter: Counter[int]) -> int:
        total = 0
        for count in counter.values():
            if count > 1:
                total += count * (count - 1) // 2
        return total

    return _pairs(column_count) + _pairs(diag1) + _pairs(diag2)


def conflicts_on2(placement: Sequence[int]) -> int:
    """Compute the number of conflicting queen pairs in O(N^2).

    Reference implementation for validation. Prefer ``conflicts`` elsewhere.
    """
    n = len(placement)
    conflicts_count = 0
    for i in range(n):
        for j in range(i + 1, n):
            if placement[i] == placement[j] or abs(placement[i] - placement[j]) == abs(i - j):
                conflicts_count += 1
    return conflicts_count


def is_valid_solution(placement: Sequence[int]) -> bool:
    """Return True if the placement is a valid N-Queens solution.

    Contract
    - Input: sequence of length N where placement[row] = column (0-based)
    - Valid if: all 0 <= column < N and no pairs of queens attack each other
    - The empty placement is the (vacuous) solution for N=0
    """
    n = len(placement)
    for column in placement:
        if isinstance(column, bool) or not isinstance(column, int):
            return False
        if column < 0 or column >= n:
            return False
    # Rows are unique by representation; zero conflicts covers columns and diagonals.
    return conflicts(placement) == 0


def format_placement(placement: Optional[Sequence[int]]) -> str:
    """Format a placement as 1-based columns, e.g. ``"2, 4, 1, 3"``."""
    if placement is None:
        return "None"
    return ", ".join(str(column + 1) for column in placement)


def render_ascii(placement: Sequence[int]) -> str:
    """Render a placement as a text board (``Q`` queen, ``.`` empty square)."""
    n = len(placement)
    lines: List[str] = []
    for column in placement:
        lines.append(" ".join("Q" if c == column else "." for c in range(n)))
    return "\n".join(lines)


def board_matrix(placement: Sequence[int]) -> np.ndarray:
    """Return an N x N matrix with 1 where a queen stands and 0 elsewhere."""
    n = len(placement)
    board = np.zeros((n, n), dtype=int)
    if n:
        board[np.arange(n), np.asarray(placement, dtype=int)] = 1
    return board
