"""Exhaustive backtracking enumeration for the N-Queens problem.

This module implements an iterative (non-recursive) depth-first search that
lists *every* placement of N non-attacking queens, and provides three entry
points:

- enumerate_solutions(size): the plain list of all placements.
- bt_nqueens_all(size, time_limit=None): the same search, instrumented with
    the number of explored nodes and the elapsed wall-clock time.
- count_solutions(size): the number of placements.

Representation
--------------
A placement is a size-length list where ``placement[row] = column`` places a
queen at (row, column). Solutions are produced in depth-first order with
columns tried in ascending order at every row, so the first solution for a
given size is always the same one. No symmetry reduction is performed: N=8
yields all 92 raw solutions.

Implementation overview
-----------------------
- Constraint tracking: three boolean arrays give O(1) checks for column and
    diagonal availability: ``column_used[c]``, ``diag1_used[r-c+offset]``,
    ``diag2_used[r+c]``, where ``offset = size - 1`` maps negative indices to
    [0..].
- Search strategy: a row pointer and a "next column to try" pointer replace
    the recursion; backtracking resumes the previous row one column to the
    right of its last placement.

Contract (public API)
---------------------
- Input: ``size >= 0``. ``size == 0`` yields one empty placement (the vacuous
    base case of the search). Negative or non-integer sizes raise
    ``ValueError``.
- Output of ``bt_nqueens_all``: ``(solutions, nodes_explored, elapsed_seconds)``
    where ``solutions`` is ``None`` if the optional ``time_limit`` expired.
- Nodes explored semantics: incremented every time the search evaluates a
    candidate (row, column), even if it is rejected immediately.
"""

from __future__ import annotations

from time import perf_counter
from typing import List, Optional, Tuple

Placement = List[int]


def _check_size(size: int) -> None:
    """Reject sizes the search cannot interpret as a board dimension."""
    if isinstance(size, bool) or not isinstance(size, int):
        raise ValueError(f"Board size must be an integer, got {size!r}")
    if size < 0:
        raise ValueError(f"Board size must be >= 0, got {size}")


def bt_nqueens_all(size: int, time_limit: Optional[float] = None) -> Tuple[Optional[List[Placement]], int, float]:
    """Enumerate all solutions via iterative backtracking.

    Parameters
    ----------
    size : int
        Board dimension N (N >= 0).
    time_limit : float | None
        Optional wall-clock time limit in seconds.

    Returns
    -------
    (solutions, nodes_explored, elapsed_seconds)
        - solutions: list of placements in canonical order, or None on timeout.
        - nodes_explored: int, number of candidate placements considered.
        - elapsed_seconds: float, total wall time.

    Determinism and ordering
    ------------------------
    - Rows are assigned in natural order 0..N-1.
    - Within a row, columns are tried left-to-right 0..N-1.
    - The search never stops at the first solution; it runs to exhaustion.
    """
    _check_size(size)
    start = perf_counter()
    if size == 0:
        return [[]], 0, perf_counter() - start

    positions = [-1] * size
    column_used = [False] * size
    diag1_used = [False] * (2 * size - 1)
    diag2_used = [False] * (2 * size - 1)
    offset = size - 1

    solutions: List[Placement] = []
    row = 0
    column = 0
    explored = 0

    while row >= 0:
        if time_limit is not None and (perf_counter() - start) > time_limit:
            return None, explored, perf_counter() - start

        placed = False
        while column < size and not placed:
            explored += 1
            diag1_index = row - column + offset
            diag2_index = row + column
            if not column_used[column] and not diag1_used[diag1_index] and not diag2_used[diag2_index]:
                positions[row] = column
                column_used[column] = True
                diag1_used[diag1_index] = True
                diag2_used[diag2_index] = True
                placed = True
            else:
                column += 1

        if placed and row < size - 1:
            # Descend and restart the column scan on the next row.
            row += 1
            column = 0
            continue

        if placed:
            # Last row filled: record it, then keep scanning the same row.
            solutions.append(positions.copy())
        else:
            row -= 1
            if row < 0:
                break

        # Undo the queen on the current row and resume one column further right.
        previous_column = positions[row]
        positions[row] = -1
        column_used[previous_column] = False
        diag1_used[row - previous_column + offset] = False
        diag2_used[row + previous_column] = False
        column = previous_column + 1

    return solutions, explored, perf_counter() - start


def enumerate_solutions(size: int) -> List[Placement]:
    """Return every N-Queens placement for ``size`` in canonical order."""
    solutions, _, _ = bt_nqueens_all(size)
    # Without a time limit the search always runs to exhaustion.
    assert solutions is not None
    return solutions


def count_solutions(size: int) -> int:
    """Return the number of raw (non symmetry-reduced) solutions for ``size``."""
    return len(enumerate_solutions(size))
