"""Cursor over an ordered solution list with wrap-around paging."""

from __future__ import annotations

from typing import List, Optional, Sequence


class SolutionCursor:
    """Track the solution currently on display.

    Parameters
    ----------
    solutions : Sequence[list[int]]
        Ordered placements as returned by the enumerator. The cursor keeps its
        own list copy so later mutations by the caller do not leak in.

    Notes
    -----
    - ``next``/``previous`` wrap around modulo the number of solutions.
    - With a single solution both keep the index at 0; with no solutions
      they are no-ops and ``current`` is ``None``.
    """

    def __init__(self, solutions: Optional[Sequence[List[int]]] = None):
        self.solutions: List[List[int]] = list(solutions or [])
        self.index = 0

    def __len__(self) -> int:
        return len(self.solutions)

    def reset(self, solutions: Sequence[List[int]]) -> None:
        """Replace the solution list and rewind to the first entry."""
        self.solutions = list(solutions)
        self.index = 0

    @property
    def current(self) -> Optional[List[int]]:
        if not self.solutions:
            return None
        return self.solutions[self.index]

    @property
    def can_navigate(self) -> bool:
        return len(self.solutions) > 1

    def next(self) -> int:
        if self.solutions:
            self.index = (self.index + 1) % len(self.solutions)
        return self.index

    def previous(self) -> int:
        if self.solutions:
            total = len(self.solutions)
            self.index = (self.index - 1 + total) % total
        return self.index

    def label(self) -> str:
        """Return ``"Solution i of L"`` (1-based), or ``""`` when empty."""
        if not self.solutions:
            return ""
        return f"Solution {self.index + 1} of {len(self.solutions)}"
