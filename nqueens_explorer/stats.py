"""Typed result shapes and summary helpers for enumeration runs.

Defines ``TypedDict`` structures for what the statistics panel and the CLI
report, a tabular view of a solution list, and a tiny stdout progress
reporter for multi-size runs.
"""
from __future__ import annotations

from typing import List, Sequence, TypedDict

import pandas as pd

from .utils import format_placement


class SolutionStats(TypedDict):
    size: int
    count: int
    first_solution: str
    nodes: int
    time: float


class CountRow(TypedDict):
    N: int
    solutions: int
    nodes_explored: int
    time_seconds: float


class ProgressPrinter:
    """Minimal, stdout-only progress reporter for long-running loops.

    Parameters
    ----------
    total : int
        Total number of steps/items expected. Values <= 0 are coerced to 1 to
        avoid division by zero when reporting percentages.
    label : str
        Short label printed in front of the progress counters.
    """

    def __init__(self, total: int, label: str):
        self.total = max(1, total)
        self.label = label

    def update(self, index: int, detail: str = "") -> None:
        """Print a single-line progress update to stdout."""
        percent = (index / self.total) * 100
        suffix = f" - {detail}" if detail else ""
        print(f"[{self.label}] {index}/{self.total} ({percent:.0f}%)" + suffix)


def summarize(size: int, solutions: Sequence[List[int]], nodes: int = 0, elapsed: float = 0.0) -> SolutionStats:
    """Build the statistics shown next to the board.

    ``first_solution`` uses 1-based columns, or ``"None"`` when the size has
    no solution (N=2 and N=3).
    """
    return {
        "size": size,
        "count": len(solutions),
        "first_solution": format_placement(solutions[0] if solutions else None),
        "nodes": nodes,
        "time": elapsed,
    }


def solutions_frame(solutions: Sequence[List[int]], size: int) -> pd.DataFrame:
    """Tabulate placements, one row per solution and 1-based columns.

    The index is named ``solution`` and starts at 1 so that it matches the
    "Solution i of L" label of the page.
    """
    columns = [f"row_{row + 1}" for row in range(size)]
    frame = pd.DataFrame(
        [[column + 1 for column in placement] for placement in solutions],
        columns=columns,
        dtype=int,
    )
    frame.index = pd.RangeIndex(1, len(frame) + 1, name="solution")
    return frame
