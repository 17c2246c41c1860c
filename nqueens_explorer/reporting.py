"""CSV export utilities for enumeration outputs.

These helpers materialize the full solution list of a board size and a
per-size summary of solution counts for spreadsheet inspection. Values are
written 1-based, matching what the interactive page displays.
"""
from __future__ import annotations

import csv
import os
from pathlib import Path
from typing import List, Sequence

from .stats import CountRow


def save_solutions_to_csv(solutions: Sequence[List[int]], size: int, out_dir: str) -> Path:
    """Write every placement for ``size`` to ``solutions_N{size}.csv``.

    Returns the path of the written file.
    """
    os.makedirs(out_dir, exist_ok=True)
    path = Path(out_dir) / f"solutions_N{size}.csv"
    with open(path, "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(["solution"] + [f"row_{row + 1}" for row in range(size)])
        for index, placement in enumerate(solutions, start=1):
            writer.writerow([index] + [column + 1 for column in placement])
    print(f"Solutions for N={size} saved to {path}")
    return path


def save_counts_to_csv(rows: Sequence[CountRow], out_dir: str) -> Path:
    """Write one summary line per board size to ``solution_counts.csv``."""
    os.makedirs(out_dir, exist_ok=True)
    path = Path(out_dir) / "solution_counts.csv"
    with open(path, "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(["N", "solutions", "nodes_explored", "time_seconds"])
        for row in rows:
            writer.writerow([row["N"], row["solutions"], row["nodes_explored"], row["time_seconds"]])
    print(f"Solution counts saved to {path}")
    return path
