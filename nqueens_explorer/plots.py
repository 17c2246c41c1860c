"""Visualization utilities for N-Queens placements.

Overview
--------
- ``draw_board`` returns a matplotlib Figure of the checkerboard with one
    queen per row; the interactive page hands it to ``st.pyplot``.
- ``plot_solution_counts`` writes a PNG chart of solution counts against the
    board size (log scale), used by the CLI ``--plot`` flag.

Outputs and naming
------------------
- ``solution_counts_vs_N.png``: Solutions vs N
    - What: Growth of the number of raw solutions with the board size.
    - X: N (board size). Y: Number of solutions (log scale). Sizes without any
      solution (N=2, N=3) are drawn at 1 and annotated with 0.
"""
from __future__ import annotations

import os
from pathlib import Path
from typing import List, Optional, Sequence

import matplotlib.patches as patches
import matplotlib.pyplot as plt
from matplotlib.figure import Figure

from . import settings

QUEEN_GLYPH = "♛"


def draw_board(
    placement: Optional[Sequence[int]],
    size: int,
    light_color: Optional[str] = None,
    dark_color: Optional[str] = None,
) -> Figure:
    """Draw the checkerboard and the queens of ``placement``.

    Parameters
    ----------
    placement : Sequence[int] | None
        ``placement[row] = column``; ``None`` draws the empty board.
    size : int
        Board dimension N.
    light_color, dark_color : str | None
        Square colours; default to the configured settings.
    """
    light_color = light_color or settings.LIGHT_SQUARE_COLOR
    dark_color = dark_color or settings.DARK_SQUARE_COLOR

    fig, ax = plt.subplots(figsize=(8, 8))
    ax.set_xlim(0, size)
    ax.set_ylim(0, size)
    ax.set_xticks([c + 0.5 for c in range(size)])
    ax.set_yticks([r + 0.5 for r in range(size)])
    ax.set_xticklabels([chr(65 + c) for c in range(size)])
    ax.set_yticklabels(range(1, size + 1))
    ax.tick_params(length=0)
    ax.set_aspect("equal")

    for r in range(size):
        for c in range(size):
            color = light_color if (r + c) % 2 == 0 else dark_color
            ax.add_patch(patches.Rectangle((c, r), 1, 1, facecolor=color, edgecolor="none"))

    if placement is not None:
        fontsize = min(48, 160 / max(size, 1))
        for r, c in enumerate(placement):
            ax.text(c + 0.5, r + 0.5, QUEEN_GLYPH, fontsize=fontsize, ha="center", va="center", color=settings.QUEEN_COLOR)

    # Row 1 at the top, as on the printed boards.
    ax.invert_yaxis()
    return fig


def plot_solution_counts(sizes: Sequence[int], counts: Sequence[int], out_dir: str) -> Path:
    """Save a log-scale chart of solution counts versus N.

    Returns the path of the written PNG.
    """
    if len(sizes) != len(counts):
        raise ValueError("sizes and counts must have the same length")
    os.makedirs(out_dir, exist_ok=True)

    counts_plot: List[int] = [max(count, 1) for count in counts]

    plt.figure(figsize=(12, 8))
    plt.semilogy(list(sizes), counts_plot, marker="o", linewidth=2, markersize=8, label="Backtracking (all solutions)")
    plt.xlabel("N (board size)", fontsize=12)
    plt.ylabel("Solutions (log scale)", fontsize=12)
    plt.title("Number of Solutions vs Problem Size\n(no symmetry reduction)", fontsize=14)
    plt.legend(fontsize=11)
    plt.grid(True, alpha=0.7)
    plt.xticks(list(sizes))

    for n, shown, actual in zip(sizes, counts_plot, counts):
        plt.annotate(f"{actual}", (n, shown), textcoords="offset points", xytext=(0, 5), ha="center", fontsize=9)

    fname = Path(out_dir) / "solution_counts_vs_N.png"
    plt.savefig(fname, bbox_inches="tight", dpi=150)
    plt.close()
    print(f"Saved solution-count chart: {fname}")
    return fname
