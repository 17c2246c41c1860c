"""Global settings for the N-Queens explorer.

This module centralizes tunable constants used by the interactive page and the
command-line interface. Values can be overridden at runtime via the
configuration loader in `nqueens_explorer.cli.apply_configuration`.
"""
from __future__ import annotations

from typing import Optional

# Board size bounds offered by the interactive page (the enumerator itself has no upper bound)
MIN_BOARD_SIZE: int = 4
MAX_BOARD_SIZE: int = 12
DEFAULT_BOARD_SIZE: int = 8

# Checkerboard colours used when drawing a placement
LIGHT_SQUARE_COLOR: str = "#FFFFFF"
DARK_SQUARE_COLOR: str = "#E5E7EB"
QUEEN_COLOR: str = "#EAB308"

# Backtracking time limit in seconds for CLI runs (None = no limit)
BT_TIME_LIMIT: Optional[float] = None

# Worker threads used by the background solve session; one keeps runs ordered
NUM_WORKERS: int = 1

# Output directory for CSV exports and charts
OUT_DIR: str = "results_nqueens"


def set_board_bounds(
        min_size: int = 4,
        max_size: int = 12,
        default_size: Optional[int] = None,
) -> None:
        """Configure the board sizes the interactive page may request.

        Parameters
        - min_size: smallest selectable N (>= 1).
        - max_size: largest selectable N (>= min_size).
        - default_size: initial N. When None, the current default is clamped
            into [min_size, max_size].

        Raises
        - ValueError when the bounds are inconsistent.

        Side effects
        - Updates module-level globals and prints a concise summary to stdout to
            make the active bounds explicit at run start.
        """
        global MIN_BOARD_SIZE, MAX_BOARD_SIZE, DEFAULT_BOARD_SIZE
        if min_size < 1:
                raise ValueError(f"Minimum board size must be >= 1, got {min_size}")
        if max_size < min_size:
                raise ValueError(f"Maximum board size {max_size} is below minimum {min_size}")
        if default_size is None:
                default_size = min(max(DEFAULT_BOARD_SIZE, min_size), max_size)
        if not min_size <= default_size <= max_size:
                raise ValueError(
                        f"Default board size {default_size} outside [{min_size}, {max_size}]"
                )
        MIN_BOARD_SIZE = min_size
        MAX_BOARD_SIZE = max_size
        DEFAULT_BOARD_SIZE = default_size

        print(f"Board size bounds: [{MIN_BOARD_SIZE}, {MAX_BOARD_SIZE}], default {DEFAULT_BOARD_SIZE}")
