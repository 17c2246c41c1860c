"""Command-line interface for the N-Queens explorer.

This module wires together configuration loading, enumeration over one or
more board sizes, and the optional CSV/PNG exports. It intentionally isolates
I/O, argument parsing, and progress reporting from the core algorithmic
modules so that the rest of the codebase remains easy to test
programmatically.
"""
from __future__ import annotations

import argparse
import tempfile
from pathlib import Path
from typing import List, Optional, Sequence

from . import settings
from .backtracking import bt_nqueens_all
from .plots import plot_solution_counts
from .reporting import save_counts_to_csv, save_solutions_to_csv
from .stats import CountRow, ProgressPrinter
from .utils import format_placement, is_valid_solution, render_ascii
from config_manager import ConfigManager

# Raw (non symmetry-reduced) solution counts used by the quick regression run.
KNOWN_COUNTS = {1: 1, 2: 0, 3: 0, 4: 2, 5: 10, 6: 4, 7: 40, 8: 92}


# ------------- Utils --------------------------------------------------------

def parse_size_filters(size_args: Optional[List[str]]) -> Optional[List[int]]:
    """Normalize board-size CLI inputs into an ordered list of sizes.

    Accepts repeated flags (e.g., ``-n 8 -n 10``), comma-separated lists
    (e.g., ``-n 4,6``) and inclusive ranges (e.g., ``-n 4-8``). Duplicates are
    removed while preserving order. Returns ``None`` when no size is given so
    that callers can fall back to the configured default.
    """
    if not size_args:
        return None
    selected: List[int] = []
    for entry in size_args:
        for token in entry.split(","):
            token = token.strip()
            if not token:
                continue
            try:
                if "-" in token:
                    low_text, high_text = token.split("-", 1)
                    low, high = int(low_text), int(high_text)
                    if high < low:
                        raise ValueError
                    selected.extend(range(low, high + 1))
                else:
                    selected.append(int(token))
            except ValueError:
                raise ValueError(f"Invalid board size '{token}'. Use N, N-M or comma-separated values") from None
    for size in selected:
        if size < 0:
            raise ValueError(f"Board size must be >= 0, got {size}")
    unique = list(dict.fromkeys(selected))  # preserve order, remove dups
    return unique or None


def apply_configuration(config_path: str) -> ConfigManager:
    """Load configuration and copy its values into ``settings``.

    This function updates the global ``settings`` module in-place to reflect
    values from ``config.json`` (or a user-specified path) and returns the
    ``ConfigManager`` used. Inconsistent board bounds raise ``ValueError``.
    """
    config_mgr = ConfigManager(config_path)

    board_settings = config_mgr.get_board_settings()
    if board_settings:
        default_size = board_settings.get("default_size")
        settings.set_board_bounds(
            min_size=int(board_settings.get("min_size", settings.MIN_BOARD_SIZE)),
            max_size=int(board_settings.get("max_size", settings.MAX_BOARD_SIZE)),
            default_size=int(default_size) if default_size is not None else None,
        )

    display_settings = config_mgr.get_display_settings()
    if display_settings:
        settings.LIGHT_SQUARE_COLOR = display_settings.get("light_square_color", settings.LIGHT_SQUARE_COLOR)
        settings.DARK_SQUARE_COLOR = display_settings.get("dark_square_color", settings.DARK_SQUARE_COLOR)
        settings.QUEEN_COLOR = display_settings.get("queen_color", settings.QUEEN_COLOR)

    export_settings = config_mgr.get_export_settings()
    if export_settings:
        settings.OUT_DIR = export_settings.get("output_dir", settings.OUT_DIR)

    timeout_settings = config_mgr.get_timeout_settings()
    if timeout_settings:
        limit = timeout_settings.get("bt_time_limit", settings.BT_TIME_LIMIT)
        if limit is not None and float(limit) <= 0:
            raise ValueError(f"bt_time_limit must be positive or null, got {limit}")
        settings.BT_TIME_LIMIT = float(limit) if limit is not None else None

    return config_mgr


# ------------- Pipeline ----------------------------------------------------

def run_enumeration(
    sizes: Sequence[int],
    time_limit: Optional[float] = None,
    show: int = 0,
    export: bool = False,
    plot: bool = False,
    out_dir: Optional[str] = None,
    validate: bool = False,
) -> List[CountRow]:
    """Enumerate every size in ``sizes`` and report the results on stdout.

    Sizes whose enumeration exceeds ``time_limit`` are reported and left out
    of the returned rows and of the exports.
    """
    out_dir = out_dir or settings.OUT_DIR
    rows: List[CountRow] = []
    progress = ProgressPrinter(len(sizes), "Enumeration") if len(sizes) > 1 else None

    for index, size in enumerate(sizes, start=1):
        if progress:
            progress.update(index, f"N={size}")
        solutions, nodes, elapsed = bt_nqueens_all(size, time_limit=time_limit)
        if solutions is None:
            print(f"N={size}: time limit of {time_limit}s exceeded after {nodes} nodes, skipped")
            continue
        if validate:
            invalid = [placement for placement in solutions if not is_valid_solution(placement)]
            if invalid:
                raise AssertionError(f"Invalid placement produced for N={size}: {invalid[0]}")

        print(f"=== N = {size} ===")
        print(f"  Total solutions: {len(solutions)}")
        print(f"  Nodes explored: {nodes}, time: {elapsed:.4f}s")
        print(f"  First solution: {format_placement(solutions[0] if solutions else None)}")
        for number, placement in enumerate(solutions[:show], start=1):
            print(f"  Solution {number} of {len(solutions)}:")
            print("\n".join("    " + line for line in render_ascii(placement).splitlines()))

        if export:
            save_solutions_to_csv(solutions, size, out_dir)
        rows.append({"N": size, "solutions": len(solutions), "nodes_explored": nodes, "time_seconds": elapsed})

    if export and rows:
        save_counts_to_csv(rows, out_dir)
    if plot and rows:
        plot_solution_counts([row["N"] for row in rows], [row["solutions"] for row in rows], out_dir)
    return rows


def run_quick_regression_tests() -> None:
    """Execute a fast, deterministic smoke test of the enumerator.

    Verifies that:
    - Sizes 1..8 yield the known raw solution counts with valid placements.
    - N=4 starts with the canonical placement [1, 3, 0, 2].
    - Two runs for the same size produce identical lists.
    - The CSV export produces non-empty files in a temporary folder.
    """
    print("Running quick regression tests (N=1..8)...")

    for size, expected in KNOWN_COUNTS.items():
        solutions, nodes, elapsed = bt_nqueens_all(size, time_limit=5.0)
        if solutions is None:
            raise AssertionError(f"Enumeration timed out for N={size}.")
        if len(solutions) != expected:
            raise AssertionError(f"Expected {expected} solutions for N={size}, got {len(solutions)}.")
        if not all(is_valid_solution(placement) and len(placement) == size for placement in solutions):
            raise AssertionError(f"Invalid placement produced for N={size}.")
        print(f"  [BT] N={size}: {len(solutions)} solutions, nodes={nodes}, time={elapsed:.4f}s")

    first, _, _ = bt_nqueens_all(4)
    if not first or first[0] != [1, 3, 0, 2]:
        raise AssertionError(f"Unexpected first solution for N=4: {first[0] if first else None}.")
    if bt_nqueens_all(8)[0] != bt_nqueens_all(8)[0]:
        raise AssertionError("Enumeration for N=8 is not deterministic.")

    with tempfile.TemporaryDirectory() as tmpdir:
        rows = run_enumeration([6, 8], export=True, out_dir=tmpdir)
        for name in ("solutions_N8.csv", "solution_counts.csv"):
            csv_path = Path(tmpdir) / name
            if not csv_path.exists() or csv_path.stat().st_size == 0:
                raise AssertionError(f"{name} was not generated successfully during quick tests.")
        if [row["solutions"] for row in rows] != [4, 92]:
            raise AssertionError("Exported counts do not match the enumeration.")

    print("Quick regression tests passed.")


# ------------- CLI wiring --------------------------------------------------

def build_arg_parser():
    """Construct the argument parser for the CLI entry point."""
    parser = argparse.ArgumentParser(description="Enumerate and inspect N-Queens solutions.")
    parser.add_argument(
        "--size",
        "-n",
        action="append",
        help="Board size(s) to enumerate: N, N-M ranges or comma-separated values. Default: configured default size.",
    )
    parser.add_argument("--show", type=int, default=0, metavar="K", help="Print the first K solutions as ASCII boards.")
    parser.add_argument("--export", action="store_true", help="Write solution and count CSV files to the output directory.")
    parser.add_argument("--plot", action="store_true", help="Save the solutions-vs-N chart to the output directory.")
    parser.add_argument("--out-dir", help="Output directory (default: from configuration).")
    parser.add_argument("--time-limit", type=float, help="Per-size time limit in seconds (default: from configuration).")
    parser.add_argument("--config", help="Path to configuration file (default: config.json if present).")
    parser.add_argument("--quick-test", action="store_true", help="Run quick regression tests (N=1..8) and exit.")
    parser.add_argument("--validate", action="store_true", help="Check every produced placement (extra assertions).")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    """CLI entry point: parse arguments and dispatch to the enumeration run."""
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    if args.quick_test:
        run_quick_regression_tests()
        return

    config_path = args.config or "config.json"
    try:
        apply_configuration(config_path)
    except FileNotFoundError as exc:
        if args.config:
            print(f"Configuration file not found: {exc}")
            raise SystemExit(1) from exc
        print("No config.json found, using built-in defaults.")
    except ValueError as exc:
        print(f"Configuration error: {exc}")
        raise SystemExit(1) from exc

    try:
        sizes = parse_size_filters(args.size) or [settings.DEFAULT_BOARD_SIZE]
    except ValueError as exc:
        print(f"Input error: {exc}")
        raise SystemExit(1) from exc
    if args.show < 0:
        print("Input error: --show must be >= 0")
        raise SystemExit(1)
    time_limit = args.time_limit if args.time_limit is not None else settings.BT_TIME_LIMIT

    try:
        run_enumeration(
            sizes,
            time_limit=time_limit,
            show=args.show,
            export=args.export,
            plot=args.plot,
            out_dir=args.out_dir,
            validate=args.validate,
        )
    except KeyboardInterrupt:
        print("\nExecution interrupted by user.")
        raise SystemExit(130) from None
    except AssertionError as exc:
        print(f"Validation error: {exc}")
        raise SystemExit(1) from exc
