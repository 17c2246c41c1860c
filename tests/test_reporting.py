"""Tests for statistics, CSV export and charts."""

import csv
from pathlib import Path
import sys
import tempfile
import unittest
from contextlib import redirect_stdout
from io import StringIO

import matplotlib

matplotlib.use("Agg")

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import matplotlib.pyplot as plt

from nqueens_explorer.backtracking import enumerate_solutions
from nqueens_explorer.plots import draw_board, plot_solution_counts
from nqueens_explorer.reporting import save_counts_to_csv, save_solutions_to_csv
from nqueens_explorer.stats import ProgressPrinter, solutions_frame, summarize


class StatsTests(unittest.TestCase):
    def test_summarize(self):
        stats = summarize(4, enumerate_solutions(4), nodes=26, elapsed=0.5)
        self.assertEqual(stats, {"size": 4, "count": 2, "first_solution": "2, 4, 1, 3", "nodes": 26, "time": 0.5})

    def test_summarize_without_solutions(self):
        stats = summarize(2, [])
        self.assertEqual(stats["count"], 0)
        self.assertEqual(stats["first_solution"], "None")

    def test_solutions_frame(self):
        frame = solutions_frame(enumerate_solutions(4), 4)
        self.assertEqual(list(frame.columns), ["row_1", "row_2", "row_3", "row_4"])
        self.assertEqual(frame.index.name, "solution")
        self.assertEqual(list(frame.index), [1, 2])
        self.assertEqual(frame.loc[1].tolist(), [2, 4, 1, 3])

    def test_empty_frame_keeps_columns(self):
        frame = solutions_frame([], 3)
        self.assertTrue(frame.empty)
        self.assertEqual(list(frame.columns), ["row_1", "row_2", "row_3"])

    def test_progress_printer(self):
        buffer = StringIO()
        with redirect_stdout(buffer):
            ProgressPrinter(4, "Enumeration").update(1, "N=8")
        self.assertEqual(buffer.getvalue().strip(), "[Enumeration] 1/4 (25%) - N=8")


class CsvExportTests(unittest.TestCase):
    def test_solutions_csv(self):
        with tempfile.TemporaryDirectory() as tmpdir, redirect_stdout(StringIO()):
            path = save_solutions_to_csv(enumerate_solutions(4), 4, tmpdir)
            with open(path, newline="") as f:
                rows = list(csv.reader(f))
        self.assertEqual(path.name, "solutions_N4.csv")
        self.assertEqual(rows[0], ["solution", "row_1", "row_2", "row_3", "row_4"])
        self.assertEqual(rows[1], ["1", "2", "4", "1", "3"])
        self.assertEqual(len(rows), 3)

    def test_counts_csv(self):
        rows_in = [
            {"N": 4, "solutions": 2, "nodes_explored": 26, "time_seconds": 0.001},
            {"N": 3, "solutions": 0, "nodes_explored": 9, "time_seconds": 0.0005},
        ]
        with tempfile.TemporaryDirectory() as tmpdir, redirect_stdout(StringIO()):
            path = save_counts_to_csv(rows_in, str(Path(tmpdir) / "nested"))
            with open(path, newline="") as f:
                rows = list(csv.DictReader(f))
        self.assertEqual([row["N"] for row in rows], ["4", "3"])
        self.assertEqual(rows[1]["solutions"], "0")


class PlotTests(unittest.TestCase):
    def test_draw_board_places_one_queen_per_row(self):
        fig = draw_board([1, 3, 0, 2], 4)
        ax = fig.axes[0]
        self.assertEqual(len(ax.patches), 16)
        positions = sorted((text.get_position() for text in ax.texts), key=lambda p: p[1])
        self.assertEqual(positions, [(1.5, 0.5), (3.5, 1.5), (0.5, 2.5), (2.5, 3.5)])
        plt.close(fig)

    def test_draw_empty_board(self):
        fig = draw_board(None, 3, "#ffffff", "#000000")
        self.assertEqual(len(fig.axes[0].texts), 0)
        plt.close(fig)

    def test_plot_solution_counts(self):
        with tempfile.TemporaryDirectory() as tmpdir, redirect_stdout(StringIO()):
            path = plot_solution_counts([2, 3, 4, 5], [0, 0, 2, 10], tmpdir)
            self.assertTrue(path.exists())
            self.assertGreater(path.stat().st_size, 0)

    def test_plot_rejects_mismatched_lengths(self):
        with self.assertRaises(ValueError):
            plot_solution_counts([4, 5], [2], ".")


if __name__ == "__main__":
    unittest.main()
