"""N-Queens solution enumeration and viewing helpers."""

from .backtracking import bt_nqueens_all, count_solutions, enumerate_solutions
from .navigation import SolutionCursor
from .session import SolveRequest, SolverSession
from .stats import SolutionStats, summarize
from .utils import conflicts, conflicts_on2, format_placement, is_valid_solution, render_ascii

__all__ = [
    "enumerate_solutions",
    "bt_nqueens_all",
    "count_solutions",
    "SolutionCursor",
    "SolverSession",
    "SolveRequest",
    "SolutionStats",
    "summarize",
    "conflicts",
    "conflicts_on2",
    "format_placement",
    "is_valid_solution",
    "render_ascii",
]
