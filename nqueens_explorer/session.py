"""Background solve session used by the interactive page.

The enumerator is synchronous and CPU bound; running it inline would freeze
the page for larger boards. ``SolverSession`` submits each request to a
``ThreadPoolExecutor`` so the caller can render a loading state first and
collect the result later.

Every request is tagged with a monotonically increasing id and its board size.
Only the latest request may publish its result: anything that completes after
being superseded (a new size was picked, or "Solve Again" was pressed) is
discarded, and superseded jobs that have not started yet are cancelled.
"""
from __future__ import annotations

import itertools
import threading
from concurrent.futures import Future, ThreadPoolExecutor, wait
from dataclasses import dataclass
from typing import List, Optional, Tuple

from . import settings
from .backtracking import bt_nqueens_all
from .navigation import SolutionCursor
from .stats import SolutionStats, summarize


@dataclass
class SolveRequest:
    """A submitted enumeration, identified by ``request_id``."""

    request_id: int
    size: int
    future: "Future[Tuple[Optional[List[List[int]]], int, float]]"


class SolverSession:
    """Owns the solution cursor and the in-flight enumeration, if any.

    Parameters
    ----------
    max_workers : int | None
        Worker threads; defaults to ``settings.NUM_WORKERS``.
    min_size, max_size : int | None
        Accepted board sizes; default to the configured page bounds.
    """

    def __init__(
        self,
        max_workers: Optional[int] = None,
        min_size: Optional[int] = None,
        max_size: Optional[int] = None,
    ):
        self.min_size = settings.MIN_BOARD_SIZE if min_size is None else min_size
        self.max_size = settings.MAX_BOARD_SIZE if max_size is None else max_size
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers or settings.NUM_WORKERS,
            thread_name_prefix="nqueens-solver",
        )
        self._lock = threading.Lock()
        self._ids = itertools.count(1)
        self._pending: Optional[SolveRequest] = None
        self.size: Optional[int] = None
        self.cursor = SolutionCursor()
        self.stats: Optional[SolutionStats] = None
        self.discarded = 0

    @property
    def is_loading(self) -> bool:
        return self._pending is not None

    @property
    def solutions(self) -> List[List[int]]:
        return self.cursor.solutions

    def request(self, size: int) -> SolveRequest:
        """Start a fresh enumeration for ``size``, superseding any pending one."""
        if isinstance(size, bool) or not isinstance(size, int):
            raise ValueError(f"Board size must be an integer, got {size!r}")
        if not self.min_size <= size <= self.max_size:
            raise ValueError(f"Board size {size} outside [{self.min_size}, {self.max_size}]")

        with self._lock:
            previous = self._pending
            if previous is not None and previous.future.cancel():
                self.discarded += 1
            request = SolveRequest(next(self._ids), size, self._executor.submit(bt_nqueens_all, size))
            self._pending = request
            self.size = size
        return request

    def poll(self) -> bool:
        """Collect the latest result if it is ready; return True when published."""
        pending = self._pending
        if pending is None or not pending.future.done():
            return False
        return self._collect(pending)

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Block until the latest request finishes (or ``timeout`` expires)."""
        pending = self._pending
        if pending is None:
            return False
        wait([pending.future], timeout=timeout)
        if not pending.future.done():
            return False
        return self._collect(pending)

    def _collect(self, request: SolveRequest) -> bool:
        if request.future.cancelled():
            # Cancelled by shutdown(); nothing to publish.
            with self._lock:
                if self._pending is request:
                    self._pending = None
                self.discarded += 1
            return False

        error = request.future.exception()
        with self._lock:
            if self._pending is not request:
                # Superseded while running; its result must never become visible.
                self.discarded += 1
                return False
            self._pending = None
        if error is not None:
            raise error

        solutions, nodes, elapsed = request.future.result()
        solutions = solutions or []
        self.cursor.reset(solutions)
        self.stats = summarize(request.size, solutions, nodes, elapsed)
        return True

    def shutdown(self) -> None:
        self._executor.shutdown(wait=False, cancel_futures=True)
