"""Tests for the background solve session (loading state, stale results)."""

from pathlib import Path
import sys
import threading
import unittest
from unittest import mock

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from nqueens_explorer import backtracking
from nqueens_explorer.session import SolverSession


class SolverSessionTests(unittest.TestCase):
    def setUp(self):
        self.release = threading.Event()
        self.started = threading.Event()

    def tearDown(self):
        self.release.set()

    def _blocking_on(self, blocked_size):
        real = backtracking.bt_nqueens_all

        def fake(size, time_limit=None):
            if size == blocked_size:
                self.started.set()
                self.release.wait(5)
            return real(size, time_limit=time_limit)

        return fake

    def test_request_publishes_solutions_and_stats(self):
        session = SolverSession(min_size=1, max_size=12)
        self.addCleanup(session.shutdown)
        session.request(8)
        self.assertTrue(session.wait(timeout=30))
        self.assertFalse(session.is_loading)
        self.assertEqual(len(session.solutions), 92)
        self.assertEqual(session.cursor.index, 0)
        self.assertEqual(session.stats["count"], 92)
        self.assertEqual(session.stats["first_solution"], "1, 5, 8, 6, 3, 7, 2, 4")
        self.assertGreater(session.stats["nodes"], 0)

    def test_loading_state_is_visible_before_result(self):
        session = SolverSession(min_size=1, max_size=12)
        self.addCleanup(session.shutdown)
        with mock.patch("nqueens_explorer.session.bt_nqueens_all", side_effect=self._blocking_on(6)):
            session.request(6)
            self.assertTrue(self.started.wait(5))
            self.assertTrue(session.is_loading)
            self.assertFalse(session.poll())
            self.assertEqual(session.solutions, [])
            self.release.set()
            self.assertTrue(session.wait(timeout=5))
        self.assertEqual(len(session.solutions), 4)

    def test_superseded_result_is_discarded(self):
        session = SolverSession(max_workers=2, min_size=1, max_size=12)
        self.addCleanup(session.shutdown)
        with mock.patch("nqueens_explorer.session.bt_nqueens_all", side_effect=self._blocking_on(8)):
            stale = session.request(8)
            self.assertTrue(self.started.wait(5))
            session.request(4)
            self.assertTrue(session.wait(timeout=5))
            self.release.set()
            stale.future.result(timeout=5)
        self.assertFalse(session.poll())
        self.assertEqual(session.size, 4)
        self.assertEqual(session.solutions, [[1, 3, 0, 2], [2, 0, 3, 1]])
        self.assertEqual(session.stats["size"], 4)

    def test_queued_superseded_request_is_cancelled(self):
        session = SolverSession(max_workers=1, min_size=1, max_size=12)
        self.addCleanup(session.shutdown)
        with mock.patch("nqueens_explorer.session.bt_nqueens_all", side_effect=self._blocking_on(7)):
            session.request(7)
            self.assertTrue(self.started.wait(5))
            queued = session.request(5)
            session.request(6)
            self.assertTrue(queued.future.cancelled())
            self.assertEqual(session.discarded, 1)
            self.release.set()
            self.assertTrue(session.wait(timeout=5))
        self.assertEqual(len(session.solutions), 4)

    def test_solve_again_gets_fresh_tag(self):
        session = SolverSession(min_size=1, max_size=12)
        self.addCleanup(session.shutdown)
        first = session.request(5)
        session.wait(timeout=5)
        session.cursor.next()
        second = session.request(5)
        self.assertGreater(second.request_id, first.request_id)
        session.wait(timeout=5)
        self.assertEqual(session.cursor.index, 0)
        self.assertEqual(len(session.solutions), 10)

    def test_empty_result_is_not_an_error(self):
        session = SolverSession(min_size=1, max_size=12)
        self.addCleanup(session.shutdown)
        session.request(3)
        self.assertTrue(session.wait(timeout=5))
        self.assertEqual(session.solutions, [])
        self.assertEqual(session.stats["count"], 0)
        self.assertEqual(session.stats["first_solution"], "None")
        self.assertIsNone(session.cursor.current)

    def test_rejects_sizes_outside_bounds(self):
        session = SolverSession(min_size=4, max_size=12)
        self.addCleanup(session.shutdown)
        for size in (3, 13, 8.0, True):
            with self.subTest(size=size):
                with self.assertRaises(ValueError):
                    session.request(size)
        self.assertFalse(session.is_loading)

    def test_job_errors_propagate_and_clear_loading(self):
        session = SolverSession(min_size=1, max_size=12)
        self.addCleanup(session.shutdown)
        with mock.patch("nqueens_explorer.session.bt_nqueens_all", side_effect=RuntimeError("boom")):
            session.request(5)
            with self.assertRaises(RuntimeError):
                session.wait(timeout=5)
        self.assertFalse(session.is_loading)

    def test_shutdown_cancelled_request_clears_loading(self):
        session = SolverSession(max_workers=1, min_size=1, max_size=12)
        with mock.patch("nqueens_explorer.session.bt_nqueens_all", side_effect=self._blocking_on(7)):
            session.request(7)
            self.assertTrue(self.started.wait(5))
            queued = session.request(6)
            session.shutdown()
            self.assertTrue(queued.future.cancelled())
            self.assertFalse(session.poll())
            self.assertFalse(session.is_loading)
            self.release.set()
        self.assertEqual(session.solutions, [])

    def test_wait_without_request(self):
        session = SolverSession()
        self.addCleanup(session.shutdown)
        self.assertFalse(session.wait(timeout=0.1))
        self.assertFalse(session.poll())


if __name__ == "__main__":
    unittest.main()
