import threading
import time
import unittest

from advent.core.pool import parallel_map, resolve_workers


class ResolveWorkersTests(unittest.TestCase):
    def test_never_more_than_items(self):
        self.assertEqual(resolve_workers(8, 3), 3)
        self.assertEqual(resolve_workers(2, 10), 2)

    def test_default_uses_cpus(self):
        self.assertGreaterEqual(resolve_workers(None, 1000), 1)
        self.assertEqual(resolve_workers(0, 1), 1)

    def test_at_least_one(self):
        self.assertEqual(resolve_workers(4, 0), 1)


class ParallelMapTests(unittest.TestCase):
    def test_results_follow_input_order_not_completion(self):
        delays = [0.05, 0.0, 0.03, 0.01, 0.0]

        def slow(i):
            time.sleep(delays[i])
            return i * 10

        self.assertEqual(parallel_map(slow, range(len(delays)), workers=5), [0, 10, 20, 30, 40])

    def test_runs_concurrently(self):
        barrier = threading.Barrier(3, timeout=5)

        def wait(i):
            barrier.wait()
            return i

        self.assertEqual(parallel_map(wait, [0, 1, 2], workers=3), [0, 1, 2])

    def test_first_failure_in_input_order_propagates(self):
        def check(i):
            if i == 3:
                raise ValueError("three")
            if i == 1:
                time.sleep(0.02)
                raise KeyError("one")
            return i

        with self.assertRaises(KeyError):
            parallel_map(check, range(5), workers=5)

    def test_empty(self):
        self.assertEqual(parallel_map(lambda x: x, []), [])


if __name__ == "__main__":
    unittest.main()
