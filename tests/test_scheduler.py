import unittest

from plinko.scheduler import Scheduler


class TestScheduler(unittest.TestCase):
    def test_runs_in_due_order(self):
        s = Scheduler()
        fired = []
        s.call_later(0.2, fired.append, "c")
        s.call_later(0.0, fired.append, "a")
        s.call_later(0.1, fired.append, "b")
        self.assertEqual(s.pending(), [0.0, 0.1, 0.2])
        self.assertEqual(s.advance(0.0), 1)
        self.assertEqual(fired, ["a"])
        s.advance(0.3)
        self.assertEqual(fired, ["a", "b", "c"])
        self.assertEqual(len(s), 0)

    def test_nothing_runs_before_advance(self):
        s = Scheduler()
        fired = []
        s.call_later(0, fired.append, 1)
        self.assertEqual(fired, [])

    def test_equal_due_times_keep_insertion_order(self):
        s = Scheduler()
        fired = []
        for i in range(5):
            s.call_later(0.1, fired.append, i)
        s.advance(0.1)
        self.assertEqual(fired, [0, 1, 2, 3, 4])

    def test_delays_are_relative_to_now(self):
        s = Scheduler()
        s.advance(1.0)
        self.assertEqual(s.call_later(0.5, lambda: None), 1.5)


if __name__ == "__main__":
    unittest.main()
