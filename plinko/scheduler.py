import heapq
import itertools

# slack for float accumulation of frame times
EPSILON = 1e-9


class Scheduler:
    """Deferred callbacks driven by the frame clock.

    Nothing runs on its own: the frame loop calls advance(dt) once per frame
    and every callback whose due time has passed runs right there, in due
    order, on the calling thread.
    """

    def __init__(self):
        self.now = 0.0
        self._queue = []
        self._seq = itertools.count()

    def __len__(self):
        return len(self._queue)

    def call_later(self, delay, callback, *args):
        due = self.now + max(0.0, delay)
        heapq.heappush(self._queue, (due, next(self._seq), callback, args))
        return due

    def pending(self):
        return sorted(due for due, _, _, _ in self._queue)

    def advance(self, dt):
        self.now += dt
        fired = 0
        while self._queue and self._queue[0][0] <= self.now + EPSILON:
            _, _, callback, args = heapq.heappop(self._queue)
            callback(*args)
            fired += 1
        return fired
