"""A stopwatch for measuring elapsed time and a frames-per-second counter."""

import collections
import datetime
import time

__all__ = ["Stopwatch", "FpsClock", "Fps"]


class Stopwatch:
    """Measures elapsed time across any number of start and stop intervals."""

    def __init__(self):
        self._elapsed_ns = 0
        self._started_ns = None

    @classmethod
    def started(cls):
        """Return a stopwatch that is already running."""
        stopwatch = cls()
        stopwatch.start()
        return stopwatch

    def start(self):
        """Start or resume measuring; has no effect if already running."""
        if self._started_ns is None:
            self._started_ns = time.perf_counter_ns()

    def stop(self):
        """Stop measuring, keeping the time elapsed so far."""
        if self._started_ns is not None:
            self._elapsed_ns = self._total_ns()
            self._started_ns = None

    def reset(self):
        """Zero the elapsed time and return what it was.

        A running stopwatch keeps running from zero.
        """
        elapsed = self.elapsed()
        self._elapsed_ns = 0
        if self._started_ns is not None:
            self._started_ns = time.perf_counter_ns()
        return elapsed

    def restart(self):
        """Zero the elapsed time and start measuring."""
        self.reset()
        self.start()

    def running(self):
        """Return True while the stopwatch is measuring."""
        return self._started_ns is not None

    def elapsed(self):
        """Return the total elapsed time as a ``timedelta``."""
        return datetime.timedelta(microseconds=self._total_ns() // 1000)

    def elapsed_seconds(self):
        """Return the whole seconds elapsed."""
        return self._total_ns() // 1_000_000_000

    def elapsed_milliseconds(self):
        """Return the whole milliseconds elapsed."""
        return self._total_ns() // 1_000_000

    def elapsed_microseconds(self):
        """Return the whole microseconds elapsed."""
        return self._total_ns() // 1_000

    def elapsed_nanoseconds(self):
        """Return the nanoseconds elapsed."""
        return self._total_ns()

    def _total_ns(self):
        if self._started_ns is None:
            return self._elapsed_ns
        return self._elapsed_ns + time.perf_counter_ns() - self._started_ns

    def __str__(self):
        return str(self.elapsed())

    def __repr__(self):
        return f"Stopwatch(elapsed={self.elapsed()!r}, running={self.running()})"


class _FrameCount:
    __slots__ = ("value",)

    def __init__(self):
        self.value = 0


class Fps:
    """A read-only view of the frame rate measured by an :class:`FpsClock`."""

    def __init__(self, counter):
        self._counter = counter

    def value(self):
        """Return the number of frames seen in the last second."""
        return self._counter.value

    def __repr__(self):
        return f"Fps(fps={self.value()})"


class FpsClock:
    """Counts the updates made within the most recent second."""

    _WINDOW = 1.0

    def __init__(self):
        self._frames = collections.deque()
        self._counter = _FrameCount()

    def update(self):
        """Record a frame and drop frames older than one second."""
        now = time.monotonic()
        previous = now - self._WINDOW
        self._frames.append(now)
        while self._frames and self._frames[0] < previous:
            self._frames.popleft()
        self._counter.value = len(self._frames)

    def client(self):
        """Return an :class:`Fps` that reads this clock's frame rate."""
        return Fps(self._counter)

    def fps(self):
        """Return the number of frames seen in the last second."""
        return self._counter.value

    def __repr__(self):
        return f"FpsClock(fps={self.fps()})"