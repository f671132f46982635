"""Reset events for signalling between threads, and simple shared booleans."""

import abc
import threading
import time

__all__ = [
    "ResetEvent",
    "AutoResetEvent",
    "ManualResetEvent",
    "AtomicArBool",
    "AtomicRelaxedBool",
]


class ResetEvent(abc.ABC):
    """An event that threads wait on until another thread signals it.

    Deadlines are values of ``time.monotonic()``.
    """

    def __init__(self):
        self._condition = threading.Condition(threading.Lock())

    @abc.abstractmethod
    def reset(self):
        """Put the event in the non-signalled state, so that waiting threads block."""

    @abc.abstractmethod
    def set(self):
        """Signal the event, allowing one or more waiting threads to proceed."""

    @abc.abstractmethod
    def wait(self):
        """Block until the event is signalled."""

    @abc.abstractmethod
    def wait_until(self, deadline):
        """Wait until signalled or until ``deadline``; return True if signalled."""

    def wait_duration(self, seconds):
        """Wait at most ``seconds``; return True if signalled."""
        return self.wait_until(time.monotonic() + seconds)

    def wait_ms(self, milliseconds):
        """Wait at most ``milliseconds``; return True if signalled."""
        return self.wait_duration(milliseconds / 1000)


class AutoResetEvent(ResetEvent):
    """An event that releases a single waiter per signal.

    Once a waiting thread is released the event returns to the non-signalled
    state. If no thread is waiting it stays signalled until one arrives.
    """

    def __init__(self, signalled=False):
        super().__init__()
        self._signalled = bool(signalled)

    def reset(self):
        with self._condition:
            self._signalled = False

    def set(self):
        with self._condition:
            self._signalled = True
            self._condition.notify()

    def wait(self):
        with self._condition:
            while not self._signalled:
                self._condition.wait()
            self._signalled = False

    def wait_until(self, deadline):
        with self._condition:
            while not self._signalled:
                remaining = deadline - time.monotonic()
                if remaining <= 0 or not self._condition.wait(remaining):
                    return False
            self._signalled = False
            return True

    def __repr__(self):
        return f"AutoResetEvent(signalled={self._signalled})"


class ManualResetEvent(ResetEvent):
    """An event that, once signalled, releases every waiter until it is reset.

    A signal releases all threads that were waiting when it was given, even if
    the event is reset again before they get to run.
    """

    def __init__(self, signalled=False):
        super().__init__()
        self._signalled = bool(signalled)
        self._generation = 0

    def reset(self):
        with self._condition:
            self._signalled = False

    def set(self):
        with self._condition:
            self._generation += 1
            self._signalled = True
            self._condition.notify_all()

    def wait(self):
        with self._condition:
            generation = self._generation
            while not self._signalled and self._generation == generation:
                self._condition.wait()

    def wait_until(self, deadline):
        with self._condition:
            generation = self._generation
            while not self._signalled and self._generation == generation:
                remaining = deadline - time.monotonic()
                if remaining <= 0 or not self._condition.wait(remaining):
                    return False
            return True

    def __repr__(self):
        return f"ManualResetEvent(signalled={self._signalled})"


class AtomicArBool:
    """A boolean shared between threads whose reads and writes are serialized."""

    def __init__(self, value=False):
        self._lock = threading.Lock()
        self._value = bool(value)

    def get(self):
        """Return the current value."""
        with self._lock:
            return self._value

    def set(self, value):
        """Store ``value``."""
        with self._lock:
            self._value = bool(value)

    def __repr__(self):
        return f"AtomicArBool({self.get()})"


class AtomicRelaxedBool:
    """A boolean shared between threads with no ordering guarantees."""

    def __init__(self, value=False):
        self._value = bool(value)

    def get(self):
        """Return the current value."""
        return self._value

    def set(self, value):
        """Store ``value``."""
        self._value = bool(value)

    def __repr__(self):
        return f"AtomicRelaxedBool({self._value})"