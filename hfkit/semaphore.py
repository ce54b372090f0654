"""A counting semaphore whose capacity can change at run time."""

from __future__ import annotations

import threading


class Semaphore:
    """Semaphore allowing at most ``capacity`` simultaneous holders.

    A capacity <= 0 means no limit. The capacity may be changed with
    :meth:`resize`; growing it wakes all waiters, so FIFO order may be lost.
    """

    def __init__(self, capacity: int) -> None:
        self._cond = threading.Condition()
        self._capacity = capacity
        self._current = 0

    def acquire(self) -> None:
        """Block until a slot is free under the current capacity, then take it."""
        with self._cond:
            while not (self._capacity <= 0 or self._current < self._capacity):
                self._cond.wait()
            self._current += 1

    def release(self) -> None:
        """Give back a slot taken with :meth:`acquire`."""
        with self._cond:
            self._current -= 1
            if self._capacity == 0 or self._current < self._capacity - 1:
                return
            self._cond.notify()

    def resize(self, new_capacity: int) -> None:
        """Change the capacity; shrinking never affects current holders."""
        with self._cond:
            if new_capacity == self._capacity:
                return
            if (0 < new_capacity < self._capacity) or self._capacity == 0:
                self._capacity = new_capacity
                return
            self._capacity = new_capacity
            self._cond.notify_all()

    def __enter__(self) -> "Semaphore":
        self.acquire()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()