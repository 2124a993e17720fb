"""Bounded first-in first-out byte queue backed by a circular buffer."""

from __future__ import annotations

import threading

MAX_SIZE = 255


class FifoEmpty(Exception):
    """Raised when a byte is requested from an empty queue."""


def _check_byte(data: int) -> int:
    if not isinstance(data, int) or isinstance(data, bool):
        raise TypeError(f"byte must be an int, not {type(data).__name__}")
    if not 0 <= data <= 0xFF:
        raise ValueError(f"byte out of range 0..255: {data}")
    return data


class Fifo:
    """A fixed-capacity circular byte buffer, safe to share between threads."""

    def __init__(self, size: int) -> None:
        if not isinstance(size, int) or isinstance(size, bool):
            raise TypeError("size must be an int")
        if not 1 <= size <= MAX_SIZE:
            raise ValueError(f"size must be between 1 and {MAX_SIZE}, got {size}")
        self.size = size
        self._buffer = bytearray(size)
        self._read = 0
        self._write = 0
        self._count = 0
        self._ready = threading.Condition()

    def put(self, data: int) -> bool:
        """Store one byte; return False without storing when the queue is full."""
        _check_byte(data)
        with self._ready:
            if self._count >= self.size:
                return False
            self._buffer[self._write] = data
            self._write = (self._write + 1) % self.size
            self._count += 1
            self._ready.notify()
            return True

    def _take(self) -> int:
        data = self._buffer[self._read]
        self._read = (self._read + 1) % self.size
        self._count -= 1
        return data

    def get_wait(self, timeout: float | None = None) -> int:
        """Remove and return the oldest byte, waiting for one to arrive.

        With a timeout, FifoEmpty is raised if nothing arrives in time.
        """
        with self._ready:
            if not self._ready.wait_for(lambda: self._count > 0, timeout):
                raise FifoEmpty("no data arrived before the timeout")
            return self._take()

    def get_nowait(self) -> int:
        """Remove and return the oldest byte, raising FifoEmpty if there is none."""
        with self._ready:
            if not self._count:
                raise FifoEmpty("fifo is empty")
            return self._take()

    def available(self) -> bool:
        """Return True when at least one byte is waiting."""
        with self._ready:
            return self._count > 0

    def __len__(self) -> int:
        with self._ready:
            return self._count

    def __bool__(self) -> bool:
        return self.available()

    def __repr__(self) -> str:
        return f"Fifo(size={self.size}, count={len(self)})"