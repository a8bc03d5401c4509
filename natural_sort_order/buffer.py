"""Fixed-capacity output buffer.

Responsibilities:
- Reserve output storage once, before a scan starts.
- Refuse writes past capacity and report the overflow to the caller.
"""

from __future__ import annotations


class BoundedBuffer:
    """Byte buffer that never grows past its capacity.

    Both `append` and `extend` write as much as fits and return `False` when any
    byte had to be dropped. Once a write has been dropped the buffer stays marked
    as `overflowed`.
    """

    __slots__ = ("_capacity", "_data", "_length", "_overflowed")

    def __init__(self, capacity: int) -> None:
        """Allocate storage for exactly `capacity` bytes."""

        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity <= 0:
            raise ValueError("`capacity` must be a positive integer.")
        self._capacity = capacity
        self._data = bytearray(capacity)
        self._length = 0
        self._overflowed = False

    @property
    def capacity(self) -> int:
        """Return the fixed capacity in bytes."""

        return self._capacity

    @property
    def remaining(self) -> int:
        """Return how many bytes can still be written."""

        return self._capacity - self._length

    @property
    def is_full(self) -> bool:
        """Return whether no further byte can be written."""

        return self._length >= self._capacity

    @property
    def overflowed(self) -> bool:
        """Return whether any write has been dropped."""

        return self._overflowed

    def __len__(self) -> int:
        return self._length

    def append(self, byte: int) -> bool:
        """Write one byte value, returning `False` if the buffer is already full."""

        if self.is_full:
            self._overflowed = True
            return False
        self._data[self._length] = byte
        self._length += 1
        return True

    def extend(self, data: bytes | bytearray) -> bool:
        """Write `data`, truncated to the remaining capacity.

        Returns:
            `True` when all of `data` was written.
        """

        count = min(len(data), self.remaining)
        self._data[self._length : self._length + count] = data[:count]
        self._length += count
        if count < len(data):
            self._overflowed = True
            return False
        return True

    def getvalue(self) -> bytes:
        """Return an immutable copy of the bytes written so far."""

        return bytes(self._data[: self._length])
