"""Bounded index cursors for walking boundary regions of a vertex buffer.

An IndexCursor walks a half-open range [start, stop) and can never step
outside it: advancing saturates at the last index, and peeked offsets are
clamped into the range.
"""

from dataclasses import dataclass

from boundedpath.exceptions import CursorRangeError


class IndexCursor:
    """A clamped, monotonically advancing integer cursor.

    The cursor starts at ``start`` and never reports a value outside
    ``[start, stop - 1]``.

    Example:
        cursor = IndexCursor(0, 5)
        cursor.advance().advance()
        cursor.value()      # 2
        cursor.peek_add(9)  # 4
        cursor.peek_sub(9)  # 0
    """

    __slots__ = ("_min", "_max", "_value")

    def __init__(self, start: int, stop: int) -> None:
        """Create a cursor over [start, stop).

        Args:
            start: First (inclusive) index, also the initial value
            stop: End (exclusive) of the range

        Raises:
            CursorRangeError: If the range is empty
        """
        if stop <= start:
            raise CursorRangeError(start, stop)
        self._min = start
        self._max = stop - 1
        self._value = start

    def value(self) -> int:
        """Current index."""
        return self._value

    def advance(self) -> "IndexCursor":
        """Step forward by one, saturating at the last index."""
        if self._value < self._max:
            self._value += 1
        return self

    def peek_add(self, n: int) -> int:
        """Value n steps ahead, clamped to the last index. Does not move."""
        total = self._value + n
        return total if total < self._max else self._max

    def peek_sub(self, n: int) -> int:
        """Value n steps back, clamped to the first index. Does not move."""
        diff = self._value - n
        return diff if diff > self._min else self._min

    def is_at_max(self) -> bool:
        """Whether the cursor sits on the last valid index."""
        return self._value == self._max

    @property
    def start(self) -> int:
        return self._min

    @property
    def stop(self) -> int:
        return self._max + 1

    def copy(self) -> "IndexCursor":
        clone = IndexCursor(self._min, self._max + 1)
        clone._value = self._value
        return clone

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IndexCursor):
            return NotImplemented
        return (self._min, self._max, self._value) == (other._min, other._max, other._value)

    def __repr__(self) -> str:
        return f"IndexCursor(value={self._value}, range=[{self._min}, {self._max + 1}))"


@dataclass
class CursorPair:
    """The near/far cursors walking the two boundary regions.

    "near" always refers to the side that advanced last.
    """

    near: IndexCursor
    far: IndexCursor

    def swap(self) -> None:
        self.near, self.far = self.far, self.near
