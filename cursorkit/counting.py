"""Cursors that count: each position's value is the position itself."""

from __future__ import annotations

import numbers

from .cursor import Cursor
from .traversal import Access, Traversal

__all__ = ["CountingCursor", "make_counting_iterator"]


def _is_numeric(value):
    return isinstance(value, numbers.Real)


class CountingCursor(Cursor):
    """Cursor whose value is a counter or a wrapped cursor.

    Moving the cursor moves the counter. A numeric start gives random
    access; a cursor start takes the traversal of that cursor. An explicit
    ``traversal`` overrides the default. Values are read-only.
    """

    access = Access.READABLE

    def __init__(self, start=0, traversal=None):
        self._current = start.copy() if isinstance(start, Cursor) else start
        if traversal is None:
            if _is_numeric(start):
                traversal = Traversal.RANDOM_ACCESS
            elif isinstance(start, Cursor):
                traversal = start.traversal
            else:
                raise TypeError(f"cannot count with {start!r}")
        elif not isinstance(traversal, Traversal):
            raise TypeError(f"not a traversal category: {traversal!r}")
        self.traversal = traversal

    def __repr__(self):
        return f"CountingCursor({self._current!r}, {self.traversal.name})"

    @property
    def base(self):
        """The current counter value."""
        return self._current

    def _numeric(self):
        return not isinstance(self._current, Cursor)

    def dereference(self):
        if self._numeric():
            return self._current
        return self._current.copy()

    def increment(self):
        if self._numeric():
            self._current += 1
        else:
            self._current.increment()
        return self

    def decrement(self):
        if self.traversal < Traversal.BIDIRECTIONAL:
            raise TypeError("counting cursor cannot be decremented")
        if self._numeric():
            self._current -= 1
        else:
            self._current.decrement()
        return self

    def advance(self, n):
        if n < 0 and self.traversal < Traversal.BIDIRECTIONAL:
            raise TypeError("counting cursor cannot move backward")
        if self.traversal < Traversal.RANDOM_ACCESS:
            return super().advance(n)
        if self._numeric():
            self._current += n
        else:
            self._current.advance(n)
        return self

    def distance_to(self, other):
        if not isinstance(other, CountingCursor):
            raise TypeError("distance is only defined between counting cursors")
        if self._numeric():
            return other._current - self._current
        return self._current.distance_to(other._current)

    def equal(self, other):
        return isinstance(other, CountingCursor) and self._current == other._current

    def copy(self):
        return CountingCursor(self._current, self.traversal)


def make_counting_iterator(start):
    """Return a counting cursor starting at ``start``."""
    return CountingCursor(start)