"""Cursors that move several cursors in lockstep and read them as tuples."""

from __future__ import annotations

from functools import reduce

from .cursor import Cursor
from .traversal import Access, Traversal, minimum_category

__all__ = ["ZipCursor", "make_zip_iterator"]


class ZipCursor(Cursor):
    """Cursor over a tuple of cursors that all move together.

    Reading yields a tuple of the elements under each member cursor. The
    traversal is the weakest traversal among the members, and distances
    are measured with the first member.
    """

    access = Access.READABLE

    def __init__(self, cursors):
        members = tuple(cursor.copy() for cursor in cursors)
        if not members:
            raise ValueError("a zip cursor needs at least one cursor")
        self._cursors = members
        self.traversal = reduce(
            minimum_category,
            (cursor.traversal for cursor in members),
            Traversal.RANDOM_ACCESS,
        )

    def __repr__(self):
        return f"ZipCursor({list(self._cursors)!r})"

    @property
    def cursors(self):
        """The member cursors, in order."""
        return self._cursors

    def dereference(self):
        return tuple(cursor.dereference() for cursor in self._cursors)

    def increment(self):
        for cursor in self._cursors:
            cursor.increment()
        return self

    def decrement(self):
        if self.traversal < Traversal.BIDIRECTIONAL:
            raise TypeError("zip cursor cannot be decremented")
        for cursor in self._cursors:
            cursor.decrement()
        return self

    def advance(self, n):
        if self.traversal < Traversal.RANDOM_ACCESS:
            return super().advance(n)
        for cursor in self._cursors:
            cursor.advance(n)
        return self

    def distance_to(self, other):
        if not isinstance(other, ZipCursor):
            raise TypeError("distance is only defined between zip cursors")
        return self._cursors[0].distance_to(other._cursors[0])

    def equal(self, other):
        return (
            isinstance(other, ZipCursor)
            and len(other._cursors) == len(self._cursors)
            and all(mine.equal(theirs) for mine, theirs in zip(self._cursors, other._cursors))
        )

    def copy(self):
        return ZipCursor(self._cursors)


def make_zip_iterator(cursors):
    """Return a zip cursor over ``cursors``."""
    return ZipCursor(cursors)