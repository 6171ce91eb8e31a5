"""Cursors that skip the elements a predicate rejects."""

from __future__ import annotations

from .cursor import Cursor
from .traversal import Traversal

__all__ = ["FilterCursor", "make_filter_iterator"]


class FilterCursor(Cursor):
    """Cursor over the elements of ``[base, end)`` that satisfy ``predicate``.

    A ``None`` predicate keeps truthy elements. A ``None`` end leaves the
    range unbounded, so the cursor moves until the predicate holds.
    Random access is reduced to bidirectional traversal.
    """

    def __init__(self, predicate, base, end=None):
        self._predicate = bool if predicate is None else predicate
        self._base = base.copy()
        self._end = None if end is None else end.copy()
        self.traversal = min(base.traversal, Traversal.BIDIRECTIONAL)
        self.access = base.access
        self._satisfy_predicate()

    def __repr__(self):
        return f"FilterCursor({self._base!r})"

    @property
    def predicate(self):
        return self._predicate

    @property
    def base(self):
        return self._base.copy()

    @property
    def end(self):
        return None if self._end is None else self._end.copy()

    def _at_end(self):
        return self._end is not None and self._base.equal(self._end)

    def _satisfy_predicate(self):
        while not self._at_end() and not self._predicate(self._base.dereference()):
            self._base.increment()

    def dereference(self):
        return self._base.dereference()

    def assign(self, value):
        self._base.assign(value)

    def increment(self):
        self._base.increment()
        self._satisfy_predicate()
        return self

    def decrement(self):
        if self.traversal < Traversal.BIDIRECTIONAL:
            raise TypeError("filter cursor cannot be decremented")
        while True:
            self._base.decrement()
            if self._predicate(self._base.dereference()):
                return self

    def equal(self, other):
        return isinstance(other, FilterCursor) and self._base.equal(other._base)

    def copy(self):
        clone = object.__new__(FilterCursor)
        clone._predicate = self._predicate
        clone._base = self._base.copy()
        clone._end = self._end
        clone.traversal = self.traversal
        clone.access = self.access
        return clone


def make_filter_iterator(predicate, base, end=None):
    """Return a filter cursor over ``[base, end)``."""
    return FilterCursor(predicate, base, end)