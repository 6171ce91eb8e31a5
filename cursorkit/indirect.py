"""Cursors that dereference twice: over a range of pointers or references."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .cursor import Cursor
from .traversal import Access

__all__ = ["Ref", "IndirectCursor", "indirect_reference", "make_indirect_iterator"]


@dataclass(eq=False)
class Ref:
    """A mutable cell standing for a pointer to a single value."""

    value: Any = None

    def get(self):
        return self.value

    def set(self, value):
        self.value = value


def indirect_reference(pointer):
    """Return what ``pointer`` points at.

    A cursor is dereferenced; a :class:`Ref` gives its value.
    """
    if isinstance(pointer, Cursor):
        return pointer.dereference()
    if isinstance(pointer, Ref):
        return pointer.get()
    raise TypeError(f"cannot dereference {pointer!r}")


def _store_through(pointer, value):
    if isinstance(pointer, Cursor):
        pointer.assign(value)
    elif isinstance(pointer, Ref):
        pointer.set(value)
    else:
        raise TypeError(f"cannot store through {pointer!r}")


class IndirectCursor(Cursor):
    """Cursor whose elements are what the base cursor's elements point at."""

    access = Access.READABLE | Access.WRITABLE | Access.SWAPPABLE | Access.LVALUE

    def __init__(self, base):
        self._base = base.copy()
        self.traversal = base.traversal

    def __repr__(self):
        return f"IndirectCursor({self._base!r})"

    @property
    def base(self):
        return self._base.copy()

    def dereference(self):
        return indirect_reference(self._base.dereference())

    def assign(self, value):
        _store_through(self._base.dereference(), value)

    def increment(self):
        self._base.increment()
        return self

    def decrement(self):
        self._base.decrement()
        return self

    def advance(self, n):
        self._base.advance(n)
        return self

    def distance_to(self, other):
        if not isinstance(other, IndirectCursor):
            raise TypeError("distance is only defined between indirect cursors")
        return self._base.distance_to(other._base)

    def equal(self, other):
        return isinstance(other, IndirectCursor) and self._base.equal(other._base)

    def copy(self):
        return IndirectCursor(self._base)


def make_indirect_iterator(base):
    """Return an indirect cursor over ``base``."""
    return IndirectCursor(base)