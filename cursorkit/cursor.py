"""Position-style cursors over sequences and the algorithms built on them."""

from __future__ import annotations

import copy as _copy
from typing import ClassVar

from .traversal import Access, Traversal

__all__ = ["Cursor", "SequenceCursor", "iterate", "distance", "iter_swap"]


class Cursor:
    """Base for cursors: a position that can be moved, read and written.

    Subclasses declare their ``traversal`` and ``access`` and implement the
    primitive operations they support. Movement methods return the cursor
    itself so calls can be chained.
    """

    traversal: ClassVar[Traversal] = Traversal.INCREMENTABLE
    access: ClassVar[Access] = Access.NONE

    __hash__ = None  # type: ignore[assignment]

    def dereference(self):
        """Return the element at the current position."""
        raise TypeError(f"{type(self).__name__} is not readable")

    def assign(self, value):
        """Store ``value`` at the current position."""
        raise TypeError(f"{type(self).__name__} is not writable")

    def increment(self):
        """Move one position forward."""
        raise TypeError(f"{type(self).__name__} cannot be incremented")

    def decrement(self):
        """Move one position backward."""
        raise TypeError(f"{type(self).__name__} cannot be decremented")

    def advance(self, n):
        """Move ``n`` positions, backward when ``n`` is negative."""
        step = self.increment if n >= 0 else self.decrement
        for _ in range(abs(n)):
            step()
        return self

    def distance_to(self, other):
        """Return the number of increments that lead from here to ``other``.

        ``other`` must be reachable from this cursor.
        """
        if self.traversal < Traversal.FORWARD:
            raise TypeError(f"{type(self).__name__} cannot measure distance")
        probe = self.copy()
        steps = 0
        while not probe.equal(other):
            probe.increment()
            steps += 1
        return steps

    def equal(self, other):
        """Tell whether ``other`` points at the same position."""
        raise TypeError(f"{type(self).__name__} cannot be compared")

    def copy(self):
        """Return an independent cursor at the same position."""
        return _copy.copy(self)

    @property
    def value(self):
        return self.dereference()

    @value.setter
    def value(self, new_value):
        self.assign(new_value)

    def __eq__(self, other):
        if not isinstance(other, Cursor):
            return NotImplemented
        return self.equal(other)

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def _offset_to(self, other):
        if self.traversal < Traversal.RANDOM_ACCESS:
            raise TypeError(f"{type(self).__name__} cannot be ordered")
        return self.distance_to(other)

    def __lt__(self, other):
        if not isinstance(other, Cursor):
            return NotImplemented
        return self._offset_to(other) > 0

    def __le__(self, other):
        if not isinstance(other, Cursor):
            return NotImplemented
        return self._offset_to(other) >= 0

    def __gt__(self, other):
        if not isinstance(other, Cursor):
            return NotImplemented
        return self._offset_to(other) < 0

    def __ge__(self, other):
        if not isinstance(other, Cursor):
            return NotImplemented
        return self._offset_to(other) <= 0

    def __add__(self, n):
        if not isinstance(n, int):
            return NotImplemented
        return self.copy().advance(n)

    __radd__ = __add__

    def __sub__(self, other):
        if isinstance(other, Cursor):
            return other.distance_to(self)
        if isinstance(other, int):
            return self.copy().advance(-other)
        return NotImplemented

    def __iadd__(self, n):
        return self.advance(n)

    def __isub__(self, n):
        return self.advance(-n)

    def __getitem__(self, n):
        return (self + n).dereference()

    def __setitem__(self, n, value):
        (self + n).assign(value)


class SequenceCursor(Cursor):
    """Random-access cursor over an indexable, mutable-or-not sequence."""

    traversal = Traversal.RANDOM_ACCESS
    access = Access.READABLE | Access.WRITABLE | Access.SWAPPABLE | Access.LVALUE

    def __init__(self, sequence, index=0):
        self.sequence = sequence
        self.index = index

    def __repr__(self):
        return f"SequenceCursor(index={self.index})"

    def _check_position(self):
        if not 0 <= self.index < len(self.sequence):
            raise IndexError(f"cursor at {self.index} is not dereferenceable")

    def dereference(self):
        self._check_position()
        return self.sequence[self.index]

    def assign(self, value):
        self._check_position()
        self.sequence[self.index] = value

    def increment(self):
        self.index += 1
        return self

    def decrement(self):
        self.index -= 1
        return self

    def advance(self, n):
        self.index += n
        return self

    def distance_to(self, other):
        if not isinstance(other, SequenceCursor) or other.sequence is not self.sequence:
            raise ValueError("cursors do not range over the same sequence")
        return other.index - self.index

    def equal(self, other):
        return (
            isinstance(other, SequenceCursor)
            and other.sequence is self.sequence
            and other.index == self.index
        )

    def copy(self):
        return SequenceCursor(self.sequence, self.index)


def iterate(first, last):
    """Yield the elements of the half-open range ``[first, last)``."""
    cursor = first.copy()
    while not cursor.equal(last):
        yield cursor.dereference()
        cursor.increment()


def distance(first, last):
    """Return the number of positions in ``[first, last)``."""
    return first.distance_to(last)


def iter_swap(a, b):
    """Exchange the elements the two cursors point at."""
    first_value = a.dereference()
    second_value = b.dereference()
    a.assign(second_value)
    b.assign(first_value)