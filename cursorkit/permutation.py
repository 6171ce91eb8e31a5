"""Cursors that visit the elements of a range in the order an index range gives."""

from __future__ import annotations

import argparse
import sys

from .cursor import Cursor, SequenceCursor, iterate

__all__ = ["PermutationCursor", "make_permutation_iterator", "main"]


def _as_cursor(source):
    return source.copy() if isinstance(source, Cursor) else SequenceCursor(source, 0)


class PermutationCursor(Cursor):
    """Cursor reading ``elements[index]`` for each index under ``indices``.

    ``elements`` is the start of a random-access range and ``indices`` a
    cursor over offsets into it; plain sequences are accepted for either and
    taken from their first position. Movement follows the index cursor.
    """

    def __init__(self, elements, indices):
        self._elements = _as_cursor(elements)
        self._indices = _as_cursor(indices)
        self.traversal = self._indices.traversal
        self.access = self._elements.access

    def __repr__(self):
        return f"PermutationCursor({self._indices!r})"

    @property
    def base(self):
        """The index cursor."""
        return self._indices.copy()

    def _target(self):
        return self._elements.copy().advance(self._indices.dereference())

    def dereference(self):
        return self._target().dereference()

    def assign(self, value):
        self._target().assign(value)

    def increment(self):
        self._indices.increment()
        return self

    def decrement(self):
        self._indices.decrement()
        return self

    def advance(self, n):
        self._indices.advance(n)
        return self

    def distance_to(self, other):
        if not isinstance(other, PermutationCursor):
            raise TypeError("distance is only defined between permutation cursors")
        return self._indices.distance_to(other._indices)

    def equal(self, other):
        return isinstance(other, PermutationCursor) and self._indices.equal(other._indices)

    def copy(self):
        return PermutationCursor(self._elements, self._indices)


def make_permutation_iterator(elements, indices):
    """Return a permutation cursor reading ``elements`` through ``indices``."""
    return PermutationCursor(elements, indices)


def _spaced(values):
    return "".join(f"{value} " for value in values)


def main(argv=None):
    """Print a demonstration of walking a range through a reindexing scheme."""
    parser = argparse.ArgumentParser(
        description="Show a ten-element range visited through four reversed indices."
    )
    parser.parse_args(argv)

    element_range_size = 10
    index_size = 4
    elements = list(range(element_range_size))
    indices = [element_range_size - index_size + i for i in range(index_size)]
    indices.reverse()

    begin = make_permutation_iterator(SequenceCursor(elements), SequenceCursor(indices, 0))
    end = make_permutation_iterator(
        SequenceCursor(elements), SequenceCursor(indices, len(indices))
    )

    out = sys.stdout
    out.write(f"The original range is : {_spaced(elements)}\n")
    out.write(f"The reindexing scheme is : {_spaced(indices)}\n")
    out.write(f"The permutated range is : {_spaced(iterate(begin, end))}\n")

    evens = [(begin + 2 * step).dereference() for step in range(index_size // 2)]
    out.write(f"Elements at even indices in the permutation : {_spaced(evens)}\n")

    backwards = []
    cursor = begin + index_size
    while not cursor.equal(begin):
        cursor.decrement()
        backwards.append(cursor.dereference())
    out.write(f"Permutation backwards : {_spaced(backwards)}\n")

    strided = []
    cursor = begin + (index_size - 1)
    for _ in range(index_size // 2):
        strided.append(cursor.dereference())
        cursor -= 2
    out.write(f"Iterate backward with stride 2 : {_spaced(strided)}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())