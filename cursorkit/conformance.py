"""Checks that a cursor meets the requirements of its traversal and access.

Each check takes cursors positioned as its docstring describes, exercises
them and raises :class:`ConformanceError` when the cursor misbehaves. Cursors
passed in are copied first where the requirement is stated on a copy, so the
caller's cursors keep their positions.
"""

from __future__ import annotations

from dataclasses import dataclass

from .cursor import iter_swap
from .traversal import Access, has_access, is_readable_iterator

__all__ = [
    "ConformanceError",
    "DummyT",
    "check_trivial_iterator",
    "check_mutable_trivial_iterator",
    "check_input_iterator",
    "check_forward_iterator",
    "check_bidirectional_iterator",
    "check_random_access_iterator",
    "check_const_nonconst_iterator",
    "check_readable_iterator",
    "check_writable_iterator",
    "check_swappable_iterator",
    "check_constant_lvalue_iterator",
    "check_non_const_lvalue_iterator",
    "check_forward_readable_iterator",
    "check_forward_swappable_iterator",
    "check_bidirectional_readable_iterator",
    "check_random_access_readable_iterator",
]


class ConformanceError(AssertionError):
    """A cursor failed one of the requirements being checked."""


@dataclass
class DummyT:
    """A simple value type for exercising cursors."""

    x: int = 0

    def foo(self):
        return self.x


def _expect(condition, message):
    if not condition:
        raise ConformanceError(message)


def _post_increment(cursor):
    """Advance ``cursor`` and return a copy of where it was."""
    old = cursor.copy()
    cursor.increment()
    return old


def _post_decrement(cursor):
    """Step ``cursor`` back and return a copy of where it was."""
    old = cursor.copy()
    cursor.decrement()
    return old


def check_trivial_iterator(i, j, val):
    """Check equality and dereference. Requires ``i != j`` and ``*i == val``."""
    _expect(i == i, "cursor is not equal to itself")
    _expect(j == j, "cursor is not equal to itself")
    _expect(i != j, "distinct cursors compare equal")
    _expect(i.dereference() == val, "cursor does not read the expected value")
    k = i.copy()
    _expect(k == k, "copy is not equal to itself")
    _expect(k == i, "copy is not equal to its original")
    _expect(k != j, "copy equals a distinct cursor")
    _expect(k.dereference() == val, "copy does not read the expected value")


def check_mutable_trivial_iterator(i, j, val):
    """Store ``val`` through ``i`` and check it as a trivial cursor."""
    i.assign(val)
    check_trivial_iterator(i, j, val)


def check_input_iterator(i, v1, v2):
    """Check a single-pass cursor with ``*i == v1`` and ``*++i == v2``."""
    i = i.copy()
    i1 = i.copy()
    _expect(i == i1, "copy is not equal to its original")
    _expect(not (i != i1), "copy compares unequal to its original")
    _expect(i1.dereference() == v1, "copy does not read the first value")
    _expect(i.dereference() == v1, "cursor does not read the first value")
    _expect(_post_increment(i).dereference() == v1, "postfix increment read the wrong value")

    i1 = i.copy()
    _expect(i == i1, "copy is not equal to its original")
    _expect(not (i != i1), "copy compares unequal to its original")
    _expect(i1.dereference() == v2, "copy does not read the second value")
    _expect(i.dereference() == v2, "cursor does not read the second value")
    i.increment()


def check_forward_iterator(i, v1, v2):
    """Check a multi-pass cursor with ``*i == v1`` and ``*++i == v2``."""
    check_input_iterator(i, v1, v2)
    i = i.copy()
    i1 = i.copy()
    i2 = i.copy()

    _expect(i == _post_increment(i1), "postfix increment changed the old position")
    _expect(i != i2.increment(), "prefix increment did not move the cursor")

    check_trivial_iterator(i, i1, v1)
    check_trivial_iterator(i, i2, v1)

    i.increment()
    _expect(i == i1, "incremented cursors disagree")
    _expect(i == i2, "incremented cursors disagree")
    i1.increment()
    i2.increment()

    check_trivial_iterator(i, i1, v2)
    check_trivial_iterator(i, i2, v2)


def check_bidirectional_iterator(i, v1, v2):
    """Check a bidirectional cursor with ``*i == v1`` and ``*++i == v2``."""
    check_forward_iterator(i, v1, v2)
    i = i.copy()
    i.increment()

    i1 = i.copy()
    i2 = i.copy()

    _expect(i == _post_decrement(i1), "postfix decrement changed the old position")
    _expect(i != i2.decrement(), "prefix decrement did not move the cursor")

    check_trivial_iterator(i, i1, v2)
    check_trivial_iterator(i, i2, v2)

    i.decrement()
    _expect(i == i1, "decremented cursors disagree")
    _expect(i == i2, "decremented cursors disagree")
    i1.increment()
    i2.increment()

    check_trivial_iterator(i, i1, v1)
    check_trivial_iterator(i, i2, v1)


def _check_random_access_walk(i, n, vals):
    j = i.copy()
    i = i.copy()

    for c in range(n - 1):
        _expect(i == j + c, f"cursor differs from start + {c}")
        _expect(i.dereference() == vals[c], f"wrong value at offset {c}")
        _expect(i.dereference() == j[c], f"subscript {c} reads the wrong value")
        _expect(i.dereference() == (j + c).dereference(), f"start + {c} reads the wrong value")
        _expect(i.dereference() == (c + j).dereference(), f"{c} + start reads the wrong value")
        i.increment()
        _expect(i > j, "later cursor is not greater")
        _expect(i >= j, "later cursor is not greater or equal")
        _expect(j <= i, "earlier cursor is not less or equal")
        _expect(j < i, "earlier cursor is not less")

    k = j + n - 1
    for c in range(n - 1):
        _expect(i == k - c, f"cursor differs from last - {c}")
        _expect(i.dereference() == vals[n - 1 - c], f"wrong value at offset {n - 1 - c}")
        _expect(i.dereference() == j[n - 1 - c], f"subscript {n - 1 - c} reads the wrong value")
        q = k - c
        _expect(i.dereference() == q.dereference(), f"last - {c} reads the wrong value")
        _expect(i > j, "later cursor is not greater")
        _expect(i >= j, "later cursor is not greater or equal")
        _expect(j <= i, "earlier cursor is not less or equal")
        _expect(j < i, "earlier cursor is not less")
        i.decrement()


def check_random_access_iterator(i, n, vals):
    """Check a random-access cursor over ``n`` positions reading ``vals``."""
    check_bidirectional_iterator(i, vals[0], vals[1])
    _check_random_access_walk(i, n, vals)


def check_const_nonconst_iterator(i, j):
    """Check that cursors at different positions interoperate. Requires ``i != j``."""
    _expect(i != j, "distinct cursors compare equal")
    _expect(j != i, "distinct cursors compare equal")

    k = i.copy()
    _expect(k == i, "converted copy is not equal to its original")
    _expect(i == k, "original is not equal to its converted copy")

    k = i.copy()
    _expect(k == i, "assigned copy is not equal to its original")
    _expect(i == k, "original is not equal to its assigned copy")


def check_readable_iterator(i, v):
    """Check that ``i`` and its copies read ``v``."""
    i2 = i.copy()
    _expect(i.dereference() == v, "cursor does not read the expected value")
    _expect(i2.dereference() == v, "copy does not read the expected value")

    probe = i.copy()
    read = probe.dereference()
    probe.increment()
    _expect(read == v, "postfix increment read the wrong value")

    _expect(is_readable_iterator(i), "cursor does not declare itself readable")


def check_writable_iterator(i, v, v2):
    """Check that ``v`` can be stored through ``i`` and ``v2`` further on."""
    i2 = i.copy()
    i2.assign(v)

    i1 = i.copy()
    i1.increment()
    _post_increment(i1).assign(v2)
    _post_increment(i1)


def check_swappable_iterator(i, j):
    """Check that swapping through copies exchanges the elements."""
    i2 = i.copy()
    j2 = j.copy()
    bi = i.dereference()
    bj = j.dereference()
    iter_swap(i2, j2)
    ai = i.dereference()
    aj = j.dereference()
    _expect(bi == aj and bj == ai, "elements were not exchanged")


def check_constant_lvalue_iterator(i, v1):
    """Check a read-only cursor that yields stored elements."""
    _expect(has_access(i.access, Access.LVALUE), "cursor does not yield stored elements")
    _expect(not has_access(i.access, Access.WRITABLE), "constant cursor is writable")
    i2 = i.copy()
    _expect(i2.dereference() == v1, "cursor does not read the expected value")


def check_non_const_lvalue_iterator(i, v1, v2):
    """Check a mutable cursor reading ``v1``; stores ``v2`` through it."""
    _expect(
        has_access(i.access, Access.LVALUE | Access.WRITABLE),
        "cursor does not yield mutable stored elements",
    )
    i2 = i.copy()
    _expect(i2.dereference() == v1, "cursor does not read the expected value")
    i.assign(v2)
    _expect(i2.dereference() == v2, "stored value is not visible through a copy")


def check_forward_readable_iterator(i, j, val1, val2):
    """Check a readable multi-pass cursor; requires ``j != i`` and ``*++i == val2``."""
    i2 = i.copy()
    i3 = i.copy()
    _expect(i2 == i3, "copies of one cursor differ")
    _expect(i != j, "distinct cursors compare equal")
    _expect(i2 != j, "distinct cursors compare equal")
    check_readable_iterator(i, val1)
    check_readable_iterator(i2, val1)
    check_readable_iterator(i3, val1)

    _expect(i == _post_increment(i2), "postfix increment changed the old position")
    _expect(i != i3.increment(), "prefix increment did not move the cursor")

    check_readable_iterator(i2, val2)
    check_readable_iterator(i3, val2)

    check_readable_iterator(i, val1)


def check_forward_swappable_iterator(i, j, val1, val2):
    """Check a readable multi-pass cursor and swap its first two elements."""
    check_forward_readable_iterator(i, j, val1, val2)
    i2 = i.copy()
    i2.increment()
    check_swappable_iterator(i, i2)


def check_bidirectional_readable_iterator(i, v1, v2):
    """Check a readable bidirectional cursor with ``*i == v1`` and ``*++i == v2``."""
    i = i.copy()
    j = i.copy()
    j.increment()
    check_forward_readable_iterator(i, j, v1, v2)
    i.increment()

    i1 = i.copy()
    i2 = i.copy()

    _expect(i == _post_decrement(i1), "postfix decrement changed the old position")
    _expect(i != i2.decrement(), "prefix decrement did not move the cursor")

    check_readable_iterator(i, v2)
    check_readable_iterator(i1, v1)
    check_readable_iterator(i2, v1)

    i.decrement()
    _expect(i == i1, "decremented cursors disagree")
    _expect(i == i2, "decremented cursors disagree")
    i1.increment()
    i2.increment()

    check_readable_iterator(i, v1)
    check_readable_iterator(i1, v2)
    check_readable_iterator(i2, v2)


def check_random_access_readable_iterator(i, n, vals):
    """Check a readable random-access cursor over ``n`` positions reading ``vals``."""
    check_bidirectional_readable_iterator(i, vals[0], vals[1])
    _check_random_access_walk(i, n, vals)