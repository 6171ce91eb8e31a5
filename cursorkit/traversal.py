"""Traversal and access categories for cursors, and queries over them."""

from __future__ import annotations

import enum

__all__ = [
    "Traversal",
    "Access",
    "minimum_category",
    "has_access",
    "is_readable_iterator",
]


class Traversal(enum.IntEnum):
    """How a cursor can move.

    The members are ordered: a cursor with a larger traversal supports
    every movement of the smaller ones.
    """

    INCREMENTABLE = 0
    SINGLE_PASS = 1
    FORWARD = 2
    BIDIRECTIONAL = 3
    RANDOM_ACCESS = 4


class Access(enum.IntFlag):
    """What a cursor lets you do with the element it points at."""

    NONE = 0
    READABLE = 1
    WRITABLE = 2
    SWAPPABLE = 4
    LVALUE = 8
    READABLE_WRITABLE = READABLE | WRITABLE
    READABLE_LVALUE = READABLE | LVALUE
    WRITABLE_LVALUE = WRITABLE | LVALUE


def minimum_category(first, second):
    """Return the weaker of two traversal categories."""
    for category in (first, second):
        if not isinstance(category, Traversal):
            raise TypeError(f"not a traversal category: {category!r}")
    return min(first, second)


def has_access(access, required):
    """Tell whether ``access`` grants every capability in ``required``."""
    granted = Access(access)
    needed = Access(required)
    return (granted & needed) == needed


def is_readable_iterator(cursor):
    """Tell whether dereferencing ``cursor`` yields a value.

    Objects declaring an ``access`` category are judged by it; otherwise
    anything behaving as a Python iterator counts as readable.
    """
    declared = getattr(cursor, "access", None)
    if declared is not None:
        return has_access(declared, Access.READABLE)
    return callable(getattr(cursor, "__next__", None))