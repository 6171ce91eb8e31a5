import pytest

from cursorkit.counting import CountingCursor
from cursorkit.cursor import SequenceCursor, iterate
from cursorkit.filter import FilterCursor, make_filter_iterator
from cursorkit.traversal import Traversal


def is_even(x):
    return x % 2 == 0


def evens_over(seq):
    begin = make_filter_iterator(is_even, SequenceCursor(seq, 0), SequenceCursor(seq, len(seq)))
    end = make_filter_iterator(
        is_even, SequenceCursor(seq, len(seq)), SequenceCursor(seq, len(seq))
    )
    return begin, end


def test_yields_matching_elements():
    seq = [1, 2, 3, 4, 5, 6]
    begin, end = evens_over(seq)
    assert list(iterate(begin, end)) == [2, 4, 6]


def test_construction_skips_to_first_match():
    seq = [1, 3, 2, 5]
    begin, _ = evens_over(seq)
    assert begin.dereference() == 2
    assert begin.base == SequenceCursor(seq, 2)


def test_no_match_reaches_end():
    seq = [1, 3, 5]
    begin, end = evens_over(seq)
    assert begin == end
    assert list(iterate(begin, end)) == []


def test_decrement_walks_back_over_matches():
    seq = [1, 2, 3, 4, 5, 6, 7]
    _, end = evens_over(seq)
    c = end.copy()
    c.decrement()
    assert c.dereference() == 6
    c.decrement()
    assert c.dereference() == 4


def test_random_access_base_becomes_bidirectional():
    begin, _ = evens_over([2, 4])
    assert begin.traversal == Traversal.BIDIRECTIONAL


def test_none_predicate_keeps_truthy():
    seq = [0, 1, 0, 2, 0]
    begin = FilterCursor(None, SequenceCursor(seq, 0), SequenceCursor(seq, len(seq)))
    end = FilterCursor(None, SequenceCursor(seq, len(seq)), SequenceCursor(seq, len(seq)))
    assert list(iterate(begin, end)) == [1, 2]


def test_assign_writes_through():
    seq = [1, 2, 3]
    begin, _ = evens_over(seq)
    begin.assign(20)
    assert seq[1] == 20


def test_copy_is_independent():
    seq = [2, 4, 6]
    begin, _ = evens_over(seq)
    other = begin.copy()
    other.increment()
    assert begin.dereference() == 2
    assert other.dereference() == 4
    assert begin != other


def test_base_is_not_shared_with_caller():
    seq = [1, 2, 4]
    start = SequenceCursor(seq, 0)
    c = FilterCursor(is_even, start, SequenceCursor(seq, len(seq)))
    assert start.index == 0
    assert c.base.index == 1


def test_properties():
    seq = [2]
    end_pos = SequenceCursor(seq, 1)
    c = FilterCursor(is_even, SequenceCursor(seq, 0), end_pos)
    assert c.predicate is is_even
    assert c.end == end_pos


def test_unbounded_range_moves_until_match():
    c = FilterCursor(lambda x: x > 3, CountingCursor(0))
    assert c.dereference() == 4


def test_forward_base_over_counting():
    begin = FilterCursor(is_even, CountingCursor(0, Traversal.FORWARD), CountingCursor(10, Traversal.FORWARD))
    end = FilterCursor(is_even, CountingCursor(10, Traversal.FORWARD), CountingCursor(10, Traversal.FORWARD))
    assert begin.traversal == Traversal.FORWARD
    assert list(iterate(begin, end)) == list(range(0, 10, 2))
    with pytest.raises(TypeError):
        begin.decrement()


def test_distance_counts_matches():
    seq = [1, 2, 3, 4, 5, 6]
    begin, end = evens_over(seq)
    assert begin.distance_to(end) == len([2, 4, 6])