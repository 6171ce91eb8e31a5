import pytest

from cursorkit.counting import CountingCursor
from cursorkit.cursor import SequenceCursor, distance, iter_swap, iterate
from cursorkit.indirect import IndirectCursor, Ref, indirect_reference, make_indirect_iterator
from cursorkit.traversal import Traversal


def ref_range(values):
    refs = [Ref(v) for v in values]
    begin = make_indirect_iterator(SequenceCursor(refs, 0))
    end = make_indirect_iterator(SequenceCursor(refs, len(refs)))
    return refs, begin, end


def test_ref_get_and_set():
    r = Ref(1)
    r.set(2)
    assert r.get() == 2


def test_iterates_referents():
    _, begin, end = ref_range([1, 2, 3])
    assert list(iterate(begin, end)) == [1, 2, 3]


def test_assign_writes_through_pointer():
    refs, begin, _ = ref_range([1, 2])
    begin.assign(10)
    assert refs[0].get() == 10


def test_cursors_as_pointers():
    data = ["x", "y", "z"]
    pointers = [SequenceCursor(data, 2), SequenceCursor(data, 0)]
    begin = IndirectCursor(SequenceCursor(pointers, 0))
    end = IndirectCursor(SequenceCursor(pointers, len(pointers)))
    assert list(iterate(begin, end)) == ["z", "x"]
    begin.assign("w")
    assert data[2] == "w"


def test_indirect_reference():
    assert indirect_reference(Ref(5)) == 5
    assert indirect_reference(SequenceCursor([7], 0)) == 7
    with pytest.raises(TypeError):
        indirect_reference(3)


def test_non_pointer_element_rejected():
    c = IndirectCursor(SequenceCursor([1, 2], 0))
    with pytest.raises(TypeError):
        c.dereference()
    with pytest.raises(TypeError):
        c.assign(0)


def test_random_access_follows_base():
    _, begin, end = ref_range([4, 5, 6])
    assert begin.traversal == Traversal.RANDOM_ACCESS
    assert (begin + 2).dereference() == 6
    assert begin[1] == 5
    assert distance(begin, end) == 3
    assert begin < end


def test_traversal_taken_from_base():
    c = IndirectCursor(CountingCursor(0, Traversal.FORWARD))
    assert c.traversal == Traversal.FORWARD


def test_increment_decrement_roundtrip():
    _, begin, _ = ref_range([1, 2])
    c = begin.copy()
    c.increment()
    assert c != begin
    c.decrement()
    assert c == begin


def test_copy_is_independent():
    _, begin, _ = ref_range([1, 2])
    other = begin.copy()
    other.increment()
    assert begin.dereference() == 1
    assert other.dereference() == 2


def test_iter_swap_exchanges_referents():
    refs, begin, _ = ref_range(["a", "b"])
    iter_swap(begin, begin + 1)
    assert [r.get() for r in refs] == ["b", "a"]


def test_distance_to_other_kind_rejected():
    _, begin, _ = ref_range([1])
    with pytest.raises(TypeError):
        begin.distance_to(SequenceCursor([1], 0))