import pytest

from cursorkit.cursor import SequenceCursor, distance, iterate
from cursorkit.permutation import PermutationCursor, main, make_permutation_iterator

ELEMENT_RANGE_SIZE = 10
INDEX_SIZE = 7


@pytest.fixture
def setup():
    elements = [float(i) for i in range(ELEMENT_RANGE_SIZE)]
    indices = [ELEMENT_RANGE_SIZE - INDEX_SIZE + i for i in range(INDEX_SIZE)]
    indices.reverse()
    begin = make_permutation_iterator(SequenceCursor(elements), SequenceCursor(indices, 0))
    end = make_permutation_iterator(
        SequenceCursor(elements), SequenceCursor(indices, len(indices))
    )
    return elements, indices, begin, end


def test_begin_and_end(setup):
    _, _, begin, end = setup
    it = begin.copy()
    assert it == begin
    assert it != end
    assert distance(begin, end) == INDEX_SIZE


def test_forward_walk(setup):
    elements, indices, begin, end = setup
    assert list(iterate(begin, end)) == [elements[i] for i in indices]
    assert list(iterate(begin, end)) == [9.0, 8.0, 7.0, 6.0, 5.0, 4.0, 3.0]


def test_stride_two(setup):
    elements, indices, begin, _ = setup
    it = begin.copy()
    for i1 in range(0, INDEX_SIZE - 1, 2):
        assert it.dereference() == elements[indices[i1]]
        it.increment().increment()


def test_backward_walk(setup):
    elements, indices, begin, _ = setup
    it = begin.copy().advance(INDEX_SIZE)
    position = len(indices)
    while it != begin:
        position -= 1
        assert it.decrement().dereference() == elements[indices[position]]
    assert position == 0


def test_backward_stride_two(setup):
    elements, indices, begin, _ = setup
    it = begin.copy().advance(INDEX_SIZE)
    for i2 in range(0, INDEX_SIZE - 1, 2):
        assert it.decrement().dereference() == elements[indices[INDEX_SIZE - 1 - i2]]
        it.decrement()


def test_assign_writes_into_elements(setup):
    elements, _, begin, _ = setup
    begin.assign(100.0)
    assert elements[9] == 100.0
    begin[1] = 200.0
    assert elements[8] == 200.0


def test_plain_sequences_are_accepted():
    cursor = PermutationCursor(["a", "b", "c"], [2, 0, 1])
    assert [cursor[n] for n in range(3)] == ["c", "a", "b"]


def test_distance_requires_permutation_cursor(setup):
    _, _, begin, _ = setup
    with pytest.raises(TypeError):
        begin.distance_to(SequenceCursor([1]))


def test_main_output(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "The original range is : 0 1 2 3 4 5 6 7 8 9 ",
        "The reindexing scheme is : 9 8 7 6 ",
        "The permutated range is : 9 8 7 6 ",
        "Elements at even indices in the permutation : 9 7 ",
        "Permutation backwards : 6 7 8 9 ",
        "Iterate backward with stride 2 : 6 8 ",
    ]