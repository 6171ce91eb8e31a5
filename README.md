# cursorkit

A cursor is a position inside a sequence. You can move it forward or back,
step it by any amount, measure how far apart two cursors are, and read or
write the value under it. A pair of cursors, `first` and `last`, marks the
half-open range `[first, last)`.

## Capabilities

`cursorkit.traversal` describes what a cursor can do:

- `Traversal` is an ordered enum: `INCREMENTABLE`, `SINGLE_PASS`, `FORWARD`,
  `BIDIRECTIONAL`, `RANDOM_ACCESS`. Each level supports the movements of
  the levels below it.
- `Access` is a flag set: `READABLE`, `WRITABLE`, `SWAPPABLE`, `LVALUE`,
  plus the combinations `READABLE_WRITABLE`, `READABLE_LVALUE` and
  `WRITABLE_LVALUE`.
- `minimum_category(first, second)` returns the weaker of two traversals
  and raises `TypeError` for anything that is not a `Traversal`.
- `has_access(access, required)` tells whether every flag in `required` is
  granted.
- `is_readable_iterator(cursor)` judges an object by its `access` attribute
  when it has one, and otherwise treats any Python iterator as readable.

## Cursors

`cursorkit.cursor` holds the base class and a cursor over Python sequences.

- `Cursor` declares `traversal` and `access` and the primitives
  `dereference`, `assign`, `increment`, `decrement`, `advance`,
  `distance_to`, `equal` and `copy`. Movement methods return the cursor so
  calls chain. On top of them it provides `==`/`!=`, `+ n`, `n +`, `- n`,
  `cursor - cursor` (a distance), `+=`, `-=`, subscripting `c[n]` for read
  and write, and a `value` property. Ordering with `<`, `<=`, `>`, `>=` is
  only allowed for random-access cursors; otherwise it raises `TypeError`.
- `SequenceCursor(sequence, index=0)` is a random-access, readable and
  writable cursor over any indexable sequence. Reading or writing outside
  the sequence raises `IndexError`; measuring between cursors over
  different sequences raises `ValueError`.
- `iterate(first, last)` yields the values in `[first, last)`.
- `distance(first, last)` returns the number of positions between them.
- `iter_swap(a, b)` exchanges the values under two cursors.

## Adaptors

- `cursorkit.counting`: `CountingCursor(start=0, traversal=None)` and
  `make_counting_iterator(start)`. The value at each position is the
  counter itself. A numeric start gives random access; a cursor start takes
  that cursor's traversal and yields copies of it. The values are
  read-only.
- `cursorkit.filter`: `FilterCursor(predicate, base, end=None)` and
  `make_filter_iterator(predicate, base, end=None)`. Skips the elements of
  `[base, end)` the predicate rejects. A `None` predicate keeps truthy
  elements; a `None` end leaves the range unbounded. Random access is
  reduced to bidirectional traversal.
- `cursorkit.indirect`: `IndirectCursor(base)` and
  `make_indirect_iterator(base)`. The base range holds pointers, either
  `Ref` cells (a mutable box with `get` and `set`) or other cursors, and
  the indirect cursor reads and writes what they point at.
  `indirect_reference(pointer)` performs that single dereference.
- `cursorkit.zip`: `ZipCursor(cursors)` and `make_zip_iterator(cursors)`.
  Moves several cursors in lockstep and reads them as a tuple. Its
  traversal is the weakest among the members, and distances are measured
  with the first member. An empty list raises `ValueError`.
- `cursorkit.permutation`: `PermutationCursor(elements, indices)` and
  `make_permutation_iterator(elements, indices)`. Reads
  `elements[index]` for each index under the index cursor and moves as the
  index cursor moves. Plain sequences are accepted for either argument and
  taken from their first position.

## Example

```python
from cursorkit.cursor import SequenceCursor, iterate
from cursorkit.zip import make_zip_iterator

numbers = [42, 72]
words = ["kokoro", "pyonpyon"]
first = make_zip_iterator([SequenceCursor(numbers, 0), SequenceCursor(words, 0)])
last = make_zip_iterator([SequenceCursor(numbers, 2), SequenceCursor(words, 2)])
print(list(iterate(first, last)))   # [(42, 'kokoro'), (72, 'pyonpyon')]
```

## Conformance checks

`cursorkit.conformance` exercises a cursor against the behaviour its
traversal and access promise, and raises `ConformanceError` (a subclass of
`AssertionError`) when it falls short. The checks are:
`check_trivial_iterator`, `check_mutable_trivial_iterator`,
`check_input_iterator`, `check_forward_iterator`,
`check_bidirectional_iterator`, `check_random_access_iterator`,
`check_const_nonconst_iterator`, `check_readable_iterator`,
`check_writable_iterator`, `check_swappable_iterator`,
`check_constant_lvalue_iterator`, `check_non_const_lvalue_iterator`,
`check_forward_readable_iterator`, `check_forward_swappable_iterator`,
`check_bidirectional_readable_iterator` and
`check_random_access_readable_iterator`. `DummyT` is a small value type
for feeding them.

These checks run at runtime on actual cursors; the package has no way to
verify a cursor class without exercising it.

## Demo

```
cursorkit-permutation-demo
```

This prints a ten-element range, a reversed four-index reindexing scheme,
and the permuted range walked forwards, at even positions, backwards and
backwards with a stride of two.