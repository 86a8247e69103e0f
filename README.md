# sortlab

A small library of classic sorting algorithms and heap structures, together
with helpers to generate test data and time the algorithms against each other.

## What it contains

- `sortlab.elementary`: `selection_sort`, `insertion_sort_swapping`, and
  `insertion_sort(arr, lo=0, hi=None)`, which sorts the inclusive range
  `arr[lo..hi]` (the whole sequence by default).
- `sortlab.merge`: top-down `merge_sort` (insertion sort for small ranges,
  skipping merges of runs that are already in order), `merge_sort_bottom_up`,
  and `merge(arr, lo, mid, hi)` for merging two adjacent sorted runs.
- `sortlab.quick`: `quick_sort` (one-way partition around a random pivot),
  `quick_sort_2ways` (two-way partition, which stays balanced with many equal
  keys) and `quick_sort_3ways` (three-way partition), plus the `partition` and
  `partition_2ways` steps on their own.
- `sortlab.heap`: `MaxHeap(capacity)`, with `insert`, `extract_max`,
  `is_empty`, `len()`, the `MaxHeap.heapify(items)` constructor, and `render()`,
  which draws a heap of fewer than 100 integers in `[0, 100)` as a text tree.
- `sortlab.heapsort`: `heap_sort_insert`, `heap_sort_heapify`, the in-place
  `heap_sort`, and its `sift_down(arr, n, k)` step.
- `sortlab.index_heap`: `IndexMaxHeap(capacity)`, a max-heap over items stored
  at indices `0 .. capacity-1`, with `insert(index, item)`, `extract_max`,
  `extract_max_index`, `contains`, `get_item` and `change_item`.
- `sortlab.helpers`: `generate_random_array`, `generate_nearly_ordered_array`,
  `is_sorted`, `format_array`, and `test_sort(name, sort, arr)`, which sorts
  `arr`, raises `NotSortedError` if the result is out of order, and returns a
  `SortTiming` with the CPU time taken.
- `sortlab.student`: `Student(name, score)`, a record ordered by score.
- `sortlab.benchmark`: `make_dataset(kind, n, rng)`, `compare(names, data)`
  and the `sortlab` command.

All sorts work in place on a mutable sequence of mutually comparable items
and return `None`. Functions that use randomness take an optional `rng`
argument (a `random.Random`), so results can be reproduced.

Heaps raise `IndexError` when inserting into a full heap or extracting from an
empty one; `IndexMaxHeap.get_item` and `change_item` raise `KeyError` for an
index that holds no item.

## Example

```python
import random
from sortlab.quick import quick_sort_3ways
from sortlab.helpers import generate_random_array, is_sorted

rng = random.Random(42)
data = generate_random_array(1000, 0, 10, rng)
quick_sort_3ways(data, rng)
assert is_sorted(data)
```

```python
from sortlab.heap import MaxHeap

heap = MaxHeap.heapify([3, 9, 1, 7])
print(heap.extract_max())  # 9
```

```python
from sortlab.benchmark import compare, make_dataset

data = make_dataset("duplicates", 10_000)
for timing in compare(["Merge Sort", "Quick Sort 3 Ways"], data):
    print(timing)  # e.g. "Merge Sort : 0.03 s"
```

`compare` accepts these names: `Selection Sort`, `Insertion Sort Swapping`,
`Insertion Sort`, `Merge Sort`, `Merge Sort Bottom Up`, `Quick Sort`,
`Quick Sort 2 Ways`, `Quick Sort 3 Ways`, `Heap Sort 1`,
`Heap Sort 2 Heapify` and `Heap Sort 3 Optimize`. Each sort runs on its own
copy of the data.

## Comparing algorithms

Installing the package provides a `sortlab` command. For each data set it
prints a heading and the time taken by merge sort, the three quick sorts and
the three heap sorts (one-way quick sort is left out on the data set full of
duplicates):

```
sortlab
```

Options:

- `-n`, `--size`: number of items per data set (default 100000).
- `--seed`: seed for the random generator.
- `--kind`: `random` (values in `[0, n]`), `nearly-ordered` (`0 .. n-1` with
  100 random swaps) or `duplicates` (values in `[0, 10]`); may be repeated.
  All three run by default.
- `--heap-demo`: instead of timing, draw a max heap of 20 random numbers.

The quadratic sorts are not part of the command's line-up; time them with
`compare` on small data sets.

## Tests

```
pip install -e .[test]
pytest
```