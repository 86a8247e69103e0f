import random

import pytest

from sortlab.heap import MaxHeap


def _drain(heap):
    out = []
    while not heap.is_empty():
        out.append(heap.extract_max())
    return out


def test_insert_then_extract_gives_descending_order():
    rng = random.Random(7)
    values = [rng.randrange(100) for _ in range(50)]
    heap = MaxHeap(len(values))
    for v in values:
        heap.insert(v)
    assert len(heap) == len(values)
    assert _drain(heap) == sorted(values, reverse=True)


def test_heapify_extracts_in_descending_order():
    rng = random.Random(3)
    values = [rng.randrange(1000) for _ in range(200)]
    heap = MaxHeap.heapify(values)
    assert len(heap) == 200
    assert _drain(heap) == sorted(values, reverse=True)


def test_heapify_does_not_modify_input():
    values = [5, 1, 9, 3]
    MaxHeap.heapify(values)
    assert values == [5, 1, 9, 3]


def test_heapify_is_full():
    heap = MaxHeap.heapify([1, 2, 3])
    with pytest.raises(IndexError):
        heap.insert(4)


def test_is_empty_and_len():
    heap = MaxHeap(3)
    assert heap.is_empty()
    assert len(heap) == 0
    heap.insert(4)
    assert not heap.is_empty()
    assert len(heap) == 1
    assert heap.extract_max() == 4
    assert heap.is_empty()


def test_insert_beyond_capacity_raises():
    heap = MaxHeap(2)
    heap.insert(1)
    heap.insert(2)
    with pytest.raises(IndexError):
        heap.insert(3)


def test_extract_from_empty_raises():
    with pytest.raises(IndexError):
        MaxHeap(5).extract_max()


def test_negative_capacity_raises():
    with pytest.raises(ValueError):
        MaxHeap(-1)


def test_extract_max_returns_maximum_each_time():
    heap = MaxHeap(10)
    for v in [4, 8, 1, 8, 3]:
        heap.insert(v)
    assert heap.extract_max() == 8
    assert heap.extract_max() == 8
    assert heap.extract_max() == 4


def test_render_single_item():
    heap = MaxHeap(1)
    heap.insert(5)
    assert heap.render() == "The max heap size is: 1\nData in the max heap: 5 \n\n5 \n"


def test_render_three_items():
    heap = MaxHeap(3)
    for v in (1, 2, 3):
        heap.insert(v)
    lines = heap.render().split("\n")
    assert lines[0] == "The max heap size is: 3"
    assert lines[1] == "Data in the max heap: 3 1 2 "
    assert lines[3:6] == ["  3  ", " / \\ ", "1   2"]


def test_render_lines_have_equal_width():
    rng = random.Random(11)
    heap = MaxHeap(20)
    for _ in range(20):
        heap.insert(rng.randrange(100))
    tree = heap.render().split("\n")[3:-1]
    assert len({len(line) for line in tree}) == 1


def test_render_empty_heap_has_only_header():
    text = MaxHeap(4).render()
    assert text.startswith("The max heap size is: 0\n")
    assert text.count("\n") == 3


def test_render_rejects_non_integers():
    heap = MaxHeap(2)
    heap.insert(1.5)
    with pytest.raises(TypeError):
        heap.render()


def test_render_rejects_out_of_range_items():
    heap = MaxHeap(2)
    heap.insert(100)
    with pytest.raises(ValueError):
        heap.render()


def test_render_rejects_large_heaps():
    heap = MaxHeap.heapify([1] * 100)
    with pytest.raises(ValueError):
        heap.render()