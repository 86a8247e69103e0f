import random

import pytest

from sortlab.benchmark import Dataset, compare, main, make_dataset


def test_random_dataset_values_in_range():
    data = make_dataset("random", 500, random.Random(1))
    assert len(data) == 500
    assert all(0 <= x <= 500 for x in data)


def test_nearly_ordered_dataset_is_permutation():
    data = make_dataset(Dataset.NEARLY_ORDERED, 300, random.Random(2))
    assert sorted(data) == list(range(300))


def test_duplicates_dataset_values_in_small_range():
    data = make_dataset("duplicates", 400, random.Random(3))
    assert len(data) == 400
    assert set(data) <= set(range(11))


def test_empty_nearly_ordered_dataset():
    assert make_dataset("nearly-ordered", 0, random.Random(0)) == []


def test_dataset_is_reproducible_with_seed():
    a = make_dataset("random", 100, random.Random(42))
    b = make_dataset("random", 100, random.Random(42))
    assert a == b


def test_unknown_kind_raises():
    with pytest.raises(ValueError):
        make_dataset("sorted-backwards", 10, random.Random(0))


def test_compare_returns_timings_in_order_and_keeps_data():
    data = make_dataset("random", 200, random.Random(5))
    original = list(data)
    names = ["Merge Sort", "Quick Sort 3 Ways", "Heap Sort 3 Optimize"]
    timings = compare(names, data)
    assert [t.name for t in timings] == names
    assert all(t.seconds >= 0 for t in timings)
    assert data == original


def test_compare_every_sort_on_duplicates():
    data = make_dataset("duplicates", 150, random.Random(6))
    names = [
        "Selection Sort",
        "Insertion Sort Swapping",
        "Insertion Sort",
        "Merge Sort",
        "Merge Sort Bottom Up",
        "Quick Sort",
        "Quick Sort 2 Ways",
        "Quick Sort 3 Ways",
        "Heap Sort 1",
        "Heap Sort 2 Heapify",
        "Heap Sort 3 Optimize",
    ]
    assert len(compare(names, data)) == len(names)


def test_compare_unknown_name_raises():
    with pytest.raises(ValueError):
        compare(["Bogo Sort"], [3, 2, 1])


def test_timing_string_format():
    (timing,) = compare(["Merge Sort"], [2, 1])
    assert str(timing).startswith("Merge Sort : ")
    assert str(timing).endswith(" s")


def test_main_prints_headers_for_all_kinds(capsys):
    assert main(["--size", "200", "--seed", "7"]) == 0
    out = capsys.readouterr().out
    assert "Test for random array, size = 200, random range [0, 200]" in out
    assert "Test for nearly ordered array, size = 200, swap time = 100" in out
    assert "Test for random array, size = 200, random range [0,10]" in out
    assert "Heap Sort 3 Optimize : " in out


def test_main_skips_one_way_quick_sort_on_duplicates(capsys):
    assert main(["--size", "100", "--seed", "8", "--kind", "duplicates"]) == 0
    out = capsys.readouterr().out
    assert "Quick Sort : " not in out
    assert "Quick Sort 2 Ways : " in out


def test_main_heap_demo(capsys):
    assert main(["--heap-demo", "--seed", "9"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("The max heap size is: 20\n")
    data_line = out.splitlines()[1]
    values = [int(v) for v in data_line.removeprefix("Data in the max heap: ").split()]
    assert len(values) == 20
    assert values[0] == max(values)


def test_main_rejects_negative_size():
    with pytest.raises(SystemExit):
        main(["--size", "-1"])