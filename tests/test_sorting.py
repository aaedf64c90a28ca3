import random

import pytest

from filevault.models import FileRecord
from filevault.sorting import (
    compare_file_name,
    compare_file_size,
    quicksort,
    sort_by_name,
    sort_by_size,
    to_lowercase,
)


def _int_compare(a, b):
    return (a > b) - (a < b)


@pytest.mark.parametrize("seed", range(5))
def test_quicksort_orders_integers(seed):
    rng = random.Random(seed)
    values = [rng.randint(-50, 50) for _ in range(40)]
    assert quicksort(values, _int_compare) == sorted(values)


def test_quicksort_does_not_modify_input():
    values = [3, 1, 2]
    quicksort(values, _int_compare)
    assert values == [3, 1, 2]


def test_quicksort_empty_and_single():
    assert quicksort([], _int_compare) == []
    assert quicksort([7], _int_compare) == [7]


def test_quicksort_handles_long_sorted_input():
    values = list(range(3000))
    assert quicksort(values, _int_compare) == values


def test_to_lowercase_only_ascii_letters():
    assert to_lowercase("ABC def-XYZ") == "abc def-xyz"


def test_compare_file_name_ignores_case():
    assert compare_file_name(FileRecord("Report", "txt"), FileRecord("report", "bmp")) == 0
    assert compare_file_name(FileRecord("apple", "txt"), FileRecord("Banana", "txt")) < 0
    assert compare_file_name(FileRecord("Zeta", "txt"), FileRecord("alpha", "txt")) > 0


def test_compare_file_size_larger_first():
    small = FileRecord("a", "txt", 10)
    big = FileRecord("b", "txt", 20)
    assert compare_file_size(small, big) == 1
    assert compare_file_size(big, small) == -1
    assert compare_file_size(small, FileRecord("c", "txt", 10)) == 0


def test_sort_by_name():
    files = [FileRecord("gamma", "txt"), FileRecord("Alpha", "txt"), FileRecord("beta", "bmp")]
    assert [f.name for f in sort_by_name(files)] == ["Alpha", "beta", "gamma"]


def test_sort_by_size_descending():
    files = [FileRecord(str(size), "bin", size) for size in (5, 100, 42, 0, 7)]
    sizes = [f.file_size for f in sort_by_size(files)]
    assert sizes == sorted(sizes, reverse=True)
    assert sorted(sizes) == [0, 5, 7, 42, 100]