import random

import pytest

from algorithmics.sorting import (
    bubble_sort,
    count_inversions,
    dutch_flag_sort,
    insertion_sort,
    lomuto_quick_sort,
    merge_sort,
    quick_sort,
    selection_sort,
)

SOURCE_ARRAYS = [
    [9, 4, 6, 2, 45, 23, 90, 7],
    [45, 67, 72, 20, 89, 12],
    [34, 67, 12, 89, 32, 49, 88, 17, 44],
    [5, 4, 3, 6, 1, 2, 7],
]


@pytest.mark.parametrize("data", SOURCE_ARRAYS)
def test_sorts_source_arrays(data):
    expected = sorted(data)
    assert bubble_sort(data) == expected
    assert insertion_sort(data) == expected
    assert selection_sort(data) == expected
    assert merge_sort(data) == expected
    assert quick_sort(data) == expected
    assert lomuto_quick_sort(data) == expected


def test_sorts_random_data_with_duplicates():
    rng = random.Random(1234)
    for _ in range(30):
        data = [rng.randint(-20, 20) for _ in range(rng.randint(0, 40))]
        expected = sorted(data)
        assert bubble_sort(data) == expected
        assert insertion_sort(data) == expected
        assert selection_sort(data) == expected
        assert merge_sort(data) == expected
        assert quick_sort(data) == expected
        assert lomuto_quick_sort(data) == expected


@pytest.mark.parametrize("data", [[], [3], [2, 2, 2]])
def test_sorts_edge_cases(data):
    assert bubble_sort(data) == data
    assert insertion_sort(data) == data
    assert selection_sort(data) == data
    assert merge_sort(data) == data
    assert quick_sort(data) == data
    assert lomuto_quick_sort(data) == data


def test_sorts_do_not_mutate_input():
    data = [3, 1, 2]
    assert bubble_sort(data) == [1, 2, 3]
    assert insertion_sort(data) == [1, 2, 3]
    assert selection_sort(data) == [1, 2, 3]
    assert merge_sort(data) == [1, 2, 3]
    assert quick_sort(data) == [1, 2, 3]
    assert lomuto_quick_sort(data) == [1, 2, 3]
    assert data == [3, 1, 2]


def test_quick_sorts_handle_long_sorted_input():
    data = list(range(3000))
    assert quick_sort(data) == data
    assert quick_sort(reversed(data)) == data
    assert lomuto_quick_sort(data) == data
    assert lomuto_quick_sort(reversed(data)) == data


def test_merge_sort_is_stable():
    pairs = [(1, "a"), (0, "b"), (1, "c"), (0, "d")]

    class Keyed:
        def __init__(self, pair):
            self.pair = pair

        def __le__(self, other):
            return self.pair[0] <= other.pair[0]

    result = [k.pair for k in merge_sort(Keyed(p) for p in pairs)]
    assert result == sorted(pairs, key=lambda p: p[0])


def test_dutch_flag_sort_source_array():
    data = [2, 1, 0, 0, 2, 1, 2, 0, 1, 1, 0, 2, 0, 2]
    assert dutch_flag_sort(data) == sorted(data)


def test_dutch_flag_sort_random():
    rng = random.Random(7)
    data = [rng.choice([0, 1, 2]) for _ in range(200)]
    assert dutch_flag_sort(data) == sorted(data)
    assert dutch_flag_sort([]) == []


def test_count_inversions_source_example():
    assert count_inversions([5, 4, 3, 6, 1, 2, 7]) == 11


def test_count_inversions_sorted_is_zero():
    assert count_inversions(range(50)) == 0
    assert count_inversions([4, 4, 4]) == 0


def test_count_inversions_reversed_counts_every_pair():
    n = 40
    assert count_inversions(range(n, 0, -1)) == n * (n - 1) // 2


def test_count_inversions_does_not_mutate():
    data = [3, 2, 1]
    assert count_inversions(data) == 3
    assert data == [3, 2, 1]