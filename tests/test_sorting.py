from hypothesis import given
from hypothesis import strategies as st

from algorithmia.sorting import bubble_sort, heap_sort, merge_sort, quick_sort

SAMPLE = [64, 34, 25, 12, 22, 11, 90]
SAMPLE_SORTED = [11, 12, 22, 25, 34, 64, 90]


def test_sample_array():
    assert bubble_sort(SAMPLE) == SAMPLE_SORTED
    assert heap_sort(SAMPLE) == SAMPLE_SORTED
    assert merge_sort(SAMPLE) == SAMPLE_SORTED
    assert quick_sort(SAMPLE) == SAMPLE_SORTED


def test_input_not_modified():
    data = list(SAMPLE)
    bubble_sort(data)
    heap_sort(data)
    merge_sort(data)
    quick_sort(data)
    assert data == SAMPLE


def test_empty_and_single():
    assert bubble_sort([]) == []
    assert heap_sort([]) == []
    assert merge_sort([]) == []
    assert quick_sort([]) == []
    assert bubble_sort([7]) == [7]
    assert heap_sort([7]) == [7]
    assert merge_sort([7]) == [7]
    assert quick_sort([7]) == [7]


def test_duplicates_and_negatives():
    data = [3, -1, 3, 0, -1, 3, 2, 2]
    expected = [-1, -1, 0, 2, 2, 3, 3, 3]
    assert bubble_sort(data) == expected
    assert heap_sort(data) == expected
    assert merge_sort(data) == expected
    assert quick_sort(data) == expected


def test_already_sorted_and_reversed():
    data = list(range(50))
    assert bubble_sort(data) == data
    assert heap_sort(data) == data
    assert merge_sort(data) == data
    assert quick_sort(data) == data
    assert bubble_sort(reversed(data)) == data
    assert heap_sort(reversed(data)) == data
    assert merge_sort(reversed(data)) == data
    assert quick_sort(reversed(data)) == data


def test_accepts_generator():
    expected = sorted(x % 5 for x in range(20))
    assert bubble_sort(x % 5 for x in range(20)) == expected
    assert heap_sort(x % 5 for x in range(20)) == expected
    assert merge_sort(x % 5 for x in range(20)) == expected
    assert quick_sort(x % 5 for x in range(20)) == expected


def test_strings():
    words = ["pear", "apple", "fig", "banana"]
    expected = ["apple", "banana", "fig", "pear"]
    assert bubble_sort(words) == expected
    assert heap_sort(words) == expected
    assert merge_sort(words) == expected
    assert quick_sort(words) == expected


@given(st.lists(st.integers(min_value=-1000, max_value=1000)))
def test_matches_builtin_sorted(data):
    expected = sorted(data)
    assert bubble_sort(data) == expected
    assert heap_sort(data) == expected
    assert merge_sort(data) == expected
    assert quick_sort(data) == expected


@given(st.lists(st.integers()))
def test_all_sorts_agree(data):
    first = bubble_sort(data)
    assert heap_sort(data) == first
    assert merge_sort(data) == first
    assert quick_sort(data) == first