import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.sorting import (
    bubble_sort,
    heap_sort,
    insertion_sort,
    merge_sort,
    quick_sort,
    radix_sort,
)

INTS = st.lists(st.integers(min_value=-1000, max_value=1000), max_size=60)
WORDS = ["pear", "apple", "fig", "apple"]
SORTED_WORDS = ["apple", "apple", "fig", "pear"]


@pytest.mark.parametrize(
    "sort, data, expected",
    [
        (bubble_sort, [5, 1, 4, 2, 8], [1, 2, 4, 5, 8]),
        (heap_sort, [4, 10, 3, 5, 1], [1, 3, 4, 5, 10]),
        (insertion_sort, [9, 3, 1, 5, 4], [1, 3, 4, 5, 9]),
        (merge_sort, [10, 7, 8, 9, 1, 5], [1, 5, 7, 8, 9, 10]),
        (quick_sort, [10, 80, 30, 90, 40, 50, 70], [10, 30, 40, 50, 70, 80, 90]),
        (radix_sort, [170, 45, 75, 90, 802, 24, 2, 66], [2, 24, 45, 66, 75, 90, 170, 802]),
    ],
)
def test_source_examples(sort, data, expected):
    sort(data)
    assert data == expected


def test_bubble_sort_empty_and_single():
    empty, single = [], [7]
    bubble_sort(empty)
    bubble_sort(single)
    assert empty == []
    assert single == [7]


def test_heap_sort_empty_and_single():
    empty, single = [], [7]
    heap_sort(empty)
    heap_sort(single)
    assert empty == []
    assert single == [7]


def test_insertion_sort_empty_and_single():
    empty, single = [], [7]
    insertion_sort(empty)
    insertion_sort(single)
    assert empty == []
    assert single == [7]


def test_merge_sort_empty_and_single():
    empty, single = [], [7]
    merge_sort(empty)
    merge_sort(single)
    assert empty == []
    assert single == [7]


def test_quick_sort_empty_and_single():
    empty, single = [], [7]
    quick_sort(empty)
    quick_sort(single)
    assert empty == []
    assert single == [7]


def test_radix_sort_empty_and_single():
    empty, single = [], [7]
    radix_sort(empty)
    radix_sort(single)
    assert empty == []
    assert single == [7]


@given(data=INTS)
def test_bubble_sort_matches_sorted(data):
    work = list(data)
    bubble_sort(work)
    assert work == sorted(data)


@given(data=INTS)
def test_heap_sort_matches_sorted(data):
    work = list(data)
    heap_sort(work)
    assert work == sorted(data)


@given(data=INTS)
def test_insertion_sort_matches_sorted(data):
    work = list(data)
    insertion_sort(work)
    assert work == sorted(data)


@given(data=INTS)
def test_merge_sort_matches_sorted(data):
    work = list(data)
    merge_sort(work)
    assert work == sorted(data)


@given(data=INTS)
def test_quick_sort_matches_sorted(data):
    work = list(data)
    quick_sort(work)
    assert work == sorted(data)


def test_sorts_strings():
    words = list(WORDS)
    bubble_sort(words)
    assert words == SORTED_WORDS

    words = list(WORDS)
    heap_sort(words)
    assert words == SORTED_WORDS

    words = list(WORDS)
    insertion_sort(words)
    assert words == SORTED_WORDS

    words = list(WORDS)
    merge_sort(words)
    assert words == SORTED_WORDS

    words = list(WORDS)
    quick_sort(words)
    assert words == SORTED_WORDS


@given(data=st.lists(st.integers(min_value=0, max_value=10**6), max_size=60))
def test_radix_matches_sorted(data):
    expected = sorted(data)
    work = list(data)
    radix_sort(work)
    assert work == expected


def test_radix_rejects_negative():
    with pytest.raises(ValueError):
        radix_sort([3, -1, 2])


def test_radix_all_zeros():
    data = [0, 0, 0]
    radix_sort(data)
    assert data == [0, 0, 0]


def test_quick_sort_large_sorted_input_has_no_recursion_problem():
    data = list(range(3000, 0, -1))
    quick_sort(data)
    assert data == list(range(1, 3001))