import pytest
from hypothesis import given
from hypothesis import strategies as st

from benchsort.input_data import INPUT_DATA
from benchsort.quicksort import insertion_sort, selection_sort, sort
from benchsort.verify_data import VERIFY_DATA

INT32 = st.integers(min_value=-(2**31), max_value=2**31 - 1)


def test_insertion_sort_benchmark_dataset():
    assert insertion_sort(list(INPUT_DATA)) == list(VERIFY_DATA)


def test_selection_sort_benchmark_dataset():
    assert selection_sort(list(INPUT_DATA)) == list(VERIFY_DATA)


def test_sort_benchmark_dataset():
    assert sort(list(INPUT_DATA)) == list(VERIFY_DATA)


def test_sort_is_in_place_and_returns_same_object():
    data = list(INPUT_DATA)
    result = sort(data)
    assert result is data
    assert data == list(VERIFY_DATA)


def test_empty_and_single():
    assert insertion_sort([]) == []
    assert insertion_sort([7]) == [7]
    assert selection_sort([]) == []
    assert selection_sort([7]) == [7]
    assert sort([]) == []
    assert sort([7]) == [7]


@given(st.lists(INT32, max_size=300))
def test_insertion_sort_matches_builtin_sorted(values):
    assert insertion_sort(list(values)) == sorted(values)


@given(st.lists(INT32, max_size=120))
def test_selection_sort_matches_builtin_sorted(values):
    assert selection_sort(list(values)) == sorted(values)


@given(st.lists(INT32, max_size=300))
def test_sort_matches_builtin_sorted(values):
    assert sort(list(values)) == sorted(values)


@given(st.lists(st.integers(min_value=0, max_value=5), min_size=11, max_size=400))
def test_many_duplicates(values):
    assert sort(list(values)) == sorted(values)


@pytest.mark.parametrize("size", [9, 10, 11, 12, 50, 257])
def test_reversed_and_sorted_inputs(size):
    ascending = list(range(size))
    assert sort(list(reversed(ascending))) == ascending
    assert sort(list(ascending)) == ascending


def test_all_equal_large():
    data = [42] * 500
    assert sort(data) == [42] * 500


def test_sorts_other_comparables():
    words = ["pear", "apple", "fig", "kiwi", "banana", "cherry", "date",
             "grape", "lemon", "mango", "olive", "plum", "quince"]
    assert sort(list(words)) == sorted(words)