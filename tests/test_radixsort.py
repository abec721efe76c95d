import pytest
from hypothesis import given
from hypothesis import strategies as st

from benchsort.input_data import INPUT_DATA
from benchsort.radixsort import sort
from benchsort.verify_data import VERIFY_DATA


def test_benchmark_dataset_matches_reference():
    data = list(INPUT_DATA)
    result = sort(data)
    assert result is data
    assert data == list(VERIFY_DATA)


def test_empty_and_single():
    assert sort([]) == []
    assert sort([5]) == [5]


def test_extreme_values():
    top = 2**32 - 1
    assert sort([top, 0, 1, top, 256]) == [0, 1, 256, top, top]


@pytest.mark.parametrize("bad", [-1, 2**32])
def test_out_of_range_rejected(bad):
    with pytest.raises(ValueError):
        sort([1, bad, 2])


def test_rejected_input_left_untouched():
    data = [3, -1, 2]
    with pytest.raises(ValueError):
        sort(data)
    assert data == [3, -1, 2]


@given(st.lists(st.integers(min_value=0, max_value=2**32 - 1), max_size=300))
def test_matches_builtin_sorted(values):
    expected = sorted(values)
    assert sort(list(values)) == expected


@given(st.lists(st.integers(min_value=0, max_value=3).map(lambda k: k << 24), max_size=100))
def test_high_byte_only_values(values):
    assert sort(list(values)) == sorted(values)


@pytest.mark.parametrize("size", [1, 2, 3, 4, 5, 7, 8, 9])
def test_small_sizes_reversed(size):
    ascending = [k * 1000003 for k in range(size)]
    assert sort(list(reversed(ascending))) == ascending