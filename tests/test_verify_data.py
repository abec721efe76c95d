from collections import Counter
from itertools import pairwise

import pytest

from benchsort.input_data import INPUT_DATA
from benchsort.verify_data import DATA_SIZE, VERIFY_DATA


def test_length_matches_data_size():
    assert len(VERIFY_DATA) == DATA_SIZE == len(INPUT_DATA)
    assert VERIFY_DATA.index(2145930822) == DATA_SIZE - 1


def test_reference_is_non_decreasing():
    assert all(a <= b for a, b in pairwise(VERIFY_DATA))
    assert VERIFY_DATA.index(900852) == 1


def test_reference_is_permutation_of_input():
    assert Counter(VERIFY_DATA) == Counter(INPUT_DATA)
    assert VERIFY_DATA.count(89400484) == INPUT_DATA.count(89400484) == 1


@pytest.mark.parametrize(
    ("position", "value"),
    [
        (0, 690983),
        (1, 900852),
        (2, 2196420),
        (3, 2530146),
        (4, 3159407),
        (2043, 2143324534),
        (2044, 2143343312),
        (2045, 2143968639),
        (2046, 2145073408),
        (2047, 2145930822),
    ],
)
def test_reference_positions_pinned_by_dataset(position, value):
    assert VERIFY_DATA.index(value) == position


def test_extremes_pinned_by_dataset():
    assert VERIFY_DATA.index(690983) == 0
    assert VERIFY_DATA.index(2145930822) == 2047
    assert VERIFY_DATA[0] == min(INPUT_DATA)
    assert VERIFY_DATA[-1] == max(INPUT_DATA)


@pytest.mark.parametrize("value", [89400484, 976015092, 878744414, 934700736])
def test_input_values_present(value):
    assert VERIFY_DATA.count(value) == 1


def test_missing_value_raises():
    with pytest.raises(ValueError):
        VERIFY_DATA.index(0)


def test_reference_is_immutable():
    with pytest.raises(TypeError):
        VERIFY_DATA[0] = 0  # type: ignore[index]
    assert VERIFY_DATA.index(690983) == 0