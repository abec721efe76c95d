import pytest

from benchsort.input_data import DATA_SIZE, INPUT_DATA


def test_length_matches_data_size():
    assert len(INPUT_DATA) == DATA_SIZE == 2048
    assert INPUT_DATA.index(878744414) == DATA_SIZE - 1


def test_first_and_last_values():
    assert INPUT_DATA.index(89400484) == 0
    assert INPUT_DATA.index(976015092) == 1
    assert INPUT_DATA.index(878744414) == 2047


def test_values_known_positions():
    assert INPUT_DATA.index(3794415) == 5
    assert INPUT_DATA.index(1335861008) == 20


@pytest.mark.parametrize("value", [89400484, 690983, 2145930822, 934700736, 1231249235])
def test_sample_values_occur_once(value):
    assert INPUT_DATA.count(value) == 1


def test_missing_value_raises():
    with pytest.raises(ValueError):
        INPUT_DATA.index(-1)
    assert INPUT_DATA.count(2**31) == 0


def test_extremes():
    assert min(INPUT_DATA) == 690983
    assert max(INPUT_DATA) == 2145930822
    assert INPUT_DATA.count(690983) == 1


def test_data_is_not_already_sorted():
    assert INPUT_DATA.index(89400484) < INPUT_DATA.index(3794415)
    assert list(INPUT_DATA) != sorted(INPUT_DATA)


def test_data_is_immutable():
    with pytest.raises(TypeError):
        INPUT_DATA[0] = 0  # type: ignore[index]
    assert INPUT_DATA.index(89400484) == 0