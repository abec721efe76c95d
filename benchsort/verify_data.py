"""Reference result: the benchmark input set in ascending order."""

from benchsort.input_data import DATA_SIZE, INPUT_DATA

__all__ = ["DATA_SIZE", "VERIFY_DATA"]

VERIFY_DATA: tuple[int, ...] = tuple(sorted(INPUT_DATA))