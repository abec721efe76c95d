# benchsort

Two sorting algorithms and one fixed dataset of 2048 integers to run them on.

- `benchsort.quicksort`: an iterative quicksort. It partitions around a
  median of three and keeps an explicit stack of pending ranges. It always
  works on the smaller side first. Ranges under ten elements
  (`INSERTION_THRESHOLD`) go to insertion sort.
- `benchsort.radixsort`: an LSD radix sort for unsigned 32-bit values. It
  makes four passes and works on one 8-bit digit per pass, using 256 buckets
  (`LOG_BASE`, `BASE`, `WORD_BITS`).
- `benchsort.input_data`: `INPUT_DATA` is a tuple of 2048 unsorted integers.
  `DATA_SIZE` is its length.
- `benchsort.verify_data`: `VERIFY_DATA` is the same values in ascending
  order. Use it as the reference result.

## Install

```
pip install .
```

For the tests:

```
pip install .[test]
pytest
```

## Library use

```python
from benchsort import quicksort, radixsort
from benchsort.input_data import INPUT_DATA
from benchsort.verify_data import VERIFY_DATA

data = list(INPUT_DATA)
quicksort.sort(data)            # sorts the list in place and returns it
assert data == list(VERIFY_DATA)

radixsort.sort([7, 2, 2, 0])    # -> [0, 2, 2, 7]
```

Each sort function works in place and returns the sequence it was given.

`quicksort.insertion_sort` and `quicksort.selection_sort` also sort in
place. Use them only for small inputs.

`radixsort.sort` checks its input before it changes anything. It raises
`ValueError` if any value falls outside `0 <= v < 2**32`.

## What it does not do

The package has no command-line program. It also has no timing or benchmark
runner. To time a sort or check it against `VERIFY_DATA`, write your own
code around the functions above.