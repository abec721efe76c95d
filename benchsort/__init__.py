"""Quicksort and radix sort over a fixed integer dataset with its sorted reference."""

__version__ = "0.1.0"
__all__ = ["input_data", "verify_data", "quicksort", "radixsort"]